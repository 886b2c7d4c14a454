"""Attrflat CLI entry points.
This module exposes commands for normalizing attribute lists and
querying the resulting wide table. It maps argparse commands onto SDK calls.
"""

from __future__ import annotations

import argparse
import logging
import sys
from dataclasses import replace
from typing import Any, Sequence

from core.config import AttrflatConfig
from core.errors import AttrflatError
from core.logging_config import configure_cli_logging
from core.types import NormalizeOptions
from ingest.pipeline import run_normalize
from store.wide_export import wide_table_to_jsonl
from store.wide_queries import format_cell, ranked_value_counts


def build_parser() -> argparse.ArgumentParser:
    """Build the top-level CLI parser.

    Returns:
        Configured argument parser.
    """
    parser = argparse.ArgumentParser(
        prog="attrflat", description="Flatten 'Key: Value' attribute lists into columns"
    )
    parser.add_argument("--id-field", help="Override ATTRFLAT_ID_FIELD for this command")
    parser.add_argument(
        "--attributes-field", help="Override ATTRFLAT_ATTRIBUTES_FIELD for this command"
    )
    parser.add_argument("--quiet", action="store_true", help="Only log warnings and errors")
    subparsers = parser.add_subparsers(dest="command", required=True)
    _add_normalize_command(subparsers)
    _add_keys_command(subparsers)
    _add_value_counts_command(subparsers)
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the Attrflat CLI.

    Args:
        argv: Optional argument vector.

    Returns:
        Process exit code.
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_cli_logging(logging.WARNING if args.quiet else logging.INFO)
    try:
        config = _build_config(args.id_field, args.attributes_field)
        if args.command == "normalize":
            return _run_normalize_command(config, args)
        if args.command == "keys":
            return _run_keys_command(config, args)
        if args.command == "value-counts":
            return _run_value_counts_command(config, args)
    except AttrflatError as error:
        print(f"error: {error}", file=sys.stderr)
        return 1
    parser.error(f"Unsupported command: {args.command}")
    return 2


def _build_config(id_field: str | None, attributes_field: str | None) -> AttrflatConfig:
    """Build config with optional field-name overrides.

    Args:
        id_field: Optional id field override.
        attributes_field: Optional attributes field override.

    Returns:
        Runtime config.
    """
    config = AttrflatConfig.from_env()
    if id_field:
        config = replace(config, id_field=id_field)
    if attributes_field:
        config = replace(config, attributes_field=attributes_field)
    return config


def _run_normalize_command(config: AttrflatConfig, args: argparse.Namespace) -> int:
    """Handle normalize command.

    Args:
        config: Runtime config.
        args: Parsed CLI args.

    Returns:
        Exit code.
    """
    options = NormalizeOptions(
        source_path=args.source,
        output_path=args.output,
        sort_columns=config.sort_columns and not args.unsorted_columns,
    )
    result = run_normalize(options, config)
    if result.output_path is not None:
        print(result.output_path)
    else:
        sys.stdout.write(wide_table_to_jsonl(result.table))
    return 0


def _run_keys_command(config: AttrflatConfig, args: argparse.Namespace) -> int:
    """Handle keys command."""
    table = run_normalize(
        NormalizeOptions(source_path=args.source, sort_columns=config.sort_columns), config
    ).table
    for column in table.columns:
        print(column)
    return 0


def _run_value_counts_command(config: AttrflatConfig, args: argparse.Namespace) -> int:
    """Handle value-counts command."""
    table = run_normalize(
        NormalizeOptions(source_path=args.source, sort_columns=config.sort_columns), config
    ).table
    for value, count in ranked_value_counts(table, args.column):
        print(f"{format_cell(value)}\t{count}")
    return 0


def _add_normalize_command(subparsers: Any) -> None:
    parser = subparsers.add_parser("normalize", help="Pivot attribute lists into a wide table")
    parser.add_argument("source", help="Source .jsonl, .json or .parquet file")
    parser.add_argument("--output", help="Optional .jsonl or .parquet output path")
    parser.add_argument(
        "--unsorted-columns",
        action="store_true",
        help="Keep columns in first-seen order instead of sorting",
    )


def _add_keys_command(subparsers: Any) -> None:
    parser = subparsers.add_parser("keys", help="List distinct attribute keys")
    parser.add_argument("source", help="Source .jsonl, .json or .parquet file")


def _add_value_counts_command(subparsers: Any) -> None:
    parser = subparsers.add_parser("value-counts", help="Count values of one attribute column")
    parser.add_argument("source", help="Source .jsonl, .json or .parquet file")
    parser.add_argument("--column", required=True, help="Attribute key to count")
