"""Attribute normalization pipeline.

This module composes the filter, explode, split and pivot transforms
into one all-or-nothing batch run, and wires loading and export around it.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Sequence

from core.config import AttrflatConfig
from core.logging_config import get_logger
from core.types import NormalizeOptions, Record
from core.wide_table import WideTable
from ingest.input_reader import read_records
from store.wide_export import write_wide_table
from transforms.attribute_counting import filter_non_empty
from transforms.attribute_explode import explode
from transforms.key_value_split import split_key_values
from transforms.wide_pivot import pivot_wide

_LOGGER = get_logger(__name__)


@dataclass(frozen=True)
class NormalizeResult:
    """Normalize run output.

    Attributes:
        table: Normalized wide table.
        output_path: Resolved written file path, or ``None`` when not written.
    """

    table: WideTable
    output_path: Path | None = None


def normalize(records: Sequence[Record], sort_columns: bool = True) -> WideTable:
    """Normalize attribute lists into a wide table.

    Records without attributes are dropped. The input is not mutated.

    Args:
        records: Source records.
        sort_columns: Sort columns alphabetically, else keep first-seen order.

    Returns:
        Wide table with one row per retained record.

    Raises:
        ParseError: If any attribute entry lacks a colon.
    """
    retained_records = filter_non_empty(records)
    keyed_rows = split_key_values(explode(retained_records))
    return pivot_wide(keyed_rows, sort_columns=sort_columns)


def run_normalize(options: NormalizeOptions, config: AttrflatConfig) -> NormalizeResult:
    """Load, normalize and optionally write a wide table.

    Args:
        options: Normalize request options.
        config: Runtime configuration.

    Returns:
        Wide table plus the resolved output path when one was written.

    Raises:
        AttrflatIngestError: If the source cannot be read.
        AttrflatTransformError: If normalization fails.
        AttrflatStoreError: If the output cannot be written.
    """
    records = read_records(options.source_path, config)
    table = normalize(records, sort_columns=options.sort_columns)
    output_path: Path | None = None
    if options.output_path:
        output_path = write_wide_table(table, options.output_path)
    _log_normalize_completion(options, records, table, output_path)
    return NormalizeResult(table=table, output_path=output_path)


def _log_normalize_completion(
    options: NormalizeOptions,
    records: Sequence[Record],
    table: WideTable,
    output_path: Path | None,
) -> None:
    """Log pipeline completion with contextual metadata."""
    _LOGGER.info(
        "normalize_completed",
        source_path=options.source_path,
        output_path=str(output_path) if output_path else None,
        input_count=len(records),
        output_count=len(table),
        dropped_count=len(records) - len(table),
        column_count=len(table.columns),
    )
