"""Wide table export helpers.

This module writes normalized wide tables to JSONL or Parquet.
Missing cells become JSON ``null`` and Arrow nulls respectively.
"""

from __future__ import annotations

import json
from pathlib import Path

import pyarrow as pa
import pyarrow.parquet as pq

from core.constants import RECORD_ID_COLUMN, SUPPORTED_OUTPUT_EXTENSIONS
from core.errors import AttrflatStoreError
from core.logging_config import get_logger
from core.types import CellValue, MISSING
from core.wide_table import WideTable

_LOGGER = get_logger(__name__)


def write_wide_table(table: WideTable, output_path: str) -> Path:
    """Write a wide table using the format implied by the file suffix.

    Args:
        table: Normalized wide table.
        output_path: Destination ``.jsonl`` or ``.parquet`` path.

    Returns:
        Resolved output path.

    Raises:
        AttrflatStoreError: If the suffix is unsupported or the write fails.
    """
    target_path = Path(output_path).expanduser()
    suffix = target_path.suffix.lower()
    if suffix not in SUPPORTED_OUTPUT_EXTENSIONS:
        raise AttrflatStoreError(
            f"Unsupported output format '{suffix or target_path.name}'. "
            f"Use one of {SUPPORTED_OUTPUT_EXTENSIONS}."
        )
    try:
        target_path.parent.mkdir(parents=True, exist_ok=True)
        if suffix == ".jsonl":
            target_path.write_text(wide_table_to_jsonl(table), encoding="utf-8")
        else:
            pq.write_table(wide_table_to_arrow(table), str(target_path))
    except (OSError, pa.ArrowException) as error:
        raise AttrflatStoreError(
            f"Failed to write wide table at {target_path}: {error}. "
            "Check write permissions and available disk space."
        ) from error
    _LOGGER.info(
        "wide_table_written",
        output_path=str(target_path),
        row_count=len(table),
        column_count=len(table.columns),
    )
    return target_path


def wide_table_to_jsonl(table: WideTable) -> str:
    """Render a wide table as JSONL text.

    Args:
        table: Normalized wide table.

    Returns:
        One JSON object per row, newline-terminated; empty for no rows.
    """
    lines = [json.dumps(payload) for payload in wide_table_to_payloads(table)]
    if not lines:
        return ""
    return "\n".join(lines) + "\n"


def wide_table_to_payloads(table: WideTable) -> list[dict[str, str | None]]:
    """Serialize rows into JSON-safe dictionaries.

    Args:
        table: Normalized wide table.

    Returns:
        Row payloads with ``record_id`` first, then columns in table order.

    Raises:
        AttrflatStoreError: If an attribute key collides with ``record_id``.
    """
    _check_reserved_column(table)
    payloads: list[dict[str, str | None]] = []
    for record_id in table.record_ids:
        payload: dict[str, str | None] = {RECORD_ID_COLUMN: record_id}
        for column, value in table.row(record_id).items():
            payload[column] = _to_nullable(value)
        payloads.append(payload)
    return payloads


def wide_table_to_arrow(table: WideTable) -> pa.Table:
    """Convert a wide table into an Arrow table of string columns.

    Args:
        table: Normalized wide table.

    Returns:
        Arrow table with ``record_id`` plus one column per key.

    Raises:
        AttrflatStoreError: If an attribute key collides with ``record_id``.
    """
    _check_reserved_column(table)
    arrays = {RECORD_ID_COLUMN: pa.array(list(table.record_ids), type=pa.string())}
    for column in table.columns:
        values = [_to_nullable(value) for value in table.column(column)]
        arrays[column] = pa.array(values, type=pa.string())
    return pa.table(arrays)


def _to_nullable(value: CellValue) -> str | None:
    if value is MISSING:
        return None
    return str(value)


def _check_reserved_column(table: WideTable) -> None:
    if RECORD_ID_COLUMN in table.columns:
        raise AttrflatStoreError(
            f"Attribute key '{RECORD_ID_COLUMN}' collides with the row identifier column. "
            "Rename the attribute in the source data before exporting."
        )
