"""Long-to-wide pivot for keyed attribute rows.

Rows are grouped by record id in first-seen order. The column set is the
union of keys across all rows; absent cells are filled with ``MISSING``.
"""

from __future__ import annotations

from typing import Iterable, Sequence

from core.errors import StructuralError
from core.logging_config import get_logger
from core.types import CellValue, KeyedRow, MISSING
from core.wide_table import WideTable

_LOGGER = get_logger(__name__)


def pivot_wide(
    keyed_rows: Iterable[KeyedRow],
    sort_columns: bool = True,
    columns: Sequence[str] | None = None,
) -> WideTable:
    """Pivot keyed rows into a wide table.

    Args:
        keyed_rows: Split attribute rows.
        sort_columns: Sort columns alphabetically, else keep first-seen order.
            Ignored when ``columns`` is given.
        columns: Optional explicit column order, e.g. ``table.columns`` when
            rebuilding a table from its long form.

    Returns:
        Wide table with one row per record id.

    Raises:
        StructuralError: If a row key is not in the explicit ``columns``.
    """
    present_cells: dict[str, dict[str, str]] = {}
    seen_keys: dict[str, None] = {}
    for keyed_row in keyed_rows:
        record_cells = present_cells.setdefault(keyed_row.record_id, {})
        if keyed_row.key in record_cells:
            _LOGGER.warning(
                "duplicate_attribute_key",
                record_id=keyed_row.record_id,
                key=keyed_row.key,
                previous_value=record_cells[keyed_row.key],
                value=keyed_row.value,
            )
        # last write wins
        record_cells[keyed_row.key] = keyed_row.value
        seen_keys.setdefault(keyed_row.key, None)
    column_order = _resolve_columns(seen_keys, sort_columns, columns)
    cells = {
        record_id: _fill_row(record_cells, column_order)
        for record_id, record_cells in present_cells.items()
    }
    return WideTable(record_ids=tuple(present_cells), columns=column_order, cells=cells)


def _resolve_columns(
    seen_keys: dict[str, None],
    sort_columns: bool,
    columns: Sequence[str] | None,
) -> tuple[str, ...]:
    """Pick the output column order."""
    if columns is None:
        return tuple(sorted(seen_keys)) if sort_columns else tuple(seen_keys)
    unknown_keys = [key for key in seen_keys if key not in columns]
    if unknown_keys:
        raise StructuralError(
            f"Attribute keys {unknown_keys} are not in the requested columns. "
            "Pass every key as a column or omit columns."
        )
    return tuple(columns)


def _fill_row(record_cells: dict[str, str], columns: tuple[str, ...]) -> dict[str, CellValue]:
    """Build a complete row, marking absent keys as missing."""
    return {column: record_cells.get(column, MISSING) for column in columns}
