"""Aggregate queries over normalized wide tables.

These helpers run against an existing wide table so downstream
consumers can count values without rerunning normalization.
"""

from __future__ import annotations

from collections import Counter

from core.constants import MISSING_LABEL
from core.types import CellValue, MISSING
from core.wide_table import WideTable


def count_values(table: WideTable, key: str) -> dict[CellValue, int]:
    """Count distinct values of one column, including missing cells.

    Args:
        table: Normalized wide table.
        key: Column to count.

    Returns:
        Value to count mapping; counts sum to ``len(table)``.

    Raises:
        AttrflatQueryError: If the column does not exist.
    """
    return dict(Counter(table.column(key)))


def ranked_value_counts(table: WideTable, key: str) -> list[tuple[CellValue, int]]:
    """Return value counts ordered by descending count, then label.

    Args:
        table: Normalized wide table.
        key: Column to count.

    Returns:
        Ordered ``(value, count)`` pairs.
    """
    counts = count_values(table, key)
    return sorted(counts.items(), key=lambda item: (-item[1], format_cell(item[0])))


def format_cell(value: CellValue) -> str:
    """Render a cell for text output, labeling missing cells."""
    if value is MISSING:
        return MISSING_LABEL
    return str(value)
