"""Explode records into one long row per attribute entry."""

from __future__ import annotations

from typing import Iterable

from core.errors import StructuralError
from core.types import LongRow, Record
from transforms.attribute_counting import count_attributes


def explode(records: Iterable[Record]) -> list[LongRow]:
    """Emit one long row per attribute entry, preserving entry order.

    Args:
        records: Records that each hold at least one entry.

    Returns:
        Long rows in record order, then entry order.

    Raises:
        StructuralError: If a record has no attribute entries.
    """
    long_rows: list[LongRow] = []
    for record in records:
        if count_attributes(record) == 0:
            raise StructuralError(
                f"Cannot explode record '{record.record_id}': it has no attribute entries. "
                "Apply filter_non_empty before explode."
            )
        for entry in record.attributes:
            long_rows.append(LongRow(record_id=record.record_id, entry=entry))
    return long_rows
