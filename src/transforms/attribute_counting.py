"""Per-record attribute counting and empty-record filtering.

Counts are computed record by record. No helper here returns a single
count for a whole collection of records.
"""

from __future__ import annotations

from typing import Iterable

from core.types import Record


def count_attributes(record: Record) -> int:
    """Return the number of attribute entries held by one record.

    Args:
        record: Source record.

    Returns:
        Entry count, ``0`` for an empty attribute list.
    """
    return len(record.attributes)


def count_attributes_per_record(records: Iterable[Record]) -> list[int]:
    """Count attribute entries for each record.

    Args:
        records: Source records.

    Returns:
        Counts aligned to the input order.
    """
    return [count_attributes(record) for record in records]


def filter_non_empty(records: Iterable[Record]) -> list[Record]:
    """Drop records that carry no attribute entries.

    Args:
        records: Source records.

    Returns:
        Records with at least one entry, in original relative order.
    """
    return [record for record in records if count_attributes(record) > 0]
