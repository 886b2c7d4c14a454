"""Unit tests for per-record attribute counting."""

from __future__ import annotations

from core.types import Record
from transforms.attribute_counting import (
    count_attributes,
    count_attributes_per_record,
    filter_non_empty,
)


def _records() -> list[Record]:
    return [
        Record(record_id="a", attributes=("WiFi: free", "Alcohol: none")),
        Record(record_id="b"),
        Record(record_id="c", attributes=("BikeParking: True",)),
        Record(record_id="d", attributes=()),
    ]


def test_count_attributes_returns_entry_count() -> None:
    """Count should equal the number of entries on the record."""
    record = Record(record_id="a", attributes=("WiFi: free", "Alcohol: none", "BikeParking: True"))

    assert count_attributes(record) == 3


def test_count_attributes_returns_zero_for_empty_record() -> None:
    """A record without entries should count as zero."""
    assert count_attributes(Record(record_id="empty")) == 0


def test_count_attributes_per_record_is_element_wise() -> None:
    """Counts should follow each record, not the size of the collection."""
    records = _records()

    counts = count_attributes_per_record(records)

    assert counts == [2, 0, 1, 0]
    assert counts != [len(records)] * len(records)


def test_filter_non_empty_keeps_order_and_drops_empty_records() -> None:
    """Filtering should keep only records with entries in original order."""
    retained = filter_non_empty(_records())

    assert [record.record_id for record in retained] == ["a", "c"]


def test_filter_non_empty_does_not_mutate_input() -> None:
    """Filtering should leave the input list untouched."""
    records = _records()

    filter_non_empty(records)

    assert len(records) == 4
