"""Unit tests for the explode transform."""

from __future__ import annotations

import pytest

from core.errors import StructuralError
from core.types import LongRow, Record
from transforms.attribute_explode import explode


def test_explode_emits_one_row_per_entry_in_order() -> None:
    """Explode should keep record order, then entry order."""
    records = [
        Record(record_id="a", attributes=("WiFi: free", "Alcohol: none")),
        Record(record_id="b", attributes=("BikeParking: True",)),
    ]

    long_rows = explode(records)

    assert long_rows == [
        LongRow(record_id="a", entry="WiFi: free"),
        LongRow(record_id="a", entry="Alcohol: none"),
        LongRow(record_id="b", entry="BikeParking: True"),
    ]


def test_explode_raises_for_record_without_attributes() -> None:
    """Explode should reject empty records that were not filtered."""
    records = [
        Record(record_id="a", attributes=("WiFi: free",)),
        Record(record_id="empty"),
    ]

    with pytest.raises(StructuralError, match="empty"):
        explode(records)
