"""Unit tests for the wide table model and missing marker."""

from __future__ import annotations

import copy
import pickle

import pytest

from core.errors import AttrflatQueryError, StructuralError
from core.types import MISSING, KeyedRow, MissingValue
from core.wide_table import WideTable
from transforms.wide_pivot import pivot_wide


def _table():
    return pivot_wide(
        [
            KeyedRow(record_id="a", key="WiFi", value="free"),
            KeyedRow(record_id="a", key="Alcohol", value="none"),
            KeyedRow(record_id="b", key="WiFi", value="no"),
            KeyedRow(record_id="c", key="Ambience", value="{'casual': True}"),
        ]
    )


def test_missing_marker_is_distinct_singleton() -> None:
    """The missing marker should be unique and never equal to empty values."""
    assert MissingValue() is MISSING
    assert MISSING != "" and MISSING is not None
    assert not MISSING
    assert repr(MISSING) == "<missing>"


def test_missing_marker_survives_copy_and_pickle() -> None:
    """Copies of the marker should resolve to the same singleton."""
    assert copy.deepcopy(MISSING) is MISSING
    assert pickle.loads(pickle.dumps(MISSING)) is MISSING


def test_column_aligns_to_record_order() -> None:
    """Column values should follow record order with missing markers."""
    table = _table()

    assert table.column("WiFi") == ["free", "no", MISSING]


def test_column_raises_for_unknown_key() -> None:
    """Querying a missing column should fail with a query error."""
    with pytest.raises(AttrflatQueryError, match="Parking"):
        _table().column("Parking")


def test_row_raises_for_unknown_record() -> None:
    """Querying a dropped or unknown record should fail."""
    with pytest.raises(AttrflatQueryError):
        _table().row("zzz")


def test_as_mapping_returns_copy() -> None:
    """Mutating the mapping copy should not affect the table."""
    table = _table()
    mapping = table.as_mapping()

    mapping["a"]["WiFi"] = "changed"

    assert table.row("a")["WiFi"] == "free"


def test_to_keyed_rows_round_trips_through_pivot() -> None:
    """Pivoting the long-form equivalent should rebuild the same table."""
    table = _table()

    rebuilt = pivot_wide(table.to_keyed_rows())

    assert rebuilt == table
    assert all(row.value is not MISSING for row in table.to_keyed_rows())


def test_to_keyed_rows_round_trips_unsorted_columns_with_explicit_order() -> None:
    """Passing the table columns should rebuild first-seen column order."""
    table = pivot_wide(
        [
            KeyedRow(record_id="a", key="WiFi", value="free"),
            KeyedRow(record_id="b", key="Alcohol", value="none"),
            KeyedRow(record_id="a", key="BikeParking", value="True"),
        ],
        sort_columns=False,
    )

    rebuilt = pivot_wide(table.to_keyed_rows(), columns=table.columns)

    assert table.columns == ("WiFi", "Alcohol", "BikeParking")
    assert rebuilt == table


def test_pivot_wide_rejects_keys_outside_explicit_columns() -> None:
    """An explicit column list must cover every key in the rows."""
    with pytest.raises(StructuralError, match="Alcohol"):
        pivot_wide([KeyedRow(record_id="a", key="Alcohol", value="none")], columns=("WiFi",))


def test_pivot_wide_explicit_columns_may_be_all_missing() -> None:
    """Requested columns without values should hold missing markers."""
    table = pivot_wide(
        [KeyedRow(record_id="a", key="WiFi", value="no")], columns=("Alcohol", "WiFi")
    )

    assert table.row("a") == {"Alcohol": MISSING, "WiFi": "no"}


def test_wide_table_cells_are_read_only() -> None:
    """Rows and the row mapping should reject mutation."""
    table = _table()

    with pytest.raises(TypeError):
        table.cells["a"]["WiFi"] = "changed"  # type: ignore[index]
    with pytest.raises(TypeError):
        table.cells["z"] = {}  # type: ignore[index]

    assert table.row("a")["WiFi"] == "free"


def test_wide_table_copies_constructor_cells() -> None:
    """Mutating the dict passed to the constructor should not leak into the table."""
    row_cells = {"WiFi": "free"}
    table = WideTable(record_ids=("a",), columns=("WiFi",), cells={"a": row_cells})

    row_cells["WiFi"] = "changed"

    assert table.row("a") == {"WiFi": "free"}


def test_wide_table_is_unhashable() -> None:
    """Tables compare by value and are explicitly unhashable."""
    with pytest.raises(TypeError):
        hash(_table())
