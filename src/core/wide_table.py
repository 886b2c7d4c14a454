"""Wide table model produced by attribute normalization.

A wide table holds one row per record and one column per attribute key.
Every cell is either a string value or ``MISSING``.
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping

from core.errors import AttrflatQueryError
from core.types import CellValue, KeyedRow, MISSING


@dataclass(frozen=True)
class WideTable:
    """Immutable wide-form attribute table.

    Attributes:
        record_ids: Row identifiers in original record order.
        columns: Attribute keys, one column each.
        cells: Record id to key to value-or-MISSING, complete for every
            row and column. Stored as read-only mappings.
    """

    record_ids: tuple[str, ...]
    columns: tuple[str, ...]
    cells: Mapping[str, Mapping[str, CellValue]]

    __hash__ = None  # type: ignore[assignment]

    def __post_init__(self) -> None:
        object.__setattr__(self, "record_ids", tuple(self.record_ids))
        object.__setattr__(self, "columns", tuple(self.columns))
        frozen_cells = {
            record_id: MappingProxyType(dict(row_cells))
            for record_id, row_cells in self.cells.items()
        }
        object.__setattr__(self, "cells", MappingProxyType(frozen_cells))

    def __len__(self) -> int:
        return len(self.record_ids)

    def row(self, record_id: str) -> dict[str, CellValue]:
        """Return one row as a key to value mapping.

        Args:
            record_id: Row identifier.

        Returns:
            Copy of the row cells in column order.

        Raises:
            AttrflatQueryError: If the record id is not in the table.
        """
        if record_id not in self.cells:
            raise AttrflatQueryError(
                f"Record '{record_id}' is not in the wide table. "
                "Records without attributes are dropped during normalization."
            )
        row_cells = self.cells[record_id]
        return {column: row_cells[column] for column in self.columns}

    def column(self, key: str) -> list[CellValue]:
        """Return one column aligned to ``record_ids``.

        Args:
            key: Attribute key.

        Returns:
            Cell values in row order.

        Raises:
            AttrflatQueryError: If the key is not a column.
        """
        if key not in self.columns:
            raise AttrflatQueryError(
                f"Column '{key}' is not in the wide table. "
                f"Available columns: {', '.join(self.columns) or '(none)'}."
            )
        return [self.cells[record_id][key] for record_id in self.record_ids]

    def as_mapping(self) -> dict[str, dict[str, CellValue]]:
        """Return a copy of all rows keyed by record id."""
        return {record_id: self.row(record_id) for record_id in self.record_ids}

    def to_keyed_rows(self) -> list[KeyedRow]:
        """Return the long-form equivalent, skipping missing cells.

        Returns:
            Keyed rows in row order, then column order.

        Pass ``columns=table.columns`` to ``pivot_wide`` to rebuild a table
        whose columns are not sorted.
        """
        keyed_rows: list[KeyedRow] = []
        for record_id in self.record_ids:
            row_cells = self.cells[record_id]
            for column in self.columns:
                value = row_cells[column]
                if value is MISSING:
                    continue
                keyed_rows.append(KeyedRow(record_id=record_id, key=column, value=value))
        return keyed_rows
