"""Shared typed models.

This module defines immutable data models used by ingest, transforms,
store, and CLI layers to keep interfaces explicit and stable.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from core.constants import MISSING_LABEL


class MissingValue:
    """Singleton marker for a wide-table cell with no value.

    It is distinct from ``""`` and ``None``, hashable so it can be counted
    as a category, and falsy.
    """

    _instance: "MissingValue | None" = None

    def __new__(cls) -> "MissingValue":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return MISSING_LABEL

    def __bool__(self) -> bool:
        return False

    def __reduce__(self) -> str:
        return "MISSING"


MISSING = MissingValue()

CellValue = Union[str, MissingValue]


@dataclass(frozen=True)
class Record:
    """Source record with an ordered attribute entry list.

    Attributes:
        record_id: Opaque identifier, unique per record.
        attributes: Raw ``"Key: Value"`` entries in source order.
    """

    record_id: str
    attributes: tuple[str, ...] = ()


@dataclass(frozen=True)
class LongRow:
    """One attribute entry of one record.

    Attributes:
        record_id: Identifier of the owning record.
        entry: Raw ``"Key: Value"`` entry string.
    """

    record_id: str
    entry: str


@dataclass(frozen=True)
class KeyedRow:
    """Long-form row after key/value splitting.

    Attributes:
        record_id: Identifier of the owning record.
        key: Attribute key, text before the first colon.
        value: Attribute value, text after the first colon.
    """

    record_id: str
    key: str
    value: str


@dataclass(frozen=True)
class NormalizeOptions:
    """Normalize command options.

    Attributes:
        source_path: Input ``.jsonl``, ``.json`` or ``.parquet`` file.
        output_path: Optional ``.jsonl`` or ``.parquet`` destination.
        sort_columns: Whether wide table columns are sorted alphabetically.
    """

    source_path: str
    output_path: str | None = None
    sort_columns: bool = True
