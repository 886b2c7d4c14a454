"""Split ``Key: Value`` attribute entries.

Only the first colon delimits the key. Values are free-form and may hold
further colons, braces or quotes; they are kept verbatim apart from one
leading space.
"""

from __future__ import annotations

from typing import Iterable

from core.constants import ATTRIBUTE_DELIMITER
from core.errors import ParseError
from core.types import KeyedRow, LongRow


def split_entry(entry: str) -> tuple[str, str]:
    """Split a raw entry string into key and value.

    Args:
        entry: Raw ``"Key: Value"`` string.

    Returns:
        ``(key, value)`` tuple.

    Raises:
        ParseError: If the entry has no colon.
    """
    key, delimiter, value = entry.partition(ATTRIBUTE_DELIMITER)
    if not delimiter:
        raise ParseError(
            f"Invalid attribute entry {entry!r}: expected 'Key: Value' with a colon. "
            "Fix the source data and rerun."
        )
    if value.startswith(" "):
        value = value[1:]
    return key, value


def split_key_value(long_row: LongRow) -> KeyedRow:
    """Split one long row into a keyed row.

    Args:
        long_row: Exploded attribute entry.

    Returns:
        Keyed row carrying the same record id.

    Raises:
        ParseError: If the entry has no colon.
    """
    try:
        key, value = split_entry(long_row.entry)
    except ParseError as error:
        raise ParseError(f"Record '{long_row.record_id}': {error}") from error
    return KeyedRow(record_id=long_row.record_id, key=key, value=value)


def split_key_values(long_rows: Iterable[LongRow]) -> list[KeyedRow]:
    """Split long rows element-wise.

    Args:
        long_rows: Exploded attribute entries.

    Returns:
        Keyed rows aligned to the input order.
    """
    return [split_key_value(long_row) for long_row in long_rows]
