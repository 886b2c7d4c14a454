"""Source record readers for normalization.

This module loads records from local JSONL, JSON or Parquet files.
It validates identifiers and attribute lists into typed records.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import pyarrow as pa
import pyarrow.parquet as pq

from core.config import AttrflatConfig
from core.constants import SUPPORTED_SOURCE_EXTENSIONS
from core.errors import AttrflatIngestError
from core.logging_config import get_logger
from core.types import Record

_LOGGER = get_logger(__name__)


def read_records(source_path: str, config: AttrflatConfig) -> list[Record]:
    """Load source records from a local file.

    Args:
        source_path: Path to a ``.jsonl``, ``.json`` or ``.parquet`` file.
        config: Runtime configuration naming the id and attribute fields.

    Returns:
        Ordered list of records.

    Raises:
        AttrflatIngestError: If the file is missing, unsupported or malformed.
    """
    file_path = Path(source_path).expanduser()
    if not file_path.is_file():
        raise AttrflatIngestError(
            f"Failed to read source at {file_path}: file does not exist. "
            "Provide an existing .jsonl, .json or .parquet file."
        )
    suffix = file_path.suffix.lower()
    if suffix not in SUPPORTED_SOURCE_EXTENSIONS:
        raise AttrflatIngestError(
            f"Unsupported source format '{suffix or file_path.name}' at {file_path}. "
            f"Supported extensions: {SUPPORTED_SOURCE_EXTENSIONS}."
        )
    payloads = _read_payloads(file_path, suffix)
    records = _records_from_payloads(file_path, payloads, config)
    _LOGGER.info("records_loaded", source_path=str(file_path), record_count=len(records))
    return records


def _read_payloads(file_path: Path, suffix: str) -> list[tuple[str, Any]]:
    """Read raw row payloads tagged with a location label.

    Args:
        file_path: Source file.
        suffix: Lowercased file suffix.

    Returns:
        ``(location, payload)`` pairs in file order.
    """
    if suffix == ".jsonl":
        return _read_jsonl_payloads(file_path)
    if suffix == ".json":
        return _read_json_payloads(file_path)
    return _read_parquet_payloads(file_path)


def _read_jsonl_payloads(file_path: Path) -> list[tuple[str, Any]]:
    payloads: list[tuple[str, Any]] = []
    # only "\n" ends a record; U+2028 and similar may appear raw inside JSON strings
    for line_number, line in enumerate(_read_text(file_path).split("\n"), 1):
        if not line.strip():
            continue
        location = f"{file_path}:{line_number}"
        try:
            payloads.append((location, json.loads(line)))
        except json.JSONDecodeError as error:
            raise AttrflatIngestError(
                f"Failed to parse JSONL record at {location}: "
                f"{error.msg}. Fix the JSON syntax and retry."
            ) from error
    return payloads


def _read_json_payloads(file_path: Path) -> list[tuple[str, Any]]:
    try:
        document = json.loads(_read_text(file_path))
    except json.JSONDecodeError as error:
        raise AttrflatIngestError(
            f"Failed to parse JSON document at {file_path}: {error.msg}. "
            "Fix the JSON syntax and retry."
        ) from error
    if not isinstance(document, list):
        raise AttrflatIngestError(
            f"Invalid JSON document at {file_path}: expected a top-level array of records."
        )
    return [(f"{file_path}[{index}]", payload) for index, payload in enumerate(document)]


def _read_parquet_payloads(file_path: Path) -> list[tuple[str, Any]]:
    try:
        rows = pq.read_table(str(file_path)).to_pylist()
    except (OSError, pa.ArrowException) as error:
        raise AttrflatIngestError(
            f"Failed to read Parquet file at {file_path}: {error}. "
            "Check that the file is a valid Parquet dataset."
        ) from error
    return [(f"{file_path}[{index}]", row) for index, row in enumerate(rows)]


def _read_text(file_path: Path) -> str:
    try:
        return file_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as error:
        raise AttrflatIngestError(
            f"Failed to read source at {file_path}: {error}. "
            "Check file permissions and UTF-8 encoding."
        ) from error


def _records_from_payloads(
    file_path: Path,
    payloads: list[tuple[str, Any]],
    config: AttrflatConfig,
) -> list[Record]:
    """Validate payloads into records and reject duplicate ids.

    Args:
        file_path: Source file for error context.
        payloads: ``(location, payload)`` pairs.
        config: Runtime configuration.

    Returns:
        Typed records in file order.

    Raises:
        AttrflatIngestError: If a payload is invalid or an id repeats.
    """
    records: list[Record] = []
    seen_locations: dict[str, str] = {}
    for location, payload in payloads:
        record = _record_from_payload(location, payload, config)
        if record.record_id in seen_locations:
            raise AttrflatIngestError(
                f"Duplicate record id '{record.record_id}' at {location} in {file_path}; "
                f"first seen at {seen_locations[record.record_id]}. Record ids must be unique."
            )
        seen_locations[record.record_id] = location
        records.append(record)
    return records


def _record_from_payload(location: str, payload: Any, config: AttrflatConfig) -> Record:
    """Build one record from a raw payload.

    Args:
        location: File and row label for error context.
        payload: Decoded row object.
        config: Runtime configuration.

    Returns:
        Typed record.

    Raises:
        AttrflatIngestError: If the id or attribute field is invalid.
    """
    if not isinstance(payload, dict):
        raise AttrflatIngestError(
            f"Invalid record at {location}: expected an object, got {type(payload).__name__}."
        )
    record_id = payload.get(config.id_field)
    if not isinstance(record_id, str) or not record_id:
        raise AttrflatIngestError(
            f"Invalid record at {location}: expected non-empty string field "
            f"'{config.id_field}'. Set ATTRFLAT_ID_FIELD if the id lives elsewhere."
        )
    attributes = payload.get(config.attributes_field)
    if attributes is None:
        return Record(record_id=record_id)
    if not isinstance(attributes, list) or not all(
        isinstance(entry, str) for entry in attributes
    ):
        raise AttrflatIngestError(
            f"Invalid record at {location}: field '{config.attributes_field}' must be "
            "a list of strings or null."
        )
    return Record(record_id=record_id, attributes=tuple(attributes))
