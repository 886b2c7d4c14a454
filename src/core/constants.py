"""Core constants used across Attrflat modules.

This module centralizes non-domain-specific constants.
Keeping values here avoids magic literals in business logic.
"""

from __future__ import annotations

DEFAULT_ID_FIELD = "business_id"
DEFAULT_ATTRIBUTES_FIELD = "attributes"
ATTRIBUTE_DELIMITER = ":"
RECORD_ID_COLUMN = "record_id"
MISSING_LABEL = "<missing>"
SUPPORTED_SOURCE_EXTENSIONS = (".jsonl", ".json", ".parquet")
SUPPORTED_OUTPUT_EXTENSIONS = (".jsonl", ".parquet")
TRUE_VALUES = ("1", "true", "yes", "on")
FALSE_VALUES = ("0", "false", "no", "off")
