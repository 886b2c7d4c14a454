"""Runtime configuration model for Attrflat.

This module owns all environment variable parsing and validation.
Other modules consume a typed config object instead of raw env reads.
"""

from __future__ import annotations

from dataclasses import dataclass
import os

from core.constants import (
    DEFAULT_ATTRIBUTES_FIELD,
    DEFAULT_ID_FIELD,
    FALSE_VALUES,
    TRUE_VALUES,
)
from core.errors import AttrflatConfigError


@dataclass(frozen=True)
class AttrflatConfig:
    """Validated runtime configuration.

    Attributes:
        id_field: Source field holding the unique record identifier.
        attributes_field: Source field holding the attribute entry list.
        sort_columns: Whether wide table columns are sorted alphabetically.
    """

    id_field: str
    attributes_field: str
    sort_columns: bool

    @classmethod
    def from_env(cls) -> "AttrflatConfig":
        """Build config from process environment variables.

        Returns:
            A validated config object.

        Raises:
            AttrflatConfigError: If environment values are invalid.
        """
        id_field = _parse_field_name(
            "ATTRFLAT_ID_FIELD", os.getenv("ATTRFLAT_ID_FIELD", DEFAULT_ID_FIELD)
        )
        attributes_field = _parse_field_name(
            "ATTRFLAT_ATTRIBUTES_FIELD",
            os.getenv("ATTRFLAT_ATTRIBUTES_FIELD", DEFAULT_ATTRIBUTES_FIELD),
        )
        sort_columns = _parse_bool("ATTRFLAT_SORT_COLUMNS", os.getenv("ATTRFLAT_SORT_COLUMNS", "true"))
        return cls(
            id_field=id_field,
            attributes_field=attributes_field,
            sort_columns=sort_columns,
        )


def _parse_field_name(variable: str, raw_value: str) -> str:
    """Validate a source field name.

    Args:
        variable: Environment variable name for error context.
        raw_value: Raw string from environment.

    Returns:
        Stripped field name.

    Raises:
        AttrflatConfigError: If the value is blank.
    """
    field_name = raw_value.strip()
    if not field_name:
        raise AttrflatConfigError(
            f"Invalid {variable} value: expected a non-empty field name. "
            f"Unset {variable} to use the default."
        )
    return field_name


def _parse_bool(variable: str, raw_value: str) -> bool:
    """Parse a boolean environment value.

    Args:
        variable: Environment variable name for error context.
        raw_value: Raw string from environment.

    Returns:
        Parsed boolean.

    Raises:
        AttrflatConfigError: If value is not a recognized boolean.
    """
    normalized = raw_value.strip().lower()
    if normalized in TRUE_VALUES:
        return True
    if normalized in FALSE_VALUES:
        return False
    raise AttrflatConfigError(
        f"Invalid {variable} value: expected one of {TRUE_VALUES + FALSE_VALUES}, "
        f"got '{raw_value}'."
    )
