"""Unit tests for core config parsing."""

from __future__ import annotations

import pytest

from core.config import AttrflatConfig
from core.errors import AttrflatConfigError


def test_from_env_uses_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    """Config should fall back to business-style field names."""
    monkeypatch.delenv("ATTRFLAT_ID_FIELD", raising=False)
    monkeypatch.delenv("ATTRFLAT_ATTRIBUTES_FIELD", raising=False)
    monkeypatch.delenv("ATTRFLAT_SORT_COLUMNS", raising=False)

    config = AttrflatConfig.from_env()

    assert config == AttrflatConfig(
        id_field="business_id", attributes_field="attributes", sort_columns=True
    )


def test_from_env_reads_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    """Config should read field names and sort flag from environment."""
    monkeypatch.setenv("ATTRFLAT_ID_FIELD", "id")
    monkeypatch.setenv("ATTRFLAT_ATTRIBUTES_FIELD", "tags")
    monkeypatch.setenv("ATTRFLAT_SORT_COLUMNS", "No")

    config = AttrflatConfig.from_env()

    assert (config.id_field, config.attributes_field, config.sort_columns) == ("id", "tags", False)


def test_from_env_raises_for_invalid_sort_flag(monkeypatch: pytest.MonkeyPatch) -> None:
    """Config should fail for unrecognized boolean values."""
    monkeypatch.setenv("ATTRFLAT_SORT_COLUMNS", "sometimes")

    with pytest.raises(AttrflatConfigError):
        AttrflatConfig.from_env()


def test_from_env_raises_for_blank_field(monkeypatch: pytest.MonkeyPatch) -> None:
    """Config should reject blank field names."""
    monkeypatch.setenv("ATTRFLAT_ID_FIELD", "   ")

    with pytest.raises(AttrflatConfigError):
        AttrflatConfig.from_env()
