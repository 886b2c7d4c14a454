"""Attrflat exception hierarchy.

This module defines traceable domain errors with clear boundaries.
Each subsystem raises a specific error type for debuggability.
"""

from __future__ import annotations


class AttrflatError(Exception):
    """Base exception for all Attrflat failures."""


class AttrflatConfigError(AttrflatError):
    """Raised for invalid runtime configuration."""


class AttrflatIngestError(AttrflatError):
    """Raised for source reading and record parsing failures."""


class AttrflatTransformError(AttrflatError):
    """Raised for transform pipeline failures."""


class ParseError(AttrflatTransformError):
    """Raised when an attribute entry is not shaped like ``Key: Value``."""


class StructuralError(AttrflatTransformError):
    """Raised when a transform receives a record violating its precondition."""


class AttrflatQueryError(AttrflatError):
    """Raised for invalid queries against a wide table."""


class AttrflatStoreError(AttrflatError):
    """Raised for wide table export failures."""
