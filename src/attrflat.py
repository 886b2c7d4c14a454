"""Public SDK surface for Attrflat.

This module provides a stable import path for library users.
It re-exports the pipeline entry points and typed models.
"""

from __future__ import annotations

from core.config import AttrflatConfig
from core.errors import (
    AttrflatError,
    AttrflatIngestError,
    AttrflatQueryError,
    AttrflatStoreError,
    AttrflatTransformError,
    ParseError,
    StructuralError,
)
from core.types import MISSING, KeyedRow, LongRow, NormalizeOptions, Record
from core.wide_table import WideTable
from ingest.input_reader import read_records
from ingest.pipeline import NormalizeResult, normalize, run_normalize
from store.wide_export import wide_table_to_arrow, write_wide_table
from store.wide_queries import count_values
from transforms.attribute_counting import (
    count_attributes,
    count_attributes_per_record,
    filter_non_empty,
)
from transforms.attribute_explode import explode
from transforms.key_value_split import split_entry, split_key_value
from transforms.wide_pivot import pivot_wide

__all__ = [
    "MISSING",
    "AttrflatConfig",
    "AttrflatError",
    "AttrflatIngestError",
    "AttrflatQueryError",
    "AttrflatStoreError",
    "AttrflatTransformError",
    "KeyedRow",
    "LongRow",
    "NormalizeOptions",
    "NormalizeResult",
    "ParseError",
    "Record",
    "StructuralError",
    "WideTable",
    "count_attributes",
    "count_attributes_per_record",
    "count_values",
    "explode",
    "filter_non_empty",
    "normalize",
    "pivot_wide",
    "read_records",
    "run_normalize",
    "split_entry",
    "split_key_value",
    "wide_table_to_arrow",
    "write_wide_table",
]
