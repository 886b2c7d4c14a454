"""Wide table query and export layer.

This module answers aggregate queries over normalized wide tables
and writes them to JSONL or Parquet for downstream consumers.
"""
