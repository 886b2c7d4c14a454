"""Record loading and normalization pipeline.

This module reads source records and runs the attribute transforms.
It produces wide tables for the query and export layer.
"""
