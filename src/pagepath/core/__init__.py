"""
Core pagepath components.

This package provides the type aliases and path string utilities shared
across the analyzer, resolver and query-shape builder.
"""

from pagepath.core.path_utils import (
    collapse_slashes,
    join_field_path,
    remove_file_extension,
    split_field_components,
    switch_to_period_delimiters,
)
from pagepath.core.types import FieldPath, Record, Selection

__all__ = [
    "FieldPath",
    "Record",
    "Selection",
    "collapse_slashes",
    "join_field_path",
    "remove_file_extension",
    "split_field_components",
    "switch_to_period_delimiters",
]
