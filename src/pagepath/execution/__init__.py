"""
Path resolution components.

This package looks up segment values on records, reports unresolved
fields and substitutes slugified values into analyzed templates.
"""

from pagepath.execution.lookup import (
    AGGREGATE_FIELD,
    LookupResult,
    ValueKind,
    classify,
    first_aggregate_item,
    get_child,
    lookup,
    lookup_field,
)
from pagepath.execution.reporting import LoggingReporter, Reporter, report_unresolved
from pagepath.execution.resolution import (
    DerivedPath,
    PathResolver,
    derive_path,
    resolve,
)

__all__ = [
    "AGGREGATE_FIELD",
    "DerivedPath",
    "LoggingReporter",
    "LookupResult",
    "PathResolver",
    "Reporter",
    "ValueKind",
    "classify",
    "derive_path",
    "first_aggregate_item",
    "get_child",
    "lookup",
    "lookup_field",
    "report_unresolved",
    "resolve",
]
