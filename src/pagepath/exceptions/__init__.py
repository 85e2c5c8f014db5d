"""
pagepath exception classes.

This package provides all exception types used throughout pagepath for
consistent error handling and reporting.
"""

from pagepath.exceptions.core import (
    MalformedTemplateError,
    PagePathError,
    PathResolutionError,
    SlugOptionsError,
    UnresolvedFieldError,
    serialize_record,
)

__all__ = [
    "PagePathError",
    "MalformedTemplateError",
    "UnresolvedFieldError",
    "PathResolutionError",
    "SlugOptionsError",
    "serialize_record",
]
