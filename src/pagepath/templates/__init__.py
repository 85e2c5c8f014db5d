"""
Slug generation components.

This package provides the slug configuration and the "/"-preserving
slugify helpers used when substituting record values into templates.
"""

from pagepath.templates.slugify import (
    SlugOptions,
    build_slugifier,
    safe_slugify,
    stringify_value,
    strip_diacritics,
)

__all__ = [
    "SlugOptions",
    "build_slugifier",
    "safe_slugify",
    "stringify_value",
    "strip_diacritics",
]
