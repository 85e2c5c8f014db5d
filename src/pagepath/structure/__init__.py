"""
Query-shape components.

This package derives the field selections callers need to fetch records
for a collection template.
"""

from pagepath.structure.query_shape import (
    ID_FIELD,
    build_selection,
    collection_query,
    render_selection,
)

__all__ = [
    "ID_FIELD",
    "build_selection",
    "collection_query",
    "render_selection",
]
