"""
Template analysis components.

This package parses collection path templates into their dynamic segments.
"""

from pagepath.parsing.parser import (
    ParsedTemplate,
    Segment,
    UnionMarker,
    analyze,
    extract_all_collection_segments,
    extract_model,
    parse_segment,
    scan_segment_spans,
)

__all__ = [
    "ParsedTemplate",
    "Segment",
    "UnionMarker",
    "analyze",
    "extract_all_collection_segments",
    "extract_model",
    "parse_segment",
    "scan_segment_spans",
]
