"""
Query-shape derivation for collection templates.

This module turns analyzed segments into the nested field selection a data
layer must fetch to resolve every instance of a template. Union markers
become inline fragments and the identifier field is always selected.
"""

from collections.abc import Iterable

from pagepath.core.types import Selection
from pagepath.exceptions import MalformedTemplateError
from pagepath.parsing.parser import ParsedTemplate, Segment

ID_FIELD = "id"
INLINE_FRAGMENT_PREFIX = "... on "


def build_selection(segments: Iterable[Segment]) -> Selection:
    """
    Build the nested field selection for a set of segments.

    Params:
        segments: Segments from an analyzed template

    Returns:
        Nested dict; leaves map to empty dicts

    Examples:
        {Product.name} -> {"id": {}, "name": {}}
        {MarkdownRemark.parent__(File)__name}
            -> {"id": {}, "parent": {"... on File": {"name": {}}}}
    """
    selection: Selection = {ID_FIELD: {}}
    for segment in segments:
        _merge_segment(selection, segment)
    return selection


def _merge_segment(selection: Selection, segment: Segment) -> None:
    unions = {union.depth: union.type_name for union in segment.unions}
    level = selection
    for depth, name in enumerate(segment.field_path):
        if depth in unions:
            level = level.setdefault(f"{INLINE_FRAGMENT_PREFIX}{unions[depth]}", {})
        level = level.setdefault(name, {})


def render_selection(selection: Selection) -> str:
    """
    Render a selection as GraphQL selection-set text.

    Examples:
        {"id": {}, "parent": {"... on File": {"name": {}}}}
            -> "{ id parent { ... on File { name } } }"
    """
    fields = []
    for name, children in selection.items():
        if children:
            fields.append(f"{name} {render_selection(children)}")
        else:
            fields.append(name)
    return "{ " + " ".join(fields) + " }"


def collection_query(parsed: ParsedTemplate) -> str:
    """
    Query fetching every record needed to materialize a template.

    Params:
        parsed: Analyzed collection template

    Returns:
        Query text such as "{ allProduct { nodes { id name } } }"

    Raises:
        MalformedTemplateError: If the template has no segments
    """
    if not parsed.is_collection:
        raise MalformedTemplateError(
            parsed.original, "template has no collection segments to query"
        )
    nodes = render_selection(build_selection(parsed.segments))
    return f"{{ all{parsed.model} {{ nodes {nodes} }} }}"
