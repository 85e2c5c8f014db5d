"""
Analyzer for collection path templates.

This module parses file-path templates such as
"blog/{MarkdownRemark.parent__(File)__name}.js" into the extension-stripped
template and the ordered list of dynamic segments it contains, each carrying
the normalized field path used for record lookup and any union markers used
for query-shape generation.
"""

import re

from attrs import frozen

from pagepath.core.path_utils import (
    join_field_path,
    remove_file_extension,
    split_field_components,
    switch_to_period_delimiters,
)
from pagepath.core.types import FieldPath
from pagepath.exceptions import MalformedTemplateError

SEGMENT_OPEN = "{"
SEGMENT_CLOSE = "}"
MODEL_SEPARATOR = "."

UNION_COMPONENT_PATTERN = re.compile(r"^\((?P<type_name>\w+)\)$")
NAME_PATTERN = re.compile(r"^\w+$")


@frozen
class UnionMarker:
    """
    Interface narrowing annotation inside a segment.

    Params:
        type_name: Concrete type to narrow into (e.g., "File")
        depth: Number of field names preceding the marker; the narrowing
               applies to the selection of field_path[depth - 1], or to the
               model itself when depth is 0
    """

    type_name: str
    depth: int


@frozen
class Segment:
    """
    One dynamic "{Model.field}" portion of a template.

    Params:
        raw: Segment text including its braces
        start: Offset of the opening brace in the stripped template
        end: Offset just past the closing brace in the stripped template
        model: Model name before the first period
        field: Field reference as written after the model
        field_path: Field names used for record lookup, union markers removed
        unions: Union markers in the order they appear
    """

    raw: str
    start: int
    end: int
    model: str
    field: str
    field_path: FieldPath
    unions: tuple[UnionMarker, ...] = ()

    @property
    def dotted_path(self) -> str:
        """Field path joined with periods (e.g., "parent.name")."""
        return join_field_path(self.field_path)

    @property
    def normalized_field(self) -> str:
        """Field reference with "__" rewritten to periods, unions kept."""
        return switch_to_period_delimiters(self.field)

    @property
    def union_marker(self) -> str | None:
        """Name of the first union marker, if any."""
        return self.unions[0].type_name if self.unions else None


@frozen
class ParsedTemplate:
    """
    Result of analyzing a template.

    Params:
        original: Template as supplied, extension included
        stripped: Template with its file extension removed
        segments: Dynamic segments in template order
        model: Model shared by every segment, None for static templates
    """

    original: str
    stripped: str
    segments: tuple[Segment, ...] = ()
    model: str | None = None

    @property
    def is_collection(self) -> bool:
        """Whether the template has dynamic segments."""
        return bool(self.segments)


def analyze(template: str) -> ParsedTemplate:
    """
    Analyze a path template.

    Params:
        template: Non-empty path-like template string

    Returns:
        ParsedTemplate with the stripped template and its segments

    Raises:
        MalformedTemplateError: If the template is empty, has unbalanced or
            nested braces, or contains an invalid segment

    Examples:
        "products/{Product.name}.js" -> stripped "products/{Product.name}",
            one segment with field_path ("name",)
        "image/[...].js" -> stripped "image/[...]", no segments
    """
    if not template or not isinstance(template, str):
        raise MalformedTemplateError(str(template), "template must be a non-empty string")

    stripped = remove_file_extension(template)
    segments = tuple(
        parse_segment(stripped, start, end) for start, end in scan_segment_spans(stripped)
    )

    return ParsedTemplate(
        original=template,
        stripped=stripped,
        segments=segments,
        model=_shared_model(template, segments),
    )


def scan_segment_spans(template: str) -> list[tuple[int, int]]:
    """
    Find the offsets of every braced region in a template.

    Params:
        template: Template to scan

    Returns:
        List of (start, end) pairs, end exclusive

    Raises:
        MalformedTemplateError: On a nested "{", a "}" without an opening
            brace, or an unclosed "{"
    """
    spans = []
    open_at: int | None = None

    for index, char in enumerate(template):
        if char == SEGMENT_OPEN:
            if open_at is not None:
                raise MalformedTemplateError(
                    template, "segments cannot be nested", index
                )
            open_at = index
        elif char == SEGMENT_CLOSE:
            if open_at is None:
                raise MalformedTemplateError(
                    template, f"unbalanced '{SEGMENT_CLOSE}'", index
                )
            spans.append((open_at, index + 1))
            open_at = None

    if open_at is not None:
        raise MalformedTemplateError(template, f"unclosed '{SEGMENT_OPEN}'", open_at)

    return spans


def parse_segment(template: str, start: int, end: int) -> Segment:
    """
    Parse the braced region template[start:end] into a Segment.

    Params:
        template: Stripped template containing the segment
        start: Offset of the opening brace
        end: Offset just past the closing brace

    Returns:
        Segment with normalized field path and union markers

    Raises:
        MalformedTemplateError: If the segment does not follow the
            "{Model.field__nested}" schema
    """
    raw = template[start:end]
    body = raw[1:-1]

    model, separator, field_ref = body.partition(MODEL_SEPARATOR)
    if not separator:
        raise MalformedTemplateError(
            template,
            f"segment {raw} must use a period to separate the model from the "
            "field, following the schema {Model.field}",
            start,
        )
    if not NAME_PATTERN.match(model):
        raise MalformedTemplateError(
            template, f"segment {raw} has an invalid model name '{model}'", start
        )
    if not field_ref:
        raise MalformedTemplateError(template, f"segment {raw} has no field", start)
    if MODEL_SEPARATOR in field_ref:
        raise MalformedTemplateError(
            template,
            f"segment {raw} must use '__' instead of '.' between nested fields",
            start,
        )

    names: list[str] = []
    unions: list[UnionMarker] = []

    for component in split_field_components(field_ref):
        if component.startswith("(") or component.endswith(")"):
            match = UNION_COMPONENT_PATTERN.match(component)
            if match is None:
                raise MalformedTemplateError(
                    template,
                    f"segment {raw} has an invalid union marker '{component}'",
                    start,
                )
            if unions and unions[-1].depth == len(names):
                raise MalformedTemplateError(
                    template, f"segment {raw} has consecutive union markers", start
                )
            unions.append(UnionMarker(type_name=match["type_name"], depth=len(names)))
        elif NAME_PATTERN.match(component):
            names.append(component)
        else:
            raise MalformedTemplateError(
                template,
                f"segment {raw} has an invalid field name '{component}'",
                start,
            )

    if unions and unions[-1].depth == len(names):
        raise MalformedTemplateError(
            template,
            f"segment {raw} ends with a union marker; a field must follow it",
            start,
        )

    return Segment(
        raw=raw,
        start=start,
        end=end,
        model=model,
        field=field_ref,
        field_path=tuple(names),
        unions=tuple(unions),
    )


def extract_all_collection_segments(template: str) -> list[str]:
    """Raw text of every segment in a template, in order."""
    return [segment.raw for segment in analyze(template).segments]


def extract_model(template: str) -> str | None:
    """Model name shared by the template's segments, None if it has none."""
    return analyze(template).model


def _shared_model(template: str, segments: tuple[Segment, ...]) -> str | None:
    models = list(dict.fromkeys(segment.model for segment in segments))
    if len(models) > 1:
        raise MalformedTemplateError(
            template,
            f"segments reference different models: {', '.join(models)}",
        )
    return models[0] if models else None
