"""
Path resolution for collection templates.

This module substitutes record values into analyzed templates. Each
segment's field path is looked up on the record (aggregate first),
slugified piece by piece and spliced into the template at the offsets
captured during analysis. Unresolved segments are reported, left in place
and collected on the result; they never abort the remaining segments.
"""

import logging
from collections.abc import Iterable
from dataclasses import dataclass

from pagepath.core.path_utils import collapse_slashes
from pagepath.core.types import Record
from pagepath.exceptions import (
    MalformedTemplateError,
    PathResolutionError,
    UnresolvedFieldError,
)
from pagepath.execution.lookup import ValueKind, classify, lookup_field
from pagepath.execution.reporting import LoggingReporter, Reporter, report_unresolved
from pagepath.parsing.parser import ParsedTemplate, Segment, analyze
from pagepath.templates.slugify import SlugOptions, build_slugifier, safe_slugify

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DerivedPath:
    """
    Result of resolving one template against one record.

    Params:
        template: Stripped template that was resolved
        path: Resolved path; unresolved segments keep their raw text
        errors: One error per segment that did not resolve
    """

    template: str
    path: str
    errors: tuple[UnresolvedFieldError, ...] = ()

    @property
    def succeeded(self) -> bool:
        """Whether every segment resolved."""
        return not self.errors

    def raise_for_errors(self) -> str:
        """
        Return the path, or raise if any segment failed.

        Raises:
            PathResolutionError: If at least one segment did not resolve
        """
        if self.errors:
            raise PathResolutionError(self.template, self.errors)
        return self.path


class PathResolver:
    """
    Resolves analyzed templates against records.

    A resolver holds only immutable configuration and a reporter, so one
    instance can serve any number of records, including concurrently.
    """

    def __init__(
        self,
        options: SlugOptions | None = None,
        reporter: Reporter | None = None,
    ) -> None:
        """
        Initialize the resolver.

        Params:
            options: Slug configuration, defaults to SlugOptions()
            reporter: Destination for unresolved field diagnostics,
                      defaults to a LoggingReporter
        """
        self.options = options or SlugOptions()
        self.reporter = reporter or LoggingReporter()
        self._slugify = build_slugifier(self.options)

    def resolve(self, parsed: ParsedTemplate, record: Record) -> DerivedPath:
        """Resolve an analyzed template against a record."""
        return self.resolve_segments(parsed.stripped, parsed.segments, record)

    def resolve_segments(
        self, stripped: str, segments: Iterable[Segment], record: Record
    ) -> DerivedPath:
        """
        Resolve a stripped template and its segments against a record.

        Params:
            stripped: Template with its extension removed
            segments: Segments produced by analyzing that template
            record: Record to read values from

        Returns:
            DerivedPath with the resolved path and any unresolved segments

        Raises:
            MalformedTemplateError: If a segment's offsets do not match the
                template, or segments overlap
        """
        parts: list[str] = []
        errors: list[UnresolvedFieldError] = []
        cursor = 0

        for segment in sorted(segments, key=lambda s: s.start):
            if segment.start < cursor or stripped[segment.start : segment.end] != segment.raw:
                raise MalformedTemplateError(
                    stripped,
                    f"segment {segment.raw} does not match the template at its offsets",
                    segment.start,
                )
            parts.append(stripped[cursor : segment.start])

            value = self.segment_value(segment, record)
            if value is None:
                error = UnresolvedFieldError(segment, record)
                report_unresolved(self.reporter, error)
                errors.append(error)
                parts.append(segment.raw)
            else:
                parts.append(value)
            cursor = segment.end

        parts.append(stripped[cursor:])
        path = collapse_slashes("".join(parts))

        logger.debug("Derived path %s from %s", path, stripped)
        return DerivedPath(template=stripped, path=path, errors=tuple(errors))

    def segment_value(self, segment: Segment, record: Record) -> str | None:
        """
        Slugified value of one segment, None if it does not resolve.

        Mapping values have no text form and count as unresolved.
        """
        result = lookup_field(record, segment.field_path)
        if not result.found or classify(result.value) is ValueKind.MAPPING:
            return None
        return safe_slugify(result.value, slugifier=self._slugify)


def resolve(
    stripped: str,
    segments: Iterable[Segment],
    record: Record,
    *,
    reporter: Reporter | None = None,
    options: SlugOptions | None = None,
) -> DerivedPath:
    """
    Resolve a stripped template and its segments against a record.

    Params:
        stripped: Template with its extension removed
        segments: Segments produced by analyzing that template
        record: Record to read values from
        reporter: Destination for unresolved field diagnostics
        options: Slug configuration

    Returns:
        DerivedPath for the record
    """
    resolver = PathResolver(options=options, reporter=reporter)
    return resolver.resolve_segments(stripped, segments, record)


def derive_path(
    template: str | ParsedTemplate,
    record: Record,
    *,
    reporter: Reporter | None = None,
    options: SlugOptions | None = None,
) -> DerivedPath:
    """
    Derive the page path for a record from a file-path template.

    Params:
        template: Template string or an already analyzed template
        record: Record to read values from
        reporter: Destination for unresolved field diagnostics
        options: Slug configuration

    Returns:
        DerivedPath for the record

    Raises:
        MalformedTemplateError: If a template string cannot be analyzed

    Examples:
        "products/{Product.name}.js", {"id": "1", "name": "Veggie Burger"}
            -> "products/veggie-burger"
        "blog/{MarkdownRemark.parent__(File)__name}.js",
        {"id": "2", "parent": {"name": "Learning Gatsby"}}
            -> "blog/learning-gatsby"
    """
    parsed = analyze(template) if isinstance(template, str) else template
    resolver = PathResolver(options=options, reporter=reporter)
    return resolver.resolve(parsed, record)
