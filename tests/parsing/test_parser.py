"""
Tests for the collection path template analyzer.

This module tests:
- Extension stripping and segment extraction
- Double-underscore field path normalization
- Union marker extraction
- Malformed template detection
"""

from typing import NamedTuple

import pytest
from attrs.exceptions import FrozenInstanceError

from pagepath.exceptions import MalformedTemplateError
from pagepath.parsing.parser import (
    ParsedTemplate,
    Segment,
    UnionMarker,
    analyze,
    extract_all_collection_segments,
    extract_model,
    scan_segment_spans,
)


class MalformedCase(NamedTuple):
    """Test case for malformed templates."""

    name: str
    template: str
    reason_fragment: str


MALFORMED_TEMPLATES = [
    MalformedCase("unclosed_brace", "products/{Product.name", "unclosed '{'"),
    MalformedCase("stray_closing_brace", "products/Product.name}", "unbalanced '}'"),
    MalformedCase("nested_braces", "products/{Product.{name}}", "cannot be nested"),
    MalformedCase("empty_segment", "products/{}", "must use a period"),
    MalformedCase("missing_model_separator", "products/{name}", "must use a period"),
    MalformedCase("empty_model", "products/{.name}", "invalid model name"),
    MalformedCase("empty_field", "products/{Product.}", "has no field"),
    MalformedCase("period_in_field", "products/{Product.sku.en}", "instead of '.'"),
    MalformedCase("empty_component", "products/{Product.a____b}", "invalid field name"),
    MalformedCase("invalid_component", "products/{Product.na-me}", "invalid field name"),
    MalformedCase("empty_union", "blog/{Post.parent__()__name}", "invalid union marker"),
    MalformedCase("unclosed_union", "blog/{Post.parent__(File__name}", "invalid union marker"),
    MalformedCase("trailing_union", "blog/{Post.parent__(File)}", "ends with a union marker"),
    MalformedCase("consecutive_unions", "blog/{Post.parent__(A)__(B)__name}", "consecutive union markers"),
    MalformedCase("different_models", "{Product.name}/{Post.slug}", "different models"),
]


class TestAnalyze:
    """Test analyze on well-formed templates."""

    def test_single_segment(self):
        """Test a template with one simple segment."""
        parsed = analyze("products/{Product.name}.js")

        assert parsed.original == "products/{Product.name}.js"
        assert parsed.stripped == "products/{Product.name}"
        assert parsed.model == "Product"
        assert parsed.is_collection

        (segment,) = parsed.segments
        assert segment.raw == "{Product.name}"
        assert segment.start == 9
        assert segment.end == 23
        assert parsed.stripped[segment.start : segment.end] == segment.raw
        assert segment.model == "Product"
        assert segment.field == "name"
        assert segment.field_path == ("name",)
        assert segment.dotted_path == "name"
        assert segment.unions == ()
        assert segment.union_marker is None

    def test_double_underscore_normalization(self):
        """Test that __ separates nested field names."""
        (segment,) = analyze("{Field.a__b__c}").segments

        assert segment.field_path == ("a", "b", "c")
        assert segment.dotted_path == "a.b.c"
        assert segment.normalized_field == "a.b.c"

    def test_union_marker_removed_from_lookup_path(self):
        """Test that a union marker is kept as metadata only."""
        (segment,) = analyze("blog/{MarkdownRemark.parent__(File)__name}.js").segments

        assert segment.field_path == ("parent", "name")
        assert segment.dotted_path == "parent.name"
        assert segment.union_marker == "File"
        assert segment.unions == (UnionMarker(type_name="File", depth=1),)
        assert segment.normalized_field == "parent.(File).name"

    def test_union_marker_on_model(self):
        """Test a union marker directly after the model narrows the model."""
        (segment,) = analyze("{Node.(File)__name}").segments

        assert segment.field_path == ("name",)
        assert segment.unions == (UnionMarker(type_name="File", depth=0),)

    def test_multiple_union_markers(self):
        """Test union markers at different depths."""
        (segment,) = analyze("{Post.parent__(File)__owner__(User)__name}").segments

        assert segment.field_path == ("parent", "owner", "name")
        assert [u.depth for u in segment.unions] == [1, 2]
        assert segment.union_marker == "File"

    def test_multiple_segments_in_order(self):
        """Test segments are returned in template order with offsets."""
        parsed = analyze("{Product.category}/{Product.name}-info.tsx")

        assert parsed.stripped == "{Product.category}/{Product.name}-info"
        assert [s.raw for s in parsed.segments] == [
            "{Product.category}",
            "{Product.name}",
        ]
        for segment in parsed.segments:
            assert parsed.stripped[segment.start : segment.end] == segment.raw

    def test_identical_segments_keep_distinct_offsets(self):
        """Test repeated segments are captured separately."""
        parsed = analyze("{Product.name}/{Product.name}")

        first, second = parsed.segments
        assert first.raw == second.raw
        assert first.start != second.start

    def test_numeric_component(self):
        """Test numeric components are accepted for sequence indexing."""
        (segment,) = analyze("{Post.tags__0}").segments
        assert segment.field_path == ("tags", "0")

    def test_static_template(self):
        """Test a template without segments is a static page."""
        parsed = analyze("about/team.js")

        assert parsed == ParsedTemplate(original="about/team.js", stripped="about/team")
        assert parsed.segments == ()
        assert parsed.model is None
        assert not parsed.is_collection

    def test_splat_route_is_not_a_segment(self):
        """Test that [...] splat syntax passes through untouched."""
        parsed = analyze("image/[...].js")

        assert parsed.stripped == "image/[...]"
        assert parsed.segments == ()

    def test_analyze_is_deterministic(self):
        """Test analyzing twice yields equal results."""
        template = "blog/{MarkdownRemark.parent__(File)__name}.js"
        assert analyze(template) == analyze(template)

    def test_results_are_immutable(self):
        """Test analyzed templates cannot be modified."""
        parsed = analyze("products/{Product.name}.js")

        with pytest.raises(FrozenInstanceError):
            parsed.stripped = "other"
        with pytest.raises(FrozenInstanceError):
            parsed.segments[0].raw = "{Product.id}"


class TestMalformedTemplates:
    """Test structural errors raised at analysis time."""

    @pytest.mark.parametrize("case", MALFORMED_TEMPLATES, ids=lambda c: c.name)
    def test_malformed_template(self, case: MalformedCase):
        """Test that malformed templates raise with a descriptive reason."""
        with pytest.raises(MalformedTemplateError) as exc_info:
            analyze(case.template)

        assert case.reason_fragment in exc_info.value.reason

    @pytest.mark.parametrize("template", ["", None])
    def test_empty_template(self, template):
        """Test that an empty template is rejected."""
        with pytest.raises(MalformedTemplateError, match="non-empty string"):
            analyze(template)

    def test_error_position(self):
        """Test the error points at the offending brace."""
        with pytest.raises(MalformedTemplateError) as exc_info:
            analyze("a/{b/{c}}")
        assert exc_info.value.position == 5


class TestScanSegmentSpans:
    """Test raw brace scanning."""

    def test_spans(self):
        """Test spans cover each braced region including braces."""
        assert scan_segment_spans("{A.b}/x/{A.c}") == [(0, 5), (8, 13)]

    def test_no_spans(self):
        """Test templates without braces have no spans."""
        assert scan_segment_spans("plain/path") == []


class TestHelpers:
    """Test convenience helpers."""

    def test_extract_all_collection_segments(self):
        """Test raw segment extraction."""
        assert extract_all_collection_segments("{Product.category}/{Product.name}.js") == [
            "{Product.category}",
            "{Product.name}",
        ]

    def test_extract_model(self):
        """Test model extraction."""
        assert extract_model("blog/{MarkdownRemark.slug}.js") == "MarkdownRemark"
        assert extract_model("about.js") is None

    def test_segment_is_value_type(self):
        """Test segments compare by value."""
        segment = Segment(
            raw="{P.a}", start=0, end=5, model="P", field="a", field_path=("a",)
        )
        assert segment == analyze("{P.a}").segments[0]
