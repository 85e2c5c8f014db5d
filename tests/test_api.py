"""
Tests for the top-level pagepath API.
"""

import pagepath
from pagepath import SlugOptions, analyze, derive_path


def test_version_is_exposed():
    """Test the installed version is exposed."""
    assert isinstance(pagepath.__version__, str)
    assert pagepath.__version__


def test_public_api(reporter):
    """Test the documented workflow through top-level imports."""
    parsed = analyze("blog/{MarkdownRemark.parent__(File)__name}.js")
    result = derive_path(
        parsed,
        {"id": "2", "parent": {"name": "Learning Gatsby"}},
        reporter=reporter,
        options=SlugOptions(),
    )

    assert result.path == "blog/learning-gatsby"
    assert parsed.segments[0].union_marker == "File"
