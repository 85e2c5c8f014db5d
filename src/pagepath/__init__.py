"""
pagepath - Collection path templating for static site builders

pagepath analyzes file-path templates such as "products/{Product.name}.js"
and derives the concrete, slug-safe page path for each data record.
"""

from importlib.metadata import version

from pagepath.execution.resolution import DerivedPath, PathResolver, derive_path, resolve
from pagepath.parsing.parser import ParsedTemplate, Segment, UnionMarker, analyze
from pagepath.templates.slugify import SlugOptions

__version__ = version("pagepath")

__all__ = [
    "__version__",
    "DerivedPath",
    "ParsedTemplate",
    "PathResolver",
    "Segment",
    "SlugOptions",
    "UnionMarker",
    "analyze",
    "derive_path",
    "resolve",
]
