"""
Path string utilities for collection templates.

This module provides the small string transformations shared by the
template analyzer and the path resolver: extension removal, field
delimiter normalization and separator collapsing.
"""

import re

# A dot followed by alphanumerics at the end of the final path component
FILE_EXTENSION_PATTERN = re.compile(r"\.[A-Za-z0-9]+$")
DOUBLE_FORWARD_SLASHES = re.compile(r"//+")

FIELD_DELIMITER = "__"
PERIOD_DELIMITER = "."


def remove_file_extension(path: str) -> str:
    """
    Remove the file extension from the final component of a path.

    Params:
        path: Template path (e.g., "products/{Product.name}.js")

    Returns:
        Path without its extension

    Examples:
        "products/{Product.name}.js" -> "products/{Product.name}"
        "blog/index.tsx" -> "blog/index"
        "image/[...]" -> "image/[...]"
    """
    return FILE_EXTENSION_PATTERN.sub("", path)


def switch_to_period_delimiters(field: str) -> str:
    """
    Rewrite double-underscore field delimiters to periods.

    Params:
        field: Field reference using "__" between names

    Returns:
        Dotted field reference

    Examples:
        "a__b__c" -> "a.b.c"
        "name" -> "name"
    """
    return field.replace(FIELD_DELIMITER, PERIOD_DELIMITER)


def split_field_components(field: str) -> list[str]:
    """
    Split a field reference into its components.

    Params:
        field: Field reference using "__" between names

    Returns:
        List of components, union markers included as written

    Examples:
        "parent__(File)__name" -> ["parent", "(File)", "name"]
    """
    if not field:
        return []
    return field.split(FIELD_DELIMITER)


def join_field_path(field_path: tuple[str, ...] | list[str]) -> str:
    """Join field names into a dotted path."""
    return PERIOD_DELIMITER.join(field_path)


def collapse_slashes(path: str) -> str:
    """
    Collapse runs of forward slashes into a single slash.

    Params:
        path: Path that may contain "//" after substitution

    Returns:
        Path without consecutive slashes
    """
    return DOUBLE_FORWARD_SLASHES.sub("/", path)
