"""
Slug generation for resolved path values.

This module provides the explicit slug configuration used by the path
resolver and the slugify helpers built on pymdownx.slugs. Values are
slugified one "/"-delimited piece at a time so that a value such as
"guides/Getting Started" keeps its path hierarchy.
"""

from __future__ import annotations

import re
import unicodedata
from collections.abc import Callable
from dataclasses import dataclass
from dataclasses import fields as dataclass_fields
from pathlib import Path
from typing import Any

from pymdownx.slugs import slugify as _md_slugify

from pagepath.exceptions import SlugOptionsError

PATH_SEPARATOR = "/"

# Punctuation between words becomes a word break; apostrophes are dropped
PUNCTUATION_PATTERN = re.compile(r"[^\w\s'’]")
APOSTROPHE_PATTERN = re.compile(r"['’]")
# Word breaks that become a single separator
WORD_BREAK_PATTERN = re.compile(r"[\s_\-]+")
CAMEL_BOUNDARY_PATTERN = re.compile(r"([a-z\d])([A-Z])")
CAMEL_ACRONYM_PATTERN = re.compile(r"([A-Z]+)([A-Z][a-z\d]+)")

# Letters NFKD does not decompose into an ASCII base
TRANSLITERATIONS = str.maketrans(
    {
        "ß": "ss",
        "æ": "ae",
        "Æ": "AE",
        "ø": "o",
        "Ø": "O",
        "œ": "oe",
        "Œ": "OE",
        "đ": "d",
        "Đ": "D",
        "ł": "l",
        "Ł": "L",
        "þ": "th",
        "Þ": "TH",
        "ð": "d",
        "Ð": "D",
    }
)


@dataclass(frozen=True)
class SlugOptions:
    """Configuration for slugifying path values.

    Punctuation between words becomes the separator ("foo.bar" -> "foo-bar",
    "1.5" -> "1-5") and apostrophes are dropped ("Don't" -> "dont").
    With strip_diacritics, text is folded to ASCII: accents are removed,
    letters such as "ß" or "ø" are transliterated ("ss", "o") and letters
    with no ASCII base (Cyrillic, CJK, ...) are dropped. Disable it to keep
    every script.

    Examples:
        # Defaults: lowercase, "-" separator, diacritics stripped
        options = SlugOptions()

        # Partial override from dict
        options = SlugOptions.from_dict({"separator": "_", "lowercase": False})

        # From YAML file
        options = SlugOptions.from_yaml("slugs.yaml")
    """

    lowercase: bool = True
    separator: str = "-"
    strip_diacritics: bool = True
    # Split camelCase words ("fooBar" -> "foo-bar")
    decamelize: bool = True
    # Applied in order before any other processing
    replacements: tuple[tuple[str, str], ...] = (("&", " and "),)

    def __post_init__(self) -> None:
        if not isinstance(self.separator, str) or len(self.separator) != 1:
            raise SlugOptionsError("separator", "must be exactly one character")
        if self.separator == PATH_SEPARATOR:
            raise SlugOptionsError("separator", f"cannot be '{PATH_SEPARATOR}'")
        if self.separator.isalnum():
            raise SlugOptionsError("separator", "cannot be a letter or digit")
        for replacement in self.replacements:
            if len(replacement) != 2 or not replacement[0]:
                raise SlugOptionsError(
                    "replacements", f"invalid pair {replacement!r}"
                )

    @classmethod
    def from_dict(cls, config: dict[str, Any]) -> SlugOptions:
        """Create from dict, only overriding specified values.

        Args:
            config: Dictionary with partial overrides. Only keys matching
                   dataclass fields will be used.

        Returns:
            SlugOptions instance with specified overrides

        Example:
            config = {"separator": "_", "replacements": [["+", " plus "]]}
            options = SlugOptions.from_dict(config)
        """
        valid_fields = {f.name for f in dataclass_fields(cls)}
        filtered = {k: v for k, v in config.items() if k in valid_fields}
        if "replacements" in filtered:
            filtered["replacements"] = tuple(
                tuple(pair) for pair in filtered["replacements"]
            )
        return cls(**filtered)

    @classmethod
    def from_yaml(cls, yaml_path: str | Path) -> SlugOptions:
        """Create from YAML file with partial overrides.

        Args:
            yaml_path: Path to YAML file containing configuration

        Returns:
            SlugOptions instance with YAML overrides

        Example YAML:
            separator: "_"
            lowercase: false
            replacements:
              - ["+", " plus "]
        """
        import yaml

        path = Path(yaml_path)
        with path.open() as f:
            config = yaml.safe_load(f) or {}

        return cls.from_dict(config)


def build_slugifier(options: SlugOptions | None = None) -> Callable[[str], str]:
    """
    Build a slugify function for one "/"-free piece of text.

    Params:
        options: Slug configuration, defaults to SlugOptions()

    Returns:
        Function mapping text to its slug
    """
    options = options or SlugOptions()
    md_slugify = _md_slugify(case="lower" if options.lowercase else "none")
    separator = options.separator
    repeated_separator = re.compile(f"{re.escape(separator)}{{2,}}")

    def slugify(text: str) -> str:
        for old, new in options.replacements:
            text = text.replace(old, new)
        text = PUNCTUATION_PATTERN.sub(" ", text)
        text = APOSTROPHE_PATTERN.sub("", text)
        if options.decamelize:
            text = CAMEL_ACRONYM_PATTERN.sub(r"\1 \2", text)
            text = CAMEL_BOUNDARY_PATTERN.sub(r"\1 \2", text)
        if options.strip_diacritics:
            text = strip_diacritics(text)
        text = WORD_BREAK_PATTERN.sub(" ", text)

        slug = md_slugify(text, sep=separator)
        return repeated_separator.sub(separator, slug).strip(separator)

    return slugify


def strip_diacritics(text: str) -> str:
    """
    Fold text to ASCII ("Café" -> "Cafe", "Straße" -> "Strasse").

    Letters with no ASCII base, such as Cyrillic or CJK, are dropped.
    """
    text = text.translate(TRANSLITERATIONS)
    decomposed = unicodedata.normalize("NFKD", text)
    return decomposed.encode("ascii", "ignore").decode("ascii")


def stringify_value(value: Any) -> str:
    """
    Convert a resolved record value to text.

    Booleans render as "true"/"false", integral floats drop their fraction
    and sequences join their items with commas.
    """
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, (list, tuple)):
        return ",".join(stringify_value(item) for item in value)
    return str(value)


def safe_slugify(
    value: Any,
    options: SlugOptions | None = None,
    slugifier: Callable[[str], str] | None = None,
) -> str:
    """
    Slugify a value while keeping its "/" path hierarchy.

    Each "/"-delimited piece is slugified on its own and the pieces are
    joined back with "/".

    Params:
        value: Resolved record value (string, number, ...)
        options: Slug configuration used when no slugifier is given
        slugifier: Prebuilt function from build_slugifier

    Returns:
        Slug-safe text with the original number of "/" separators

    Examples:
        "Veggie Burger" -> "veggie-burger"
        "guides/Getting Started" -> "guides/getting-started"
        42 -> "42"
    """
    slugify = slugifier or build_slugifier(options)
    pieces = stringify_value(value).split(PATH_SEPARATOR)
    return PATH_SEPARATOR.join(slugify(piece) for piece in pieces)
