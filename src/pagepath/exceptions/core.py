"""
Exception classes for collection path templating.

This module defines specific exception types for the error conditions that
can occur while analyzing a path template or deriving a path for a record.
"""

import json
from typing import TYPE_CHECKING, Any

from pydantic import BaseModel

if TYPE_CHECKING:
    from pagepath.parsing.parser import Segment


class PagePathError(Exception):
    """Base exception for all pagepath errors."""

    pass


class MalformedTemplateError(PagePathError):
    """Raised when a path template cannot be analyzed."""

    def __init__(self, template: str, reason: str, position: int | None = None):
        """
        Initialize the exception.

        Params:
            template: The template that failed analysis
            reason: Why the template is malformed
            position: Offset in the template where the problem was found
        """
        self.template = template
        self.reason = reason
        self.position = position

        message = f"Malformed path template '{template}': {reason}"
        if position is not None:
            message += f" (at position {position})"
        super().__init__(message)


class UnresolvedFieldError(PagePathError):
    """Raised when a segment's field path has no value in a record."""

    def __init__(self, segment: "Segment", record: Any):
        """
        Initialize the exception.

        Params:
            segment: The segment whose field path did not resolve
            record: The record the lookup ran against
        """
        self.segment = segment
        self.record = record
        super().__init__(
            f"Could not find value in the following record for key {segment.raw} "
            f"(transformed to {segment.dotted_path})"
        )

    def serialized_record(self) -> str:
        """Serialize the offending record as indented JSON for diagnostics."""
        return serialize_record(self.record)


class PathResolutionError(PagePathError):
    """Raised when a derived path is used although some segments failed."""

    def __init__(self, template: str, errors: tuple[UnresolvedFieldError, ...]):
        """
        Initialize the exception.

        Params:
            template: The template being resolved
            errors: Every unresolved segment error collected during resolution
        """
        self.template = template
        self.errors = errors

        fields = ", ".join(error.segment.raw for error in errors)
        super().__init__(
            f"Path template '{template}' failed to resolve "
            f"{len(errors)} segment(s): {fields}"
        )


class SlugOptionsError(PagePathError):
    """Raised when slug configuration is invalid."""

    def __init__(self, option: str, reason: str):
        """
        Initialize the exception.

        Params:
            option: Name of the offending option
            reason: Why the value is invalid
        """
        self.option = option
        self.reason = reason
        super().__init__(f"Invalid slug option '{option}': {reason}")


def serialize_record(record: Any) -> str:
    """
    Serialize a record for error output.

    pydantic models (at any depth) are dumped in JSON mode; anything else
    that JSON cannot represent falls back to its string form.

    Params:
        record: Record to serialize

    Returns:
        JSON text indented by four spaces
    """
    return json.dumps(record, indent=4, default=_json_default, ensure_ascii=False)


def _json_default(value: Any) -> Any:
    if isinstance(value, BaseModel):
        return value.model_dump(mode="json")
    return str(value)
