"""
Field path lookup against loosely structured records.

Records are nested mappings, pydantic models, sequences and scalars. Every
value is classified into a ValueKind before it is traversed, and lookups
return an explicit LookupResult so an absent field is never confused with a
field holding a falsy value such as 0, False or "".
"""

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from enum import Enum
from typing import Any

from pydantic import BaseModel

from pagepath.core.types import FieldPath

# Grouped queries wrap the matching items in this field
AGGREGATE_FIELD = "nodes"


class ValueKind(Enum):
    """Shape of a record value for traversal purposes."""

    MAPPING = "mapping"
    SEQUENCE = "sequence"
    SCALAR = "scalar"
    UNDEFINED = "undefined"


@dataclass(frozen=True)
class LookupResult:
    """
    Outcome of a field path lookup.

    Params:
        found: Whether every component of the path resolved to a defined value
        value: The resolved value; meaningless when found is False
    """

    found: bool
    value: Any = None

    @classmethod
    def missing(cls) -> "LookupResult":
        """Result for a path that did not resolve."""
        return cls(found=False)


def classify(value: Any) -> ValueKind:
    """
    Classify a record value.

    None counts as undefined, matching a null in query results. Strings and
    bytes are scalars even though they are sequences.
    """
    if value is None:
        return ValueKind.UNDEFINED
    if isinstance(value, (Mapping, BaseModel)):
        return ValueKind.MAPPING
    if isinstance(value, (str, bytes, bytearray)):
        return ValueKind.SCALAR
    if isinstance(value, Sequence):
        return ValueKind.SEQUENCE
    return ValueKind.SCALAR


def get_child(value: Any, name: str) -> LookupResult:
    """
    Look up a single field name on a value.

    Params:
        value: Mapping, pydantic model or sequence to step into
        name: Field name, or a decimal index for sequences

    Returns:
        LookupResult for the child value
    """
    kind = classify(value)

    if kind is ValueKind.MAPPING:
        if isinstance(value, BaseModel):
            extra = value.model_extra or {}
            if name in type(value).model_fields:
                child = getattr(value, name)
            elif name in extra:
                child = extra[name]
            else:
                return LookupResult.missing()
        elif name in value:
            child = value[name]
        else:
            return LookupResult.missing()
    elif kind is ValueKind.SEQUENCE:
        if not name.isdigit() or int(name) >= len(value):
            return LookupResult.missing()
        child = value[int(name)]
    else:
        return LookupResult.missing()

    if classify(child) is ValueKind.UNDEFINED:
        return LookupResult.missing()
    return LookupResult(found=True, value=child)


def lookup(value: Any, field_path: FieldPath) -> LookupResult:
    """
    Recursively resolve a field path from root to leaf.

    Params:
        value: Value to start from
        field_path: Field names ordered root-to-leaf

    Returns:
        LookupResult for the leaf, missing if any step is absent

    Examples:
        lookup({"a": {"b": 0}}, ("a", "b")) -> LookupResult(True, 0)
        lookup({"a": {}}, ("a", "b")) -> LookupResult(False)
    """
    if not field_path:
        if classify(value) is ValueKind.UNDEFINED:
            return LookupResult.missing()
        return LookupResult(found=True, value=value)

    step = get_child(value, field_path[0])
    if not step.found:
        return step
    return lookup(step.value, field_path[1:])


def first_aggregate_item(record: Any) -> LookupResult:
    """
    First item of a grouped record's aggregate sequence.

    Returns:
        LookupResult for record["nodes"][0], missing when the record has no
        non-empty aggregate
    """
    aggregate = get_child(record, AGGREGATE_FIELD)
    if not aggregate.found or classify(aggregate.value) is not ValueKind.SEQUENCE:
        return LookupResult.missing()
    return get_child(aggregate.value, "0")


def lookup_field(record: Any, field_path: FieldPath) -> LookupResult:
    """
    Resolve a field path on a record, preferring the aggregate.

    The first item of the record's aggregate is consulted first; the record
    itself is consulted only when the aggregate is absent or does not
    resolve the path. The aggregate value wins when both would resolve.

    Params:
        record: Record supplied for one resolution
        field_path: Field names ordered root-to-leaf

    Returns:
        LookupResult for the first lookup that found a value
    """
    item = first_aggregate_item(record)
    if item.found:
        result = lookup(item.value, field_path)
        if result.found:
            return result
    return lookup(record, field_path)
