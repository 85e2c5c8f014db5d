"""
Core type definitions for pagepath.

This module contains the type aliases shared by the analyzer, the resolver
and the query-shape builder.
"""

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel

Record = Mapping[str, Any] | BaseModel

FieldPath = tuple[str, ...]

Selection = dict[str, "Selection"]
