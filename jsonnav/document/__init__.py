"""Document model: value classification, row projection, and loading.

Exposes the pure helpers that turn a parsed JSON value into rows.
Nothing here holds navigation or cursor state.
"""

from __future__ import annotations

from .loader import parse_document, read_document
from .rows import Row, make_row, project, render_value
from .values import (
    JsonValue,
    KeyOrder,
    ValueClass,
    ValueKind,
    classify,
    coerce_key_order,
    entries,
    is_collection,
    kind_of,
    resolve,
)

__all__ = [
    "JsonValue",
    "KeyOrder",
    "Row",
    "ValueClass",
    "ValueKind",
    "classify",
    "coerce_key_order",
    "entries",
    "is_collection",
    "kind_of",
    "make_row",
    "parse_document",
    "project",
    "read_document",
    "render_value",
    "resolve",
]
