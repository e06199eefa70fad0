"""Projection of collection entries into display rows."""

from __future__ import annotations

from dataclasses import dataclass

from .values import JsonValue, KeyOrder, ValueKind, entries, is_collection, kind_of

OBJECT_PLACEHOLDER = "{}"
ARRAY_PLACEHOLDER = "[]"


@dataclass(frozen=True)
class Row:
    """One visible ``key: value`` line of the current view."""

    key: str
    rendered_value: str
    expandable: bool
    kind: ValueKind = ValueKind.STRING

    def plain_text(self) -> str:
        return f"{self.key}: {self.rendered_value}"


def render_value(value: JsonValue) -> str:
    """Render a JSON value as shown in the value column.

    Integers print as digits, floats in fixed-point with six decimals,
    booleans lowercase, collections as ``{}``/``[]`` placeholders and null
    as an empty string.
    """
    kind = kind_of(value)
    if kind is ValueKind.STRING:
        return value
    if kind is ValueKind.BOOL:
        return "true" if value else "false"
    if kind is ValueKind.NUMBER:
        if isinstance(value, int):
            return str(value)
        return f"{value:f}"
    if kind is ValueKind.OBJECT:
        return OBJECT_PLACEHOLDER
    if kind is ValueKind.ARRAY:
        return ARRAY_PLACEHOLDER
    return ""


def make_row(key: str, value: JsonValue) -> Row:
    kind = kind_of(value)
    return Row(
        key=key,
        rendered_value=render_value(value),
        expandable=kind in {ValueKind.OBJECT, ValueKind.ARRAY},
        kind=kind,
    )


def project(value: JsonValue, key_order: KeyOrder = KeyOrder.DOCUMENT) -> list[Row]:
    """Build rows for every entry of ``value``; scalars yield no rows."""
    if not is_collection(value):
        return []
    return [make_row(key, child) for key, child in entries(value, key_order)]


__all__ = [
    "ARRAY_PLACEHOLDER",
    "OBJECT_PLACEHOLDER",
    "Row",
    "make_row",
    "project",
    "render_value",
]
