"""Classification and traversal of parsed JSON values.

Values are the plain Python objects produced by ``json.loads``. Every helper
tags them through the closed ``ValueKind`` enum first, so adding a variant
means touching ``kind_of`` and nothing that silently guesses types.
"""

from __future__ import annotations

from collections.abc import Sequence
from enum import Enum
from typing import Any

from ..errors import PathResolutionError

JsonValue = Any


class ValueKind(Enum):
    """Tag for each JSON variant."""

    NULL = "null"
    BOOL = "bool"
    NUMBER = "number"
    STRING = "string"
    OBJECT = "object"
    ARRAY = "array"


class ValueClass(Enum):
    """Whether a value can be descended into."""

    SCALAR = "scalar"
    COLLECTION = "collection"


class KeyOrder(Enum):
    """Ordering of object keys when listing entries."""

    DOCUMENT = "document"
    SORTED = "sorted"


_COLLECTION_KINDS = frozenset({ValueKind.OBJECT, ValueKind.ARRAY})


def kind_of(value: JsonValue) -> ValueKind:
    """Return the JSON variant of ``value``.

    ``bool`` is checked before numbers because it subclasses ``int``.
    Raises ``TypeError`` for objects ``json.loads`` never produces.
    """
    if value is None:
        return ValueKind.NULL
    if isinstance(value, bool):
        return ValueKind.BOOL
    if isinstance(value, (int, float)):
        return ValueKind.NUMBER
    if isinstance(value, str):
        return ValueKind.STRING
    if isinstance(value, dict):
        return ValueKind.OBJECT
    if isinstance(value, list):
        return ValueKind.ARRAY
    raise TypeError(f"not a JSON value: {type(value).__name__}")


def classify(value: JsonValue) -> ValueClass:
    if kind_of(value) in _COLLECTION_KINDS:
        return ValueClass.COLLECTION
    return ValueClass.SCALAR


def is_collection(value: JsonValue) -> bool:
    return classify(value) is ValueClass.COLLECTION


def coerce_key_order(value: object) -> KeyOrder:
    """Parse a config/CLI key-order token, falling back to document order."""
    if isinstance(value, KeyOrder):
        return value
    if isinstance(value, str):
        candidate = value.strip().lower()
        for order in KeyOrder:
            if order.value == candidate:
                return order
    return KeyOrder.DOCUMENT


def entries(value: JsonValue, key_order: KeyOrder = KeyOrder.DOCUMENT) -> list[tuple[str, JsonValue]]:
    """List ``(key, child)`` pairs of a collection.

    Arrays use stringified zero-based indices in sequence order. Objects keep
    document order or are sorted lexically, depending on ``key_order``.
    """
    kind = kind_of(value)
    if kind is ValueKind.ARRAY:
        return [(str(index), child) for index, child in enumerate(value)]
    if kind is ValueKind.OBJECT:
        pairs = [(str(key), child) for key, child in value.items()]
        if key_order is KeyOrder.SORTED:
            pairs.sort(key=lambda pair: pair[0])
        return pairs
    raise TypeError(f"entries() requires an object or array, got {kind.value}")


def _array_index(key: str, length: int) -> int | None:
    """Map a canonical decimal index string to a list index."""
    if not key.isdigit() or not key.isascii():
        return None
    if len(key) > 1 and key.startswith("0"):
        return None
    index = int(key)
    if index >= length:
        return None
    return index


def child(value: JsonValue, key: str) -> JsonValue:
    """Look up one key in a collection, raising ``KeyError`` when absent."""
    kind = kind_of(value)
    if kind is ValueKind.OBJECT:
        return value[key]
    if kind is ValueKind.ARRAY:
        index = _array_index(key, len(value))
        if index is None:
            raise KeyError(key)
        return value[index]
    raise KeyError(key)


def resolve(root: JsonValue, path: Sequence[str]) -> JsonValue:
    """Walk ``path`` from ``root`` and return the value it lands on.

    Every step must start from a collection and name an existing key.
    Raises ``PathResolutionError`` on the first step that fails.
    """
    path = tuple(path)
    current = root
    for step, key in enumerate(path):
        if not is_collection(current):
            raise PathResolutionError(path, step, f"{kind_of(current).value} value has no children")
        try:
            current = child(current, key)
        except KeyError:
            raise PathResolutionError(path, step, f"key {key!r} not found") from None
    return current


__all__ = [
    "JsonValue",
    "KeyOrder",
    "ValueClass",
    "ValueKind",
    "child",
    "classify",
    "coerce_key_order",
    "entries",
    "is_collection",
    "kind_of",
    "resolve",
]
