"""Pygments coloring for row keys and values.

Rows are already split into key and value, so instead of re-lexing JSON text
each cell is emitted as a single token of the type Pygments' JSON lexer would
give it, then formatted with a cached 256-color terminal formatter.
"""

from __future__ import annotations

from pygments import format as pygments_format
from pygments.formatters import Terminal256Formatter
from pygments.styles import get_style_by_name
from pygments.token import Keyword, Name, Number, Punctuation, String, Token, _TokenType
from pygments.util import ClassNotFound

from ..document import ValueKind

DEFAULT_STYLE = "monokai"

_VALUE_TOKENS: dict[ValueKind, _TokenType] = {
    ValueKind.STRING: String.Double,
    ValueKind.NUMBER: Number,
    ValueKind.BOOL: Keyword.Constant,
    ValueKind.NULL: Keyword.Constant,
    ValueKind.OBJECT: Punctuation,
    ValueKind.ARRAY: Punctuation,
}
KEY_TOKEN = Name.Tag

_FORMATTERS: dict[str, Terminal256Formatter] = {}
_VALID_STYLES: set[str] = set()
_INVALID_STYLES: set[str] = set()


def normalize_style(style: str | None) -> str:
    """Validate a Pygments style name, falling back to ``monokai``."""
    if not style:
        return DEFAULT_STYLE
    if style in _VALID_STYLES:
        return style
    if style in _INVALID_STYLES:
        return DEFAULT_STYLE
    try:
        get_style_by_name(style)
    except ClassNotFound:
        _INVALID_STYLES.add(style)
        return DEFAULT_STYLE
    _VALID_STYLES.add(style)
    return style


def _formatter_for_style(style: str) -> Terminal256Formatter:
    formatter = _FORMATTERS.get(style)
    if formatter is None:
        formatter = Terminal256Formatter(style=style)
        _FORMATTERS[style] = formatter
    return formatter


def colorize_token(text: str, token: _TokenType, style: str = DEFAULT_STYLE) -> str:
    if not text:
        return text
    formatter = _formatter_for_style(normalize_style(style))
    return pygments_format([(token, text)], formatter)


def colorize_value(text: str, kind: ValueKind, style: str = DEFAULT_STYLE) -> str:
    return colorize_token(text, _VALUE_TOKENS.get(kind, Token.Text), style)


def colorize_key(text: str, style: str = DEFAULT_STYLE) -> str:
    return colorize_token(text, KEY_TOKEN, style)


__all__ = [
    "DEFAULT_STYLE",
    "KEY_TOKEN",
    "colorize_key",
    "colorize_token",
    "colorize_value",
    "normalize_style",
]
