"""Cursor position and key/value focus within the current rows."""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum

GLYPH_RIGHT = "→"
GLYPH_LEFT = "←"


class Focus(Enum):
    ON_KEY = "key"
    ON_VALUE = "value"


@dataclass(frozen=True)
class Cursor:
    """Row index plus which column of that row is focused.

    ``at_terminal`` marks a focused value that cannot be expanded; it is
    never set while the key is focused.
    """

    row_index: int = 0
    focus: Focus = Focus.ON_KEY
    at_terminal: bool = False

    @property
    def on_key(self) -> bool:
        return self.focus is Focus.ON_KEY

    @property
    def glyph(self) -> str:
        """Arrow drawn next to the focused cell."""
        return GLYPH_LEFT if self.at_terminal else GLYPH_RIGHT

    def with_value_focus(self, expandable: bool) -> Cursor:
        return replace(self, focus=Focus.ON_VALUE, at_terminal=not expandable)

    def with_key_focus(self) -> Cursor:
        return replace(self, focus=Focus.ON_KEY, at_terminal=False)


HOME_CURSOR = Cursor()

__all__ = ["Cursor", "Focus", "GLYPH_LEFT", "GLYPH_RIGHT", "HOME_CURSOR"]
