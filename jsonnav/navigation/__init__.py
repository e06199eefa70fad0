"""Navigation core: cursor, transitions, and page windowing."""

from __future__ import annotations

from .cursor import GLYPH_LEFT, GLYPH_RIGHT, HOME_CURSOR, Cursor, Focus
from .events import NavigationEvent, ViewportResize
from .pagination import PaginationWindow, page_count, page_size_for_height, visible_slice
from .state import NavigationState

__all__ = [
    "Cursor",
    "Focus",
    "GLYPH_LEFT",
    "GLYPH_RIGHT",
    "HOME_CURSOR",
    "NavigationEvent",
    "NavigationState",
    "PaginationWindow",
    "ViewportResize",
    "page_count",
    "page_size_for_height",
    "visible_slice",
]
