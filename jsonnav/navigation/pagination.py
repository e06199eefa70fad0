"""Page-based viewport math for the row list.

The window moves by whole pages: the cursor's row picks the page, and the
page picks the slice. Everything here is pure so it can run on every render
with whatever page size the terminal currently allows.
"""

from __future__ import annotations

from dataclasses import dataclass

# Breadcrumb, blank line, page indicator, blank line, key help.
FRAME_CHROME_LINES = 5


def page_size_for_height(height: int) -> int:
    """Return how many rows fit in a terminal ``height`` lines tall."""
    return max(1, height - FRAME_CHROME_LINES)


def page_count(total_rows: int, page_size: int) -> int:
    page_size = max(1, page_size)
    if total_rows <= 0:
        return 1
    return (total_rows - 1) // page_size + 1


def visible_slice(
    total_rows: int,
    page_size: int,
    cursor_index: int,
    current_page_index: int = 0,
) -> tuple[int, int, int]:
    """Return ``(start, end, page_index)`` for the page showing the cursor.

    The current page is kept when it still contains the cursor (after
    clamping it to the available pages); otherwise the cursor's own page is
    selected. ``start <= cursor_index < end`` holds for any non-empty list.
    """
    page_size = max(1, page_size)
    if total_rows <= 0:
        return 0, 0, 0

    cursor_index = max(0, min(cursor_index, total_rows - 1))
    last_page = page_count(total_rows, page_size) - 1
    page_index = max(0, min(current_page_index, last_page))

    start = page_index * page_size
    end = min(total_rows, start + page_size)
    if not start <= cursor_index < end:
        page_index = cursor_index // page_size
        start = page_index * page_size
        end = min(total_rows, start + page_size)
    return start, end, page_index


@dataclass
class PaginationWindow:
    """Page size and page index carried between renders."""

    page_size: int = 10
    page_index: int = 0

    def resize(self, height: int) -> bool:
        """Apply a viewport height; return whether the page size changed."""
        page_size = page_size_for_height(height)
        if page_size == self.page_size:
            return False
        self.page_size = page_size
        return True

    def slice_for(self, total_rows: int, cursor_index: int) -> tuple[int, int]:
        start, end, self.page_index = visible_slice(total_rows, self.page_size, cursor_index, self.page_index)
        return start, end

    def total_pages(self, total_rows: int) -> int:
        return page_count(total_rows, self.page_size)


__all__ = [
    "FRAME_CHROME_LINES",
    "PaginationWindow",
    "page_count",
    "page_size_for_height",
    "visible_slice",
]
