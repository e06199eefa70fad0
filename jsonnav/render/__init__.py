"""Rendering of navigation state into terminal frames.

``build_snapshot`` captures everything a frame needs (breadcrumb, the page
of rows, cursor mark and glyph, page indicator) without touching the
terminal. ``render_frame`` turns a snapshot into text and ``paint`` writes a
full-screen frame to a file descriptor.
"""

from __future__ import annotations

import os
from dataclasses import dataclass

from ..document import ValueKind
from ..navigation import Focus, NavigationState, PaginationWindow
from ..ui_theme import DEFAULT_THEME, UITheme
from .ansi import clip_ansi_line, sanitize_terminal_text
from .help import help_line
from .highlight import DEFAULT_STYLE, colorize_key, colorize_value

BREADCRUMB_PREFIX = "You are here: "
DOT_ACTIVE = "•"
DOT_INACTIVE = "○"
PAGE_INDICATOR_ARABIC = "arabic"
PAGE_INDICATOR_DOTS = "dots"


@dataclass(frozen=True)
class RowView:
    """One row of the visible page, with cursor decoration resolved."""

    key: str
    value: str
    kind: ValueKind
    expandable: bool
    selected: bool = False
    focus: Focus = Focus.ON_KEY
    glyph: str = ""


@dataclass(frozen=True)
class ViewSnapshot:
    """Render-ready view of one navigation state."""

    breadcrumb: tuple[str, ...]
    rows: tuple[RowView, ...]
    page_index: int
    page_count: int
    start: int
    end: int
    total_rows: int
    message: str = ""


def build_snapshot(state: NavigationState, window: PaginationWindow) -> ViewSnapshot:
    """Slice the current rows to the cursor's page and mark the cursor row.

    Updates ``window.page_index`` so the next render starts from the page
    that was shown.
    """
    rows = state.rows
    cursor = state.cursor
    start, end = window.slice_for(len(rows), cursor.row_index)
    views: list[RowView] = []
    for index in range(start, end):
        row = rows[index]
        selected = index == cursor.row_index
        views.append(
            RowView(
                key=row.key,
                value=row.rendered_value,
                kind=row.kind,
                expandable=row.expandable,
                selected=selected,
                focus=cursor.focus if selected else Focus.ON_KEY,
                glyph=cursor.glyph if selected else "",
            )
        )
    message = ""
    if state.resolution_error is not None:
        message = f"cannot show this path ({state.resolution_error.reason}); press x to go back"
    return ViewSnapshot(
        breadcrumb=state.path,
        rows=tuple(views),
        page_index=window.page_index,
        page_count=window.total_pages(len(rows)),
        start=start,
        end=end,
        total_rows=len(rows),
        message=message,
    )


def format_breadcrumb(breadcrumb: tuple[str, ...], theme: UITheme | None = None) -> str:
    active_theme = theme or DEFAULT_THEME
    reset = active_theme.reset
    keys = "".join(
        f"{active_theme.breadcrumb_key}{sanitize_terminal_text(key)}{reset}: " for key in breadcrumb
    )
    return f"{active_theme.breadcrumb_label}{BREADCRUMB_PREFIX}{reset}{keys}"


def format_row(
    row: RowView,
    theme: UITheme | None = None,
    style: str = DEFAULT_STYLE,
    colorize: bool = True,
) -> str:
    """Render ``key: value`` with the cursor glyph on the focused side."""
    active_theme = theme or DEFAULT_THEME
    reset = active_theme.reset
    key = sanitize_terminal_text(row.key)
    value = sanitize_terminal_text(row.value)
    if colorize:
        key = colorize_key(key, style)
        value = colorize_value(value, row.kind, style)
    else:
        key = f"{active_theme.row_key}{key}{reset}"

    if not row.selected:
        return f"{key}: {value}"

    glyph = f"{active_theme.cursor_glyph}{row.glyph}{reset}"
    if row.focus is Focus.ON_KEY:
        return f"{glyph} {active_theme.focused_cell}{key}{reset}: {value}"
    return f"{key}: {glyph} {active_theme.focused_cell}{value}{reset}"


def format_page_indicator(
    page_index: int,
    page_count: int,
    indicator: str = PAGE_INDICATOR_ARABIC,
    theme: UITheme | None = None,
) -> str:
    """Return ``3/7`` or a dot strip like ``○○•○`` for the current page."""
    active_theme = theme or DEFAULT_THEME
    reset = active_theme.reset
    if indicator == PAGE_INDICATOR_DOTS:
        dots = [
            f"{active_theme.page_active}{DOT_ACTIVE}{reset}"
            if index == page_index
            else f"{active_theme.page_inactive}{DOT_INACTIVE}{reset}"
            for index in range(page_count)
        ]
        return "".join(dots)
    return f"{active_theme.page_active}{page_index + 1}/{page_count}{reset}"


def render_frame(
    snapshot: ViewSnapshot,
    *,
    width: int = 80,
    theme: UITheme | None = None,
    style: str = DEFAULT_STYLE,
    colorize: bool = True,
    page_indicator: str = PAGE_INDICATOR_ARABIC,
) -> list[str]:
    """Compose the frame lines for ``snapshot`` clipped to ``width`` columns."""
    active_theme = theme or DEFAULT_THEME
    lines = [format_breadcrumb(snapshot.breadcrumb, active_theme), ""]
    if snapshot.message:
        lines.append(f"{active_theme.error}{snapshot.message}{active_theme.reset}")
    lines.extend(format_row(row, active_theme, style, colorize) for row in snapshot.rows)
    lines.append(format_page_indicator(snapshot.page_index, snapshot.page_count, page_indicator, active_theme))
    lines.append("")
    lines.append(help_line(active_theme))

    out: list[str] = []
    for line in lines:
        clipped = clip_ansi_line(line, width)
        if "\033" in clipped:
            clipped += "\033[0m"
        out.append(clipped)
    return out


def paint(lines: list[str], fd: int) -> None:
    """Write a full-screen frame: home, clear, then each line."""
    out = ["\033[H\033[J"]
    out.append("\r\n".join(lines))
    os.write(fd, "".join(out).encode("utf-8", errors="replace"))


__all__ = [
    "BREADCRUMB_PREFIX",
    "PAGE_INDICATOR_ARABIC",
    "PAGE_INDICATOR_DOTS",
    "RowView",
    "ViewSnapshot",
    "build_snapshot",
    "format_breadcrumb",
    "format_page_indicator",
    "format_row",
    "paint",
    "render_frame",
]
