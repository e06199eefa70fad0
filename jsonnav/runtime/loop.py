"""Main interactive event loop for the terminal UI.

One key is read and applied per iteration; a frame is painted only when a
transition or a viewport resize changed what is visible.
"""

from __future__ import annotations

import logging
import os
import shutil
from collections.abc import Callable
from dataclasses import dataclass

from ..input import NavigationKeyHandler, read_key
from ..navigation import NavigationState, PaginationWindow, ViewportResize
from ..render import PAGE_INDICATOR_ARABIC, build_snapshot, paint, render_frame
from ..ui_theme import DEFAULT_THEME, UITheme
from .terminal import TerminalController

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RuntimeLoopTiming:
    """Timing constants controlling interactive loop behavior."""

    key_timeout_ms: int = 120


@dataclass(frozen=True)
class FrameOptions:
    """Presentation settings applied to every painted frame."""

    theme: UITheme = DEFAULT_THEME
    style: str = "monokai"
    colorize: bool = True
    page_indicator: str = PAGE_INDICATOR_ARABIC


def apply_resize(window: PaginationWindow, event: ViewportResize) -> bool:
    """Update page size from a host-reported height; return whether it changed."""
    changed = window.resize(event.height)
    if changed:
        logger.debug("viewport height %d -> page size %d", event.height, window.page_size)
    return changed


def compose_frame(
    state: NavigationState,
    window: PaginationWindow,
    width: int,
    options: FrameOptions,
) -> list[str]:
    snapshot = build_snapshot(state, window)
    return render_frame(
        snapshot,
        width=width,
        theme=options.theme,
        style=options.style,
        colorize=options.colorize,
        page_indicator=options.page_indicator,
    )


def run_main_loop(
    state: NavigationState,
    window: PaginationWindow,
    terminal: TerminalController,
    stdin_fd: int,
    options: FrameOptions,
    timing: RuntimeLoopTiming = RuntimeLoopTiming(),
    get_terminal_size: Callable[..., os.terminal_size] = shutil.get_terminal_size,
) -> None:
    """Run the interactive loop until a quit key is pressed."""
    handler = NavigationKeyHandler(state)
    last_height: int | None = None
    dirty = True
    skip_next_lf = False

    with terminal.raw_mode():
        while True:
            term = get_terminal_size((80, 24))
            if term.lines != last_height:
                last_height = term.lines
                if apply_resize(window, ViewportResize(term.lines)):
                    dirty = True

            if dirty:
                paint(compose_frame(state, window, term.columns, options), terminal.stdout_fd)
                dirty = False

            key = read_key(stdin_fd, timeout_ms=timing.key_timeout_ms)
            if key == "":
                continue
            if skip_next_lf and key == "ENTER_LF":
                skip_next_lf = False
                continue
            skip_next_lf = key == "ENTER_CR"

            changed, should_quit = handler.handle_key(key)
            if should_quit:
                break
            if changed:
                dirty = True


__all__ = [
    "FrameOptions",
    "RuntimeLoopTiming",
    "apply_resize",
    "compose_frame",
    "run_main_loop",
]
