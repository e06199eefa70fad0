"""Session bootstrap for the interactive browser.

Builds navigation state from the parsed document, picks the keyboard and
screen descriptors, then hands control to ``run_main_loop``. When no
interactive terminal is available the first frame is printed once instead.
"""

from __future__ import annotations

import contextlib
import logging
import os
import shutil
import sys
from collections.abc import Iterator
from dataclasses import replace

from ..document import JsonValue
from ..navigation import NavigationState, PaginationWindow, page_size_for_height
from ..ui_theme import resolve_theme
from .config import BrowserSettings
from .loop import FrameOptions, RuntimeLoopTiming, compose_frame, run_main_loop
from .terminal import TerminalController

logger = logging.getLogger(__name__)

TTY_PATH = "/dev/tty"


def frame_options_for(settings: BrowserSettings) -> FrameOptions:
    return FrameOptions(
        theme=resolve_theme(settings.theme, no_color=settings.no_color),
        style=settings.style,
        colorize=not settings.no_color,
        page_indicator=settings.page_indicator,
    )


@contextlib.contextmanager
def keyboard_fd(stdin_consumed: bool) -> Iterator[int | None]:
    """Yield a descriptor to read keys from, or ``None`` when there is none.

    Stdin is used directly only when it is a terminal that did not carry the
    document; otherwise the controlling terminal is opened.
    """
    if not stdin_consumed and os.isatty(sys.stdin.fileno()):
        yield sys.stdin.fileno()
        return
    try:
        fd = os.open(TTY_PATH, os.O_RDONLY)
    except OSError as exc:
        logger.info("no controlling terminal for keyboard input: %s", exc)
        fd = None
    if fd is None:
        yield None
        return
    try:
        yield fd
    finally:
        os.close(fd)


def print_first_frame(state: NavigationState, options: FrameOptions) -> None:
    """Print one frame without paging, as used for ``--nopager`` and pipes."""
    term = shutil.get_terminal_size((80, 24))
    window = PaginationWindow(page_size=page_size_for_height(term.lines))
    lines = compose_frame(state, window, term.columns, options)
    sys.stdout.write("\n".join(lines) + "\n")
    sys.stdout.flush()


def run_browser(
    document: JsonValue,
    settings: BrowserSettings,
    *,
    stdin_consumed: bool,
    nopager: bool = False,
) -> None:
    """Browse ``document`` until the user quits.

    Raises ``DocumentLoadError`` when the document has nothing to browse.
    """
    state = NavigationState.from_document(document, settings.key_order)
    options = frame_options_for(settings)

    stdout_is_tty = os.isatty(sys.stdout.fileno())
    if nopager or not stdout_is_tty:
        if not stdout_is_tty:
            options = frame_options_for(replace(settings, no_color=True))
        print_first_frame(state, options)
        return

    with keyboard_fd(stdin_consumed) as key_fd:
        if key_fd is None:
            print_first_frame(state, options)
            return
        terminal = TerminalController(key_fd, sys.stdout.fileno())
        run_main_loop(
            state,
            PaginationWindow(),
            terminal,
            key_fd,
            options,
            RuntimeLoopTiming(),
        )
    logger.debug("session ended at path %r", list(state.path))


__all__ = ["TTY_PATH", "frame_options_for", "keyboard_fd", "print_first_frame", "run_browser"]
