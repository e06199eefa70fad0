"""Key help line shown at the bottom of every frame."""

from __future__ import annotations

from ..ui_theme import DEFAULT_THEME, UITheme

HELP_ITEMS: tuple[tuple[str, str], ...] = (
    ("Quit", "ctrl+c"),
    ("Up", "↑"),
    ("Down", "↓"),
    ("Left", "←"),
    ("Right", "→"),
    ("Expand", "enter"),
    ("Back", "x"),
)


def help_line(theme: UITheme | None = None) -> str:
    """Return ``Quit: ctrl+c  Up: ↑ ...`` styled with ``theme``."""
    active_theme = theme or DEFAULT_THEME
    reset = active_theme.reset
    parts = [
        f"{active_theme.help_dim}{label}:{reset} {active_theme.help_key}{key}{reset}"
        for label, key in HELP_ITEMS
    ]
    return "  ".join(parts)


__all__ = ["HELP_ITEMS", "help_line"]
