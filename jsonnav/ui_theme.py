"""UI theme definitions and selection helpers.

Themes are UI-only ANSI palettes for breadcrumb, cursor and chrome. Syntax
highlighting style for scalar values remains a separate Pygments setting.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class UITheme:
    """Semantic ANSI palette used by renderers."""

    name: str
    reset: str
    breadcrumb_label: str
    breadcrumb_key: str
    cursor_glyph: str
    row_key: str
    focused_cell: str
    page_active: str
    page_inactive: str
    help_key: str
    help_dim: str
    error: str


DEFAULT_THEME = UITheme(
    name="default",
    reset="\033[0m",
    breadcrumb_label="\033[2;38;5;250m",
    breadcrumb_key="\033[1;38;5;81m",
    cursor_glyph="\033[1;38;5;44m",
    row_key="\033[38;5;110m",
    focused_cell="\033[1m",
    page_active="\033[38;5;252m",
    page_inactive="\033[2;38;5;240m",
    help_key="\033[38;5;229m",
    help_dim="\033[2;38;5;250m",
    error="\033[38;5;203m",
)

OCEAN_THEME = UITheme(
    name="ocean",
    reset="\033[0m",
    breadcrumb_label="\033[2;38;5;110m",
    breadcrumb_key="\033[1;38;5;45m",
    cursor_glyph="\033[1;38;5;39m",
    row_key="\033[38;5;117m",
    focused_cell="\033[1m",
    page_active="\033[38;5;153m",
    page_inactive="\033[2;38;5;24m",
    help_key="\033[38;5;153m",
    help_dim="\033[2;38;5;110m",
    error="\033[38;5;209m",
)

PLAIN_THEME = UITheme(
    name="plain",
    reset="",
    breadcrumb_label="",
    breadcrumb_key="",
    cursor_glyph="",
    row_key="",
    focused_cell="",
    page_active="",
    page_inactive="",
    help_key="",
    help_dim="",
    error="",
)

_THEMES: dict[str, UITheme] = {
    DEFAULT_THEME.name: DEFAULT_THEME,
    OCEAN_THEME.name: OCEAN_THEME,
}


def available_theme_names() -> tuple[str, ...]:
    """Return selectable non-plain theme names."""
    return tuple(sorted(_THEMES.keys()))


def normalize_theme_name(name: str | None) -> str:
    """Return a valid theme name, falling back to default."""
    if not name:
        return DEFAULT_THEME.name
    candidate = str(name).strip().lower()
    if candidate in _THEMES:
        return candidate
    return DEFAULT_THEME.name


def resolve_theme(name: str | None, *, no_color: bool = False) -> UITheme:
    """Return concrete theme for requested name and color mode."""
    if no_color:
        return PLAIN_THEME
    return _THEMES[normalize_theme_name(name)]


__all__ = [
    "UITheme",
    "DEFAULT_THEME",
    "OCEAN_THEME",
    "PLAIN_THEME",
    "available_theme_names",
    "normalize_theme_name",
    "resolve_theme",
]
