"""User config file helpers.

Reads display preferences: UI theme, Pygments style, object key order,
and the page-indicator look. All access is defensive: malformed or missing
config falls back to defaults.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path

from platformdirs import user_config_dir

from ..document import KeyOrder, coerce_key_order

logger = logging.getLogger(__name__)

APP_NAME = "jsonnav"
CONFIG_FILENAME = "config.json"
DEFAULT_CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME
CONFIG_PATH = DEFAULT_CONFIG_PATH

PAGE_INDICATORS = ("arabic", "dots")


@dataclass(frozen=True)
class BrowserSettings:
    """Effective display settings after merging config and CLI flags."""

    theme: str | None = None
    style: str = "monokai"
    key_order: KeyOrder = KeyOrder.DOCUMENT
    page_indicator: str = "arabic"
    no_color: bool = False


def load_config() -> dict[str, object]:
    """Load the persisted JSON config object.

    Returns an empty dict when the file is missing, unreadable, malformed, or
    does not decode to a top-level JSON object.
    """
    try:
        data = json.loads(CONFIG_PATH.read_text(encoding="utf-8"))
    except FileNotFoundError:
        return {}
    except (OSError, ValueError) as exc:
        logger.warning("ignoring unreadable config %s: %s", CONFIG_PATH, exc)
        return {}
    return data if isinstance(data, dict) else {}


def _load_string(key: str) -> str | None:
    value = load_config().get(key)
    if not isinstance(value, str):
        return None
    stripped = value.strip()
    return stripped if stripped else None


def load_theme_name() -> str | None:
    """Load persisted UI theme name, returning ``None`` when unset/invalid."""
    return _load_string("theme")


def load_style_name() -> str | None:
    """Load persisted Pygments style name."""
    return _load_string("style")


def load_key_order() -> KeyOrder:
    """Return persisted object key order; anything unrecognized means document order."""
    return coerce_key_order(load_config().get("key_order"))


def load_page_indicator() -> str:
    value = _load_string("page_indicator")
    if value is None or value.lower() not in PAGE_INDICATORS:
        return PAGE_INDICATORS[0]
    return value.lower()


def resolve_settings(
    *,
    theme: str | None = None,
    style: str | None = None,
    sort_keys: bool = False,
    dots: bool = False,
    no_color: bool = False,
) -> BrowserSettings:
    """Merge CLI flags over persisted config values."""
    return BrowserSettings(
        theme=theme if theme is not None else load_theme_name(),
        style=style or load_style_name() or "monokai",
        key_order=KeyOrder.SORTED if sort_keys else load_key_order(),
        page_indicator="dots" if dots else load_page_indicator(),
        no_color=no_color,
    )


__all__ = [
    "APP_NAME",
    "BrowserSettings",
    "CONFIG_PATH",
    "DEFAULT_CONFIG_PATH",
    "PAGE_INDICATORS",
    "load_config",
    "load_key_order",
    "load_page_indicator",
    "load_style_name",
    "load_theme_name",
    "resolve_settings",
]
