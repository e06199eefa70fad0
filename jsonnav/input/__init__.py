"""Input-layer public API for key decoding and key dispatch.

Low-level terminal decoding (`read_key`) is kept apart from the mapping of
key tokens onto navigation events.
"""

from .keys import EVENT_KEYS, NavigationKeyHandler, build_key_table, normalize_enter
from .reader import ESC_SEQUENCE_TIMEOUT_MS, read_key

__all__ = [
    "ESC_SEQUENCE_TIMEOUT_MS",
    "EVENT_KEYS",
    "NavigationKeyHandler",
    "build_key_table",
    "normalize_enter",
    "read_key",
]
