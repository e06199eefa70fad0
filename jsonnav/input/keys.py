"""Keyboard dispatch from key tokens to navigation events.

Tokens come from ``read_key``. ``EVENT_KEYS`` is the single binding table;
it is inverted once per handler so a key press is one dict lookup.
"""

from __future__ import annotations

from ..navigation import NavigationEvent, NavigationState

# Arrow keys plus vim-style aliases; "x" backs out as in the key help line.
EVENT_KEYS: dict[NavigationEvent, tuple[str, ...]] = {
    NavigationEvent.UP: ("UP", "k"),
    NavigationEvent.DOWN: ("DOWN", "j"),
    NavigationEvent.LEFT: ("LEFT", "h"),
    NavigationEvent.RIGHT: ("RIGHT", "l"),
    NavigationEvent.ENTER: ("ENTER",),
    NavigationEvent.BACK: ("x",),
    NavigationEvent.QUIT: ("CTRL_C", "q"),
}


def normalize_enter(key: str) -> str:
    """Collapse CR/LF enter tokens into a single ``ENTER`` token."""
    if key in {"ENTER_CR", "ENTER_LF"}:
        return "ENTER"
    return key


def build_key_table(bindings: dict[NavigationEvent, tuple[str, ...]] = EVENT_KEYS) -> dict[str, NavigationEvent]:
    """Invert ``bindings`` into a token -> event lookup.

    Raises ``ValueError`` when one token is bound to two events.
    """
    table: dict[str, NavigationEvent] = {}
    for event, tokens in bindings.items():
        for token in tokens:
            token = normalize_enter(token)
            bound = table.get(token)
            if bound is not None and bound is not event:
                raise ValueError(f"key {token!r} bound to both {bound.name} and {event.name}")
            table[token] = event
    return table


class NavigationKeyHandler:
    """Binds key tokens to transitions on one ``NavigationState``."""

    def __init__(self, state: NavigationState, bindings: dict[NavigationEvent, tuple[str, ...]] = EVENT_KEYS) -> None:
        self.state = state
        self._table = build_key_table(bindings)

    def event_for(self, key: str) -> NavigationEvent | None:
        return self._table.get(normalize_enter(key))

    def handle_key(self, key: str) -> tuple[bool, bool]:
        """Apply ``key`` and return ``(changed, should_quit)``.

        Unbound keys change nothing.
        """
        event = self.event_for(key)
        if event is None:
            return False, self.state.quit_requested
        changed = self.state.apply(event)
        return bool(changed), self.state.quit_requested


__all__ = ["EVENT_KEYS", "NavigationKeyHandler", "build_key_table", "normalize_enter"]
