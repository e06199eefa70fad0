"""Navigation state machine over (path, rows, cursor).

``NavigationState`` owns the parsed document for the whole session. Rows are
a cache derived from the path: every descend/ascend rebuilds them from the
root instead of patching the previous list. Transitions return whether the
visible state changed so the caller can skip redundant redraws.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from ..document import JsonValue, KeyOrder, Row, is_collection, kind_of, project, resolve
from ..errors import DocumentLoadError, PathResolutionError
from .cursor import HOME_CURSOR, Cursor
from .events import NavigationEvent

logger = logging.getLogger(__name__)


class NavigationState:
    """Current view into a JSON document and the cursor inside it."""

    def __init__(self, root: JsonValue, key_order: KeyOrder = KeyOrder.DOCUMENT) -> None:
        self._root = root
        self.key_order = key_order
        self._path: tuple[str, ...] = ()
        self._rows: tuple[Row, ...] = tuple(project(root, key_order))
        self._cursor = HOME_CURSOR
        self.resolution_error: PathResolutionError | None = None
        self.quit_requested = False
        self._handlers: dict[NavigationEvent, Callable[[], bool]] = {
            NavigationEvent.UP: self.move_up,
            NavigationEvent.DOWN: self.move_down,
            NavigationEvent.RIGHT: self.focus_value,
            NavigationEvent.LEFT: self.focus_key,
            NavigationEvent.ENTER: self.descend,
            NavigationEvent.BACK: self.ascend,
            NavigationEvent.QUIT: self.quit,
        }

    @classmethod
    def from_document(cls, root: JsonValue, key_order: KeyOrder = KeyOrder.DOCUMENT) -> NavigationState:
        """Start a session on ``root``.

        Raises ``DocumentLoadError`` when the root is a scalar or an empty
        collection, since there would be nothing to browse.
        """
        try:
            kind = kind_of(root)
        except TypeError as exc:
            raise DocumentLoadError(str(exc)) from exc
        if not is_collection(root):
            raise DocumentLoadError(f"nothing to browse: top-level value is a {kind.value}")
        state = cls(root, key_order)
        if not state.rows:
            raise DocumentLoadError(f"nothing to browse: top-level {kind.value} is empty")
        logger.debug("session started on %s with %d rows", kind.value, len(state.rows))
        return state

    @property
    def root(self) -> JsonValue:
        return self._root

    @property
    def path(self) -> tuple[str, ...]:
        return self._path

    @property
    def rows(self) -> tuple[Row, ...]:
        return self._rows

    @property
    def cursor(self) -> Cursor:
        return self._cursor

    @property
    def current_row(self) -> Row | None:
        if not self._rows:
            return None
        return self._rows[self._cursor.row_index]

    def _set_cursor(self, cursor: Cursor) -> bool:
        if cursor == self._cursor:
            return False
        self._cursor = cursor
        return True

    def move_up(self) -> bool:
        """Move one row up; focus always returns to the key column."""
        row_index = self._cursor.row_index
        if row_index > 0:
            row_index -= 1
        return self._set_cursor(Cursor(row_index=row_index))

    def move_down(self) -> bool:
        """Move one row down; focus always returns to the key column."""
        row_index = self._cursor.row_index
        if row_index < len(self._rows) - 1:
            row_index += 1
        return self._set_cursor(Cursor(row_index=row_index))

    def focus_value(self) -> bool:
        row = self.current_row
        if row is None or not self._cursor.on_key:
            return False
        return self._set_cursor(self._cursor.with_value_focus(row.expandable))

    def focus_key(self) -> bool:
        return self._set_cursor(self._cursor.with_key_focus())

    def descend(self) -> bool:
        """Open the focused value when it is an object or array."""
        row = self.current_row
        if row is None or self._cursor.on_key or self._cursor.at_terminal:
            return False
        self._path = self._path + (row.key,)
        self._reload()
        return True

    def ascend(self) -> bool:
        """Return to the parent collection; a no-op at the root."""
        if not self._path:
            return False
        self._path = self._path[:-1]
        self._reload()
        return True

    def quit(self) -> bool:
        self.quit_requested = True
        return False

    def apply(self, event: NavigationEvent) -> bool:
        """Run the transition bound to ``event``."""
        return self._handlers[event]()

    def _reload(self) -> None:
        """Rebuild rows for the current path and reset the cursor."""
        self._cursor = HOME_CURSOR
        self.resolution_error = None
        try:
            value = resolve(self._root, self._path)
        except PathResolutionError as exc:
            logger.warning("%s; showing no rows", exc)
            self.resolution_error = exc
            self._rows = ()
            return
        self._rows = tuple(project(value, self.key_order))
        logger.debug("path %r has %d rows", list(self._path), len(self._rows))


__all__ = ["NavigationState"]
