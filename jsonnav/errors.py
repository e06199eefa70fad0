"""Exception types shared across jsonnav components.

Only ``DocumentLoadError`` ever reaches the CLI; ``PathResolutionError`` is
recovered inside navigation state and never escapes a transition.
"""

from __future__ import annotations


class JsonNavError(Exception):
    """Base class for all jsonnav errors."""


class DocumentLoadError(JsonNavError):
    """Input could not be read, parsed, or has nothing to browse."""


class PathResolutionError(JsonNavError, LookupError):
    """A path could not be resolved to a collection inside the document."""

    def __init__(self, path: tuple[str, ...], failed_at: int, reason: str) -> None:
        self.path = tuple(path)
        self.failed_at = failed_at
        self.reason = reason
        super().__init__(f"cannot resolve {list(self.path)!r} at step {failed_at}: {reason}")


__all__ = ["JsonNavError", "DocumentLoadError", "PathResolutionError"]
