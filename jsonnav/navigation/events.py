"""Named input events understood by the navigation state machine."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class NavigationEvent(Enum):
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"
    ENTER = "enter"
    BACK = "back"
    QUIT = "quit"


@dataclass(frozen=True)
class ViewportResize:
    """Terminal height reported by the host, in lines."""

    height: int


__all__ = ["NavigationEvent", "ViewportResize"]
