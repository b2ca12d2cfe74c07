from __future__ import annotations

from enum import Enum, auto


class InputAction(Enum):
    """Logical input actions understood by a session.

    Front ends translate their physical keys into these so that the world
    only ever sees semantic actions.
    """

    MOVE_LEFT = auto()
    MOVE_RIGHT = auto()
    MOVE_UP = auto()
    MOVE_DOWN = auto()
    TOGGLE_DISPLAY = auto()  # e.g., Alt+Enter fullscreen
    QUIT = auto()  # e.g., Escape

    @property
    def delta(self) -> tuple[int, int] | None:
        """Movement delta for move actions, None otherwise. y grows downward."""
        return _DELTAS.get(self)


_DELTAS = {
    InputAction.MOVE_LEFT: (-1, 0),
    InputAction.MOVE_RIGHT: (1, 0),
    InputAction.MOVE_UP: (0, -1),
    InputAction.MOVE_DOWN: (0, 1),
}

__all__ = ["InputAction"]
