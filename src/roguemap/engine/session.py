from __future__ import annotations

import logging
from enum import Enum, auto
from typing import Callable, List, Optional

from ..input.actions import InputAction
from .world import World

logger = logging.getLogger(__name__)


class SessionEvent(Enum):
    """Events emitted by Session to notify front ends."""

    PLAYER_MOVED = auto()
    PLAYER_BLOCKED = auto()
    DISPLAY_TOGGLED = auto()
    QUIT = auto()


Listener = Callable[[SessionEvent, "Session"], None]


class Session:
    """Turn loop state for one run: apply one action, report whether to stop.

    Front ends own the actual loop (Arcade's event loop or the headless stdin
    reader); they call ``handle`` once per input action and redraw afterwards.
    Display toggling is delegated to ``on_toggle_display`` because only the
    front end knows what a display mode is.
    """

    def __init__(self, world: World, on_toggle_display: Optional[Callable[[], None]] = None) -> None:
        self.world = world
        self.on_toggle_display = on_toggle_display
        self._listeners: List[Listener] = []
        self._running = True
        self._turns = 0

    @property
    def running(self) -> bool:
        return self._running

    @property
    def turns(self) -> int:
        return self._turns

    def add_listener(self, listener: Listener) -> None:
        self._listeners.append(listener)

    def _emit(self, event: SessionEvent) -> None:
        for listener in list(self._listeners):
            try:
                listener(event, self)
            except Exception as ex:  # pragma: no cover - listeners shouldn't crash the session
                logger.exception("Listener errored on %s: %s", event, ex)

    def handle(self, action: Optional[InputAction]) -> bool:
        """Apply one action. Returns True when the session should end."""
        if not self._running:
            return True
        if action is None:
            return False

        if action is InputAction.QUIT:
            self._running = False
            logger.info("Session ended after %d turns", self._turns)
            self._emit(SessionEvent.QUIT)
            return True

        if action is InputAction.TOGGLE_DISPLAY:
            if self.on_toggle_display is not None:
                self.on_toggle_display()
            else:
                logger.debug("Display toggle requested with no display attached")
            self._emit(SessionEvent.DISPLAY_TOGGLED)
            return False

        delta = action.delta
        if delta is None:  # pragma: no cover - every remaining action is a move
            logger.warning("Unhandled action %s", action)
            return False
        player = self.world.player
        before = player.pos
        self.world.move(player, *delta)
        self._turns += 1
        if player.pos == before:
            self._emit(SessionEvent.PLAYER_BLOCKED)
        else:
            self._emit(SessionEvent.PLAYER_MOVED)
        return False
