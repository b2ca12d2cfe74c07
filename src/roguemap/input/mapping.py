from __future__ import annotations

import logging
from typing import Dict, Iterable, Optional

from .actions import InputAction

logger = logging.getLogger(__name__)

# Modifier names in canonical order; a chord is written "ALT+ENTER".
MODIFIERS = ("CTRL", "ALT", "SHIFT")


class InputMapper:
    """Rebindable mapping from physical keys to logical actions.

    Keys are strings normalized to uppercase, so any backend can feed it by
    translating its key constants to names first. A key pressed with modifiers
    is looked up as a chord such as ``"ALT+ENTER"``.

    Example usage:
        mapper = InputMapper.default()
        mapper.translate_key("h")                        # -> InputAction.MOVE_LEFT
        mapper.translate_key("enter", modifiers=["alt"]) # -> InputAction.TOGGLE_DISPLAY
    """

    def __init__(self, bindings: Optional[Dict[str, InputAction]] = None) -> None:
        self._bindings: Dict[str, InputAction] = {}
        self._aliases: Dict[str, str] = {}
        if bindings:
            for key, action in bindings.items():
                self.bind(key, action)

    # ---------- Canonicalization ----------
    @staticmethod
    def _normalize(key: str | int | None) -> Optional[str]:
        if key is None:
            return None
        if isinstance(key, int):
            return str(key)
        if not isinstance(key, str):
            return None
        k = key.strip()
        if not k:
            return None
        return k.upper()

    def _chord(self, key: str, modifiers: Iterable[str]) -> str:
        mods = {m.strip().upper() for m in modifiers if m and m.strip()}
        parts = [m for m in MODIFIERS if m in mods]
        return "+".join(parts + [key])

    # ---------- Binding API ----------
    def bind(self, key: str | int, action: InputAction) -> None:
        """Bind a single key (or chord like "ALT+ENTER") to an action."""
        nk = self._normalize(key)
        if nk is None:
            logger.warning("Attempted to bind invalid key: %r", key)
            return
        self._bindings[nk] = action

    def bind_many(self, keys: Iterable[str | int], action: InputAction) -> None:
        for k in keys:
            self.bind(k, action)

    def unbind(self, key: str | int) -> None:
        nk = self._normalize(key)
        if nk is not None:
            self._bindings.pop(nk, None)

    def set_alias(self, physical: str | int, canonical_name: str) -> None:
        """Register an alias from a backend-specific key to a canonical name.

        Example: set_alias(65362, "UP") or set_alias("RETURN", "ENTER").
        """
        nk = self._normalize(physical)
        cn = self._normalize(canonical_name)
        if nk and cn:
            self._aliases[nk] = cn

    # ---------- Translation ----------
    def translate_key(self, key: str | int, modifiers: Iterable[str] = ()) -> Optional[InputAction]:
        """Translate a physical key (plus held modifiers) into an action or None."""
        nk = self._normalize(key)
        if nk is None:
            return None
        canonical = self._aliases.get(nk, nk)
        return self._bindings.get(self._chord(canonical, modifiers))

    # ---------- Defaults ----------
    @classmethod
    def default(cls) -> "InputMapper":
        """Arrows/WASD/HJKL move, Alt+Enter or F11 toggle fullscreen, Escape or Q quit."""
        mapper = cls()

        mapper.bind_many(["LEFT", "A", "H"], InputAction.MOVE_LEFT)
        mapper.bind_many(["RIGHT", "D", "L"], InputAction.MOVE_RIGHT)
        mapper.bind_many(["UP", "W", "K"], InputAction.MOVE_UP)
        mapper.bind_many(["DOWN", "S", "J"], InputAction.MOVE_DOWN)

        mapper.bind_many(["ALT+ENTER", "F11"], InputAction.TOGGLE_DISPLAY)
        mapper.set_alias("RETURN", "ENTER")

        mapper.bind_many(["ESCAPE", "Q"], InputAction.QUIT)
        mapper.set_alias("ESC", "ESCAPE")

        return mapper


__all__ = ["InputMapper"]
