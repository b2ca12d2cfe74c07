from __future__ import annotations

import logging
import os
import sys
from typing import Optional, TextIO

from ..config import Settings
from ..engine.session import Session
from ..engine.world import World
from ..input.mapping import InputMapper
from .headless import run_console

logger = logging.getLogger(__name__)


def _arcade_available() -> bool:
    try:
        import arcade  # noqa: F401
        return True
    except Exception:
        return False


def run_headless(
    settings: Settings,
    stdin: Optional[TextIO] = None,
    stdout: Optional[TextIO] = None,
    max_turns: Optional[int] = None,
) -> int:
    """Play a session on the console: key names in, ASCII map out."""
    world = World.create(settings)
    session = Session(world)
    try:
        return run_console(
            session,
            InputMapper.default(),
            stdin if stdin is not None else sys.stdin,
            stdout if stdout is not None else sys.stdout,
            max_turns=max_turns,
        )
    except KeyboardInterrupt:
        print("Interrupted by user")
        return 130


def run_gui(settings: Settings, max_turns: Optional[int] = None) -> int:
    """Play a session in an Arcade window, falling back to headless if Arcade is unavailable."""
    if not _arcade_available():
        logger.warning("Arcade not available; falling back to headless mode")
        return run_headless(settings, max_turns=max_turns)

    from .arcade_app import run_window

    world = World.create(settings)
    session = Session(world)
    try:
        logger.info("Launching Arcade window")
        run_window(session, settings.display, InputMapper.default())
        logger.info("Arcade loop finished after %d turns", session.turns)
        return 0
    except Exception:
        logger.exception("Unhandled exception in GUI loop; exiting with code 1")
        return 1


def run_auto(settings: Settings, max_turns: Optional[int] = None) -> int:
    """Run GUI if available, else headless. ROGUEMAP_HEADLESS=1 forces headless."""
    if os.getenv("ROGUEMAP_HEADLESS") == "1":
        return run_headless(settings, max_turns=max_turns)
    return run_gui(settings, max_turns=max_turns)


__all__ = ["run_auto", "run_gui", "run_headless"]
