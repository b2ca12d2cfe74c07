from __future__ import annotations

import logging
from typing import Optional, TextIO

from ..engine.session import Session
from ..input.mapping import InputMapper
from ..rendering.ascii_renderer import AsciiRenderer
from ..rendering.base import render_world

logger = logging.getLogger(__name__)


def render_frame(session: Session, out: TextIO) -> None:
    grid = session.world.grid
    renderer = AsciiRenderer(grid.width, grid.height)
    render_world(session.world, renderer)
    out.write(str(renderer) + "\n")
    px, py = session.world.player.pos
    out.write(f"turn={session.turns} player=({px},{py})\n")
    out.flush()


def run_console(session: Session, mapper: InputMapper, stdin: TextIO, stdout: TextIO, max_turns: Optional[int] = None) -> int:
    """Read key names from ``stdin`` and redraw the ASCII map after each line.

    Each line may hold several whitespace-separated keys ("l l j", "alt+enter").
    Unknown keys are ignored. The loop ends on a quit action, on EOF, or once
    ``max_turns`` turns have been played.
    """
    render_frame(session, stdout)
    for line in stdin:
        for token in line.split():
            action = mapper.translate_key(token)
            if action is None:
                logger.debug("Ignoring unbound key %r", token)
                continue
            if session.handle(action):
                stdout.write(f"Session over (turns={session.turns})\n")
                return 0
            if max_turns is not None and session.turns >= max_turns:
                render_frame(session, stdout)
                stdout.write(f"Turn limit reached (turns={session.turns})\n")
                return 0
        render_frame(session, stdout)
    stdout.write(f"Input closed (turns={session.turns})\n")
    return 0
