from __future__ import annotations

import logging
from typing import Dict, List

import arcade

from ..config import DisplaySettings
from ..engine.session import Session, SessionEvent
from ..input.mapping import InputMapper
from ..rendering.base import Color, render_world

logger = logging.getLogger(__name__)

TILE_GLYPHS = ("#", ".")

# Several arcade.key names share a symbol (LEFT and MOTION_LEFT); the first
# non-MOTION name wins so the mapper sees the plain key name.
_KEY_NAMES: Dict[int, str] = {}
for _name in dir(arcade.key):
    if not _name.isupper() or _name.startswith(("MOD_", "MOTION_")):
        continue
    _symbol = getattr(arcade.key, _name)
    if isinstance(_symbol, int):
        _KEY_NAMES.setdefault(_symbol, _name)

_MODIFIER_BITS = (
    (arcade.key.MOD_CTRL, "CTRL"),
    (arcade.key.MOD_ALT, "ALT"),
    (arcade.key.MOD_SHIFT, "SHIFT"),
)


class ArcadeTileRenderer:
    """Renderer capability backed by Arcade draw calls.

    Tile glyphs become filled squares in their colour; any other glyph is drawn
    as text. Map row 0 is the top of the window.
    """

    def __init__(self, tile_px: int, rows: int) -> None:
        self.tile_px = tile_px
        self.rows = rows

    def draw(self, x: int, y: int, glyph: str, color: Color) -> None:
        ts = self.tile_px
        left = x * ts
        bottom = (self.rows - 1 - y) * ts
        if glyph in TILE_GLYPHS:
            arcade.draw_lrbt_rectangle_filled(left, left + ts, bottom, bottom + ts, color)
        else:
            arcade.draw_text(
                glyph,
                left + ts / 2,
                bottom + ts / 2,
                color,
                font_size=ts * 0.75,
                anchor_x="center",
                anchor_y="center",
            )


class DungeonWindow(arcade.Window):
    """Arcade front end for one session: draws the world, forwards keys as actions."""

    def __init__(self, session: Session, display: DisplaySettings, mapper: InputMapper) -> None:
        self.session = session
        self.mapper = mapper
        self.tile_renderer = ArcadeTileRenderer(display.tile_px, display.screen_height)
        super().__init__(
            display.screen_width * display.tile_px,
            display.screen_height * display.tile_px,
            title=display.title,
            fullscreen=display.fullscreen,
            update_rate=1.0 / display.fps,
        )
        self.background_color = arcade.color.BLACK
        session.add_listener(self._on_event)
        logger.info("Arcade window initialized (%dx%d)", self.width, self.height)

    def _on_event(self, event: SessionEvent, session: Session) -> None:
        if event is SessionEvent.QUIT:
            self.close()

    def toggle_fullscreen(self) -> None:
        self.set_fullscreen(not self.fullscreen)
        logger.debug("Fullscreen now %s", self.fullscreen)

    # ---- Arcade callbacks -----------------------------------------------
    def on_draw(self) -> None:
        self.clear()
        render_world(self.session.world, self.tile_renderer)

    def on_key_press(self, symbol: int, modifiers: int) -> None:
        name = _KEY_NAMES.get(symbol)
        if name is None:
            return
        mods: List[str] = [label for bit, label in _MODIFIER_BITS if modifiers & bit]
        self.session.handle(self.mapper.translate_key(name, modifiers=mods))


def run_window(session: Session, display: DisplaySettings, mapper: InputMapper) -> None:
    window = DungeonWindow(session, display, mapper)
    session.on_toggle_display = window.toggle_fullscreen
    arcade.run()
