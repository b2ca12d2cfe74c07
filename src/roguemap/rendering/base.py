from __future__ import annotations

from typing import Protocol, Tuple

from ..engine.world import World

Color = Tuple[int, int, int]

COLOR_DARK_WALL: Color = (0, 0, 100)
COLOR_DARK_GROUND: Color = (50, 50, 150)


class Renderer(Protocol):
    """Anything that can draw one glyph at a grid position."""

    def draw(self, x: int, y: int, glyph: str, color: Color) -> None:
        ...


def render_world(world: World, renderer: Renderer) -> None:
    """Draw the map first, then every entity on top of it."""
    for x, y, tile in world.cells():
        color = COLOR_DARK_WALL if tile.blocks_sight else COLOR_DARK_GROUND
        renderer.draw(x, y, tile.glyph, color)
    for entity in world.entities:
        renderer.draw(entity.x, entity.y, entity.glyph, entity.color)
