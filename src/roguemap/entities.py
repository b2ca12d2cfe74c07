from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Tuple

from .dungeon.grid import Grid

logger = logging.getLogger(__name__)

Color = Tuple[int, int, int]

WHITE: Color = (255, 255, 255)


@dataclass
class Entity:
    """A positioned, drawable actor in the world grid."""

    x: int
    y: int
    glyph: str
    color: Color = WHITE
    name: str = "entity"

    @property
    def pos(self) -> Tuple[int, int]:
        return (self.x, self.y)

    def place(self, x: int, y: int) -> None:
        self.x = x
        self.y = y

    def move_by(self, dx: int, dy: int, grid: Grid) -> None:
        """Step by (dx, dy) unless the target is off-grid or blocked.

        A rejected move is a no-op, not an error.
        """
        nx = self.x + dx
        ny = self.y + dy
        if grid.in_bounds(nx, ny) and not grid.is_blocked(nx, ny):
            self.x = nx
            self.y = ny
        else:
            logger.debug("Blocked move of %s by (%d, %d) from (%d,%d)", self.name, dx, dy, self.x, self.y)
