from __future__ import annotations

import logging
from typing import Iterator, List, Sequence, Tuple

from ..exceptions import GridError, OutOfBoundsError
from .rect import Rect
from .tiles import FLOOR, WALL, Tile

logger = logging.getLogger(__name__)


class Grid:
    """
    Fixed-size tile map stored as a flat, row-major list.

    Cell ``(x, y)`` lives at index ``x + y * width``. All tile access is
    bounds-checked: reading or writing outside the map raises
    ``OutOfBoundsError`` instead of wrapping into a neighbouring row.

    The grid starts as solid wall; generation carves rooms and tunnels into it
    and gameplay only reads it afterwards.
    """

    def __init__(self, width: int, height: int) -> None:
        if width <= 0 or height <= 0:
            raise GridError(f"Grid width/height must be > 0 (got {width}x{height})")
        self.width = width
        self.height = height
        self._tiles: List[Tile] = [WALL] * (width * height)
        logger.debug("Grid created: %dx%d", width, height)

    def __len__(self) -> int:
        return len(self._tiles)

    # ---- Safety / Bounds -------------------------------------------------
    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def index_of(self, x: int, y: int) -> int:
        if not self.in_bounds(x, y):
            raise OutOfBoundsError(f"Tile out of bounds: ({x},{y}) not in [0,{self.width})x[0,{self.height})")
        return x + y * self.width

    def coordinate_of(self, index: int) -> Tuple[int, int]:
        if not 0 <= index < len(self._tiles):
            raise OutOfBoundsError(f"Index out of bounds: {index} not in [0,{len(self._tiles)})")
        return index % self.width, index // self.width

    def get(self, x: int, y: int) -> Tile:
        return self._tiles[self.index_of(x, y)]

    def set(self, x: int, y: int, tile: Tile) -> None:
        self._tiles[self.index_of(x, y)] = tile

    # ---- Query -----------------------------------------------------------
    def is_blocked(self, x: int, y: int) -> bool:
        return self.get(x, y).blocked

    def blocks_sight(self, x: int, y: int) -> bool:
        return self.get(x, y).blocks_sight

    def cells(self) -> Iterator[Tuple[int, int, Tile]]:
        """Yield ``(x, y, tile)`` for every cell in index order."""
        for i, tile in enumerate(self._tiles):
            yield i % self.width, i // self.width, tile

    def count(self, tile: Tile) -> int:
        return sum(1 for t in self._tiles if t == tile)

    # ---- Carving helpers -------------------------------------------------
    def carve_room(self, rect: Rect) -> None:
        # Interior only: the rect's outer rows/columns stay wall.
        for y in range(rect.y1 + 1, rect.y2):
            for x in range(rect.x1 + 1, rect.x2):
                self.set(x, y, FLOOR)

    def carve_h_tunnel(self, x1: int, x2: int, y: int) -> None:
        for x in range(min(x1, x2), max(x1, x2) + 1):
            self.set(x, y, FLOOR)

    def carve_v_tunnel(self, y1: int, y2: int, x: int) -> None:
        for y in range(min(y1, y2), max(y1, y2) + 1):
            self.set(x, y, FLOOR)

    # ---- Export / Compare -----------------------------------------------
    @classmethod
    def from_lines(cls, rows: Sequence[str]) -> "Grid":
        """
        Build a Grid from ASCII rows for tests/tools.
        '#' is wall; every other character is floor.
        """
        if not rows:
            raise GridError("rows must not be empty")
        width = len(rows[0])
        for r in rows:
            if len(r) != width:
                raise GridError("All rows must be same width")
        grid = cls(width, len(rows))
        for y, row in enumerate(rows):
            for x, ch in enumerate(row):
                if ch != "#":
                    grid.set(x, y, FLOOR)
        return grid

    def to_lines(self) -> List[str]:
        return [
            "".join(t.glyph for t in self._tiles[y * self.width:(y + 1) * self.width])
            for y in range(self.height)
        ]

    def snapshot(self) -> Tuple[Tile, ...]:
        """Hashable copy of the tiles for equality tests."""
        return tuple(self._tiles)

    def __repr__(self) -> str:
        return f"Grid({self.width}x{self.height})"
