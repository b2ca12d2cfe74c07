from __future__ import annotations

import logging
from typing import List

from .base import Color

logger = logging.getLogger(__name__)


class AsciiRenderer:
    """Character-buffer renderer for the headless console and tests.

    Colors are ignored; later draws at the same cell overwrite earlier ones.
    Draws outside the buffer are dropped.
    """

    def __init__(self, width: int, height: int) -> None:
        if width <= 0 or height <= 0:
            raise ValueError("AsciiRenderer width/height must be > 0")
        self.width = width
        self.height = height
        self._rows: List[List[str]] = [[" "] * width for _ in range(height)]

    def clear(self) -> None:
        for row in self._rows:
            for x in range(self.width):
                row[x] = " "

    def draw(self, x: int, y: int, glyph: str, color: Color) -> None:
        if not (0 <= x < self.width and 0 <= y < self.height):
            logger.debug("Dropping draw outside buffer at (%d,%d)", x, y)
            return
        self._rows[y][x] = glyph[:1] or " "

    def to_lines(self) -> List[str]:
        return ["".join(row) for row in self._rows]

    def __str__(self) -> str:
        return "\n".join(self.to_lines())
