from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class Rect:
    """Axis-aligned room footprint stored by its corners.

    ``x2``/``y2`` are exclusive of the size: ``Rect.new(x, y, w, h)`` spans
    ``x1 = x`` to ``x2 = x + w``. The rectangle is the room's outer bounding box,
    so its edge rows and columns stay wall when carved.
    """

    x1: int
    y1: int
    x2: int
    y2: int

    @classmethod
    def new(cls, x: int, y: int, w: int, h: int) -> "Rect":
        return cls(x, y, x + w, y + h)

    @property
    def width(self) -> int:
        return self.x2 - self.x1

    @property
    def height(self) -> int:
        return self.y2 - self.y1

    def center(self) -> Tuple[int, int]:
        return ((self.x1 + self.x2) // 2, (self.y1 + self.y2) // 2)

    def intersects(self, other: "Rect") -> bool:
        # Touching edges count as intersecting.
        return not (
            other.x2 < self.x1
            or other.x1 > self.x2
            or other.y2 < self.y1
            or other.y1 > self.y2
        )
