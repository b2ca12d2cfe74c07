from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Tile:
    """Map tile flags.

    - blocked: entities cannot move onto the tile.
    - blocks_sight: vision cannot pass through the tile.
    """

    blocked: bool
    blocks_sight: bool

    @property
    def glyph(self) -> str:
        """A single-character visualization used for ASCII dumps and logs."""
        return "#" if self.blocks_sight else "."


WALL = Tile(blocked=True, blocks_sight=True)
FLOOR = Tile(blocked=False, blocks_sight=False)

__all__ = ["Tile", "WALL", "FLOOR"]
