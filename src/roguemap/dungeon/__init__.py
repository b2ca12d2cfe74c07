"""
Dungeon systems: tiles, room rectangles, the tile grid with carving helpers,
and the rooms-and-tunnels generator.
"""
from .tiles import FLOOR, WALL, Tile
from .rect import Rect
from .grid import Grid
from .generator import DungeonGenerator, GenerationResult

__all__ = ["Tile", "WALL", "FLOOR", "Rect", "Grid", "DungeonGenerator", "GenerationResult"]
