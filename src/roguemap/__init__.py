"""
roguemap package root.

Procedural dungeon generation and a tile-grid world model for a turn-based,
grid-rendered exploration game. Presentation code (Arcade, ASCII console)
lives in ``roguemap.app`` and ``roguemap.rendering`` and is kept out of the
pure domain modules.
"""
from importlib.metadata import version, PackageNotFoundError

__all__ = ["__version__"]

try:
    __version__ = version("roguemap")
except PackageNotFoundError:  # pragma: no cover - during tests without packaging
    __version__ = "0.0.0"
