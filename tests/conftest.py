import sys
from pathlib import Path

import pytest

# Ensure 'src' is on sys.path for test imports without installing the package
ROOT = Path(__file__).resolve().parents[1]
src = ROOT / "src"
if str(src) not in sys.path:
    sys.path.insert(0, str(src))


@pytest.fixture
def small_world():
    """A hand-drawn 5x4 world with the player at (1, 1)."""
    from roguemap.dungeon.grid import Grid
    from roguemap.engine.world import World
    from roguemap.entities import Entity

    grid = Grid.from_lines([
        "#####",
        "#...#",
        "#.#.#",
        "#####",
    ])
    return World(grid, [Entity(1, 1, "@", name="player")])
