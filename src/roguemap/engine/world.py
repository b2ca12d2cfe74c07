from __future__ import annotations

import logging
from typing import Iterator, List, Optional, Sequence, Tuple

from ..config import Settings
from ..dungeon.generator import DungeonGenerator
from ..dungeon.grid import Grid
from ..dungeon.rect import Rect
from ..dungeon.tiles import Tile
from ..entities import WHITE, Entity
from ..rng import RNGManager

logger = logging.getLogger(__name__)


class World:
    """Holds one session's grid and its ordered entities.

    The first entity is the player. The grid is only read after creation;
    entities move through ``move`` which delegates collision to the entity.
    """

    def __init__(
        self,
        grid: Grid,
        entities: Sequence[Entity],
        rooms: Sequence[Rect] = (),
        seed_hex: str = "",
    ) -> None:
        if not entities:
            raise ValueError("World needs at least one entity (the player)")
        self.grid = grid
        self._entities: List[Entity] = list(entities)
        self.rooms: Tuple[Rect, ...] = tuple(rooms)
        self.seed_hex = seed_hex

    @classmethod
    def create(cls, settings: Settings, rngm: Optional[RNGManager] = None) -> "World":
        """Generate a fresh world from settings.

        The dungeon layout uses the ``"dungeon_layout"`` RNG derived from the
        session seed (``settings.seed`` unless an explicit manager is given).
        """
        if rngm is None:
            rngm = RNGManager(settings.seed)
        px, py = settings.player_start
        player = Entity(px, py, "@", WHITE, name="player")
        grid = Grid(settings.map.width, settings.map.height)
        generator = DungeonGenerator.from_settings(settings.rooms)
        result = generator.generate(grid, player, rngm.context_rng("dungeon_layout"))
        logger.info(
            "World created: %dx%d, %d rooms, player at %s (seed=%s)",
            grid.width, grid.height, len(result.rooms), player.pos, rngm.seed_hex,
        )
        return cls(grid, [player], rooms=result.rooms, seed_hex=rngm.seed_hex)

    @property
    def player(self) -> Entity:
        return self._entities[0]

    @property
    def entities(self) -> Tuple[Entity, ...]:
        return tuple(self._entities)

    def add_entity(self, entity: Entity) -> None:
        self._entities.append(entity)

    def cells(self) -> Iterator[Tuple[int, int, Tile]]:
        return self.grid.cells()

    def move(self, entity: Entity, dx: int, dy: int) -> None:
        entity.move_by(dx, dy, self.grid)
