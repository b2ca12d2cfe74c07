from __future__ import annotations

import logging
import random
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, List, Optional, Tuple

from ..exceptions import ConfigError
from .grid import Grid
from .rect import Rect

if TYPE_CHECKING:
    from ..config import RoomSettings
    from ..entities import Entity

logger = logging.getLogger(__name__)


@dataclass
class GenerationResult:
    grid: Grid
    rooms: List[Rect] = field(default_factory=list)
    start: Optional[Tuple[int, int]] = None  # None when no room was accepted


class DungeonGenerator:
    """Rooms + tunnels generator using rejection sampling.

    Makes ``max_rooms`` attempts at a random room. A candidate touching or
    overlapping an accepted room is discarded without retry, so the final room
    count varies per seed (possibly zero). Each accepted room after the first
    is joined to the previous one by an L-shaped tunnel whose elbow order is a
    coin flip; the player is moved to the first room's center.

    All randomness comes from the ``rng`` passed to ``generate`` so a layout is
    reproducible from its seed.
    """

    def __init__(self, room_min_size: int = 6, room_max_size: int = 10, max_rooms: int = 30) -> None:
        if room_min_size < 2:
            raise ConfigError("room_min_size must be >= 2")
        if room_max_size <= room_min_size:
            raise ConfigError("room_max_size must be greater than room_min_size")
        if max_rooms < 0:
            raise ConfigError("max_rooms must be >= 0")
        self.room_min_size = room_min_size
        self.room_max_size = room_max_size
        self.max_rooms = max_rooms

    @classmethod
    def from_settings(cls, rooms: "RoomSettings") -> "DungeonGenerator":
        return cls(room_min_size=rooms.min_size, room_max_size=rooms.max_size, max_rooms=rooms.max_rooms)

    def generate(self, grid: Grid, player: "Entity", rng: random.Random) -> GenerationResult:
        """Carve rooms and tunnels into ``grid`` and place ``player``.

        The grid is expected to be solid wall. If no room is accepted the
        player keeps its current position and ``result.start`` is None.
        """
        if grid.width <= self.room_max_size or grid.height <= self.room_max_size:
            raise ConfigError(
                f"Grid {grid.width}x{grid.height} too small for rooms up to {self.room_max_size} tiles"
            )

        result = GenerationResult(grid=grid)
        rooms = result.rooms
        rejected = 0

        for _ in range(self.max_rooms):
            x = rng.randrange(0, grid.width - self.room_max_size)
            y = rng.randrange(0, grid.height - self.room_max_size)
            w = rng.randrange(self.room_min_size, self.room_max_size)
            h = rng.randrange(self.room_min_size, self.room_max_size)
            new_room = Rect.new(x, y, w, h)

            if any(new_room.intersects(other) for other in rooms):
                rejected += 1
                continue

            cur_x, cur_y = new_room.center()
            if not rooms:
                player.place(cur_x, cur_y)
                result.start = (cur_x, cur_y)
            else:
                prev_x, prev_y = rooms[-1].center()
                if rng.random() < 0.5:
                    # vertical first
                    grid.carve_v_tunnel(prev_y, cur_y, prev_x)
                    grid.carve_h_tunnel(prev_x, cur_x, cur_y)
                else:
                    grid.carve_h_tunnel(prev_x, cur_x, prev_y)
                    grid.carve_v_tunnel(prev_y, cur_y, cur_x)

            grid.carve_room(new_room)
            rooms.append(new_room)

        if rooms:
            logger.debug("DungeonGenerator: accepted %d rooms, rejected %d", len(rooms), rejected)
        else:
            logger.warning(
                "DungeonGenerator: all %d attempts rejected; player stays at (%d,%d)",
                self.max_rooms, player.x, player.y,
            )
        return result
