import pytest

from roguemap.config import MapSettings, RoomSettings, Settings
from roguemap.dungeon.tiles import FLOOR
from roguemap.engine.world import World
from roguemap.entities import Entity
from roguemap.rng import RNGManager


def test_create_places_player_in_first_room():
    world = World.create(Settings(seed=42))
    assert (world.grid.width, world.grid.height) == (80, 50)
    assert world.rooms
    assert world.player.pos == world.rooms[0].center()
    assert world.player.glyph == "@"
    assert world.player.color == (255, 255, 255)
    assert world.grid.get(*world.player.pos) == FLOOR


def test_same_seed_same_world():
    a = World.create(Settings(seed="crypt-7"))
    b = World.create(Settings(seed="crypt-7"))
    assert a.grid.snapshot() == b.grid.snapshot()
    assert a.player.pos == b.player.pos
    assert a.seed_hex == b.seed_hex


def test_explicit_rng_manager_overrides_settings_seed():
    a = World.create(Settings(seed=1), RNGManager(99))
    b = World.create(Settings(seed=2), RNGManager(99))
    assert a.grid.snapshot() == b.grid.snapshot()


def test_zero_rooms_keeps_configured_start():
    settings = Settings(rooms=RoomSettings(max_rooms=0), seed=5, player_start=(3, 4))
    world = World.create(settings)
    assert world.rooms == ()
    assert world.player.pos == (3, 4)


def test_custom_map_size():
    world = World.create(Settings(map=MapSettings(width=30, height=20), seed=11))
    assert len(world.grid) == 600
    assert len(list(world.cells())) == 600


def test_entities_are_ordered_and_read_only_view(small_world):
    goblin = Entity(3, 1, "g", (0, 200, 0), name="goblin")
    small_world.add_entity(goblin)
    assert small_world.entities == (small_world.player, goblin)
    assert isinstance(small_world.entities, tuple)


def test_move_applies_delta_to_given_entity(small_world):
    goblin = Entity(3, 1, "g", name="goblin")
    small_world.add_entity(goblin)

    small_world.move(goblin, 0, 1)
    assert goblin.pos == (3, 2)
    assert small_world.player.pos == (1, 1)

    small_world.move(small_world.player, 0, -1)  # wall
    assert small_world.player.pos == (1, 1)


def test_world_requires_a_player(small_world):
    with pytest.raises(ValueError):
        World(small_world.grid, [])
