import pytest

from roguemap.dungeon.grid import Grid
from roguemap.dungeon.rect import Rect
from roguemap.dungeon.tiles import FLOOR, WALL
from roguemap.exceptions import GridError, OutOfBoundsError


@pytest.mark.parametrize("width,height", [(1, 1), (7, 3), (3, 7), (80, 50)])
def test_index_and_coordinate_are_inverses(width, height):
    grid = Grid(width, height)
    for i in range(width * height):
        assert grid.index_of(*grid.coordinate_of(i)) == i
    for y in range(height):
        for x in range(width):
            assert grid.coordinate_of(grid.index_of(x, y)) == (x, y)


def test_index_is_row_major():
    grid = Grid(10, 4)
    assert grid.index_of(3, 2) == 23
    assert grid.coordinate_of(23) == (3, 2)


def test_new_grid_is_all_wall():
    grid = Grid(12, 9)
    assert len(grid) == 108
    assert all(tile == WALL for _x, _y, tile in grid.cells())
    assert grid.count(WALL) == 108


@pytest.mark.parametrize("width,height", [(0, 5), (5, 0), (-1, 3), (3, -2)])
def test_non_positive_dimensions_rejected(width, height):
    with pytest.raises(GridError):
        Grid(width, height)
    # GridError is a ValueError for callers that only know the builtin
    with pytest.raises(ValueError):
        Grid(width, height)


def test_in_bounds_edges():
    grid = Grid(4, 3)
    assert grid.in_bounds(0, 0)
    assert grid.in_bounds(3, 2)
    assert not grid.in_bounds(4, 0)
    assert not grid.in_bounds(0, 3)
    assert not grid.in_bounds(-1, 0)
    assert not grid.in_bounds(0, -1)


def test_out_of_bounds_access_fails_fast():
    grid = Grid(4, 3)
    with pytest.raises(OutOfBoundsError):
        grid.index_of(4, 0)
    with pytest.raises(OutOfBoundsError):
        grid.coordinate_of(12)
    with pytest.raises(OutOfBoundsError):
        grid.coordinate_of(-1)
    with pytest.raises(IndexError):
        grid.get(-1, 0)
    with pytest.raises(IndexError):
        grid.set(0, 3, FLOOR)


def test_carve_room_scenario_leaves_wall_border():
    grid = Grid(20, 10)
    grid.carve_room(Rect.new(2, 2, 6, 4))

    for y in range(10):
        for x in range(20):
            expected = FLOOR if 3 <= x <= 7 and 3 <= y <= 5 else WALL
            assert grid.get(x, y) == expected, (x, y)
    assert grid.get(2, 2) == WALL
    assert grid.get(8, 4) == WALL
    assert grid.get(5, 6) == WALL


def test_adjacent_rooms_keep_wall_between():
    grid = Grid(20, 10)
    grid.carve_room(Rect.new(0, 0, 5, 5))
    grid.carve_room(Rect.new(5, 0, 5, 5))
    # x=5 is the shared boundary column of both bounding boxes
    assert all(grid.get(5, y) == WALL for y in range(10))
    assert grid.get(4, 2) == FLOOR
    assert grid.get(6, 2) == FLOOR


def test_tunnels_are_inclusive_and_order_independent():
    a = Grid(12, 6)
    b = Grid(12, 6)
    a.carve_h_tunnel(2, 9, 3)
    b.carve_h_tunnel(9, 2, 3)
    assert a.snapshot() == b.snapshot()
    assert a.count(FLOOR) == 8
    assert a.get(2, 3) == FLOOR and a.get(9, 3) == FLOOR
    assert a.get(1, 3) == WALL and a.get(10, 3) == WALL

    c = Grid(6, 12)
    d = Grid(6, 12)
    c.carve_v_tunnel(1, 10, 4)
    d.carve_v_tunnel(10, 1, 4)
    assert c.snapshot() == d.snapshot()
    assert c.count(FLOOR) == 10


def test_single_cell_tunnel():
    grid = Grid(5, 5)
    grid.carve_h_tunnel(2, 2, 2)
    assert grid.count(FLOOR) == 1
    assert grid.get(2, 2) == FLOOR


def test_tunnel_off_grid_raises():
    grid = Grid(5, 5)
    with pytest.raises(OutOfBoundsError):
        grid.carve_h_tunnel(0, 5, 1)


def test_from_lines_and_to_lines_roundtrip():
    rows = [
        "#####",
        "#..##",
        "#####",
    ]
    grid = Grid.from_lines(rows)
    assert (grid.width, grid.height) == (5, 3)
    assert grid.get(1, 1) == FLOOR
    assert grid.is_blocked(0, 0)
    assert grid.blocks_sight(3, 1)
    assert grid.to_lines() == rows


def test_from_lines_rejects_bad_input():
    with pytest.raises(GridError):
        Grid.from_lines([])
    with pytest.raises(GridError):
        Grid.from_lines(["###", "##"])


def test_cells_iterates_in_index_order():
    grid = Grid(3, 2)
    coords = [(x, y) for x, y, _tile in grid.cells()]
    assert coords == [(0, 0), (1, 0), (2, 0), (0, 1), (1, 1), (2, 1)]
