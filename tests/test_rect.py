import pytest

from roguemap.dungeon.rect import Rect


def test_new_stores_corners():
    r = Rect.new(2, 3, 6, 4)
    assert (r.x1, r.y1, r.x2, r.y2) == (2, 3, 8, 7)
    assert (r.width, r.height) == (6, 4)


@pytest.mark.parametrize(
    "rect,center",
    [
        (Rect.new(0, 0, 4, 4), (2, 2)),
        (Rect.new(2, 2, 6, 4), (5, 4)),
        (Rect.new(1, 1, 7, 9), (4, 5)),  # integer division rounds down
    ],
)
def test_center(rect, center):
    assert rect.center() == center


def test_overlapping_rects_intersect():
    a = Rect.new(0, 0, 6, 6)
    b = Rect.new(3, 3, 6, 6)
    assert a.intersects(b)
    assert b.intersects(a)


def test_contained_rect_intersects():
    assert Rect.new(0, 0, 10, 10).intersects(Rect.new(2, 2, 3, 3))


def test_touching_edges_count_as_intersecting():
    left = Rect.new(0, 0, 5, 5)
    assert left.intersects(Rect.new(5, 0, 5, 5))  # shared vertical edge x=5
    assert left.intersects(Rect.new(0, 5, 5, 5))  # shared horizontal edge y=5
    assert left.intersects(Rect.new(5, 5, 3, 3))  # shared corner


def test_one_tile_gap_does_not_intersect():
    left = Rect.new(0, 0, 5, 5)
    assert not left.intersects(Rect.new(6, 0, 5, 5))
    assert not left.intersects(Rect.new(0, 6, 5, 5))
    assert not Rect.new(6, 0, 5, 5).intersects(left)


def test_rect_is_immutable():
    r = Rect.new(0, 0, 3, 3)
    with pytest.raises(AttributeError):
        r.x1 = 5  # type: ignore[misc]
