import math

import pytest

from playkit.intersect import (
    Circle,
    Polygon,
    Rect,
    circles,
    is_zero,
    least_penetration,
    polygons,
    rectangles,
    support,
    to_scene,
)
from playkit.vector import ZN, Vector

SQUARE = [Vector(-1, 1), Vector(1, 1), Vector(1, -1), Vector(-1, -1)]
SQUARE_EDGES = [(0, 1), (1, 2), (2, 3), (3, 0)]


def square(x, y, phi=0.0):
    return Polygon(x=x, y=y, phi=phi, vertices=list(SQUARE), edges=list(SQUARE_EDGES))


def test_is_zero():
    assert is_zero(0.0)
    assert is_zero(1e-12)
    assert not is_zero(1.0)


def test_move_to():
    c = Circle(0, 0, 1)
    c.move_to(3, 4)
    assert (c.x, c.y) == (3, 4)
    r = Rect(0, 0, 1, 1)
    r.move_to(5, 6)
    assert (r.x, r.y) == (5, 6)
    p = square(0, 0)
    p.move_to(-1, -2)
    assert (p.x, p.y) == (-1, -2)


def test_circles_apart():
    assert circles(Circle(0, 0, 1), Circle(10, 0, 1)) is None


def test_circles_same_centre_uses_zero_normal():
    a, b = Circle(2, 2, 3), Circle(2, 2, 4)
    xi = circles(a, b)
    assert xi.normal == ZN
    assert xi.penetration == pytest.approx(a.r + b.r)


def test_circles_symmetric():
    a, b = Circle(0, 0, 2), Circle(1.5, 2.0, 2)
    ab, ba = circles(a, b), circles(b, a)
    assert ab.penetration == pytest.approx(ba.penetration)
    assert ab.normal.length() == pytest.approx(1.0)
    assert ab.normal.x == pytest.approx(-ba.normal.x)
    assert ab.normal.dot(Vector(b.x - a.x, b.y - a.y)) > 0


def test_circles_touching_counts():
    xi = circles(Circle(0, 0, 1), Circle(2, 0, 1))
    assert xi.penetration == pytest.approx(0.0)


def test_rectangles_touching_edges_do_not_intersect():
    assert rectangles(Rect(0, 0, 10, 10), Rect(10, 0, 10, 10)) is None
    assert rectangles(Rect(0, 0, 10, 10), Rect(0, 10, 10, 10)) is None


def test_rectangles_choose_x_axis():
    xi = rectangles(Rect(0, 0, 10, 10), Rect(8, 1, 10, 10))
    assert xi.normal == Vector(1, 0)
    assert xi.penetration == pytest.approx(2.0)


def test_rectangles_choose_y_axis_negative():
    xi = rectangles(Rect(0, 0, 10, 10), Rect(1, -8, 10, 10))
    assert xi.normal == Vector(0, -1)
    assert xi.penetration > 0


def test_support_picks_furthest():
    assert support(Vector(1, 0), SQUARE) in (Vector(1, 1), Vector(1, -1))
    assert support(Vector(-1, -1), SQUARE) == Vector(-1, -1)


def test_to_scene_translates():
    moved = to_scene(5, -3, 0.0, SQUARE)
    assert [v.sub(Vector(5, -3)) for v in moved] == SQUARE
    assert to_scene(1, 1, 0.0, []) == []


def test_to_scene_rotation_keeps_distance():
    moved = to_scene(0, 0, 0.3, SQUARE)
    for before, after in zip(SQUARE, moved):
        assert after.length() == pytest.approx(before.length())


def test_least_penetration_separated_is_positive():
    a = to_scene(0, 0, 0, SQUARE)
    b = to_scene(5, 0, 0, SQUARE)
    pen, normal, _ = least_penetration(a, SQUARE_EDGES, b, SQUARE_EDGES)
    assert pen > 0
    assert normal.length() == pytest.approx(1.0)


def test_polygons_apart():
    assert polygons(square(0, 0), square(5, 0)) is None


def test_polygons_overlapping():
    xi = polygons(square(0, 0), square(1.5, 0.2, math.pi / 8))
    assert xi is not None
    assert xi.normal.length() == pytest.approx(1.0)