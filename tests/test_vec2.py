import math

import pytest

from playkit.vec2 import Vec2


def test_add_sub_round_trip():
    a, b = Vec2(1.0, 2.0), Vec2(-0.5, 4.5)
    assert a.add(b).sub(b) == a


def test_scale_length():
    v = Vec2(2.0, -1.0)
    assert v.scale(2.5).length() == pytest.approx(2.5 * v.length())


def test_rotate_preserves_length_and_round_trips():
    v = Vec2(0.3, -1.7)
    r = v.rotate(1.1)
    assert r.length() == pytest.approx(v.length())
    back = r.rotate(-1.1)
    assert back.x == pytest.approx(v.x)
    assert back.y == pytest.approx(v.y)


def test_full_turn():
    v = Vec2(1.0, 2.0)
    r = v.rotate(2 * math.pi)
    assert r.x == pytest.approx(v.x)
    assert r.y == pytest.approx(v.y)


def test_norm():
    n = Vec2(-6.0, 8.0).norm()
    assert n.length() == pytest.approx(1.0)
    assert n.x < 0 < n.y


def test_norm_of_zero_raises():
    with pytest.raises(ZeroDivisionError):
        Vec2().norm()