import math

import pytest

from ecsgame.vec2 import Vec2


def test_default_is_origin():
    assert Vec2() == Vec2(0, 0)


def test_equality_and_inequality():
    assert Vec2(1.5, -2) == Vec2(1.5, -2)
    assert not (Vec2(1, 2) == Vec2(2, 1))
    assert Vec2(1, 2) != Vec2(1, 3)


def test_add_then_sub_round_trip():
    a = Vec2(3.25, -7.5)
    b = Vec2(-1.0, 4.0)
    assert (a + b) - b == a


def test_mul_then_div_round_trip():
    a = Vec2(6.0, -2.0)
    assert (a * 4) / 4 == a


def test_mul_scales_components():
    a = Vec2(2.0, 3.0)
    scaled = a * 2
    assert scaled.x == a.x * 2
    assert scaled.y == a.y * 2


def test_in_place_operations_mutate_same_object():
    a = Vec2(1.0, 2.0)
    original = a
    a += Vec2(1.0, 1.0)
    a -= Vec2(1.0, 1.0)
    a *= 8
    a /= 8
    assert a is original
    assert a == Vec2(1.0, 2.0)


def test_binary_ops_do_not_mutate():
    a = Vec2(1.0, 2.0)
    _ = a + Vec2(5, 5)
    _ = a * 3
    assert a == Vec2(1.0, 2.0)


def test_dist_pythagorean():
    assert Vec2(3, 4).dist(Vec2(0, 0)) == pytest.approx(5.0)


def test_dist_symmetric_and_zero_to_self():
    a = Vec2(1.5, -2.5)
    b = Vec2(-4.0, 7.0)
    assert a.dist(b) == pytest.approx(b.dist(a))
    assert a.dist(a) == 0


def test_normalize_has_unit_length_and_same_direction():
    v = Vec2(-6.0, 2.0).normalize()
    assert v.dist(Vec2()) == pytest.approx(1.0)
    assert math.atan2(v.y, v.x) == pytest.approx(math.atan2(2.0, -6.0))


def test_normalize_zero_vector():
    assert Vec2().normalize() == Vec2()


def test_division_by_zero_raises():
    with pytest.raises(ZeroDivisionError):
        Vec2(1, 1) / 0


def test_not_hashable():
    with pytest.raises(TypeError):
        hash(Vec2(1, 1))


def test_unpacking():
    x, y = Vec2(7, 9)
    assert (x, y) == (7.0, 9.0)