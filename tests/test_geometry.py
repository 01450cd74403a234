import math

import pytest

from errors import InvalidArgumentError
from geometry import UNIT_SQUARE, Point, Rectangle


def test_point_equality_and_hash():
    assert Point(0.2, 0.3) == Point(0.2, 0.3)
    assert Point(0.2, 0.3) != Point(0.3, 0.2)
    assert len({Point(0.2, 0.3), Point(0.2, 0.3), Point(0.1, 0.1)}) == 2


def test_point_ordering_is_lexicographic():
    points = [Point(0.5, 0.1), Point(0.2, 0.9), Point(0.2, 0.3)]
    assert sorted(points) == [Point(0.2, 0.3), Point(0.2, 0.9), Point(0.5, 0.1)]


def test_point_is_immutable():
    p = Point(0.2, 0.3)
    with pytest.raises(AttributeError):
        p.x = 0.5


def test_point_rejects_bad_coordinates():
    with pytest.raises(InvalidArgumentError):
        Point(float("nan"), 0.0)
    with pytest.raises(InvalidArgumentError):
        Point("abc", 0.0)
    with pytest.raises(InvalidArgumentError):
        Point(None, 0.0)


def test_point_distances():
    a = Point(0.0, 0.0)
    b = Point(3.0, 4.0)
    assert a.distance_squared_to(b) == 25.0
    assert a.distance_to(b) == 5.0
    assert tuple(b) == (3.0, 4.0)


def test_rectangle_rejects_inverted_bounds():
    with pytest.raises(InvalidArgumentError):
        Rectangle(0.6, 0.0, 0.5, 1.0)
    with pytest.raises(InvalidArgumentError):
        Rectangle(0.0, 0.6, 1.0, 0.5)


def test_rectangle_contains_is_inclusive():
    rect = Rectangle(0.0, 0.0, 0.5, 0.5)
    assert rect.contains(Point(0.0, 0.0))
    assert rect.contains(Point(0.5, 0.5))
    assert rect.contains(Point(0.5, 0.25))
    assert not rect.contains(Point(0.5000001, 0.25))


def test_rectangle_intersects_touching_edges():
    rect = Rectangle(0.0, 0.0, 0.5, 0.5)
    assert rect.intersects(Rectangle(0.5, 0.5, 1.0, 1.0))
    assert rect.intersects(Rectangle(0.1, 0.1, 0.2, 0.2))
    assert not rect.intersects(Rectangle(0.6, 0.0, 1.0, 1.0))
    assert not rect.intersects(Rectangle(0.0, 0.6, 1.0, 1.0))


def test_rectangle_distance_squared():
    rect = Rectangle(0.0, 0.0, 0.5, 0.5)
    assert rect.distance_squared_to(Point(0.25, 0.25)) == 0.0
    assert rect.distance_squared_to(Point(0.75, 0.25)) == 0.0625
    assert rect.distance_squared_to(Point(1.0, 1.0)) == 0.5
    assert math.isclose(rect.distance_to(Point(1.0, 1.0)), math.sqrt(0.5))


def test_rectangle_null_arguments():
    with pytest.raises(InvalidArgumentError):
        UNIT_SQUARE.contains(None)
    with pytest.raises(InvalidArgumentError):
        UNIT_SQUARE.intersects(None)
    with pytest.raises(InvalidArgumentError):
        UNIT_SQUARE.distance_squared_to(None)


def test_unit_square():
    assert UNIT_SQUARE == Rectangle(0, 0, 1, 1)
    assert UNIT_SQUARE.width() == 1.0
    assert UNIT_SQUARE.height() == 1.0
