import numpy as np
import pytest

from geometry import UNIT_SQUARE, Point, Rectangle
from kd_tree import KdTree
from point_io import random_points, random_rectangle
from point_set import PointSet


def build_both(points):
    tree = KdTree()
    brute = PointSet()
    for p in points:
        tree.insert(p)
        brute.insert(p)
    return tree, brute


def assert_same_nearest(tree, brute, query):
    a = tree.nearest(query)
    b = brute.nearest(query)
    assert a is not None and b is not None
    assert a.distance_squared_to(query) == b.distance_squared_to(query)


@pytest.mark.parametrize("seed", [1, 2, 3])
def test_random_points_agree(seed):
    rng = np.random.default_rng(seed)
    tree, brute = build_both(random_points(500, seed=rng))
    assert tree.size() == brute.size()
    for _ in range(100):
        rect = random_rectangle(rng, 0.3)
        assert tree.range(rect) == brute.range(rect)
    for query in random_points(100, seed=rng):
        assert_same_nearest(tree, brute, query)


def test_grid_points_with_ties_agree():
    # Grid coordinates put many queries exactly on splitting lines and
    # give equidistant candidates.
    grid = [Point(i / 8, j / 8) for i in range(9) for j in range(9)]
    order = np.random.default_rng(0).permutation(len(grid))
    tree, brute = build_both([grid[i] for i in order])
    assert tree.size() == 81
    for i in range(17):
        for j in range(17):
            query = Point(i / 16, j / 16)
            assert_same_nearest(tree, brute, query)
    for rect in [Rectangle(0.25, 0.25, 0.5, 0.5), Rectangle(0.125, 0.0, 0.125, 1.0),
                 Rectangle(0.0, 0.375, 1.0, 0.375), UNIT_SQUARE]:
        assert tree.range(rect) == brute.range(rect)


def test_duplicate_heavy_input_agrees():
    rng = np.random.default_rng(21)
    base = random_points(50, seed=rng)
    points = [base[i] for i in rng.integers(0, 50, size=400)]
    tree, brute = build_both(points)
    assert tree.size() == brute.size() == len(set(points))
    assert tree.range(UNIT_SQUARE) == brute.range(UNIT_SQUARE)


def test_queries_outside_the_domain_agree():
    tree, brute = build_both(random_points(200, seed=31))
    for query in [Point(-1.0, -1.0), Point(2.0, 0.5), Point(0.5, 3.0)]:
        assert_same_nearest(tree, brute, query)
    rect = Rectangle(-1.0, -1.0, 0.5, 2.0)
    assert tree.range(rect) == brute.range(rect)
