# point_set.py

import numpy as np

import constants as C
import logger as log
from errors import check_not_none

class PointSet:
    """
    Brute-force set of points with the same operations as KdTree.

    Every range and nearest query is a linear scan, vectorised over a NumPy
    array of coordinates. Used as a correctness oracle and a timing baseline.
    """
    def __init__(self, capacity=C.POINT_SET_INITIAL_CAPACITY):
        self.points = []
        self.members = set()
        self.capacity = max(1, int(capacity))
        self.coords = np.zeros((self.capacity, 2), dtype=np.float64)

    def size(self):
        return len(self.points)

    def is_empty(self):
        return not self.points

    def __len__(self):
        return len(self.points)

    def __contains__(self, point):
        return self.contains(point)

    def insert(self, point):
        """Adds a point if it is not already in the set."""
        check_not_none(point, "point")
        if point in self.members:
            return False
        if len(self.points) == self.capacity:
            self._grow_capacity()
        self.coords[len(self.points)] = (point.x, point.y)
        self.points.append(point)
        self.members.add(point)
        return True

    def _grow_capacity(self):
        new_capacity = self.capacity * C.POINT_SET_GROWTH_FACTOR
        log.log(f"DEBUG: PointSet growing from {self.capacity} to {new_capacity}")
        new_coords = np.zeros((new_capacity, 2), dtype=np.float64)
        new_coords[:self.capacity] = self.coords
        self.coords = new_coords
        self.capacity = new_capacity

    def contains(self, point):
        check_not_none(point, "point")
        return point in self.members

    def range(self, rect):
        """All points inside rect (edges included), sorted by (x, y)."""
        check_not_none(rect, "rectangle")
        xs = self.coords[:len(self.points), 0]
        ys = self.coords[:len(self.points), 1]
        inside = ((xs >= rect.xmin) & (xs <= rect.xmax) &
                  (ys >= rect.ymin) & (ys <= rect.ymax))
        return sorted(self.points[i] for i in np.flatnonzero(inside))

    def nearest(self, query):
        """The first point at minimum distance from query, or None if the set is empty."""
        check_not_none(query, "point")
        if not self.points:
            return None
        dx = self.coords[:len(self.points), 0] - query.x
        dy = self.coords[:len(self.points), 1] - query.y
        return self.points[int(np.argmin(dx * dx + dy * dy))]

    def points_in_order(self):
        return iter(self.points)
