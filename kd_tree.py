# kd_tree.py

from collections import namedtuple
from enum import Enum

import numpy as np

import constants as C
import logger as log
from errors import check_not_none
from geometry import Rectangle, squared_distance_to_box

class Side(Enum):
    """Which child of a node a point belongs to."""
    LEFT = "left"
    RIGHT = "right"

class LinePosition(Enum):
    """Where a query rectangle lies relative to a node's splitting line."""
    LEFT = "left"
    RIGHT = "right"
    STRADDLES = "straddles"

# A read-only snapshot of one arena row.
Node = namedtuple("Node", ["point", "region", "vertical", "left", "right"])

class KdTree:
    """
    A 2-d tree over the unit square.

    Nodes live in NumPy arrays indexed by insertion order (row 0 is the root).
    Each row holds the region the node is confined to, the orientation of its
    splitting line and the row indices of its children; self.points holds the
    node's point at the same index.
    Vertical nodes send x < p.x left and x >= p.x right; horizontal nodes send
    y > p.y left (north) and y <= p.y right (south).
    """
    def __init__(self, capacity=C.NODE_ARENA_INITIAL_CAPACITY):
        self.points = []
        self.capacity = max(1, int(capacity))
        self.count = 0

        self.arrays = {
            'regions': np.zeros((self.capacity, 4), dtype=np.float64), # xmin, ymin, xmax, ymax
            'vertical': np.zeros(self.capacity, dtype=bool),
            'left': np.full(self.capacity, C.NO_CHILD, dtype=np.int64),
            'right': np.full(self.capacity, C.NO_CHILD, dtype=np.int64),
        }

    # --- Size ---
    def size(self):
        """Number of distinct points in the tree."""
        return self.count

    def is_empty(self):
        return self.count == 0

    def __len__(self):
        return self.count

    def __contains__(self, point):
        return self.contains(point)

    # --- Insertion ---
    def insert(self, point):
        """Adds a point. Returns False (and changes nothing) if it is already present."""
        check_not_none(point, "point")

        if self.count == 0:
            self._add_node(point, (C.DOMAIN_XMIN, C.DOMAIN_YMIN, C.DOMAIN_XMAX, C.DOMAIN_YMAX), True)
            return True

        index = 0
        while True:
            if self.points[index] == point:
                return False

            side = self._side_of(index, point)
            link_key = 'left' if side is Side.LEFT else 'right'
            child = int(self.arrays[link_key][index])
            if child == C.NO_CHILD:
                region = self._child_region(index, side)
                vertical = not bool(self.arrays['vertical'][index])
                new_index = self._add_node(point, region, vertical)
                # Look the array up again, _add_node may have replaced it.
                self.arrays[link_key][index] = new_index
                return True
            index = child

    def _add_node(self, point, region, vertical):
        """Appends a row for a new node and returns its index."""
        if self.count == self.capacity:
            self._grow_capacity()

        index = self.count
        self.points.append(point)
        self.arrays['regions'][index] = region
        self.arrays['vertical'][index] = vertical
        self.arrays['left'][index] = C.NO_CHILD
        self.arrays['right'][index] = C.NO_CHILD
        self.count += 1
        return index

    def _grow_capacity(self):
        """Multiplies the capacity of every array in self.arrays."""
        new_capacity = self.capacity * C.NODE_ARENA_GROWTH_FACTOR
        log.log(f"DEBUG: KdTree growing from {self.capacity} to {new_capacity} nodes")

        for key, arr in self.arrays.items():
            if arr.ndim == 2:
                new_arr = np.zeros((new_capacity, arr.shape[1]), dtype=arr.dtype)
            elif key in ('left', 'right'):
                new_arr = np.full(new_capacity, C.NO_CHILD, dtype=arr.dtype)
            else:
                new_arr = np.zeros(new_capacity, dtype=arr.dtype)
            new_arr[:self.capacity] = arr
            self.arrays[key] = new_arr

        self.capacity = new_capacity

    def _child_region(self, index, side):
        """Clips a node's region to the half on the given side of its splitting line."""
        xmin, ymin, xmax, ymax = self.arrays['regions'][index].tolist()
        px, py = self.points[index].x, self.points[index].y
        # Out-of-domain points would otherwise produce inverted regions.
        px = min(max(px, xmin), xmax)
        py = min(max(py, ymin), ymax)

        if self.arrays['vertical'][index]:
            if side is Side.LEFT:
                return (xmin, ymin, px, ymax)
            return (px, ymin, xmax, ymax)
        if side is Side.LEFT:
            return (xmin, py, xmax, ymax)
        return (xmin, ymin, xmax, py)

    # --- Branch rules ---
    def _side_of(self, index, point):
        """The child a point is stored under, as used by insert and contains."""
        node_point = self.points[index]
        if self.arrays['vertical'][index]:
            return Side.LEFT if point.x < node_point.x else Side.RIGHT
        return Side.LEFT if point.y > node_point.y else Side.RIGHT

    def _preferred_side(self, index, query):
        """The child on the query's side of the line; a query on the line prefers left."""
        node_point = self.points[index]
        if self.arrays['vertical'][index]:
            return Side.LEFT if query.x <= node_point.x else Side.RIGHT
        return Side.LEFT if query.y >= node_point.y else Side.RIGHT

    def _position_of_rect(self, index, rect):
        """Classifies a query rectangle against a node's splitting line."""
        node_point = self.points[index]
        if self.arrays['vertical'][index]:
            if rect.xmax < node_point.x:
                return LinePosition.LEFT
            if rect.xmin > node_point.x:
                return LinePosition.RIGHT
            return LinePosition.STRADDLES
        if rect.ymin > node_point.y:
            return LinePosition.LEFT
        if rect.ymax < node_point.y:
            return LinePosition.RIGHT
        return LinePosition.STRADDLES

    def _child(self, index, side):
        key = 'left' if side is Side.LEFT else 'right'
        return int(self.arrays[key][index])

    # --- Queries ---
    def contains(self, point):
        """Does the tree hold a point exactly equal to this one?"""
        check_not_none(point, "point")
        index = 0 if self.count else C.NO_CHILD
        while index != C.NO_CHILD:
            if self.points[index] == point:
                return True
            index = self._child(index, self._side_of(index, point))
        return False

    def range(self, rect):
        """All stored points inside rect (edges included), sorted by (x, y)."""
        check_not_none(rect, "rectangle")
        found = []
        stack = [0] if self.count else []
        while stack:
            index = stack.pop()
            if index == C.NO_CHILD:
                continue
            node_point = self.points[index]
            if rect.contains(node_point):
                found.append(node_point)

            position = self._position_of_rect(index, rect)
            if position is not LinePosition.RIGHT:
                stack.append(self._child(index, Side.LEFT))
            if position is not LinePosition.LEFT:
                stack.append(self._child(index, Side.RIGHT))
        return sorted(found)

    def nearest(self, query):
        """
        The stored point closest to query, or None if the tree is empty.

        The child on the query's side of each splitting line is searched
        first. Its sibling is only searched once that whole subtree is done,
        and only if the sibling's region is strictly closer than the best
        distance found by then.
        """
        check_not_none(query, "point")
        if self.count == 0:
            return None

        qx, qy = query.x, query.y
        regions = self.arrays['regions']
        best_point = None
        best_distance = float("inf")

        # Entries are (row, prune_check). Siblings are pushed beneath the
        # preferred child so they are popped only after its subtree finishes.
        stack = [(0, False)]
        while stack:
            index, prune_check = stack.pop()
            if index == C.NO_CHILD:
                continue
            if prune_check:
                xmin, ymin, xmax, ymax = regions[index].tolist()
                if squared_distance_to_box(qx, qy, xmin, ymin, xmax, ymax) >= best_distance:
                    continue

            node_point = self.points[index]
            distance = node_point.distance_squared_to(query)
            if distance < best_distance:
                best_distance = distance
                best_point = node_point

            preferred = self._preferred_side(index, query)
            other = Side.RIGHT if preferred is Side.LEFT else Side.LEFT
            stack.append((self._child(index, other), True))
            stack.append((self._child(index, preferred), False))

        return best_point

    # --- Inspection ---
    def points_in_order(self):
        """Stored points in insertion order."""
        return iter(self.points)

    def node(self, index):
        """A snapshot of one arena row."""
        if not 0 <= index < self.count:
            raise IndexError(f"Node index {index} out of range for {self.count} nodes")
        xmin, ymin, xmax, ymax = self.arrays['regions'][index].tolist()
        return Node(
            point=self.points[index],
            region=Rectangle(xmin, ymin, xmax, ymax),
            vertical=bool(self.arrays['vertical'][index]),
            left=int(self.arrays['left'][index]),
            right=int(self.arrays['right'][index]),
        )

    def nodes(self):
        for index in range(self.count):
            yield self.node(index)

    def depth(self):
        """Number of nodes on the longest root-to-leaf path (0 when empty)."""
        deepest = 0
        stack = [(0, 1)] if self.count else []
        while stack:
            index, level = stack.pop()
            deepest = max(deepest, level)
            for side in (Side.LEFT, Side.RIGHT):
                child = self._child(index, side)
                if child != C.NO_CHILD:
                    stack.append((child, level + 1))
        return deepest
