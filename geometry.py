# geometry.py

import math
from functools import total_ordering

import constants as C
from errors import InvalidArgumentError, check_not_none

def _coordinate(value, name):
    """Coerces a coordinate to float, rejecting non-numbers and NaN."""
    try:
        value = float(value)
    except (TypeError, ValueError):
        raise InvalidArgumentError(f"Coordinate {name} must be a number, got {value!r}") from None
    if math.isnan(value):
        raise InvalidArgumentError(f"Coordinate {name} must not be NaN")
    return value

@total_ordering
class Point:
    """An immutable point on the plane, ordered by x then y."""
    __slots__ = ("_x", "_y")

    def __init__(self, x, y):
        self._x = _coordinate(x, "x")
        self._y = _coordinate(y, "y")

    @property
    def x(self):
        return self._x

    @property
    def y(self):
        return self._y

    def distance_squared_to(self, other):
        """Squared Euclidean distance to another point."""
        check_not_none(other, "point")
        dx = self._x - other.x
        dy = self._y - other.y
        return dx * dx + dy * dy

    def distance_to(self, other):
        return math.sqrt(self.distance_squared_to(other))

    def __eq__(self, other):
        if not isinstance(other, Point):
            return NotImplemented
        return self._x == other._x and self._y == other._y

    def __lt__(self, other):
        if not isinstance(other, Point):
            return NotImplemented
        return (self._x, self._y) < (other._x, other._y)

    def __hash__(self):
        return hash((self._x, self._y))

    def __iter__(self):
        yield self._x
        yield self._y

    def __repr__(self):
        return f"Point({self._x!r}, {self._y!r})"

class Rectangle:
    """An immutable axis-aligned rectangle with inclusive edges."""
    __slots__ = ("_xmin", "_ymin", "_xmax", "_ymax")

    def __init__(self, xmin, ymin, xmax, ymax):
        xmin = _coordinate(xmin, "xmin")
        ymin = _coordinate(ymin, "ymin")
        xmax = _coordinate(xmax, "xmax")
        ymax = _coordinate(ymax, "ymax")
        if xmin > xmax:
            raise InvalidArgumentError(f"xmin ({xmin}) is greater than xmax ({xmax})")
        if ymin > ymax:
            raise InvalidArgumentError(f"ymin ({ymin}) is greater than ymax ({ymax})")
        self._xmin = xmin
        self._ymin = ymin
        self._xmax = xmax
        self._ymax = ymax

    @property
    def xmin(self):
        return self._xmin

    @property
    def ymin(self):
        return self._ymin

    @property
    def xmax(self):
        return self._xmax

    @property
    def ymax(self):
        return self._ymax

    def width(self):
        return self._xmax - self._xmin

    def height(self):
        return self._ymax - self._ymin

    def contains(self, point):
        """Checks if a point is inside this rectangle or on its boundary."""
        check_not_none(point, "point")
        return (self._xmin <= point.x <= self._xmax and
                self._ymin <= point.y <= self._ymax)

    def intersects(self, other):
        """Checks if another rectangle overlaps or touches this one."""
        check_not_none(other, "rectangle")
        return not (other.xmin > self._xmax or
                    other.xmax < self._xmin or
                    other.ymin > self._ymax or
                    other.ymax < self._ymin)

    def distance_squared_to(self, point):
        """Squared distance from a point to the closest point of this rectangle (0 if inside)."""
        check_not_none(point, "point")
        return squared_distance_to_box(point.x, point.y,
                                       self._xmin, self._ymin, self._xmax, self._ymax)

    def distance_to(self, point):
        return math.sqrt(self.distance_squared_to(point))

    def as_tuple(self):
        return (self._xmin, self._ymin, self._xmax, self._ymax)

    def __eq__(self, other):
        if not isinstance(other, Rectangle):
            return NotImplemented
        return self.as_tuple() == other.as_tuple()

    def __hash__(self):
        return hash(self.as_tuple())

    def __repr__(self):
        return f"Rectangle({self._xmin!r}, {self._ymin!r}, {self._xmax!r}, {self._ymax!r})"

def squared_distance_to_box(x, y, xmin, ymin, xmax, ymax):
    """Squared distance from (x, y) to the box given by its raw bounds."""
    dx = 0.0
    dy = 0.0
    if x < xmin:
        dx = x - xmin
    elif x > xmax:
        dx = x - xmax
    if y < ymin:
        dy = y - ymin
    elif y > ymax:
        dy = y - ymax
    return dx * dx + dy * dy

UNIT_SQUARE = Rectangle(C.DOMAIN_XMIN, C.DOMAIN_YMIN, C.DOMAIN_XMAX, C.DOMAIN_YMAX)
