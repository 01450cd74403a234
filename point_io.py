# point_io.py

import numpy as np

import constants as C
import logger as log
from errors import InvalidArgumentError
from geometry import Point, Rectangle

def load_points(path):
    """
    Reads points from a text file of whitespace separated "x y" pairs.

    Args:
        path: file path (str or os.PathLike).
    Returns:
        A list of Points in file order. Duplicates are kept; the index
        structures drop them on insert.
    """
    try:
        with open(path, "r", encoding="utf-8") as handle:
            tokens = handle.read().split()
    except UnicodeDecodeError as exc:
        raise InvalidArgumentError(f"{path}: {exc}") from exc

    if len(tokens) % 2 != 0:
        raise InvalidArgumentError(f"{path}: expected x y pairs, got {len(tokens)} numbers")

    try:
        coords = np.array(tokens, dtype=np.float64).reshape(-1, 2)
    except ValueError as exc:
        raise InvalidArgumentError(f"{path}: {exc}") from exc

    points = [Point(x, y) for x, y in coords.tolist()]
    log.log(f"Loaded {len(points)} points from {path}")
    return points

def random_points(count, seed=None):
    """Uniform random points in the unit square. seed may be an int or a numpy Generator."""
    if count < 0:
        raise InvalidArgumentError(f"Point count must not be negative, got {count}")
    rng = np.random.default_rng(seed)
    width = C.DOMAIN_XMAX - C.DOMAIN_XMIN
    height = C.DOMAIN_YMAX - C.DOMAIN_YMIN
    coords = rng.random((count, 2)) * (width, height) + (C.DOMAIN_XMIN, C.DOMAIN_YMIN)
    return [Point(x, y) for x, y in coords.tolist()]

def random_rectangle(rng, max_side=C.BENCHMARK_MAX_RECT_SIDE):
    """A random query rectangle inside the unit square with sides up to max_side."""
    width = rng.random() * min(max_side, C.DOMAIN_XMAX - C.DOMAIN_XMIN)
    height = rng.random() * min(max_side, C.DOMAIN_YMAX - C.DOMAIN_YMIN)
    xmin = C.DOMAIN_XMIN + rng.random() * (C.DOMAIN_XMAX - C.DOMAIN_XMIN - width)
    ymin = C.DOMAIN_YMIN + rng.random() * (C.DOMAIN_YMAX - C.DOMAIN_YMIN - height)
    return Rectangle(xmin, ymin, xmin + width, ymin + height)
