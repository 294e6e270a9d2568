import math
from collections import namedtuple

import numpy as np

from convex_hull_config import EPSILON


COLLINEAR = 0
CLOCKWISE = 1
COUNTERCLOCKWISE = -1


class Point(namedtuple('Point', ['x', 'y'])):
    """
    Immutable 2D point. Tuple ordering gives x first, then y.
    Equality is exact: hull vertices are always input points, never computed.
    """
    __slots__ = ()

    def mirrored(self):
        return Point(self.x, -self.y)

    def __str__(self):
        return f"({self.x:g}, {self.y:g})"


def to_points(points):
    return [p if isinstance(p, Point) else Point(float(p[0]), float(p[1])) for p in points]


def nearly_equal(a, b):
    # relative only, the result must not depend on the units of a and b
    return math.isclose(a, b, rel_tol=EPSILON)


def orientation(p, q, r):
    """
    Turn made by the ordered triplet (p, q, r).
    Returns:
        COLLINEAR (0), CLOCKWISE (1) or COUNTERCLOCKWISE (-1)
    Using (qy - py) * (rx - qx) - (qx - px) * (ry - qy):
        > 0 clockwise, < 0 counter-clockwise, 0 collinear
    The two products are compared with a relative tolerance, so the result does
    not depend on the units of the coordinates.
    """
    lhs = (q[1] - p[1]) * (r[0] - q[0])
    rhs = (q[0] - p[0]) * (r[1] - q[1])
    if nearly_equal(lhs, rhs):
        return COLLINEAR
    return CLOCKWISE if lhs > rhs else COUNTERCLOCKWISE


def distance_sq(p1, p2):
    return (p1[0] - p2[0])**2 + (p1[1] - p2[1])**2


def distance(p1, p2):
    return math.sqrt(distance_sq(p1, p2))


def leftmost(points):
    """ lowest of the points with minimum x, first occurrence on exact ties
    """
    best = None
    for p in points:
        if best is None or (p[0], p[1]) < (best[0], best[1]):
            best = p
    return best


def _on_segment(a, b, p):
    return (min(a[0], b[0]) <= p[0] <= max(a[0], b[0])
            and min(a[1], b[1]) <= p[1] <= max(a[1], b[1]))


def contains(hull, point):
    """
    Check if point lies inside or on the boundary of a counter-clockwise hull.
    Degenerate hulls (a single point or a segment) are handled too.
    """
    n = len(hull)
    if n == 0:
        return False
    if n == 1:
        return tuple(point) == tuple(hull[0])
    if n == 2:
        a, b = hull
        return orientation(a, b, point) == COLLINEAR and _on_segment(a, b, point)
    for i in range(n):
        if orientation(hull[i], hull[(i + 1) % n], point) == CLOCKWISE:
            return False
    return True


def polygon_area(hull):
    """ shoelace formula, zero for degenerate hulls
    """
    if len(hull) < 3:
        return 0.0
    pts_arr = np.asarray(hull, dtype=float)
    x = pts_arr[:, 0]
    y = pts_arr[:, 1]
    return 0.5 * np.abs(np.dot(x, np.roll(y, 1)) - np.dot(y, np.roll(x, 1)))


def perimeter(hull):
    if len(hull) < 2:
        return 0.0
    if len(hull) == 2:
        return 2 * distance(hull[0], hull[1])
    return sum(distance(hull[i], hull[(i + 1) % len(hull)]) for i in range(len(hull)))


def diameter(hull):
    if len(hull) < 2:
        return 0.0
    return max(distance(hull[i], hull[j]) for i in range(len(hull)) for j in range(i + 1, len(hull)))
