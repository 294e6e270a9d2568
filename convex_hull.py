""" CONVEX HULL

Two interchangeable algorithms behind one contract, (points) -> hull:

    jarvis_march        gift wrapping, O(n*h)
    kirkpatrick_seidel  divide and conquer with linear-time bridges, O(n log h)

Hulls are lists of Point, counter-clockwise, starting from the lowest of the
leftmost points, without duplicates and without points in the middle of an edge.
"""
import logging
from enum import Enum

import numpy as np

from convex_hull_errors import InvalidPointsError
from convex_hull_geometry import Point, contains, diameter, perimeter, polygon_area
from convex_hull_jarvis_march import jarvis_march
from convex_hull_kirkpatrick_seidel import kirkpatrick_seidel
from convex_hull_trace import Comment, StepRecorder

logger = logging.getLogger(__name__)

__all__ = [
    'HullAlgorithm', 'Point', 'StepRecorder', 'as_points', 'contains', 'convex_hull',
    'diameter', 'jarvis_march', 'kirkpatrick_seidel', 'perimeter', 'polygon_area']


class HullAlgorithm(Enum):
    JARVIS_MARCH = 'jarvis_march'
    KIRKPATRICK_SEIDEL = 'kirkpatrick_seidel'

    def __call__(self, points, recorder=None):
        return _SOLVERS[self](points, recorder)

    @classmethod
    def from_name(cls, name):
        key = name.strip().lower().replace('-', '_').replace(' ', '_')
        key = _ALIASES.get(key, key)
        try:
            return cls(key)
        except ValueError:
            raise ValueError(f"unknown hull algorithm: {name!r}") from None


_SOLVERS = {
    HullAlgorithm.JARVIS_MARCH: jarvis_march,
    HullAlgorithm.KIRKPATRICK_SEIDEL: kirkpatrick_seidel,
}

_ALIASES = {
    'jarvis': 'jarvis_march',
    'gift_wrapping': 'jarvis_march',
    'ks': 'kirkpatrick_seidel',
    'kirk_patrick_seidel': 'kirkpatrick_seidel',
}


def as_points(points):
    """
    Convert any (n, 2) collection of numbers (list of pairs, list of Point,
    numpy array) into a list of Point with float coordinates.
    """
    if not isinstance(points, np.ndarray):
        points = list(points)
    try:
        arr = np.asarray(points, dtype=float)
    except (TypeError, ValueError) as e:
        raise InvalidPointsError(f"points are not numeric pairs: {e}") from e
    if arr.size == 0:
        return []
    if arr.ndim != 2 or arr.shape[1] != 2:
        raise InvalidPointsError(f"expected an (n, 2) collection of points, got shape {arr.shape}")
    if not np.all(np.isfinite(arr)):
        raise InvalidPointsError("points must have finite coordinates")
    return [Point(x, y) for x, y in arr.tolist()]


def _first_distinct(points, limit):
    distinct = []
    for p in points:
        if p not in distinct:
            distinct.append(p)
            if len(distinct) == limit:
                break
    return distinct


def convex_hull(points, algorithm=HullAlgorithm.KIRKPATRICK_SEIDEL, recorder=None):
    """
    Public entry point with one contract for both algorithms.

    Fewer than 3 distinct points give the distinct points themselves, sorted
    by (x, y): [] for no input, [p] for a single (possibly repeated) point,
    [a, b] for two.
    """
    if isinstance(algorithm, str):
        algorithm = HullAlgorithm.from_name(algorithm)
    points = as_points(points)

    distinct = _first_distinct(points, 3)
    if len(distinct) < 3:
        if recorder is not None:
            recorder.record(Comment(f"Degenerate input, {len(distinct)} distinct points"))
        return sorted(distinct)

    hull = algorithm(points, recorder)
    logger.debug("%s: %d points -> %d hull vertices", algorithm.value, len(points), len(hull))
    return hull


if __name__ == "__main__":
    from convex_hull_config import configure_logging
    configure_logging()

    square = [(0, 3), (2, 2), (1, 1), (2, 1), (3, 0), (0, 0), (3, 3)]
    for algorithm in HullAlgorithm:
        print(f"{algorithm.value}: {[str(p) for p in convex_hull(square, algorithm)]}")

    points = np.random.standard_normal((1000, 2))
    recorder = StepRecorder()
    hull = convex_hull(points, recorder=recorder)
    print(f"Number of vertices: {len(hull)}")
    print(f"Area: {polygon_area(hull):.4f}")
    print(f"Perimeter: {perimeter(hull):.4f}")
    print(f"Diameter: {diameter(hull):.4f}")
    print(f"Recorded steps: {len(recorder)}")
