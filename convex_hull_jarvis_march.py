import logging

from convex_hull_errors import ConvexHullError
from convex_hull_geometry import (
    COLLINEAR, COUNTERCLOCKWISE, distance_sq, leftmost, orientation, to_points)
from convex_hull_trace import Comment, HullEdge, TemporaryEdge

logger = logging.getLogger(__name__)


def jarvis_march(points, recorder=None):
    """
    Gift wrapping in O(n*h), h being the number of hull vertices.

    Starts from the lowest of the leftmost points and keeps turning
    counter-clockwise: from the current vertex p every point r is scanned and
    replaces the running choice q whenever (p, r, q) is a counter-clockwise turn.
    Collinear ties go to the farthest point, so points in the middle of an edge
    are never emitted. The walk stops once it is back at the start coordinates.

    Fewer than 3 input points give an empty hull; convex_hull() is the entry
    point that turns such input into a degenerate hull instead.
    """
    points = to_points(points)
    n = len(points)
    if n < 3:
        return []

    start = leftmost(points)
    hull = []
    p = points.index(start)
    while True:
        hull.append(points[p])
        if len(hull) > n:
            raise ConvexHullError(f"gift wrapping did not close after {n} vertices")

        q = (p + 1) % n
        for r in range(n):
            turn = orientation(points[p], points[r], points[q])
            if turn == COUNTERCLOCKWISE or (
                    turn == COLLINEAR
                    and distance_sq(points[p], points[r]) > distance_sq(points[p], points[q])):
                q = r

        if recorder is not None:
            _record_scan(recorder, points, hull, points[p], points[q])

        p = q
        if points[p] == start:
            break

    if recorder is not None:
        recorder.record(
            HullEdge(hull[-1], hull[0]),
            Comment("Found all points of the hull"))
    logger.debug("jarvis_march: %d points -> %d hull vertices", n, len(hull))
    return hull


def _record_scan(recorder, points, hull, current, chosen):
    on_hull = set(hull)
    events = [TemporaryEdge(current, r) for r in points if r not in on_hull]
    if chosen != hull[0]:
        events.append(HullEdge(current, chosen))
        events.append(Comment(
            f"Scanned all points from {current}, {chosen} is the most counter-clockwise"))
    recorder.record(*events)
