"""
Kirkpatrick-Seidel convex hull, O(n log h).

The upper hull is built by CONNECT: split the points at an approximate median
of their x-coordinates, find the BRIDGE (the upper hull edge crossing that
vertical line) by prune-and-search in linear time, then recurse on the points
left of the bridge and right of it. The lower hull is the upper hull of the
points mirrored in the x axis.

Reference: Kirkpatrick & Seidel, "The ultimate planar convex hull algorithm?",
SIAM J. Comput. 15 (1986).
"""
import logging

from convex_hull_config import EPSILON
from convex_hull_errors import BridgeStalled, PreconditionViolation
from convex_hull_geometry import to_points
from convex_hull_selection import median_of_medians
from convex_hull_trace import Comment, HullEdge, TemporaryEdge, VerticalLine

logger = logging.getLogger(__name__)


def kirkpatrick_seidel(points, recorder=None):
    """
    Convex hull as a counter-clockwise list of vertices starting from the
    lowest of the leftmost points: lower hull left to right, then upper hull
    right to left, with the shared endpoints listed once.

    Degenerate input gives a degenerate hull: [] for no points, the single
    point when all points coincide, the two extreme points when all points
    are collinear.
    """
    points = to_points(points)
    if not points:
        return []

    upper = upper_hull(points, recorder)
    if recorder is not None:
        recorder.record(Comment("Added upper hull"))

    mirrored_recorder = recorder.mirrored() if recorder is not None else None
    lower = upper_hull([p.mirrored() for p in points], mirrored_recorder)
    lower = [p.mirrored() for p in lower]
    if recorder is not None:
        recorder.record(Comment("Added lower hull"))

    hull = _merge(lower, upper, recorder)
    if recorder is not None:
        recorder.record(Comment("Kirkpatrick-Seidel algorithm is complete"))
    logger.debug("kirkpatrick_seidel: %d points -> %d hull vertices", len(points), len(hull))
    return hull


def _merge(lower, upper, recorder=None):
    hull = list(lower)
    tail = upper[::-1]

    if tail[0] == hull[-1]:
        tail = tail[1:]
    elif recorder is not None:
        recorder.record(
            HullEdge(hull[-1], tail[0]),
            Comment(f"Adding right vertical edge between {hull[-1]} and {tail[0]}"))

    if tail and tail[-1] == hull[0]:
        tail = tail[:-1]
    elif tail and recorder is not None:
        recorder.record(
            HullEdge(tail[-1], hull[0]),
            Comment(f"Adding left vertical edge between {tail[-1]} and {hull[0]}"))

    hull.extend(tail)
    return hull


def upper_hull(points, recorder=None):
    """
    Upper hull ordered by increasing x.

    The endpoints are the x-extreme points, ties on x going to the larger y
    at both ends. Points sharing x with an endpoint cannot lie on the upper
    hull and are dropped before CONNECT runs.
    """
    points = to_points(points)
    if not points:
        return []

    min_point = max_point = points[0]
    for p in points:
        if p.x < min_point.x or (p.x == min_point.x and p.y > min_point.y):
            min_point = p
        if p.x > max_point.x or (p.x == max_point.x and p.y > max_point.y):
            max_point = p

    if min_point == max_point:
        if recorder is not None:
            recorder.record(Comment("Single point convex hull found, returning the point"))
        return [min_point]

    working = [min_point, max_point]
    working.extend(p for p in points if min_point.x < p.x < max_point.x)
    return connect(min_point, max_point, working, recorder)


def connect(lo, hi, points, recorder=None):
    """
    Upper hull from lo to hi (inclusive), both being points of `points` with
    the unique minimum and maximum x respectively.
    """
    if lo == hi:
        return [lo]

    median = median_of_medians([p.x for p in points])
    if recorder is not None:
        recorder.record(
            VerticalLine(median),
            Comment(f"Found the median at {median:g}"))

    left, right = bridge(points, median, recorder)
    if recorder is not None:
        recorder.record(
            HullEdge(left, right),
            Comment(f"Found the bridge points {left} and {right}"))

    output = []
    if left == lo:
        output.append(left)
    else:
        points_left = [left]
        points_left.extend(p for p in points if p.x < left.x)
        output.extend(connect(lo, left, points_left, recorder))

    if right == hi:
        output.append(right)
    else:
        points_right = [right]
        points_right.extend(p for p in points if p.x > right.x)
        output.extend(connect(right, hi, points_right, recorder))

    return output


def bridge(points, median, recorder=None):
    """
    Upper hull edge (left, right) crossing the vertical line x = median,
    with left.x <= median < right.x.

    Prune-and-search: points are paired, the median slope K of the pairs gives
    a supporting line, and depending on which side of the median line that
    line touches the point set, one endpoint of a constant fraction of the
    pairs is discarded. Every round shrinks the candidate set, so the total
    work is linear.
    """
    points = list(points)
    if len(points) < 2:
        raise PreconditionViolation(f"bridge needs at least 2 points, got {len(points)}")
    if not any(p.x <= median for p in points) or not any(p.x > median for p in points):
        raise PreconditionViolation(f"no points on both sides of x = {median:g}")

    while len(points) > 2:
        candidates = []
        if len(points) % 2:
            candidates.append(points[-1])

        pairs = []
        for p_i, p_j in zip(points[0::2], points[1::2]):
            if p_i.x > p_j.x:
                p_i, p_j = p_j, p_i
            if p_i.x == p_j.x:
                # the lower point of a vertical pair is never on the upper hull
                candidates.append(p_i if p_i.y > p_j.y else p_j)
            else:
                pairs.append((p_i, p_j, (p_j.y - p_i.y) / (p_j.x - p_i.x)))

        if pairs:
            found = _prune(points, pairs, median, candidates, recorder)
            if found is not None:
                return found

        if len(candidates) >= len(points):
            raise BridgeStalled(len(points))
        points = candidates

    left, right = sorted(points, key=lambda p: p.x)
    if not left.x <= median < right.x:
        raise PreconditionViolation(
            f"bridge {left} - {right} does not cross x = {median:g}")
    return left, right


def _prune(points, pairs, median, candidates, recorder):
    # returns the bridge when the supporting line crosses the median line,
    # otherwise appends the survivors of this round to candidates
    median_slope = median_of_medians([k for _, _, k in pairs])

    # heights measured from points[0], tolerance relative to the candidates' spread
    origin = points[0]
    rises = [p.y - origin.y for p in points]
    runs = [median_slope * (p.x - origin.x) for p in points]
    heights = [rise - run for rise, run in zip(rises, runs)]
    max_height = max(heights)
    tolerance = EPSILON * max(abs(rise) + abs(run) for rise, run in zip(rises, runs))
    on_line = [p for p, h in zip(points, heights) if max_height - h <= tolerance]
    k_pt = min(on_line, key=lambda p: p.x)
    m_pt = max(on_line, key=lambda p: p.x)

    if k_pt.x <= median < m_pt.x:
        return k_pt, m_pt

    if m_pt.x <= median:
        # supporting line touches left of the median line: bridge lies further right
        for p_i, p_j, k in pairs:
            if k < median_slope:
                candidates.extend((p_i, p_j))
            else:
                candidates.append(p_j)
    else:
        for p_i, p_j, k in pairs:
            if k > median_slope:
                candidates.extend((p_i, p_j))
            else:
                candidates.append(p_i)

    if recorder is not None:
        events = [Comment(
            f"Supporting line of slope {median_slope:g} misses x = {median:g}, "
            f"{len(candidates)} of {len(points)} candidates left")]
        if k_pt != m_pt:
            events.insert(0, TemporaryEdge(k_pt, m_pt))
        recorder.record(*events)
    return None
