"""Unit tests for convex_hull_kirkpatrick_seidel.py: bridge, connect, upper hull and merge."""

import numpy as np
import pytest

from convex_hull_errors import BridgeStalled, PreconditionViolation
from convex_hull_geometry import COUNTERCLOCKWISE, Point, leftmost, orientation, to_points
from convex_hull_kirkpatrick_seidel import bridge, connect, kirkpatrick_seidel, upper_hull

SCENARIO = [(0, 3), (2, 2), (1, 1), (2, 1), (3, 0), (0, 0), (3, 3)]
# two pairs whose slopes differ by 1e-10, the bridge over x = 5 is the flat top
NEAR_TIE = [(0, 0), (100, 0), (1, -1), (2, -1 + 1e-10), (3, -2), (4, -2 + 1e-10)]


def brute_force_upper_bridge(points, median):
    """Every pair straddling the median line, keep the one with nothing above it."""
    best = None
    for a in points:
        for b in points:
            if not a.x <= median < b.x:
                continue
            k = (b.y - a.y) / (b.x - a.x)
            if all(p.y <= a.y + k * (p.x - a.x) + 1e-9 for p in points):
                on_line = [p for p in points if abs(p.y - (a.y + k * (p.x - a.x))) <= 1e-9]
                best = (min(on_line), max(on_line))
    return best


class TestBridge:
    def test_two_points_ordered_by_x(self):
        assert bridge(to_points([(4, 0), (1, 2)]), 2) == ((1, 2), (4, 0))

    def test_too_few_points(self):
        with pytest.raises(PreconditionViolation):
            bridge(to_points([(1, 1)]), 1)

    def test_no_point_right_of_median(self):
        with pytest.raises(PreconditionViolation):
            bridge(to_points([(0, 0), (1, 1), (2, 0)]), 2)

    def test_supporting_line_found_first_round(self):
        pts = to_points([(0, 3), (3, 3), (2, 2), (1, 1), (2, 1)])
        assert bridge(pts, 2) == ((0, 3), (3, 3))

    def test_pruning_rounds(self):
        pts = to_points([(0, 0), (3, 0), (2, -2), (1, -1), (2, -1)])
        assert bridge(pts, 2) == ((0, 0), (3, 0))

    def test_vertical_pairs(self):
        pts = to_points([(0, 0), (0, 5), (4, 0), (4, 5), (2, 1)])
        assert bridge(pts, 2) == ((0, 5), (4, 5))

    def test_collinear_points_give_extremes(self):
        pts = to_points([(0, 0), (3, 0), (1, 0), (2, 0)])
        assert bridge(pts, 1) == ((0, 0), (3, 0))

    def test_duplicates(self):
        pts = to_points([(0, 0), (0, 0), (1, 2), (1, 2), (3, 2), (3, 2), (4, 0)])
        assert bridge(pts, 1) == ((1, 2), (3, 2))

    @pytest.mark.parametrize("seed", range(8))
    def test_matches_brute_force(self, seed):
        rng = np.random.default_rng(seed)
        pts = to_points(rng.integers(-20, 20, size=(41, 2)).tolist())
        xs = sorted({p.x for p in pts})
        median = xs[len(xs) // 2 - 1]
        assert bridge(pts, median) == brute_force_upper_bridge(pts, median)

    def test_slopes_that_nearly_tie_keep_the_bridge_vertex(self):
        pts = to_points(NEAR_TIE)
        assert bridge(pts, 5) == ((0, 0), (100, 0))

    @pytest.mark.parametrize("scale", [1e-8, 1e-4, 1e6])
    def test_matches_brute_force_at_any_scale(self, scale):
        rng = np.random.default_rng(5)
        pts = to_points((rng.integers(-20, 20, size=(41, 2)) * scale).tolist())
        xs = sorted({p.x for p in pts})
        median = xs[len(xs) // 2 - 1]
        unscaled = [Point(p.x / scale, p.y / scale) for p in pts]
        expected = brute_force_upper_bridge(unscaled, median / scale)
        left, right = bridge(pts, median)
        assert (left.x / scale, left.y / scale) == pytest.approx(tuple(expected[0]))
        assert (right.x / scale, right.y / scale) == pytest.approx(tuple(expected[1]))

    def test_bridge_stalled_is_a_precondition_violation(self):
        assert issubclass(BridgeStalled, PreconditionViolation)
        assert BridgeStalled(7).size == 7


class TestUpperHull:
    def test_empty(self):
        assert upper_hull([]) == []

    def test_single_point(self):
        assert upper_hull([(2, 2), (2, 2)]) == [(2, 2)]

    def test_vertical_points_give_top_point(self):
        assert upper_hull([(0, 0), (0, 2), (0, 1)]) == [(0, 2)]

    def test_scenario(self):
        assert upper_hull(SCENARIO) == [(0, 3), (3, 3)]

    def test_tie_on_x_prefers_larger_y(self):
        pts = [(0, 0), (0, 4), (5, 1), (5, 3), (2, 6)]
        assert upper_hull(pts) == [(0, 4), (2, 6), (5, 3)]

    def test_ordered_by_increasing_x(self):
        points = np.random.default_rng(2).uniform(-100, 100, size=(500, 2)).tolist()
        upper = upper_hull(points)
        assert [p.x for p in upper] == sorted(p.x for p in upper)
        for a, b, c in zip(upper, upper[1:], upper[2:]):
            # turning right all along the upper chain
            assert orientation(a, b, c) != COUNTERCLOCKWISE


class TestConnect:
    def test_same_endpoints(self):
        p = Point(1, 1)
        assert connect(p, p, [p]) == [p]

    def test_two_points(self):
        lo, hi = Point(0, 0), Point(1, 1)
        assert connect(lo, hi, [lo, hi]) == [lo, hi]

    def test_arch(self):
        pts = to_points([(0, 0), (1, 3), (2, 4), (3, 3), (4, 0), (2, 1), (1, 1)])
        assert connect(pts[0], pts[4], pts) == [(0, 0), (1, 3), (2, 4), (3, 3), (4, 0)]


class TestKirkpatrickSeidel:
    def test_empty(self):
        assert kirkpatrick_seidel([]) == []

    def test_single_point(self):
        assert kirkpatrick_seidel([(1, 2)]) == [(1, 2)]

    def test_two_points(self):
        assert kirkpatrick_seidel([(1, 1), (0, 0)]) == [(0, 0), (1, 1)]

    def test_square_with_interior_points(self):
        assert kirkpatrick_seidel(SCENARIO) == [(0, 0), (3, 0), (3, 3), (0, 3)]

    def test_identical_points(self):
        assert kirkpatrick_seidel([(5, 5)] * 50) == [(5, 5)]

    def test_collinear_points(self):
        assert kirkpatrick_seidel([(0, 0), (1, 0), (2, 0), (3, 0)]) == [(0, 0), (3, 0)]

    def test_vertical_collinear_points(self):
        assert kirkpatrick_seidel([(0, 1), (0, 0), (0, 2)]) == [(0, 0), (0, 2)]

    def test_returns_points(self):
        assert all(isinstance(p, Point) for p in kirkpatrick_seidel(SCENARIO))

    @pytest.mark.parametrize("seed", range(5))
    def test_random_points_counterclockwise(self, seed):
        points = np.random.default_rng(seed).uniform(-10, 10, size=(400, 2)).tolist()
        hull = kirkpatrick_seidel(points)
        n = len(hull)
        assert hull[0] == tuple(leftmost(points))
        assert len(set(hull)) == n
        for i in range(n):
            assert orientation(hull[i], hull[(i + 1) % n], hull[(i + 2) % n]) == COUNTERCLOCKWISE
