"""Unit tests for convex_hull_selection.py: median-of-medians and exact selection."""

import numpy as np
import pytest

from convex_hull_errors import PreconditionViolation
from convex_hull_selection import median, median_of_medians, select


class TestMedianOfMedians:
    def test_empty_is_a_precondition_violation(self):
        with pytest.raises(PreconditionViolation):
            median_of_medians([])

    def test_empty_is_also_a_value_error(self):
        with pytest.raises(ValueError):
            median_of_medians(iter([]))

    def test_single_value(self):
        assert median_of_medians([5]) == 5

    def test_small_odd(self):
        assert median_of_medians([3, 1, 2]) == 2

    def test_small_even_takes_lower_middle(self):
        assert median_of_medians([4, 1, 3, 2]) == 2
        assert median_of_medians([0, 1]) == 0

    def test_result_is_an_input_value(self):
        values = np.random.default_rng(3).uniform(-10, 10, 257).tolist()
        assert median_of_medians(values) in values

    @pytest.mark.parametrize("seed", [0, 1, 2])
    def test_rank_within_constant_fraction(self, seed):
        values = np.random.default_rng(seed).permutation(1000).tolist()
        rank = sorted(values).index(median_of_medians(values))
        assert 0.3 * 1000 - 6 <= rank <= 0.7 * 1000 + 6

    def test_sorted_input_worst_case(self):
        values = list(range(5000))
        rank = median_of_medians(values)
        assert 1494 <= rank <= 3506

    def test_unique_maximum_never_returned(self):
        for n in range(2, 40):
            values = [0] * (n - 1) + [1]
            assert median_of_medians(values) == 0
            values = list(range(n))
            assert median_of_medians(values) < n - 1


class TestSelect:
    def test_matches_sorted_for_every_rank(self):
        values = np.random.default_rng(7).integers(0, 20, 60).tolist()
        expected = sorted(values)
        for k in range(len(values)):
            assert select(values, k) == expected[k]

    def test_floats(self):
        values = np.random.default_rng(11).standard_normal(1001).tolist()
        assert select(values, 0) == min(values)
        assert select(values, 1000) == max(values)

    def test_out_of_range(self):
        with pytest.raises(PreconditionViolation):
            select([1, 2, 3], 3)
        with pytest.raises(PreconditionViolation):
            select([1, 2, 3], -1)

    def test_empty(self):
        with pytest.raises(PreconditionViolation):
            select([], 0)


class TestMedian:
    def test_exact_lower_median(self):
        assert median([9, 1, 8, 2, 7, 3, 6, 4]) == 4
        assert median(range(101)) == 50

    def test_all_equal(self):
        assert median([2.5] * 17) == 2.5

    def test_empty(self):
        with pytest.raises(PreconditionViolation):
            median([])
