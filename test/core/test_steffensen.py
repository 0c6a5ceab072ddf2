"""
Tests for Steffensen's acceleration of fixed-point iteration.
"""

import math
import unittest

from parameterized import parameterized

from rootfinding.core.finder_base import STOP_MAX_ITER, STOP_STABILITY_GUARD, STOP_TOLERANCE
from rootfinding.core.fixed_point import fixed_point
from rootfinding.core.steffensen import SteffensenMethod, denominator_vanishes, steffensen

COS_FIXED_POINT = 0.7390851332151607


def cos_residual(x):
    return math.cos(x) - x


class TestSteffensenMethod(unittest.TestCase):
    """Test Aitken-accelerated fixed-point iteration."""

    def test_cosine_fixed_point(self):
        result = steffensen(math.cos, cos_residual, 0.5, 1e-8, 100)

        self.assertTrue(result.converged, "Steffensen reported failure!")
        self.assertEqual(result.stopped_by, STOP_TOLERANCE)
        self.assertAlmostEqual(result.approximation, COS_FIXED_POINT, places=7)

    @parameterized.expand([(1e-6,), (1e-8,)])
    def test_faster_than_fixed_point(self, tol):
        """Acceleration needs strictly fewer iterations than plain iteration."""
        acc = steffensen(math.cos, cos_residual, 0.5, tol, 100)
        plain = fixed_point(math.cos, 0.5, tol, 100, f=cos_residual)

        self.assertTrue(acc.converged)
        self.assertTrue(plain.converged)
        self.assertLess(acc.iterations, plain.iterations)

    def test_two_g_evaluations_per_iteration(self):
        result = steffensen(math.cos, cos_residual, 0.5, 1e-8, 100)

        self.assertEqual(result.g_evals, 2 * result.iterations)

    def test_records(self):
        records = []
        steffensen(math.cos, cos_residual, 0.5, 1e-8, 100, callback=records.append)

        first = records[0]
        x1 = math.cos(0.5)
        x2 = math.cos(x1)
        self.assertEqual(first.first, 0.5)
        self.assertEqual(first.second, x1)
        self.assertEqual(first.meta["x2"], x2)
        self.assertEqual(first.approximation, 0.5 - (x1 - 0.5) ** 2 / (x2 - 2.0 * x1 + 0.5))
        self.assertEqual(first.error, cos_residual(first.approximation))

    def test_guard_on_first_iteration(self):
        """A translation g(x) = x + 1 has a zero second difference."""
        records = []
        result = steffensen(lambda x: x + 1.0, None, 0.5, 1e-6, 100, callback=records.append)

        self.assertFalse(result.converged)
        self.assertEqual(result.stopped_by, STOP_STABILITY_GUARD)
        self.assertEqual(result.iterations, 0)
        self.assertEqual(result.approximation, 0.5)
        self.assertEqual(result.residual, 1.0)
        self.assertEqual(records, [])

    def test_guard_after_exact_step(self):
        """For a linear g the first step is exact and the next denominator vanishes."""
        g = lambda x: 0.5 * x + 1.0  # noqa: E731
        result = steffensen(g, None, 0.0, 1e-6, 100)

        self.assertEqual(result.stopped_by, STOP_STABILITY_GUARD)
        self.assertFalse(result.converged)
        self.assertEqual(result.iterations, 1)
        self.assertEqual(result.approximation, 2.0)
        self.assertEqual(result.residual, 0.0)

    def test_iteration_limit_is_soft(self):
        result = steffensen(math.cos, cos_residual, 0.5, 1e-8, 1)

        self.assertFalse(result.converged)
        self.assertEqual(result.stopped_by, STOP_MAX_ITER)
        self.assertEqual(result.iterations, 1)

    def test_guard_factor_option(self):
        finder = SteffensenMethod(math.cos, 0.5, options={"guard_factor": 1e20})
        result = finder.solve()

        self.assertEqual(result.stopped_by, STOP_STABILITY_GUARD)
        self.assertEqual(result.iterations, 0)

    @parameterized.expand(
        [
            ("zero", 0.0, 1.0, True),
            ("within_ten_ulps", 1e-15, 1.0, True),
            ("negative_within", -1e-15, 1.0, True),
            ("small_but_safe", 1e-10, 1.0, False),
            ("scaled_by_x", 1e-12, 1e4, True),
        ]
    )
    def test_denominator_vanishes(self, _name, denom, x, expected):
        self.assertEqual(denominator_vanishes(denom, x), expected)


if __name__ == "__main__":
    unittest.main()
