"""
Tests for root-finding with the Illinois method.
"""

import unittest

from parameterized import parameterized

from rootfinding.core.errors import DegenerateInterpolation, InvalidBracket
from rootfinding.core.finder_base import STOP_MAX_ITER, STOP_TOLERANCE
from rootfinding.core.functions import PROBLEMS
from rootfinding.core.illinois import IllinoisMethod, Stagnation, illinois
from rootfinding.core.regula_falsi import regula_falsi

from helpers import CUBIC_ROOT, CountingFunction, cubic


class TestIllinoisMethod(unittest.TestCase):
    """Test the Illinois modification of regula falsi."""

    def test_cubic_root(self):
        result = illinois(cubic, 1.0, 2.0, 1e-6, 100)

        self.assertTrue(result.converged, "Illinois root-finder reported failure!")
        self.assertEqual(result.stopped_by, STOP_TOLERANCE)
        self.assertLess(abs(result.residual), 1e-6)
        self.assertLess(abs(result.approximation - CUBIC_ROOT), 1e-6)

    @parameterized.expand([(1e-6,), (1e-10,)])
    def test_never_slower_than_regula_falsi(self, tol):
        """The stagnation penalty never needs more iterations than plain regula falsi."""
        tp = PROBLEMS["cubic"]
        ill = illinois(tp.f, tp.a, tp.b, tol, 100)
        rf = regula_falsi(tp.f, tp.a, tp.b, tol, 100)

        self.assertTrue(ill.converged)
        self.assertLessEqual(ill.iterations, rf.iterations)
        self.assertAlmostEqual(ill.approximation, tp.root, places=6)

    def test_stagnation_tracker(self):
        """The tracker starts empty and always names the endpoint that did not move."""
        records = []
        illinois(cubic, 1.0, 2.0, 1e-10, 100, callback=records.append)

        self.assertEqual(records[0].meta["stagnation"], Stagnation.NONE.value)
        for prev, rec in zip(records, records[1:]):
            if rec.first == prev.first:
                self.assertEqual(rec.meta["stagnation"], Stagnation.LEFT.value)
            else:
                self.assertEqual(rec.second, prev.second)
                self.assertEqual(rec.meta["stagnation"], Stagnation.RIGHT.value)

    def test_bracket_invariant(self):
        records = []
        illinois(cubic, 1.0, 2.0, 1e-10, 100, callback=records.append)

        for rec in records:
            self.assertLess(cubic(rec.first) * cubic(rec.second), 0)

    def test_stagnation_has_three_states(self):
        self.assertEqual(
            {s.value for s in Stagnation}, {"none", "left", "right"}
        )

    def test_invalid_bracket(self):
        f = CountingFunction(lambda x: (x - 3.0) ** 2)
        with self.assertRaises(InvalidBracket):
            illinois(f, 1.0, 2.0, 1e-6, 100)
        self.assertEqual(f.n_calls, 2)

    def test_degenerate_interpolation(self):
        """Once both cached endpoint values vanish the chord is undefined."""
        values = iter([-1.0, 1.0])

        def flat_after_start(x):
            # -1 and 1 at the endpoints, exactly zero at every interior point
            return next(values, 0.0)

        with self.assertRaises(DegenerateInterpolation) as ctx:
            illinois(flat_after_start, 1.0, 2.0, 0.0, 5000)

        self.assertEqual(ctx.exception.fx, 0.0)

    def test_iteration_limit_is_soft(self):
        records = []
        result = illinois(cubic, 1.0, 2.0, 1e-15, 2, callback=records.append)

        self.assertFalse(result.converged)
        self.assertEqual(result.stopped_by, STOP_MAX_ITER)
        self.assertEqual(result.iterations, 2)
        self.assertEqual(result.approximation, records[-1].approximation)

    def test_default_name(self):
        self.assertEqual(IllinoisMethod(cubic, 1.0, 2.0).name, "Illinois")


if __name__ == "__main__":
    unittest.main()
