"""
Tests for the comparison summary of several runs.
"""

import unittest

from rootfinding.core.bisection import BisectionMethod
from rootfinding.core.engine import RootFindingEngine
from rootfinding.core.regula_falsi import RegulaFalsiMethod
from rootfinding.core.results_summary import SUMMARY_COLUMNS, ResultsSummary
from rootfinding.core.secant import SecantMethod

from helpers import cubic


class TestResultsSummary(unittest.TestCase):
    """Test ResultsSummary rows, best run and DataFrame export."""

    def setUp(self):
        engine = RootFindingEngine()
        self.summary = ResultsSummary()
        self.summary.add_run(engine.run(BisectionMethod(cubic, 1.0, 2.0)))
        self.summary.add_run(engine.run(SecantMethod(cubic, 1.0, 2.0)))
        self.summary.add_run(engine.run(RegulaFalsiMethod(cubic, 1.0, 2.0), max_iter=2))

    def test_rows(self):
        rows = self.summary.as_rows()

        self.assertEqual(len(rows), 3)
        self.assertEqual([row["method"] for row in rows], ["Bisection", "Secant", "Regula Falsi"])
        self.assertEqual(set(rows[0]), set(SUMMARY_COLUMNS))
        self.assertEqual(rows[0]["n_iter"], 20)
        self.assertFalse(rows[2]["converged"])
        self.assertEqual(rows[2]["stopped_by"], "max_iter")

    def test_best_by_iterations_skips_unconverged(self):
        best = self.summary.best_by_iterations()

        self.assertEqual(best.method_name, "Secant")

    def test_best_of_empty_summary(self):
        self.assertIsNone(ResultsSummary().best_by_iterations())

    def test_dataframe(self):
        frame = self.summary.to_dataframe()

        self.assertEqual(list(frame.columns), SUMMARY_COLUMNS)
        self.assertEqual(len(frame), 3)
        self.assertEqual(frame.loc[1, "method"], "Secant")

    def test_empty_dataframe_keeps_columns(self):
        frame = ResultsSummary().to_dataframe()

        self.assertTrue(frame.empty)
        self.assertEqual(list(frame.columns), SUMMARY_COLUMNS)


if __name__ == "__main__":
    unittest.main()
