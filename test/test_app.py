"""
Tests for the console application.
"""

import unittest
from dataclasses import replace
from unittest.mock import patch

from parameterized import parameterized
from typer.testing import CliRunner

from rootfinding.app import METHODS, RunConfig, app, create_finder, run_config
from rootfinding.core.errors import InvalidBracket
from rootfinding.core.functions import PROBLEMS


class TestCreateFinder(unittest.TestCase):
    """Test the finder factory used by the console."""

    @parameterized.expand([(key,) for key in METHODS])
    def test_every_method_solves_cubic(self, method_key):
        finder = create_finder(method_key, "cubic", 1e-6, 200)

        self.assertIsInstance(finder, METHODS[method_key])
        result = finder.solve()
        self.assertTrue(result.converged)
        self.assertAlmostEqual(result.approximation, PROBLEMS["cubic"].root, places=5)

    def test_unknown_keys(self):
        with self.assertRaises(ValueError):
            create_finder("newton", "cubic", 1e-6, 100)
        with self.assertRaises(ValueError):
            create_finder("secant", "quartic", 1e-6, 100)

    def test_run_all_methods(self):
        summary = run_config(RunConfig(problem_key="cos", run_all_methods=True))

        self.assertEqual(len(summary.runs), len(METHODS))

    def test_single_method_propagates_failures(self):
        tp = PROBLEMS["cubic"]
        no_sign_change = replace(tp, key="bad", name="bad", f=lambda x: x * x + 1.0, a=-1.0, b=1.0)

        with patch.dict(PROBLEMS, {"bad": no_sign_change}):
            with self.assertRaises(InvalidBracket):
                run_config(RunConfig(problem_key="bad", method_key="illinois"))

            summary = run_config(RunConfig(problem_key="bad", run_all_methods=True))

        names = [run.method_name for run in summary.runs]
        self.assertNotIn("Illinois", names)
        self.assertNotIn("Bisection", names)
        self.assertIn("Fixed point", names)


class TestCli(unittest.TestCase):
    """Test the typer commands."""

    def setUp(self):
        self.runner = CliRunner()

    def test_run(self):
        result = self.runner.invoke(app, ["run", "secant", "--problem", "cubic"])

        self.assertEqual(result.exit_code, 0, result.output)
        self.assertIn("--- Secant ---", result.output)
        self.assertIn("Збіжність досягнута.", result.output)

    def test_run_non_positive_tol(self):
        result = self.runner.invoke(app, ["run", "bisection", "--tol", "0"])

        self.assertEqual(result.exit_code, 2)

    def test_run_unknown_method(self):
        result = self.runner.invoke(app, ["run", "newton"])

        self.assertEqual(result.exit_code, 2)

    def test_compare(self):
        result = self.runner.invoke(app, ["compare", "--problem", "cos", "--tol", "1e-8"])

        self.assertEqual(result.exit_code, 0, result.output)
        for name in ("Bisection", "Regula Falsi", "Secant", "Illinois", "Fixed point", "Steffensen"):
            self.assertIn(name, result.output)
        self.assertIn("Найменше ітерацій", result.output)

    def test_problems(self):
        result = self.runner.invoke(app, ["problems"])

        self.assertEqual(result.exit_code, 0)
        for key in PROBLEMS:
            self.assertIn(key, result.output)


if __name__ == "__main__":
    unittest.main()
