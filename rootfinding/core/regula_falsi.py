"""
regula_falsi.py

Реалізація методу хибного положення (Regula Falsi) як стратегії RootFinder.

Ідея:
    c_k = (a_k f(b_k) - b_k f(a_k)) / (f(b_k) - f(a_k)),
    тобто точка перетину хорди між (a, f(a)) і (b, f(b)) з віссю x.

Критерій зупинки: за значенням функції |f(c)| < tol
(на відміну від бісекції, де tol — ширина інтервалу).
"""

from __future__ import annotations

from typing import Any, Dict, Optional

from .finder_base import (
    BracketingRootFinder,
    FinderGenerator,
    IterationCallback,
    RootResult,
    STOP_MAX_ITER,
    STOP_TOLERANCE,
)
from .functions import ScalarFunction
from .iteration_record import IterationRecord


class RegulaFalsiMethod(BracketingRootFinder):
    """
    Метод Regula Falsi.

    Особливості:
        - fa і fb обчислюються один раз до циклу;
        - на ітерації рухається рівно один кінець, і його значення
          береться з уже обчисленого f(c);
        - якщо max_iter вичерпано, повертається останнє c з converged=False.

    Налаштування (options):
        tol       : поріг |f(c)| (default: 1e-6)
        max_iter  : максимальна кількість ітерацій (default: 100)
    """

    def __init__(
        self,
        func: ScalarFunction,
        a: float,
        b: float,
        options: Optional[Dict[str, Any]] = None,
        name: Optional[str] = None,
    ) -> None:
        super().__init__(func=func, a=a, b=b, options=options, name=name or "Regula Falsi")

    def _iterate(self) -> FinderGenerator:
        tol = self.tol
        max_iter = self.max_iter

        a, b = self.a, self.b
        fa, fb = self.check_bracket()

        c, fc = a, fa

        for k in range(1, max_iter + 1):
            c = (a * fb - b * fa) / (fb - fa)
            fc = self.eval_f(c)

            yield IterationRecord(index=k, first=a, second=b, approximation=c, error=fc)

            if abs(fc) < tol:
                return self.make_result(c, k, fc, STOP_TOLERANCE)

            if fa * fc < 0:
                b, fb = c, fc
            else:
                a, fa = c, fc

        return self.make_result(c, max_iter, fc, STOP_MAX_ITER)


def regula_falsi(
    f: ScalarFunction,
    a: float,
    b: float,
    tol: float = 1e-6,
    max_iter: int = 100,
    callback: Optional[IterationCallback] = None,
) -> RootResult:
    """
    Знайти корінь f на [a, b] методом Regula Falsi.

    tol: поріг для |f(c)|. Кидає InvalidBracket, якщо f(a) * f(b) >= 0.
    """
    finder = RegulaFalsiMethod(f, a, b, options={"tol": tol, "max_iter": max_iter})
    return finder.solve(callback=callback)


__all__ = [
    "RegulaFalsiMethod",
    "regula_falsi",
]
