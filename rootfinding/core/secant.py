"""
secant.py

Реалізація методу січних як стратегії RootFinder.

Ідея:
    c_k = x1 - f(x1) (x1 - x0) / (f(x1) - f(x0)),
    далі зсув: x0 <- x1, x1 <- c_k.

Критерій зупинки: за кроком |c - x1| < tol (а не за значенням f).
Умова на знаки f(x0), f(x1) не потрібна.
"""

from __future__ import annotations

from typing import Any, Dict, Optional

from .errors import DegenerateSecant
from .finder_base import (
    FinderGenerator,
    IterationCallback,
    RootFinder,
    RootResult,
    STOP_MAX_ITER,
    STOP_TOLERANCE,
)
from .functions import ScalarFunction
from .iteration_record import IterationRecord


class SecantMethod(RootFinder):
    """
    Метод січних.

    Особливості:
        - f(x0) і f(x1) обчислюються один раз до циклу;
        - при зсуві старе f(x1) стає f(x0) без повторного обчислення,
          тому на ітерацію припадає рівно один виклик f;
        - якщо f(x1) == f(x0), крок не визначений, тому кидаємо DegenerateSecant.

    Налаштування (options):
        tol       : поріг кроку |c - x1| (default: 1e-6)
        max_iter  : максимальна кількість ітерацій (default: 100)
    """

    def __init__(
        self,
        func: ScalarFunction,
        x0: float,
        x1: float,
        options: Optional[Dict[str, Any]] = None,
        name: Optional[str] = None,
    ) -> None:
        super().__init__(func=func, options=options, name=name or "Secant")
        self.x0 = float(x0)
        self.x1 = float(x1)

    def _iterate(self) -> FinderGenerator:
        tol = self.tol
        max_iter = self.max_iter

        x0, x1 = self.x0, self.x1
        fx0 = self.eval_f(x0)
        fx1 = self.eval_f(x1)

        c, fc = x1, fx1

        for k in range(1, max_iter + 1):
            if fx1 - fx0 == 0:
                raise DegenerateSecant(k, x0, x1, fx1)

            c = x1 - fx1 * (x1 - x0) / (fx1 - fx0)
            fc = self.eval_f(c)

            yield IterationRecord(index=k, first=x0, second=x1, approximation=c, error=fc)

            if abs(c - x1) < tol:
                return self.make_result(c, k, fc, STOP_TOLERANCE)

            x0, fx0 = x1, fx1
            x1, fx1 = c, fc

        return self.make_result(c, max_iter, fc, STOP_MAX_ITER)


def secant(
    f: ScalarFunction,
    x0: float,
    x1: float,
    tol: float = 1e-6,
    max_iter: int = 100,
    callback: Optional[IterationCallback] = None,
) -> RootResult:
    """
    Знайти корінь f методом січних з початкових точок x0, x1.

    tol: поріг кроку |c - x1|. Кидає DegenerateSecant на тій ітерації,
    де f(x1) == f(x0).
    """
    finder = SecantMethod(f, x0, x1, options={"tol": tol, "max_iter": max_iter})
    return finder.solve(callback=callback)


__all__ = [
    "SecantMethod",
    "secant",
]
