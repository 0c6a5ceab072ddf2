"""
fixed_point.py

Реалізація ітерації нерухомої точки x_{k+1} = g(x_k) як стратегії RootFinder.

Критерій зупинки: |x_{k+1} - x_k| < tol. Значення |f(x_{k+1})| звітується
на кожній ітерації лише для діагностики і на зупинку не впливає.
Незбіжність за max_iter — очікуваний результат (converged=False), а не виняток.
"""

from __future__ import annotations

from typing import Any, Dict, Optional

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


class FixedPointMethod(RootFinder):
    """
    Ітерація нерухомої точки.

    Параметри:
        g   : ітераційна функція
        x0  : початкове наближення
        f   : функція залишку; якщо не задана, f(x) = g(x) - x

    Налаштування (options):
        tol       : поріг |x_{k+1} - x_k| (default: 1e-6)
        max_iter  : максимальна кількість ітерацій (default: 100)
    """

    def __init__(
        self,
        g: ScalarFunction,
        x0: float,
        f: Optional[ScalarFunction] = None,
        options: Optional[Dict[str, Any]] = None,
        name: Optional[str] = None,
    ) -> None:
        super().__init__(
            func=f if f is not None else (lambda x: g(x) - x),
            g=g,
            options=options,
            name=name or "Fixed point",
        )
        self.x0 = float(x0)

    def _iterate(self) -> FinderGenerator:
        tol = self.tol
        max_iter = self.max_iter

        xk = self.x0
        k = 0
        stopped_by = STOP_MAX_ITER

        while k < max_iter:
            k += 1
            xkp1 = self.eval_g(xk)
            err = abs(self.eval_f(xkp1))

            yield IterationRecord(index=k, first=xk, second=xkp1, approximation=xkp1, error=err)

            step = abs(xkp1 - xk)
            xk = xkp1
            if step < tol:
                stopped_by = STOP_TOLERANCE
                break

        return self.make_result(xk, k, self.eval_f(xk), stopped_by)


def fixed_point(
    g: ScalarFunction,
    x0: float,
    tol: float = 1e-6,
    max_iter: int = 100,
    f: Optional[ScalarFunction] = None,
    callback: Optional[IterationCallback] = None,
) -> RootResult:
    """
    Знайти нерухому точку p = g(p) простою ітерацією з x0.

    Повертає RootResult: p (approximation), residual = f(p), iterations, converged.
    Якщо f не задана, використовується f(x) = g(x) - x.
    """
    finder = FixedPointMethod(g, x0, f=f, options={"tol": tol, "max_iter": max_iter})
    return finder.solve(callback=callback)


__all__ = [
    "FixedPointMethod",
    "fixed_point",
]
