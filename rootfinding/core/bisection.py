"""
bisection.py

Реалізація методу бісекції (поділу відрізка навпіл) як стратегії RootFinder.

Ідея:
    c_k = (a_k + b_k) / 2,
    далі залишаємо ту половину [a_k, c_k] або [c_k, b_k], на кінцях якої
    f має протилежні знаки. Ширина інтервалу на кожній ітерації рівно
    зменшується вдвічі: b_k - a_k = (b_0 - a_0) / 2^(k-1).

Критерій зупинки: ширина інтервалу (b - a) <= tol (а не значення f).
"""

from __future__ import annotations

from typing import Any, Dict, Optional

from .finder_base import (
    BracketingRootFinder,
    FinderGenerator,
    IterationCallback,
    RootResult,
    STOP_EXACT_ROOT,
    STOP_MAX_ITER,
    STOP_TOLERANCE,
)
from .functions import ScalarFunction
from .iteration_record import IterationRecord


class BisectionMethod(BracketingRootFinder):
    """
    Метод бісекції.

    Особливості:
        - f(a) обчислюється один раз до циклу, а f(b) — лише для перевірки
          зміни знаку; далі на ітерацію припадає рівно один виклик f(c);
        - кінці впорядковуються (a < b), тож інтервал [2, 1] теж допустимий;
        - fa оновлюється тільки тоді, коли рухається лівий кінець (a = c);
        - якщо f(c) == 0, корінь знайдено точно і цикл завершується.

    Налаштування (options):
        tol       : допустима ширина інтервалу, > 0 (default: 1e-6)
        max_iter  : запобіжна межа ітерацій на випадок, коли інтервал
                    більше не звужується у float (default: 1000)
    """

    default_options: Dict[str, Any] = {"tol": 1e-6, "max_iter": 1000}

    def __init__(
        self,
        func: ScalarFunction,
        a: float,
        b: float,
        options: Optional[Dict[str, Any]] = None,
        name: Optional[str] = None,
    ) -> None:
        super().__init__(func=func, a=a, b=b, options=options, name=name or "Bisection")

    def _iterate(self) -> FinderGenerator:
        tol = self.tol
        if not tol > 0.0:
            raise ValueError(f"{self.name}: tol повинен бути додатним, отримано {tol}.")
        max_iter = self.max_iter

        a, b = self.a, self.b
        fa, fb = self.check_bracket()
        if a > b:
            a, b, fa = b, a, fb

        # Якщо інтервал уже вужчий за tol, повертаємо a без ітерацій
        c, fc = a, fa
        k = 0
        stopped_by = STOP_TOLERANCE

        while (b - a) > tol:
            if k >= max_iter:
                stopped_by = STOP_MAX_ITER
                break
            k += 1

            c = (a + b) / 2.0
            fc = self.eval_f(c)

            yield IterationRecord(index=k, first=a, second=b, approximation=c, error=fc)

            if fc == 0.0:
                stopped_by = STOP_EXACT_ROOT
                break

            if fa * fc < 0:
                # Корінь на [a, c]; fa не змінюється
                b = c
            else:
                a = c
                fa = fc

        return self.make_result(c, k, fc, stopped_by)


def bisection(
    f: ScalarFunction,
    a: float,
    b: float,
    tol: float = 1e-6,
    max_iter: int = 1000,
    callback: Optional[IterationCallback] = None,
) -> RootResult:
    """
    Знайти корінь f на [a, b] методом бісекції.

    tol: допустима ширина інтервалу. Кидає InvalidBracket, якщо
    f(a) * f(b) >= 0, і ValueError, якщо tol <= 0.
    """
    finder = BisectionMethod(f, a, b, options={"tol": tol, "max_iter": max_iter})
    return finder.solve(callback=callback)


__all__ = [
    "BisectionMethod",
    "bisection",
]
