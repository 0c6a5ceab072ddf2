"""
illinois.py

Реалізація методу Іллінойс (модифікований Regula Falsi) як стратегії RootFinder.

Ідея:
    c_k обчислюється тією ж формулою хорди, що й у Regula Falsi.
    Якщо один і той самий кінець інтервалу лишається нерухомим другу
    ітерацію поспіль, його значення функції ділиться навпіл. Це не дає
    нерухомому кінцю домінувати у формулі хорди, через що звичайний
    Regula Falsi сходиться лише лінійно.

Критерій зупинки: |f(c)| < tol.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Dict, Optional

from .errors import DegenerateInterpolation
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


class Stagnation(Enum):
    """Який кінець інтервалу не рухався на попередній ітерації."""

    NONE = "none"
    LEFT = "left"    # a лишився на місці
    RIGHT = "right"  # b лишився на місці


class IllinoisMethod(BracketingRootFinder):
    """
    Метод Іллінойс.

    Особливості:
        - та сама сигнатура й початкова перевірка, що й у Regula Falsi;
        - стан застою (Stagnation) перемикається на кожній ітерації
          на кінець, що не рухався; fa/fb ділиться навпіл лише тоді,
          коли той самий кінець застоює двічі поспіль;
        - якщо f(b) == f(a), кидаємо DegenerateInterpolation.

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
        super().__init__(func=func, a=a, b=b, options=options, name=name or "Illinois")

    def _iterate(self) -> FinderGenerator:
        tol = self.tol
        max_iter = self.max_iter

        a, b = self.a, self.b
        fa, fb = self.check_bracket()

        c, fc = a, fa
        stagnant = Stagnation.NONE

        for k in range(1, max_iter + 1):
            if fb - fa == 0:
                raise DegenerateInterpolation(k, a, b, fa)

            c = (a * fb - b * fa) / (fb - fa)
            fc = self.eval_f(c)

            yield IterationRecord(
                index=k,
                first=a,
                second=b,
                approximation=c,
                error=fc,
                meta={"stagnation": stagnant.value},
            )

            if abs(fc) < tol:
                return self.make_result(c, k, fc, STOP_TOLERANCE)

            if fa * fc < 0:
                # Корінь на [a, c]; a не рухається
                b = c
                if stagnant is Stagnation.LEFT:
                    fa /= 2.0
                fb = fc
                stagnant = Stagnation.LEFT
            else:
                # Корінь на [c, b]; b не рухається
                a = c
                if stagnant is Stagnation.RIGHT:
                    fb /= 2.0
                fa = fc
                stagnant = Stagnation.RIGHT

        return self.make_result(c, max_iter, fc, STOP_MAX_ITER)


def illinois(
    f: ScalarFunction,
    a: float,
    b: float,
    tol: float = 1e-6,
    max_iter: int = 100,
    callback: Optional[IterationCallback] = None,
) -> RootResult:
    """
    Знайти корінь f на [a, b] методом Іллінойс.

    tol: поріг для |f(c)|. Кидає InvalidBracket, якщо f(a) * f(b) >= 0,
    і DegenerateInterpolation, якщо f(b) == f(a) на якійсь ітерації.
    """
    finder = IllinoisMethod(f, a, b, options={"tol": tol, "max_iter": max_iter})
    return finder.solve(callback=callback)


__all__ = [
    "Stagnation",
    "IllinoisMethod",
    "illinois",
]
