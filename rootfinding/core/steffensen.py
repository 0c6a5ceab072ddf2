"""
steffensen.py

Реалізація методу Стеффенсена (прискорення Ейткена Δ² для ітерації
нерухомої точки) як стратегії RootFinder.

Ідея:
    x1 = g(x),  x2 = g(x1),
    denom = x2 - 2 x1 + x          (друга скінченна різниця),
    x_new = x - (x1 - x)^2 / denom.

На ітерацію припадає два виклики g замість одного, натомість збіжність
стає квадратичною.

Захист стійкості:
    якщо |denom| <= guard_factor * spacing(x) (абсолютний допуск у масштабі
    відстані між сусідніми float біля x, відносний допуск нульовий),
    прискорення на цьому кроці незастосовне. Цикл зупиняється м'яко:
    повертається останнє стійке x з converged=False.
"""

from __future__ import annotations

from typing import Any, Dict, Optional

import numpy as np

from .finder_base import (
    FinderGenerator,
    IterationCallback,
    RootFinder,
    RootResult,
    STOP_MAX_ITER,
    STOP_STABILITY_GUARD,
    STOP_TOLERANCE,
)
from .functions import ScalarFunction
from .iteration_record import IterationRecord


def denominator_vanishes(denom: float, x: float, guard_factor: float = 10.0) -> bool:
    """
    Чи є знаменник Ейткена чисельно нульовим біля x.

    Порівняння з нулем з atol = guard_factor * spacing(x) і rtol = 0.
    """
    atol = guard_factor * float(np.spacing(abs(float(x))))
    return bool(np.isclose(denom, 0.0, rtol=0.0, atol=atol))


class SteffensenMethod(RootFinder):
    """
    Метод Стеффенсена.

    Параметри:
        g   : ітераційна функція
        x0  : початкове наближення
        f   : функція залишку для звітів; якщо не задана, f(x) = g(x) - x

    Налаштування (options):
        tol           : поріг |x_new - x| (default: 1e-6)
        max_iter      : максимальна кількість ітерацій (default: 100)
        guard_factor  : множник spacing(x) у захисті знаменника (default: 10.0)
    """

    default_options: Dict[str, Any] = {"tol": 1e-6, "max_iter": 100, "guard_factor": 10.0}

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
            name=name or "Steffensen",
        )
        self.x0 = float(x0)

    def _iterate(self) -> FinderGenerator:
        tol = self.tol
        max_iter = self.max_iter
        guard_factor = float(self.option("guard_factor"))

        x = self.x0
        k = 0

        while k < max_iter:
            x1 = self.eval_g(x)
            x2 = self.eval_g(x1)
            denom = x2 - 2.0 * x1 + x

            if denominator_vanishes(denom, x, guard_factor):
                return self.make_result(x, k, self.eval_f(x), STOP_STABILITY_GUARD)

            k += 1
            xnew = x - (x1 - x) ** 2 / denom
            err = self.eval_f(xnew)

            yield IterationRecord(
                index=k,
                first=x,
                second=x1,
                approximation=xnew,
                error=err,
                meta={"x2": x2, "denominator": denom},
            )

            if abs(xnew - x) < tol:
                return self.make_result(xnew, k, err, STOP_TOLERANCE)

            x = xnew

        return self.make_result(x, k, self.eval_f(x), STOP_MAX_ITER)


def steffensen(
    g: ScalarFunction,
    f: Optional[ScalarFunction],
    x0: float,
    tol: float = 1e-6,
    max_iter: int = 100,
    callback: Optional[IterationCallback] = None,
) -> RootResult:
    """
    Прискорена ітерація нерухомої точки методом Стеффенсена.

    Якщо знаменник Ейткена зникає, повертає останнє стійке x
    з converged=False і stopped_by="stability_guard".
    """
    finder = SteffensenMethod(g, x0, f=f, options={"tol": tol, "max_iter": max_iter})
    return finder.solve(callback=callback)


__all__ = [
    "denominator_vanishes",
    "SteffensenMethod",
    "steffensen",
]
