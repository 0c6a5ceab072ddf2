"""
engine.py

Універсальний двигун для запуску методів пошуку кореня (RootFinder).

Функціонал:
    - підставляє значення tol / max_iter за замовчуванням на час запуску, якщо метод
      не отримав їх явно;
    - проганяє метод до кінця і формує трасу ітерацій (для таблиць);
    - рахує кількість викликів f та g;
    - фіксує причину зупинки (tolerance, exact_root, max_iter, stability_guard);
    - підтримує callback для оновлення консолі / логів на кожній ітерації.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from .finder_base import IterationCallback, RootFinder, RootResult
from .iteration_record import IterationRecord

logger = logging.getLogger(__name__)


@dataclass
class RootFindingRunResult:
    """
    Підсумок одного запуску методу.

    Атрибути:
        method_name   - назва методу (RootFinder.name).
        iterations    - список IterationRecord (траса процесу).
        result        - RootResult, який повернув метод.
        func_evals    - кількість викликів f.
        g_evals       - кількість викликів g.
        stopped_by    - причина зупинки ("tolerance", "exact_root", "max_iter", "stability_guard").
    """
    method_name: str
    iterations: List[IterationRecord]
    result: RootResult
    func_evals: int
    g_evals: int
    stopped_by: str

    @property
    def x_star(self) -> float:
        return self.result.approximation

    @property
    def n_iter(self) -> int:
        return self.result.iterations

    @property
    def converged(self) -> bool:
        return self.result.converged


class RootFindingEngine:
    """
    Движок, який керує запуском заданого RootFinder.

    Налаштування за замовчуванням (підставляються, якщо метод їх не має):
        tol       : поріг критерію зупинки (default: 1e-6)
        max_iter  : максимальна кількість ітерацій (default: 100)

    Пріоритет значень на час запуску:
        явні аргументи run() > finder.options > власні default_options
        класу методу (якщо вони відрізняються від спільних RootFinder)
        > значення движка.
    options самого методу движок не змінює.
    """

    def __init__(self, tol: float = 1e-6, max_iter: int = 100) -> None:
        self.tol_default = tol
        self.max_iter_default = max_iter

    def effective_options(
        self,
        finder: RootFinder,
        max_iter: Optional[int] = None,
        tol: Optional[float] = None,
    ) -> Dict[str, Any]:
        """Копія options методу з підставленими tol / max_iter для запуску."""
        options = dict(finder.options)
        explicit = {"tol": tol, "max_iter": max_iter}
        engine_defaults = {"tol": self.tol_default, "max_iter": self.max_iter_default}

        for key, value in explicit.items():
            if value is not None:
                options[key] = value
            elif key not in options and not _has_own_default(finder, key):
                options[key] = engine_defaults[key]
        return options

    def run(
        self,
        finder: RootFinder,
        max_iter: Optional[int] = None,
        tol: Optional[float] = None,
        callback: Optional[IterationCallback] = None,
    ) -> RootFindingRunResult:
        """
        Запустити метод пошуку кореня.

        Явні max_iter / tol діють лише на цей запуск; після нього
        finder.options відновлюються.
        """
        iterations: List[IterationRecord] = []

        def _collect(record: IterationRecord) -> None:
            iterations.append(record)
            if callback is not None:
                callback(record)

        saved = finder.options
        finder.options = self.effective_options(finder, max_iter=max_iter, tol=tol)
        try:
            logger.info("Запуск %s (tol=%g, max_iter=%s)", finder.name, finder.tol, finder.option("max_iter"))
            result = finder.solve(callback=_collect)
        finally:
            finder.options = saved

        return RootFindingRunResult(
            method_name=finder.name,
            iterations=iterations,
            result=result,
            func_evals=finder.func_evals,
            g_evals=finder.g_evals,
            stopped_by=result.stopped_by,
        )


def _has_own_default(finder: RootFinder, key: str) -> bool:
    # bisection: max_iter=1000 замість спільних 100
    own = type(finder).default_options
    return key in own and own[key] != RootFinder.default_options.get(key)


__all__ = [
    "IterationRecord",
    "RootFindingRunResult",
    "RootFindingEngine",
]
