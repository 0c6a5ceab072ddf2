"""
results_summary.py

Зведена таблиця результатів роботи різних методів пошуку кореня
для однієї обраної задачі.

Працює поверх об'єктів, які мають інтерфейс як RootFindingRunResult:
    - method_name
    - result (RootResult: approximation, residual, iterations, converged, stopped_by)
    - func_evals
    - g_evals
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

import pandas as pd

from .engine import RootFindingRunResult

SUMMARY_COLUMNS = [
    "method",
    "approximation",
    "residual",
    "n_iter",
    "func_evals",
    "g_evals",
    "converged",
    "stopped_by",
]


@dataclass
class ResultsSummary:
    """
    Зведення результатів роботи кількох методів
    для однієї обраної задачі.

    Приклад використання:
        summary = ResultsSummary()
        summary.add_run(run_bisection)
        summary.add_run(run_secant)
        rows = summary.as_rows()  # для консолі / pandas / CSV
    """
    runs: List[RootFindingRunResult] = field(default_factory=list)

    def add_run(self, run: RootFindingRunResult) -> None:
        """Додати результат одного методу до зведення."""
        self.runs.append(run)

    # ------------------------------------------------------------------
    # Перетворення в "табличний" вигляд
    # ------------------------------------------------------------------

    def as_rows(self) -> List[Dict[str, Any]]:
        """
        Повернути список dict-рядків з полями SUMMARY_COLUMNS.
        """
        rows: List[Dict[str, Any]] = []

        for run in self.runs:
            res = run.result
            rows.append(
                {
                    "method": run.method_name,
                    "approximation": float(res.approximation),
                    "residual": float(res.residual),
                    "n_iter": int(res.iterations),
                    "func_evals": int(run.func_evals),
                    "g_evals": int(run.g_evals),
                    "converged": bool(res.converged),
                    "stopped_by": res.stopped_by,
                }
            )

        return rows

    # ------------------------------------------------------------------
    # Вибір "найкращого" методу
    # ------------------------------------------------------------------

    def best_by_iterations(self) -> Optional[RootFindingRunResult]:
        """
        Повернути збіжний run з найменшою кількістю ітерацій.
        При рівності перемагає той, що доданий раніше.
        Якщо збіжних запусків немає, повертає None.
        """
        best_run = None

        for run in self.runs:
            if not run.result.converged:
                continue
            if best_run is None or run.result.iterations < best_run.result.iterations:
                best_run = run

        return best_run

    def to_dataframe(self) -> pd.DataFrame:
        """Повернути pandas.DataFrame зі зведеною таблицею."""
        return pd.DataFrame(self.as_rows(), columns=SUMMARY_COLUMNS)


__all__ = ["SUMMARY_COLUMNS", "ResultsSummary"]
