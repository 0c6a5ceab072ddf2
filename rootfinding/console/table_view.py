"""
table_view.py

Таблиці ітерацій та зведення результатів для консольного виводу.

Функціонал:
    - перетворює послідовність IterationRecord у pandas.DataFrame;
    - заголовки колонок залежать від методу:
        бісекція / Regula Falsi / Іллінойс : k, a, b, c, f(c)
        січні                              : k, x0, x1, c, f(c)
        нерухома точка                     : k, x_k, g(x_k), x_{k+1}, |f(x_{k+1})|
        Стеффенсен                         : k, x, g(x), x_new, f(x_new)
    - хелпери:
        iterations_frame(records, method_key)
        format_iterations(records, method_key)
        format_result(result)
        format_summary(summary)
"""

from __future__ import annotations

from typing import Dict, Iterable, List

import pandas as pd

from rootfinding.core.finder_base import RootResult
from rootfinding.core.iteration_record import IterationRecord
from rootfinding.core.results_summary import ResultsSummary

BRACKET_HEADERS = ["k", "a", "b", "c", "f(c)"]

HEADERS: Dict[str, List[str]] = {
    "bisection": BRACKET_HEADERS,
    "regula_falsi": BRACKET_HEADERS,
    "illinois": BRACKET_HEADERS,
    "secant": ["k", "x0", "x1", "c", "f(c)"],
    "fixed_point": ["k", "x_k", "g(x_k)", "x_{k+1}", "|f(x_{k+1})|"],
    "steffensen": ["k", "x", "g(x)", "x_new", "f(x_new)"],
}

VALUE_FORMAT = "{:.10f}".format
ERROR_FORMAT = "{:.4e}".format


def iterations_frame(records: Iterable[IterationRecord], method_key: str) -> pd.DataFrame:
    """
    Зібрати трасу ітерацій у DataFrame з колонками методу.

    Невідомий method_key дає загальні заголовки (k, first, second, approx, error).
    """
    headers = HEADERS.get(method_key, ["k", "first", "second", "approx", "error"])
    rows = [
        [rec.index, rec.first, rec.second, rec.approximation, rec.error]
        for rec in records
    ]
    return pd.DataFrame(rows, columns=headers)


def format_iterations(records: Iterable[IterationRecord], method_key: str) -> str:
    """Текстова таблиця ітерацій (фіксована точність для значень, e-формат для похибки)."""
    frame = iterations_frame(records, method_key)
    if frame.empty:
        return "(немає ітерацій)"

    value_cols = frame.columns[1:4]
    error_col = frame.columns[4]
    formatters = {col: VALUE_FORMAT for col in value_cols}
    formatters[error_col] = ERROR_FORMAT
    return frame.to_string(index=False, formatters=formatters)


def format_result(result: RootResult) -> str:
    """Короткий підсумок одного запуску."""
    status = "Збіжність досягнута." if result.converged else (
        f"Зупинка без збіжності ({result.stopped_by})."
    )
    lines = [
        status,
        f"Наближення кореня : {result.approximation:.12f}",
        f"Залишок f(x)      : {result.residual:.6e}",
        f"Ітерацій          : {result.iterations}",
        f"Викликів f / g    : {result.func_evals} / {result.g_evals}",
    ]
    return "\n".join(lines)


def format_summary(summary: ResultsSummary) -> str:
    """Текстова зведена таблиця кількох методів."""
    frame = summary.to_dataframe()
    if frame.empty:
        return "(немає запусків)"
    return frame.to_string(
        index=False,
        formatters={"approximation": VALUE_FORMAT, "residual": ERROR_FORMAT},
    )


__all__ = [
    "HEADERS",
    "iterations_frame",
    "format_iterations",
    "format_result",
    "format_summary",
]
