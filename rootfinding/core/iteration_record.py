"""
iteration_record.py

Структура даних для представлення однієї ітерації методу пошуку кореня.
Записи створюються методом по одному на ітерацію та передаються у sink
(callback) — движок, консольна таблиця, тести.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict


@dataclass
class IterationRecord:
    """
    Опис однієї ітерації пошуку кореня.

    Атрибути:
        index          - номер ітерації (1, 2, 3, ...)
        first          - ліва межа інтервалу або перша точка (a, x0, x_k)
        second         - права межа інтервалу або друга точка (b, x1, g(x_k))
        approximation  - нове наближення кореня на цій ітерації
        error          - метрика похибки, яку звітує метод (f(c), |f(x_{k+1})|, ...)
        meta           - довільна додаткова інформація (стан застою, знаменник, ...)
    """
    index: int
    first: float
    second: float
    approximation: float
    error: float
    meta: Dict[str, Any] = field(default_factory=dict)


__all__ = [
    "IterationRecord",
]
