"""
functions.py

Модуль з типами скалярних функцій та реєстром прикладних задач.
Формат:
    - усі функції працюють зі скаляром x: float і повертають float;
    - реалізовані задачі:
        cubic : f(x) = x^3 - x - 1,  g(x) = (x + 1)^(1/3)
        exp   : f(x) = e^(-x) - x,   g(x) = e^(-x)
        cos   : f(x) = cos(x) - x,   g(x) = cos(x)
    - є реєстр PROBLEMS для зручного вибору задачі в консолі/движку.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict

import numpy as np

ScalarFunction = Callable[[float], float]


# ---------------------------------------------------------------------------
# Функції f (корінь шукаємо) та g (ітераційні функції, x = g(x))
# ---------------------------------------------------------------------------

def f_cubic(x: float) -> float:
    """
    f(x) = x^3 - x - 1, єдиний дійсний корінь x* ≈ 1.3247180.
    """
    return x ** 3 - x - 1.0


def g_cubic(x: float) -> float:
    """
    g(x) = (x + 1)^(1/3); нерухома точка g збігається з коренем f_cubic.
    """
    return float(np.cbrt(x + 1.0))


def f_exp(x: float) -> float:
    """
    f(x) = e^(-x) - x, корінь x* ≈ 0.5671433.
    """
    return float(np.exp(-x)) - x


def g_exp(x: float) -> float:
    return float(np.exp(-x))


def f_cos(x: float) -> float:
    """
    f(x) = cos(x) - x, корінь x* ≈ 0.7390851 (нерухома точка косинуса).
    """
    return float(np.cos(x)) - x


def g_cos(x: float) -> float:
    return float(np.cos(x))


# ---------------------------------------------------------------------------
# Реєстр задач для вибору в консолі / движку
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class TargetProblem:
    """
    Прикладна задача пошуку кореня.

    Атрибути:
        key   - ключ задачі в реєстрі
        name  - людяний опис (для таблиць)
        f     - функція, корінь якої шукаємо
        g     - ітераційна функція для методів нерухомої точки
        a, b  - початковий інтервал для методів з інтервалом
        x0    - початкове наближення (нерухома точка, Стеффенсен, січні)
        x1    - друга початкова точка для методу січних
        root  - відоме значення кореня (для перевірок)
    """
    key: str
    name: str
    f: ScalarFunction
    g: ScalarFunction
    a: float
    b: float
    x0: float
    x1: float
    root: float


PROBLEMS: Dict[str, TargetProblem] = {
    "cubic": TargetProblem(
        key="cubic",
        name="f(x) = x^3 - x - 1,  g(x) = (x + 1)^(1/3)",
        f=f_cubic,
        g=g_cubic,
        a=1.0,
        b=2.0,
        x0=1.0,
        x1=2.0,
        root=1.3247179572447460,
    ),
    "exp": TargetProblem(
        key="exp",
        name="f(x) = e^(-x) - x,  g(x) = e^(-x)",
        f=f_exp,
        g=g_exp,
        a=0.0,
        b=1.0,
        x0=0.5,
        x1=1.0,
        root=0.5671432904097838,
    ),
    "cos": TargetProblem(
        key="cos",
        name="f(x) = cos(x) - x,  g(x) = cos(x)",
        f=f_cos,
        g=g_cos,
        a=0.0,
        b=1.0,
        x0=0.5,
        x1=1.0,
        root=0.7390851332151607,
    ),
}

__all__ = [
    "ScalarFunction",
    "f_cubic", "g_cubic",
    "f_exp", "g_exp",
    "f_cos", "g_cos",
    "TargetProblem",
    "PROBLEMS",
]
