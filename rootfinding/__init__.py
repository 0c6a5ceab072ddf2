"""
rootfinding — класичні методи пошуку коренів скалярних нелінійних рівнянь:
бісекція, Regula Falsi, метод січних, Іллінойс, ітерація нерухомої точки
та прискорення Стеффенсена.
"""

from rootfinding.core import (
    RootFindingError,
    InvalidBracket,
    DegenerateSecant,
    DegenerateInterpolation,
    IterationRecord,
    RootResult,
    Stagnation,
    bisection,
    regula_falsi,
    secant,
    illinois,
    fixed_point,
    steffensen,
    RootFindingEngine,
    ResultsSummary,
)

__version__ = "0.1.0"

__all__ = [
    "RootFindingError",
    "InvalidBracket",
    "DegenerateSecant",
    "DegenerateInterpolation",
    "IterationRecord",
    "RootResult",
    "Stagnation",
    "bisection",
    "regula_falsi",
    "secant",
    "illinois",
    "fixed_point",
    "steffensen",
    "RootFindingEngine",
    "ResultsSummary",
]
