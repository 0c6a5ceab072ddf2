"""
Ядро: методи пошуку кореня скалярних рівнянь, движок та зведення результатів.
"""

from .errors import (
    RootFindingError,
    InvalidBracket,
    DegenerateSecant,
    DegenerateInterpolation,
)
from .iteration_record import IterationRecord
from .finder_base import (
    STOP_TOLERANCE,
    STOP_EXACT_ROOT,
    STOP_MAX_ITER,
    STOP_STABILITY_GUARD,
    RootResult,
    RootFinder,
    BracketingRootFinder,
)
from .bisection import BisectionMethod, bisection
from .regula_falsi import RegulaFalsiMethod, regula_falsi
from .secant import SecantMethod, secant
from .illinois import Stagnation, IllinoisMethod, illinois
from .fixed_point import FixedPointMethod, fixed_point
from .steffensen import SteffensenMethod, steffensen
from .engine import RootFindingEngine, RootFindingRunResult
from .results_summary import ResultsSummary
from .functions import PROBLEMS, TargetProblem

__all__ = [
    "RootFindingError",
    "InvalidBracket",
    "DegenerateSecant",
    "DegenerateInterpolation",
    "IterationRecord",
    "STOP_TOLERANCE",
    "STOP_EXACT_ROOT",
    "STOP_MAX_ITER",
    "STOP_STABILITY_GUARD",
    "RootResult",
    "RootFinder",
    "BracketingRootFinder",
    "BisectionMethod",
    "bisection",
    "RegulaFalsiMethod",
    "regula_falsi",
    "SecantMethod",
    "secant",
    "Stagnation",
    "IllinoisMethod",
    "illinois",
    "FixedPointMethod",
    "fixed_point",
    "SteffensenMethod",
    "steffensen",
    "RootFindingEngine",
    "RootFindingRunResult",
    "ResultsSummary",
    "PROBLEMS",
    "TargetProblem",
]
