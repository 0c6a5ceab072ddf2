"""
Shared helpers for the root-finding tests.
"""

from typing import Callable, List


class CountingFunction:
    """Wrap a scalar callable and record every point it is evaluated at."""

    def __init__(self, fn: Callable[[float], float]):
        self.fn = fn
        self.calls: List[float] = []

    def __call__(self, x: float) -> float:
        self.calls.append(x)
        return self.fn(x)

    @property
    def n_calls(self) -> int:
        return len(self.calls)


def cubic(x: float) -> float:
    return x ** 3 - x - 1.0


CUBIC_ROOT = 1.3247179572447460
