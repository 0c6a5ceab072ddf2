"""
errors.py

Ієрархія винятків для методів пошуку кореня.

Жорсткі відмови (виклик не дає жодного наближення):
    - InvalidBracket           — f(a) і f(b) не мають протилежних знаків;
    - DegenerateSecant         — f(x1) == f(x0) у методі січних;
    - DegenerateInterpolation  — f(b) == f(a) у методі Іллінойс.

М'які зупинки (вичерпано max_iter, спрацював захист Стеффенсена) винятками
не є: вони повертаються як RootResult з converged=False.
"""

from __future__ import annotations


class RootFindingError(ValueError):
    """Базовий виняток для всіх жорстких відмов методів пошуку кореня."""


class InvalidBracket(RootFindingError):
    """Початкові межі [a, b] не охоплюють зміну знаку функції."""

    def __init__(self, a: float, b: float, fa: float, fb: float) -> None:
        self.a = a
        self.b = b
        self.fa = fa
        self.fb = fb
        super().__init__(
            f"Не можна гарантувати корінь на [{a}, {b}]: "
            f"f(a) = {fa:.6e} і f(b) = {fb:.6e} повинні мати протилежні знаки."
        )


class DegenerateSecant(RootFindingError):
    """f(x1) == f(x0): крок методу січних не визначений (ділення на нуль)."""

    def __init__(self, iteration: int, x0: float, x1: float, fx: float) -> None:
        self.iteration = iteration
        self.x0 = x0
        self.x1 = x1
        self.fx = fx
        super().__init__(
            f"Ділення на нуль на ітерації {iteration}: "
            f"f(x0) і f(x1) однакові ({fx:.6e}) для x0 = {x0}, x1 = {x1}."
        )


class DegenerateInterpolation(RootFindingError):
    """f(b) == f(a): лінійна інтерполяція між межами не визначена."""

    def __init__(self, iteration: int, a: float, b: float, fx: float) -> None:
        self.iteration = iteration
        self.a = a
        self.b = b
        self.fx = fx
        super().__init__(
            f"Ділення на нуль на ітерації {iteration}: "
            f"f(a) і f(b) однакові ({fx:.6e}) для a = {a}, b = {b}."
        )


__all__ = [
    "RootFindingError",
    "InvalidBracket",
    "DegenerateSecant",
    "DegenerateInterpolation",
]
