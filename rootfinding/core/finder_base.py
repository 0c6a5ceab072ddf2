"""
finder_base.py

Базові класи та типи для реалізації методів пошуку кореня (Strategy).

Ідея:
    - Є абстрактний клас RootFinder, від якого наслідуються всі конкретні методи:
        * BisectionMethod
        * RegulaFalsiMethod
        * SecantMethod
        * IllinoisMethod
        * FixedPointMethod
        * SteffensenMethod
    - Кожен метод реалізує _iterate() — генератор, який по одному віддає
      IterationRecord і повертає RootResult (StopIteration.value).
    - Користувач/движок викликає iterate() або solve(callback).

Формат:
    solve(callback: Optional[IterationCallback]) -> RootResult
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Callable, Dict, Generator, Optional, Tuple

from .errors import InvalidBracket, RootFindingError
from .functions import ScalarFunction
from .iteration_record import IterationRecord

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Причини зупинки
# ---------------------------------------------------------------------------

STOP_TOLERANCE = "tolerance"            # виконано критерій зупинки методу
STOP_EXACT_ROOT = "exact_root"          # f(c) == 0 (бісекція)
STOP_MAX_ITER = "max_iter"              # вичерпано max_iter (м'яка зупинка)
STOP_STABILITY_GUARD = "stability_guard"  # знаменник Ейткена ≈ 0 (м'яка зупинка)

CONVERGED_STOPS = frozenset({STOP_TOLERANCE, STOP_EXACT_ROOT})


# ---------------------------------------------------------------------------
# Результат одного запуску методу
# ---------------------------------------------------------------------------

@dataclass
class RootResult:
    """
    Підсумковий результат методу пошуку кореня.

    Атрибути:
        approximation - останнє (збіжне чи ні) наближення кореня
        converged     - чи виконано критерій зупинки методу
        iterations    - кількість виконаних ітерацій
        residual      - значення f(approximation)
        stopped_by    - причина зупинки (STOP_*)
        method_name   - назва методу (RootFinder.name)
        func_evals    - кількість викликів f
        g_evals       - кількість викликів ітераційної функції g
    """
    approximation: float
    converged: bool
    iterations: int
    residual: float
    stopped_by: str
    method_name: str = ""
    func_evals: int = 0
    g_evals: int = 0

    @property
    def p(self) -> float:
        """Наближення нерухомої точки (синонім approximation)."""
        return self.approximation


# Тип callback'а для консолі/логів/тестів
IterationCallback = Callable[[IterationRecord], None]

FinderGenerator = Generator[IterationRecord, None, RootResult]


# ---------------------------------------------------------------------------
# Базовий клас RootFinder (Strategy)
# ---------------------------------------------------------------------------

class RootFinder(ABC):
    """
    Абстрактний базовий клас для всіх методів пошуку кореня.

    Кожен конкретний метод:
        - наслідується від RootFinder;
        - реалізує _iterate();
        - за потреби переозначає default_options.

    Використання:
        finder = SecantMethod(func=f, x0=1.0, x1=2.0, options={"tol": 1e-8})
        result = finder.solve(callback=print)

    Налаштування (options), спільні для всіх методів:
        tol       : поріг критерію зупинки (default: 1e-6)
        max_iter  : максимальна кількість ітерацій (default: 100)
    """

    default_options: Dict[str, Any] = {"tol": 1e-6, "max_iter": 100}

    def __init__(
        self,
        func: Optional[ScalarFunction] = None,
        g: Optional[ScalarFunction] = None,
        options: Optional[Dict[str, Any]] = None,
        name: Optional[str] = None,
    ) -> None:
        """
        Parameters
        ----------
        func : Optional[ScalarFunction]
            Функція f(x), корінь якої шукаємо (або функція залишку).
        g : Optional[ScalarFunction]
            Ітераційна функція g(x) для методів нерухомої точки.
        options : Optional[dict]
            Параметри методу (tol, max_iter, специфічні ключі).
        name : Optional[str]
            Людяна назва методу (для логів/таблиць).
        """
        self.func = func
        self.g = g
        self.options: Dict[str, Any] = dict(options or {})
        self.name: str = name or self.__class__.__name__

        # Лічильники викликів
        self.func_evals: int = 0
        self.g_evals: int = 0

    # ------------------------------------------------------------------
    # Параметри
    # ------------------------------------------------------------------

    def option(self, key: str) -> Any:
        """Значення параметра з options або з default_options класу."""
        if key in self.options:
            return self.options[key]
        return self.default_options[key]

    @property
    def tol(self) -> float:
        return float(self.option("tol"))

    @property
    def max_iter(self) -> int:
        max_iter = int(self.option("max_iter"))
        if max_iter < 0:
            raise ValueError(
                f"{self.name}: max_iter повинен бути невід'ємним, отримано {max_iter}."
            )
        return max_iter

    # ------------------------------------------------------------------
    # Сервісні методи для обчислення f, g із підрахунком викликів
    # ------------------------------------------------------------------

    def eval_f(self, x: float) -> float:
        """Обчислити f(x) та збільшити лічильник викликів функції."""
        self.func_evals += 1
        return float(self.func(x))

    def eval_g(self, x: float) -> float:
        """Обчислити g(x) та збільшити лічильник викликів g."""
        self.g_evals += 1
        return float(self.g(x))

    def make_result(
        self,
        approximation: float,
        iterations: int,
        residual: float,
        stopped_by: str,
    ) -> RootResult:
        """Зібрати RootResult з поточними лічильниками."""
        return RootResult(
            approximation=float(approximation),
            converged=stopped_by in CONVERGED_STOPS,
            iterations=iterations,
            residual=float(residual),
            stopped_by=stopped_by,
            method_name=self.name,
            func_evals=self.func_evals,
            g_evals=self.g_evals,
        )

    # ------------------------------------------------------------------
    # Життєвий цикл методу
    # ------------------------------------------------------------------

    def reset(self) -> None:
        """
        Скинути лічильники перед новим запуском.
        Викликається в iterate() перед першою ітерацією.
        """
        self.func_evals = 0
        self.g_evals = 0

    def iterate(self) -> FinderGenerator:
        """
        Лінива скінченна послідовність IterationRecord.

        Значення, що повертає генератор (StopIteration.value), — RootResult.
        Послідовність не перезапускається: для нового запуску викличте
        iterate() ще раз.
        """
        self.reset()
        result = yield from self._iterate()
        return result

    # ------------------------------------------------------------------
    # Головний публічний метод solve()
    # ------------------------------------------------------------------

    def solve(self, callback: Optional[IterationCallback] = None) -> RootResult:
        """
        Запустити метод до збіжності, м'якої зупинки або max_iter.

        Кожен IterationRecord по порядку передається у callback (якщо задано).
        Жорсткі відмови (RootFindingError) передаються далі викликачу.
        """
        logger.debug("%s: старт, options=%s", self.name, self.options)
        records = self.iterate()

        while True:
            try:
                record = next(records)
            except StopIteration as stop:
                result = stop.value
                break
            except RootFindingError as exc:
                logger.warning("%s: відмова — %s", self.name, exc)
                raise

            logger.debug(
                "%s: k=%d first=%.10g second=%.10g approx=%.10g error=%.4e",
                self.name,
                record.index,
                record.first,
                record.second,
                record.approximation,
                record.error,
            )
            if callback is not None:
                callback(record)

        if not isinstance(result, RootResult):
            raise TypeError(
                f"{self.__class__.__name__}._iterate() "
                f"повинен повертати RootResult, отримано: {type(result)}"
            )

        if result.converged:
            logger.info(
                "%s: збіжність за %d ітерацій, x ≈ %.10g, f(x) = %.3e",
                self.name,
                result.iterations,
                result.approximation,
                result.residual,
            )
        else:
            logger.warning(
                "%s: зупинка без збіжності (%s) після %d ітерацій, x ≈ %.10g",
                self.name,
                result.stopped_by,
                result.iterations,
                result.approximation,
            )
        return result

    # ------------------------------------------------------------------
    # Абстрактний метод, який реалізують конкретні стратегії
    # ------------------------------------------------------------------

    @abstractmethod
    def _iterate(self) -> FinderGenerator:
        """
        Реалізація ітераційного циклу методу.

        Yields
        ------
        IterationRecord
            Один запис на кожну ітерацію.

        Returns
        -------
        RootResult
            Підсумок: наближення, збіжність, кількість ітерацій, залишок.
        """
        raise NotImplementedError


# ---------------------------------------------------------------------------
# Методи з початковим інтервалом [a, b]
# ---------------------------------------------------------------------------

class BracketingRootFinder(RootFinder):
    """
    Спільна основа для бісекції, Regula Falsi та Іллінойс.

    Перевіряє початкову умову f(a) * f(b) < 0: при порушенні кидає
    InvalidBracket до першої ітерації (рівно два виклики f).
    """

    def __init__(
        self,
        func: ScalarFunction,
        a: float,
        b: float,
        options: Optional[Dict[str, Any]] = None,
        name: Optional[str] = None,
    ) -> None:
        super().__init__(func=func, options=options, name=name)
        self.a = float(a)
        self.b = float(b)

    def check_bracket(self) -> Tuple[float, float]:
        """Обчислити f(a), f(b) один раз і перевірити зміну знаку."""
        fa = self.eval_f(self.a)
        fb = self.eval_f(self.b)
        if fa * fb >= 0:
            raise InvalidBracket(self.a, self.b, fa, fb)
        return fa, fb


__all__ = [
    "STOP_TOLERANCE",
    "STOP_EXACT_ROOT",
    "STOP_MAX_ITER",
    "STOP_STABILITY_GUARD",
    "CONVERGED_STOPS",
    "RootResult",
    "IterationCallback",
    "FinderGenerator",
    "RootFinder",
    "BracketingRootFinder",
]
