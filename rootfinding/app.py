"""
app.py

Консольний застосунок для пошуку коренів скалярних рівнянь.

Зв'язує:
    - rootfinding.core.RootFindingEngine
    - конкретні методи (бісекція, Regula Falsi, січні, Іллінойс,
      нерухома точка, Стеффенсен)
    - rootfinding.core.functions.PROBLEMS
    - rootfinding.console.table_view (таблиці ітерацій та зведення)

Команди:
    run METHOD   — запустити один метод і надрукувати таблицю ітерацій;
    compare      — запустити всі методи на задачі та надрукувати зведення;
    problems     — перелік доступних задач.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Optional, Type

import typer

from rootfinding.console.table_view import format_iterations, format_result, format_summary
from rootfinding.core.bisection import BisectionMethod
from rootfinding.core.engine import RootFindingEngine, RootFindingRunResult
from rootfinding.core.errors import RootFindingError
from rootfinding.core.finder_base import RootFinder
from rootfinding.core.fixed_point import FixedPointMethod
from rootfinding.core.functions import PROBLEMS
from rootfinding.core.illinois import IllinoisMethod
from rootfinding.core.regula_falsi import RegulaFalsiMethod
from rootfinding.core.results_summary import ResultsSummary
from rootfinding.core.secant import SecantMethod
from rootfinding.core.steffensen import SteffensenMethod
from rootfinding.log import get_logger

app = typer.Typer(add_completion=False, help="Класичні методи пошуку коренів f(x) = 0.")


# ---------------------------------------------------------------------------
# Реєстр методів
# ---------------------------------------------------------------------------

METHODS: Dict[str, Type[RootFinder]] = {
    "bisection": BisectionMethod,
    "regula_falsi": RegulaFalsiMethod,
    "secant": SecantMethod,
    "illinois": IllinoisMethod,
    "fixed_point": FixedPointMethod,
    "steffensen": SteffensenMethod,
}


@dataclass
class RunConfig:
    problem_key: str = "cubic"
    method_key: str = "bisection"
    tol: float = 1e-6
    max_iter: int = 100
    run_all_methods: bool = False


# ---------------------------------------------------------------------------
# Допоміжна фабрика RootFinder-ів
# ---------------------------------------------------------------------------

def create_finder(method_key: str, problem_key: str, tol: float, max_iter: int) -> RootFinder:
    """
    Створити відповідний RootFinder по ключу методу та задачі.

    method_key:
        "bisection", "regula_falsi", "secant",
        "illinois", "fixed_point", "steffensen"

    problem_key:
        ключ у rootfinding.core.functions.PROBLEMS
    """
    if problem_key not in PROBLEMS:
        raise ValueError(f"Невідома задача: {problem_key}")
    tp = PROBLEMS[problem_key]
    options = {"tol": tol, "max_iter": max_iter}

    if method_key in ("bisection", "regula_falsi", "illinois"):
        return METHODS[method_key](tp.f, tp.a, tp.b, options=options)

    if method_key == "secant":
        return SecantMethod(tp.f, tp.x0, tp.x1, options=options)

    if method_key in ("fixed_point", "steffensen"):
        return METHODS[method_key](tp.g, tp.x0, f=tp.f, options=options)

    raise ValueError(f"Невідомий метод: {method_key}")


def run_config(cfg: RunConfig, engine: Optional[RootFindingEngine] = None) -> ResultsSummary:
    """
    Виконати один метод (або всі, якщо run_all_methods) для cfg.

    Жорсткі відмови окремих методів у режимі "всі методи" пропускаються
    з повідомленням; в режимі одного методу передаються далі.
    """
    engine = engine or RootFindingEngine(tol=cfg.tol, max_iter=cfg.max_iter)
    summary = ResultsSummary()

    keys = list(METHODS) if cfg.run_all_methods else [cfg.method_key]
    for key in keys:
        finder = create_finder(key, cfg.problem_key, cfg.tol, cfg.max_iter)
        try:
            run = engine.run(finder)
        except RootFindingError as exc:
            if not cfg.run_all_methods:
                raise
            typer.echo(f"{finder.name}: {exc}", err=True)
            continue
        summary.add_run(run)

    return summary


def _print_run(run: RootFindingRunResult, method_key: str) -> None:
    typer.echo(f"--- {run.method_name} ---")
    typer.echo(format_iterations(run.iterations, method_key))
    typer.echo("")
    typer.echo(format_result(run.result))


def _check_keys(method_key: Optional[str], problem_key: str) -> None:
    if method_key is not None and method_key not in METHODS:
        raise typer.BadParameter(
            f"невідомий метод '{method_key}', доступні: {', '.join(METHODS)}"
        )
    if problem_key not in PROBLEMS:
        raise typer.BadParameter(
            f"невідома задача '{problem_key}', доступні: {', '.join(PROBLEMS)}"
        )


# ---------------------------------------------------------------------------
# Команди
# ---------------------------------------------------------------------------

@app.command("run")
def run(
    method: str = typer.Argument(..., help="Ключ методу, напр. secant."),
    problem: str = typer.Option("cubic", "--problem", "-p", help="Ключ задачі."),
    tol: float = typer.Option(1e-6, "--tol", help="Допуск критерію зупинки."),
    max_iter: int = typer.Option(100, "--max-iter", help="Максимальна кількість ітерацій."),
    verbose: bool = typer.Option(False, "--verbose", "-v"),
    debug: bool = typer.Option(False, "--debug"),
    log_file: Optional[str] = typer.Option(None, "--log-file"),
) -> None:
    """Запустити один метод і надрукувати таблицю ітерацій."""
    get_logger("rootfinding", verbose=verbose, debug=debug, log_file=log_file)
    _check_keys(method, problem)

    cfg = RunConfig(problem_key=problem, method_key=method, tol=tol, max_iter=max_iter)
    typer.echo(PROBLEMS[problem].name)
    try:
        summary = run_config(cfg)
    except RootFindingError as exc:
        typer.echo(f"Помилка: {exc}", err=True)
        raise typer.Exit(code=1)
    except ValueError as exc:
        typer.echo(f"Некоректні параметри: {exc}", err=True)
        raise typer.Exit(code=2)

    _print_run(summary.runs[0], method)


@app.command("compare")
def compare(
    problem: str = typer.Option("cubic", "--problem", "-p", help="Ключ задачі."),
    tol: float = typer.Option(1e-6, "--tol", help="Допуск критерію зупинки."),
    max_iter: int = typer.Option(100, "--max-iter", help="Максимальна кількість ітерацій."),
    verbose: bool = typer.Option(False, "--verbose", "-v"),
) -> None:
    """Запустити всі методи на задачі та надрукувати зведену таблицю."""
    get_logger("rootfinding", verbose=verbose)
    _check_keys(None, problem)

    cfg = RunConfig(problem_key=problem, tol=tol, max_iter=max_iter, run_all_methods=True)
    try:
        summary = run_config(cfg)
    except ValueError as exc:
        typer.echo(f"Некоректні параметри: {exc}", err=True)
        raise typer.Exit(code=2)

    typer.echo(PROBLEMS[problem].name)
    typer.echo(format_summary(summary))

    best = summary.best_by_iterations()
    if best is not None:
        typer.echo("")
        typer.echo(f"Найменше ітерацій: {best.method_name} ({best.n_iter})")


@app.command("problems")
def problems() -> None:
    """Перелік доступних задач."""
    for key, tp in PROBLEMS.items():
        typer.echo(f"{key:8s} {tp.name}  [a, b] = [{tp.a}, {tp.b}], x0 = {tp.x0}, x1 = {tp.x1}")


def main() -> None:
    app()


if __name__ == "__main__":
    main()
