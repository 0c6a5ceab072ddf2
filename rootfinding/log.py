"""
log.py

Налаштування logging для консольного застосунку.
Бібліотечні модулі лише отримують logging.getLogger(__name__) і
обробників не налаштовують.
"""

from __future__ import annotations

import logging
from typing import Optional


def get_logger(
    name: str,
    verbose: bool = False,
    debug: bool = False,
    log_file: Optional[str] = None,
) -> logging.Logger:
    """
    Налаштувати кореневий logging і повернути іменований logger.

    Рівень: DEBUG, якщо debug; INFO, якщо verbose; інакше WARNING.
    Якщо log_file не задано, записи йдуть у stderr.
    """

    level = logging.WARNING
    if debug:
        level = logging.DEBUG
    elif verbose:
        level = logging.INFO

    logging.basicConfig(
        level=level,
        filename=log_file,
        format="%(asctime)s | %(levelname)-8s | %(name)s - %(message)s",
    )
    logger = logging.getLogger(name)
    logging.root.setLevel(level)
    logger.setLevel(level)
    return logger


__all__ = ["get_logger"]
