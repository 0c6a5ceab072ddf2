"""
Консольне представлення: таблиці ітерацій та зведення.
"""

from .table_view import format_iterations, format_result, format_summary, iterations_frame

__all__ = ["format_iterations", "format_result", "format_summary", "iterations_frame"]
