# gradebook/__init__.py
"""Журнал оценок студентов: статистика по курсу и экспорт в CSV/JSON."""
from .errors import GradebookError, EmptyRosterError, DataValidationError
from .models import Student
from .roster import EMPTY_ROSTER, Roster, calculate_average, find_subject_extremes, round_grade

__all__ = [
    "GradebookError",
    "EmptyRosterError",
    "DataValidationError",
    "Student",
    "EMPTY_ROSTER",
    "Roster",
    "calculate_average",
    "find_subject_extremes",
    "round_grade",
]
