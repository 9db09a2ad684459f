# gradebook/errors.py
"""Модуль для определения пользовательских исключений приложения."""

class GradebookError(Exception):
    """Базовый класс для всех исключений в этом приложении."""
    pass

class EmptyRosterError(GradebookError):
    """Исключение, когда операция требует хотя бы одного студента в журнале."""
    pass

class DataValidationError(GradebookError):
    """Исключение, связанное с некорректным вводом оценок в консоли."""
    pass
