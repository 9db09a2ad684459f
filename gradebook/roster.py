# gradebook/roster.py
"""Модуль журнала: хранение студентов, статистика, фильтры, сортировка и отчёты."""
import logging
import math
from decimal import Decimal, ROUND_HALF_UP
from typing import Any, Dict, List, Optional, Union

from .errors import EmptyRosterError
from .models import Student
from . import reports

logger = logging.getLogger(__name__)

# Результат list_students() для пустого журнала
EMPTY_ROSTER = "The list is empty."

_TWO_PLACES = Decimal("0.01")


def calculate_average(grades: Dict[str, float]) -> float:
    """Среднее арифметическое оценок. Для пустого словаря возвращает NaN, а не ошибку."""
    if not grades:
        return math.nan
    return sum(grades.values()) / len(grades)


def round_grade(value: float) -> float:
    """Округляет до 2 знаков по правилу half-up над десятичной записью числа."""
    if math.isnan(value) or math.isinf(value):
        return value
    return float(Decimal(repr(value)).quantize(_TWO_PLACES, rounding=ROUND_HALF_UP))


def find_subject_extremes(grades: Dict[str, float]) -> Dict[str, List[Dict[str, Any]]]:
    """
    Находит все предметы с максимальной и минимальной оценкой.

    Сравнение точное, без допуска: при равенстве возвращаются все предметы
    в порядке ключей словаря. Для пустого словаря оба списка пустые.
    """
    values = [grade for grade in grades.values() if not math.isnan(grade)]
    if not values:
        return {"highest_subjects": [], "lowest_subjects": []}

    max_grade = max(values)
    min_grade = min(values)
    return {
        "highest_subjects": [
            {"subject": subject, "grade": grade}
            for subject, grade in grades.items() if grade == max_grade
        ],
        "lowest_subjects": [
            {"subject": subject, "grade": grade}
            for subject, grade in grades.items() if grade == min_grade
        ],
    }


class Roster:
    """Журнал курса: упорядоченный список студентов и производная статистика."""

    def __init__(self):
        self._students: List[Student] = []
        self._next_id = 1

    def __len__(self) -> int:
        return len(self._students)

    # --- Изменение журнала ---

    def add_student(self, name: str, grades: Dict[str, float]) -> None:
        """Добавляет студента со следующим порядковым ID. Данные не проверяются."""
        self._students.append(Student(self._next_id, name, grades))
        logger.debug("Добавлен студент %s с ID %d", name, self._next_id)
        self._next_id += 1

    def delete_by_name(self, name: str) -> int:
        """Удаляет ВСЕХ студентов с таким именем и перенумеровывает оставшихся с 1."""
        before = len(self._students)
        self._students = [s for s in self._students if s.name != name]
        for index, student in enumerate(self._students, start=1):
            student.id = index
        self._next_id = len(self._students) + 1

        removed = before - len(self._students)
        logger.debug("Удалено студентов с именем %s: %d", name, removed)
        return removed

    def update_grades(self, name: str, new_grades: Dict[str, float]) -> Optional[Dict[str, Any]]:
        """Сливает новые оценки с оценками первого найденного студента. None, если не найден."""
        student = self._first_by_name(name)
        if student is None:
            return None
        student.merge_grades(new_grades)
        logger.debug("Обновлены оценки студента %s: %s", name, new_grades)
        return student.to_dict()

    # --- Просмотр и поиск ---

    def list_students(self) -> Union[List[Dict[str, Any]], str]:
        """Снимок всех студентов в порядке журнала или EMPTY_ROSTER, если журнал пуст."""
        if not self._students:
            return EMPTY_ROSTER
        return [s.to_dict() for s in self._students]

    def find_by_name(self, name: str) -> Optional[Dict[str, Any]]:
        """Первый студент с точно таким именем (с учётом регистра) или None."""
        students = self.list_students()
        if not isinstance(students, list):
            return None
        return next((s for s in students if s["name"] == name), None)

    def _first_by_name(self, name: str) -> Optional[Student]:
        return next((s for s in self._students if s.name == name), None)

    # --- Статистика ---

    @staticmethod
    def average(grades: Dict[str, float]) -> float:
        return calculate_average(grades)

    @staticmethod
    def subject_extremes(grades: Dict[str, float]) -> Dict[str, List[Dict[str, Any]]]:
        return find_subject_extremes(grades)

    def overall_averages(self) -> List[Dict[str, Any]]:
        """Округлённый средний балл каждого студента в порядке журнала."""
        return [
            {"name": s.name, "average": round_grade(calculate_average(s.grades))}
            for s in self._students
        ]

    def performance_extremes(self) -> Dict[str, Dict[str, Any]]:
        """
        Студенты с наибольшим и наименьшим средним баллом.

        При равенстве побеждает первый по порядку журнала.
        Для пустого журнала выбрасывает EmptyRosterError.
        """
        averages = self.overall_averages()
        if not averages:
            raise EmptyRosterError("Журнал пуст: невозможно определить лучшего и худшего студента.")

        highest = lowest = averages[0]
        for entry in averages[1:]:
            if entry["average"] > highest["average"]:
                highest = entry
            if entry["average"] < lowest["average"]:
                lowest = entry
        return {"highest": highest, "lowest": lowest}

    def overall_statistics(self) -> List[Dict[str, Any]]:
        return [
            {"name": s.name, "highest_and_lowest_subjects": find_subject_extremes(s.grades)}
            for s in self._students
        ]

    def student_statistics(self, name: str) -> Optional[Dict[str, Any]]:
        """Средний балл и лучшие/худшие предметы одного студента или None."""
        student = self._first_by_name(name)
        if student is None:
            return None
        return {
            "name": student.name,
            "average": round_grade(calculate_average(student.grades)),
            **find_subject_extremes(student.grades),
        }

    def filter_above_threshold(self, threshold: float) -> List[Dict[str, Any]]:
        """Студенты со средним баллом строго больше порога, вместе с их оценками."""
        return [
            {
                "name": entry["name"],
                "average": entry["average"],
                "grades": self.find_by_name(entry["name"])["grades"],
            }
            for entry in self.overall_averages()
            if entry["average"] > threshold
        ]

    def sort_by_average(self, descending: bool = False) -> List[Dict[str, Any]]:
        # sorted() устойчива и при reverse=True: равные баллы сохраняют порядок журнала
        return sorted(self.overall_averages(), key=lambda entry: entry["average"], reverse=descending)

    # --- Отчёты ---

    def build_csv_report(self) -> str:
        """Текст CSV-отчёта: средний балл и лучшие/худшие предметы каждого студента."""
        rows = [
            {
                "name": entry["name"],
                "average": entry["average"],
                **stats["highest_and_lowest_subjects"],
            }
            for entry, stats in zip(self.overall_averages(), self.overall_statistics())
        ]
        return reports.build_csv(rows)

    @staticmethod
    def build_json_report(result: Any) -> str:
        return reports.build_json(result)
