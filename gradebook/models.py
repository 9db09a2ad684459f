# gradebook/models.py
"""Модуль, определяющий основную модель данных: Student."""
from typing import Any, Dict


def format_student_line(student_id: int, name: str, grades: Dict[str, float]) -> str:
    """Строка таблицы для консоли: ID, имя и оценки по предметам."""
    grades_str = ", ".join(f"{subject}: {grade}" for subject, grade in grades.items())
    return f"ID: {student_id:<3} | Имя: {name:<20} | Оценки: [{grades_str or 'Нет оценок'}]"


class Student:
    """Представляет студента с его ID, именем и оценками по предметам."""
    def __init__(self, student_id: int, name: str, grades: Dict[str, float]):
        self.id = student_id
        self.name = name
        # Журнал владеет своей копией словаря, чужие ссылки на него не хранятся
        self.grades = dict(grades)

    def merge_grades(self, new_grades: Dict[str, float]) -> None:
        """Перезаписывает совпадающие предметы и добавляет новые, остальные не трогает."""
        self.grades.update(new_grades)

    def to_dict(self) -> Dict[str, Any]:
        """Возвращает снимок записи с копией словаря оценок."""
        return {"id": self.id, "name": self.name, "grades": dict(self.grades)}

    def __repr__(self) -> str:
        return f"Student(id={self.id}, name='{self.name}', grades={self.grades})"

    def __str__(self) -> str:
        """Возвращает удобное для пользователя строковое представление объекта."""
        return format_student_line(self.id, self.name, self.grades)
