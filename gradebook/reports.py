# gradebook/reports.py
"""Форматирование отчётов: CSV-текст со статистикой и JSON-текст с результатами."""
import json
import math
from typing import Any, Dict, Iterable, List

CSV_HEADER = "Name, Average, Highest Subjects, LowestSubjects"
SUBJECT_SEPARATOR = " / "


def format_number(value: float) -> str:
    """Печатает число без лишнего '.0' у целых значений (10, а не 10.0), NaN и Infinity как есть."""
    if isinstance(value, float):
        if math.isnan(value):
            return "NaN"
        if math.isinf(value):
            return "Infinity" if value > 0 else "-Infinity"
        if value.is_integer():
            return str(int(value))
    return str(value)


def format_subjects(subjects: Iterable[Dict[str, Any]]) -> str:
    """Склеивает предметы в строку вида 'math (10) / science (10)'."""
    return SUBJECT_SEPARATOR.join(
        f"{item['subject']} ({format_number(item['grade'])})" for item in subjects
    )


def build_csv(rows: List[Dict[str, Any]]) -> str:
    """
    Собирает CSV-текст из строк вида
    {"name", "average", "highest_subjects", "lowest_subjects"}.
    Поля разделяются запятой с пробелом, списки предметов берутся в кавычки.
    """
    lines = [CSV_HEADER]
    for row in rows:
        highest = format_subjects(row["highest_subjects"])
        lowest = format_subjects(row["lowest_subjects"])
        lines.append(f'{row["name"]}, {format_number(row["average"])}, "{highest}", "{lowest}"')
    return "\n".join(lines)


def _replace_non_finite(value: Any) -> Any:
    if isinstance(value, float) and not math.isfinite(value):
        return None
    if isinstance(value, dict):
        return {key: _replace_non_finite(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [_replace_non_finite(item) for item in value]
    return value


def build_json(result: Any) -> str:
    """Сериализует произвольную структуру с отступом в 2 пробела. NaN и бесконечности записываются как null."""
    return json.dumps(_replace_non_finite(result), indent=2, ensure_ascii=False)
