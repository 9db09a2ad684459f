# gradebook/demo.py
"""Демонстрационный сценарий: заполняет журнал, считает статистику и выгружает отчёты."""
import logging
import os
import random
from typing import Any, Dict, Optional, Tuple

from . import config, io_utils
from .roster import Roster

logger = logging.getLogger(__name__)

FIXED_STUDENTS = [
    ("Student1", {"math": 9.6, "science": 8.8, "history": 6.7, "spanish": 8,
                  "computerScience": 10, "business": 8}),
    ("Student2", {"math": 7, "science": 8.5, "history": 8, "spanish": 9,
                  "computerScience": 10, "business": 7.9}),
    ("Student3", {"math": 8.8, "science": 9.6, "history": 9, "spanish": 9.2,
                  "computerScience": 9.6, "business": 9}),
    ("Student4", {"math": 10, "science": 10, "history": 10, "spanish": 10,
                  "computerScience": 10, "business": 10}),
]

# Предмет -> (нижняя граница, ширина диапазона) для случайных оценок
RANDOM_GRADE_RANGES = {
    "math": (7, 3),
    "science": (7, 3),
    "history": (6, 4),
    "spanish": (7, 3),
    "computerScience": (8, 2),
    "business": (7, 3),
}

STATISTICS_STUDENT = "Student1"
DETAILED_STUDENT = "Student3"
DELETED_STUDENT = "Student3"
UPDATED_STUDENT = "Student4"
UPDATED_GRADES = {"math": 8, "science": 3, "history": 8, "computerScience": 9.2}


def build_demo_roster(count: int = config.DEMO_STUDENT_COUNT,
                      rng: Optional[random.Random] = None) -> Roster:
    """Четыре фиксированных студента и случайные Student5..StudentN."""
    rng = rng or random.Random(config.DEMO_SEED)
    roster = Roster()

    for name, grades in FIXED_STUDENTS[:count]:
        roster.add_student(name, grades)

    for i in range(len(FIXED_STUDENTS) + 1, count + 1):
        grades = {
            subject: round((low + rng.random() * span) * 10) / 10
            for subject, (low, span) in RANDOM_GRADE_RANGES.items()
        }
        roster.add_student(f"Student{i}", grades)

    return roster


def collect_results(roster: Roster, threshold: float = config.DEMO_THRESHOLD) -> Dict[str, Any]:
    """
    Прогоняет все запросы к журналу и собирает документ для JSON-отчёта.
    В конце удаляет одного студента и обновляет оценки другого, как в исходном сценарии.
    """
    results = {
        "List of students": roster.list_students(),
        "Overall average": roster.overall_averages(),
        "Students Performance Overall": roster.performance_extremes(),
        "Individual Student Statistics": roster.student_statistics(DETAILED_STUDENT),
        "Overall Statistics": roster.overall_statistics(),
        "Student's statistics": roster.find_by_name(STATISTICS_STUDENT),
        "Students Above Threshold": roster.filter_above_threshold(threshold),
        "Sorted Students": {
            "ascending": roster.sort_by_average(descending=False),
            "descending": roster.sort_by_average(descending=True),
        },
    }

    roster.delete_by_name(DELETED_STUDENT)
    roster.update_grades(UPDATED_STUDENT, UPDATED_GRADES)
    return results


def export_csv(roster: Roster, filepath: str) -> str:
    io_utils.write_text_file(filepath, roster.build_csv_report())
    logger.info("CSV-файл сформирован: %s", filepath)
    return filepath


def export_json(roster: Roster, result: Any, filepath: str) -> str:
    io_utils.write_text_file(filepath, roster.build_json_report(result))
    logger.info("JSON-файл сформирован: %s", filepath)
    return filepath


def run_demo(output_dir: str = config.OUTPUT_DIR,
             rng: Optional[random.Random] = None) -> Tuple[str, str]:
    """Полный сценарий: журнал, статистика, CSV и JSON в output_dir. Возвращает пути к файлам."""
    roster = build_demo_roster(rng=rng)
    results = collect_results(roster)

    csv_path = export_csv(roster, os.path.join(output_dir, config.CSV_REPORT_NAME))
    json_path = export_json(roster, results, os.path.join(output_dir, config.JSON_REPORT_NAME))
    return csv_path, json_path
