# gradebook/main.py
"""Главный модуль, реализующий консольный интерфейс (CLI) для журнала оценок."""
import logging
import os
import sys
from typing import Dict

from . import config, demo, errors
from .models import format_student_line
from .roster import Roster

logger = logging.getLogger(__name__)

roster = Roster()


def print_menu():
    """Выводит на экран главное меню."""
    print("\n" + "="*30)
    print("      МЕНЮ ЖУРНАЛА")
    print("="*30)
    print("1. Показать всех студентов")
    print("2. Добавить студента")
    print("3. Удалить студентов по имени")
    print("4. Обновить оценки студента")
    print("5. Статистика студента")
    print("6. Статистика по группе")
    print("7. Студенты выше порога")
    print("8. Сортировать по среднему баллу")
    print("9. Экспорт статистики в CSV")
    print("10. Экспорт результатов в JSON")
    print("11. Демонстрационный сценарий")
    print("0. Выход")
    print("="*30)


def parse_grades(grades_str: str) -> Dict[str, float]:
    """Разбирает строку вида 'math=9.5 history=7' в словарь оценок."""
    grades = {}
    for token in grades_str.split():
        subject, sep, value = token.partition("=")
        if not sep or not subject:
            raise errors.DataValidationError(f"Ожидался формат 'предмет=оценка', получено: '{token}'")
        try:
            grades[subject] = float(value)
        except ValueError:
            raise errors.DataValidationError(f"Оценка '{value}' для предмета '{subject}' должна быть числом.")
    return grades


def format_subjects(subjects) -> str:
    return ", ".join(f"{s['subject']} ({s['grade']})" for s in subjects) or "-"


def main_cli():
    """Основной цикл консольного приложения."""
    while True:
        print_menu()
        choice = input("Выберите пункт меню: ").strip()

        try:
            if choice == '1':
                students = roster.list_students()
                if not isinstance(students, list):
                    print(f"ℹ️ {students}")
                else:
                    print("\n--- Список всех студентов ---")
                    for s in students:
                        print(format_student_line(s["id"], s["name"], s["grades"]))

            elif choice == '2':
                name = input("Введите имя студента: ")
                grades = parse_grades(input("Введите оценки (предмет=оценка через пробел): "))
                roster.add_student(name, grades)
                print(f"✅ Студент {name} успешно добавлен.")

            elif choice == '3':
                name = input("Введите имя студента для удаления: ")
                removed = roster.delete_by_name(name)
                if removed:
                    print(f"✅ Удалено студентов: {removed}.")
                else:
                    print(f"ℹ️ Студент {name} не найден.")

            elif choice == '4':
                name = input("Введите имя студента: ")
                grades = parse_grades(input("Введите новые оценки (предмет=оценка через пробел): "))
                student = roster.update_grades(name, grades)
                if student is None:
                    print(f"ℹ️ Студент {name} не найден.")
                else:
                    print(f"✅ Оценки студента {student['name']} обновлены: {student['grades']}")

            elif choice == '5':
                name = input("Введите имя студента: ")
                stats = roster.student_statistics(name)
                if stats is None:
                    print(f"ℹ️ Студент {name} не найден.")
                else:
                    print(f"\n--- Статистика: {stats['name']} ---")
                    print(f"Средний балл: {stats['average']}")
                    print(f"Лучшие предметы: {format_subjects(stats['highest_subjects'])}")
                    print(f"Худшие предметы: {format_subjects(stats['lowest_subjects'])}")

            elif choice == '6':
                extremes = roster.performance_extremes()
                print("\n--- Статистика по группе ---")
                print(f"Всего студентов: {len(roster)}")
                for entry in roster.overall_averages():
                    print(f"{entry['name']:<20} {entry['average']}")
                print(f"Лучший студент: {extremes['highest']['name']} (ср. балл: {extremes['highest']['average']})")
                print(f"Худший студент: {extremes['lowest']['name']} (ср. балл: {extremes['lowest']['average']})")

            elif choice == '7':
                try:
                    threshold = float(input("Введите порог среднего балла: "))
                except ValueError:
                    print("❌ Ошибка ввода: порог должен быть числом.")
                    continue
                selected = roster.filter_above_threshold(threshold)
                print(f"\n--- Студенты со средним баллом выше {threshold} ---")
                for entry in selected:
                    print(f"{entry['name']:<20} {entry['average']}")
                if not selected:
                    print("ℹ️ Таких студентов нет.")

            elif choice == '8':
                order = input("Порядок сортировки (asc, desc): ").strip().lower()
                if order not in ('asc', 'desc'):
                    print("❌ Неверный порядок сортировки. Доступно: 'asc', 'desc'.")
                    continue
                print(f"\n--- Студенты, отсортированные по среднему баллу ({order}) ---")
                for entry in roster.sort_by_average(descending=order == 'desc'):
                    print(f"{entry['name']:<20} {entry['average']}")

            elif choice == '9':
                filepath = input("Введите путь к файлу для экспорта: ").strip('"').strip("'")
                demo.export_csv(roster, filepath or os.path.join(config.OUTPUT_DIR, config.CSV_REPORT_NAME))
                print("✅ CSV-отчёт сохранён.")

            elif choice == '10':
                filepath = input("Введите путь к файлу для экспорта: ").strip('"').strip("'")
                result = {
                    "List of students": roster.list_students(),
                    "Overall average": roster.overall_averages(),
                    "Overall Statistics": roster.overall_statistics(),
                }
                demo.export_json(roster, result, filepath or os.path.join(config.OUTPUT_DIR, config.JSON_REPORT_NAME))
                print("✅ JSON-отчёт сохранён.")

            elif choice == '11':
                csv_path, json_path = demo.run_demo(config.OUTPUT_DIR)
                print(f"✅ Сценарий выполнен: {csv_path}, {json_path}")

            elif choice == '0':
                print("👋 До свидания!")
                break

            else:
                print("❌ Неверный выбор. Пожалуйста, введите число от 0 до 11.")

        except errors.GradebookError as e:
            print(f"❌ Ошибка логики: {e}")
        except OSError as e:
            logger.error("Ошибка записи файла: %s", e)
            print(f"❌ Ошибка записи файла: {e}")
        except Exception as e:
            logger.exception("Непредвиденная ошибка")
            print(f"❌ Произошла непредвиденная ошибка: {e}")


def main():
    logging.basicConfig(level=config.LOG_LEVEL, format=config.LOG_FORMAT)
    try:
        main_cli()
    except KeyboardInterrupt:
        print("\nПрограмма принудительно остановлена.")
        sys.exit(130)


if __name__ == '__main__':
    main()
