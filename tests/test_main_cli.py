# tests/test_main_cli.py
import pytest
from unittest.mock import patch
from gradebook import main
from gradebook.errors import DataValidationError
from gradebook.models import format_student_line
from gradebook.reports import CSV_HEADER
from gradebook.roster import Roster

@pytest.fixture(autouse=True)
def fresh_roster(monkeypatch):
    """Каждый тест работает со своим пустым журналом."""
    roster = Roster()
    monkeypatch.setattr(main, "roster", roster)
    return roster

def feed_input(monkeypatch, answers):
    """Имитация пользовательского ввода; по окончании сценария выбирает '0' (выход)."""
    sequence = iter(answers)
    monkeypatch.setattr('builtins.input', lambda prompt="": next(sequence, "0"))

def test_parse_grades():
    assert main.parse_grades("math=9.5 history=7") == {"math": 9.5, "history": 7.0}
    assert main.parse_grades("") == {}

@pytest.mark.parametrize("grades_str", ["math", "=9", "math=abc"])
def test_parse_grades_rejects_bad_tokens(grades_str):
    with pytest.raises(DataValidationError):
        main.parse_grades(grades_str)

def test_cli_add_and_show_students(monkeypatch, capsys, fresh_roster):
    feed_input(monkeypatch, ['2', 'Anna', 'math=8 science=9', '1', '5', 'Anna', '0'])
    main.main_cli()
    output = capsys.readouterr().out

    assert "Студент Anna успешно добавлен" in output
    assert "math: 8.0" in output
    assert "Средний балл: 8.5" in output
    assert "До свидания!" in output
    assert fresh_roster.find_by_name("Anna")["id"] == 1

def test_cli_show_empty_list(monkeypatch, capsys):
    feed_input(monkeypatch, ['1', '0'])
    main.main_cli()
    assert "The list is empty." in capsys.readouterr().out

def test_cli_group_statistics_on_empty_roster(monkeypatch, capsys):
    feed_input(monkeypatch, ['6', '0'])
    main.main_cli()
    output = capsys.readouterr().out
    assert "Ошибка логики" in output
    assert "Журнал пуст" in output

def test_cli_bad_grades_input(monkeypatch, capsys, fresh_roster):
    feed_input(monkeypatch, ['2', 'Anna', 'math=abc', '0'])
    main.main_cli()
    assert "должна быть числом" in capsys.readouterr().out
    assert len(fresh_roster) == 0

def test_cli_delete_and_update(monkeypatch, capsys, fresh_roster):
    fresh_roster.add_student("Anna", {"math": 8})
    fresh_roster.add_student("Boris", {"math": 9})
    feed_input(monkeypatch, ['3', 'Anna', '4', 'Boris', 'history=7', '4', 'Nobody', 'math=1', '0'])
    main.main_cli()
    output = capsys.readouterr().out

    assert "Удалено студентов: 1" in output
    assert "Студент Nobody не найден" in output
    assert fresh_roster.list_students() == [{"id": 1, "name": "Boris", "grades": {"math": 9, "history": 7.0}}]

def test_cli_threshold_and_sort(monkeypatch, capsys, fresh_roster):
    fresh_roster.add_student("Anna", {"math": 8})
    fresh_roster.add_student("Boris", {"math": 9})
    feed_input(monkeypatch, ['7', '8', '8', 'desc', '0'])
    main.main_cli()
    output = capsys.readouterr().out

    assert "выше 8.0" in output
    assert output.index("Boris") < output.rindex("Anna")

def test_cli_export_csv(monkeypatch, capsys, fresh_roster):
    fresh_roster.add_student("Anna", {"math": 8})
    feed_input(monkeypatch, ['9', 'out.csv', '0'])

    with patch('gradebook.io_utils.write_text_file') as mock_write:
        main.main_cli()

    mock_write.assert_called_once()
    path, content = mock_write.call_args.args
    assert path == "out.csv"
    assert content.startswith(CSV_HEADER)
    assert "CSV-отчёт сохранён" in capsys.readouterr().out

def test_cli_reports_write_errors(monkeypatch, capsys):
    feed_input(monkeypatch, ['10', 'out.json', '0'])

    with patch('gradebook.io_utils.write_text_file', side_effect=PermissionError("denied")):
        main.main_cli()

    assert "Ошибка записи файла: denied" in capsys.readouterr().out

def test_cli_show_students_uses_student_line(monkeypatch, capsys, fresh_roster):
    fresh_roster.add_student("Anna", {"math": 8, "science": 9})
    fresh_roster.add_student("Boris", {})
    feed_input(monkeypatch, ['1', '0'])
    main.main_cli()
    output = capsys.readouterr().out

    assert format_student_line(1, "Anna", {"math": 8, "science": 9}) in output
    assert format_student_line(2, "Boris", {}) in output
    assert "Нет оценок" in output
