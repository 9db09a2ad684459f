# tests/conftest.py
import pytest
from gradebook.roster import Roster

@pytest.fixture
def empty_roster() -> Roster:
    """Фикстура: журнал без студентов."""
    return Roster()

@pytest.fixture
def sample_roster() -> Roster:
    """Фикстура, предоставляющая журнал с тремя студентами."""
    roster = Roster()
    roster.add_student("Anna", {"math": 8, "science": 9})
    roster.add_student("Boris", {"math": 10, "science": 10, "history": 8})
    roster.add_student("Vera", {"math": 9.6, "science": 8.8, "history": 6.7,
                                "spanish": 8, "computerScience": 10, "business": 8})
    return roster
