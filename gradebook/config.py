# gradebook/config.py
"""Настройки приложения. Часть значений можно переопределить переменными окружения."""
import logging
import os
from typing import Optional

logger = logging.getLogger(__name__)


def env_int(name: str, default: Optional[int]) -> Optional[int]:
    """Целое число из переменной окружения. При пустом или некорректном значении берётся default."""
    raw = os.environ.get(name, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        logger.warning("Некорректное значение %s=%r, используется %r", name, raw, default)
        return default


# --- КОНФИГУРАЦИЯ ---
LOG_LEVEL = os.environ.get("GRADEBOOK_LOG_LEVEL", "INFO").upper()
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

OUTPUT_DIR = os.environ.get("GRADEBOOK_OUTPUT_DIR", ".")
CSV_REPORT_NAME = "courseA_statistics.csv"
JSON_REPORT_NAME = "courseA_results.json"

# Демонстрационный сценарий
DEMO_STUDENT_COUNT = env_int("GRADEBOOK_DEMO_STUDENTS", 50)
DEMO_THRESHOLD = 8.39
DEMO_SEED = env_int("GRADEBOOK_DEMO_SEED", None)
