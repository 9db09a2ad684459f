# gradebook/io_utils.py
"""Модуль для записи готовых отчётов на диск."""
import os
from typing import Union


def write_text_file(filepath: Union[str, os.PathLike], content: str) -> None:
    """
    Перезаписывает файл текстом в UTF-8.
    Ошибки ввода/вывода не перехватываются: их обрабатывает вызывающий код.
    """
    with open(filepath, mode='w', encoding='utf-8', newline='') as file:
        file.write(content)
