"""csvpeek — загрузка CSV-файла и просмотр записей в консоли.

Базовый пакет: чтение файла, разбор CSV в список записей и вывод результата.
"""

from .data import load_and_parse, load_table, parse

__version__ = "0.1.0"

__all__ = [
    "data",
    "utils",
    "load_and_parse",
    "load_table",
    "parse",
]
