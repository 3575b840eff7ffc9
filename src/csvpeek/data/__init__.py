"""Подпакет для загрузки и разбора CSV-файлов."""

from .data_loader import load_and_parse, load_table
from .dsv import format_records, format_rows, parse, parse_rows, parse_table
from .table import Record, Table

__all__ = [
    "Record",
    "Table",
    "format_records",
    "format_rows",
    "load_and_parse",
    "load_table",
    "parse",
    "parse_rows",
    "parse_table",
]
