"""Тесты загрузки CSV с диска."""

from pathlib import Path

import pandas as pd
import pytest

from csvpeek.data import load_and_parse, load_table
from csvpeek.exceptions import (
    CsvPeekError,
    SourceEncodingError,
    SourceNotFoundError,
    SourceReadError,
)


def test_load_and_parse(write_csv):
    """Загрузка простого файла."""
    path = write_csv("a,b,c\n1,2,3\n")
    assert load_and_parse(path) == [{"a": "1", "b": "2", "c": "3"}]


def test_accepts_str_path(write_csv):
    """Путь можно передать строкой."""
    path = write_csv("a\n1\n")
    assert load_and_parse(str(path)) == [{"a": "1"}]


def test_header_only(write_csv):
    """Файл только с заголовком."""
    path = write_csv("a,b,c\n")
    assert load_and_parse(path) == []
    assert load_table(path).columns == ["a", "b", "c"]


def test_missing_file(tmp_path: Path):
    """Отсутствующий файл — SourceNotFoundError, он же FileNotFoundError."""
    with pytest.raises(SourceNotFoundError) as exc_info:
        load_and_parse(tmp_path / "nope.csv")
    assert isinstance(exc_info.value, FileNotFoundError)
    assert isinstance(exc_info.value, CsvPeekError)


def test_directory_is_not_readable(tmp_path: Path):
    """Каталог вместо файла — SourceReadError."""
    with pytest.raises(SourceReadError) as exc_info:
        load_and_parse(tmp_path)
    assert isinstance(exc_info.value, OSError)


def test_invalid_utf8(write_csv):
    """Некорректный UTF-8 — SourceEncodingError с позицией байта."""
    path = write_csv(b"a,b\n\xff\xfe,2\n")
    with pytest.raises(SourceEncodingError) as exc_info:
        load_and_parse(path)
    assert exc_info.value.position == 4
    assert exc_info.value.path == path
    assert isinstance(exc_info.value, ValueError)


def test_custom_encoding(write_csv):
    """Файл в cp1251 читается с явной кодировкой."""
    path = write_csv("город\nКазань\n".encode("cp1251"))
    assert load_and_parse(path, encoding="cp1251") == [{"город": "Казань"}]


def test_bom_is_stripped_by_default(write_csv):
    """BOM в начале UTF-8 файла не попадает в имя первой колонки."""
    path = write_csv("\ufeffa,b\n1,2\n".encode("utf-8"))
    assert load_and_parse(path) == [{"a": "1", "b": "2"}]
    assert load_table(path).columns == ["a", "b"]


def test_bom_is_stripped_with_utf8_sig(write_csv):
    """Кодировка utf-8-sig тоже убирает BOM."""
    path = write_csv("\ufeffa,b\n1,2\n".encode("utf-8"))
    assert load_and_parse(path, encoding="utf-8-sig") == [{"a": "1", "b": "2"}]


def test_semicolon_delimiter(write_csv):
    """Разделитель ';' с запятой внутри значения."""
    path = write_csv("a;b\n1,5;2\n")
    assert load_and_parse(path, delimiter=";") == [{"a": "1,5", "b": "2"}]


def test_table_to_frame(write_csv):
    """Table.to_frame даёт DataFrame со строковыми значениями."""
    path = write_csv("id,val\n1,007\n2,x\n")
    table = load_table(path)
    df = table.to_frame()
    assert isinstance(df, pd.DataFrame)
    assert df.shape == (2, 2) == table.shape
    assert list(df.columns) == ["id", "val"]
    assert df.loc[0, "val"] == "007"


def test_empty_table_to_frame(write_csv):
    """Пустая таблица сохраняет колонки в DataFrame."""
    df = load_table(write_csv("id,val\n")).to_frame()
    assert df.shape == (0, 2)
