"""Модуль загрузки CSV-файла с диска.

Файл читается целиком за одно обращение к файловой системе, декодируется
(по умолчанию строго как UTF-8) и передаётся в :mod:`csvpeek.data.dsv`.
Вывод результата в консоль — задача точки входа, а не загрузчика.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Union

from ..exceptions import SourceEncodingError, SourceNotFoundError, SourceReadError
from .dsv import DEFAULT_DELIMITER, RowCallback, parse_table
from .table import Record, Table

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


def _read_source(path: Path) -> bytes:
    if not path.exists():
        raise SourceNotFoundError(f"Файл с данными не найден: {path}")
    try:
        return path.read_bytes()
    except FileNotFoundError as e:
        raise SourceNotFoundError(f"Файл с данными не найден: {path}") from e
    except OSError as e:
        raise SourceReadError(f"Не удалось прочитать файл {path}: {e}") from e


def _decode(raw: bytes, path: Path, encoding: str) -> str:
    try:
        return raw.decode(encoding)
    except UnicodeDecodeError as e:
        raise SourceEncodingError(path, encoding, e.start) from e


def load_table(
    path: PathLike,
    *,
    encoding: str = "utf-8",
    delimiter: str = DEFAULT_DELIMITER,
    row: RowCallback | None = None,
) -> Table:
    """Загружает CSV-файл в :class:`~csvpeek.data.table.Table`.

    Параметры
    ---------
    path:
        Путь до CSV-файла.
    encoding:
        Кодировка входного файла. По умолчанию ``"utf-8"``; для файлов с BOM
        можно передать ``"utf-8-sig"``.
    delimiter:
        Разделитель полей. По умолчанию ``","``.
    row:
        Необязательная функция преобразования строки, см. :func:`csvpeek.data.dsv.parse_table`.

    Исключения
    ----------
    SourceNotFoundError
        Если указанный файл не существует.
    SourceReadError
        Если файл существует, но его нельзя прочитать.
    SourceEncodingError
        Если содержимое не декодируется в кодировке ``encoding``.
    """

    path = Path(path)
    raw = _read_source(path)
    text = _decode(raw, path, encoding)
    table = parse_table(text, delimiter=delimiter, row=row)

    logger.info("Загружен %s: %d записей, %d колонок", path, len(table), len(table.columns))
    return table


def load_and_parse(
    path: PathLike,
    *,
    encoding: str = "utf-8",
    delimiter: str = DEFAULT_DELIMITER,
    row: RowCallback | None = None,
) -> list[Record]:
    """Загружает CSV-файл и возвращает список записей в порядке строк файла.

    Каждая запись — словарь ``имя колонки -> строковое значение``. Подробности
    и исключения см. в :func:`load_table`.
    """

    return load_table(path, encoding=encoding, delimiter=delimiter, row=row).records
