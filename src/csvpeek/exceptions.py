"""Исключения csvpeek.

Все ошибки пакета наследуются от :class:`CsvPeekError`, а также от
подходящего встроенного исключения, поэтому вызывающий код может ловить
как ``CsvPeekError``, так и привычные ``FileNotFoundError`` / ``OSError`` /
``ValueError``.
"""

from __future__ import annotations

from pathlib import Path


class CsvPeekError(Exception):
    """Базовое исключение пакета."""


class SourceNotFoundError(CsvPeekError, FileNotFoundError):
    """Файл с данными не существует."""


class SourceReadError(CsvPeekError, OSError):
    """Файл существует, но прочитать его не удалось (каталог, нет прав и т.п.)."""


class SourceEncodingError(CsvPeekError, ValueError):
    """Содержимое файла не декодируется в заданной кодировке."""

    def __init__(self, path: Path, encoding: str, position: int) -> None:
        self.path = path
        self.encoding = encoding
        self.position = position
        super().__init__(
            f"Файл {path} не является текстом в кодировке {encoding} "
            f"(ошибка на байте {position})"
        )


class CsvParseError(CsvPeekError, ValueError):
    """Токенизатор отказался разбирать текст (например, незакрытая кавычка)."""
