"""Настройки csvpeek.

Значения по умолчанию можно переопределить переменными окружения с
префиксом ``CSVPEEK_`` (например, ``CSVPEEK_SOURCE_PATH``) или файлом ``.env``
в текущем каталоге. Аргументы командной строки имеют приоритет над настройками.
"""

from __future__ import annotations

from pathlib import Path

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Настройки загрузчика.

    Параметры
    ---------
    source_path:
        Файл, который читается, если путь не передан явно.
    encoding:
        Кодировка входного файла.
    delimiter:
        Разделитель полей.
    log_level:
        Уровень логирования для точки входа.
    """

    source_path: Path = Path("my-data.csv")
    encoding: str = "utf-8"
    delimiter: str = ","
    log_level: str = "WARNING"

    class Config:
        env_prefix = "CSVPEEK_"
        env_file = ".env"
        env_file_encoding = "utf-8"
        extra = "ignore"


def get_settings() -> Settings:
    """Читает настройки заново (окружение могло измениться)."""
    return Settings()
