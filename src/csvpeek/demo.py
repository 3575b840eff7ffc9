"""Консольная точка входа csvpeek.

Запуск из корня проекта (при активированном .venv):

    python -m csvpeek data/sample.csv
    csvpeek data/sample.csv --format table

Скрипт:
- загружает CSV-файл с помощью csvpeek.data.load_table,
- печатает записи (по умолчанию), табличный вид (shape, head) или CSV.

Файлы данных не модифицируются.
"""

from __future__ import annotations

import argparse
import logging
import pprint
import sys
from pathlib import Path
from typing import Sequence

from .data import Table, format_records, load_table
from .exceptions import CsvPeekError
from .utils.config import Settings, get_settings

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
FORMATS = ("records", "table", "csv")


def parse_args(argv: Sequence[str] | None = None, settings: Settings | None = None) -> argparse.Namespace:
    settings = settings or get_settings()
    parser = argparse.ArgumentParser(
        prog="csvpeek",
        description="Загрузка CSV-файла и вывод разобранных записей в консоль.",
    )

    parser.add_argument(
        "csv_path",
        nargs="?",
        type=Path,
        default=settings.source_path,
        help=f"Путь к CSV-файлу (по умолчанию {settings.source_path}).",
    )
    parser.add_argument("-d", "--delimiter", default=settings.delimiter, help="Разделитель полей.")
    parser.add_argument("-e", "--encoding", default=settings.encoding, help="Кодировка файла.")
    parser.add_argument(
        "-f",
        "--format",
        choices=FORMATS,
        default="records",
        help="Формат вывода: records (список словарей), table (pandas) или csv.",
    )
    parser.add_argument("-n", "--head", type=int, default=None, help="Вывести только первые N записей.")
    parser.add_argument("-v", "--verbose", action="store_true", help="Подробное логирование (DEBUG).")

    args = parser.parse_args(argv)
    if len(args.delimiter.encode("utf-8")) != 1:
        parser.error(f"разделитель должен быть одним символом: {args.delimiter!r}")
    if args.head is not None and args.head < 0:
        parser.error(f"--head не может быть отрицательным: {args.head}")
    return args


def render(table: Table, fmt: str, *, path: Path, head: int | None = None) -> str:
    """Готовит текстовое представление таблицы для вывода в консоль."""
    if fmt == "table":
        n = 5 if head is None else head
        df = table.to_frame()
        return "\n".join(
            [
                "=== csvpeek ===",
                f"Файл: {path}",
                f"shape: {df.shape}",
                f"head({n}):",
                str(df.head(n)),
            ]
        )

    records = table.records if head is None else table.records[:head]
    if fmt == "csv":
        return format_records(records, table.columns).rstrip("\n")
    return pprint.pformat(records, sort_dicts=False)


def main(argv: Sequence[str] | None = None) -> int:
    settings = get_settings()
    args = parse_args(argv, settings)

    level = logging.DEBUG if args.verbose else settings.log_level.upper()
    logging.basicConfig(format=LOG_FORMAT, level=level)

    try:
        table = load_table(args.csv_path, encoding=args.encoding, delimiter=args.delimiter)
    except CsvPeekError as e:
        logger.error("%s", e)
        return 1

    print(render(table, args.format, path=args.csv_path, head=args.head))
    return 0


if __name__ == "__main__":  # pragma: no cover - CLI-вход
    sys.exit(main())
