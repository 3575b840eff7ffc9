"""Разбор и формирование текста с разделителями (CSV, TSV и т.п.).

Токенизация целиком делегирована :func:`polars.read_csv` и
:meth:`polars.DataFrame.write_csv`; остальной код пакета видит только
функции этого модуля.

Правила разбора:

- первая строка — заголовок, остальные — записи;
- все значения остаются строками, пустая ячейка — ``""``;
- короткая строка дополняется ``""``, лишние поля длинной строки отбрасываются;
- пустые строки файла после заголовка пропускаются; строка заголовка и строки
  из пустых полей (``,`` или ``"",""``) сохраняются;
- при повторяющихся именах колонок побеждает значение более правой колонки.
"""

from __future__ import annotations

import io
import logging
from typing import Any, Callable, Iterable, List, Mapping, Optional, Sequence

import polars as pl

from ..exceptions import CsvParseError
from .table import Record, Table

logger = logging.getLogger(__name__)

RowCallback = Callable[[Record, int, List[str]], Optional[Mapping[str, Any]]]

DEFAULT_DELIMITER = ","


def _validate_delimiter(delimiter: str) -> None:
    if len(delimiter) != 1 or len(delimiter.encode("utf-8")) != 1:
        raise ValueError(f"Разделитель должен быть одним ASCII-символом, получено: {delimiter!r}")


def _read_rows(text: str, delimiter: str) -> list[list[str]]:
    """Читает текст без заголовка; ширина строк задаётся первой строкой."""
    _validate_delimiter(delimiter)
    if not text.strip():
        return []

    try:
        df = pl.read_csv(
            io.BytesIO(text.encode("utf-8")),
            has_header=False,
            separator=delimiter,
            quote_char='"',
            infer_schema=False,
            truncate_ragged_lines=True,
            empty_string_is_null=False,
            raise_if_empty=False,
        )
    except pl.exceptions.PolarsError as e:
        raise CsvParseError(f"Не удалось разобрать текст: {e}") from e

    if df.width == 0:
        return []

    rows = []
    for index, values in enumerate(df.rows()):
        # пустая строка файла: первое поле пустое, остальных нет; заголовок не пропускается
        if index and not values[0] and all(v is None for v in values[1:]):
            continue
        rows.append(["" if v is None else v for v in values])
    return rows


def parse_rows(text: str, *, delimiter: str = DEFAULT_DELIMITER) -> list[list[str]]:
    """Разбирает текст в список строк без выделения заголовка.

    Все строки приводятся к ширине первой строки.
    """

    return _read_rows(text, delimiter)


def parse_table(
    text: str,
    *,
    delimiter: str = DEFAULT_DELIMITER,
    row: RowCallback | None = None,
) -> Table:
    """Разбирает текст в :class:`Table`.

    Параметры
    ---------
    text:
        Полное содержимое файла.
    delimiter:
        Разделитель полей (один символ).
    row:
        Необязательная функция ``row(record, index, columns)``. Возвращает
        запись, которая попадёт в результат, или ``None``, чтобы строку
        пропустить.
    """

    rows = _read_rows(text, delimiter)
    if not rows:
        return Table()

    header, body = rows[0], rows[1:]
    columns = list(dict.fromkeys(header))

    records: list[Record] = []
    for index, values in enumerate(body):
        record = dict(zip(header, values))
        if row is not None:
            converted = row(record, index, columns)
            if converted is None:
                continue
            record = dict(converted)
        records.append(record)

    logger.debug("Разобрано %d записей, колонки: %s", len(records), columns)
    return Table(columns=columns, records=records)


def parse(
    text: str,
    *,
    delimiter: str = DEFAULT_DELIMITER,
    row: RowCallback | None = None,
) -> list[Record]:
    """Разбирает текст в список записей (заголовок — первая строка)."""

    return parse_table(text, delimiter=delimiter, row=row).records


def _cell(value: Any) -> str:
    return "" if value is None else str(value)


def format_rows(rows: Iterable[Sequence[Any]], *, delimiter: str = DEFAULT_DELIMITER) -> str:
    """Формирует текст из списка строк; кавычки ставятся только там, где нужно."""

    _validate_delimiter(delimiter)
    rows = [[_cell(v) for v in r] for r in rows]
    if not rows:
        return ""

    width = max(len(r) for r in rows)
    if width == 0:
        return ""
    names = [f"column_{i}" for i in range(width)]
    padded = [r + [""] * (width - len(r)) for r in rows]

    df = pl.DataFrame(padded, schema={name: pl.String for name in names}, orient="row")
    return df.write_csv(include_header=False, separator=delimiter, quote_char='"')


def format_records(
    records: Iterable[Mapping[str, Any]],
    columns: Sequence[str] | None = None,
    *,
    delimiter: str = DEFAULT_DELIMITER,
) -> str:
    """Сериализует записи обратно в текст с заголовком.

    Заголовок — ``columns``, а если они не заданы, ключи первой записи.
    Отсутствующие в записи колонки записываются пустыми.
    """

    records = list(records)
    if columns is None:
        columns = list(records[0].keys()) if records else []
    columns = list(columns)
    if not columns:
        return ""

    rows: list[Sequence[Any]] = [columns]
    rows.extend([record.get(c) for c in columns] for record in records)
    return format_rows(rows, delimiter=delimiter)
