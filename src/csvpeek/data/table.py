"""Табличное представление разобранного CSV."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterator, List

import pandas as pd

Record = Dict[str, str]


@dataclass(frozen=True)
class Table:
    """Результат разбора: заголовок и записи в порядке следования строк.

    Параметры
    ---------
    columns:
        Имена колонок из строки заголовка (без повторов, в исходном порядке).
        Заполнено даже тогда, когда строк с данными нет.
    records:
        Записи; каждая запись — словарь ``колонка -> строковое значение``.
    """

    columns: List[str] = field(default_factory=list)
    records: List[Record] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.records)

    def __iter__(self) -> Iterator[Record]:
        return iter(self.records)

    @property
    def shape(self) -> tuple[int, int]:
        return len(self.records), len(self.columns)

    def to_frame(self) -> pd.DataFrame:
        """Возвращает таблицу как `pandas.DataFrame` (все значения — строки).

        Используется только для вывода в консоль: контрактом остаются
        :attr:`records`.
        """

        return pd.DataFrame.from_records(self.records, columns=self.columns)
