from pathlib import Path

import pytest


@pytest.fixture
def write_csv(tmp_path: Path):
    """Создаёт файл во временном каталоге и возвращает путь к нему."""

    def _write(content, name: str = "data.csv") -> Path:
        path = tmp_path / name
        if isinstance(content, bytes):
            path.write_bytes(content)
        else:
            path.write_text(content, encoding="utf-8")
        return path

    return _write


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch, tmp_path):
    """Изолирует тесты от переменных CSVPEEK_* и .env разработчика."""
    for name in ("CSVPEEK_SOURCE_PATH", "CSVPEEK_ENCODING", "CSVPEEK_DELIMITER", "CSVPEEK_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
