import logging
from pathlib import Path

import pytest

from taskboard.config import Settings
from taskboard.logging_setup import _ConsoleNoiseFilter

ENV_KEYS = [
    "TASKBOARD_DATABASE_URL",
    "DATABASE_URL",
    "TASKBOARD_HOST",
    "TASKBOARD_PORT",
    "TASKBOARD_API_URL",
    "TASKBOARD_LOG_LEVEL",
    "TASKBOARD_LOG_DIR",
]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for key in ENV_KEYS:
        monkeypatch.delenv(key, raising=False)


def test_defaults():
    s = Settings.from_env()

    assert s.database_url is None
    assert s.host == "127.0.0.1"
    assert s.port == 8000
    assert s.api_url == "http://127.0.0.1:8000"
    assert s.log_level == "INFO"
    assert s.log_dir == Path(".local/taskboard")


def test_prefixed_connection_string_wins(monkeypatch):
    monkeypatch.setenv("DATABASE_URL", "sqlite:///fallback.db")
    monkeypatch.setenv("TASKBOARD_DATABASE_URL", "sqlite:///tasks.db")
    assert Settings.from_env().database_url == "sqlite:///tasks.db"


def test_database_url_fallback(monkeypatch):
    monkeypatch.setenv("DATABASE_URL", " sqlite:///fallback.db ")
    assert Settings.from_env().database_url == "sqlite:///fallback.db"


def test_invalid_port_falls_back_to_default(monkeypatch):
    monkeypatch.setenv("TASKBOARD_PORT", "eighty")
    assert Settings.from_env().port == 8000


def test_api_url_follows_host_and_port(monkeypatch):
    monkeypatch.setenv("TASKBOARD_HOST", "0.0.0.0")
    monkeypatch.setenv("TASKBOARD_PORT", "9000")
    assert Settings.from_env().api_url == "http://0.0.0.0:9000"

    monkeypatch.setenv("TASKBOARD_API_URL", "http://tasks.example/")
    assert Settings.from_env().api_url == "http://tasks.example"


def _record(name: str, level: int) -> logging.LogRecord:
    return logging.LogRecord(name, level, __file__, 1, "msg", None, None)


def test_console_filter_keeps_app_logs_and_drops_library_noise():
    f = _ConsoleNoiseFilter()

    assert f.filter(_record("taskboard.ui.store", logging.DEBUG))
    assert f.filter(_record("uvicorn.error", logging.INFO))
    assert not f.filter(_record("sqlalchemy.engine", logging.INFO))
    assert f.filter(_record("httpx", logging.WARNING))
