"""Shared pytest fixtures for typed_sql."""

from __future__ import annotations

from typing import Iterator, List

import pytest

from typed_sql.config import get_settings
from typed_sql.sql.preparer import QueryPreparer
from typed_sql.sql.quoting import MySQLQuoter, StandardQuoter

SETTINGS_ENV_VARS = [
    "TSQL_DRIVER",
    "TSQL_TABLE_PREFIX",
    "TSQL_DATABASE_URI",
    "TSQL_DATABASE_HOST",
    "TSQL_DATABASE_PORT",
    "TSQL_DATABASE_USER",
    "TSQL_DATABASE_PASSWORD",
    "TSQL_DATABASE_NAME",
]


class RecordingQuoter:
    """Quoter stand-in that wraps values in angle brackets and records calls."""

    def __init__(self, dialect: str = "mysql"):
        self.dialect = dialect
        self.calls: List[str] = []

    def quote(self, value: str) -> str:
        self.calls.append(value)
        return f"<{value}>"

    def active_dialect(self) -> str:
        return self.dialect


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Isolate tests from TSQL_* variables and the cached settings."""
    for name in SETTINGS_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def mysql_preparer() -> QueryPreparer:
    return QueryPreparer(MySQLQuoter())


@pytest.fixture
def pgsql_preparer() -> QueryPreparer:
    return QueryPreparer(StandardQuoter("pgsql"))


@pytest.fixture
def recording_quoter() -> RecordingQuoter:
    return RecordingQuoter()
