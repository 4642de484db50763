"""
Scalar quoting capabilities.

Quoting a string literal correctly depends on the driver and the
connection charset, so the preparer delegates it to a ``ScalarQuoter``.
Offline quoters are pure functions; connection-backed quoters ask the
live DBAPI connection to do the escaping.
"""

from typing import Any, Protocol, Union

import psycopg2.extensions
from pymysql.converters import escape_string

from .dialects.drivers import Driver


class ScalarQuoter(Protocol):
    """Capability consumed by the preparer."""

    def quote(self, value: str) -> str: ...
    def active_dialect(self) -> str: ...


class StandardQuoter:
    """
    ANSI SQL quoting: wrap in single quotes and double embedded quotes.

    Correct for PostgreSQL (standard_conforming_strings on), SQLite and
    SQL Server. Backslashes are left alone.

    Examples:
        >>> StandardQuoter().quote("O'Brien")
        "'O''Brien'"
    """

    def __init__(self, dialect: Union[str, Driver] = Driver.SQLITE):
        self.dialect = Driver.resolve(dialect)

    def quote(self, value: str) -> str:
        return "'" + value.replace("'", "''") + "'"

    def active_dialect(self) -> str:
        return self.dialect.value


class MySQLQuoter:
    """
    MySQL quoting without a connection, using PyMySQL's escaper.

    Assumes the server runs without NO_BACKSLASH_ESCAPES; use
    ``PyMySQLConnectionQuoter`` when a connection is available.
    """

    def quote(self, value: str) -> str:
        return "'" + escape_string(value) + "'"

    def active_dialect(self) -> str:
        return Driver.MYSQL.value


class PyMySQLConnectionQuoter:
    """Quote through a live PyMySQL connection (honours the SQL mode)."""

    def __init__(self, connection: Any):
        self.connection = connection

    def quote(self, value: str) -> str:
        return "'" + self.connection.escape_string(value) + "'"

    def active_dialect(self) -> str:
        return Driver.MYSQL.value


class Psycopg2Quoter:
    """Quote through a live psycopg2 connection (charset aware)."""

    def __init__(self, connection: Any):
        self.connection = connection

    def quote(self, value: str) -> str:
        adapted = psycopg2.extensions.QuotedString(value)
        adapted.prepare(self.connection)
        encoding = psycopg2.extensions.encodings.get(
            self.connection.encoding, "utf-8"
        )
        return adapted.getquoted().decode(encoding)

    def active_dialect(self) -> str:
        return Driver.PGSQL.value


def quoter_for_driver(driver: Union[str, Driver, None]) -> ScalarQuoter:
    """
    Pick an offline quoter for a driver.

    MySQL (and unknown drivers, which resolve to MySQL) escape backslashes;
    everything else uses ANSI quote doubling.
    """
    resolved = Driver.resolve(driver)
    if resolved is Driver.MYSQL:
        return MySQLQuoter()
    return StandardQuoter(resolved)
