"""
Unit tests for the engine/connection bridge.
"""

from unittest.mock import MagicMock

import psycopg2.extensions
import pymysql.connections
import pytest
from sqlalchemy import create_engine

from typed_sql.config import Settings
from typed_sql.sql.connection import (
    connect_quoter,
    create_engine_from_settings,
    driver_from_engine,
    open_preparer,
)
from typed_sql.sql.dialects.drivers import Driver
from typed_sql.sql.preparer import QueryPreparer
from typed_sql.sql.quoting import (
    MySQLQuoter,
    Psycopg2Quoter,
    PyMySQLConnectionQuoter,
    StandardQuoter,
)


def _engine_with_dialect(name: str, driver: str) -> MagicMock:
    engine = MagicMock()
    engine.dialect.name = name
    engine.dialect.driver = driver
    return engine


@pytest.mark.unit
class TestDriverFromEngine:
    """Tests for driver_from_engine."""

    @pytest.mark.parametrize(
        "name, driver, expected",
        [
            ("postgresql", "psycopg2", Driver.PGSQL),
            ("mysql", "pymysql", Driver.MYSQL),
            ("mariadb", "pymysql", Driver.MYSQL),
            ("sqlite", "pysqlite", Driver.SQLITE),
            ("mssql", "pyodbc", Driver.SQLSRV),
            ("mssql", "pymssql", Driver.DBLIB),
            ("oracle", "oracledb", Driver.MYSQL),
        ],
    )
    def test_mapping(self, name, driver, expected):
        assert driver_from_engine(_engine_with_dialect(name, driver)) is expected

    def test_real_sqlite_engine(self):
        assert driver_from_engine(create_engine("sqlite://")) is Driver.SQLITE


@pytest.mark.unit
class TestConnectQuoter:
    """Tests for connect_quoter."""

    def test_psycopg2_connection(self):
        connection = MagicMock(spec=psycopg2.extensions.connection)
        quoter = connect_quoter(connection, Driver.PGSQL)
        assert isinstance(quoter, Psycopg2Quoter)
        assert quoter.connection is connection

    def test_pymysql_connection(self):
        connection = MagicMock(spec=pymysql.connections.Connection)
        assert isinstance(connect_quoter(connection, Driver.MYSQL), PyMySQLConnectionQuoter)

    def test_other_mysql_driver_uses_offline_quoter(self):
        assert isinstance(connect_quoter(object(), Driver.MYSQL), MySQLQuoter)

    def test_other_drivers_use_standard_quoter(self):
        quoter = connect_quoter(object(), Driver.SQLSRV)
        assert isinstance(quoter, StandardQuoter)
        assert quoter.active_dialect() == "sqlsrv"


@pytest.mark.unit
class TestOpenPreparer:
    """Tests for open_preparer."""

    def test_sqlite_engine(self):
        engine = create_engine("sqlite://")

        with open_preparer(engine, prefix="shop") as preparer:
            assert isinstance(preparer, QueryPreparer)
            sql = preparer.prepare("SELECT * FROM ?t WHERE name = ?s", "users", "O'Brien")

        assert sql == "SELECT * FROM `shop_users` WHERE name = 'O''Brien'"

    def test_connection_returned_on_error(self):
        engine = _engine_with_dialect("sqlite", "pysqlite")
        raw_connection = engine.raw_connection.return_value

        with pytest.raises(RuntimeError):
            with open_preparer(engine):
                raise RuntimeError("boom")

        raw_connection.close.assert_called_once_with()


@pytest.mark.unit
def test_create_engine_from_settings_sqlite():
    settings = Settings(driver="sqlite", database_name=":memory:")
    engine = create_engine_from_settings(settings)
    assert engine.dialect.name == "sqlite"
    assert driver_from_engine(engine) is Driver.SQLITE
