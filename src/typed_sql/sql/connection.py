"""
Bridge between SQLAlchemy engines and the preparer.

The preparer only needs two things from a connection: a way to quote
string literals and the driver name. This module borrows a raw DBAPI
connection from an engine and wraps it in the matching quoter. It does
not execute statements.
"""

from contextlib import contextmanager
from typing import Any, Iterator, Optional

import pymysql.connections
import psycopg2.extensions
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.pool import NullPool

from typed_sql.config import Settings, get_settings
from typed_sql.utils.logging import get_logger

from .dialects.drivers import SQLALCHEMY_DRIVER_NAMES, Driver
from .preparer import QueryPreparer
from .quoting import (
    MySQLQuoter,
    Psycopg2Quoter,
    PyMySQLConnectionQuoter,
    ScalarQuoter,
    StandardQuoter,
)

logger = get_logger(__name__)


def driver_from_engine(engine: Engine) -> Driver:
    """Map an engine's SQLAlchemy dialect onto a driver identifier."""
    dialect = engine.dialect
    if dialect.name == "mssql" and dialect.driver == "pymssql":
        return Driver.DBLIB
    return SQLALCHEMY_DRIVER_NAMES.get(dialect.name, Driver.resolve(dialect.name))


def connect_quoter(dbapi_connection: Any, driver: Driver) -> ScalarQuoter:
    """
    Choose the quoter for a live DBAPI connection.

    psycopg2 and PyMySQL connections quote through the connection itself;
    other drivers fall back to the offline quoter for their family.
    """
    if isinstance(dbapi_connection, psycopg2.extensions.connection):
        return Psycopg2Quoter(dbapi_connection)
    if isinstance(dbapi_connection, pymysql.connections.Connection):
        return PyMySQLConnectionQuoter(dbapi_connection)
    if driver is Driver.MYSQL:
        return MySQLQuoter()
    return StandardQuoter(driver)


def create_engine_from_settings(settings: Optional[Settings] = None) -> Engine:
    """Build an engine from configuration without connection pooling."""
    settings = settings or get_settings()
    engine = create_engine(settings.get_database_url(), poolclass=NullPool)
    logger.info(
        "engine.created",
        driver=driver_from_engine(engine).value,
        sqlalchemy_dialect=engine.dialect.name,
    )
    return engine


@contextmanager
def open_preparer(engine: Engine, prefix: str = "") -> Iterator[QueryPreparer]:
    """
    Yield a ``QueryPreparer`` bound to a connection borrowed from ``engine``.

    Example:
        >>> with open_preparer(engine, prefix="shop") as preparer:
        ...     sql = preparer.prepare("SELECT * FROM ?t WHERE name = ?s", "users", "Ann")
    """
    driver = driver_from_engine(engine)
    raw_connection = engine.raw_connection()
    try:
        dbapi_connection = getattr(raw_connection, "dbapi_connection", raw_connection)
        quoter = connect_quoter(dbapi_connection, driver)
        logger.debug(
            "preparer.opened",
            driver=driver.value,
            quoter=type(quoter).__name__,
            prefix=prefix,
        )
        yield QueryPreparer(quoter, prefix=prefix)
    finally:
        raw_connection.close()
