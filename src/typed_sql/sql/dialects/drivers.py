"""
Database driver table.

Maps driver identifiers (the names connection layers report) to
the date/time pattern and identifier quote character used when rendering
literals. Unknown drivers fall back to MySQL conventions.
"""

from datetime import date, datetime, time
from enum import Enum
from typing import Dict, Union


class Driver(str, Enum):
    """Recognized database drivers."""

    PGSQL = "pgsql"
    MYSQL = "mysql"
    SQLITE = "sqlite"
    SQLSRV = "sqlsrv"
    DBLIB = "dblib"
    CUBRID = "cubrid"

    @classmethod
    def resolve(cls, name: Union[str, "Driver", None]) -> "Driver":
        """Case-insensitive lookup; anything unrecognized resolves to MYSQL."""
        if isinstance(name, Driver):
            return name
        try:
            return cls((name or "").strip().lower())
        except ValueError:
            return cls.MYSQL


# ``%:z`` renders the UTC offset as +HH:MM
DATE_FORMATS: Dict[Driver, str] = {
    Driver.PGSQL: "%Y-%m-%d %H:%M:%S.%f %:z",
    Driver.MYSQL: "%Y-%m-%d %H:%M:%S",
    Driver.SQLITE: "%Y-%m-%d %H:%M:%S",
    Driver.SQLSRV: "%Y-%m-%d %H:%M:%S.%f",
    Driver.DBLIB: "%Y-%m-%d %H:%M:%S",
    Driver.CUBRID: "%Y-%m-%d %H:%M:%S",
}

IDENTIFIER_QUOTES: Dict[Driver, str] = {
    Driver.PGSQL: '"',
    Driver.MYSQL: "`",
    Driver.SQLITE: "`",
    Driver.SQLSRV: '"',
    Driver.DBLIB: '"',
    Driver.CUBRID: "`",
}

# LIKE has no default escape character on these drivers
EXPLICIT_LIKE_ESCAPE = frozenset(
    {Driver.SQLITE, Driver.SQLSRV, Driver.DBLIB, Driver.CUBRID}
)

# SQLAlchemy dialect names -> driver identifiers
SQLALCHEMY_DRIVER_NAMES: Dict[str, Driver] = {
    "postgresql": Driver.PGSQL,
    "mysql": Driver.MYSQL,
    "mariadb": Driver.MYSQL,
    "sqlite": Driver.SQLITE,
    "mssql": Driver.SQLSRV,
}


def date_format_for(dialect: Union[str, Driver, None]) -> str:
    """
    Return the timestamp pattern for a driver.

    Examples:
        >>> date_format_for("mysql")
        '%Y-%m-%d %H:%M:%S'
        >>> date_format_for("oracle") == date_format_for("mysql")
        True
    """
    return DATE_FORMATS[Driver.resolve(dialect)]


def identifier_quote_for(dialect: Union[str, Driver, None]) -> str:
    return IDENTIFIER_QUOTES[Driver.resolve(dialect)]


def needs_like_escape_clause(dialect: Union[str, Driver, None]) -> bool:
    """True when a backslash only escapes LIKE wildcards with an ESCAPE clause."""
    return Driver.resolve(dialect) in EXPLICIT_LIKE_ESCAPE


def _utc_offset(value: datetime) -> str:
    offset = value.utcoffset()
    if offset is None:
        return "+00:00"
    seconds = int(offset.total_seconds())
    sign = "-" if seconds < 0 else "+"
    hours, remainder = divmod(abs(seconds), 3600)
    return f"{sign}{hours:02d}:{remainder // 60:02d}"


def format_timestamp(value: date, dialect: Union[str, Driver, None]) -> str:
    """
    Render a date or datetime using the driver's pattern.

    Naive datetimes are rendered with a ``+00:00`` offset where the pattern
    asks for one. Plain dates are treated as midnight.

    Examples:
        >>> format_timestamp(datetime(2024, 5, 1, 13, 30, 5), "mysql")
        '2024-05-01 13:30:05'
        >>> format_timestamp(datetime(2024, 5, 1, 13, 30, 5), "pgsql")
        '2024-05-01 13:30:05.000000 +00:00'
    """
    if not isinstance(value, datetime):
        value = datetime.combine(value, time.min)
    pattern = date_format_for(dialect)
    if "%:z" in pattern:
        pattern = pattern.replace("%:z", _utc_offset(value))
    return value.strftime(pattern)
