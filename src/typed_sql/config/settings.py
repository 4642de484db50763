"""
Configuration management for typed_sql.

Environment-based configuration using Pydantic BaseSettings. Variables
use the ``TSQL_`` prefix (``TSQL_DRIVER``, ``TSQL_TABLE_PREFIX``,
``TSQL_DATABASE_HOST`` ...); logging variables are read without a prefix.
An optional ``.env`` file at the project root is loaded as well, or the
file named by ``TSQL_ENV_FILE``.
"""

import os
from functools import lru_cache
from pathlib import Path
from typing import Dict, Optional, Tuple

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from sqlalchemy.engine import URL

from typed_sql.sql.core.identifier import validate_prefix
from typed_sql.sql.dialects.drivers import Driver

# Determine project root for resolving .env by default
PROJECT_ROOT = Path(__file__).resolve().parents[3]
DEFAULT_ENV_FILE = PROJECT_ROOT / ".env"
ENV_FILE_OVERRIDE = os.getenv("TSQL_ENV_FILE")
SETTINGS_ENV_FILE = (
    Path(ENV_FILE_OVERRIDE).expanduser() if ENV_FILE_OVERRIDE else DEFAULT_ENV_FILE
)

# driver -> (SQLAlchemy drivername, default port)
DRIVER_URLS: Dict[Driver, Tuple[str, Optional[int]]] = {
    Driver.PGSQL: ("postgresql+psycopg2", 5432),
    Driver.MYSQL: ("mysql+pymysql", 3306),
    Driver.SQLITE: ("sqlite", None),
    Driver.SQLSRV: ("mssql+pyodbc", 1433),
    Driver.DBLIB: ("mssql+pymssql", 1433),
    Driver.CUBRID: ("cubrid", 33000),
}


class Settings(BaseSettings):
    """
    Application settings with environment variable support.

    The substitution context (driver and table prefix) and the connection
    parameters used to build a SQLAlchemy URL live here.
    """

    model_config = SettingsConfigDict(
        env_prefix="TSQL_",
        env_file=SETTINGS_ENV_FILE,
        env_file_encoding="utf-8",
        extra="ignore",
    )

    LOG_LEVEL: str = Field(
        default="INFO",
        validation_alias="LOG_LEVEL",
        description="Logging level (uppercase)",
    )
    LOG_TO_FILE: bool = Field(
        default=False,
        validation_alias="LOG_TO_FILE",
        description="Also write logs to a daily rotating file",
    )
    LOG_FILE_DIR: str = Field(
        default="logs",
        validation_alias="LOG_FILE_DIR",
        description="Directory for log files",
    )

    driver: Driver = Field(
        default=Driver.MYSQL,
        description="Database driver identifier (pgsql, mysql, sqlite, sqlsrv, dblib, cubrid)",
    )
    table_prefix: str = Field(
        default="",
        description="Prefix joined with '_' to every ?t table name; empty for none",
    )

    database_host: str = Field(default="localhost", description="Database host")
    database_port: Optional[int] = Field(
        default=None, description="Database port (driver default when unset)"
    )
    database_user: str = Field(default="", description="Database user")
    database_password: str = Field(default="", description="Database password")
    database_name: str = Field(default="", description="Database name or SQLite path")
    database_uri: Optional[str] = Field(
        default=None, description="Complete database URI (overrides components)"
    )

    @field_validator("driver", mode="before")
    @classmethod
    def _resolve_driver(cls, value: object) -> Driver:
        return Driver.resolve(value if isinstance(value, (str, Driver)) else None)

    @field_validator("table_prefix")
    @classmethod
    def _validate_table_prefix(cls, value: str) -> str:
        return validate_prefix(value)

    def get_database_url(self) -> str:
        """
        Get the SQLAlchemy connection URL.

        ``database_uri`` wins when set; ``postgres://`` is rewritten to
        ``postgresql://`` for SQLAlchemy compatibility. Otherwise the URL is
        assembled from the individual components for the configured driver.
        """
        if self.database_uri:
            uri = self.database_uri
            if uri.startswith("postgres://"):
                uri = uri.replace("postgres://", "postgresql://", 1)
            return uri

        drivername, default_port = DRIVER_URLS[self.driver]
        if self.driver is Driver.SQLITE:
            url = URL.create(drivername, database=self.database_name or None)
        else:
            url = URL.create(
                drivername,
                username=self.database_user or None,
                password=self.database_password or None,
                host=self.database_host,
                port=self.database_port or default_port,
                database=self.database_name or None,
            )
        return url.render_as_string(hide_password=False)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return the process-wide settings instance."""
    return Settings()
