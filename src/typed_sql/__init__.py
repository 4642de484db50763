"""
typed_sql - typed placeholder substitution for SQL templates.

Example:
    >>> from typed_sql import QueryPreparer, StandardQuoter
    >>> QueryPreparer(StandardQuoter("pgsql")).prepare("SELECT ?s", "O'Brien")
    "SELECT 'O''Brien'"
"""

from typed_sql.sql import (
    Driver,
    InvalidIdentifier,
    MySQLQuoter,
    PlaceholderCountMismatch,
    PlaceholderKind,
    QueryPreparer,
    RawExpression,
    ScalarQuoter,
    SqlTemplateError,
    StandardQuoter,
    TypeMismatch,
    UnknownPlaceholderKind,
    quoter_for_driver,
    raw,
)

__version__ = "0.1.0"

__all__ = [
    "QueryPreparer",
    "PlaceholderKind",
    "RawExpression",
    "raw",
    "Driver",
    "ScalarQuoter",
    "StandardQuoter",
    "MySQLQuoter",
    "quoter_for_driver",
    "SqlTemplateError",
    "PlaceholderCountMismatch",
    "UnknownPlaceholderKind",
    "TypeMismatch",
    "InvalidIdentifier",
]
