"""
Typed SQL templating.

Templates carry ``?``-letter placeholders; ``QueryPreparer`` substitutes
them with escaped, driver-formatted values.
"""

from .core.identifier import quote_column, quote_identifier, quote_table
from .core.placeholders import PlaceholderKind
from .core.values import RawExpression, raw
from .dialects.drivers import Driver, date_format_for
from .errors import (
    InvalidIdentifier,
    PlaceholderCountMismatch,
    SqlTemplateError,
    TypeMismatch,
    UnknownPlaceholderKind,
)
from .preparer import QueryPreparer
from .quoting import MySQLQuoter, ScalarQuoter, StandardQuoter, quoter_for_driver

__all__ = [
    "QueryPreparer",
    "PlaceholderKind",
    "RawExpression",
    "raw",
    "Driver",
    "date_format_for",
    "quote_identifier",
    "quote_table",
    "quote_column",
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
