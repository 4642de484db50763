"""Core SQL template utilities package."""

from .identifier import quote_column, quote_identifier, quote_table, validate_and_escape
from .placeholders import PlaceholderKind, PlaceholderToken, count_placeholders, scan
from .values import RawExpression, raw

__all__ = [
    "quote_identifier",
    "quote_table",
    "quote_column",
    "validate_and_escape",
    "PlaceholderKind",
    "PlaceholderToken",
    "count_placeholders",
    "scan",
    "RawExpression",
    "raw",
]
