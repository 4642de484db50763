"""Driver-specific formatting tables."""

from .drivers import (
    DATE_FORMATS,
    EXPLICIT_LIKE_ESCAPE,
    Driver,
    date_format_for,
    format_timestamp,
    identifier_quote_for,
    needs_like_escape_clause,
)

__all__ = [
    "DATE_FORMATS",
    "EXPLICIT_LIKE_ESCAPE",
    "Driver",
    "date_format_for",
    "format_timestamp",
    "identifier_quote_for",
    "needs_like_escape_clause",
]
