"""
SQL identifier validation and quoting.

Table and column names are checked against an allow-list grammar before
they are quoted. Tables use the strict grammar ``[A-Za-z0-9_]+``; columns
additionally admit the identifier quote character so that already quoted
fragments can be passed through.
"""

import re
from typing import Any

from ..errors import InvalidIdentifier

DEFAULT_QUOTE_CHAR = "`"

TABLE_NAME_PATTERN = re.compile(r"[A-Za-z0-9_]+")


def _column_pattern(quote_char: str) -> "re.Pattern[str]":
    return re.compile(r"[A-Za-z0-9_" + re.escape(quote_char) + r"]+")


def quote_identifier(name: str, quote_char: str = DEFAULT_QUOTE_CHAR) -> str:
    """
    Quote a SQL identifier without validating it.

    Embedded quote characters are escaped by doubling them.

    Examples:
        >>> quote_identifier("company_id")
        '`company_id`'
        >>> quote_identifier('column"name', quote_char='"')
        '"column""name"'
    """
    escaped = name.replace(quote_char, quote_char * 2)
    return f"{quote_char}{escaped}{quote_char}"


def validate_and_escape(
    name: Any,
    allow_quote_char: bool = False,
    quote_char: str = DEFAULT_QUOTE_CHAR,
) -> str:
    """
    Validate an identifier and escape embedded quote characters.

    Args:
        name: Candidate identifier
        allow_quote_char: Admit ``quote_char`` inside the name (column grammar)
        quote_char: Identifier quote character of the active dialect

    Returns:
        The identifier with quote characters doubled, not yet wrapped

    Raises:
        InvalidIdentifier: If the name is not a string or has other characters
    """
    if not isinstance(name, str):
        raise InvalidIdentifier(
            f"Identifier must be a string, {type(name).__name__} given", name=name
        )

    pattern = _column_pattern(quote_char) if allow_quote_char else TABLE_NAME_PATTERN
    if not pattern.fullmatch(name):
        raise InvalidIdentifier(f"Invalid identifier: {name!r}", name=name)

    return name.replace(quote_char, quote_char * 2)


def validate_prefix(prefix: str) -> str:
    """Check a table prefix against the table grammar; empty means no prefix."""
    if prefix and not TABLE_NAME_PATTERN.fullmatch(prefix):
        raise InvalidIdentifier(f"Invalid table prefix: {prefix!r}", name=prefix)
    return prefix


def quote_table(name: Any, prefix: str = "", quote_char: str = DEFAULT_QUOTE_CHAR) -> str:
    """
    Validate, prefix and quote a table name.

    Examples:
        >>> quote_table("users", prefix="shop")
        '`shop_users`'
        >>> quote_table("users")
        '`users`'
    """
    escaped = validate_and_escape(name, allow_quote_char=False, quote_char=quote_char)
    if prefix:
        escaped = f"{validate_prefix(prefix)}_{escaped}"
    return f"{quote_char}{escaped}{quote_char}"


def quote_column(name: Any, quote_char: str = DEFAULT_QUOTE_CHAR) -> str:
    """Validate and quote a column name using the column grammar."""
    escaped = validate_and_escape(name, allow_quote_char=True, quote_char=quote_char)
    return f"{quote_char}{escaped}{quote_char}"
