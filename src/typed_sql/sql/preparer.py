"""
Typed placeholder substitution.

``QueryPreparer`` turns a template such as::

    SELECT * FROM ?t WHERE id IN ?a AND created_at > ?d

plus positional parameters into a complete SQL string. Each placeholder
kind has exactly one formatting rule; see ``PlaceholderKind`` for the
letters. Nothing is returned unless every placeholder was substituted.

Example:
    >>> from typed_sql.sql.quoting import MySQLQuoter
    >>> preparer = QueryPreparer(MySQLQuoter(), prefix="shop")
    >>> preparer.prepare("SELECT * FROM ?t WHERE id IN ?a", "users", [1, 2])
    'SELECT * FROM `shop_users` WHERE id IN (1, 2)'
"""

import math
from datetime import date
from decimal import Decimal, InvalidOperation
from typing import Any, Callable, Dict, List, Mapping, Union

from .core.identifier import quote_column, quote_table, validate_and_escape, validate_prefix
from .core.placeholders import PlaceholderKind, scan
from .core.values import RawExpression, is_numeric, is_sequence, type_name
from .dialects.drivers import (
    Driver,
    format_timestamp,
    identifier_quote_for,
    needs_like_escape_clause,
)
from .errors import (
    PlaceholderCountMismatch,
    SqlTemplateError,
    TypeMismatch,
    UnknownPlaceholderKind,
)
from .quoting import ScalarQuoter

Handler = Callable[[Any, Driver], str]

# ?i accepts at most 19 digits
INTEGER_LIMIT = 10**19

LIKE_ESCAPE = "\\"


class QueryPreparer:
    """
    Substitute typed placeholders in SQL templates.

    The preparer holds only read-only configuration (the quoter and the
    table prefix) and can be shared between threads as long as the quoter
    can.

    Args:
        quoter: Capability that quotes string literals and reports the driver
        prefix: Prepended to every ``?t`` table name as ``prefix_name``
    """

    def __init__(self, quoter: ScalarQuoter, prefix: str = ""):
        self.quoter = quoter
        self.prefix = validate_prefix(prefix)
        self._handlers: Dict[PlaceholderKind, Handler] = {
            PlaceholderKind.STRING: self._format_string,
            PlaceholderKind.INTEGER: self._format_integer,
            PlaceholderKind.FLOAT: self._format_float,
            PlaceholderKind.ARRAY: self._format_array,
            PlaceholderKind.ASSOC: self._format_assoc,
            PlaceholderKind.MULTI_ROW: self._format_multi_row,
            PlaceholderKind.TABLE: self._format_table,
            PlaceholderKind.COLUMN: self._format_column,
            PlaceholderKind.LIKE: self._format_like,
            PlaceholderKind.DATE: self._format_date,
            PlaceholderKind.RAW: self._format_raw,
        }

    def prepare(self, template: str, *params: Any) -> str:
        """
        Replace every placeholder in ``template`` with its parameter.

        Args:
            template: SQL containing ``?``-letter placeholders
            *params: One value per placeholder, in template order

        Returns:
            The substituted SQL; ``template`` itself when it has no placeholders

        Raises:
            PlaceholderCountMismatch: If placeholders and params differ in number
            TypeMismatch: If a value has the wrong shape for its placeholder
            InvalidIdentifier: If a table or column name fails validation
        """
        tokens = scan(template)
        if len(tokens) != len(params):
            raise PlaceholderCountMismatch(len(tokens), len(params), template=template)
        if not tokens:
            return template

        dialect = self._dialect()
        parts: List[str] = []
        cursor = 0
        for index, (token, value) in enumerate(zip(tokens, params)):
            try:
                fragment = self._dispatch(token.kind, value, dialect)
            except SqlTemplateError as exc:
                exc.attach(template, index)
                raise
            parts.append(template[cursor : token.start])
            parts.append(fragment)
            cursor = token.end
        parts.append(template[cursor:])
        return "".join(parts)

    def substitute(self, kind: Union[PlaceholderKind, str], value: Any) -> str:
        """Format a single value for a placeholder kind (enum or letter)."""
        return self._dispatch(kind, value, self._dialect())

    def _dialect(self) -> Driver:
        return Driver.resolve(self.quoter.active_dialect())

    def _dispatch(
        self, kind: Union[PlaceholderKind, str], value: Any, dialect: Driver
    ) -> str:
        if not isinstance(kind, PlaceholderKind):
            try:
                kind = PlaceholderKind(kind)
            except ValueError:
                raise UnknownPlaceholderKind(str(kind)) from None

        try:
            return self._handlers[kind](value, dialect)
        except SqlTemplateError as exc:
            if exc.kind is None:
                exc.kind = kind.value
            raise

    # -- scalar rules -----------------------------------------------------

    def _format_string(self, value: Any, dialect: Driver) -> str:
        if isinstance(value, str):
            return self.quoter.quote(value)
        if is_numeric(value):
            return self.quoter.quote(str(value))
        raise TypeMismatch(
            f"Expected string for ?s placeholder, {type_name(value)} given"
        )

    def _format_integer(self, value: Any, dialect: Driver) -> str:
        try:
            if isinstance(value, int):
                number = value
            elif isinstance(value, str):
                number = Decimal(value.strip())
            elif isinstance(value, float):
                number = Decimal(repr(value)) if math.isfinite(value) else None
            else:
                number = value
            if not isinstance(number, (int, Decimal)) or (
                isinstance(number, Decimal) and not number.is_finite()
            ):
                raise InvalidOperation
        except InvalidOperation:
            raise TypeMismatch(
                f"Expected integer for ?i placeholder, {value!r} given"
            ) from None
        if abs(number) >= INTEGER_LIMIT:
            raise TypeMismatch("Integer out of range for ?i placeholder (max 19 digits)")
        return str(int(number))

    def _format_float(self, value: Any, dialect: Driver) -> str:
        if isinstance(value, bool) or not isinstance(value, (int, float, Decimal, str)):
            raise TypeMismatch(
                f"Expected float for ?f placeholder, {type_name(value)} given"
            )
        try:
            number = float(value.strip().replace(",", ".") if isinstance(value, str) else value)
        except ValueError:
            raise TypeMismatch(
                f"Expected float for ?f placeholder, {value!r} given"
            ) from None
        except OverflowError:
            raise TypeMismatch("Float out of range for ?f placeholder") from None
        if not math.isfinite(number):
            raise TypeMismatch(f"Non-finite float for ?f placeholder: {number!r}")
        return repr(number)

    def _format_scalar(self, value: Any, dialect: Driver) -> str:
        """Shared rule for list items, multi-row cells and SET values."""
        if value is None:
            return "NULL"
        if isinstance(value, bool):
            return "1" if value else "0"
        if isinstance(value, int):
            return str(value)
        if isinstance(value, float):
            if not math.isfinite(value):
                raise TypeMismatch(f"Non-finite float value: {value!r}")
            return repr(value)
        if isinstance(value, Decimal):
            if not value.is_finite():
                raise TypeMismatch(f"Non-finite decimal value: {value!r}")
            return str(value)
        if isinstance(value, RawExpression):
            return str(value)
        if isinstance(value, date):
            return self.quoter.quote(format_timestamp(value, dialect))
        if isinstance(value, str):
            return self.quoter.quote(value)
        raise TypeMismatch(f"Unsupported scalar value of type {type_name(value)}")

    # -- collection rules -------------------------------------------------

    def _format_array(self, value: Any, dialect: Driver) -> str:
        if not is_sequence(value):
            raise TypeMismatch(
                f"Expected sequence for ?a placeholder, {type_name(value)} given"
            )
        if not value:
            raise TypeMismatch("Empty sequence for ?a placeholder")
        return "(" + ", ".join(self._format_scalar(item, dialect) for item in value) + ")"

    def _format_assoc(self, value: Any, dialect: Driver) -> str:
        if not isinstance(value, Mapping):
            raise TypeMismatch(
                f"Expected mapping for ?A placeholder, {type_name(value)} given"
            )
        if not value:
            raise TypeMismatch("Empty mapping for ?A placeholder")

        quote_char = identifier_quote_for(dialect)
        pairs = []
        for key, item in value.items():
            escaped = validate_and_escape(key, quote_char=quote_char)
            pairs.append(
                f"{quote_char}{escaped}{quote_char} = {self._format_scalar(item, dialect)}"
            )
        return ", ".join(pairs)

    def _format_multi_row(self, value: Any, dialect: Driver) -> str:
        if not is_sequence(value):
            raise TypeMismatch(
                f"Expected sequence of rows for ?M placeholder, {type_name(value)} given"
            )
        if not value:
            raise TypeMismatch("Empty row list for ?M placeholder")

        rows = []
        for row in value:
            if not is_sequence(row) or not row:
                raise TypeMismatch(
                    "Each element in ?M placeholder must be a non-empty sequence, "
                    f"{type_name(row)} given"
                )
            rows.append("(" + ", ".join(self._format_scalar(cell, dialect) for cell in row) + ")")
        return ", ".join(rows)

    # -- identifier rules -------------------------------------------------

    def _format_table(self, value: Any, dialect: Driver) -> str:
        return quote_table(value, self.prefix, identifier_quote_for(dialect))

    def _format_column(self, value: Any, dialect: Driver) -> str:
        return quote_column(value, identifier_quote_for(dialect))

    # -- special rules ----------------------------------------------------

    def _format_like(self, value: Any, dialect: Driver) -> str:
        """
        Backslash-escape wildcards and wrap the value in ``%``.

        Drivers without a default LIKE escape character get an explicit
        ``ESCAPE '\\'`` clause after the literal.
        """
        if not isinstance(value, str) and not is_numeric(value):
            raise TypeMismatch(
                f"Expected string for ?l placeholder, {type_name(value)} given"
            )
        escaped = (
            str(value).replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
        )
        literal = self.quoter.quote(f"%{escaped}%")
        if needs_like_escape_clause(dialect):
            return f"{literal} ESCAPE {self.quoter.quote(LIKE_ESCAPE)}"
        return literal

    def _format_date(self, value: Any, dialect: Driver) -> str:
        if value is None:
            return "NULL"
        if not isinstance(value, date):
            raise TypeMismatch(
                f"Expected datetime or None for ?d placeholder, {type_name(value)} given"
            )
        return self.quoter.quote(format_timestamp(value, dialect))

    def _format_raw(self, value: Any, dialect: Driver) -> str:
        if isinstance(value, (str, RawExpression)):
            return str(value)
        raise TypeMismatch(
            f"Expected string for ?r placeholder, {type_name(value)} given"
        )
