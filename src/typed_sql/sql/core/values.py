"""
Parameter value helpers.

Parameters are ordinary Python objects: ``None``, ``bool``, ``int``,
``float``, ``Decimal``, ``str``, lists/tuples, mappings, ``datetime`` and
``date``. The one extra variant is ``RawExpression``, the only value that
reaches the SQL text without escaping.
"""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Any, Mapping, Sequence, Union

Scalar = Union[None, bool, int, float, Decimal, str, date, "RawExpression"]
ParameterValue = Union[Scalar, Sequence[Any], Mapping[str, Any]]


@dataclass(frozen=True)
class RawExpression:
    """SQL text inserted verbatim, e.g. ``RawExpression("NOW()")``."""

    expression: str

    def __post_init__(self) -> None:
        if not isinstance(self.expression, str):
            raise TypeError(
                f"RawExpression requires str, {type(self.expression).__name__} given"
            )

    def __str__(self) -> str:
        return self.expression


def raw(expression: str) -> RawExpression:
    """Shorthand for ``RawExpression(expression)``."""
    return RawExpression(expression)


def is_numeric(value: Any) -> bool:
    """True for int/float/Decimal values; booleans are not numeric here."""
    return isinstance(value, (int, float, Decimal)) and not isinstance(value, bool)


def is_sequence(value: Any) -> bool:
    """True for list-like values; strings and bytes do not count."""
    return isinstance(value, Sequence) and not isinstance(
        value, (str, bytes, bytearray)
    )


def type_name(value: Any) -> str:
    return "null" if value is None else type(value).__name__
