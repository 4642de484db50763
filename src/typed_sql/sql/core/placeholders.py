"""
Placeholder grammar for typed SQL templates.

A placeholder is ``?`` followed by exactly one kind letter. Anything else
(for example a bare ``?`` or ``?x``) is left in the template untouched.

Examples:
    >>> [t.kind.value for t in scan("SELECT * FROM ?t WHERE id = ?i")]
    ['t', 'i']
"""

import re
from enum import Enum
from typing import List, NamedTuple


class PlaceholderKind(str, Enum):
    """Closed set of placeholder kinds, keyed by their template letter."""

    STRING = "s"
    INTEGER = "i"
    FLOAT = "f"
    ARRAY = "a"
    ASSOC = "A"
    MULTI_ROW = "M"
    TABLE = "t"
    COLUMN = "c"
    LIKE = "l"
    DATE = "d"
    RAW = "r"


PLACEHOLDER_PATTERN = re.compile(
    r"\?([" + "".join(kind.value for kind in PlaceholderKind) + r"])"
)


class PlaceholderToken(NamedTuple):
    """A placeholder found in a template, with its span."""

    kind: PlaceholderKind
    start: int
    end: int


def scan(template: str) -> List[PlaceholderToken]:
    """Return the placeholder tokens of ``template`` in left-to-right order."""
    return [
        PlaceholderToken(PlaceholderKind(match.group(1)), match.start(), match.end())
        for match in PLACEHOLDER_PATTERN.finditer(template)
    ]


def count_placeholders(template: str) -> int:
    return sum(1 for _ in PLACEHOLDER_PATTERN.finditer(template))
