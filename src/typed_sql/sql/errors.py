"""
Typed errors raised while preparing SQL templates.

Every error aborts the whole ``prepare`` call. The preparer never logs;
callers decide where errors are recorded, typically via ``to_dict()``.
"""

from typing import Any, Dict, Optional


class SqlTemplateError(Exception):
    """Base error for template preparation failures.

    Attributes:
        template: The SQL template being prepared (set by the preparer)
        index: Zero-based index of the offending parameter, if known
        kind: Placeholder kind letter involved in the failure, if known
    """

    error_type = "SqlTemplateError"

    def __init__(
        self,
        message: str,
        *,
        template: Optional[str] = None,
        index: Optional[int] = None,
        kind: Optional[str] = None,
    ):
        self.template = template
        self.index = index
        self.kind = kind
        super().__init__(message)

    def attach(self, template: str, index: Optional[int] = None) -> "SqlTemplateError":
        """Record template context without overwriting what is already set."""
        if self.template is None:
            self.template = template
        if self.index is None:
            self.index = index
        return self

    def to_dict(self) -> Dict[str, Any]:
        """Convert to structured dict for logging."""
        return {
            "error_type": self.error_type,
            "message": self.args[0],
            "template": self.template,
            "index": self.index,
            "kind": self.kind,
        }


class PlaceholderCountMismatch(SqlTemplateError):
    """Raised when the number of placeholders differs from the parameter count."""

    error_type = "PlaceholderCountMismatch"

    def __init__(self, expected: int, actual: int, template: Optional[str] = None):
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"Mismatch between number of placeholders ({expected}) "
            f"and provided parameters ({actual})",
            template=template,
        )

    def to_dict(self) -> Dict[str, Any]:
        data = super().to_dict()
        data.update(expected=self.expected, actual=self.actual)
        return data


class UnknownPlaceholderKind(SqlTemplateError):
    """Raised for a placeholder kind outside the supported set."""

    error_type = "UnknownPlaceholderKind"

    def __init__(self, kind: str, **context: Any):
        super().__init__(f"Unknown placeholder type: ?{kind}", kind=kind, **context)


class TypeMismatch(SqlTemplateError, TypeError):
    """Raised when a value does not have the shape its placeholder requires."""

    error_type = "TypeMismatch"


class InvalidIdentifier(SqlTemplateError, ValueError):
    """Raised when a table or column name fails the identifier grammar."""

    error_type = "InvalidIdentifier"

    def __init__(self, message: str, name: Any = None, **context: Any):
        self.name = name
        super().__init__(message, **context)

    def to_dict(self) -> Dict[str, Any]:
        data = super().to_dict()
        data["name"] = self.name
        return data
