"""
Domain-specific errors for the calculator bounded context.

Every handled failure is a CalculatorError tagged with one ErrorKind.
The kind is data, not a subclass: the set is closed, and the HTTP layer
maps each kind to a status code in exactly one table.
No framework imports allowed.
"""

from enum import Enum
from typing import Optional


class ErrorKind(Enum):
    """Closed set of internal failure causes."""

    DIVIDE_BY_ZERO = "divide_by_zero"
    MISSING_CONFIGURATION = "missing_configuration"
    UPSTREAM_TRANSPORT_FAILURE = "upstream_transport_failure"
    IO_FAILURE = "io_failure"

    @property
    def description(self) -> str:
        """Default human-readable description of the kind."""
        return _DESCRIPTIONS[self]


_DESCRIPTIONS = {
    ErrorKind.DIVIDE_BY_ZERO: "cannot divide by zero",
    ErrorKind.MISSING_CONFIGURATION: "required configuration is missing",
    ErrorKind.UPSTREAM_TRANSPORT_FAILURE: "upstream transport failed",
    ErrorKind.IO_FAILURE: "input/output operation failed",
}


class CalculatorError(Exception):
    """A handled failure carrying its ErrorKind and an optional cause.

    Args:
        kind: The failure kind.
        message: Overrides the kind's default description.
        cause: The lower-level exception being wrapped, if any.
    """

    def __init__(
        self,
        kind: ErrorKind,
        message: Optional[str] = None,
        cause: Optional[BaseException] = None,
    ) -> None:
        self.kind = kind
        self.message = message or kind.description
        self.cause = cause
        super().__init__(self.message)
        if cause is not None:
            self.__cause__ = cause

    def __repr__(self) -> str:
        return f"CalculatorError(kind={self.kind.name}, message={self.message!r})"
