"""
Error classification for the HTTP boundary.

Maps every ErrorKind to exactly one HTTP status code and derives the
reporting severity from it. The table is checked against the ErrorKind
enum at import time: a kind without a row fails the import instead of
falling through to a default.
"""

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any, Mapping

from app.domain.calculator.errors import CalculatorError, ErrorKind

HTTP_400 = 400
HTTP_500 = 500


class Severity(Enum):
    """Reporting severity of a classified failure."""

    CLIENT_FAULT = "client_fault"
    SERVER_FAULT = "server_fault"

    @classmethod
    def from_status_code(cls, status_code: int) -> "Severity":
        """Return CLIENT_FAULT for 4xx and SERVER_FAULT for 5xx.

        Raises:
            ValueError: If the code is not an error status.
        """
        if 400 <= status_code < 500:
            return cls.CLIENT_FAULT
        if 500 <= status_code < 600:
            return cls.SERVER_FAULT
        raise ValueError(f"Not an error status code: {status_code}")


@dataclass(frozen=True)
class Classification:
    """Resolved status code and severity for one ErrorKind."""

    status_code: int
    severity: Severity


_STATUS_CODES: dict[ErrorKind, int] = {
    ErrorKind.DIVIDE_BY_ZERO: HTTP_400,
    ErrorKind.MISSING_CONFIGURATION: HTTP_500,
    ErrorKind.UPSTREAM_TRANSPORT_FAILURE: HTTP_500,
    ErrorKind.IO_FAILURE: HTTP_500,
}

_unclassified = set(ErrorKind) - set(_STATUS_CODES)
if _unclassified:
    raise RuntimeError(
        "ErrorKind members without a status code: "
        + ", ".join(sorted(kind.name for kind in _unclassified))
    )

_CLASSIFICATIONS: dict[ErrorKind, Classification] = {
    kind: Classification(status_code, Severity.from_status_code(status_code))
    for kind, status_code in _STATUS_CODES.items()
}


def classify(kind: ErrorKind) -> Classification:
    """Return the classification of an error kind. Pure and total."""
    return _CLASSIFICATIONS[kind]


@dataclass(frozen=True)
class ClassifiedError:
    """A CalculatorError paired with its HTTP status and reporting metadata.

    Created once where the error crosses into the HTTP layer, then only
    read. ``reporting_metadata`` is a read-only view.
    """

    status_code: int
    error: CalculatorError
    reporting_metadata: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if not 400 <= self.status_code <= 599:
            raise ValueError(f"Status code out of range: {self.status_code}")
        if not isinstance(self.reporting_metadata, MappingProxyType):
            object.__setattr__(
                self,
                "reporting_metadata",
                MappingProxyType(dict(self.reporting_metadata)),
            )

    @classmethod
    def from_error(cls, error: CalculatorError, **context: Any) -> "ClassifiedError":
        """Classify an error and build its metadata.

        Args:
            error: The handled failure.
            **context: Extra metadata (e.g. the request path).

        Returns:
            A ClassifiedError whose metadata holds ``status_code``,
            ``error_kind`` and ``severity`` plus the given context.
        """
        classification = classify(error.kind)
        metadata = dict(context)
        metadata.update(
            status_code=classification.status_code,
            error_kind=error.kind.value,
            severity=classification.severity.value,
        )
        return cls(
            status_code=classification.status_code,
            error=error,
            reporting_metadata=metadata,
        )

    @property
    def kind(self) -> ErrorKind:
        return self.error.kind

    @property
    def severity(self) -> Severity:
        return Severity.from_status_code(self.status_code)

    @property
    def description(self) -> str:
        return self.error.message
