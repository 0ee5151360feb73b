"""
Telemetry sink port.

The interceptor reports classified failures to a TelemetrySink that is
injected at composition time. The sink owns the suppression policy; the
caller only guarantees that ``status_code`` is present in the metadata
handed to each offer. Metadata travels with the call and is never
stashed on shared state.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from types import MappingProxyType
from typing import Any, Mapping
from uuid import uuid4

from app.shared.errors.classifier import ClassifiedError

STATUS_CODE_KEY = "status_code"


class OfferOutcome(Enum):
    """Result of offering a classified error to a sink."""

    ACCEPTED = "accepted"
    DROPPED = "dropped"


@dataclass(frozen=True)
class TelemetryEvent:
    """A classified failure that passed a sink's filter."""

    error_kind: str
    message: str
    status_code: int
    metadata: Mapping[str, Any]
    event_id: str = field(default_factory=lambda: uuid4().hex)
    recorded_at: datetime = field(
        default_factory=lambda: datetime.now(timezone.utc)
    )

    @classmethod
    def from_classified(
        cls, error: ClassifiedError, metadata: Mapping[str, Any]
    ) -> "TelemetryEvent":
        return cls(
            error_kind=error.kind.value,
            message=error.description,
            status_code=error.status_code,
            metadata=MappingProxyType(dict(metadata)),
        )


def should_report(metadata: Mapping[str, Any]) -> bool:
    """Return False for client faults (400 <= status < 500).

    A missing or unparsable status code is reported: a failure whose
    class is unknown is never suppressed.
    """
    try:
        status_code = int(metadata[STATUS_CODE_KEY])
    except (KeyError, TypeError, ValueError):
        return True
    return not 400 <= status_code < 500


class TelemetrySink(ABC):
    """Port for forwarding classified failures to error tracking.

    Implementations must be safe for concurrent use by unrelated requests.
    """

    @abstractmethod
    async def offer(
        self, error: ClassifiedError, metadata: Mapping[str, Any]
    ) -> OfferOutcome:
        """Offer one classified error with its reporting metadata.

        Args:
            error: The classified failure.
            metadata: Metadata visible to the sink's filter for this
                offer only. Always contains ``status_code``.

        Returns:
            ACCEPTED if the event was persisted, DROPPED otherwise.
        """
        raise NotImplementedError
