"""
In-memory telemetry sink.

Records accepted events in a bounded buffer. Used as the fallback sink
when no Sentry DSN is configured and as the recording fake in tests.
"""

import threading
from collections import deque
from typing import Any, Callable, Mapping

from app.shared.errors.classifier import ClassifiedError
from app.shared.observability.ports import (
    OfferOutcome,
    TelemetryEvent,
    TelemetrySink,
    should_report,
)

DEFAULT_MAX_EVENTS = 1000


class InMemoryTelemetrySink(TelemetrySink):
    """Thread-safe recording sink.

    Args:
        max_events: Capacity of the buffer; oldest events are evicted first.
        accept: Decides from the offer's metadata whether to keep the event.
    """

    def __init__(
        self,
        max_events: int = DEFAULT_MAX_EVENTS,
        accept: Callable[[Mapping[str, Any]], bool] = should_report,
    ) -> None:
        self._accept = accept
        self._lock = threading.Lock()
        self._events: deque[TelemetryEvent] = deque(maxlen=max_events)
        self._offered = 0
        self._dropped = 0

    async def offer(
        self, error: ClassifiedError, metadata: Mapping[str, Any]
    ) -> OfferOutcome:
        accepted = self._accept(metadata)
        with self._lock:
            self._offered += 1
            if not accepted:
                self._dropped += 1
                return OfferOutcome.DROPPED
            self._events.append(TelemetryEvent.from_classified(error, metadata))
        return OfferOutcome.ACCEPTED

    @property
    def events(self) -> list[TelemetryEvent]:
        """Snapshot of accepted events, oldest first."""
        with self._lock:
            return list(self._events)

    @property
    def offered(self) -> int:
        with self._lock:
            return self._offered

    @property
    def dropped(self) -> int:
        with self._lock:
            return self._dropped

    def clear(self) -> None:
        with self._lock:
            self._events.clear()
            self._offered = 0
            self._dropped = 0
