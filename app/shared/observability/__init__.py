"""
Observability package.

Request interception middleware and the telemetry sink port it reports to.
"""

from app.shared.observability.middleware import (
    ErrorInterceptionMiddleware,
    RequestInterceptor,
)
from app.shared.observability.ports import (
    OfferOutcome,
    TelemetryEvent,
    TelemetrySink,
    should_report,
)

__all__ = [
    "ErrorInterceptionMiddleware",
    "OfferOutcome",
    "RequestInterceptor",
    "TelemetryEvent",
    "TelemetrySink",
    "should_report",
]
