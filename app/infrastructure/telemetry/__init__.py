"""
Telemetry adapters implementing the TelemetrySink port.
"""

from app.infrastructure.telemetry.in_memory_sink import InMemoryTelemetrySink
from app.infrastructure.telemetry.sentry_sink import (
    SentryTelemetrySink,
    drop_client_faults,
    init_sentry,
)

__all__ = [
    "InMemoryTelemetrySink",
    "SentryTelemetrySink",
    "drop_client_faults",
    "init_sentry",
]
