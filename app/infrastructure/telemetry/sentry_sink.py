"""
Sentry telemetry adapter.

Each offer runs in its own forked scope (``sentry_sdk.new_scope``), so
the metadata tags attached for one request are never visible to another.
The suppression filter runs as Sentry's ``before_send`` hook and reads
the ``status_code`` tag set by the offer.
"""

import logging
from typing import Any, Mapping, Optional

import sentry_sdk
from sentry_sdk.integrations.logging import LoggingIntegration
from sentry_sdk.transport import Transport

from app.core.config import Settings
from app.domain.calculator.errors import CalculatorError, ErrorKind
from app.shared.errors.classifier import ClassifiedError
from app.shared.observability.ports import (
    OfferOutcome,
    TelemetrySink,
    should_report,
)

logger = logging.getLogger(__name__)

CONTEXT_NAME = "classified_error"


def drop_client_faults(
    event: dict[str, Any], _hint: dict[str, Any]
) -> Optional[dict[str, Any]]:
    """``before_send`` hook: discard events tagged with a 4xx status code."""
    tags = event.get("tags") or {}
    if not should_report(tags):
        return None
    return event


class SentryTelemetrySink(TelemetrySink):
    """Forwards classified failures to Sentry."""

    async def offer(
        self, error: ClassifiedError, metadata: Mapping[str, Any]
    ) -> OfferOutcome:
        with sentry_sdk.new_scope() as scope:
            for key, value in metadata.items():
                scope.set_tag(key, str(value))
            scope.set_context(CONTEXT_NAME, dict(metadata))
            event_id = scope.capture_exception(error.error)
        if event_id is None:
            return OfferOutcome.DROPPED
        logger.debug("Reported %s to Sentry as %s", error.kind.value, event_id)
        return OfferOutcome.ACCEPTED


def init_sentry(
    settings: Settings, transport: Optional[Transport] = None
) -> SentryTelemetrySink:
    """Initialize the Sentry client and return a sink bound to it.

    Log records become breadcrumbs only; events are produced exclusively
    by SentryTelemetrySink.offer. Auto-enabling framework integrations
    stay off: unhandled errors are never captured.

    Args:
        settings: Application settings providing DSN, release and environment.
        transport: Optional transport override.

    Raises:
        CalculatorError: MISSING_CONFIGURATION when SENTRY_DSN is unset.
    """
    if not settings.sentry_dsn:
        raise CalculatorError(ErrorKind.MISSING_CONFIGURATION, "SENTRY_DSN is unset")

    options: dict[str, Any] = {
        "dsn": settings.sentry_dsn,
        "release": settings.release,
        "environment": settings.sentry_environment,
        "before_send": drop_client_faults,
        "auto_enabling_integrations": False,
        "integrations": [
            LoggingIntegration(level=logging.INFO, event_level=None),
        ],
    }
    if transport is not None:
        options["transport"] = transport
    sentry_sdk.init(**options)
    logger.info(
        "Sentry initialized: release=%s environment=%s",
        settings.release,
        settings.sentry_environment,
    )
    return SentryTelemetrySink()
