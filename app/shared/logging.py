"""
Root logger setup for the calculator service.

Every request ends in a single record written by the interception
middleware; its structured fields (path, status_code, error_kind,
telemetry) travel in ``extra`` and are also rendered into the message,
so the plain-text stream stays greppable. Third-party loggers that would
duplicate those lines are held at WARNING.
"""

import logging
import sys

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

QUIET_LOGGERS = (
    "uvicorn.access",
    "sentry_sdk.errors",
)


def configure_logging(level: str = "INFO") -> None:
    """Route all records to stdout at ``level``; unknown names fall back to INFO."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format=LOG_FORMAT,
        datefmt=LOG_DATE_FORMAT,
        stream=sys.stdout,
        force=True,
    )
    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
