"""
Shared fixtures.

The environment is scrubbed of Sentry settings before the application
is imported, so ``app.main`` always builds with the in-memory sink.
"""

import logging
import os

os.environ.pop("SENTRY_DSN", None)
os.environ.pop("SENTRY_REQUIRED", None)

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from app.core.config import Settings
from app.infrastructure.telemetry.in_memory_sink import InMemoryTelemetrySink
from app.main import create_app
from app.shared.observability.middleware import RequestInterceptor

INTERCEPTOR_LOGGER = "app.shared.observability.middleware"


class RecordingHandler(logging.Handler):
    """Collects log records in a list."""

    def __init__(self) -> None:
        super().__init__(level=logging.DEBUG)
        self.records: list[logging.LogRecord] = []

    def emit(self, record: logging.LogRecord) -> None:
        self.records.append(record)


@pytest.fixture
def sink() -> InMemoryTelemetrySink:
    return InMemoryTelemetrySink()


@pytest.fixture
def log_handler():
    """A private logger whose records are collected, for interceptor unit tests."""
    handler = RecordingHandler()
    logger = logging.getLogger("tests.interceptor")
    logger.setLevel(logging.DEBUG)
    logger.propagate = False
    logger.addHandler(handler)
    yield handler
    logger.removeHandler(handler)


@pytest.fixture
def interceptor(sink, log_handler) -> RequestInterceptor:
    return RequestInterceptor(sink, logger=logging.getLogger("tests.interceptor"))


@pytest.fixture
def app(sink) -> FastAPI:
    application = create_app(Settings(), telemetry_sink=sink)
    yield application
    application.dependency_overrides.clear()


@pytest.fixture
def client(app) -> TestClient:
    return TestClient(app)


@pytest.fixture
def interceptor_logs(caplog):
    """Returns a collector for interception middleware records at one level."""
    caplog.set_level(logging.INFO, logger=INTERCEPTOR_LOGGER)

    def collect(level: int = logging.ERROR) -> list[logging.LogRecord]:
        return [
            r
            for r in caplog.records
            if r.name == INTERCEPTOR_LOGGER and r.levelno == level
        ]

    return collect
