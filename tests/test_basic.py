"""
Basic application tests.

Validates that the FastAPI app starts correctly and the
status endpoint responds as expected.
"""

import pytest
from fastapi.testclient import TestClient

from app.core.config import Settings
from app.domain.calculator.errors import CalculatorError, ErrorKind
from app.infrastructure.telemetry.in_memory_sink import InMemoryTelemetrySink
from app.main import app, build_telemetry_sink

client = TestClient(app)


class TestStatusEndpoint:
    """Tests for the status endpoint."""

    def test_status_returns_200(self) -> None:
        """Status endpoint must return HTTP 200."""
        response = client.get("/api/v0/status")
        assert response.status_code == 200

    def test_status_response_body(self) -> None:
        """Status endpoint must report OK."""
        assert client.get("/api/v0/status").json() == {"status": "OK"}

    def test_unknown_route_is_404(self) -> None:
        assert client.get("/api/v0/nope").status_code == 404


class TestTelemetrySinkSelection:
    """Tests for build_telemetry_sink()."""

    def test_in_memory_without_dsn(self) -> None:
        sink = build_telemetry_sink(Settings(sentry_dsn=None, telemetry_buffer_size=5))
        assert isinstance(sink, InMemoryTelemetrySink)

    def test_required_dsn_missing_fails(self) -> None:
        with pytest.raises(CalculatorError) as exc_info:
            build_telemetry_sink(Settings(sentry_dsn=None, sentry_required=True))
        assert exc_info.value.kind is ErrorKind.MISSING_CONFIGURATION

    def test_app_exposes_interceptor(self) -> None:
        assert app.state.interceptor.sink is not None
