"""
Application entry point.

Creates the FastAPI application and wires together:
- Routers (status + calculator, under the API prefix)
- Error handlers (framework validation errors)
- CORS and the error interception middleware
- The telemetry sink (Sentry when configured, in-memory otherwise)
- Logging configuration

No business logic belongs here.
"""

import logging
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.core.config import Settings, settings as default_settings
from app.infrastructure.telemetry.in_memory_sink import InMemoryTelemetrySink
from app.infrastructure.telemetry.sentry_sink import init_sentry
from app.interfaces.calculator.router import router as calculator_router
from app.interfaces.health import router as health_router
from app.shared.errors.handlers import register_error_handlers
from app.shared.logging import configure_logging
from app.shared.observability.middleware import (
    ErrorInterceptionMiddleware,
    RequestInterceptor,
)
from app.shared.observability.ports import TelemetrySink

logger = logging.getLogger(__name__)


def build_telemetry_sink(settings: Settings) -> TelemetrySink:
    """Select the telemetry sink from settings.

    Raises:
        CalculatorError: MISSING_CONFIGURATION when a DSN is required but unset.
    """
    if settings.sentry_dsn or settings.sentry_required:
        return init_sentry(settings)
    logger.warning(
        "SENTRY_DSN is unset; classified errors are kept in memory only."
    )
    return InMemoryTelemetrySink(max_events=settings.telemetry_buffer_size)


def create_app(
    settings: Optional[Settings] = None,
    telemetry_sink: Optional[TelemetrySink] = None,
) -> FastAPI:
    """Create and configure the FastAPI application.

    This is the composition root of the application.

    Args:
        settings: Settings to use; defaults to the environment-loaded ones.
        telemetry_sink: Sink for classified errors; built from settings
            when omitted.

    Returns:
        A fully configured FastAPI application instance. The interceptor
        is reachable as ``app.state.interceptor``.
    """
    settings = settings or default_settings
    configure_logging(level=settings.log_level)

    sink = telemetry_sink or build_telemetry_sink(settings)
    interceptor = RequestInterceptor(sink)

    app = FastAPI(
        title=settings.project_name,
        version=settings.version,
        docs_url="/docs" if settings.debug else None,
        redoc_url="/redoc" if settings.debug else None,
    )
    app.state.interceptor = interceptor

    # --- Middleware (last added runs outermost) ---
    # CORS wraps the interceptor so classified error responses carry CORS headers
    app.add_middleware(ErrorInterceptionMiddleware, interceptor=interceptor)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_allow_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # --- Error Handlers ---
    register_error_handlers(app)

    # --- Routers ---
    app.include_router(health_router, prefix=settings.api_prefix)
    app.include_router(calculator_router, prefix=settings.api_prefix)

    return app


app = create_app()
