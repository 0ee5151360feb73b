"""
Request interception: classification, telemetry and outcome logging.

Every request ends in exactly one of three terminal outcomes:

- Succeeded: the inner app produced a response. It is passed through
  unchanged; a response that itself carries an error status is logged
  at ERROR, anything else at INFO.
- ClassifiedFailed: the inner app raised a CalculatorError. The error is
  classified, offered once to the telemetry sink with its status code as
  per-offer metadata, logged, and converted to a JSON error response.
- UnhandledFailed: any other exception. It is logged as an unhandled
  server error and re-raised as is. No classification, no telemetry.

A cancelled request (asyncio.CancelledError is a BaseException) passes
straight through: nothing is logged and nothing is offered.
"""

import logging
from typing import Awaitable, Callable, Optional

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response
from starlette.types import ASGIApp

from app.domain.calculator.errors import CalculatorError
from app.shared.errors.classifier import ClassifiedError
from app.shared.errors.handlers import error_response
from app.shared.observability.ports import TelemetrySink

UNHANDLED_MARKER = "Unhandled server error"


class RequestInterceptor:
    """Wraps one request-handling invocation and reports its outcome.

    Holds no per-request state, so a single instance serves every
    concurrent request.

    Args:
        sink: Destination for classified failures.
        logger: Log sink; defaults to this module's logger.
    """

    def __init__(
        self, sink: TelemetrySink, logger: Optional[logging.Logger] = None
    ) -> None:
        self.sink = sink
        self._logger = logger or logging.getLogger(__name__)

    async def intercept(
        self, path: str, call_next: Callable[[], Awaitable[Response]]
    ) -> Response:
        """Run the inner handler and turn its outcome into a response.

        Args:
            path: Request path, used for log correlation.
            call_next: Invokes the inner handler.

        Returns:
            The inner response, or an error response for a CalculatorError.

        Raises:
            Exception: Any non-CalculatorError failure, unchanged.
        """
        try:
            response = await call_next()
        except CalculatorError as exc:
            return await self._handle_classified(path, exc)
        except Exception as exc:
            self._logger.error(
                "%s path=%s error=%r",
                UNHANDLED_MARKER,
                path,
                exc,
                extra={"path": path},
            )
            raise

        if response.status_code >= 400:
            self._logger.error(
                "Request failed path=%s status_code=%d",
                path,
                response.status_code,
                extra={"path": path, "status_code": response.status_code},
            )
        else:
            self._logger.info(
                "Request completed path=%s status_code=%d",
                path,
                response.status_code,
                extra={"path": path, "status_code": response.status_code},
            )
        return response

    async def _handle_classified(self, path: str, exc: CalculatorError) -> Response:
        classified = ClassifiedError.from_error(exc, path=path)
        outcome = await self.sink.offer(classified, classified.reporting_metadata)
        self._logger.error(
            "Classified error path=%s status_code=%d kind=%s telemetry=%s: %s",
            path,
            classified.status_code,
            classified.kind.value,
            outcome.value,
            classified.description,
            extra={
                "path": path,
                "status_code": classified.status_code,
                "error_kind": classified.kind.value,
                "telemetry": outcome.value,
            },
        )
        return error_response(
            classified.status_code,
            classified.description,
            kind=classified.kind.value,
        )


class ErrorInterceptionMiddleware(BaseHTTPMiddleware):
    """Starlette middleware that routes every request through a RequestInterceptor."""

    def __init__(self, app: ASGIApp, interceptor: RequestInterceptor) -> None:
        super().__init__(app)
        self.interceptor = interceptor

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        return await self.interceptor.intercept(
            request.url.path, lambda: call_next(request)
        )
