"""
Centralized error responses for FastAPI.

Builds the JSON error body shared by every error path and registers
the request-validation handler. No stack traces or internal details
are exposed to clients.

CalculatorError has no exception handler here: it must
propagate to the ErrorInterceptionMiddleware, which classifies it,
reports it and turns it into a response. Unexpected exceptions are not
caught either; they belong to the outer server layer.
"""

from typing import Any

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

HTTP_422 = 422


def error_response(
    status_code: int,
    error: str,
    kind: str | None = None,
    detail: Any = None,
) -> JSONResponse:
    """Build a consistent JSON error response."""
    body: dict[str, Any] = {"error": error}
    if kind:
        body["kind"] = kind
    if detail:
        body["detail"] = detail
    return JSONResponse(status_code=status_code, content=body)


def register_error_handlers(app: FastAPI) -> None:
    """Register the framework error handlers on the FastAPI application.

    Args:
        app: The FastAPI application instance.
    """

    @app.exception_handler(RequestValidationError)
    async def handle_validation_error(
        _request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        """Handle malformed request bodies."""
        detail = [
            {"loc": list(err.get("loc", ())), "msg": err.get("msg", "")}
            for err in exc.errors()
        ]
        return error_response(
            HTTP_422, "Invalid request", detail=jsonable_encoder(detail)
        )
