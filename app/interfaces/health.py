"""
Status router.

Provides a simple liveness endpoint. No business logic.
"""

from fastapi import APIRouter

from app.interfaces.calculator.schemas import StatusResponse

router = APIRouter(tags=["health"])


@router.get(
    "/status",
    response_model=StatusResponse,
    summary="Status check",
    description="Returns OK while the service is up.",
)
def status() -> StatusResponse:
    """Return current service status."""
    return StatusResponse(status="OK")
