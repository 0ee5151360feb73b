"""
Pydantic schemas for calculator API request/response validation.

These schemas define the API contract.
No business logic belongs here.
"""

from pydantic import BaseModel, Field


class CalculationRequest(BaseModel):
    """Request schema shared by every arithmetic endpoint.

    Attributes:
        x: Left operand.
        y: Right operand.
    """

    x: int = Field(..., description="Left operand")
    y: int = Field(..., description="Right operand")


class CalculationResponse(BaseModel):
    """Response schema shared by every arithmetic endpoint."""

    res: int | float


class StatusResponse(BaseModel):
    """Response schema for the status endpoint."""

    status: str


class ErrorResponse(BaseModel):
    """Standard error body returned for classified and validation errors."""

    error: str
    kind: str | None = None
    detail: list[dict] | None = None
