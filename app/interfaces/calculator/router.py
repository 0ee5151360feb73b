"""
FastAPI router for the calculator bounded context.

Routes delegate to the Calculator. Input validation is handled by
Pydantic schemas. A CalculatorError raised here is left to propagate:
the ErrorInterceptionMiddleware classifies and reports it.
"""

import logging

from fastapi import APIRouter, Depends

from app.domain.calculator.operations import Calculator
from app.interfaces.calculator.dependencies import get_calculator
from app.interfaces.calculator.schemas import (
    CalculationRequest,
    CalculationResponse,
    ErrorResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter(tags=["calculator"])


@router.post(
    "/add",
    response_model=CalculationResponse,
    responses={422: {"model": ErrorResponse}},
    summary="Add two numbers",
)
async def handle_add(
    body: CalculationRequest,
    calculator: Calculator = Depends(get_calculator),
) -> CalculationResponse:
    logger.debug("handle_add: adding two numbers together")
    return CalculationResponse(res=await calculator.add(body.x, body.y))


@router.post(
    "/sub",
    response_model=CalculationResponse,
    responses={422: {"model": ErrorResponse}},
    summary="Subtract a number from another",
)
async def handle_sub(
    body: CalculationRequest,
    calculator: Calculator = Depends(get_calculator),
) -> CalculationResponse:
    logger.debug("handle_sub: subtracting a number from another")
    return CalculationResponse(res=await calculator.sub(body.x, body.y))


@router.post(
    "/mul",
    response_model=CalculationResponse,
    responses={422: {"model": ErrorResponse}},
    summary="Multiply two numbers",
)
async def handle_mul(
    body: CalculationRequest,
    calculator: Calculator = Depends(get_calculator),
) -> CalculationResponse:
    logger.debug("handle_mul: multiplying two numbers")
    return CalculationResponse(res=await calculator.mul(body.x, body.y))


@router.post(
    "/div",
    response_model=CalculationResponse,
    responses={400: {"model": ErrorResponse}, 422: {"model": ErrorResponse}},
    summary="Divide a number by another",
    description="Returns x / y. Dividing by zero is rejected with HTTP 400.",
)
async def handle_div(
    body: CalculationRequest,
    calculator: Calculator = Depends(get_calculator),
) -> CalculationResponse:
    logger.debug("handle_div: dividing a number by another")
    return CalculationResponse(res=await calculator.div(body.x, body.y))
