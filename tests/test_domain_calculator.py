"""
Tests for the calculator domain layer.

Tests operations and the CalculatorError type in isolation.
No external dependencies or IO required.
"""

import pytest

from app.domain.calculator.errors import CalculatorError, ErrorKind
from app.domain.calculator.operations import Calculator


class TestCalculator:
    """Tests for the arithmetic operations."""

    @pytest.mark.asyncio
    async def test_add(self) -> None:
        assert await Calculator().add(2, 3) == 5

    @pytest.mark.asyncio
    async def test_sub(self) -> None:
        assert await Calculator().sub(2, 3) == -1

    @pytest.mark.asyncio
    async def test_mul(self) -> None:
        assert await Calculator().mul(-4, 3) == -12

    @pytest.mark.asyncio
    async def test_div_returns_quotient(self) -> None:
        """Division divides; it does not add the operands."""
        assert await Calculator().div(10, 4) == 2.5
        assert await Calculator().div(9, 3) == 3

    @pytest.mark.asyncio
    async def test_div_by_zero_raises(self) -> None:
        with pytest.raises(CalculatorError) as exc_info:
            await Calculator().div(10, 0)
        assert exc_info.value.kind is ErrorKind.DIVIDE_BY_ZERO
        assert str(exc_info.value) == "cannot divide by zero"


class TestCalculatorError:
    """Tests for CalculatorError."""

    @pytest.mark.parametrize("kind", list(ErrorKind))
    def test_every_kind_has_description(self, kind: ErrorKind) -> None:
        assert kind.description
        assert CalculatorError(kind).message == kind.description

    def test_custom_message(self) -> None:
        error = CalculatorError(ErrorKind.MISSING_CONFIGURATION, "SENTRY_DSN is unset")
        assert str(error) == "SENTRY_DSN is unset"

    def test_wraps_cause(self) -> None:
        cause = OSError("disk full")
        error = CalculatorError(ErrorKind.IO_FAILURE, cause=cause)
        assert error.cause is cause
        assert error.__cause__ is cause
