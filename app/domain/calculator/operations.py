"""Arithmetic operations exposed by the calculator API."""

from app.domain.calculator.errors import CalculatorError, ErrorKind


class Calculator:
    """Stateless integer arithmetic.

    Operations are coroutines so that routes can await them uniformly
    and tests can substitute implementations that fail or suspend.
    """

    async def add(self, x: int, y: int) -> int:
        return x + y

    async def sub(self, x: int, y: int) -> int:
        return x - y

    async def mul(self, x: int, y: int) -> int:
        return x * y

    async def div(self, x: int, y: int) -> float:
        """Divide x by y.

        Raises:
            CalculatorError: DIVIDE_BY_ZERO when y is 0.
        """
        if y == 0:
            raise CalculatorError(ErrorKind.DIVIDE_BY_ZERO)
        return x / y
