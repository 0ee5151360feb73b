"""
Dependency injection for the calculator bounded context.

Routes receive their Calculator through FastAPI's dependency system so
tests can override it with ``app.dependency_overrides``.
"""

from app.domain.calculator.operations import Calculator

_calculator = Calculator()


def get_calculator() -> Calculator:
    """Return the shared, stateless Calculator."""
    return _calculator
