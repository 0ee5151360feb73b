"""
Calculator bounded context, domain layer.

- Arithmetic operations (add, sub, mul, div)
- ErrorKind: the closed set of failures the service recognizes
"""

from app.domain.calculator.errors import CalculatorError, ErrorKind
from app.domain.calculator.operations import Calculator

__all__ = ["Calculator", "CalculatorError", "ErrorKind"]
