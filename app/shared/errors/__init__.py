"""
Shared error handling package.

Centralizes error-to-HTTP mapping so that domain errors
are consistently translated into API responses.
"""

from app.shared.errors.classifier import (
    Classification,
    ClassifiedError,
    Severity,
    classify,
)

__all__ = ["Classification", "ClassifiedError", "Severity", "classify"]
