"""Errors

The :mod:`graphql_support.error` package is responsible for translating the
exceptions raised by resolvers into reported errors, and for the failure that is
raised when a query does not pass validation.
"""

from .handled_exception import HandledException
from .exception_handler import (
    ExceptionHandler,
    ExceptionHandlerMiddleware,
    default_exception_handler,
)
from .validation_violations import ValidationViolations

__all__ = [
    "ExceptionHandler",
    "ExceptionHandlerMiddleware",
    "HandledException",
    "ValidationViolations",
    "default_exception_handler",
]
