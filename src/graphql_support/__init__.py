"""GraphQL Support

Helpers for testing GraphQL schemas with GraphQL-core.

The helpers execute test queries against a schema and some root data, and check
the results against the expected data, errors and validation violations:

  - :func:`execute_test_query` parses, validates and executes a query and returns
    the formatted result, waiting for asynchronous resolvers.
  - :func:`check` compares the whole result with the expected one.
  - :func:`check_errors` compares the data and the exact errors.
  - :func:`check_contains_errors` compares the data and looks for errors by parts
    of their messages and their positions.
  - :func:`check_contains_violations` looks for validation violations raised by
    the given function.

Expected positions are given as :class:`Pos` tuples of line and column.
"""

# The version of the library.
from .version import version, version_info

__version__ = version
__version_info__ = version_info

from .pos import FormattedPos, Pos

from .error import (
    ExceptionHandler,
    ExceptionHandlerMiddleware,
    HandledException,
    ValidationViolations,
    default_exception_handler,
)

from .config import ExecutionConfig, default_config

from .execution import execute_test_query, execute_test_query_async

from .checks import (
    ExpectedError,
    GraphQLSupport,
    check,
    check_contains_errors,
    check_contains_violations,
    check_errors,
)

__all__ = [
    "version",
    "version_info",
    "FormattedPos",
    "Pos",
    "ExceptionHandler",
    "ExceptionHandlerMiddleware",
    "HandledException",
    "ValidationViolations",
    "default_exception_handler",
    "ExecutionConfig",
    "default_config",
    "execute_test_query",
    "execute_test_query_async",
    "ExpectedError",
    "GraphQLSupport",
    "check",
    "check_contains_errors",
    "check_contains_violations",
    "check_errors",
]
