"""Result Checks

The :mod:`graphql_support.checks` package executes test queries and asserts that
their results, errors or validation violations are the expected ones. All checks
raise an ``AssertionError`` with a rendering of the actual result if they fail.
"""

from .check import check, check_errors
from .contains import (
    ExpectedError,
    check_contains_errors,
    check_contains_violations,
    error_matches,
    positions_match,
    violation_matches,
)
from .graphql_support import GraphQLSupport

__all__ = [
    "ExpectedError",
    "GraphQLSupport",
    "check",
    "check_contains_errors",
    "check_contains_violations",
    "check_errors",
    "error_matches",
    "positions_match",
    "violation_matches",
]
