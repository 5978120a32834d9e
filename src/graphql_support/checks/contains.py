"""Checks for errors and violations containing expected messages"""

from __future__ import annotations

from typing import Any, Callable, Dict, Mapping, Optional, Sequence, Tuple

from graphql import GraphQLError, GraphQLSchema

from ..config import ExecutionConfig
from ..error import ValidationViolations
from ..execution import execute_test_query
from ..pos import Pos
from ..pyutils import format_positions, pretty_render
from .check import check_data, get_errors

__all__ = [
    "ExpectedError",
    "check_contains_errors",
    "check_contains_violations",
    "error_matches",
    "positions_match",
    "violation_matches",
]

ExpectedError = Tuple[str, Sequence[Pos]]


def check_contains_errors(
    schema: GraphQLSchema,
    data: Any,
    query: str,
    expected_data: Optional[Mapping[str, Any]],
    expected_error_strings: Sequence[ExpectedError],
    args: Optional[Dict[str, Any]] = None,
    config: Optional[ExecutionConfig] = None,
    **overrides: Any,
) -> Dict[str, Any]:
    """Check the data and the error messages resulting from executing the query.

    The data must be exactly the expected data and there must be as many errors as
    expected. For each pair of a message part and a list of positions, some error
    must contain the message part in its message and must be reported at exactly
    these positions, in the same order.

    Returns the result of the execution.
    """
    result = execute_test_query(schema, data, query, args, config, **overrides)
    check_data(result, expected_data)
    errors = get_errors(result)

    if len(errors) != len(expected_error_strings):
        raise AssertionError(
            f"Invalid size. Expected {len(expected_error_strings)}."
            f" Actual ({len(errors)}):\n{pretty_render(errors)}"
        )

    for expected, positions in expected_error_strings:
        if not any(error_matches(error, expected, positions) for error in errors):
            raise AssertionError(
                f"Expected error not found: {expected}{format_positions(positions)}."
                f" Actual:\n{pretty_render(errors)}"
            )

    return result


def check_contains_violations(
    execute: Callable[[], Any], expected: Sequence[ExpectedError]
) -> ValidationViolations:
    """Check that the given function fails with the expected validation violations.

    There must be as many violations as expected. For each pair of a message part
    and a list of positions, some violation must contain the message part in its
    message and must be located at exactly these positions, in the same order.

    Returns the raised validation violations.
    """
    try:
        execute()
    except ValidationViolations as error:
        violations = error
    else:
        raise AssertionError("Expected validation violations, but none were raised.")

    pretty_violations = "".join(
        f"\n{violation.message}" for violation in violations.violations
    )

    if len(violations.violations) != len(expected):
        raise AssertionError(
            f"Invalid size. Expected {len(expected)}."
            f" Actual ({len(violations.violations)}):{pretty_violations}"
        )

    for message, positions in expected:
        if not any(
            violation_matches(violation, message, positions)
            for violation in violations.violations
        ):
            raise AssertionError(
                f"Expected error not found: {message}{format_positions(positions)}."
                f" Actual:{pretty_violations}"
            )

    return violations


def error_matches(
    error: Mapping[str, Any], expected: str, positions: Sequence[Pos]
) -> bool:
    """Check whether a formatted error has the expected message and positions."""
    return expected in error["message"] and positions_match(
        error.get("locations"), positions
    )


def violation_matches(
    violation: GraphQLError, expected: str, positions: Sequence[Pos]
) -> bool:
    """Check whether a violation has the expected message and positions."""
    return expected in violation.message and positions_match(
        violation.locations, positions
    )


def positions_match(
    locations: Optional[Sequence[Any]], positions: Sequence[Pos]
) -> bool:
    """Check whether the reported locations are exactly the expected positions.

    Missing and empty locations both match when no positions are expected.
    """
    if not locations:
        return not positions
    return [Pos.from_location(location) for location in locations] == list(positions)
