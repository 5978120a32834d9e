from __future__ import annotations

from typing import Any, Dict, List, Mapping, Optional, Sequence

from graphql import GraphQLSchema

from ..config import ExecutionConfig
from ..execution import execute_test_query
from ..pyutils import pretty_render, structurally_equal

__all__ = ["check", "check_data", "check_errors", "get_errors"]


def check(
    schema: GraphQLSchema,
    data: Any,
    query: str,
    expected: Any,
    args: Optional[Dict[str, Any]] = None,
    config: Optional[ExecutionConfig] = None,
    **overrides: Any,
) -> Dict[str, Any]:
    """Check that executing the query gives exactly the expected result.

    Returns the result of the execution.
    """
    result = execute_test_query(schema, data, query, args, config, **overrides)
    if not structurally_equal(result, expected):
        raise AssertionError(f"Unexpected result:\n{pretty_render(result)}")
    return result


def check_errors(
    schema: GraphQLSchema,
    data: Any,
    query: str,
    expected_data: Optional[Mapping[str, Any]],
    expected_errors: Sequence[Mapping[str, Any]],
    args: Optional[Dict[str, Any]] = None,
    config: Optional[ExecutionConfig] = None,
    **overrides: Any,
) -> Dict[str, Any]:
    """Check the data and the errors resulting from executing the query.

    The data must be exactly the expected data. The errors may be reported in any
    order, but each expected error must be matched by exactly one reported error.

    Returns the result of the execution.
    """
    result = execute_test_query(schema, data, query, args, config, **overrides)
    check_data(result, expected_data)
    errors = get_errors(result)

    if len(errors) != len(expected_errors):
        raise AssertionError(
            f"Expected {len(expected_errors)} errors, got {len(errors)}:\n"
            f"{pretty_render(errors)}"
        )

    unmatched = list(errors)
    for expected_error in expected_errors:
        for index, error in enumerate(unmatched):
            if structurally_equal(error, expected_error):
                del unmatched[index]
                break
        else:
            raise AssertionError(
                f"Expected error not found:\n{pretty_render(expected_error)}\n"
                f"Actual:\n{pretty_render(errors)}"
            )

    return result


def check_data(result: Mapping[str, Any], expected_data: Any) -> None:
    """Check that the result has exactly the expected data."""
    if not structurally_equal(result.get("data"), expected_data):
        raise AssertionError(f"Unexpected data in result:\n{pretty_render(result)}")


def get_errors(result: Mapping[str, Any]) -> List[Dict[str, Any]]:
    """Get the errors of a result, which can also be missing."""
    return list(result.get("errors") or ())

