from __future__ import annotations

from typing import Any, Callable, Dict, Mapping, Optional, Sequence

from graphql import GraphQLSchema

from ..config import ExecutionConfig
from ..error import ValidationViolations
from ..execution import execute_test_query
from .check import check, check_errors
from .contains import ExpectedError, check_contains_errors, check_contains_violations

__all__ = ["GraphQLSupport"]


class GraphQLSupport:
    """Checks bound to a schema.

    Tests for a single schema can create one instance, e.g. in a fixture, and call
    the checks without passing the schema every time. A default configuration can
    be given as well; keyword arguments of the checks override its settings.
    """

    __slots__ = "schema", "config"

    schema: GraphQLSchema
    config: Optional[ExecutionConfig]

    def __init__(
        self, schema: GraphQLSchema, config: Optional[ExecutionConfig] = None
    ) -> None:
        self.schema = schema
        self.config = config

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} {self.schema!r}>"

    def execute_test_query(
        self,
        data: Any,
        query: str,
        args: Optional[Dict[str, Any]] = None,
        **overrides: Any,
    ) -> Dict[str, Any]:
        return execute_test_query(
            self.schema, data, query, args, self.config, **overrides
        )

    def check(
        self,
        data: Any,
        query: str,
        expected: Any,
        args: Optional[Dict[str, Any]] = None,
        **overrides: Any,
    ) -> Dict[str, Any]:
        return check(self.schema, data, query, expected, args, self.config, **overrides)

    def check_errors(
        self,
        data: Any,
        query: str,
        expected_data: Optional[Mapping[str, Any]],
        expected_errors: Sequence[Mapping[str, Any]],
        args: Optional[Dict[str, Any]] = None,
        **overrides: Any,
    ) -> Dict[str, Any]:
        return check_errors(
            self.schema,
            data,
            query,
            expected_data,
            expected_errors,
            args,
            self.config,
            **overrides,
        )

    def check_contains_errors(
        self,
        data: Any,
        query: str,
        expected_data: Optional[Mapping[str, Any]],
        expected_error_strings: Sequence[ExpectedError],
        args: Optional[Dict[str, Any]] = None,
        **overrides: Any,
    ) -> Dict[str, Any]:
        return check_contains_errors(
            self.schema,
            data,
            query,
            expected_data,
            expected_error_strings,
            args,
            self.config,
            **overrides,
        )

    @staticmethod
    def check_contains_violations(
        execute: Callable[[], Any], expected: Sequence[ExpectedError]
    ) -> ValidationViolations:
        return check_contains_violations(execute, expected)
