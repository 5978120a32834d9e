"""Test Query Execution

The :mod:`graphql_support.execution` package parses, validates and executes test
queries with the engine and returns the formatted results.
"""

from .execute import execute_test_query, execute_test_query_async

__all__ = ["execute_test_query", "execute_test_query_async"]
