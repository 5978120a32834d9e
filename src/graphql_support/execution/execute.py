from __future__ import annotations

from asyncio import get_running_loop, run, wait_for
from inspect import isfunction
from logging import getLogger
from typing import Any, Awaitable, Dict, Optional, cast

from graphql import (
    ExecutionResult,
    GraphQLSchema,
    execute,
    parse,
    specified_rules,
    validate,
)
from graphql.pyutils import AwaitableOrValue, inspect, is_awaitable

from ..config import ExecutionConfig, default_config
from ..error import ExceptionHandlerMiddleware, ValidationViolations

__all__ = ["execute_test_query", "execute_test_query_async"]

logger = getLogger(__name__)


def execute_test_query(
    schema: GraphQLSchema,
    data: Any,
    query: str,
    args: Optional[Dict[str, Any]] = None,
    config: Optional[ExecutionConfig] = None,
    **overrides: Any,
) -> Dict[str, Any]:
    """Execute a test query and wait for its result.

    Parses the query, validates it against the schema and executes it with the
    given data as root value and the given args as variable values. If any of the
    resolvers is asynchronous, the execution is run in a new event loop and this
    function blocks until it has completed or the configured timeout has expired.

    Returns the formatted execution result, i.e. a dictionary with the "data" and,
    only if there were any, the "errors" of the execution.

    Accepts the following arguments:

    :arg schema:
      The GraphQL schema the query is validated and executed against.
    :arg data:
      The root value passed to the resolvers of the top level fields.
    :arg query:
      The query string. If it cannot be parsed, the syntax error is raised.
    :arg args:
      A mapping of variable names to the values used for the variables.
    :arg config:
      The execution settings, see :class:`~graphql_support.ExecutionConfig`.
      Keyword arguments are taken as changes to these settings.
    """
    config = (config or default_config).replace(**overrides)
    result = execute_test_query_impl(schema, data, query, args, config)

    if is_awaitable(result):
        ensure_no_running_loop(result)
        logger.debug("Waiting for asynchronous execution of test query.")
        result = run(await_result(result, config.timeout))

    return cast(ExecutionResult, result).formatted


async def execute_test_query_async(
    schema: GraphQLSchema,
    data: Any,
    query: str,
    args: Optional[Dict[str, Any]] = None,
    config: Optional[ExecutionConfig] = None,
    **overrides: Any,
) -> Dict[str, Any]:
    """Execute a test query asynchronously.

    Same as :func:`execute_test_query`, but awaits the result in the running event
    loop instead of blocking.
    """
    config = (config or default_config).replace(**overrides)
    result = execute_test_query_impl(schema, data, query, args, config)

    if is_awaitable(result):
        result = await await_result(result, config.timeout)

    return cast(ExecutionResult, result).formatted


def ensure_no_running_loop(result: Awaitable[ExecutionResult]) -> None:
    """Make sure that there is no event loop the result could be run in instead."""
    try:
        get_running_loop()
    except RuntimeError:
        return
    close = getattr(result, "close", None)
    if close:
        close()
    raise RuntimeError(
        "Cannot wait for an asynchronous test query inside a running event loop."
        " Use execute_test_query_async instead."
    )


async def await_result(
    result: Awaitable[ExecutionResult], timeout: Optional[float]
) -> ExecutionResult:
    """Await the execution result, giving up after the timeout."""
    return await wait_for(result, timeout)


def execute_test_query_impl(
    schema: GraphQLSchema,
    data: Any,
    query: str,
    args: Optional[Dict[str, Any]],
    config: ExecutionConfig,
) -> AwaitableOrValue[ExecutionResult]:
    """Execute a test query, return asynchronously only if necessary."""

    # Parse
    document = parse(query, no_location=config.no_location)

    # Validate
    rules = specified_rules if config.validate_query else ()
    violations = validate(schema, document, rules)
    if violations:
        if not config.recover_violations:
            raise ValidationViolations(violations)
        logger.debug("Recovering %d validation violations.", len(violations))
        return ExecutionResult(data=None, errors=violations)

    # Execute
    middleware: list = []
    deferred_resolver = config.deferred_resolver
    if deferred_resolver is not None:
        if not (
            isfunction(deferred_resolver)
            or callable(getattr(deferred_resolver, "resolve", None))
        ):
            raise TypeError(
                "Deferred resolver must be a function"
                f" or an object with a resolve method: {inspect(deferred_resolver)}."
            )
        middleware.append(deferred_resolver)
    middleware.append(ExceptionHandlerMiddleware(config.exception_handler))

    logger.debug("Executing test query: %s", query)
    return execute(
        schema,
        document,
        root_value=data,
        context_value=config.context_value,
        variable_values=args,
        operation_name=config.operation_name,
        middleware=middleware,
    )

