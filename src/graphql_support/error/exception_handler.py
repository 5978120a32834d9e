"""Exception handling for resolvers"""

from __future__ import annotations

from typing import Any, Awaitable, Callable, Optional

from graphql import GraphQLError, GraphQLResolveInfo
from graphql.pyutils import is_awaitable

from .handled_exception import HandledException

__all__ = [
    "ExceptionHandler",
    "ExceptionHandlerMiddleware",
    "default_exception_handler",
]

ExceptionHandler = Callable[[str, Exception], Optional[HandledException]]


def default_exception_handler(message: str, error: Exception) -> HandledException:
    """Report every exception with its own message and nothing else."""
    return HandledException(message)


class ExceptionHandlerMiddleware:
    """Middleware that reports resolver exceptions through an exception handler.

    The handler is called with the message and the exception raised by a resolver
    or by a middleware nested inside this one. Its result becomes the reported
    error. If the handler returns None, the exception is raised unchanged and left
    to the engine. Errors that are already GraphQL errors are always passed through.
    """

    __slots__ = ("handler",)

    def __init__(self, handler: ExceptionHandler = default_exception_handler) -> None:
        self.handler = handler

    def resolve(
        self, next_: Callable, root: Any, info: GraphQLResolveInfo, **args: Any
    ) -> Any:
        try:
            result = next_(root, info, **args)
        except Exception as error:
            handled_error = self.handle_error(error)
            if handled_error is error:
                raise
            raise handled_error from error
        if is_awaitable(result):
            return self.await_result(result)
        return result

    async def await_result(self, result: Awaitable) -> Any:
        try:
            return await result
        except Exception as error:
            handled_error = self.handle_error(error)
            if handled_error is error:
                raise
            raise handled_error from error

    def handle_error(self, error: Exception) -> Exception:
        """Get the exception that shall be reported for the given one."""
        if isinstance(error, GraphQLError):
            return error
        handled = self.handler(str(error), error)
        if handled is None:
            return error
        return GraphQLError(
            handled.message, original_error=error, extensions=handled.extensions
        )
