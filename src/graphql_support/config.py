"""Execution configuration"""

from __future__ import annotations

from typing import Any, NamedTuple, Optional

from .error import ExceptionHandler, default_exception_handler

__all__ = ["ExecutionConfig", "default_config"]


class ExecutionConfig(NamedTuple):
    """Settings for executing a test query.

    :arg context_value:
      The context value passed to the resolvers as ``info.context``.
    :arg deferred_resolver:
      Middleware batching deferred lookups, given as a function or as an object
      with a ``resolve`` method. The exception handler is always installed around
      it, so errors raised by the deferred resolver are reported as well. Any other
      value is rejected with a ``TypeError`` when the query is executed.
    :arg exception_handler:
      Function turning the message and the exception raised by a resolver into the
      error that is reported. By default, the message of the exception is reported.
    :arg validate_query:
      Whether the query is validated with the specified rules before execution. If
      not set, no validation rules are applied.
    :arg no_location:
      Whether source locations are stripped from the parsed document. The reported
      errors will then have no "locations".
    :arg operation_name:
      The name of the operation to execute if the query contains several ones.
    :arg recover_violations:
      Whether validation violations are returned as an execution result with
      ``None`` as data instead of being raised as ``ValidationViolations``.
    :arg timeout:
      Seconds to wait for the result of an asynchronous execution, or ``None``
      to wait indefinitely.
    """

    context_value: Any = None
    deferred_resolver: Any = None
    exception_handler: ExceptionHandler = default_exception_handler
    validate_query: bool = True
    no_location: bool = False
    operation_name: Optional[str] = None
    recover_violations: bool = False
    timeout: Optional[float] = 10.0

    def replace(self, **changes: Any) -> ExecutionConfig:
        """Return a copy of the configuration with the given settings changed."""
        return self._replace(**changes) if changes else self


default_config = ExecutionConfig()
