"""Validation violations"""

from __future__ import annotations

from typing import Any, Dict, List, Sequence

from graphql import GraphQLError

__all__ = ["ValidationViolations"]


class ValidationViolations(Exception):
    """Raised when a query fails validation before it could be executed.

    Each violation is a ``GraphQLError`` carrying a message and, unless the document
    has been parsed without locations, the locations of the offending nodes.
    """

    violations: List[GraphQLError]

    def __init__(self, violations: Sequence[GraphQLError]) -> None:
        self.violations = list(violations)
        super().__init__(self.violations)

    def __str__(self) -> str:
        return "\n".join(violation.message for violation in self.violations)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.violations!r})"

    @property
    def formatted(self) -> List[Dict[str, Any]]:
        """Get the violations formatted like the errors of an execution result."""
        return [dict(violation.formatted) for violation in self.violations]
