"""Source positions"""

from __future__ import annotations

from typing import Any, Mapping, NamedTuple

try:
    from typing import TypedDict
except ImportError:  # Python < 3.8
    from typing_extensions import TypedDict

__all__ = ["FormattedPos", "Pos"]


class FormattedPos(TypedDict):
    """Formatted source position, as found in the "locations" of an error"""

    line: int
    column: int


class Pos(NamedTuple):
    """A one-based (line, column) location in a query document.

    Expected positions are compared with the locations the engine reports, either as
    formatted mappings in an execution result or as ``SourceLocation`` objects on a
    ``GraphQLError``.
    """

    line: int
    column: int

    @classmethod
    def from_location(cls, location: Any) -> Pos:
        """Get the position of a formatted location or a SourceLocation."""
        if isinstance(location, Mapping):
            return cls(location["line"], location["column"])
        return cls(location.line, location.column)

    @property
    def formatted(self) -> FormattedPos:
        """Get the position formatted the way the engine formats locations."""
        return {"line": self.line, "column": self.column}

    def __str__(self) -> str:
        return f"(line {self.line}, column {self.column})"
