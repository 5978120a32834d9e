from typing import Iterable

from ..pos import Pos

__all__ = ["format_positions"]


def format_positions(positions: Iterable[Pos]) -> str:
    """Given [ Pos(1, 2), Pos(3, 4) ] give ' (line 1, column 2), (line 3, column 4)'

    The result is empty if no positions are given.
    """
    described = ", ".join(str(pos) for pos in positions)
    return f" {described}" if described else ""
