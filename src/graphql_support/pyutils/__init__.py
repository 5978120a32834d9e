"""Python Utils

This package contains small helper functions used by the checks to compare and
render execution results.

Each utility should belong in its own file and be the default export.
"""

from .structurally_equal import structurally_equal
from .pretty_render import pretty_render
from .format_positions import format_positions

__all__ = ["format_positions", "pretty_render", "structurally_equal"]
