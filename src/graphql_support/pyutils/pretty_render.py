"""Rendering of execution results for failure messages"""

from json import dumps
from pprint import pformat
from typing import Any

from graphql.pyutils import inspect

__all__ = ["pretty_render"]


def pretty_render(value: Any) -> str:
    """Render a result value as indented JSON.

    Values that have no JSON representation are shown the way ``inspect`` shows
    them. If the value cannot be rendered as JSON at all, e.g. because it has
    mapping keys that are not strings, it is pretty printed as a Python value.
    """
    try:
        return dumps(value, indent=2, ensure_ascii=False, default=inspect)
    except (TypeError, ValueError):
        return pformat(value)
