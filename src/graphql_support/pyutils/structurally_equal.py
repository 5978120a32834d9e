"""Structural comparison of JSON-like values"""

from __future__ import annotations

from typing import Any, Mapping

from graphql.pyutils import is_collection

__all__ = ["structurally_equal"]


def structurally_equal(value: Any, other: Any) -> bool:
    """Check whether two JSON-like values have the same structure and content.

    Mappings are equal if they have the same keys with equal values, collections
    other than mappings and strings are equal if they have equal items in the same
    order. Unlike the ``==`` operator, booleans are never equal to numbers.
    """
    if isinstance(value, bool) or isinstance(other, bool):
        return (
            isinstance(value, bool) and isinstance(other, bool) and value is other
        )
    if isinstance(value, Mapping):
        if not isinstance(other, Mapping) or len(value) != len(other):
            return False
        return all(
            key in other and structurally_equal(item, other[key])
            for key, item in value.items()
        )
    if is_collection(value):
        if not is_collection(other):
            return False
        items, other_items = list(value), list(other)
        return len(items) == len(other_items) and all(
            structurally_equal(item, other_item)
            for item, other_item in zip(items, other_items)
        )
    if isinstance(other, Mapping) or is_collection(other):
        return False
    return value == other
