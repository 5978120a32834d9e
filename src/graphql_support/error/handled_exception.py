from __future__ import annotations

from typing import Any, Dict, NamedTuple, Optional

__all__ = ["HandledException"]


class HandledException(NamedTuple):
    """An exception raised by a resolver, as it should be reported."""

    message: str
    extensions: Optional[Dict[str, Any]] = None
