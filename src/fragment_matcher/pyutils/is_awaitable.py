"""Check whether objects are awaitable"""

from __future__ import annotations

from types import CoroutineType
from typing import Any, Awaitable, Mapping

try:
    from typing import TypeGuard
except ImportError:  # Python < 3.10
    from typing_extensions import TypeGuard


__all__ = ["is_awaitable"]

_plain_results = {dict, list, str, type(None)}


def is_awaitable(value: Any) -> TypeGuard[Awaitable]:
    """Return True if object can be passed to an ``await`` expression.

    Query executors mostly return plain dicts or coroutines, so these are checked
    first. For everything else we check the existence of an ``__await__`` attribute
    instead of testing against abc.Awaitable, which is much faster.
    """
    if type(value) in _plain_results or isinstance(value, Mapping):
        return False
    return isinstance(value, CoroutineType) or hasattr(value, "__await__")
