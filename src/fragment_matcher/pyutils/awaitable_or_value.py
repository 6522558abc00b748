"""Results of query executors which may or may not need to be awaited"""

from __future__ import annotations

from typing import Awaitable, TypeVar, Union

try:
    from typing import TypeAlias
except ImportError:  # Python < 3.10
    from typing_extensions import TypeAlias


__all__ = ["AwaitableOrValue"]


T = TypeVar("T")

# Synchronous executors, e.g. ones reading from a cache, return plain values.
AwaitableOrValue: TypeAlias = Union[Awaitable[T], T]
