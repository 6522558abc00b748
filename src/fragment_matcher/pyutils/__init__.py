"""Python Utils

This package contains dependency-free Python utility functions used throughout the
codebase.

Each utility should belong in its own file and be the default export.

These functions are not part of the module interface and are subject to change.
"""

from .awaitable_or_value import AwaitableOrValue
from .frozen_error import FrozenError
from .inspect import inspect
from .is_awaitable import is_awaitable
from .missing import Missing, MissingType

__all__ = [
    "AwaitableOrValue",
    "FrozenError",
    "Missing",
    "MissingType",
    "inspect",
    "is_awaitable",
]
