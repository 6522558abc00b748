"""Sentinel for records missing from a store"""

from __future__ import annotations

import warnings
from typing import Optional

__all__ = ["Missing", "MissingType"]


class MissingType:
    """Auxiliary class for creating the Missing singleton."""

    _instance: Optional[MissingType] = None

    def __new__(cls) -> MissingType:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        else:
            warnings.warn("Redefinition of 'Missing'", RuntimeWarning, stacklevel=2)
        return cls._instance

    def __reduce__(self) -> str:
        return "Missing"

    def __repr__(self) -> str:
        return "Missing"

    __str__ = __repr__

    def __bool__(self) -> bool:
        return False


# Unlike None, which stands for a record without a value for a field:
Missing = MissingType()

Missing.__doc__ = """Symbol for missing records

Store accessors return this singleton object when the referenced record does not
exist at all, so that it can be told apart from a record lacking a field.
"""
