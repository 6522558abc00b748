"""Introspection result types"""

from __future__ import annotations

from enum import Enum
from typing import Any, List, Optional, TypedDict

__all__ = [
    "ABSTRACT_TYPE_KINDS",
    "IntrospectionPossibleType",
    "IntrospectionQuery",
    "IntrospectionSchemaTypes",
    "IntrospectionTypeDescriptor",
    "TypeKind",
    "is_abstract_kind",
]


class TypeKind(Enum):
    """Values of the ``__TypeKind`` introspection enum.

    Introspection results carry the names of these members, e.g. ``"UNION"``.
    """

    SCALAR = "scalar"
    OBJECT = "object"
    INTERFACE = "interface"
    UNION = "union"
    ENUM = "enum"
    INPUT_OBJECT = "input object"
    LIST = "list"
    NON_NULL = "non-null"


ABSTRACT_TYPE_KINDS = frozenset((TypeKind.INTERFACE.name, TypeKind.UNION.name))


def is_abstract_kind(kind: Any) -> bool:
    """Check whether an introspected kind denotes an abstract type.

    Unknown kinds are not abstract.
    """
    if isinstance(kind, TypeKind):
        kind = kind.name
    return kind in ABSTRACT_TYPE_KINDS


class IntrospectionPossibleType(TypedDict):
    name: str


class _IntrospectionTypeDescriptor(TypedDict):
    kind: str
    name: str


class IntrospectionTypeDescriptor(_IntrospectionTypeDescriptor, total=False):
    possibleTypes: Optional[List[IntrospectionPossibleType]]  # noqa: N815


class IntrospectionSchemaTypes(TypedDict):
    types: List[IntrospectionTypeDescriptor]


# The root key is not a valid identifier for the class syntax
IntrospectionQuery = TypedDict(  # noqa: UP013
    "IntrospectionQuery",
    {"__schema": IntrospectionSchemaTypes},
)
