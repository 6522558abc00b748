"""Utilities

The :mod:`fragment_matcher.utilities` package contains the introspection query used
to discover possible types and the helpers that turn its result into a
:class:`PossibleTypesMap`.
"""

# The query document used to fetch the possible types of all abstract types.
from .possible_types_query import POSSIBLE_TYPES_QUERY

# Shapes of the introspection payload accepted for seeding and fetching.
from .introspection_types import (
    ABSTRACT_TYPE_KINDS,
    IntrospectionPossibleType,
    IntrospectionQuery,
    IntrospectionSchemaTypes,
    IntrospectionTypeDescriptor,
    TypeKind,
    is_abstract_kind,
)

# Read-only mapping from abstract type names to concrete type names.
from .possible_types_map import PossibleTypesMap

# Build a PossibleTypesMap from an introspection result.
from .build_possible_types_map import build_possible_types_map

# Extract the introspection data from a query executor result.
from .get_introspection_data import get_introspection_data

__all__ = [
    "ABSTRACT_TYPE_KINDS",
    "POSSIBLE_TYPES_QUERY",
    "IntrospectionPossibleType",
    "IntrospectionQuery",
    "IntrospectionSchemaTypes",
    "IntrospectionTypeDescriptor",
    "PossibleTypesMap",
    "TypeKind",
    "build_possible_types_map",
    "get_introspection_data",
    "is_abstract_kind",
]
