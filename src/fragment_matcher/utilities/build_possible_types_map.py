from __future__ import annotations

from typing import Any, Dict, FrozenSet, Mapping

from ..pyutils import inspect
from .introspection_types import IntrospectionQuery, is_abstract_kind
from .possible_types_map import PossibleTypesMap

__all__ = ["build_possible_types_map"]


def build_possible_types_map(introspection: IntrospectionQuery) -> PossibleTypesMap:
    """Build a map of possible types from an introspection result.

    Given the data of a response to the
    :data:`~fragment_matcher.utilities.POSSIBLE_TYPES_QUERY` (or of a full
    introspection query), creates a read-only map from the name of every union and
    interface type to the set of names of the object types implementing it.

    Types of other kinds and abstract types without possible types are skipped. The
    schema itself is not validated, only the shape of the result is checked. Don't
    forget to check the "errors" field of a server response before calling this
    function.
    """
    schema_introspection = (
        introspection.get("__schema") if isinstance(introspection, Mapping) else None
    )
    if not isinstance(schema_introspection, Mapping):
        raise TypeError(
            "Invalid or incomplete introspection result. Ensure that you"
            " are passing the 'data' attribute of an introspection response"
            f" and no 'errors' were returned alongside: {inspect(introspection)}."
        )

    types_introspection = schema_introspection.get("types")
    if not isinstance(types_introspection, list):
        raise TypeError(
            "Invalid or incomplete introspection result."
            f" Missing list of types: {inspect(schema_introspection)}."
        )

    possible_types: Dict[str, FrozenSet[str]] = {}
    for type_introspection in types_introspection:
        if not isinstance(type_introspection, Mapping):
            raise TypeError(
                "Invalid or incomplete introspection result."
                f" Unexpected type descriptor: {inspect(type_introspection)}."
            )
        if not is_abstract_kind(type_introspection.get("kind")):
            continue
        possible_types_introspection = type_introspection.get("possibleTypes")
        if not possible_types_introspection:
            continue
        type_name = get_name(type_introspection, "abstract type")
        possible_types[type_name] = frozenset(
            get_name(possible_type, f"possible type of {type_name}")
            for possible_type in possible_types_introspection
        )

    return PossibleTypesMap(possible_types)


def get_name(type_ref: Any, what: str) -> str:
    name = type_ref.get("name") if isinstance(type_ref, Mapping) else None
    if not isinstance(name, str) or not name:
        raise TypeError(
            "Invalid or incomplete introspection result."
            f" Missing name of {what}: {inspect(type_ref)}."
        )
    return name
