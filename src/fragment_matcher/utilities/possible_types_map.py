"""Read-only map of possible types"""

from __future__ import annotations

from typing import AbstractSet, Dict, FrozenSet, Iterable, Mapping, Tuple, Union

from ..pyutils import FrozenError

__all__ = ["PossibleTypesMap"]


class PossibleTypesMap(Dict[str, FrozenSet[str]]):
    """Map from abstract type names to the names of their possible concrete types.

    The map can only be read, but not changed. All values are frozensets.
    """

    def __init__(
        self,
        possible_types: Union[
            Mapping[str, Iterable[str]], Iterable[Tuple[str, Iterable[str]]]
        ] = (),
    ) -> None:
        items = (
            possible_types.items()
            if isinstance(possible_types, Mapping)
            else possible_types
        )
        super().__init__(
            (abstract_type, frozenset(type_names)) for abstract_type, type_names in items
        )

    def is_possible_type(self, abstract_type: str, type_name: str) -> bool:
        """Check whether the given type name is a possible type of the abstract type.

        Abstract types that are not in the map have no possible types.
        """
        possible_types = self.get(abstract_type)
        return possible_types is not None and type_name in possible_types

    def get_possible_types(self, abstract_type: str) -> AbstractSet[str]:
        return self.get(abstract_type, frozenset())

    def __delitem__(self, key):
        raise FrozenError

    def __setitem__(self, key, value):
        raise FrozenError

    def __ior__(self, value):
        raise FrozenError

    def __hash__(self) -> int:  # type: ignore
        return hash(tuple(self.items()))

    def __copy__(self) -> PossibleTypesMap:
        return PossibleTypesMap(self)

    copy = __copy__

    def __deepcopy__(self, memo) -> PossibleTypesMap:
        # the values are already immutable
        return self.__copy__()

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({super().__repr__()})"

    def clear(self):
        raise FrozenError

    def pop(self, key, default=None):
        raise FrozenError

    def popitem(self):
        raise FrozenError

    def setdefault(self, key, default=None):
        raise FrozenError

    def update(self, *args, **kwargs):
        raise FrozenError
