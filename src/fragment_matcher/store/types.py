"""Types for reading from a normalized store"""

from __future__ import annotations

from typing import Any, Dict, Mapping, NamedTuple, Optional, Union

from ..pyutils import Missing, MissingType

try:
    from typing import TypeAlias
except ImportError:  # Python < 3.10
    from typing_extensions import TypeAlias

__all__ = ["TYPENAME_FIELD", "IdValue", "ReadStoreContext", "StoreRecord"]


TYPENAME_FIELD = "__typename"

StoreRecord: TypeAlias = Mapping[str, Any]


class IdValue(NamedTuple):
    """Reference to a record in a normalized store"""

    id: str
    generated: bool = False

    @property
    def type(self) -> str:
        return "id"


class ReadStoreContext:
    """Context for reading records from a normalized store.

    Besides the store, it carries the flags of the current read. Fragment matchers
    only use the store to find the type name of a referenced record, and set
    ``has_missing_field`` when a record has no type name.
    """

    __slots__ = (
        "custom_resolvers",
        "has_missing_field",
        "return_partial_data",
        "store",
    )

    store: Mapping[str, StoreRecord]
    return_partial_data: bool
    has_missing_field: bool
    custom_resolvers: Dict[str, Any]

    def __init__(
        self,
        store: Mapping[str, StoreRecord],
        return_partial_data: bool = False,
        has_missing_field: bool = False,
        custom_resolvers: Optional[Dict[str, Any]] = None,
    ) -> None:
        self.store = store
        self.return_partial_data = return_partial_data
        self.has_missing_field = has_missing_field
        self.custom_resolvers = custom_resolvers or {}

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}(<{len(self.store)} records>,"
            f" return_partial_data={self.return_partial_data},"
            f" has_missing_field={self.has_missing_field})"
        )

    def get_record(self, id_value: Union[IdValue, str]) -> Optional[StoreRecord]:
        """Get the record referenced by the given id value, if it exists."""
        data_id = id_value.id if isinstance(id_value, IdValue) else id_value
        return self.store.get(data_id)

    def get_typename(
        self, id_value: Union[IdValue, str]
    ) -> Union[str, None, MissingType]:
        """Get the concrete type name of the referenced record.

        Returns None if the record has no type name and :data:`Missing` if the
        record does not exist at all.
        """
        record = self.get_record(id_value)
        if record is None:
            return Missing
        return record.get(TYPENAME_FIELD)
