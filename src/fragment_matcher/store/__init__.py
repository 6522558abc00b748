"""Store Access

The :mod:`fragment_matcher.store` package contains the references and the read
context through which a fragment matcher looks up records of a normalized store.
The store itself is owned by the caller.
"""

from .types import TYPENAME_FIELD, IdValue, ReadStoreContext, StoreRecord

__all__ = ["TYPENAME_FIELD", "IdValue", "ReadStoreContext", "StoreRecord"]
