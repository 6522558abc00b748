"""Fragment Matcher

Fragment Matcher decides whether records of a normalized GraphQL client store match
the type conditions of fragments. Matching a fragment on a union or interface type
needs the possible types of that type, which are taken from an introspection result.
This result can be passed in directly, or it is fetched once through a query executor
provided by the client.

The fragment matcher package is divided into several sub-packages:

  - Matching: the fragment matcher and its readiness state
  - Utilities: the introspection query and building the map of possible types
  - Store: references to records and the context for reading them
  - Error: the errors raised by fragment matchers
"""

from .version import version, version_info

# The fragment matcher
from .matching import IntrospectionFragmentMatcher, QueryExecutor, ReadinessState

# Utilities for the possible types
from .utilities import (
    POSSIBLE_TYPES_QUERY,
    IntrospectionQuery,
    PossibleTypesMap,
    TypeKind,
    build_possible_types_map,
    get_introspection_data,
)

# Access to the normalized store
from .store import TYPENAME_FIELD, IdValue, ReadStoreContext

# Errors
from .error import FetchError, FragmentMatcherError, PrematureUseError

__version__ = version
__version_info__ = version_info

__all__ = [
    "POSSIBLE_TYPES_QUERY",
    "TYPENAME_FIELD",
    "FetchError",
    "FragmentMatcherError",
    "IdValue",
    "IntrospectionFragmentMatcher",
    "IntrospectionQuery",
    "PossibleTypesMap",
    "PrematureUseError",
    "QueryExecutor",
    "ReadStoreContext",
    "ReadinessState",
    "TypeKind",
    "__version__",
    "__version_info__",
    "build_possible_types_map",
    "get_introspection_data",
    "version",
    "version_info",
]
