"""Fragment Matching

The :mod:`fragment_matcher.matching` package is responsible for deciding whether
records of a normalized store match the type conditions of fragments.
"""

from .introspection_fragment_matcher import (
    IntrospectionFragmentMatcher,
    QueryExecutor,
    ReadinessState,
)

__all__ = ["IntrospectionFragmentMatcher", "QueryExecutor", "ReadinessState"]
