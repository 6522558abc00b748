"""Possible types introspection query"""

from __future__ import annotations

from textwrap import dedent

__all__ = ["POSSIBLE_TYPES_QUERY"]


POSSIBLE_TYPES_QUERY = dedent(
    """
    {
      __schema {
        types {
          kind
          name
          possibleTypes {
            name
          }
        }
      }
    }
    """
).strip()
"""Query for the kinds, names and possible types of all types in a schema.

This is much smaller than a full introspection query since fragment matching only
needs to know which concrete types implement which abstract types.
"""
