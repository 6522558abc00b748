from __future__ import annotations

from typing import Any, Mapping, cast

from ..error import FetchError
from ..pyutils import inspect
from .introspection_types import IntrospectionQuery

__all__ = ["get_introspection_data"]


def get_introspection_data(result: Any) -> IntrospectionQuery:
    """Get the introspection data from the result of a query executor.

    The result can be an execution result with ``data`` and ``errors`` attributes
    (like the ``ExecutionResult`` of GraphQL-core), a response dictionary with
    "data" and "errors" keys, or the bare data itself. A result that reports errors
    or does not contain any data raises a :exc:`FetchError`.
    """
    if hasattr(result, "data") and hasattr(result, "errors"):
        data, errors = result.data, result.errors
    elif isinstance(result, Mapping) and "__schema" not in result and (
        "data" in result or "errors" in result
    ):
        data, errors = result.get("data"), result.get("errors")
    else:
        data, errors = result, None

    if errors:
        messages = "; ".join(
            str(error.get("message")) if isinstance(error, Mapping) else str(error)
            for error in errors
        )
        raise FetchError(
            f"Introspection query returned errors: {messages}", errors=errors
        )
    if data is None:
        raise FetchError(f"Introspection query returned no data: {inspect(result)}.")
    return cast(IntrospectionQuery, data)
