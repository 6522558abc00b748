"""Inspect values for error messages"""

from __future__ import annotations

from inspect import isclass, iscoroutine, iscoroutinefunction, isfunction, ismethod
from typing import Any, Mapping

__all__ = ["inspect"]

max_recursive_depth = 2
max_str_size = 240
max_list_size = 10


def inspect(value: Any) -> str:
    """Inspect value and a return string representation for error messages.

    Used to print introspection payloads in error messages. We do not use repr() in
    order to not leak too much of the inner Python representation of unknown objects,
    and we do not use json.dumps() because not all objects can be serialized as JSON.
    Large payloads are abbreviated, since a full schema dump can be huge.
    """
    return inspect_recursive(value, [])


def inspect_recursive(value: Any, seen_values: list) -> str:
    if value is None or isinstance(value, (bool, int, float)):
        return repr(value)
    if isinstance(value, str):
        return trunc_str(repr(value))
    if isinstance(value, (list, tuple, set, frozenset, Mapping)):
        if any(seen is value for seen in seen_values):
            return "<cyclic>"
        if len(seen_values) >= max_recursive_depth:
            return f"<{type(value).__name__}>"
        seen_values = [*seen_values, value]
        if isinstance(value, Mapping):
            items = trunc_list(list(value.items()))
            return (
                "{"
                + ", ".join(
                    "..."
                    if item is ELLIPSIS
                    else inspect_recursive(item[0], seen_values)
                    + ": "
                    + inspect_recursive(item[1], seen_values)
                    for item in items
                )
                + "}"
            )
        if isinstance(value, (set, frozenset)):
            if not value:
                return f"<empty {type(value).__name__}>"
            values = trunc_list(sorted(value, key=str))
            return "{" + inspect_list(values, seen_values) + "}"
        values = trunc_list(list(value))
        if isinstance(value, tuple):
            if len(value) == 1:
                return f"({inspect_recursive(value[0], seen_values)},)"
            return f"({inspect_list(values, seen_values)})"
        return f"[{inspect_list(values, seen_values)}]"
    if isinstance(value, Exception):
        type_ = "exception"
        value = type(value)
    elif isclass(value):
        type_ = "exception class" if issubclass(value, Exception) else "class"
    elif ismethod(value):
        type_ = "method"
    elif iscoroutinefunction(value):
        type_ = "coroutine function"
    elif isfunction(value):
        type_ = "function"
    elif iscoroutine(value):
        type_ = "coroutine"
    else:
        name = type(value).__name__
        if not name or "<" in name or ">" in name:
            return "<object>"
        return f"<{name} instance>"
    name = getattr(value, "__name__", None)
    if not name or "<" in name or ">" in name:
        return f"<{type_}>"
    return f"<{type_} {name}>"


ELLIPSIS = object()


def inspect_list(values: list, seen_values: list) -> str:
    return ", ".join(
        "..." if v is ELLIPSIS else inspect_recursive(v, seen_values) for v in values
    )


def trunc_str(s: str) -> str:
    """Truncate strings to maximum length."""
    if len(s) > max_str_size:
        i = max(0, (max_str_size - 3) // 2)
        j = max(0, max_str_size - 3 - i)
        s = s[:i] + "..." + s[-j:]
    return s


def trunc_list(s: list) -> list:
    """Truncate lists to maximum length."""
    if len(s) > max_list_size:
        i = max_list_size // 2
        j = i - 1
        s = [*s[:i], ELLIPSIS, *s[-j:]]
    return s
