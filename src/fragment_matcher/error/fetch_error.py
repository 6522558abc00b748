"""Error for failed introspection fetches"""

from __future__ import annotations

from typing import Any, Collection

from .fragment_matcher_error import FragmentMatcherError

__all__ = ["FetchError"]


class FetchError(FragmentMatcherError):
    """Fetching or processing the introspection result failed.

    The same instance is delivered to every caller awaiting the shared readiness
    future. The matcher is left uninitialized, so a later call can retry.
    """

    original_error: Exception | None
    """The error raised by the query executor or while processing its result"""

    errors: list[Any] | None
    """GraphQL errors returned alongside the introspection response, if any"""

    def __init__(
        self,
        message: str,
        original_error: Exception | None = None,
        errors: Collection[Any] | None = None,
    ) -> None:
        super().__init__(message)
        self.original_error = original_error
        self.errors = list(errors) if errors else None
        if original_error is not None:
            self.__cause__ = original_error
