from __future__ import annotations

from .fragment_matcher_error import FragmentMatcherError

__all__ = ["PrematureUseError"]


class PrematureUseError(FragmentMatcherError):
    """A fragment matcher was asked to match before it was ready.

    This is a violation of the usage contract, not a transient condition, so it is
    always raised synchronously to the caller.
    """
