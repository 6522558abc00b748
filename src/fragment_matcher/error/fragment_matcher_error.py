"""Base class of all fragment matcher errors"""

from __future__ import annotations

__all__ = ["FragmentMatcherError"]


class FragmentMatcherError(Exception):
    """Fragment Matcher Error

    Base class for the errors raised by a fragment matcher. Data-level conditions such
    as an unknown abstract type or a missing store record are not errors and never
    raise one of these.
    """

    message: str
    """A message describing the Error for debugging purposes"""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.message!r})"

    def __eq__(self, other: object) -> bool:
        return (
            isinstance(other, FragmentMatcherError)
            and self.__class__ is other.__class__
            and self.message == other.message
        )

    def __ne__(self, other: object) -> bool:
        return not self == other

    __hash__ = Exception.__hash__
