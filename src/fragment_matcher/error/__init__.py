"""Fragment Matcher Errors

The :mod:`fragment_matcher.error` package contains the errors raised when a fragment
matcher is used before it is ready or when fetching the possible types fails.
"""

from .fragment_matcher_error import FragmentMatcherError
from .premature_use_error import PrematureUseError
from .fetch_error import FetchError

__all__ = ["FetchError", "FragmentMatcherError", "PrematureUseError"]
