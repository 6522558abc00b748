from pytest import raises

from fragment_matcher.error import FetchError, FragmentMatcherError, PrematureUseError


def describe_fragment_matcher_error():
    def is_a_class_and_is_a_subclass_of_exception():
        assert issubclass(FragmentMatcherError, Exception)
        assert isinstance(FragmentMatcherError("str"), FragmentMatcherError)

    def has_a_message():
        error = FragmentMatcherError("msg")
        assert error.message == "msg"
        assert str(error) == "msg"
        assert repr(error) == "FragmentMatcherError('msg')"

    def compares_by_class_and_message():
        assert FragmentMatcherError("msg") == FragmentMatcherError("msg")
        assert FragmentMatcherError("msg") != FragmentMatcherError("other")
        assert FetchError("msg") != PrematureUseError("msg")
        assert FragmentMatcherError("msg") != "msg"

    def can_be_hashed():
        error = FragmentMatcherError("msg")
        assert error in {error}


def describe_premature_use_error():
    def is_a_fragment_matcher_error():
        with raises(FragmentMatcherError) as exc_info:
            raise PrematureUseError("called before init")
        assert isinstance(exc_info.value, PrematureUseError)
        assert repr(exc_info.value) == "PrematureUseError('called before init')"


def describe_fetch_error():
    def is_a_fragment_matcher_error():
        assert issubclass(FetchError, FragmentMatcherError)

    def has_no_original_error_or_errors_by_default():
        error = FetchError("msg")
        assert error.original_error is None
        assert error.errors is None
        assert error.__cause__ is None

    def keeps_the_original_error_as_cause():
        original_error = ConnectionError("Connection refused")
        error = FetchError("Fetch failed", original_error)
        assert error.original_error is original_error
        assert error.__cause__ is original_error

    def keeps_graphql_errors_as_list():
        errors = ({"message": "oops"},)
        error = FetchError("Fetch failed", errors=errors)
        assert error.errors == [{"message": "oops"}]
        assert FetchError("Fetch failed", errors=[]).errors is None
