from typing import NamedTuple, Optional

from pytest import raises

from fragment_matcher.error import FetchError
from fragment_matcher.utilities import get_introspection_data

data = {"__schema": {"types": []}}


class ExecutionResult(NamedTuple):
    data: Optional[dict]
    errors: Optional[list] = None


class GraphQLError(Exception):
    pass


def describe_get_introspection_data():
    def returns_bare_data():
        assert get_introspection_data(data) is data

    def returns_data_of_execution_results():
        assert get_introspection_data(ExecutionResult(data)) is data
        assert get_introspection_data(ExecutionResult(data, [])) is data

    def returns_data_of_response_dicts():
        assert get_introspection_data({"data": data}) is data
        assert get_introspection_data({"data": data, "errors": None}) is data

    def raises_on_errors_of_execution_results():
        errors = [GraphQLError("Not allowed"), GraphQLError("Try again")]
        with raises(FetchError) as exc_info:
            get_introspection_data(ExecutionResult(None, errors))
        fetch_error = exc_info.value
        assert fetch_error.message == (
            "Introspection query returned errors: Not allowed; Try again"
        )
        assert fetch_error.errors == errors
        assert fetch_error.original_error is None

    def raises_on_errors_of_response_dicts():
        errors = [{"message": "Cannot query field '__schema'."}]
        with raises(FetchError) as exc_info:
            get_introspection_data({"data": data, "errors": errors})
        assert str(exc_info.value) == (
            "Introspection query returned errors: Cannot query field '__schema'."
        )
        assert exc_info.value.errors == errors

    def raises_on_missing_data():
        with raises(FetchError) as exc_info:
            get_introspection_data(ExecutionResult(None))
        assert str(exc_info.value).startswith("Introspection query returned no data")

        with raises(FetchError, match="^Introspection query returned no data: None."):
            get_introspection_data(None)

        with raises(FetchError, match="no data"):
            get_introspection_data({"data": None})
