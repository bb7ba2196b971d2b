"""Result formatting."""

from graphql import ExecutionResult, GraphQLError

from graphql_route.core.errors import HttpError, to_http_error
from graphql_route.core.formatting import ExecutionResultData, format_result


def test_data_key_follows_presence_flag():
    result = ExecutionResult(data=None, errors=[GraphQLError("boom")])

    assert format_result(ExecutionResultData(True, result)) == {
        "data": None,
        "errors": [{"message": "boom"}],
    }
    assert format_result(ExecutionResultData(False, result)) == {
        "errors": [{"message": "boom"}],
    }


def test_no_errors_key_without_errors():
    result = ExecutionResult(data={"a": 1}, errors=[])

    assert format_result(ExecutionResultData(True, result)) == {"data": {"a": 1}}


def test_extensions():
    result = ExecutionResult(data={"a": 1}, extensions={"tracing": {}})

    assert format_result(ExecutionResultData(True, result)) == {
        "data": {"a": 1},
        "extensions": {"tracing": {}},
    }


def test_custom_error_formatter():
    result = ExecutionResult(data=None, errors=[GraphQLError("one"), GraphQLError("two")])

    formatted = format_result(
        ExecutionResultData(False, result),
        lambda error: {"msg": error.message.upper()},
    )

    assert formatted == {"errors": [{"msg": "ONE"}, {"msg": "TWO"}]}


def test_to_http_error():
    http_error = HttpError.from_message(405, "nope", headers={"Allow": "POST"})

    assert to_http_error(http_error) is http_error

    wrapped = to_http_error(ValueError("bad value"))
    assert wrapped.status_code == 500
    assert wrapped.errors[0].message == "bad value"
    assert to_http_error(ValueError()).errors[0].message == "Internal server error"
