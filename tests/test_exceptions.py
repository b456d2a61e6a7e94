"""Tests for the exception hierarchy."""

from __future__ import annotations

from clubportal_filtering import (
    EndpointNotFoundError,
    FilterAdapterError,
    FilteringError,
    FilterParseError,
    IssueKind,
    QueryIssue,
    QueryValidationError,
    ValueCoercionError,
)


def test_hierarchy() -> None:
    for exc_type in (
        QueryValidationError,
        ValueCoercionError,
        FilterParseError,
        EndpointNotFoundError,
        FilterAdapterError,
    ):
        assert issubclass(exc_type, FilteringError)
    assert issubclass(ValueCoercionError, ValueError)
    assert issubclass(EndpointNotFoundError, LookupError)


def test_query_validation_error_to_dict() -> None:
    error = QueryValidationError(
        [
            QueryIssue("age_gt", IssueKind.VALUE_COERCION_FAILURE, "'x' is not a valid number"),
            QueryIssue("foo", IssueKind.UNKNOWN_ATTRIBUTE, "Field 'foo' is not filterable"),
        ]
    )
    assert error.keys == ["age_gt", "foo"]
    data = error.to_dict()
    assert data["error"] == "QUERY_VALIDATION_ERROR"
    assert data["message"] == "Invalid query parameters: age_gt, foo"
    assert data["issues"][0] == {
        "key": "age_gt",
        "error": "VALUE_COERCION_FAILURE",
        "message": "'x' is not a valid number",
    }


def test_base_to_dict() -> None:
    assert FilterParseError("bad").to_dict() == {
        "error": "FilterParseError",
        "message": "bad",
    }


def test_value_coercion_error_message() -> None:
    error = ValueCoercionError("abc", "number")
    assert str(error) == "'abc' is not a valid number"
    assert error.value == "abc"
