"""Tests for remote error translation."""

import pytest
import requests
from github import GithubException, RateLimitExceededException

from hubgraph.errors import (
    NotFoundError,
    PermissionDeniedError,
    RateLimitedError,
    TransportError,
    UnknownError,
    UnsupportedError,
    ValidationError,
    classify_error,
    translate,
)


def test_unknown_field_is_validation_error_with_verbatim_message() -> None:
    """Test that a schema mismatch keeps the remote message untouched."""
    message = "Field 'state' doesn't exist on type 'Discussion'"

    error = translate([{"message": message}])

    assert isinstance(error, ValidationError)
    assert error.kind == "ValidationError"
    assert error.message == message
    assert error.messages == [message]


def test_all_errors_preserved() -> None:
    """Test that every payload survives translation in order."""
    payload = [
        {"message": "Argument 'first' on Field 'comments' has an invalid value"},
        {"message": "Could not resolve to a node with the global id of 'D_x'", "type": "NOT_FOUND"},
    ]

    error = translate(payload)

    assert len(error.errors) == 2
    assert error.messages == [payload[0]["message"], payload[1]["message"]]
    assert error.message == f"{payload[0]['message']}; {payload[1]['message']}"


def test_most_specific_kind_wins() -> None:
    """Test that NotFound outranks a validation error in the same response."""
    error = translate(
        [
            {"message": "invalid cursor"},
            {"message": "Could not resolve to a Repository with the name 'octo/missing'."},
        ]
    )

    assert isinstance(error, NotFoundError)


@pytest.mark.parametrize(
    ("payload", "kind"),
    [
        ({"message": "x", "type": "NOT_FOUND"}, "NotFound"),
        ({"message": "x", "type": "FORBIDDEN"}, "PermissionDenied"),
        ({"message": "x", "type": "RATE_LIMITED"}, "RateLimited"),
        ({"message": "x", "extensions": {"code": "undefinedField"}}, "Unknown"),
        ({"message": "API rate limit exceeded for user"}, "RateLimited"),
        ({"message": "Resource not accessible by integration"}, "PermissionDenied"),
        ({"message": "Bad credentials"}, "PermissionDenied"),
        ({"message": "Sorting by this field is not supported"}, "Unsupported"),
        ({"message": "Something odd happened"}, "Unknown"),
    ],
)
def test_classify_error(payload: dict, kind: str) -> None:
    """Test classification of single payloads."""
    assert classify_error(payload) == kind


def test_empty_payload_is_unknown() -> None:
    """Test that a failure with no payload is still typed."""
    error = translate([])

    assert isinstance(error, UnknownError)


def test_transport_failure_status_codes() -> None:
    """Test classification of HTTP-level failures."""
    assert isinstance(translate([], GithubException(401, {"message": "Bad credentials"}, None)), PermissionDeniedError)
    assert isinstance(translate([], GithubException(404, {"message": "Not Found"}, None)), NotFoundError)
    assert isinstance(translate([], GithubException(422, {"message": "Unprocessable"}, None)), ValidationError)
    assert isinstance(translate([], GithubException(502, {"message": "Bad gateway"}, None)), TransportError)
    assert isinstance(
        translate([], GithubException(403, {"message": "API rate limit exceeded"}, None)),
        RateLimitedError,
    )


def test_rate_limit_exception() -> None:
    """Test that PyGithub's rate-limit exception maps to RateLimited."""
    error = translate([], RateLimitExceededException(403, {"message": "API rate limit exceeded"}, None))

    assert isinstance(error, RateLimitedError)
    assert error.message == "API rate limit exceeded"


def test_connection_error_is_transport() -> None:
    """Test that network errors map to Transport."""
    error = translate([], requests.exceptions.ConnectionError("connection refused"))

    assert isinstance(error, TransportError)
    assert "connection refused" in error.message


def test_errors_and_transport_failure_combined() -> None:
    """Test that a transport failure is appended after the GraphQL errors."""
    error = translate(
        [{"message": "invalid value"}],
        GithubException(429, {"message": "Too many requests"}, None),
    )

    assert isinstance(error, RateLimitedError)
    assert error.messages == ["invalid value", "Too many requests"]


def test_unsupported_error_kind() -> None:
    """Test the kind carried by explicitly raised errors."""
    assert UnsupportedError("nope").kind == "Unsupported"
