"""Typed errors and translation of remote GraphQL/transport failures."""

from typing import Any

import requests
import structlog
from github import GithubException, RateLimitExceededException

logger = structlog.get_logger()

NOT_FOUND = "NotFound"
PERMISSION_DENIED = "PermissionDenied"
VALIDATION = "ValidationError"
RATE_LIMITED = "RateLimited"
UNSUPPORTED = "Unsupported"
TRANSPORT = "Transport"
UNKNOWN = "Unknown"


class HubGraphError(Exception):
    """Base class for every error raised by the resource-access layer."""

    kind = UNKNOWN

    def __init__(self, message: str, errors: list[dict[str, Any]] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.errors: list[dict[str, Any]] = list(errors or [])

    @property
    def messages(self) -> list[str]:
        """Original remote messages, in payload order."""
        return [str(error.get("message", "")) for error in self.errors]


class NotFoundError(HubGraphError):
    kind = NOT_FOUND


class PermissionDeniedError(HubGraphError):
    kind = PERMISSION_DENIED


class ValidationError(HubGraphError):
    kind = VALIDATION


class RateLimitedError(HubGraphError):
    kind = RATE_LIMITED


class UnsupportedError(HubGraphError):
    """The requested operation has no equivalent in the remote schema."""

    kind = UNSUPPORTED


class TransportError(HubGraphError):
    kind = TRANSPORT


class UnknownError(HubGraphError):
    kind = UNKNOWN


ERROR_CLASSES: dict[str, type[HubGraphError]] = {
    cls.kind: cls
    for cls in (
        NotFoundError,
        PermissionDeniedError,
        ValidationError,
        RateLimitedError,
        UnsupportedError,
        TransportError,
        UnknownError,
    )
}

# When one response carries several errors, the most specific kind wins.
_PRIORITY = [RATE_LIMITED, PERMISSION_DENIED, NOT_FOUND, UNSUPPORTED, VALIDATION, TRANSPORT, UNKNOWN]

_TYPE_RULES: dict[str, str] = {
    "NOT_FOUND": NOT_FOUND,
    "FORBIDDEN": PERMISSION_DENIED,
    "INSUFFICIENT_SCOPES": PERMISSION_DENIED,
    "UNAUTHORIZED": PERMISSION_DENIED,
    "RATE_LIMITED": RATE_LIMITED,
    "UNPROCESSABLE": VALIDATION,
    "BAD_REQUEST": VALIDATION,
    "MAX_NODE_LIMIT_EXCEEDED": VALIDATION,
    "ARGUMENT_LIMIT": VALIDATION,
    "EXCESSIVE_PAGINATION": VALIDATION,
    "SERVICE_UNAVAILABLE": TRANSPORT,
}

# Lower-cased substrings, checked in order.
_MESSAGE_RULES: list[tuple[str, str]] = [
    ("rate limit", RATE_LIMITED),
    ("secondary rate", RATE_LIMITED),
    ("bad credentials", PERMISSION_DENIED),
    ("requires authentication", PERMISSION_DENIED),
    ("resource not accessible", PERMISSION_DENIED),
    ("does not have permission", PERMISSION_DENIED),
    ("must have admin rights", PERMISSION_DENIED),
    ("insufficient scopes", PERMISSION_DENIED),
    ("forbidden", PERMISSION_DENIED),
    ("could not resolve to", NOT_FOUND),
    ("not found", NOT_FOUND),
    ("is not supported", UNSUPPORTED),
    ("not supported", UNSUPPORTED),
    ("doesn't exist on type", VALIDATION),
    ("does not exist on type", VALIDATION),
    ("doesn't accept argument", VALIDATION),
    ("argument", VALIDATION),
    ("expected type", VALIDATION),
    ("parse error", VALIDATION),
    ("must have a selection", VALIDATION),
    ("is required", VALIDATION),
    ("invalid", VALIDATION),
    ("timed out", TRANSPORT),
    ("timeout", TRANSPORT),
]


def classify_error(error: dict[str, Any]) -> str:
    """Classify a single remote error payload into an error kind."""
    error_type = str(error.get("type") or (error.get("extensions") or {}).get("code") or "").upper()
    if error_type in _TYPE_RULES:
        return _TYPE_RULES[error_type]

    message = str(error.get("message", "")).lower()
    for needle, kind in _MESSAGE_RULES:
        if needle in message:
            return kind

    return UNKNOWN


def classify_transport_failure(failure: BaseException) -> str:
    """Classify an exception raised while talking to the remote endpoint."""
    if isinstance(failure, HubGraphError):
        return failure.kind
    if isinstance(failure, RateLimitExceededException):
        return RATE_LIMITED
    if isinstance(failure, GithubException):
        status = failure.status or 0
        if status == 429:
            return RATE_LIMITED
        if status in (401, 403):
            if "rate limit" in str(failure.data).lower():
                return RATE_LIMITED
            return PERMISSION_DENIED
        if status == 404:
            return NOT_FOUND
        if status in (400, 422):
            return VALIDATION
        if status >= 500:
            return TRANSPORT
        return UNKNOWN
    if isinstance(failure, (requests.exceptions.RequestException, TimeoutError, ConnectionError)):
        return TRANSPORT
    return UNKNOWN


def _transport_payload(failure: BaseException) -> dict[str, Any]:
    if isinstance(failure, GithubException):
        data = failure.data if isinstance(failure.data, dict) else {}
        message = data.get("message") or str(failure)
        return {"message": str(message), "status": failure.status}
    return {"message": str(failure) or type(failure).__name__}


def translate(errors: list[dict[str, Any]] | None, transport_failure: BaseException | None = None) -> HubGraphError:
    """Convert a remote error list and/or a transport failure into one typed error.

    The original messages are kept verbatim on the result, and every error in
    the payload is preserved in ``errors``.
    """
    payloads = [error if isinstance(error, dict) else {"message": str(error)} for error in errors or []]
    kinds = [classify_error(error) for error in payloads]

    if transport_failure is not None:
        payloads.append(_transport_payload(transport_failure))
        kinds.append(classify_transport_failure(transport_failure))

    if not payloads:
        return UnknownError("Remote call failed without an error payload")

    kind = min(kinds, key=_PRIORITY.index)
    message = "; ".join(str(error.get("message", "")) for error in payloads)
    logger.debug("Translated remote error", kind=kind, count=len(payloads))
    return ERROR_CLASSES[kind](message, payloads)
