"""Unit tests for ldap_rest_client/core/exceptions.py."""
import pytest

from ldap_rest_client.core.exceptions import (
    ApiError,
    AuthenticationError,
    AuthorizationError,
    ConflictError,
    ErrorKind,
    LdapRestError,
    NetworkError,
    NotFoundError,
    RateLimitError,
    ValidationError,
)


@pytest.mark.parametrize(
    "error,status,code,kind",
    [
        (ValidationError("bad"), 400, "VALIDATION_ERROR", ErrorKind.VALIDATION),
        (AuthenticationError("bad"), 401, "AUTHENTICATION_ERROR", ErrorKind.AUTHENTICATION),
        (AuthorizationError("bad"), 403, "AUTHORIZATION_ERROR", ErrorKind.AUTHORIZATION),
        (NotFoundError("bad"), 404, "NOT_FOUND", ErrorKind.NOT_FOUND),
        (ConflictError("bad"), 409, "CONFLICT", ErrorKind.CONFLICT),
        (RateLimitError("bad"), 429, "RATE_LIMIT_EXCEEDED", ErrorKind.RATE_LIMIT),
        (ApiError("bad", 502, "UPSTREAM"), 502, "UPSTREAM", ErrorKind.API),
        (NetworkError("bad"), None, None, ErrorKind.NETWORK),
    ],
)
def test_variant_fields(error, status, code, kind):
    assert isinstance(error, LdapRestError)
    assert error.message == "bad"
    assert str(error) == "bad"
    assert error.status_code == status
    assert error.code == code
    assert error.kind is kind


def test_specific_codes_override_defaults():
    assert NotFoundError("User not found", "USER_NOT_FOUND").code == "USER_NOT_FOUND"
    assert ConflictError("Email exists", "EMAIL_EXISTS").code == "EMAIL_EXISTS"


def test_rate_limit_retry_after():
    assert RateLimitError("slow down", 30).retry_after == 30
    assert RateLimitError("slow down").retry_after is None


def test_network_error_keeps_cause():
    cause = ConnectionResetError("peer reset")
    err = NetworkError("Network request failed: peer reset", cause)
    assert err.cause is cause
    assert NetworkError("offline").cause is None


def test_api_error_from_response():
    err = ApiError.from_response(503, {"error": "Service temporarily unavailable", "code": "SERVICE_UNAVAILABLE"})
    assert err.message == "Service temporarily unavailable"
    assert err.status_code == 503
    assert err.code == "SERVICE_UNAVAILABLE"


def test_kind_supports_exhaustive_match():
    def describe(err: LdapRestError) -> str:
        match err.kind:
            case ErrorKind.NOT_FOUND:
                return "missing"
            case ErrorKind.RATE_LIMIT:
                return "throttled"
            case _:
                return "other"

    assert describe(NotFoundError("x")) == "missing"
    assert describe(RateLimitError("x")) == "throttled"
    assert describe(NetworkError("x")) == "other"


def test_repr_includes_fields():
    assert repr(ApiError("boom", 500, "X")) == "ApiError(message='boom', status_code=500, code='X')"
