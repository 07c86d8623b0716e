"""LDAP-REST specific exceptions for error handling.

Every failure raised by the HTTP pipeline is one of the classes below. Each
carries a ``kind`` tag so callers can branch on ``err.kind`` (or on
``status_code`` / ``code``) instead of matching on the message.
"""
from __future__ import annotations
from enum import Enum
from typing import Any, Mapping, Optional


class ErrorKind(str, Enum):
    """Discriminator shared by all client errors."""
    API = "api"
    VALIDATION = "validation"
    AUTHENTICATION = "authentication"
    AUTHORIZATION = "authorization"
    NOT_FOUND = "not_found"
    CONFLICT = "conflict"
    RATE_LIMIT = "rate_limit"
    NETWORK = "network"


class LdapRestError(Exception):
    """Base exception for all LDAP-REST client errors.

    Attributes:
        message: Human-readable error message
        status_code: HTTP status code (None when the server was never reached)
        code: Machine-readable error code
    """
    kind: ErrorKind = ErrorKind.API

    def __init__(self, message: str, status_code: Optional[int] = None, code: Optional[str] = None):
        self.message = message
        self.status_code = status_code
        self.code = code
        super().__init__(message)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(message={self.message!r}, status_code={self.status_code!r}, code={self.code!r})"


class ApiError(LdapRestError):
    """Generic API error for statuses without a dedicated class."""
    kind = ErrorKind.API

    def __init__(self, message: str, status_code: int, code: str):
        super().__init__(message, status_code, code)

    @classmethod
    def from_response(cls, status_code: int, body: Mapping[str, Any]) -> "ApiError":
        """Build an ApiError from a ``{"error": ..., "code": ...}`` response body."""
        return cls(body.get("error"), status_code, body.get("code"))


class ValidationError(LdapRestError):
    """Request rejected as invalid (HTTP 400)."""
    kind = ErrorKind.VALIDATION

    def __init__(self, message: str):
        super().__init__(message, 400, "VALIDATION_ERROR")


class AuthenticationError(LdapRestError):
    """HMAC signature or session credentials rejected (HTTP 401)."""
    kind = ErrorKind.AUTHENTICATION

    def __init__(self, message: str):
        super().__init__(message, 401, "AUTHENTICATION_ERROR")


class AuthorizationError(LdapRestError):
    """Caller lacks permission for the operation (HTTP 403)."""
    kind = ErrorKind.AUTHORIZATION

    def __init__(self, message: str):
        super().__init__(message, 403, "AUTHORIZATION_ERROR")


class NotFoundError(LdapRestError):
    """User, organization or group does not exist (HTTP 404)."""
    kind = ErrorKind.NOT_FOUND

    def __init__(self, message: str, code: Optional[str] = None):
        super().__init__(message, 404, code or "NOT_FOUND")


class ConflictError(LdapRestError):
    """Operation conflicts with existing data, e.g. duplicate username (HTTP 409)."""
    kind = ErrorKind.CONFLICT

    def __init__(self, message: str, code: Optional[str] = None):
        super().__init__(message, 409, code or "CONFLICT")


class RateLimitError(LdapRestError):
    """Too many requests (HTTP 429).

    Attributes:
        retry_after: Seconds to wait before retrying (from Retry-After header)
    """
    kind = ErrorKind.RATE_LIMIT

    def __init__(self, message: str, retry_after: Optional[int] = None):
        super().__init__(message, 429, "RATE_LIMIT_EXCEEDED")
        self.retry_after = retry_after


class NetworkError(LdapRestError):
    """Connection failure or timeout before a response was received.

    Attributes:
        cause: Original exception raised by the transport, if any
    """
    kind = ErrorKind.NETWORK

    def __init__(self, message: str, cause: Optional[BaseException] = None):
        super().__init__(message)
        self.cause = cause
