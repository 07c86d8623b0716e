"""Authenticated request pipeline for the LDAP-REST API.

Architecture:
- hmac_auth.py: HMAC-SHA256 request signing
- client.py: HTTP client with timeouts and response classification
- exceptions.py: Typed exceptions for error handling
"""
from .client import (
    HttpClient,
    RequestSpec,
    Transport,
    DEFAULT_TIMEOUT_MS,
)
from .exceptions import (
    ErrorKind,
    LdapRestError,
    ApiError,
    ValidationError,
    AuthenticationError,
    AuthorizationError,
    NotFoundError,
    ConflictError,
    RateLimitError,
    NetworkError,
)
from .hmac_auth import (
    Authenticator,
    HmacAuth,
    HmacSignature,
    SignatureRequest,
    build_signing_string,
    hash_body,
)

__all__ = [
    # Client
    "HttpClient",
    "RequestSpec",
    "Transport",
    "DEFAULT_TIMEOUT_MS",

    # Exceptions
    "ErrorKind",
    "LdapRestError",
    "ApiError",
    "ValidationError",
    "AuthenticationError",
    "AuthorizationError",
    "NotFoundError",
    "ConflictError",
    "RateLimitError",
    "NetworkError",

    # Signing
    "Authenticator",
    "HmacAuth",
    "HmacSignature",
    "SignatureRequest",
    "build_signing_string",
    "hash_body",
]
