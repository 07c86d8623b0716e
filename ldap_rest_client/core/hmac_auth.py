"""HMAC-SHA256 request signing for backend services.

Signature format:
    HMAC-SHA256(secret, "METHOD|PATH|timestamp|body-hash")

Header format:
    Authorization: HMAC-SHA256 service-id:timestamp:signature

Usage:
    auth = HmacAuth("registration-service", "shared-secret-at-least-32-chars")
    header = auth.sign(SignatureRequest("POST", "/api/v1/users", body=json.dumps(data)))
"""
from __future__ import annotations
import hashlib
import hmac
import time
from dataclasses import dataclass
from typing import Callable, Optional, Protocol

# Methods whose body never takes part in the signature
_BODYLESS_METHODS = frozenset({"GET", "DELETE", "HEAD"})


@dataclass(frozen=True)
class SignatureRequest:
    """Request parameters covered by the signature.

    Attributes:
        method: HTTP method (any case)
        path: Request path including query string, without host
        body: Exact serialized body sent on the wire, or None
    """
    method: str
    path: str
    body: Optional[str] = None


@dataclass(frozen=True)
class HmacSignature:
    """Components of an HMAC authorization token."""
    service_id: str
    timestamp: int
    signature: str

    def to_header(self) -> str:
        return f"HMAC-SHA256 {self.service_id}:{self.timestamp}:{self.signature}"


class Authenticator(Protocol):
    """Anything able to produce an Authorization header value for a request."""

    def sign(self, request: SignatureRequest) -> str:
        ...


def _now_millis() -> int:
    return time.time_ns() // 1_000_000


def hash_body(method: str, body: Optional[str]) -> str:
    """Return the hex SHA-256 of the body, or "" when the body is not signed."""
    if method.upper() in _BODYLESS_METHODS:
        return ""
    if not body or not body.strip():
        return ""
    return hashlib.sha256(body.encode("utf-8")).hexdigest()


def build_signing_string(method: str, path: str, timestamp: int, body_hash: str) -> str:
    return f"{method.upper()}|{path}|{timestamp}|{body_hash}"


class HmacAuth:
    """HMAC-SHA256 authenticator.

    The secret never leaves this object; only the derived signature is exposed.
    """

    def __init__(self, service_id: str, secret: str, clock: Optional[Callable[[], int]] = None):
        """Initialize the authenticator.

        Args:
            service_id: Identifier of the calling service (e.g. 'registration-service')
            secret: Shared secret key
            clock: Callable returning the current Unix time in milliseconds

        Raises:
            ValueError: If service_id or secret is empty
        """
        if not service_id or not service_id.strip():
            raise ValueError("service_id is required for HMAC authentication")
        if not secret or not secret.strip():
            raise ValueError("secret is required for HMAC authentication")
        self.service_id = service_id
        self._secret = secret.encode("utf-8")
        self._clock = clock or _now_millis

    def __repr__(self) -> str:
        return f"HmacAuth(service_id={self.service_id!r})"

    def sign(self, request: SignatureRequest) -> str:
        """Return the Authorization header value for a request."""
        return self.generate_signature(request).to_header()

    def generate_signature(self, request: SignatureRequest, timestamp: Optional[int] = None) -> HmacSignature:
        """Compute signature components.

        Args:
            request: Request to sign
            timestamp: Unix milliseconds to embed (defaults to the clock, read once)

        Returns:
            HmacSignature with service id, timestamp and hex signature
        """
        if timestamp is None:
            timestamp = self._clock()
        method = request.method.upper()
        body_hash = hash_body(method, request.body)
        signing_string = build_signing_string(method, request.path, timestamp, body_hash)
        signature = hmac.new(self._secret, signing_string.encode("utf-8"), hashlib.sha256).hexdigest()
        return HmacSignature(service_id=self.service_id, timestamp=timestamp, signature=signature)
