"""Low-level HTTP client for the LDAP-REST API.

Handles request signing, timeouts, and mapping of HTTP responses to
typed results or exceptions.
"""
from __future__ import annotations
import json
import logging
import re
import time
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Mapping, Optional

import requests
import urllib3
from requests.cookies import RequestsCookieJar
from requests.structures import CaseInsensitiveDict

from .exceptions import (
    ApiError,
    AuthenticationError,
    AuthorizationError,
    ConflictError,
    LdapRestError,
    NetworkError,
    NotFoundError,
    RateLimitError,
    ValidationError,
)
from .hmac_auth import Authenticator, SignatureRequest

DEFAULT_TIMEOUT_MS = 30000
JSON_CONTENT_TYPE = "application/json"
BODY_CHUNK_SIZE = 64 * 1024

# Same call signature as requests.request
Transport = Callable[..., requests.Response]

log = logging.getLogger(__name__)


@dataclass
class RequestSpec:
    """One logical API call, built by a resource and consumed once."""
    method: str
    path: str
    body: Any = None
    headers: Dict[str, str] = field(default_factory=dict)


class HttpClient:
    """HTTP client for the LDAP-REST API.

    Features:
    - Optional HMAC signing; without an authenticator the client's cookie jar
      is sent instead (SSO session mode)
    - One deadline per call, covering connect, headers and body download
    - Centralized status -> exception mapping

    Usage:
        client = HttpClient("https://ldap-rest.example.com", auth=HmacAuth("svc", secret))
        user = client.get("/api/v1/users?by=username&value=alice")
    """

    def __init__(
        self,
        base_url: str,
        timeout_ms: int = DEFAULT_TIMEOUT_MS,
        auth: Optional[Authenticator] = None,
        logger: Optional[logging.Logger] = None,
        transport: Optional[Transport] = None,
        cookies: Optional[RequestsCookieJar] = None,
    ):
        """Initialize HTTP client.

        Args:
            base_url: API base URL without trailing slash
            timeout_ms: Request timeout in milliseconds
            auth: Authenticator producing the Authorization header; None selects cookie mode
            logger: Logger receiving request traces (defaults to this module's logger)
            transport: Callable performing the HTTP exchange (defaults to requests.request)
            cookies: Session cookies sent in cookie mode
        """
        self.base_url = base_url.rstrip("/")
        self.timeout_ms = timeout_ms
        self.auth = auth
        self.logger = logger or log
        self.transport = transport or requests.request
        self.cookies = cookies if cookies is not None else RequestsCookieJar()

    @property
    def uses_cookies(self) -> bool:
        return self.auth is None

    def execute(self, spec: RequestSpec) -> Any:
        """Send a request and return the decoded JSON result.

        Args:
            spec: Request description

        Returns:
            Parsed JSON body, or {"success": True} for 204 responses

        Raises:
            LdapRestError: Subclass matching the failure (see exceptions.py)
        """
        method = spec.method.upper()
        url = f"{self.base_url}{spec.path}"
        # Serialized once: these exact bytes are signed and sent
        body_text = json.dumps(spec.body) if spec.body is not None else None

        self.logger.debug(f"Sending request method={method} url={url} has_body={body_text is not None}")

        headers = self._build_headers(method, spec.path, body_text, spec.headers)
        kwargs: Dict[str, Any] = {
            "headers": headers,
            "data": body_text.encode("utf-8") if body_text is not None else None,
            "timeout": self.timeout_ms / 1000,
            "stream": True,
        }
        if self.uses_cookies:
            kwargs["cookies"] = self.cookies

        deadline = time.monotonic() + self.timeout_ms / 1000
        try:
            resp = self.transport(method, url, **kwargs)
        except LdapRestError:
            raise
        except Exception as exc:
            raise self._network_error(method, spec.path, exc) from exc

        try:
            try:
                _read_body(resp, deadline)
            except LdapRestError:
                raise
            except Exception as exc:
                raise self._network_error(method, spec.path, exc) from exc

            self.logger.info(f"Request completed method={method} path={spec.path} status={resp.status_code}")
            return self._handle_response(resp)
        finally:
            resp.close()

    def request(
        self,
        method: str,
        path: str,
        body: Any = None,
        headers: Optional[Mapping[str, str]] = None,
    ) -> Any:
        return self.execute(RequestSpec(method, path, body, dict(headers or {})))

    def get(self, path: str, headers: Optional[Mapping[str, str]] = None) -> Any:
        return self.request("GET", path, headers=headers)

    def post(self, path: str, body: Any = None, headers: Optional[Mapping[str, str]] = None) -> Any:
        return self.request("POST", path, body, headers)

    def put(self, path: str, body: Any = None, headers: Optional[Mapping[str, str]] = None) -> Any:
        return self.request("PUT", path, body, headers)

    def patch(self, path: str, body: Any = None, headers: Optional[Mapping[str, str]] = None) -> Any:
        return self.request("PATCH", path, body, headers)

    def delete(self, path: str, headers: Optional[Mapping[str, str]] = None) -> Any:
        return self.request("DELETE", path, headers=headers)

    def _build_headers(
        self,
        method: str,
        path: str,
        body_text: Optional[str],
        extra: Optional[Mapping[str, str]],
    ) -> CaseInsensitiveDict:
        """Merge default, caller and Authorization headers (in increasing precedence)."""
        headers = CaseInsensitiveDict({
            "Content-Type": JSON_CONTENT_TYPE,
            "Accept": JSON_CONTENT_TYPE,
        })
        headers.update(extra or {})

        if self.auth is None:
            # Cookie mode never sends an Authorization header
            headers.pop("Authorization", None)
        else:
            headers["Authorization"] = self.auth.sign(SignatureRequest(method, path, body_text))
        return headers

    def _network_error(self, method: str, path: str, exc: Exception) -> NetworkError:
        """Log a transport failure and wrap it in a NetworkError."""
        if _is_timeout(exc):
            self.logger.error(f"Request timeout method={method} path={path} timeout_ms={self.timeout_ms}")
            return NetworkError(f"Request timeout after {self.timeout_ms}ms", exc)
        self.logger.error(f"Network request failed method={method} path={path} error={exc}")
        return NetworkError(f"Network request failed: {exc}", exc)

    def _handle_response(self, resp: requests.Response) -> Any:
        """Centralized response handling.

        Args:
            resp: Response object to classify

        Returns:
            Parsed JSON body

        Raises:
            LdapRestError: If the status is not 2xx or the body is not JSON
        """
        status = resp.status_code
        if 200 <= status < 300:
            if status == 204:
                return {"success": True}

            content_type = (resp.headers.get("content-type") or "").lower()
            if JSON_CONTENT_TYPE not in content_type:
                raise ApiError("Expected JSON response", status, "INVALID_RESPONSE")
            try:
                return resp.json()
            except ValueError as exc:
                raise ApiError("Invalid JSON response", status, "INVALID_RESPONSE") from exc

        error_body = _parse_error_body(resp)
        message = error_body.get("error") or f"HTTP {status}: {resp.reason or ''}"
        code = error_body.get("code")

        if status == 400:
            raise ValidationError(message)
        if status == 401:
            raise AuthenticationError(message)
        if status == 403:
            raise AuthorizationError(message)
        if status == 404:
            raise NotFoundError(message, code)
        if status == 409:
            raise ConflictError(message, code)
        if status == 429:
            raise RateLimitError(message, _parse_retry_after(resp.headers.get("retry-after")))
        raise ApiError(message, status, code or "UNKNOWN_ERROR")


def _parse_error_body(resp: requests.Response) -> Dict[str, Any]:
    """Return the {error, code} body of a failed response, or {} if unreadable."""
    try:
        body = resp.json()
    except ValueError:
        return {}
    return body if isinstance(body, dict) else {}


def _is_timeout(exc: BaseException) -> bool:
    """Tell whether a transport failure came from an expired timeout.

    requests reports a read timeout hit while iterating a body as a
    ConnectionError wrapping urllib3's ReadTimeoutError.
    """
    if isinstance(exc, (requests.exceptions.Timeout, urllib3.exceptions.TimeoutError, TimeoutError)):
        return True
    return (
        isinstance(exc, requests.exceptions.ConnectionError)
        and bool(exc.args)
        and isinstance(exc.args[0], urllib3.exceptions.ReadTimeoutError)
    )


def _read_body(resp: requests.Response, deadline: float) -> None:
    """Download a streamed response body before the call deadline.

    Each socket wait is capped at the time left, and the deadline is checked
    again between chunks, so a server trickling bytes cannot stretch the call.
    Responses whose content is already loaded are left untouched.

    Args:
        resp: Response returned by the transport with stream=True
        deadline: time.monotonic() value the whole call must finish by

    Raises:
        TimeoutError: If the deadline passes before the body is complete
    """
    raw = resp.raw
    if raw is None or resp._content_consumed:
        return

    chunks = []
    while True:
        remaining = deadline - time.monotonic()
        if remaining <= 0:
            raise TimeoutError("response body not complete before deadline")
        _limit_socket_wait(raw, remaining)
        chunk = raw.read1(BODY_CHUNK_SIZE, decode_content=True)
        if not chunk:
            break
        chunks.append(chunk)

    resp._content = b"".join(chunks)
    resp._content_consumed = True


def _limit_socket_wait(raw: Any, seconds: float) -> None:
    sock = getattr(getattr(raw, "connection", None), "sock", None)
    if sock is not None:
        sock.settimeout(seconds)


def _parse_retry_after(value: Optional[str]) -> Optional[int]:
    """Parse the leading delay-seconds of a Retry-After header.

    "60" and "60.5" both give 60. HTTP-date values and garbage give None.
    """
    if value is None:
        return None
    match = re.match(r"\s*(\d+)", value)
    return int(match.group(1)) if match else None
