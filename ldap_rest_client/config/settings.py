"""Client configuration with environment variable and Docker secrets integration."""
from __future__ import annotations
import logging
import math
import os
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Literal, Optional, Union
from urllib.parse import urlparse

from ..core.client import DEFAULT_TIMEOUT_MS

MIN_SECRET_LENGTH = 32

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class HmacAuthConfig:
    """HMAC-SHA256 authentication for backend services."""
    service_id: str
    secret: str = field(repr=False)
    type: Literal["hmac"] = "hmac"


@dataclass(frozen=True)
class CookieAuthConfig:
    """SSO cookie authentication (session cookies set by the auth service)."""
    type: Literal["cookie"] = "cookie"


AuthConfig = Union[HmacAuthConfig, CookieAuthConfig]


@dataclass
class ClientConfig:
    """LDAP-REST client configuration container."""
    base_url: str
    auth: Optional[AuthConfig] = None
    timeout: Optional[int] = None
    logger: Optional[logging.Logger] = None


def _load_secret_from_file(secret_name: str, env_var: str | None = None) -> str | None:
    """
    Load secret from /run/secrets (Docker secrets pattern).

    Priority:
    1. /run/secrets/{secret_name} (Docker secrets mount)
    2. Environment variable (fallback)

    Returns:
        Secret value or None if not found
    """
    secret_file = Path("/run/secrets") / secret_name

    if secret_file.exists() and secret_file.is_file():
        try:
            secret_value = secret_file.read_text().strip()
            if secret_value:
                logger.debug(f"Loaded {secret_name} from /run/secrets")
                return secret_value
        except OSError as e:
            logger.warning(f"Failed to read /run/secrets/{secret_name}: {e}")

    if env_var:
        secret_value = os.getenv(env_var)
        if secret_value:
            logger.debug(f"Loaded {env_var} from environment (fallback)")
            return secret_value

    return None


def validate_config(config: ClientConfig) -> None:
    """Validate the client configuration.

    Raises:
        ValueError: If configuration is invalid
    """
    if not config.base_url or not config.base_url.strip():
        raise ValueError("base_url is required")

    auth = config.auth
    if isinstance(auth, HmacAuthConfig):
        if not auth.service_id or not auth.service_id.strip():
            raise ValueError("service_id is required for HMAC authentication")
        if not auth.secret or not auth.secret.strip():
            raise ValueError("secret is required for HMAC authentication")
        if len(auth.secret) < MIN_SECRET_LENGTH:
            logger.warning(
                f"Secret should be at least {MIN_SECRET_LENGTH} characters (current: {len(auth.secret)})"
            )

    parsed = urlparse(config.base_url)
    if not parsed.scheme or not parsed.netloc:
        raise ValueError("base_url must be a valid URL")

    timeout = config.timeout
    if timeout is not None:
        if isinstance(timeout, bool) or not isinstance(timeout, (int, float)):
            raise ValueError("timeout must be a positive number")
        if timeout <= 0 or not math.isfinite(timeout):
            raise ValueError("timeout must be a positive number")


def normalize_config(config: ClientConfig) -> ClientConfig:
    """Apply defaults: strip trailing slash, cookie auth, 30s timeout."""
    base_url = config.base_url[:-1] if config.base_url.endswith("/") else config.base_url
    return replace(
        config,
        base_url=base_url,
        auth=config.auth or CookieAuthConfig(),
        timeout=config.timeout if config.timeout is not None else DEFAULT_TIMEOUT_MS,
    )


def load_settings() -> ClientConfig:
    """Load client settings from environment and /run/secrets.

    Environment:
        LDAP_REST_BASE_URL: API base URL (required)
        LDAP_REST_TIMEOUT: Request timeout in milliseconds
        LDAP_REST_SERVICE_ID: Service identifier for HMAC mode
        LDAP_REST_SECRET: Shared secret (or /run/secrets/ldap_rest_secret)

    HMAC mode is selected only when both service id and secret are present;
    otherwise the client falls back to cookie authentication.

    Raises:
        RuntimeError: If LDAP_REST_BASE_URL is missing or the timeout is not an integer
    """
    base_url = os.environ.get("LDAP_REST_BASE_URL", "").strip()
    if not base_url:
        raise RuntimeError("Environment variable LDAP_REST_BASE_URL is required.")

    timeout_str = os.environ.get("LDAP_REST_TIMEOUT", "").strip()
    timeout: Optional[int] = None
    if timeout_str:
        try:
            timeout = int(timeout_str)
        except ValueError:
            raise RuntimeError(f"LDAP_REST_TIMEOUT must be an integer (got {timeout_str!r})") from None

    service_id = os.environ.get("LDAP_REST_SERVICE_ID", "").strip()
    secret = _load_secret_from_file("ldap_rest_secret", "LDAP_REST_SECRET")

    auth: AuthConfig
    if service_id and secret:
        auth = HmacAuthConfig(service_id=service_id, secret=secret)
    else:
        auth = CookieAuthConfig()

    logger.info(f"Settings loaded; base_url={base_url}; auth={auth.type}")
    return ClientConfig(base_url=base_url, auth=auth, timeout=timeout)
