"""Configuration module for the LDAP-REST client."""
from .settings import (
    AuthConfig,
    ClientConfig,
    CookieAuthConfig,
    HmacAuthConfig,
    load_settings,
    normalize_config,
    validate_config,
)

__all__ = [
    "AuthConfig",
    "ClientConfig",
    "CookieAuthConfig",
    "HmacAuthConfig",
    "load_settings",
    "normalize_config",
    "validate_config",
]
