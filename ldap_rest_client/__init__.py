"""LDAP-REST API client library.

Python client for the LDAP-REST directory API with HMAC-SHA256 request
signing or SSO cookie authentication.

Usage:
    from ldap_rest_client import LdapRestClient, ClientConfig, HmacAuthConfig

    client = LdapRestClient(ClientConfig(
        base_url="https://ldap-rest.example.com",
        auth=HmacAuthConfig(service_id="registration-service", secret=secret),
    ))
    client.organizations.create({"id": "org_abc123", "name": "Acme", "domain": "acme.example.com"})
"""
from .client import LdapRestClient
from .config import (
    AuthConfig,
    ClientConfig,
    CookieAuthConfig,
    HmacAuthConfig,
    load_settings,
)
from .core import (
    HttpClient,
    HmacAuth,
    SignatureRequest,
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
from .resources import GroupsResource, OrganizationsResource, UsersResource

__all__ = [
    "LdapRestClient",

    # Configuration
    "AuthConfig",
    "ClientConfig",
    "CookieAuthConfig",
    "HmacAuthConfig",
    "load_settings",

    # Core
    "HttpClient",
    "HmacAuth",
    "SignatureRequest",

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

    # Resources
    "GroupsResource",
    "OrganizationsResource",
    "UsersResource",
]
