"""Top-level LDAP-REST API client."""
from __future__ import annotations
import logging
from typing import Optional

from requests.cookies import RequestsCookieJar

from .config.settings import ClientConfig, HmacAuthConfig, normalize_config, validate_config
from .core.client import HttpClient, Transport
from .core.hmac_auth import Authenticator, HmacAuth
from .resources import GroupsResource, OrganizationsResource, UsersResource

LOGGER_NAME = "ldap_rest_client"


class LdapRestClient:
    """Client for the LDAP-REST API.

    Exposes the users, organizations and groups resources. Authentication is
    HMAC when the config carries an HmacAuthConfig, SSO cookies otherwise.

    Usage:
        # HMAC authentication for backend services
        client = LdapRestClient(ClientConfig(
            base_url="https://ldap-rest.example.com",
            auth=HmacAuthConfig(service_id="my-service", secret=secret),
        ))
        client.users.create({...})

        # Cookie authentication (session cookies in the jar)
        client = LdapRestClient(ClientConfig(base_url="https://ldap-rest.example.com"), cookies=jar)
    """

    def __init__(
        self,
        config: ClientConfig,
        transport: Optional[Transport] = None,
        cookies: Optional[RequestsCookieJar] = None,
    ):
        """Initialize the client.

        Args:
            config: Client configuration
            transport: Optional replacement for requests.request
            cookies: Session cookies used in cookie mode

        Raises:
            ValueError: If the configuration is invalid
        """
        validate_config(config)
        self.config = normalize_config(config)

        logger = self.config.logger or logging.getLogger(LOGGER_NAME)
        logger.info(
            f"Initializing LDAP-REST client base_url={self.config.base_url} auth_type={self.config.auth.type}"
        )

        auth: Optional[Authenticator] = None
        if isinstance(self.config.auth, HmacAuthConfig):
            auth = HmacAuth(self.config.auth.service_id, self.config.auth.secret)

        self.http = HttpClient(
            self.config.base_url,
            timeout_ms=self.config.timeout,
            auth=auth,
            logger=logger,
            transport=transport,
            cookies=cookies,
        )
        self.users = UsersResource(self.http)
        self.organizations = OrganizationsResource(self.http)
        self.groups = GroupsResource(self.http)

    def get_base_url(self) -> str:
        return self.config.base_url
