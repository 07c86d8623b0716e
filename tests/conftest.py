"""Pytest shared fixtures for the LDAP-REST client tests."""
import json
import logging
import pathlib
import sys
from typing import Optional
from unittest.mock import MagicMock

# Add project root to Python path
ROOT = pathlib.Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

import pytest
import requests
from requests.structures import CaseInsensitiveDict

from ldap_rest_client.core import HmacAuth, HttpClient

BASE_URL = "https://api.example.com"
SERVICE_ID = "test-service"
SECRET = "test-secret-at-least-32-characters-long"
FIXED_TIMESTAMP = 1700000000000


def build_response(
    status_code: int,
    payload=None,
    *,
    headers: Optional[dict] = None,
    reason: str = "",
    raw: Optional[bytes] = None,
) -> requests.Response:
    """Build a real requests.Response without touching the network."""
    resp = requests.Response()
    resp.status_code = status_code
    resp.reason = reason
    resp.headers = CaseInsensitiveDict(headers or {})
    resp.encoding = "utf-8"
    if raw is not None:
        resp._content = raw
    elif payload is not None:
        resp._content = json.dumps(payload).encode("utf-8")
    else:
        resp._content = b""
    resp._content_consumed = True
    resp.url = BASE_URL
    return resp


def json_response(status_code: int, payload, **kwargs) -> requests.Response:
    headers = {"Content-Type": "application/json"}
    headers.update(kwargs.pop("headers", None) or {})
    return build_response(status_code, payload, headers=headers, **kwargs)


@pytest.fixture
def transport():
    """Transport stub standing in for requests.request."""
    return MagicMock(name="transport")


@pytest.fixture
def logger():
    return logging.getLogger("ldap_rest_client.tests")


@pytest.fixture
def hmac_auth():
    return HmacAuth(SERVICE_ID, SECRET, clock=lambda: FIXED_TIMESTAMP)


@pytest.fixture
def http(transport, hmac_auth, logger):
    """HMAC-mode client wired to the transport stub."""
    return HttpClient(BASE_URL, timeout_ms=30000, auth=hmac_auth, logger=logger, transport=transport)


@pytest.fixture
def cookie_http(transport, logger):
    """Cookie-mode client wired to the transport stub."""
    return HttpClient(BASE_URL, timeout_ms=30000, auth=None, logger=logger, transport=transport)


@pytest.fixture
def mock_http():
    """HttpClient double for resource tests."""
    return MagicMock(spec=HttpClient)
