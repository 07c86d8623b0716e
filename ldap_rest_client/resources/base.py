"""Shared helpers for API resources."""
from __future__ import annotations
from typing import Any, Mapping, Optional
from urllib.parse import quote

from ..core.client import HttpClient

# Characters encodeURIComponent leaves unescaped besides alphanumerics and "_.-"
URI_COMPONENT_SAFE = "!'()*~"


def encode_segment(value: str) -> str:
    """Percent-encode a single path segment (slashes included)."""
    return quote(str(value), safe=URI_COMPONENT_SAFE)


def _format_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


class BaseResource:
    """Base class for resource services."""

    def __init__(self, http: HttpClient):
        """Initialize resource.

        Args:
            http: HTTP client used for all requests
        """
        self.http = http

    @staticmethod
    def build_query_string(params: Optional[Mapping[str, Any]]) -> str:
        """Build a query string, skipping None values.

        Example:
            build_query_string({"field": "username", "value": "john"})
            # "?field=username&value=john"

        Returns:
            Query string with leading '?' or empty string
        """
        if not params:
            return ""
        pairs = [
            f"{encode_segment(key)}={encode_segment(_format_value(value))}"
            for key, value in params.items()
            if value is not None
        ]
        if not pairs:
            return ""
        return "?" + "&".join(pairs)
