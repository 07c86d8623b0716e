"""User management operations (B2C users)."""
from __future__ import annotations
from typing import Any, Dict, Mapping

from .base import BaseResource, encode_segment

USERS_PATH = "/api/v1/users"


class UsersResource(BaseResource):
    """Service for managing directory users."""

    def create(self, data: Mapping[str, Any]) -> Dict[str, Any]:
        """Create a user.

        Args:
            data: User attributes (cn, uid, mail, mobile, userPassword, ...)

        Returns:
            {"success": True}

        Raises:
            ConflictError: If username, email or phone already exists
        """
        return self.http.post(USERS_PATH, data)

    def update(self, user_id: str, data: Mapping[str, Any]) -> Dict[str, Any]:
        """Update user attributes (partial update)."""
        return self.http.patch(f"{USERS_PATH}/{encode_segment(user_id)}", data)

    def disable(self, user_id: str) -> Dict[str, Any]:
        """Lock the account by setting pwdAccountLockedTime."""
        return self.http.post(f"{USERS_PATH}/{encode_segment(user_id)}/disable")

    def delete(self, user_id: str) -> Dict[str, Any]:
        return self.http.delete(f"{USERS_PATH}/{encode_segment(user_id)}")

    def check_availability(self, params: Mapping[str, Any]) -> Dict[str, Any]:
        """Check whether a username, email or phone is free.

        Args:
            params: {"field": "username" | "email" | "phone", "value": ...}

        Returns:
            {"available": bool}
        """
        return self.http.get(f"{USERS_PATH}/check{self.build_query_string(params)}")

    def fetch(self, params: Mapping[str, Any]) -> Dict[str, Any]:
        """Fetch a user by username, email or phone.

        Args:
            params: {"by": ..., "value": ..., "fields": "cn,mail"}

        Raises:
            NotFoundError: If no user matches
        """
        return self.http.get(f"{USERS_PATH}{self.build_query_string(params)}")
