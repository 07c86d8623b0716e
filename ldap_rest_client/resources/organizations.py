"""Organization management operations, including B2B users."""
from __future__ import annotations
from typing import Any, Dict, List, Mapping, Optional

from .base import BaseResource, encode_segment

ORGANIZATIONS_PATH = "/api/v1/organizations"


class OrganizationsResource(BaseResource):
    """Service for managing organizations and their users."""

    def _org_path(self, organization_id: str) -> str:
        return f"{ORGANIZATIONS_PATH}/{encode_segment(organization_id)}"

    def _user_path(self, organization_id: str, user_id: str) -> str:
        return f"{self._org_path(organization_id)}/users/{encode_segment(user_id)}"

    def create(self, data: Mapping[str, Any]) -> Dict[str, Any]:
        """Create an organization with its LDAP branch.

        Args:
            data: {"id", "name", "domain", "metadata"?}

        Returns:
            {"success": True, "organization": {...}}
        """
        return self.http.post(ORGANIZATIONS_PATH, data)

    def check_availability(self, params: Mapping[str, Any]) -> Dict[str, Any]:
        return self.http.get(f"{ORGANIZATIONS_PATH}/check{self.build_query_string(params)}")

    def create_admin(self, organization_id: str, data: Mapping[str, Any]) -> Dict[str, Any]:
        """Link an existing B2C user as organization administrator."""
        return self.http.post(f"{self._org_path(organization_id)}/admin", data)

    def list(self) -> List[Dict[str, Any]]:
        return self.http.get(ORGANIZATIONS_PATH)

    def get(self, organization_id: str) -> Dict[str, Any]:
        return self.http.get(self._org_path(organization_id))

    def update(self, organization_id: str, data: Mapping[str, Any]) -> Dict[str, Any]:
        return self.http.patch(self._org_path(organization_id), data)

    def get_owner(self, organization_id: str) -> Dict[str, Any]:
        """Return {"owner": {...} | None}."""
        return self.http.get(f"{self._org_path(organization_id)}/owner")

    def set_owner(self, organization_id: str, data: Mapping[str, Any]) -> Dict[str, Any]:
        return self.http.post(f"{self._org_path(organization_id)}/owner", data)

    def transfer_ownership(self, organization_id: str, data: Mapping[str, Any]) -> Dict[str, Any]:
        """Transfer ownership to another organization member.

        Args:
            organization_id: Organization ID
            data: {"newOwnerUsername": ...}
        """
        return self.http.put(f"{self._org_path(organization_id)}/owner", data)

    def delete(self, organization_id: str) -> Dict[str, Any]:
        return self.http.delete(self._org_path(organization_id))

    # ─────────────────────────────────────────────────────────────────────────
    # B2B user management
    # ─────────────────────────────────────────────────────────────────────────
    def create_user(self, organization_id: str, data: Mapping[str, Any]) -> Dict[str, Any]:
        """Create a user inside the organization branch.

        Returns:
            {"baseDN": ...}
        """
        return self.http.post(f"{self._org_path(organization_id)}/users", data)

    def update_user(self, organization_id: str, user_id: str, data: Mapping[str, Any]) -> Dict[str, Any]:
        return self.http.patch(self._user_path(organization_id, user_id), data)

    def disable_user(self, organization_id: str, user_id: str) -> Dict[str, Any]:
        return self.http.post(f"{self._user_path(organization_id, user_id)}/disable")

    def delete_user(self, organization_id: str, user_id: str) -> Dict[str, Any]:
        return self.http.delete(self._user_path(organization_id, user_id))

    def get_user(self, organization_id: str, params: Mapping[str, Any]) -> Dict[str, Any]:
        """Fetch one organization user by username, email or phone."""
        return self.http.get(f"{self._org_path(organization_id)}/users{self.build_query_string(params)}")

    def list_users(self, organization_id: str, params: Optional[Mapping[str, Any]] = None) -> Dict[str, Any]:
        """List organization users with pagination and filters.

        Args:
            organization_id: Organization ID
            params: page, limit, status, search, sortBy, sortOrder, isTechnical

        Returns:
            {"users": [...], "pagination": {...}}
        """
        return self.http.get(f"{self._org_path(organization_id)}/users{self.build_query_string(params)}")

    def check_user_availability(self, organization_id: str, params: Mapping[str, Any]) -> Dict[str, Any]:
        return self.http.get(f"{self._org_path(organization_id)}/users/check{self.build_query_string(params)}")

    def change_user_role(self, organization_id: str, user_id: str, data: Mapping[str, Any]) -> Dict[str, Any]:
        """Change a member's role ("admin", "moderator" or "member")."""
        return self.http.patch(f"{self._user_path(organization_id, user_id)}/role", data)
