"""Group management operations within B2B organizations."""
from __future__ import annotations
from typing import Any, Dict, Mapping, Optional

from .base import BaseResource, encode_segment
from .organizations import ORGANIZATIONS_PATH


class GroupsResource(BaseResource):
    """Service for managing organization groups and memberships."""

    def _groups_path(self, organization_id: str) -> str:
        return f"{ORGANIZATIONS_PATH}/{encode_segment(organization_id)}/groups"

    def _group_path(self, organization_id: str, group_id: str) -> str:
        return f"{self._groups_path(organization_id)}/{encode_segment(group_id)}"

    def create(self, organization_id: str, data: Mapping[str, Any]) -> Dict[str, Any]:
        """Create a group.

        Args:
            organization_id: Organization ID
            data: {"name": ..., "description"?: ...}

        Returns:
            Group representation
        """
        return self.http.post(self._groups_path(organization_id), data)

    def list(self, organization_id: str, params: Optional[Mapping[str, Any]] = None) -> Dict[str, Any]:
        """List groups with optional pagination (page, limit)."""
        return self.http.get(f"{self._groups_path(organization_id)}{self.build_query_string(params)}")

    def get(self, organization_id: str, group_id: str) -> Dict[str, Any]:
        return self.http.get(self._group_path(organization_id, group_id))

    def update(self, organization_id: str, group_id: str, data: Mapping[str, Any]) -> Dict[str, Any]:
        return self.http.patch(self._group_path(organization_id, group_id), data)

    def delete(self, organization_id: str, group_id: str) -> Dict[str, Any]:
        return self.http.delete(self._group_path(organization_id, group_id))

    def add_members(self, organization_id: str, group_id: str, data: Mapping[str, Any]) -> Dict[str, Any]:
        """Add users to a group.

        Args:
            organization_id: Organization ID
            group_id: Group ID
            data: {"usernames": [...]}
        """
        return self.http.post(f"{self._group_path(organization_id, group_id)}/members", data)

    def remove_member(self, organization_id: str, group_id: str, user_id: str) -> Dict[str, Any]:
        return self.http.delete(
            f"{self._group_path(organization_id, group_id)}/members/{encode_segment(user_id)}"
        )
