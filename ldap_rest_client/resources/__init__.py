"""API resources: thin path builders over the HTTP client."""
from .base import BaseResource, encode_segment
from .groups import GroupsResource
from .organizations import OrganizationsResource
from .users import UsersResource

__all__ = [
    "BaseResource",
    "encode_segment",
    "GroupsResource",
    "OrganizationsResource",
    "UsersResource",
]
