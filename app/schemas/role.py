"""Role API schemas.

The role payloads belong to the use cases, so these models only describe the
API in OpenAPI; route handlers forward bodies and results untouched.
"""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, Field


class PermissionResponse(BaseModel):
    """Permission attached to a role."""

    id: str
    name: str = Field(..., examples=["user:create"])


class RoleResponse(BaseModel):
    """Role detail response."""

    id: str
    name: str = Field(..., examples=["admin"])
    permissions: list[PermissionResponse] = Field(default_factory=list)
    created_at: datetime | None = None
    updated_at: datetime | None = None


class RoleListResponse(BaseModel):
    """Paginated role list response."""

    docs: list[RoleResponse]
    page: int
    limit: int
    total: int


ROLE_CREATE_EXAMPLES: dict[str, Any] = {
    "create": {
        "summary": "Create a role",
        "value": {"name": "admin"},
    },
}

ROLE_UPDATE_EXAMPLES: dict[str, Any] = {
    "rename": {
        "summary": "Rename a role",
        "value": {"name": "administrator"},
    },
}

ROLE_PERMISSIONS_EXAMPLES: dict[str, Any] = {
    "permissions": {
        "summary": "Permission names",
        "value": {"permissions": ["user:create", "user:list"]},
    },
}
