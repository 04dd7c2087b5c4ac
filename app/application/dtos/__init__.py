"""Application DTOs (no HTTP or ORM dependency)."""

from app.application.dtos.role import (
    RoleIdParams,
    RoleListInput,
    RolePayload,
    with_role_id,
)

__all__ = [
    "RoleIdParams",
    "RoleListInput",
    "RolePayload",
    "with_role_id",
]
