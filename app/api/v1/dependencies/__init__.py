"""Presentation-layer dependency injection (composition root).

Provides FastAPI Depends() for the permission check and the role use cases.
Routes depend only on these, never on app.state directly.
"""

from app.api.v1.dependencies.auth import (
    get_authorization_service,
    get_bearer_token,
    require_permission,
)
from app.api.v1.dependencies.roles import (
    get_role_add_permission_use_case,
    get_role_create_use_case,
    get_role_delete_use_case,
    get_role_get_by_id_use_case,
    get_role_list_use_case,
    get_role_remove_permission_use_case,
    get_role_update_use_case,
    get_role_use_cases,
)

__all__ = [
    "get_authorization_service",
    "get_bearer_token",
    "get_role_add_permission_use_case",
    "get_role_create_use_case",
    "get_role_delete_use_case",
    "get_role_get_by_id_use_case",
    "get_role_list_use_case",
    "get_role_remove_permission_use_case",
    "get_role_update_use_case",
    "get_role_use_cases",
    "require_permission",
]
