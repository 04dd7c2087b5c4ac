"""API schemas (OpenAPI documentation models)."""

from app.schemas.error import ErrorResponse
from app.schemas.health import HealthResponse
from app.schemas.role import PermissionResponse, RoleListResponse, RoleResponse

__all__ = [
    "ErrorResponse",
    "HealthResponse",
    "PermissionResponse",
    "RoleListResponse",
    "RoleResponse",
]
