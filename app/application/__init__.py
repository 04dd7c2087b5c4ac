"""Application layer: interfaces, DTOs, services.

Depends only on domain and protocol definitions (DIP).
Use cases and the permission resolver are implemented elsewhere and injected.
"""

from app.application.dtos import RoleListInput
from app.application.interfaces import IPermissionResolver, RoleUseCases
from app.application.services.authorization_service import AuthorizationService

__all__ = [
    "AuthorizationService",
    "IPermissionResolver",
    "RoleListInput",
    "RoleUseCases",
]
