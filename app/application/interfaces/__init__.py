"""Application interfaces (ports): use-case and service protocols.

Define contracts for implementations injected at app creation (DIP).
No runtime imports from app.api.
"""

from app.application.interfaces.services import IPermissionResolver
from app.application.interfaces.use_cases import (
    IRoleAddPermissionUseCase,
    IRoleCreateUseCase,
    IRoleDeleteUseCase,
    IRoleGetByIdUseCase,
    IRoleListUseCase,
    IRoleRemovePermissionUseCase,
    IRoleUpdateUseCase,
    RoleUseCases,
)

__all__ = [
    "IPermissionResolver",
    "IRoleAddPermissionUseCase",
    "IRoleCreateUseCase",
    "IRoleDeleteUseCase",
    "IRoleGetByIdUseCase",
    "IRoleListUseCase",
    "IRoleRemovePermissionUseCase",
    "IRoleUpdateUseCase",
    "RoleUseCases",
]
