"""Role use-case dependencies (composition root).

Use cases are wired onto app.state.role_use_cases by create_app(); routes
depend on one port each and never reach into app.state themselves.
"""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends, Request

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
from app.domain.exceptions import ServiceNotConfiguredException


def get_role_use_cases(request: Request) -> RoleUseCases:
    """Return the role use cases wired into this app; 503 when none were."""
    use_cases = getattr(request.app.state, "role_use_cases", None)
    if use_cases is None:
        raise ServiceNotConfiguredException("Role use cases")
    return use_cases


RoleUseCasesDep = Annotated[RoleUseCases, Depends(get_role_use_cases)]


def get_role_create_use_case(use_cases: RoleUseCasesDep) -> IRoleCreateUseCase:
    return use_cases.create


def get_role_update_use_case(use_cases: RoleUseCasesDep) -> IRoleUpdateUseCase:
    return use_cases.update


def get_role_get_by_id_use_case(use_cases: RoleUseCasesDep) -> IRoleGetByIdUseCase:
    return use_cases.get_by_id


def get_role_list_use_case(use_cases: RoleUseCasesDep) -> IRoleListUseCase:
    return use_cases.list


def get_role_delete_use_case(use_cases: RoleUseCasesDep) -> IRoleDeleteUseCase:
    return use_cases.delete


def get_role_add_permission_use_case(
    use_cases: RoleUseCasesDep,
) -> IRoleAddPermissionUseCase:
    return use_cases.add_permission


def get_role_remove_permission_use_case(
    use_cases: RoleUseCasesDep,
) -> IRoleRemovePermissionUseCase:
    return use_cases.remove_permission
