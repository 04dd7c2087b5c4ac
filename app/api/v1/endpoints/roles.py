"""Roles API: create, update, get, list, delete, add/remove permissions.

Every route declares the capability it needs and forwards its input to one
injected use case, returning the result unchanged. Errors raised by the use
cases reach the client through app.core.exception_handlers.
"""

from typing import Annotated, Any

from fastapi import APIRouter, Body, Depends, Path, Query, Request

from app.api.v1.dependencies import (
    get_role_add_permission_use_case,
    get_role_create_use_case,
    get_role_delete_use_case,
    get_role_get_by_id_use_case,
    get_role_list_use_case,
    get_role_remove_permission_use_case,
    get_role_update_use_case,
    require_permission,
)
from app.application.dtos.role import RoleListInput, RolePayload, with_role_id
from app.application.interfaces.use_cases import (
    IRoleAddPermissionUseCase,
    IRoleCreateUseCase,
    IRoleDeleteUseCase,
    IRoleGetByIdUseCase,
    IRoleListUseCase,
    IRoleRemovePermissionUseCase,
    IRoleUpdateUseCase,
)
from app.core.constants import (
    ROLE_ADD_PERMISSION,
    ROLE_CREATE,
    ROLE_DELETE,
    ROLE_DELETE_PERMISSION,
    ROLE_GET_BY_ID,
    ROLE_LIST,
    ROLE_UPDATE,
)
from app.core.limiter import limit_writes
from app.schemas.error import AUTH_ERROR_RESPONSES, NOT_FOUND_RESPONSE
from app.schemas.role import (
    ROLE_CREATE_EXAMPLES,
    ROLE_PERMISSIONS_EXAMPLES,
    ROLE_UPDATE_EXAMPLES,
    RoleListResponse,
    RoleResponse,
)
from app.shared.utils.query import parse_search, parse_sort, to_number

router = APIRouter()

RoleId = Annotated[str, Path(min_length=1, description="Role id")]


@router.post(
    "",
    status_code=200,
    response_model=None,
    responses={200: {"model": RoleResponse}, **AUTH_ERROR_RESPONSES},
    dependencies=[Depends(require_permission(ROLE_CREATE))],
)
@limit_writes
async def create(
    request: Request,
    body: Annotated[RolePayload, Body(openapi_examples=ROLE_CREATE_EXAMPLES)],
    use_case: Annotated[IRoleCreateUseCase, Depends(get_role_create_use_case)],
) -> Any:
    """Create a role."""
    return await use_case.execute(body)


@router.put(
    "/{role_id}",
    response_model=None,
    responses={200: {"model": RoleResponse}, **NOT_FOUND_RESPONSE, **AUTH_ERROR_RESPONSES},
    dependencies=[Depends(require_permission(ROLE_UPDATE))],
)
@limit_writes
async def update(
    request: Request,
    role_id: RoleId,
    body: Annotated[RolePayload, Body(openapi_examples=ROLE_UPDATE_EXAMPLES)],
    use_case: Annotated[IRoleUpdateUseCase, Depends(get_role_update_use_case)],
) -> Any:
    """Update a role. The path id overrides any id in the body."""
    return await use_case.execute(with_role_id(body, role_id))


@router.get(
    "/{role_id}",
    response_model=None,
    responses={200: {"model": RoleResponse}, **NOT_FOUND_RESPONSE, **AUTH_ERROR_RESPONSES},
    dependencies=[Depends(require_permission(ROLE_GET_BY_ID))],
)
async def get_by_id(
    role_id: RoleId,
    use_case: Annotated[IRoleGetByIdUseCase, Depends(get_role_get_by_id_use_case)],
) -> Any:
    """Get a role by id."""
    return await use_case.execute({"id": role_id})


@router.get(
    "",
    response_model=None,
    responses={200: {"model": RoleListResponse}, **AUTH_ERROR_RESPONSES},
    dependencies=[Depends(require_permission(ROLE_LIST))],
)
async def list_roles(
    use_case: Annotated[IRoleListUseCase, Depends(get_role_list_use_case)],
    limit: Annotated[str | None, Query(description="Page size", examples=["10"])] = None,
    page: Annotated[str | None, Query(description="Page number", examples=["1"])] = None,
    sort: Annotated[
        str | None, Query(description="field:asc|desc, comma separated", examples=["name:asc"])
    ] = None,
    search: Annotated[
        str | None, Query(description="field:value, comma separated", examples=["name:admin"])
    ] = None,
) -> Any:
    """List roles.

    sort and search are validated here (400 when malformed); limit and page
    are coerced like JavaScript Number(), so non-numeric values reach the use
    case as NaN.
    """
    data = RoleListInput(
        sort=parse_sort(sort),
        search=parse_search(search),
        limit=to_number(limit),
        page=to_number(page),
    )
    return await use_case.execute(data)


@router.delete(
    "/{role_id}",
    response_model=None,
    responses={200: {"model": RoleResponse}, **NOT_FOUND_RESPONSE, **AUTH_ERROR_RESPONSES},
    dependencies=[Depends(require_permission(ROLE_DELETE))],
)
@limit_writes
async def delete(
    request: Request,
    role_id: RoleId,
    use_case: Annotated[IRoleDeleteUseCase, Depends(get_role_delete_use_case)],
) -> Any:
    """Delete a role."""
    return await use_case.execute({"id": role_id})


@router.put(
    "/add-permissions/{role_id}",
    response_model=None,
    responses={200: {"model": RoleResponse}, **NOT_FOUND_RESPONSE, **AUTH_ERROR_RESPONSES},
    dependencies=[Depends(require_permission(ROLE_ADD_PERMISSION))],
)
@limit_writes
async def add_permissions(
    request: Request,
    role_id: RoleId,
    body: Annotated[RolePayload, Body(openapi_examples=ROLE_PERMISSIONS_EXAMPLES)],
    use_case: Annotated[
        IRoleAddPermissionUseCase, Depends(get_role_add_permission_use_case)
    ],
) -> Any:
    """Grant permissions to a role."""
    return await use_case.execute(with_role_id(body, role_id))


@router.put(
    "/remove-permissions/{role_id}",
    status_code=200,
    response_model=None,
    responses={200: {"model": RoleResponse}, **NOT_FOUND_RESPONSE, **AUTH_ERROR_RESPONSES},
    dependencies=[Depends(require_permission(ROLE_DELETE_PERMISSION))],
)
@limit_writes
async def remove_permissions(
    request: Request,
    role_id: RoleId,
    body: Annotated[RolePayload, Body(openapi_examples=ROLE_PERMISSIONS_EXAMPLES)],
    use_case: Annotated[
        IRoleRemovePermissionUseCase, Depends(get_role_remove_permission_use_case)
    ],
) -> Any:
    """Revoke permissions from a role. Always answers 200 on success."""
    return await use_case.execute(with_role_id(body, role_id))
