"""Role use-case interfaces (ports).

Each use case exposes a single async execute(); implementations live outside
this service and are injected at app creation. Failures are signalled by
raising RoleApiException subclasses.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Protocol

from app.application.dtos.role import RoleIdParams, RoleListInput, RolePayload


class IRoleCreateUseCase(Protocol):
    """Protocol for creating a role."""

    async def execute(self, data: RolePayload) -> Any:
        """Create a role from the request body."""


class IRoleUpdateUseCase(Protocol):
    """Protocol for updating a role (body carries the path id)."""

    async def execute(self, data: RolePayload) -> Any:
        """Update the role identified by data['id']."""


class IRoleGetByIdUseCase(Protocol):
    """Protocol for reading a role by id."""

    async def execute(self, data: RoleIdParams) -> Any:
        """Return the role identified by data['id']."""


class IRoleListUseCase(Protocol):
    """Protocol for listing roles (sorting, searching and paging are its concern)."""

    async def execute(self, data: RoleListInput) -> Any:
        """Return a page of roles."""


class IRoleDeleteUseCase(Protocol):
    """Protocol for deleting a role."""

    async def execute(self, data: RoleIdParams) -> Any:
        """Delete the role identified by data['id']."""


class IRoleAddPermissionUseCase(Protocol):
    """Protocol for granting permissions to a role."""

    async def execute(self, data: RolePayload) -> Any:
        """Add the permissions in data to the role identified by data['id']."""


class IRoleRemovePermissionUseCase(Protocol):
    """Protocol for revoking permissions from a role."""

    async def execute(self, data: RolePayload) -> Any:
        """Remove the permissions in data from the role identified by data['id']."""


@dataclass(frozen=True)
class RoleUseCases:
    """The seven role use cases wired into one app instance."""

    create: IRoleCreateUseCase
    update: IRoleUpdateUseCase
    get_by_id: IRoleGetByIdUseCase
    list: IRoleListUseCase
    delete: IRoleDeleteUseCase
    add_permission: IRoleAddPermissionUseCase
    remove_permission: IRoleRemovePermissionUseCase
