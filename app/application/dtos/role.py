"""DTOs handed to role use cases (no dependency on HTTP or ORM).

Request bodies are owned by the use cases, so the HTTP layer forwards them
as plain JSON objects; only the list query has a fixed shape.
"""

from dataclasses import dataclass, field
from typing import Any

# JSON object forwarded to create/update/add-permission/remove-permission.
RolePayload = dict[str, Any]

# Path parameters forwarded to get-by-id/delete: {"id": <role id>}.
RoleIdParams = dict[str, str]


@dataclass(frozen=True)
class RoleListInput:
    """Parsed list query.

    limit/page keep JavaScript Number() semantics and may be NaN.
    """

    limit: int | float
    page: int | float
    sort: dict[str, int] = field(default_factory=dict)
    search: dict[str, str] = field(default_factory=dict)


def with_role_id(body: RolePayload, role_id: str) -> RolePayload:
    """Return a copy of body with the path id merged in (path id wins)."""
    return {**body, "id": role_id}
