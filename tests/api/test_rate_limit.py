"""Rate limiting on the write routes (120 requests/minute per client)."""

import pytest
from httpx import ASGITransport, AsyncClient

from app.application.interfaces import RoleUseCases
from app.main import create_app
from tests.fakes import ADMIN_TOKEN, FakePermissionResolver, bearer

WRITE_LIMIT = 120


async def test_write_route_returns_429_past_the_limit(
    client: AsyncClient, use_cases: RoleUseCases, auth_headers: dict[str, str]
) -> None:
    for _ in range(WRITE_LIMIT):
        response = await client.delete("/v1/roles/r1", headers=auth_headers)
        assert response.status_code == 200
    response = await client.delete("/v1/roles/r1", headers=auth_headers)
    assert response.status_code == 429
    assert use_cases.delete.execute.await_count == WRITE_LIMIT


async def test_read_routes_are_not_limited(
    client: AsyncClient, auth_headers: dict[str, str]
) -> None:
    for _ in range(WRITE_LIMIT + 1):
        response = await client.get("/v1/roles/r1", headers=auth_headers)
    assert response.status_code == 200


async def test_rate_limit_can_be_disabled(
    monkeypatch: pytest.MonkeyPatch,
    use_cases: RoleUseCases,
    permission_resolver: FakePermissionResolver,
) -> None:
    monkeypatch.setenv("RATE_LIMIT_ENABLED", "false")
    app = create_app(role_use_cases=use_cases, permission_resolver=permission_resolver)
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        statuses = {
            (await ac.delete("/v1/roles/r1", headers=bearer(ADMIN_TOKEN))).status_code
            for _ in range(WRITE_LIMIT + 1)
        }
    assert statuses == {200}
