"""Middleware tests: request/correlation IDs, security headers and request timeout."""

import asyncio

import pytest
from httpx import ASGITransport, AsyncClient

from app.application.interfaces import RoleUseCases
from app.main import create_app
from tests.fakes import ADMIN_TOKEN, ROLE, FakePermissionResolver, bearer


async def test_request_id_is_generated(client: AsyncClient) -> None:
    response = await client.get("/v1/health")
    request_id = response.headers["x-request-id"]
    assert len(request_id) == 36
    assert response.headers["x-correlation-id"] == request_id


async def test_client_request_id_is_forwarded(client: AsyncClient) -> None:
    response = await client.get(
        "/v1/health",
        headers={"X-Request-ID": "abc-123", "X-Correlation-ID": "flow_9"},
    )
    assert response.headers["x-request-id"] == "abc-123"
    assert response.headers["x-correlation-id"] == "flow_9"


async def test_unsafe_request_id_is_replaced(client: AsyncClient) -> None:
    """Values outside [a-zA-Z0-9_-] are not echoed (log injection)."""
    response = await client.get("/v1/health", headers={"X-Request-ID": "bad id;forged"})
    assert response.headers["x-request-id"] != "bad id;forged"
    assert len(response.headers["x-request-id"]) == 36


async def test_request_id_on_error_responses(client: AsyncClient) -> None:
    response = await client.get("/v1/roles/r1", headers={"X-Request-ID": "req-401"})
    assert response.status_code == 401
    assert response.headers["x-request-id"] == "req-401"


async def test_security_headers_on_api(client: AsyncClient) -> None:
    response = await client.get("/v1/health")
    assert response.headers["x-content-type-options"] == "nosniff"
    assert response.headers["x-frame-options"] == "DENY"
    assert response.headers["content-security-policy"].startswith("default-src 'none'")


async def test_docs_skip_strict_csp(client: AsyncClient) -> None:
    response = await client.get("/docs")
    assert "content-security-policy" not in response.headers
    assert response.headers["x-content-type-options"] == "nosniff"


async def test_slow_request_times_out_with_504(
    monkeypatch: pytest.MonkeyPatch,
    use_cases: RoleUseCases,
    permission_resolver: FakePermissionResolver,
) -> None:
    """A use case that outlives REQUEST_TIMEOUT_SECONDS is cancelled and answered with 504."""

    async def slow_execute(data: dict) -> dict:
        await asyncio.sleep(5)
        return ROLE

    monkeypatch.setenv("REQUEST_TIMEOUT_SECONDS", "0.05")
    use_cases.get_by_id.execute.side_effect = slow_execute
    app = create_app(role_use_cases=use_cases, permission_resolver=permission_resolver)
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        response = await ac.get(
            "/v1/roles/r1", headers={**bearer(ADMIN_TOKEN), "X-Request-ID": "slow-1"}
        )
    assert response.status_code == 504
    body = response.json()
    assert body["error"] == "GATEWAY_TIMEOUT"
    assert body["details"] == {"timeout_seconds": 0.05}
    assert response.headers["x-request-id"] == "slow-1"
    assert response.headers["x-content-type-options"] == "nosniff"


async def test_fast_request_is_not_affected_by_timeout(
    monkeypatch: pytest.MonkeyPatch,
    use_cases: RoleUseCases,
    permission_resolver: FakePermissionResolver,
) -> None:
    monkeypatch.setenv("REQUEST_TIMEOUT_SECONDS", "5")
    app = create_app(role_use_cases=use_cases, permission_resolver=permission_resolver)
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        response = await ac.get("/v1/roles/r1", headers=bearer(ADMIN_TOKEN))
    assert response.status_code == 200
    assert response.json() == ROLE
