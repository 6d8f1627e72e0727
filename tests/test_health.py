"""Smoke tests for the health endpoints and app wiring."""

from httpx import AsyncClient


async def test_health_returns_ok(client: AsyncClient) -> None:
    response = await client.get("/api/health")
    assert response.status_code == 200
    assert response.json().get("status") == "ok"


async def test_readiness_checks_database(client: AsyncClient) -> None:
    response = await client.get("/api/health/ready")
    assert response.status_code == 200


async def test_responses_carry_request_id(client: AsyncClient) -> None:
    response = await client.get("/api/health", headers={"X-Request-ID": "abc-123"})
    assert response.headers["X-Request-ID"] == "abc-123"
    assert (await client.get("/api/health")).headers.get("X-Request-ID")


async def test_unknown_route_uses_error_envelope(client: AsyncClient) -> None:
    response = await client.get("/api/nothing-here")
    assert response.status_code == 404
    assert response.json()["error"] == "HTTP_ERROR"
