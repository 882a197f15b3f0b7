"""
tests.test_smoke

Smoke tests for the HTTP surface.

Responsibilities:
- Ensure the FastAPI app starts and its probes answer.
- Exercise one full request path: dev token -> bearer auth -> function invocation ->
  upstream (mocked) -> envelope.
"""

from __future__ import annotations

import httpx
import pytest

from insurance_assistant.api.app import create_app
from insurance_assistant.functions import names
from insurance_assistant.security.outcomes import DENIAL_MESSAGES, DenialReason
from insurance_assistant.settings import Settings


def _upstream() -> httpx.AsyncClient:
    def handler(request: httpx.Request) -> httpx.Response:
        if request.url.path == "/api/v1/policies/number/POL-10":
            return httpx.Response(
                200, json={"id": 10, "policyNumber": "POL-10", "customerId": 1, "premium": 99}
            )
        return httpx.Response(404)

    return httpx.AsyncClient(
        transport=httpx.MockTransport(handler), base_url="http://insurance.test/api/v1"
    )


@pytest.mark.asyncio
async def test_health_endpoints() -> None:
    app = create_app(settings=Settings(env="test"), http=_upstream())

    # httpx ASGITransport does not run the lifespan; drive it explicitly.
    async with app.router.lifespan_context(app):
        transport = httpx.ASGITransport(app=app)
        async with httpx.AsyncClient(transport=transport, base_url="http://test") as client:
            r = await client.get("/healthz")
            assert r.status_code == 200
            assert r.json()["status"] == "ok"
            assert "x-request-id" in r.headers

            r = await client.get("/readyz")
            assert r.status_code == 200
            assert r.json()["status"] == "ready"


@pytest.mark.asyncio
async def test_function_listing() -> None:
    app = create_app(settings=Settings(env="test"), http=_upstream())

    async with app.router.lifespan_context(app):
        transport = httpx.ASGITransport(app=app)
        async with httpx.AsyncClient(transport=transport, base_url="http://test") as client:
            r = await client.get("/v1/functions")
            assert r.status_code == 200
            body = r.json()
            listed = {f["name"]: f for f in body["functions"]}
            assert set(listed) == names.ADVERTISED_FUNCTIONS
            assert listed[names.DELETE_CUSTOMER]["blockedForAi"] is True
            assert listed[names.GET_POLICY_BY_ID]["blockedForAi"] is False
            assert len(body["tools"]) == len(listed)


@pytest.mark.asyncio
async def test_invoke_with_dev_token() -> None:
    app = create_app(settings=Settings(env="test"), http=_upstream())

    async with app.router.lifespan_context(app):
        transport = httpx.ASGITransport(app=app)
        async with httpx.AsyncClient(transport=transport, base_url="http://test") as client:
            r = await client.post("/v1/dev/token", json={"subject": "ada", "customer_id": 1})
            assert r.status_code == 200
            auth = {"Authorization": f"Bearer {r.json()['access_token']}"}

            url = f"/v1/functions/{names.GET_POLICY_BY_POLICY_NUMBER}"
            r = await client.post(url, json={"arguments": {"policyNumber": "POL-10"}}, headers=auth)
            assert r.status_code == 200
            assert r.json() == {
                "success": True,
                "data": {"id": 10, "policyNumber": "POL-10", "customerId": 1, "premium": "99"},
                "errorMessage": None,
            }

            # No token: still an envelope, not an HTTP error.
            r = await client.post(url, json={"arguments": {"policyNumber": "POL-10"}})
            assert r.status_code == 200
            assert r.json()["errorMessage"] == DENIAL_MESSAGES[DenialReason.not_authenticated]

            # A forged token is treated as no token.
            r = await client.post(
                url,
                json={"arguments": {"policyNumber": "POL-10"}},
                headers={"Authorization": "Bearer not-a-jwt"},
            )
            assert r.json()["success"] is False

            r = await client.post("/v1/functions/transferFunds", json={}, headers=auth)
            assert r.status_code == 404


@pytest.mark.asyncio
async def test_dev_token_is_hidden_in_prod() -> None:
    app = create_app(settings=Settings(env="prod"), http=_upstream())

    async with app.router.lifespan_context(app):
        transport = httpx.ASGITransport(app=app)
        async with httpx.AsyncClient(transport=transport, base_url="http://test") as client:
            r = await client.post("/v1/dev/token", json={"subject": "ada", "customer_id": 1})
            assert r.status_code == 404
