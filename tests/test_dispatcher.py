"""
tests.test_dispatcher

Dispatcher end to end: raw tool arguments in, JSON-ready envelopes out, with the real
HTTP client talking to a `httpx.MockTransport` upstream.
"""

from __future__ import annotations

import json
from typing import Any

import httpx
import pytest

from insurance_assistant.functions import names
from insurance_assistant.functions.catalog import build_default_catalog
from insurance_assistant.functions.dispatcher import (
    INVALID_ARGUMENTS_MESSAGE,
    UNKNOWN_FUNCTION_MESSAGE,
    FunctionDispatcher,
)
from insurance_assistant.insurance_client.http import InsuranceApiClient
from insurance_assistant.security.middleware import (
    OPERATION_FAILED_MESSAGE,
    RECORD_NOT_FOUND_MESSAGE,
    AuthorizationMiddleware,
)
from insurance_assistant.security.outcomes import DENIAL_MESSAGES, DenialReason
from insurance_assistant.security.ownership import OwnershipResolver

POLICIES = {
    10: {"id": 10, "policyNumber": "POL-10", "customerId": 1, "premium": "120.50"},
    20: {"id": 20, "policyNumber": "POL-20", "customerId": 2},
}


class Upstream:
    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        path = request.url.path.removeprefix("/api/v1")
        method = request.method

        policy_ref = path.removeprefix("/policies/")
        if method == "GET" and path.startswith("/policies/") and policy_ref.isdigit():
            policy = POLICIES.get(int(policy_ref))
            return httpx.Response(200, json=policy) if policy else httpx.Response(404)
        if method == "GET" and path == "/customers/1":
            return httpx.Response(200, json={"id": 1, "firstName": "Ada", "loyaltyTier": "GOLD"})
        if method == "GET" and path == "/policies/10/home-claims":
            return httpx.Response(200, json=[{"id": 101, "policyId": 10, "status": "OPEN"}])
        if method == "POST" and path == "/claims/auto":
            return httpx.Response(201, json={**json.loads(request.content), "id": 900})
        if method == "GET" and path == "/customers/2":
            return httpx.Response(503)
        if method == "GET" and path == "/claims/auto/100":
            return httpx.Response(200, json={"id": 100, "policyId": 10, "description": "dent"})
        if method == "GET" and path == "/policies/number/POL-10":
            return httpx.Response(200, json=POLICIES[10])
        if method == "GET" and path == "/customers/by-policy-number/POL-10":
            return httpx.Response(200, json={"id": 1, "firstName": "Ada"})
        if method == "PUT" and path in {"/customers/1", "/policies/10", "/claims/auto/100"}:
            return httpx.Response(200, json=json.loads(request.content))
        return httpx.Response(404)


@pytest.fixture
def upstream() -> Upstream:
    return Upstream()


@pytest.fixture
def dispatcher(upstream: Upstream) -> FunctionDispatcher:
    http = httpx.AsyncClient(
        transport=httpx.MockTransport(upstream), base_url="http://insurance.test/api/v1"
    )
    client = InsuranceApiClient(http=http)
    return FunctionDispatcher(
        catalog=build_default_catalog(),
        middleware=AuthorizationMiddleware(resolver=OwnershipResolver(lookup=client)),
        client=client,
    )


@pytest.mark.asyncio
async def test_success_data_is_json_ready(dispatcher, context_for) -> None:
    env = await dispatcher.invoke(names.GET_CUSTOMER_BY_ID, {"customerId": 1}, context_for(1))
    assert env.success is True
    # Unknown upstream fields pass through untouched.
    assert env.data == {"id": 1, "firstName": "Ada", "loyaltyTier": "GOLD"}


@pytest.mark.asyncio
async def test_list_results_and_query_params(dispatcher, upstream, context_for) -> None:
    env = await dispatcher.invoke(
        names.GET_HOME_CLAIMS_BY_POLICY_ID, {"policyId": 10, "status": "OPEN"}, context_for(1)
    )
    assert env.success is True
    assert env.data == [{"id": 101, "policyId": 10, "status": "OPEN"}]

    listing = upstream.requests[-1]
    assert listing.url.path == "/api/v1/policies/10/home-claims"
    assert dict(listing.url.params) == {"status": "OPEN"}


@pytest.mark.asyncio
async def test_create_claim_sets_discriminator(dispatcher, upstream, context_for) -> None:
    env = await dispatcher.invoke(
        names.CREATE_AUTO_CLAIM,
        {"claim": {"policyId": 10, "description": "rear-ended", "licensePlate": "B-AA 1"}},
        context_for(1),
    )
    assert env.success is True
    assert env.data["id"] == 900

    sent = json.loads(upstream.requests[-1].content)
    assert sent["claimType"] == "AutoClaimDto"
    assert sent["policyId"] == 10


@pytest.mark.asyncio
async def test_create_claim_on_foreign_policy_is_refused(dispatcher, upstream, context_for) -> None:
    env = await dispatcher.invoke(
        names.CREATE_AUTO_CLAIM, {"claim": {"policyId": 20}}, context_for(1)
    )
    assert env.error_message == DENIAL_MESSAGES[DenialReason.owner_mismatch]
    assert all(req.method == "GET" for req in upstream.requests)


@pytest.mark.asyncio
async def test_unknown_function(dispatcher, context_for) -> None:
    env = await dispatcher.invoke("transferFunds", {}, context_for(1))
    assert env.success is False
    assert env.error_message == UNKNOWN_FUNCTION_MESSAGE
    assert "transferFunds" not in dispatcher


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "arguments",
    [
        {},
        {"customerId": "one"},
        {"customerId": 1, "isAdmin": True},
    ],
)
async def test_bad_arguments_are_not_understood(
    dispatcher, upstream, context_for, arguments: dict[str, Any]
) -> None:
    env = await dispatcher.invoke(names.GET_CUSTOMER_BY_ID, arguments, context_for(1))
    assert env.error_message == INVALID_ARGUMENTS_MESSAGE
    assert upstream.requests == []


@pytest.mark.asyncio
async def test_blocked_answer_ignores_arguments(dispatcher, upstream, context_for) -> None:
    for arguments in ({"customerId": 1}, {"garbage": True}, None):
        env = await dispatcher.invoke(names.DELETE_CUSTOMER, arguments, context_for(1))
        assert env.error_message == DENIAL_MESSAGES[DenialReason.blocked]
    assert upstream.requests == []


@pytest.mark.asyncio
async def test_upstream_failures_after_authorization(dispatcher, context_for) -> None:
    # Customer 3 is unknown upstream; the lookup for customer 2 fails with a 503.
    env = await dispatcher.invoke(names.GET_CUSTOMER_BY_ID, {"customerId": 3}, context_for(3))
    assert env.error_message == RECORD_NOT_FOUND_MESSAGE

    env = await dispatcher.invoke(names.GET_CUSTOMER_BY_ID, {"customerId": 2}, context_for(2))
    assert env.error_message == OPERATION_FAILED_MESSAGE


@pytest.mark.asyncio
async def test_handoff_needs_sign_in_but_no_ownership(dispatcher, upstream, context_for) -> None:
    env = await dispatcher.invoke(
        names.INFORM_HUMAN_OPERATOR, {"reason": "wants to dispute a premium"}, context_for(5)
    )
    assert env.success is True
    assert env.data["status"] == "SUCCESS"
    assert upstream.requests == []

    env = await dispatcher.invoke(names.INFORM_HUMAN_OPERATOR, {"reason": "x"}, None)
    assert env.error_message == DENIAL_MESSAGES[DenialReason.not_authenticated]


def _writes(upstream: Upstream) -> list[httpx.Request]:
    return [req for req in upstream.requests if req.method != "GET"]


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "function", [names.GET_CUSTOMER_BY_POLICY_NUMBER, names.GET_POLICY_BY_POLICY_NUMBER]
)
@pytest.mark.parametrize(
    "policy_number", ["../10", "a/../b", "x/../../policies/number/POL-10", "..", ""]
)
async def test_policy_numbers_that_could_change_the_path_are_not_understood(
    dispatcher, upstream, context_for, function: str, policy_number: str
) -> None:
    env = await dispatcher.invoke(function, {"policyNumber": policy_number}, context_for(1))
    assert env.error_message == INVALID_ARGUMENTS_MESSAGE
    assert upstream.requests == []


@pytest.mark.asyncio
async def test_policy_number_lookup_and_call_hit_the_same_record(
    dispatcher, upstream, context_for
) -> None:
    env = await dispatcher.invoke(
        names.GET_CUSTOMER_BY_POLICY_NUMBER, {"policyNumber": "POL-10"}, context_for(1)
    )
    assert env.success is True
    assert env.data == {"id": 1, "firstName": "Ada"}
    assert [req.url.raw_path for req in upstream.requests] == [
        b"/api/v1/policies/number/POL-10",
        b"/api/v1/customers/by-policy-number/POL-10",
    ]


@pytest.mark.asyncio
async def test_claim_cannot_be_moved_onto_a_foreign_policy(
    dispatcher, upstream, context_for
) -> None:
    env = await dispatcher.invoke(
        names.UPDATE_AUTO_CLAIM, {"claimId": 100, "claim": {"policyId": 20}}, context_for(1)
    )
    assert env.error_message == DENIAL_MESSAGES[DenialReason.owner_mismatch]
    assert _writes(upstream) == []
    assert [req.url.path for req in upstream.requests] == [
        "/api/v1/claims/auto/100",
        "/api/v1/policies/10",
        "/api/v1/policies/20",
    ]


@pytest.mark.asyncio
async def test_claim_update_writes_the_authorized_claim(dispatcher, upstream, context_for) -> None:
    env = await dispatcher.invoke(
        names.UPDATE_AUTO_CLAIM,
        {"claimId": 100, "claim": {"id": 99, "policyId": 10, "description": "scratch"}},
        context_for(1),
    )
    assert env.success is True

    (put,) = _writes(upstream)
    assert put.url.path == "/api/v1/claims/auto/100"
    sent = json.loads(put.content)
    assert sent["id"] == 100
    assert sent["policyId"] == 10


@pytest.mark.asyncio
async def test_policy_cannot_be_handed_to_another_customer(
    dispatcher, upstream, context_for
) -> None:
    env = await dispatcher.invoke(
        names.UPDATE_POLICY,
        {"policyId": 10, "policy": {"id": 20, "customerId": 2}},
        context_for(1),
    )
    assert env.error_message == DENIAL_MESSAGES[DenialReason.owner_mismatch]
    assert _writes(upstream) == []


@pytest.mark.asyncio
async def test_policy_update_writes_the_authorized_policy(
    dispatcher, upstream, context_for
) -> None:
    env = await dispatcher.invoke(
        names.UPDATE_POLICY,
        {"policyId": 10, "policy": {"id": 20, "customerId": 1, "type": "AUTO"}},
        context_for(1),
    )
    assert env.success is True

    (put,) = _writes(upstream)
    assert put.url.path == "/api/v1/policies/10"
    sent = json.loads(put.content)
    assert sent["id"] == 10
    assert sent["customerId"] == 1


@pytest.mark.asyncio
async def test_customer_update_writes_the_authorized_customer(
    dispatcher, upstream, context_for
) -> None:
    env = await dispatcher.invoke(
        names.UPDATE_CUSTOMER,
        {"customerId": 1, "customer": {"id": 2, "firstName": "Ada"}},
        context_for(1),
    )
    assert env.success is True

    (put,) = _writes(upstream)
    assert put.url.path == "/api/v1/customers/1"
    assert json.loads(put.content)["id"] == 1
