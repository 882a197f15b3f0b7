"""
tests.conftest

Shared fixtures: an in-memory upstream and security-context helpers.

Responsibilities:
- Provide a fake satisfying `OwnershipLookup` that records every lookup it serves.
- Build signed-in / anonymous security contexts without going through JWT.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import pytest

from insurance_assistant.auth.models import IdentityToken, SecurityContext
from insurance_assistant.insurance_client.models import (
    AutoClaimDto,
    ClaimDto,
    HealthClaimDto,
    HomeClaimDto,
    PolicyDto,
)
from insurance_assistant.security.identity import DEFAULT_CUSTOMER_ID_CLAIM
from insurance_assistant.security.middleware import AuthorizationMiddleware
from insurance_assistant.security.ownership import OwnershipResolver


class FakeInsuranceStore:
    """
    Customer 1 owns policy 10 (POL-10); customer 2 owns policy 20 (POL-20).
    Each policy has one claim of every kind:
    - policy 10: auto 100, home 101, health 102
    - policy 20: auto 99, home 201, health 202
    """

    def __init__(self) -> None:
        self.calls: list[tuple[str, Any]] = []
        self.policies: dict[int, PolicyDto] = {
            10: PolicyDto(id=10, policy_number="POL-10", customer_id=1),
            20: PolicyDto(id=20, policy_number="POL-20", customer_id=2),
        }
        self.auto_claims: dict[int, ClaimDto] = {
            100: AutoClaimDto(id=100, policy_id=10),
            99: AutoClaimDto(id=99, policy_id=20),
        }
        self.home_claims: dict[int, ClaimDto] = {
            101: HomeClaimDto(id=101, policy_id=10),
            201: HomeClaimDto(id=201, policy_id=20),
        }
        self.health_claims: dict[int, ClaimDto] = {
            102: HealthClaimDto(id=102, policy_id=10),
            202: HealthClaimDto(id=202, policy_id=20),
        }
        self.fail_with: Exception | None = None

    def _record(self, name: str, arg: Any) -> None:
        self.calls.append((name, arg))
        if self.fail_with is not None:
            raise self.fail_with

    async def get_policy_by_id(self, policy_id: int) -> PolicyDto | None:
        self._record("get_policy_by_id", policy_id)
        return self.policies.get(policy_id)

    async def get_policy_by_number(self, policy_number: str) -> PolicyDto | None:
        self._record("get_policy_by_number", policy_number)
        for policy in self.policies.values():
            if policy.policy_number == policy_number:
                return policy
        return None

    async def get_auto_claim_by_id(self, claim_id: int) -> ClaimDto | None:
        self._record("get_auto_claim_by_id", claim_id)
        return self.auto_claims.get(claim_id)

    async def get_home_claim_by_id(self, claim_id: int) -> ClaimDto | None:
        self._record("get_home_claim_by_id", claim_id)
        return self.home_claims.get(claim_id)

    async def get_health_claim_by_id(self, claim_id: int) -> ClaimDto | None:
        self._record("get_health_claim_by_id", claim_id)
        return self.health_claims.get(claim_id)


def signed_in(customer_id: Any, *, claim: str = DEFAULT_CUSTOMER_ID_CLAIM) -> SecurityContext:
    return SecurityContext.for_token(
        IdentityToken(claims={"sub": f"user-{customer_id}", claim: customer_id})
    )


ContextFactory = Callable[..., SecurityContext]


@pytest.fixture
def context_for() -> ContextFactory:
    return signed_in


@pytest.fixture
def store() -> FakeInsuranceStore:
    return FakeInsuranceStore()


@pytest.fixture
def resolver(store: FakeInsuranceStore) -> OwnershipResolver:
    return OwnershipResolver(lookup=store)


@pytest.fixture
def middleware(resolver: OwnershipResolver) -> AuthorizationMiddleware:
    return AuthorizationMiddleware(resolver=resolver)
