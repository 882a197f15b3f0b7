"""
insurance_assistant.security.ownership

Ownership resolver: which customer owns the record a request points at.

Responsibilities:
- Resolve policy owners by technical id or by policy number (one upstream lookup).
- Resolve claim owners through the chain claim -> policy -> customer, for all claim kinds.
- Resolve the owners of records a request body links to (`resolve_ref`).
- Convert every failure (not found, upstream fault, malformed data) into
  `OwnershipResolutionError` so the caller never sees a raw collaborator exception.
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from typing import Protocol

from insurance_assistant.insurance_client.models import ClaimDto, ClaimKind, PolicyDto
from insurance_assistant.observability.logging import get_logger
from insurance_assistant.security.shapes import (
    ClaimOwned,
    CustomerOwned,
    OwnerRef,
    OwnershipShape,
    PolicyIdOwned,
    PolicyNumberOwned,
)

log = get_logger(__name__)


class OwnershipResolutionError(Exception):
    pass


class OwnerNotFoundError(OwnershipResolutionError):
    pass


class OwnershipLookup(Protocol):
    async def get_policy_by_id(self, policy_id: int) -> PolicyDto | None: ...

    async def get_policy_by_number(self, policy_number: str) -> PolicyDto | None: ...

    async def get_auto_claim_by_id(self, claim_id: int) -> ClaimDto | None: ...

    async def get_home_claim_by_id(self, claim_id: int) -> ClaimDto | None: ...

    async def get_health_claim_by_id(self, claim_id: int) -> ClaimDto | None: ...


def _positive(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and value > 0


class OwnershipResolver:
    """
    Stateless; every call goes to the upstream service (ownership is never cached, since a
    policy can change hands between two invocations).
    """

    def __init__(self, *, lookup: OwnershipLookup) -> None:
        self._lookup = lookup
        self._claim_lookups: dict[ClaimKind, Callable[[int], Awaitable[ClaimDto | None]]] = {
            ClaimKind.auto: lookup.get_auto_claim_by_id,
            ClaimKind.home: lookup.get_home_claim_by_id,
            ClaimKind.health: lookup.get_health_claim_by_id,
        }

    async def owner_of_policy(self, policy_id: int | None) -> int:
        if not _positive(policy_id):
            raise OwnerNotFoundError("policy id missing or invalid")
        policy = await self._lookup.get_policy_by_id(policy_id)
        return _policy_owner(policy, ref=f"policy id {policy_id}")

    async def owner_of_policy_number(self, policy_number: str | None) -> int:
        if not policy_number or not policy_number.strip():
            raise OwnerNotFoundError("policy number missing")
        policy = await self._lookup.get_policy_by_number(policy_number.strip())
        return _policy_owner(policy, ref=f"policy number {policy_number}")

    async def owner_of_claim(self, request: ClaimOwned) -> int:
        kind = type(request).claim_kind
        fetch = self._claim_lookups.get(kind) if kind is not None else None
        if fetch is None:
            raise OwnershipResolutionError(f"unsupported claim kind: {kind!r}")

        claim_id = request.owner_claim_id()
        if not _positive(claim_id):
            raise OwnerNotFoundError("claim id missing or invalid")

        claim = await fetch(claim_id)
        if claim is None:
            raise OwnerNotFoundError(f"{kind.value.lower()} claim {claim_id} not found")
        # Second hop: the claim's policy decides ownership.
        return await self.owner_of_policy(claim.policy_id)

    async def resolve(self, request: object, shape: OwnershipShape) -> int:
        return await self._guarded(shape, self._resolve(request, shape))

    async def resolve_ref(self, ref: OwnerRef) -> int:
        """Owner of a record referenced from a request body (see `AIRequest.linked_owner_refs`)."""
        return await self._guarded(ref.shape, self._resolve_ref(ref))

    async def _resolve(self, request: object, shape: OwnershipShape) -> int:
        if shape is OwnershipShape.customer and isinstance(request, CustomerOwned):
            return _customer_owner(request.owner_customer_id())
        if shape is OwnershipShape.policy_id and isinstance(request, PolicyIdOwned):
            return await self.owner_of_policy(request.owner_policy_id())
        if shape is OwnershipShape.policy_number and isinstance(request, PolicyNumberOwned):
            return await self.owner_of_policy_number(request.owner_policy_number())
        if shape is OwnershipShape.claim and isinstance(request, ClaimOwned):
            return await self.owner_of_claim(request)
        raise OwnershipResolutionError(f"no resolution for shape {shape.value}")

    async def _resolve_ref(self, ref: OwnerRef) -> int:
        if ref.shape is OwnershipShape.customer:
            return _customer_owner(ref.value)
        if ref.shape is OwnershipShape.policy_id:
            return await self.owner_of_policy(ref.value)
        if ref.shape is OwnershipShape.policy_number:
            return await self.owner_of_policy_number(ref.value)
        raise OwnershipResolutionError(f"no resolution for linked {ref.shape.value}")

    async def _guarded(self, shape: OwnershipShape, pending: Awaitable[int]) -> int:
        try:
            return await pending
        except OwnershipResolutionError:
            raise
        except Exception as e:
            # Upstream faults (HTTP errors, timeouts, malformed payloads) downgrade to
            # "cannot resolve"; cancellation is a BaseException and passes through.
            log.warning(
                "ownership_lookup_failed",
                shape=shape.value,
                error_type=type(e).__name__,
                error=str(e),
            )
            raise OwnershipResolutionError(f"ownership lookup failed: {type(e).__name__}") from e


def _customer_owner(customer_id: object) -> int:
    if not _positive(customer_id):
        raise OwnerNotFoundError("customer id missing or invalid")
    return customer_id


def _policy_owner(policy: PolicyDto | None, *, ref: str) -> int:
    if policy is None:
        raise OwnerNotFoundError(f"{ref} not found")
    if not _positive(policy.customer_id):
        raise OwnershipResolutionError(f"{ref} has no owning customer")
    return policy.customer_id


# --- Module Notes -----------------------------------------------------------
# `OwnershipLookup` is satisfied by `insurance_client.http.InsuranceApiClient`; tests use
# in-memory fakes with the same five coroutines.
