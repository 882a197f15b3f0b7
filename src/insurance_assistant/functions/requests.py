"""
insurance_assistant.functions.requests

Request models for every AI-callable function.

Each model inherits at most one ownership shape (see `security.shapes`). Models without a
shape belong to functions that are blocked for the assistant or not ownership-checked.
"""

from __future__ import annotations

from typing import ClassVar

from pydantic import Field

from insurance_assistant.insurance_client.models import (
    AssignAdjusterRequestDto,
    AutoClaimDto,
    ClaimDto,
    ClaimKind,
    CustomerDto,
    HealthClaimDto,
    HomeClaimDto,
    PolicyConditionsDto,
    PolicyDto,
)
from insurance_assistant.security.shapes import (
    AIRequest,
    ClaimOwned,
    CustomerOwned,
    OwnerRef,
    OwnershipShape,
    PolicyIdOwned,
    PolicyNumberOwned,
)

# Policy numbers such as POL-12345; nothing that could act as a path separator.
POLICY_NUMBER_PATTERN = r"^[A-Za-z0-9][A-Za-z0-9_-]{0,63}$"

# --- customers ----------------------------------------------------------------


class GetCustomerByIdReq(CustomerOwned):
    customer_id: int


class UpdateCustomerReq(CustomerOwned):
    customer_id: int
    customer: CustomerDto


class GetPoliciesByCustomerIdReq(CustomerOwned):
    customer_id: int


class DeleteCustomerReq(CustomerOwned):
    customer_id: int


class GetCustomerByPolicyNumberReq(PolicyNumberOwned):
    policy_number: str = Field(pattern=POLICY_NUMBER_PATTERN)


class CreateCustomerReq(AIRequest):
    customer: CustomerDto


class GetAllCustomersReq(AIRequest):
    name: str | None = None


# --- policies -----------------------------------------------------------------


class GetPolicyByIdReq(PolicyIdOwned):
    policy_id: int


class GetPolicyByPolicyNumberReq(PolicyNumberOwned):
    policy_number: str = Field(pattern=POLICY_NUMBER_PATTERN)


class CreatePolicyReq(CustomerOwned):
    policy: PolicyDto

    def owner_customer_id(self) -> int | None:
        # A new policy is owned by whoever it is being written for.
        return self.policy.customer_id


class UpdatePolicyReq(PolicyIdOwned):
    policy_id: int
    policy: PolicyDto

    def linked_owner_refs(self) -> tuple[OwnerRef, ...]:
        # The body must not hand the policy to another customer.
        if self.policy.customer_id is None:
            return ()
        return (OwnerRef(OwnershipShape.customer, self.policy.customer_id),)


class DeletePolicyReq(PolicyIdOwned):
    policy_id: int


class GetAllPoliciesReq(AIRequest):
    pass


class GetClaimsByPolicyIdReq(PolicyIdOwned):
    claim_kind: ClassVar[ClaimKind]

    policy_id: int
    page: int | None = Field(default=None, ge=0)
    size: int | None = Field(default=None, ge=1, le=100)
    status: str | None = None


class GetAutoClaimsByPolicyIdReq(GetClaimsByPolicyIdReq):
    claim_kind: ClassVar[ClaimKind] = ClaimKind.auto


class GetHomeClaimsByPolicyIdReq(GetClaimsByPolicyIdReq):
    claim_kind: ClassVar[ClaimKind] = ClaimKind.home


class GetHealthClaimsByPolicyIdReq(GetClaimsByPolicyIdReq):
    claim_kind: ClassVar[ClaimKind] = ClaimKind.health


class GetPolicyConditionsReq(AIRequest):
    pass


class UpdatePolicyConditionsReq(AIRequest):
    conditions: PolicyConditionsDto


# --- claims -------------------------------------------------------------------
# Create requests are owned through the policy the claim is filed against; every other
# claim request is owned through the claim itself (claim -> policy -> customer).


class CreateAutoClaimReq(PolicyIdOwned):
    claim_kind: ClassVar[ClaimKind] = ClaimKind.auto
    claim: AutoClaimDto

    def owner_policy_id(self) -> int | None:
        return self.claim.policy_id


class CreateHomeClaimReq(PolicyIdOwned):
    claim_kind: ClassVar[ClaimKind] = ClaimKind.home
    claim: HomeClaimDto

    def owner_policy_id(self) -> int | None:
        return self.claim.policy_id


class CreateHealthClaimReq(PolicyIdOwned):
    claim_kind: ClassVar[ClaimKind] = ClaimKind.health
    claim: HealthClaimDto

    def owner_policy_id(self) -> int | None:
        return self.claim.policy_id


class ClaimByIdReq(ClaimOwned):
    claim_id: int


class GetAutoClaimByIdReq(ClaimByIdReq):
    claim_kind: ClassVar[ClaimKind] = ClaimKind.auto


class GetHomeClaimByIdReq(ClaimByIdReq):
    claim_kind: ClassVar[ClaimKind] = ClaimKind.home


class GetHealthClaimByIdReq(ClaimByIdReq):
    claim_kind: ClassVar[ClaimKind] = ClaimKind.health


class DeleteAutoClaimReq(ClaimByIdReq):
    claim_kind: ClassVar[ClaimKind] = ClaimKind.auto


class DeleteHomeClaimReq(ClaimByIdReq):
    claim_kind: ClassVar[ClaimKind] = ClaimKind.home


class DeleteHealthClaimReq(ClaimByIdReq):
    claim_kind: ClassVar[ClaimKind] = ClaimKind.health


class UpdateClaimReq(ClaimOwned):
    claim_id: int
    claim: ClaimDto

    def linked_owner_refs(self) -> tuple[OwnerRef, ...]:
        # Moving a claim onto another policy needs that policy to be the caller's as well.
        if self.claim.policy_id is None:
            return ()
        return (OwnerRef(OwnershipShape.policy_id, self.claim.policy_id),)


class UpdateAutoClaimReq(UpdateClaimReq):
    claim_kind: ClassVar[ClaimKind] = ClaimKind.auto
    claim: AutoClaimDto


class UpdateHomeClaimReq(UpdateClaimReq):
    claim_kind: ClassVar[ClaimKind] = ClaimKind.home
    claim: HomeClaimDto


class UpdateHealthClaimReq(UpdateClaimReq):
    claim_kind: ClassVar[ClaimKind] = ClaimKind.health
    claim: HealthClaimDto


class AssignAdjusterReq(ClaimOwned):
    claim_id: int
    assignment: AssignAdjusterRequestDto


class AssignAdjusterToAutoClaimReq(AssignAdjusterReq):
    claim_kind: ClassVar[ClaimKind] = ClaimKind.auto


class AssignAdjusterToHomeClaimReq(AssignAdjusterReq):
    claim_kind: ClassVar[ClaimKind] = ClaimKind.home


class AssignAdjusterToHealthClaimReq(AssignAdjusterReq):
    claim_kind: ClassVar[ClaimKind] = ClaimKind.health


class GetAllClaimsReq(AIRequest):
    claim_kind: ClassVar[ClaimKind]

    page: int | None = Field(default=None, ge=0)
    size: int | None = Field(default=None, ge=1, le=100)
    status: str | None = None


class GetAllAutoClaimsReq(GetAllClaimsReq):
    claim_kind: ClassVar[ClaimKind] = ClaimKind.auto


class GetAllHomeClaimsReq(GetAllClaimsReq):
    claim_kind: ClassVar[ClaimKind] = ClaimKind.home


class GetAllHealthClaimsReq(GetAllClaimsReq):
    claim_kind: ClassVar[ClaimKind] = ClaimKind.health


# --- handoff ------------------------------------------------------------------


class InformHumanOperatorReq(AIRequest):
    reason: str = Field(min_length=1, max_length=2000)
