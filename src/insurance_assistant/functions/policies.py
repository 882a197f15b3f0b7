"""
insurance_assistant.functions.policies

Policy functions: lookups by id or number, create/update, claim history per policy, and
the policy conditions document.
"""

from __future__ import annotations

from typing import Any

from insurance_assistant.functions import names
from insurance_assistant.functions.catalog import OperationDescriptor
from insurance_assistant.functions.requests import (
    CreatePolicyReq,
    DeletePolicyReq,
    GetAllPoliciesReq,
    GetAutoClaimsByPolicyIdReq,
    GetClaimsByPolicyIdReq,
    GetHealthClaimsByPolicyIdReq,
    GetHomeClaimsByPolicyIdReq,
    GetPolicyByIdReq,
    GetPolicyByPolicyNumberReq,
    GetPolicyConditionsReq,
    UpdatePolicyConditionsReq,
    UpdatePolicyReq,
)
from insurance_assistant.insurance_client.http import InsuranceApiClient
from insurance_assistant.insurance_client.models import ClaimDto, PolicyConditionsDto, PolicyDto


async def get_policy_by_id(req: GetPolicyByIdReq, client: InsuranceApiClient) -> PolicyDto | None:
    return await client.get_policy_by_id(req.policy_id)


async def get_policy_by_policy_number(
    req: GetPolicyByPolicyNumberReq, client: InsuranceApiClient
) -> PolicyDto | None:
    return await client.get_policy_by_number(req.policy_number.strip())


async def create_policy(req: CreatePolicyReq, client: InsuranceApiClient) -> PolicyDto:
    return await client.create_policy(req.policy.model_copy(update={"id": None}))


async def update_policy(req: UpdatePolicyReq, client: InsuranceApiClient) -> PolicyDto:
    policy = req.policy.model_copy(update={"id": req.policy_id})
    return await client.update_policy(req.policy_id, policy)


async def delete_policy(req: DeletePolicyReq, client: InsuranceApiClient) -> dict[str, Any]:
    await client.delete_policy(req.policy_id)
    return {"status": "SUCCESS", "message": "Policy deleted successfully."}


async def get_all_policies(req: GetAllPoliciesReq, client: InsuranceApiClient) -> list[PolicyDto]:
    return await client.get_all_policies()


async def get_claims_by_policy_id(
    req: GetClaimsByPolicyIdReq, client: InsuranceApiClient
) -> list[ClaimDto]:
    return await client.get_claims_by_policy_id(
        type(req).claim_kind, req.policy_id, page=req.page, size=req.size, status=req.status
    )


async def get_policy_conditions(
    req: GetPolicyConditionsReq, client: InsuranceApiClient
) -> PolicyConditionsDto:
    return await client.get_policy_conditions()


async def update_policy_conditions(
    req: UpdatePolicyConditionsReq, client: InsuranceApiClient
) -> PolicyConditionsDto:
    return await client.update_policy_conditions(req.conditions)


def _claims_by_policy(
    name: str, model: type[GetClaimsByPolicyIdReq], noun: str
) -> OperationDescriptor:
    return OperationDescriptor(
        name=name,
        description=(
            f"Lists the {noun} claims filed against a policy, given its technical policy ID. "
            "Supports pagination (page, size) and filtering by status."
        ),
        request_model=model,
        handler=get_claims_by_policy_id,
    )


OPERATIONS: tuple[OperationDescriptor, ...] = (
    OperationDescriptor(
        name=names.GET_POLICY_BY_ID,
        description=(
            "Retrieves policy details (coverage, premium, dates, status) by the policy's "
            "technical ID, when the ID is already known from an earlier lookup."
        ),
        request_model=GetPolicyByIdReq,
        handler=get_policy_by_id,
    ),
    OperationDescriptor(
        name=names.GET_POLICY_BY_POLICY_NUMBER,
        description=(
            "Retrieves policy details by the policy number the customer quotes "
            "(for example POL-12345)."
        ),
        request_model=GetPolicyByPolicyNumberReq,
        handler=get_policy_by_policy_number,
    ),
    OperationDescriptor(
        name=names.CREATE_POLICY,
        description=(
            "Creates a new policy for the signed-in customer. The policy's customerId must be "
            "the customer's own ID. Returns the policy with its assigned ID and number."
        ),
        request_model=CreatePolicyReq,
        handler=create_policy,
    ),
    OperationDescriptor(
        name=names.UPDATE_POLICY,
        description=(
            "Updates an existing policy identified by its technical ID. Confirm the changes "
            "and any premium impact with the customer before calling."
        ),
        request_model=UpdatePolicyReq,
        handler=update_policy,
    ),
    OperationDescriptor(
        name=names.DELETE_POLICY,
        description="Permanently deletes a policy. Reserved for customer service staff.",
        request_model=DeletePolicyReq,
        handler=delete_policy,
        blocked_for_ai=True,
    ),
    OperationDescriptor(
        name=names.GET_ALL_POLICIES,
        description="Lists every policy in the system. Reserved for customer service staff.",
        request_model=GetAllPoliciesReq,
        handler=get_all_policies,
        blocked_for_ai=True,
    ),
    _claims_by_policy(names.GET_AUTO_CLAIMS_BY_POLICY_ID, GetAutoClaimsByPolicyIdReq, "auto"),
    _claims_by_policy(names.GET_HOME_CLAIMS_BY_POLICY_ID, GetHomeClaimsByPolicyIdReq, "home"),
    _claims_by_policy(
        names.GET_HEALTH_CLAIMS_BY_POLICY_ID, GetHealthClaimsByPolicyIdReq, "health"
    ),
    OperationDescriptor(
        name=names.GET_POLICY_CONDITIONS,
        description=(
            "Returns the general policy conditions that apply to every customer, such as "
            "the cancellation penalty and general terms."
        ),
        request_model=GetPolicyConditionsReq,
        handler=get_policy_conditions,
        ownership_checked=False,
    ),
    OperationDescriptor(
        name=names.UPDATE_POLICY_CONDITIONS,
        description="Changes the general policy conditions. Reserved for staff.",
        request_model=UpdatePolicyConditionsReq,
        handler=update_policy_conditions,
        blocked_for_ai=True,
    ),
)
