"""
insurance_assistant.functions.claims

Claim functions for the three claim kinds (auto, home, health).

Responsibilities:
- File, read and update claims on the signed-in customer's policies.
- Register the staff-only claim functions (list all, delete, assign adjuster) as blocked.

Handlers are shared across kinds; the request model pins the kind.
"""

from __future__ import annotations

from typing import Any

from insurance_assistant.functions import names
from insurance_assistant.functions.catalog import OperationDescriptor
from insurance_assistant.functions.requests import (
    AssignAdjusterReq,
    AssignAdjusterToAutoClaimReq,
    AssignAdjusterToHealthClaimReq,
    AssignAdjusterToHomeClaimReq,
    ClaimByIdReq,
    CreateAutoClaimReq,
    CreateHealthClaimReq,
    CreateHomeClaimReq,
    DeleteAutoClaimReq,
    DeleteHealthClaimReq,
    DeleteHomeClaimReq,
    GetAllAutoClaimsReq,
    GetAllClaimsReq,
    GetAllHealthClaimsReq,
    GetAllHomeClaimsReq,
    GetAutoClaimByIdReq,
    GetHealthClaimByIdReq,
    GetHomeClaimByIdReq,
    UpdateAutoClaimReq,
    UpdateClaimReq,
    UpdateHealthClaimReq,
    UpdateHomeClaimReq,
)
from insurance_assistant.insurance_client.http import InsuranceApiClient
from insurance_assistant.insurance_client.models import CLAIM_DTO_BY_KIND, ClaimDto, ClaimKind

CreateClaimReq = CreateAutoClaimReq | CreateHomeClaimReq | CreateHealthClaimReq


async def create_claim(req: CreateClaimReq, client: InsuranceApiClient) -> ClaimDto:
    kind = type(req).claim_kind
    # Upstream picks the claim subtype from this discriminator.
    claim = req.claim.model_copy(
        update={"id": None, "claim_type": CLAIM_DTO_BY_KIND[kind].__name__}
    )
    return await client.create_claim(kind, claim)


async def get_claim_by_id(req: ClaimByIdReq, client: InsuranceApiClient) -> ClaimDto | None:
    return await client.get_claim_by_id(type(req).claim_kind, req.claim_id)


async def update_claim(req: UpdateClaimReq, client: InsuranceApiClient) -> ClaimDto:
    # The record written is always the one that was authorized.
    claim = req.claim.model_copy(update={"id": req.claim_id})
    return await client.update_claim(type(req).claim_kind, req.claim_id, claim)


async def delete_claim(req: ClaimByIdReq, client: InsuranceApiClient) -> dict[str, Any]:
    kind = type(req).claim_kind
    await client.delete_claim(kind, req.claim_id)
    message = f"{kind.value.capitalize()} claim deleted successfully."
    return {"status": "SUCCESS", "message": message}


async def get_all_claims(req: GetAllClaimsReq, client: InsuranceApiClient) -> list[ClaimDto]:
    return await client.get_all_claims(
        type(req).claim_kind, page=req.page, size=req.size, status=req.status
    )


async def assign_adjuster(req: AssignAdjusterReq, client: InsuranceApiClient) -> ClaimDto:
    return await client.assign_adjuster(type(req).claim_kind, req.claim_id, req.assignment)


_CREATE_HINTS: dict[ClaimKind, str] = {
    ClaimKind.auto: "a car accident, theft, vandalism or other vehicle damage",
    ClaimKind.home: "damage to the customer's home or belongings",
    ClaimKind.health: "a medical treatment or procedure",
}


def _claim_operations(
    kind: ClaimKind,
    *,
    create: tuple[str, type[CreateClaimReq]],
    get: tuple[str, type[ClaimByIdReq]],
    update: tuple[str, type[UpdateClaimReq]],
    get_all: tuple[str, type[GetAllClaimsReq]],
    delete: tuple[str, type[ClaimByIdReq]],
    assign: tuple[str, type[AssignAdjusterReq]],
) -> tuple[OperationDescriptor, ...]:
    noun = kind.value.lower()
    return (
        OperationDescriptor(
            name=create[0],
            description=(
                f"Files a new {noun} claim for {_CREATE_HINTS[kind]}. Use the technical policy "
                "ID (a number) for policyId, not the policy number. Returns the created claim "
                "with its claim ID and initial status."
            ),
            request_model=create[1],
            handler=create_claim,
        ),
        OperationDescriptor(
            name=get[0],
            description=(
                f"Retrieves a {noun} claim by its claim ID: status, amounts, incident details "
                "and adjuster assignment."
            ),
            request_model=get[1],
            handler=get_claim_by_id,
        ),
        OperationDescriptor(
            name=update[0],
            description=(
                f"Updates an existing {noun} claim with additional or corrected information. "
                "Requires the claim ID and the updated claim."
            ),
            request_model=update[1],
            handler=update_claim,
        ),
        OperationDescriptor(
            name=get_all[0],
            description=f"Lists every {noun} claim in the system. Reserved for staff.",
            request_model=get_all[1],
            handler=get_all_claims,
            blocked_for_ai=True,
        ),
        OperationDescriptor(
            name=delete[0],
            description=f"Permanently deletes a {noun} claim. Reserved for staff.",
            request_model=delete[1],
            handler=delete_claim,
            blocked_for_ai=True,
        ),
        OperationDescriptor(
            name=assign[0],
            description=f"Assigns an adjuster to a {noun} claim. Reserved for staff.",
            request_model=assign[1],
            handler=assign_adjuster,
            blocked_for_ai=True,
        ),
    )


OPERATIONS: tuple[OperationDescriptor, ...] = (
    *_claim_operations(
        ClaimKind.auto,
        create=(names.CREATE_AUTO_CLAIM, CreateAutoClaimReq),
        get=(names.GET_AUTO_CLAIM_BY_ID, GetAutoClaimByIdReq),
        update=(names.UPDATE_AUTO_CLAIM, UpdateAutoClaimReq),
        get_all=(names.GET_ALL_AUTO_CLAIMS, GetAllAutoClaimsReq),
        delete=(names.DELETE_AUTO_CLAIM, DeleteAutoClaimReq),
        assign=(names.ASSIGN_ADJUSTER_TO_AUTO_CLAIM, AssignAdjusterToAutoClaimReq),
    ),
    *_claim_operations(
        ClaimKind.home,
        create=(names.CREATE_HOME_CLAIM, CreateHomeClaimReq),
        get=(names.GET_HOME_CLAIM_BY_ID, GetHomeClaimByIdReq),
        update=(names.UPDATE_HOME_CLAIM, UpdateHomeClaimReq),
        get_all=(names.GET_ALL_HOME_CLAIMS, GetAllHomeClaimsReq),
        delete=(names.DELETE_HOME_CLAIM, DeleteHomeClaimReq),
        assign=(names.ASSIGN_ADJUSTER_TO_HOME_CLAIM, AssignAdjusterToHomeClaimReq),
    ),
    *_claim_operations(
        ClaimKind.health,
        create=(names.CREATE_HEALTH_CLAIM, CreateHealthClaimReq),
        get=(names.GET_HEALTH_CLAIM_BY_ID, GetHealthClaimByIdReq),
        update=(names.UPDATE_HEALTH_CLAIM, UpdateHealthClaimReq),
        get_all=(names.GET_ALL_HEALTH_CLAIMS, GetAllHealthClaimsReq),
        delete=(names.DELETE_HEALTH_CLAIM, DeleteHealthClaimReq),
        assign=(names.ASSIGN_ADJUSTER_TO_HEALTH_CLAIM, AssignAdjusterToHealthClaimReq),
    ),
)
