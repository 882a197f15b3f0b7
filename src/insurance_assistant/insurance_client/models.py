"""
insurance_assistant.insurance_client.models

DTOs exchanged with the upstream insurance service.

Only the fields the assistant reasons about are declared; anything else the service
returns is kept as extra data and passed through to the model untouched.
"""

from __future__ import annotations

import enum
from datetime import date
from decimal import Decimal
from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class ClaimKind(enum.StrEnum):
    auto = "AUTO"
    home = "HOME"
    health = "HEALTH"


class UpstreamModel(BaseModel):
    # Upstream speaks camelCase JSON; accept both spellings and keep unknown fields.
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="allow")

    def to_wire(self) -> dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class CustomerDto(UpstreamModel):
    id: int | None = None
    first_name: str | None = None
    last_name: str | None = None
    email: str | None = None
    phone_number: str | None = None
    address: str | None = None
    date_of_birth: date | None = None


class PolicyDto(UpstreamModel):
    id: int | None = None
    policy_number: str | None = None
    customer_id: int | None = None
    type: str | None = None
    start_date: date | None = None
    end_date: date | None = None
    premium: Decimal | None = None
    coverage_amount: Decimal | None = None
    status: str | None = None


class ClaimDto(UpstreamModel):
    id: int | None = None
    policy_id: int | None = None
    claim_number: str | None = None
    description: str | None = None
    date_of_incident: date | None = None
    status: str | None = None
    estimated_amount: Decimal | None = None
    # Discriminator the upstream service expects on create ("AutoClaimDto", ...).
    claim_type: str | None = None


class AutoClaimDto(ClaimDto):
    license_plate: str | None = None
    vehicle_vin: str | None = None
    accident_location: str | None = None


class HomeClaimDto(ClaimDto):
    type_of_damage: str | None = None
    damaged_items: str | None = None


class HealthClaimDto(ClaimDto):
    medical_provider: str | None = None
    procedure_code: str | None = None


class AssignAdjusterRequestDto(UpstreamModel):
    adjuster_id: int = Field(gt=0)


class PolicyConditionsDto(UpstreamModel):
    cancellation_penalty_percentage: Decimal | None = None
    general_terms: str | None = None


CLAIM_DTO_BY_KIND: dict[ClaimKind, type[ClaimDto]] = {
    ClaimKind.auto: AutoClaimDto,
    ClaimKind.home: HomeClaimDto,
    ClaimKind.health: HealthClaimDto,
}
