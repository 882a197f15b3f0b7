"""
insurance_assistant.insurance_client.http

HTTP client boundary for the upstream insurance REST service.

Responsibilities:
- Provide `None`-on-404 lookups for customers, policies and claims (ownership resolution).
- Provide the create/update/delete/list calls AI functions delegate to.
- Map upstream JSON into typed DTOs.
"""

from __future__ import annotations

from typing import Any, TypeVar
from urllib.parse import quote

import httpx
from pydantic import BaseModel, TypeAdapter

from insurance_assistant.insurance_client.models import (
    CLAIM_DTO_BY_KIND,
    AssignAdjusterRequestDto,
    ClaimDto,
    ClaimKind,
    CustomerDto,
    PolicyConditionsDto,
    PolicyDto,
    UpstreamModel,
)
from insurance_assistant.settings import Settings

M = TypeVar("M", bound=BaseModel)


class UpstreamNotFoundError(Exception):
    """The upstream service answered 404 for a call that requires the record to exist."""


def create_http_client(settings: Settings) -> httpx.AsyncClient:
    # One pooled client per process; the app factory owns open/close.
    return httpx.AsyncClient(
        base_url=settings.insurance_api_base_url.rstrip("/"),
        timeout=settings.insurance_api_timeout_seconds,
        headers={"Accept": "application/json"},
    )


def _seg(value: object) -> str:
    """One URL path segment. Separators are escaped and dot segments refused."""
    text = str(value)
    if text in {"", ".", ".."}:
        raise ValueError(f"invalid path segment: {text!r}")
    return quote(text, safe="")


def _claims_path(kind: ClaimKind) -> str:
    return f"/claims/{kind.value.lower()}"


class InsuranceApiClient:
    """
    Thin typed wrapper over a shared `httpx.AsyncClient`.
    Timeouts come from the underlying client; no retries are performed here.
    """

    def __init__(self, *, http: httpx.AsyncClient) -> None:
        self._http = http

    async def _get_optional(self, path: str, model: type[M]) -> M | None:
        r = await self._http.get(path)
        if r.status_code == 404:
            return None
        r.raise_for_status()
        data = r.json()
        if data is None:
            return None
        return model.model_validate(data)

    async def _send(
        self,
        method: str,
        path: str,
        *,
        json: Any = None,
        params: dict[str, Any] | None = None,
    ) -> httpx.Response:
        r = await self._http.request(
            method,
            path,
            json=json,
            params={k: v for k, v in (params or {}).items() if v is not None} or None,
        )
        if r.status_code == 404:
            raise UpstreamNotFoundError(f"{method} {path}")
        r.raise_for_status()
        return r

    async def _send_one(self, method: str, path: str, model: type[M], **kwargs: Any) -> M:
        r = await self._send(method, path, **kwargs)
        return model.model_validate(r.json())

    async def _send_many(self, method: str, path: str, model: type[M], **kwargs: Any) -> list[M]:
        r = await self._send(method, path, **kwargs)
        return TypeAdapter(list[model]).validate_python(r.json() or [])

    # --- customers ----------------------------------------------------------

    async def get_customer_by_id(self, customer_id: int) -> CustomerDto | None:
        return await self._get_optional(f"/customers/{_seg(customer_id)}", CustomerDto)

    async def get_customer_by_policy_number(self, policy_number: str) -> CustomerDto | None:
        return await self._get_optional(
            f"/customers/by-policy-number/{_seg(policy_number)}", CustomerDto
        )

    async def get_all_customers(self, *, name: str | None = None) -> list[CustomerDto]:
        return await self._send_many("GET", "/customers", CustomerDto, params={"name": name})

    async def create_customer(self, customer: CustomerDto) -> CustomerDto:
        return await self._send_one("POST", "/customers", CustomerDto, json=customer.to_wire())

    async def update_customer(self, customer_id: int, customer: CustomerDto) -> CustomerDto:
        return await self._send_one(
            "PUT", f"/customers/{_seg(customer_id)}", CustomerDto, json=customer.to_wire()
        )

    async def delete_customer(self, customer_id: int) -> None:
        await self._send("DELETE", f"/customers/{_seg(customer_id)}")

    async def get_policies_by_customer_id(self, customer_id: int) -> list[PolicyDto]:
        return await self._send_many("GET", f"/customers/{_seg(customer_id)}/policies", PolicyDto)

    # --- policies -----------------------------------------------------------

    async def get_policy_by_id(self, policy_id: int) -> PolicyDto | None:
        return await self._get_optional(f"/policies/{_seg(policy_id)}", PolicyDto)

    async def get_policy_by_number(self, policy_number: str) -> PolicyDto | None:
        return await self._get_optional(f"/policies/number/{_seg(policy_number)}", PolicyDto)

    async def get_all_policies(self) -> list[PolicyDto]:
        return await self._send_many("GET", "/policies", PolicyDto)

    async def create_policy(self, policy: PolicyDto) -> PolicyDto:
        return await self._send_one("POST", "/policies", PolicyDto, json=policy.to_wire())

    async def update_policy(self, policy_id: int, policy: PolicyDto) -> PolicyDto:
        return await self._send_one(
            "PUT", f"/policies/{_seg(policy_id)}", PolicyDto, json=policy.to_wire()
        )

    async def delete_policy(self, policy_id: int) -> None:
        await self._send("DELETE", f"/policies/{_seg(policy_id)}")

    async def get_claims_by_policy_id(
        self,
        kind: ClaimKind,
        policy_id: int,
        *,
        page: int | None = None,
        size: int | None = None,
        status: str | None = None,
    ) -> list[ClaimDto]:
        return await self._send_many(
            "GET",
            f"/policies/{_seg(policy_id)}/{kind.value.lower()}-claims",
            CLAIM_DTO_BY_KIND[kind],
            params={"page": page, "size": size, "status": status},
        )

    async def get_policy_conditions(self) -> PolicyConditionsDto:
        return await self._send_one("GET", "/policies/conditions", PolicyConditionsDto)

    async def update_policy_conditions(
        self, conditions: PolicyConditionsDto
    ) -> PolicyConditionsDto:
        return await self._send_one(
            "PUT", "/policies/conditions", PolicyConditionsDto, json=conditions.to_wire()
        )

    # --- claims -------------------------------------------------------------

    async def get_claim_by_id(self, kind: ClaimKind, claim_id: int) -> ClaimDto | None:
        return await self._get_optional(
            f"{_claims_path(kind)}/{_seg(claim_id)}", CLAIM_DTO_BY_KIND[kind]
        )

    async def get_auto_claim_by_id(self, claim_id: int) -> ClaimDto | None:
        return await self.get_claim_by_id(ClaimKind.auto, claim_id)

    async def get_home_claim_by_id(self, claim_id: int) -> ClaimDto | None:
        return await self.get_claim_by_id(ClaimKind.home, claim_id)

    async def get_health_claim_by_id(self, claim_id: int) -> ClaimDto | None:
        return await self.get_claim_by_id(ClaimKind.health, claim_id)

    async def get_all_claims(
        self,
        kind: ClaimKind,
        *,
        page: int | None = None,
        size: int | None = None,
        status: str | None = None,
    ) -> list[ClaimDto]:
        return await self._send_many(
            "GET",
            _claims_path(kind),
            CLAIM_DTO_BY_KIND[kind],
            params={"page": page, "size": size, "status": status},
        )

    async def create_claim(self, kind: ClaimKind, claim: ClaimDto) -> ClaimDto:
        return await self._send_one(
            "POST", _claims_path(kind), CLAIM_DTO_BY_KIND[kind], json=claim.to_wire()
        )

    async def update_claim(self, kind: ClaimKind, claim_id: int, claim: ClaimDto) -> ClaimDto:
        return await self._send_one(
            "PUT",
            f"{_claims_path(kind)}/{_seg(claim_id)}",
            CLAIM_DTO_BY_KIND[kind],
            json=claim.to_wire(),
        )

    async def delete_claim(self, kind: ClaimKind, claim_id: int) -> None:
        await self._send("DELETE", f"{_claims_path(kind)}/{_seg(claim_id)}")

    async def assign_adjuster(
        self, kind: ClaimKind, claim_id: int, assignment: AssignAdjusterRequestDto
    ) -> ClaimDto:
        return await self._send_one(
            "PUT",
            f"{_claims_path(kind)}/{_seg(claim_id)}/adjuster",
            CLAIM_DTO_BY_KIND[kind],
            json=assignment.to_wire(),
        )


def dump_result(value: Any) -> Any:
    """JSON-friendly view of a client result (DTO, list of DTOs, or plain data)."""
    if isinstance(value, UpstreamModel):
        return value.to_wire()
    if isinstance(value, list):
        return [dump_result(v) for v in value]
    return value


# --- Module Notes -----------------------------------------------------------
# Retries/backoff belong here if ever needed; the authorization middleware never retries.
