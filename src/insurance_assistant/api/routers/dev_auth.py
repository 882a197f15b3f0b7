"""
insurance_assistant.api.routers.dev_auth

Local token minting, standing in for the login flow that fronts the chat in production.
"""

from __future__ import annotations

from datetime import timedelta

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel, Field
from starlette.status import HTTP_404_NOT_FOUND

from insurance_assistant.auth.jwt import JwtConfig, issue_id_token
from insurance_assistant.settings import Settings, get_settings

router = APIRouter(prefix="/v1/dev", tags=["dev"])


class DevTokenRequest(BaseModel):
    subject: str = Field(min_length=1, max_length=256)
    # None mints a token without the customer-id claim (a signed-in non-customer).
    customer_id: int | None = Field(default=None, gt=0)
    ttl_minutes: int = Field(default=60, ge=1, le=24 * 60)


class DevTokenResponse(BaseModel):
    access_token: str
    token_type: str = "bearer"


@router.post("/token", response_model=DevTokenResponse)
async def mint_dev_token(
    body: DevTokenRequest,
    settings: Settings = Depends(get_settings),
) -> DevTokenResponse:
    if settings.env == "prod":
        raise HTTPException(status_code=HTTP_404_NOT_FOUND, detail="Not found")

    extra = {settings.customer_id_claim: body.customer_id} if body.customer_id else None
    token = issue_id_token(
        cfg=JwtConfig.from_settings(settings),
        subject=body.subject,
        extra_claims=extra,
        ttl=timedelta(minutes=body.ttl_minutes),
    )
    return DevTokenResponse(access_token=token)
