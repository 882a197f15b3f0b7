"""
insurance_assistant.api.routers.health

Health and readiness endpoints.

Responsibilities:
- Provide liveness probe (`/healthz`).
- Provide readiness probe (`/readyz`): the function runtime has been composed.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends

from insurance_assistant.api.deps import get_dispatcher
from insurance_assistant.functions.dispatcher import FunctionDispatcher

router = APIRouter()


@router.get("/healthz")
async def healthz() -> dict[str, str]:
    return {"status": "ok"}


@router.get("/readyz")
async def readyz(dispatcher: FunctionDispatcher = Depends(get_dispatcher)) -> dict[str, str]:
    # The upstream service is not probed here; an outage surfaces as failed envelopes.
    return {"status": "ready", "functions": str(len(dispatcher.catalog))}
