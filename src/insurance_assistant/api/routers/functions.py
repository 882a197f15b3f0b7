"""
insurance_assistant.api.routers.functions

Function runtime endpoints called by the chat orchestrator.

Responsibilities:
- List the advertised functions as tool schemas (`GET /v1/functions`).
- Invoke one function on behalf of the signed-in customer (`POST /v1/functions/{name}`).

Invocation always answers 200 with a response envelope once the function exists; denials
and upstream failures are envelope content, not HTTP errors.
"""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel, Field
from starlette.status import HTTP_404_NOT_FOUND

from insurance_assistant.api.deps import get_dispatcher
from insurance_assistant.auth.deps import get_security_context
from insurance_assistant.auth.models import SecurityContext
from insurance_assistant.functions.dispatcher import FunctionDispatcher

router = APIRouter(prefix="/v1/functions", tags=["functions"])


class InvokeRequest(BaseModel):
    arguments: dict[str, Any] = Field(default_factory=dict)


@router.get("")
async def list_functions(
    dispatcher: FunctionDispatcher = Depends(get_dispatcher),
) -> dict[str, Any]:
    catalog = dispatcher.catalog
    return {
        "functions": [
            {"name": d.name, "description": d.description, "blockedForAi": d.blocked_for_ai}
            for d in sorted(catalog, key=lambda d: d.name)
        ],
        "tools": catalog.tool_schemas(),
    }


@router.post("/{name}")
async def invoke_function(
    name: str,
    body: InvokeRequest,
    dispatcher: FunctionDispatcher = Depends(get_dispatcher),
    context: SecurityContext = Depends(get_security_context),
) -> dict[str, Any]:
    if name not in dispatcher:
        raise HTTPException(status_code=HTTP_404_NOT_FOUND, detail="Function not found")
    envelope = await dispatcher.invoke(name, body.arguments, context)
    return envelope.model_dump(mode="json", by_alias=True)
