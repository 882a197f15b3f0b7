"""
insurance_assistant.api.deps

FastAPI dependency wiring for the API layer.
"""

from __future__ import annotations

from fastapi import HTTPException, Request
from starlette.status import HTTP_503_SERVICE_UNAVAILABLE

from insurance_assistant.functions.dispatcher import FunctionDispatcher


def get_dispatcher(request: Request) -> FunctionDispatcher:
    # Built in the app lifespan (`insurance_assistant.api.app.create_app`).
    dispatcher = getattr(request.app.state, "dispatcher", None)
    if dispatcher is None:
        raise HTTPException(status_code=HTTP_503_SERVICE_UNAVAILABLE, detail="Not ready")
    return dispatcher
