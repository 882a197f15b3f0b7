"""
insurance_assistant.api.app

FastAPI app factory.

Responsibilities:
- Build the FastAPI application and register routers/middleware.
- Own the lifetime of the shared upstream HTTP client.
- Compose the function runtime: client -> ownership resolver -> middleware -> dispatcher.
"""

from __future__ import annotations

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import httpx
from fastapi import FastAPI

from insurance_assistant import __version__
from insurance_assistant.api.routers.dev_auth import router as dev_auth_router
from insurance_assistant.api.routers.functions import router as functions_router
from insurance_assistant.api.routers.health import router as health_router
from insurance_assistant.functions.catalog import build_default_catalog
from insurance_assistant.functions.dispatcher import FunctionDispatcher
from insurance_assistant.insurance_client.http import InsuranceApiClient, create_http_client
from insurance_assistant.observability.logging import configure_logging, get_logger
from insurance_assistant.observability.middleware import RequestContextMiddleware
from insurance_assistant.security.middleware import AuthorizationMiddleware
from insurance_assistant.security.ownership import OwnershipResolver
from insurance_assistant.settings import Settings, get_settings

log = get_logger(__name__)


def create_app(*, settings: Settings, http: httpx.AsyncClient | None = None) -> FastAPI:
    """
    `http` lets callers (tests) supply the upstream client; when given, the caller owns
    closing it.
    """
    configure_logging(
        service_name=settings.service_name,
        level=settings.log_level,
        json_logs=settings.env != "dev",
    )

    # Fail at startup, not on the first tool call, if the catalog is inconsistent.
    catalog = build_default_catalog()

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        log.info("startup", env=settings.env, functions=len(catalog))
        upstream = http if http is not None else create_http_client(settings)
        client = InsuranceApiClient(http=upstream)
        middleware = AuthorizationMiddleware(
            resolver=OwnershipResolver(lookup=client),
            customer_id_claim=settings.customer_id_claim,
        )
        app.state.dispatcher = FunctionDispatcher(
            catalog=catalog, middleware=middleware, client=client
        )
        try:
            yield
        finally:
            app.state.dispatcher = None
            if http is None:
                await upstream.aclose()
            log.info("shutdown")

    app = FastAPI(
        title="Insurance Assistant Function Runtime",
        version=__version__,
        docs_url="/docs",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )
    # Routers resolve settings through `get_settings`; pin it to the instance given here.
    app.dependency_overrides[get_settings] = lambda: settings

    app.add_middleware(RequestContextMiddleware)
    app.include_router(health_router, tags=["health"])
    app.include_router(dev_auth_router)
    app.include_router(functions_router)
    return app


# --- Module Notes -----------------------------------------------------------
# Business logic stays out of this file: authorization lives in `security`, function
# definitions in `functions`.
