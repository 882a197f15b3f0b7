"""
insurance_assistant.functions.dispatcher

Entry point the tool runtime calls with a function name and raw JSON arguments.

Responsibilities:
- Wrap every catalog function with the authorization middleware, once, at construction.
- Parse raw arguments into the function's request model.
- Always answer with a `ResponseEnvelope`, including for unknown names and bad arguments.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pydantic import ValidationError

from insurance_assistant.auth.models import SecurityContext
from insurance_assistant.functions.catalog import FunctionCatalog
from insurance_assistant.insurance_client.http import InsuranceApiClient, dump_result
from insurance_assistant.observability.logging import get_logger
from insurance_assistant.responses import ResponseEnvelope
from insurance_assistant.security.middleware import AuthorizationMiddleware, SecuredFunction

log = get_logger(__name__)

UNKNOWN_FUNCTION_MESSAGE = "The requested function is not available."
INVALID_ARGUMENTS_MESSAGE = (
    "The request could not be understood. Please check the details and try again."
)


class FunctionDispatcher:
    def __init__(
        self,
        *,
        catalog: FunctionCatalog,
        middleware: AuthorizationMiddleware,
        client: InsuranceApiClient,
    ) -> None:
        self._catalog = catalog
        self._functions: dict[str, SecuredFunction] = {
            d.name: middleware.wrap(d, client=client) for d in catalog
        }

    @property
    def catalog(self) -> FunctionCatalog:
        return self._catalog

    def __contains__(self, name: object) -> bool:
        return name in self._functions

    async def invoke(
        self,
        name: str,
        arguments: Mapping[str, Any] | None,
        context: SecurityContext | None,
    ) -> ResponseEnvelope[Any]:
        fn = self._functions.get(name)
        if fn is None:
            log.warning("unknown_function", function=name)
            return ResponseEnvelope.fail(UNKNOWN_FUNCTION_MESSAGE)

        descriptor = fn.descriptor
        if descriptor.blocked_for_ai:
            # Blocked answers do not depend on the arguments.
            request: object = None
        else:
            try:
                request = descriptor.request_model.model_validate(dict(arguments or {}))
            except ValidationError as e:
                log.info(
                    "function_arguments_invalid",
                    function=name,
                    errors=e.error_count(),
                )
                return ResponseEnvelope.fail(INVALID_ARGUMENTS_MESSAGE)

        envelope = await fn(request, context)
        if envelope.success:
            return ResponseEnvelope.ok(dump_result(envelope.data))
        return envelope
