"""
insurance_assistant.security.middleware

Authorization middleware for AI-callable functions.

Responsibilities:
- Decide, per invocation, whether the signed-in customer may run a function on the
  requested record (blocked -> authenticated -> classified -> owner resolved -> compared),
  and on every record the request body would attach it to.
- Wrap each catalog function so the calling model always receives a `ResponseEnvelope`,
  whether the call is denied, fails upstream, or succeeds.

Each invocation is independent: no state is kept between calls and nothing is cached.
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from insurance_assistant.auth.models import SecurityContext
from insurance_assistant.insurance_client.http import InsuranceApiClient, UpstreamNotFoundError
from insurance_assistant.observability.logging import get_logger
from insurance_assistant.responses import ResponseEnvelope
from insurance_assistant.security.identity import DEFAULT_CUSTOMER_ID_CLAIM, current_principal
from insurance_assistant.security.outcomes import (
    AuthorizationOutcome,
    Authorized,
    Denied,
    DenialReason,
)
from insurance_assistant.security.ownership import OwnershipResolutionError, OwnershipResolver
from insurance_assistant.security.shapes import OwnershipShape, classify

if TYPE_CHECKING:
    from insurance_assistant.functions.catalog import OperationDescriptor

log = get_logger(__name__)

RECORD_NOT_FOUND_MESSAGE = "The requested record could not be found."
OPERATION_FAILED_MESSAGE = (
    "The operation could not be completed right now. "
    "Please try again later or contact customer service."
)


class AuthorizationMiddleware:
    def __init__(
        self,
        *,
        resolver: OwnershipResolver,
        customer_id_claim: str = DEFAULT_CUSTOMER_ID_CLAIM,
    ) -> None:
        self._resolver = resolver
        self._customer_id_claim = customer_id_claim

    async def authorize(
        self,
        descriptor: OperationDescriptor,
        request: object,
        context: SecurityContext | None,
    ) -> AuthorizationOutcome:
        # 1) Blocked functions are refused before identity or request are looked at.
        if descriptor.blocked_for_ai:
            log.warning("ai_access_blocked", function=descriptor.name)
            return Denied(DenialReason.blocked)

        # 2) Authentication. No upstream call happens before this passes.
        principal_id = current_principal(context, claim_name=self._customer_id_claim)
        if principal_id is None:
            log.warning("function_denied_unauthenticated", function=descriptor.name)
            return Denied(DenialReason.not_authenticated)

        if not descriptor.ownership_checked:
            return Authorized(principal_id)

        # 3) Classification.
        shape = classify(request)
        if shape is OwnershipShape.unknown:
            log.warning(
                "request_shape_unknown",
                function=descriptor.name,
                request_type=type(request).__name__,
            )
            return Denied(DenialReason.cannot_resolve_owner)

        # 4) Ownership resolution.
        try:
            owner_id = await self._resolver.resolve(request, shape)
        except OwnershipResolutionError as e:
            log.warning(
                "ownership_unresolved",
                function=descriptor.name,
                shape=shape.value,
                reason=str(e),
            )
            return Denied(DenialReason.cannot_resolve_owner)

        # 5) Comparison.
        if owner_id != principal_id:
            log.warning(
                "owner_mismatch",
                function=descriptor.name,
                principal_id=principal_id,
                owner_id=owner_id,
            )
            return Denied(DenialReason.owner_mismatch)

        # 5b) Records the body would attach the request to must be the caller's too.
        for ref in request.linked_owner_refs():
            try:
                linked_owner_id = await self._resolver.resolve_ref(ref)
            except OwnershipResolutionError as e:
                log.warning(
                    "linked_ownership_unresolved",
                    function=descriptor.name,
                    shape=ref.shape.value,
                    reason=str(e),
                )
                return Denied(DenialReason.cannot_resolve_owner)
            if linked_owner_id != principal_id:
                log.warning(
                    "linked_owner_mismatch",
                    function=descriptor.name,
                    shape=ref.shape.value,
                    principal_id=principal_id,
                    owner_id=linked_owner_id,
                )
                return Denied(DenialReason.owner_mismatch)

        log.info("access_granted", function=descriptor.name, principal_id=principal_id)
        return Authorized(principal_id)

    async def invoke(
        self,
        descriptor: OperationDescriptor,
        call: Callable[[Any], Awaitable[Any]],
        request: object,
        context: SecurityContext | None,
    ) -> ResponseEnvelope[Any]:
        outcome = await self.authorize(descriptor, request, context)
        if isinstance(outcome, Denied):
            return ResponseEnvelope.fail(outcome.message)

        # 6) Delegation: exactly one call, no retries.
        try:
            result = await call(request)
        except UpstreamNotFoundError:
            log.info("function_target_not_found", function=descriptor.name)
            return ResponseEnvelope.fail(RECORD_NOT_FOUND_MESSAGE)
        except Exception:
            log.exception("function_failed", function=descriptor.name)
            return ResponseEnvelope.fail(OPERATION_FAILED_MESSAGE)

        if result is None:
            return ResponseEnvelope.fail(RECORD_NOT_FOUND_MESSAGE)
        return ResponseEnvelope.ok(result)

    def wrap(
        self, descriptor: OperationDescriptor, *, client: InsuranceApiClient
    ) -> SecuredFunction:
        async def call(request: Any) -> Any:
            return await descriptor.handler(request, client)

        return SecuredFunction(descriptor=descriptor, middleware=self, call=call)


@dataclass(frozen=True, slots=True)
class SecuredFunction:
    """A catalog function bound to its client and guarded by the middleware."""

    descriptor: OperationDescriptor
    middleware: AuthorizationMiddleware
    call: Callable[[Any], Awaitable[Any]]

    @property
    def name(self) -> str:
        return self.descriptor.name

    async def __call__(
        self, request: object, context: SecurityContext | None
    ) -> ResponseEnvelope[Any]:
        return await self.middleware.invoke(self.descriptor, self.call, request, context)


# --- Module Notes -----------------------------------------------------------
# Wrapping happens once, at dispatcher construction (`functions.dispatcher`); there is no
# runtime reflection and no way to reach a function's handler except through `invoke`.
