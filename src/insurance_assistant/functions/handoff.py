"""
insurance_assistant.functions.handoff

Escalation to a human operator when the assistant cannot help.
"""

from __future__ import annotations

from typing import Any

from insurance_assistant.functions import names
from insurance_assistant.functions.catalog import OperationDescriptor
from insurance_assistant.functions.requests import InformHumanOperatorReq
from insurance_assistant.insurance_client.http import InsuranceApiClient
from insurance_assistant.observability.logging import get_logger

log = get_logger(__name__)


async def inform_human_operator(
    req: InformHumanOperatorReq, client: InsuranceApiClient
) -> dict[str, Any]:
    # Operators watch for this event; a ticketing integration would hook in here.
    log.warning("human_operator_requested", reason=req.reason)
    return {"status": "SUCCESS", "message": "Human operator has been notified."}


OPERATIONS: tuple[OperationDescriptor, ...] = (
    OperationDescriptor(
        name=names.INFORM_HUMAN_OPERATOR,
        description=(
            "Escalates the conversation to a human operator. Use only as a last resort: when "
            "the request cannot be fulfilled with the available functions, when the customer "
            "asks for a human, or for sensitive matters such as fraud or legal issues. "
            "Provide a clear reason."
        ),
        request_model=InformHumanOperatorReq,
        handler=inform_human_operator,
        ownership_checked=False,
    ),
)
