"""
insurance_assistant.security.identity

Identity extractor: the signed-in customer id for one invocation.
"""

from __future__ import annotations

from typing import Any

from insurance_assistant.auth.models import IdentityToken, SecurityContext
from insurance_assistant.observability.logging import get_logger

log = get_logger(__name__)

DEFAULT_CUSTOMER_ID_CLAIM = "insurance_user_id"


def current_principal(
    context: SecurityContext | None,
    *,
    claim_name: str = DEFAULT_CUSTOMER_ID_CLAIM,
) -> int | None:
    """
    Return the customer id carried by the verified identity token, or None.

    None covers every "not signed in" case: no authentication, an unauthenticated state,
    a principal that is not an identity token, a missing claim, or a claim that is not a
    positive integer (numeric claims are taken as-is, string claims are parsed).
    """

    authentication = context.authentication if context is not None else None
    if authentication is None or not authentication.authenticated:
        log.warning("user_not_authenticated")
        return None

    token = authentication.principal
    if not isinstance(token, IdentityToken):
        log.warning("principal_not_identity_token", principal_type=type(token).__name__)
        return None

    raw = token.get_claim(claim_name)
    if raw is None:
        log.warning("customer_id_claim_missing", claim=claim_name)
        return None

    customer_id = _parse_customer_id(raw)
    if customer_id is None:
        log.warning("customer_id_claim_invalid", claim=claim_name, claim_type=type(raw).__name__)
    return customer_id


def _parse_customer_id(raw: Any) -> int | None:
    # bool is an int subclass; a True claim is not a customer id.
    if isinstance(raw, bool):
        return None

    value: int | None = None
    if isinstance(raw, int):
        value = raw
    elif isinstance(raw, float):
        value = int(raw) if raw.is_integer() else None
    elif isinstance(raw, str):
        try:
            value = int(raw.strip())
        except ValueError:
            value = None

    if value is None or value <= 0:
        return None
    return value
