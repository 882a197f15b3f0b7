"""
insurance_assistant.security.outcomes

Authorization outcomes and the fixed, user-presentable denial messages.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass


class DenialReason(enum.StrEnum):
    blocked = "BLOCKED"
    not_authenticated = "NOT_AUTHENTICATED"
    cannot_resolve_owner = "CANNOT_RESOLVE_OWNER"
    owner_mismatch = "OWNER_MISMATCH"


# Messages never name the other customer's records; they only acknowledge the refusal.
DENIAL_MESSAGES: dict[DenialReason, str] = {
    DenialReason.blocked: (
        "This operation is not available through the AI assistant for security reasons. "
        "Please contact customer service for assistance."
    ),
    DenialReason.not_authenticated: "User is not authenticated. Please sign in and try again.",
    DenialReason.cannot_resolve_owner: (
        "The requested record could not be found or could not be matched to your account. "
        "Request could not be processed."
    ),
    DenialReason.owner_mismatch: (
        "Access denied. You can only access your own data. "
        "If you believe this is an error, please contact customer service."
    ),
}


@dataclass(frozen=True, slots=True)
class Authorized:
    principal_id: int


@dataclass(frozen=True, slots=True)
class Denied:
    reason: DenialReason

    @property
    def message(self) -> str:
        return DENIAL_MESSAGES[self.reason]


AuthorizationOutcome = Authorized | Denied
