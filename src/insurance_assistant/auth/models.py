"""
insurance_assistant.auth.models

Security-context types.

Responsibilities:
- Model the verified identity assertion of one request (`IdentityToken`).
- Model the authentication state (`Authentication`) and the per-request holder
  (`SecurityContext`) that is passed explicitly to the authorization layer.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True, slots=True)
class IdentityToken:
    """
    Verified OIDC-style identity token (its claims only; the raw token is not kept).
    """

    claims: Mapping[str, Any] = field(default_factory=dict)

    @property
    def subject(self) -> str:
        return str(self.claims.get("sub", ""))

    def get_claim(self, name: str) -> Any:
        return self.claims.get(name)


@dataclass(frozen=True, slots=True)
class Authentication:
    # `principal` is usually an IdentityToken; other assertion kinds are not trusted for
    # customer identity.
    principal: object
    authenticated: bool = True


@dataclass(frozen=True, slots=True)
class SecurityContext:
    authentication: Authentication | None = None

    @classmethod
    def anonymous(cls) -> SecurityContext:
        return cls(authentication=None)

    @classmethod
    def for_token(cls, token: IdentityToken) -> SecurityContext:
        return cls(authentication=Authentication(principal=token))


# --- Module Notes -----------------------------------------------------------
# A SecurityContext lives for one request; nothing here is cached or shared.
