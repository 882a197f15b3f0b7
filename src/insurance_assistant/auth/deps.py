"""
insurance_assistant.auth.deps

FastAPI dependency functions for authentication.

Responsibilities:
- Convert a bearer identity token into a `SecurityContext`.
- Degrade missing/invalid tokens to an anonymous context so the AI function layer can
  answer with its own "not signed in" result instead of an HTTP error.
"""

from __future__ import annotations

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from insurance_assistant.auth.jwt import JwtConfig, JwtValidationError, decode_and_validate
from insurance_assistant.auth.models import IdentityToken, SecurityContext
from insurance_assistant.observability.logging import get_logger
from insurance_assistant.settings import Settings, get_settings

log = get_logger(__name__)

_bearer = HTTPBearer(auto_error=False)


def get_security_context(
    creds: HTTPAuthorizationCredentials | None = Depends(_bearer),
    settings: Settings = Depends(get_settings),
) -> SecurityContext:
    if creds is None or not creds.credentials:
        return SecurityContext.anonymous()

    try:
        claims = decode_and_validate(cfg=JwtConfig.from_settings(settings), token=creds.credentials)
    except JwtValidationError as e:
        log.warning("identity_token_rejected", reason=str(e))
        return SecurityContext.anonymous()

    return SecurityContext.for_token(IdentityToken(claims=claims))


# --- Module Notes -----------------------------------------------------------
# Routers that must hard-fail without a token (none today) should check
# `context.authentication` themselves rather than changing this dependency.
