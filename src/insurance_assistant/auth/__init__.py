"""
insurance_assistant.auth

Authentication package.

Responsibilities:
- Identity-token issuing and validation.
- Security-context types handed explicitly to the authorization layer.
- FastAPI dependency turning a bearer token into a `SecurityContext`.
"""

# Package marker.


# --- Module Notes -----------------------------------------------------------
# Authorization (who may touch which record) lives in `insurance_assistant.security`.
