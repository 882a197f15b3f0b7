"""
insurance_assistant.insurance_client

Upstream insurance service client package.

Responsibilities:
- DTOs for customers, policies and claims as returned by the insurance REST service.
- An async HTTP client exposing lookups (used for ownership resolution) and the
  mutations/listings the AI functions delegate to.
"""

# Package marker.


# --- Module Notes -----------------------------------------------------------
# Functions and the ownership resolver depend on this boundary, never on raw httpx calls.
