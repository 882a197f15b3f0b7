"""
insurance_assistant.security

AI-function authorization.

Responsibilities:
- Extract the signed-in customer's id from the request's security context.
- Classify AI request payloads into ownership shapes.
- Resolve the owning customer of policies and claims through the upstream service.
- Wrap every catalog function so callers only touch data they own.
"""

# Package marker.


# --- Module Notes -----------------------------------------------------------
# Nothing in this package raises to the calling model; denials are values that become
# failed response envelopes.
