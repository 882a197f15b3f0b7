"""
insurance_assistant

Top-level package for the customer-facing insurance assistant service.

Responsibilities:
- Expose package version metadata.
"""

__all__ = ["__version__"]

__version__ = "0.1.0"


# --- Module Notes -----------------------------------------------------------
# Keep this file minimal; importing the package must not configure logging or open clients.
