"""
insurance_assistant.api

HTTP surface of the assistant's function runtime.

Responsibilities:
- FastAPI app factory and router modules.
- API-layer dependency wiring.
"""

# Package marker.
