"""
insurance_assistant.functions

AI-callable functions.

Responsibilities:
- Request models (one per function) and their ownership shapes.
- Per-domain function definitions delegating to the insurance client.
- The function catalog and the dispatcher the tool runtime calls into.
"""

# Package marker.
