"""Shared constants for provider clients.

Central location for fixed strings used on the wire or in conversation
normalization so that tests and clients agree on a single value.
"""
from __future__ import annotations

# Filler inserted between two adjacent same-role messages.
ALTERNATION_FILLER = "Thanks."

# Filler appended when the final two messages still share a role.
TRAILING_FILLER = "Automated response"

# Probe conversation content used by the connectivity check.
PROBE_PROMPT = "Say hello world and nothing else."

# Anthropic Messages API version header value.
ANTHROPIC_API_VERSION = "2023-06-01"

JSON_CONTENT_TYPE = "application/json"

__all__ = [
    "ALTERNATION_FILLER",
    "TRAILING_FILLER",
    "PROBE_PROMPT",
    "ANTHROPIC_API_VERSION",
    "JSON_CONTENT_TYPE",
]
