"""relay_providers.config.env
==========================

Centralized environment variable mapping for provider settings.

Purpose
-------
- Single source of truth mapping provider identifiers to their environment
  variable names (API key, base URL, model) and to the settings section that
  holds them.
- Small helpers to read those variables consistently.

Failure Modes
-------------
- Helpers never raise on unknown providers or unset variables; they return
  ``None`` or an empty mapping and let callers decide.
"""

from __future__ import annotations

import os
from typing import Dict, Optional

# Canonical provider -> API key env var
ENV_MAP: Dict[str, str] = {
    "anthropic": "ANTHROPIC_API_KEY",
    "azure": "AZURE_OPENAI_API_KEY",
    "openai": "OPENAI_API_KEY",
}

# Canonical provider -> prefix for <PREFIX>_BASE_URL / <PREFIX>_MODEL
ENV_PREFIX: Dict[str, str] = {
    "anthropic": "ANTHROPIC",
    "azure": "AZURE_OPENAI",
    "openai": "OPENAI",
}

# Canonical provider -> Settings attribute holding its ApiSettings
SETTINGS_SECTION: Dict[str, str] = {
    "anthropic": "anthropic_api_settings",
    "azure": "azure_oai_api_settings",
    "openai": "openai_api_settings",
}


def is_placeholder(val: Optional[str]) -> bool:
    """Return True if the provided string looks like a placeholder/test value.

    Heuristics: contains 'placeholder', 'changeme', 'example', or starts with
    'test_'. The check is case-insensitive and resilient to surrounding spaces.
    """
    if val is None:
        return False
    v = str(val).strip().lower()
    return (
        "placeholder" in v
        or "changeme" in v
        or "example" in v
        or v.startswith("test_")
    )


def get_env_var_name(provider: str) -> Optional[str]:
    """Return the API key environment variable name for a provider."""
    return ENV_MAP.get(provider.lower()) if provider else None


def env_api_settings(provider: str) -> Dict[str, str]:
    """Return ``{key, url, model}`` values present in the environment.

    Only variables that are set (and, for the key, not a placeholder) are
    included, so the result can be merged over lower-precedence sources.
    """
    name = (provider or "").lower()
    out: Dict[str, str] = {}
    key_var = ENV_MAP.get(name)
    prefix = ENV_PREFIX.get(name)
    if not key_var or not prefix:
        return out
    key = os.getenv(key_var)
    if key is not None and not is_placeholder(key):
        out["key"] = key
    url = os.getenv(f"{prefix}_BASE_URL")
    if url is not None:
        out["url"] = url
    model = os.getenv(f"{prefix}_MODEL")
    if model is not None:
        out["model"] = model
    return out


__all__ = [
    "ENV_MAP",
    "ENV_PREFIX",
    "SETTINGS_SECTION",
    "is_placeholder",
    "get_env_var_name",
    "env_api_settings",
]
