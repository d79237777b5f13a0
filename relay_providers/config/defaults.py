"""relay_providers.config.defaults
===============================

Central place for small, stable default values used across the
relay_providers package and its CLI. These defaults can be overridden via a
settings file, environment variables or in-code overrides.

This module avoids importing from other provider packages to prevent
circular dependencies. Only plain constants live here.
"""

from __future__ import annotations

# ---- Provider selection ----
DEFAULT_API_PROVIDER = "openai"

# ---- Anthropic ----
ANTHROPIC_DEFAULT_URL = "https://api.anthropic.com/v1/messages"
ANTHROPIC_DEFAULT_MODEL = "claude-3-5-sonnet-latest"

# ---- Azure OpenAI ----
# Deployment URLs are per resource; there is no usable default.
AZURE_OPENAI_DEFAULT_URL = ""
AZURE_OPENAI_DEFAULT_MODEL = ""

# ---- OpenAI ----
OPENAI_DEFAULT_URL = "https://api.openai.com/v1/chat/completions"
OPENAI_DEFAULT_MODEL = "gpt-4o-mini"

# ---- Generation options ----
DEFAULT_TEMPERATURE = 0.7
DEFAULT_MAX_TOKENS = 1024

# ---- Settings file ----
# Environment variable naming a JSON or YAML settings file.
SETTINGS_FILE_ENV = "RELAY_SETTINGS_FILE"
# Environment variable selecting the active provider.
API_PROVIDER_ENV = "RELAY_API_PROVIDER"

__all__ = [
    "DEFAULT_API_PROVIDER",
    "ANTHROPIC_DEFAULT_URL",
    "ANTHROPIC_DEFAULT_MODEL",
    "AZURE_OPENAI_DEFAULT_URL",
    "AZURE_OPENAI_DEFAULT_MODEL",
    "OPENAI_DEFAULT_URL",
    "OPENAI_DEFAULT_MODEL",
    "DEFAULT_TEMPERATURE",
    "DEFAULT_MAX_TOKENS",
    "SETTINGS_FILE_ENV",
    "API_PROVIDER_ENV",
]
