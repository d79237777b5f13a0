"""Provider-agnostic data model re-exports.

Stable import path for the DTOs defined one-per-module under
``relay_providers.base.models_parts``.
"""

from .models_parts import ROLES, ChatMessage, ModelOptions, ProviderConfig, Role

__all__ = ["ChatMessage", "Role", "ROLES", "ModelOptions", "ProviderConfig"]
