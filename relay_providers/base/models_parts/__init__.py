"""Model DTO parts. Prefer importing from ``relay_providers.base.models``."""

from .message import ROLES, ChatMessage, Role
from .model_options import ModelOptions
from .provider_config import ProviderConfig

__all__ = ["ChatMessage", "Role", "ROLES", "ModelOptions", "ProviderConfig"]
