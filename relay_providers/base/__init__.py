"""
Providers Base Package

Exports the provider-agnostic contracts, DTOs, outcome type, transport and
factory shared by every provider client.

- Interfaces: the ``ChatProvider`` boundary
- Models (DTOs): messages, generation options, per-provider config
- Result: ``Ok`` / ``Err`` outcomes for network-touching calls
- Factory: lazy creation of provider clients by canonical name
"""

from .errors import (
    ConfigurationError,
    ErrorCode,
    HttpError,
    NetworkError,
    ProviderError,
    ResponseShapeError,
)
from .factory import ProviderFactory, UnknownProviderError, create_from_settings
from .http import HttpTransport
from .interfaces import ChatProvider
from .models import ChatMessage, ModelOptions, ProviderConfig, Role
from .normalization import normalize_alternating
from .provider import BaseChatProvider
from .result import Err, Ok, Result
from .timeouts import TimeoutConfig, get_timeout_config

__all__ = [
    # Models
    "Role",
    "ChatMessage",
    "ModelOptions",
    "ProviderConfig",
    # Interfaces
    "ChatProvider",
    "BaseChatProvider",
    # Outcomes and errors
    "Ok",
    "Err",
    "Result",
    "ErrorCode",
    "ProviderError",
    "ConfigurationError",
    "NetworkError",
    "HttpError",
    "ResponseShapeError",
    # Factory
    "ProviderFactory",
    "UnknownProviderError",
    "create_from_settings",
    # Infrastructure
    "HttpTransport",
    "TimeoutConfig",
    "get_timeout_config",
    "normalize_alternating",
]
