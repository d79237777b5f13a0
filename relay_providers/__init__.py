"""relay_providers package

Uniform asynchronous chat interface over Anthropic, Azure OpenAI and OpenAI.

Purpose:
    Provide a minimal, stable API for external consumption. Callers build a
    client from settings and use it directly, for example::

        settings = load_settings()
        client = create_from_settings(settings)
        result = await client.query_chat_model([ChatMessage.user("Hi")])

Public API (re-exported):
    - Version: ``__version__``
    - Exceptions: :class:`ProviderError` and its typed subclasses,
      :class:`ErrorCode`, :class:`UnknownProviderError`
    - Outcomes: :class:`Ok`, :class:`Err`
    - Factory: :func:`create`, :func:`create_from_settings`
    - Settings: :class:`Settings`, :func:`load_settings`
"""

from typing import Any, Optional

from .base.errors import (
    ConfigurationError,
    ErrorCode,
    HttpError,
    NetworkError,
    ProviderError,
    ResponseShapeError,
)
from .base.factory import ProviderFactory, UnknownProviderError, create_from_settings
from .base.http import HttpTransport
from .base.interfaces import ChatProvider
from .base.models import ChatMessage, ModelOptions
from .base.result import Err, Ok, Result
from .config import Settings, load_settings

__version__ = "0.1.0"


def create(
    provider: str,
    settings: Optional[Settings] = None,
    *,
    transport: Optional[HttpTransport] = None,
) -> Any:
    """Build a client for ``provider``; settings default to :func:`load_settings`."""
    return ProviderFactory.create(provider, settings or load_settings(), transport=transport)


__all__ = [
    # Version
    "__version__",
    # Exceptions
    "ProviderError",
    "ErrorCode",
    "ConfigurationError",
    "NetworkError",
    "HttpError",
    "ResponseShapeError",
    "UnknownProviderError",
    # Outcomes and models
    "Ok",
    "Err",
    "Result",
    "ChatMessage",
    "ModelOptions",
    "ChatProvider",
    # Factory and settings
    "ProviderFactory",
    "HttpTransport",
    "create",
    "create_from_settings",
    "Settings",
    "load_settings",
]
