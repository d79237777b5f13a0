"""Errors parts package public surface.

Prefer importing from ``relay_providers.base.errors`` for the stable surface.
"""

from .error_code import ErrorCode
from .provider_error import (
    ConfigurationError,
    HttpError,
    NetworkError,
    ProviderError,
    ResponseShapeError,
)
from .classification import classify_exception, code_for_status, http_error_for

__all__ = [
    "ErrorCode",
    "ProviderError",
    "ConfigurationError",
    "NetworkError",
    "HttpError",
    "ResponseShapeError",
    "classify_exception",
    "code_for_status",
    "http_error_for",
]
