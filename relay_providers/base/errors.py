"""Provider error taxonomy public surface.

Re-exports the one-class-per-file implementations under
``relay_providers.base.errors_parts`` behind a stable import path.
"""

from .errors_parts import (
    ConfigurationError,
    ErrorCode,
    HttpError,
    NetworkError,
    ProviderError,
    ResponseShapeError,
    classify_exception,
    code_for_status,
    http_error_for,
)

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
