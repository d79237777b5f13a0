"""
Structured provider error types.

``ProviderError`` is the common base carrying a normalized :class:`ErrorCode`.
The subclasses name the four recoverable failure kinds a provider client can
report to its caller:

* :class:`ConfigurationError` - a required static field (API key, endpoint
  URL) is missing; detected before any network call.
* :class:`NetworkError` - the endpoint could not be reached (DNS, connect,
  timeout, malformed URL).
* :class:`HttpError` - the endpoint answered with a non-2xx status.
* :class:`ResponseShapeError` - a 2xx answer lacked the expected completion.

Instances are returned inside ``Err`` results rather than raised across the
provider boundary.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from .error_code import ErrorCode

# Bodies are kept whole on the error; only the human-readable message is cut.
_MESSAGE_BODY_LIMIT = 500


@dataclass
class ProviderError(Exception):
    """A provider failure with a normalized error code.

    Attributes:
        code: Normalized :class:`ErrorCode` classification.
        message: Human-readable message; shown verbatim to users by the
            connectivity check.
        provider: Provider key where the error originated (e.g. ``"openai"``).
        model: Optional model identifier associated with the call.
        raw: Optional original exception for diagnostics.
    """

    code: ErrorCode
    message: str
    provider: str = "unknown"
    model: Optional[str] = None
    raw: Optional[BaseException] = field(default=None, repr=False, compare=False)

    def __post_init__(self) -> None:
        Exception.__init__(self, self.message)

    def __str__(self) -> str:
        return self.message

    def with_context(self, provider: str, model: Optional[str]) -> "ProviderError":
        """Attach provider/model context in place and return ``self``."""
        self.provider = provider
        self.model = model or None
        return self


@dataclass
class ConfigurationError(ProviderError):
    """A required static configuration field is missing."""

    code: ErrorCode = ErrorCode.VALIDATION
    message: str = "provider is not configured"
    field_name: Optional[str] = None


@dataclass
class NetworkError(ProviderError):
    """The transport could not reach the endpoint."""

    code: ErrorCode = ErrorCode.TRANSIENT
    message: str = "network error"


@dataclass
class HttpError(ProviderError):
    """The endpoint returned a non-success HTTP status.

    ``status`` and the raw response ``body`` are kept for diagnostics.
    """

    code: ErrorCode = ErrorCode.UNKNOWN
    message: str = ""
    status: int = 0
    body: str = ""

    def __post_init__(self) -> None:
        if not self.message:
            self.message = format_http_message(self.status, self.body)
        super().__post_init__()


@dataclass
class ResponseShapeError(ProviderError):
    """A successful response did not contain the expected completion."""

    code: ErrorCode = ErrorCode.INTERNAL
    message: str = "unexpected response shape"


def format_http_message(status: int, body: str) -> str:
    """Render the user-facing message for an HTTP failure."""
    text = (body or "").strip()
    if len(text) > _MESSAGE_BODY_LIMIT:
        text = text[:_MESSAGE_BODY_LIMIT] + "..."
    if not text:
        return f"Request failed with status {status}"
    return f"Request failed with status {status}: {text}"


__all__ = [
    "ProviderError",
    "ConfigurationError",
    "NetworkError",
    "HttpError",
    "ResponseShapeError",
    "format_http_message",
]
