"""Timeout configuration for provider HTTP calls.

Every outbound request takes its timeout from :func:`get_timeout_config`
rather than a literal at the call site. The transport hands the value to
``httpx`` which enforces it; an expired timeout surfaces as a
``NetworkError`` with code ``timeout``.

Supported environment variables (optional):
    RELAY_HTTP_TIMEOUT_SECONDS
        Per-request timeout in seconds (connect + read + write + pool).
        Non-positive or unparsable values fall back to the default.

The parsed configuration is cached for the process; tests that change the
environment call :func:`reset_timeout_cache`.
"""
from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional

DEFAULT_HTTP_TIMEOUT_SECONDS = 30.0


@dataclass(frozen=True)
class TimeoutConfig:
    """Normalized timeout values (seconds).

    Attributes:
        http_timeout_seconds: Timeout applied to each non-streaming request.
    """

    http_timeout_seconds: float = DEFAULT_HTTP_TIMEOUT_SECONDS


_CACHED: Optional[TimeoutConfig] = None


def _parse_env_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if not raw:
        return default
    try:
        val = float(raw)
    except ValueError:
        return default
    return val if val > 0 else default


def get_timeout_config() -> TimeoutConfig:
    """Return the process-cached :class:`TimeoutConfig`."""
    global _CACHED  # noqa: PLW0603 - documented module cache
    if _CACHED is None:
        _CACHED = TimeoutConfig(
            http_timeout_seconds=_parse_env_float(
                "RELAY_HTTP_TIMEOUT_SECONDS", DEFAULT_HTTP_TIMEOUT_SECONDS
            )
        )
    return _CACHED


def reset_timeout_cache() -> None:
    """Forget the cached configuration so the next read re-parses the env."""
    global _CACHED  # noqa: PLW0603
    _CACHED = None


__all__ = [
    "TimeoutConfig",
    "DEFAULT_HTTP_TIMEOUT_SECONDS",
    "get_timeout_config",
    "reset_timeout_cache",
]
