"""Async JSON-over-HTTPS transport for provider clients.

Purpose:
    Issue one JSON request and classify its outcome into a :data:`Result`.
    The transport is provider-agnostic: it returns parsed JSON verbatim and
    leaves envelope unwrapping to the provider clients.

External dependencies:
    - ``httpx`` (``AsyncClient``) for the request itself.

Classification:
    - body that cannot be serialized as UTF-8 JSON -> :class:`ProviderError`
      with code ``validation`` (no request is sent)
    - ``httpx.RequestError`` / ``httpx.InvalidURL`` (DNS, connect, timeout,
      unsupported scheme, malformed URL) -> :class:`NetworkError`
    - status outside 2xx -> :class:`HttpError` with status and raw body
    - 2xx body that is not JSON -> :class:`ResponseShapeError`
    - otherwise -> ``Ok(parsed_json)``

Resource model:
    A fresh ``AsyncClient`` is opened and closed per request. There is no
    pooling, coalescing or retry; concurrent calls are fully independent.
    Timeouts come from :func:`get_timeout_config` unless overridden.
"""

from __future__ import annotations

import json
from typing import Any, Mapping, Optional

import httpx

from ..errors import NetworkError, ProviderError, ResponseShapeError, http_error_for
from ..errors_parts.error_code import ErrorCode
from ..result import Err, Ok, Result
from ..timeouts import get_timeout_config


class HttpTransport:
    """Send one JSON request per call and return a classified result.

    Parameters:
        timeout_seconds: Per-request timeout; defaults to the configured
            ``http_timeout_seconds``.
        transport: Optional ``httpx`` transport, e.g. ``httpx.MockTransport``
            in tests or a proxy-aware transport in applications.
    """

    def __init__(
        self,
        timeout_seconds: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self._timeout = (
            timeout_seconds
            if timeout_seconds is not None
            else get_timeout_config().http_timeout_seconds
        )
        self._transport = transport

    @property
    def timeout_seconds(self) -> float:
        return self._timeout

    async def request(
        self,
        url: str,
        method: str,
        json_body: Any,
        headers: Mapping[str, str],
    ) -> Result[Any]:
        """Send ``json_body`` to ``url`` and classify the outcome.

        Parameters:
            url: Absolute endpoint URL.
            method: HTTP method, e.g. ``"POST"``.
            json_body: JSON-serializable request payload.
            headers: Request headers (provider-specific auth included).

        Returns:
            ``Ok`` with the parsed JSON body, or ``Err`` with a
            :class:`NetworkError`, :class:`HttpError`,
            :class:`ResponseShapeError` or a ``validation``
            :class:`ProviderError` for an unencodable body.
        """
        try:
            content = json.dumps(json_body, ensure_ascii=False).encode("utf-8")
        except (TypeError, ValueError) as exc:
            return Err(
                ProviderError(
                    code=ErrorCode.VALIDATION,
                    message=f"Request body for {_host_of(url)} cannot be encoded as JSON: {_describe(exc)}",
                    raw=exc,
                )
            )

        try:
            async with httpx.AsyncClient(
                timeout=self._timeout, transport=self._transport
            ) as client:
                response = await client.request(
                    method, url, content=content, headers=dict(headers)
                )
        except httpx.TimeoutException as exc:
            return Err(
                NetworkError(
                    code=ErrorCode.TIMEOUT,
                    message=f"Request to {_host_of(url)} timed out",
                    raw=exc,
                )
            )
        except (httpx.RequestError, httpx.InvalidURL) as exc:
            return Err(
                NetworkError(
                    message=f"Could not reach {_host_of(url)}: {_describe(exc)}",
                    raw=exc,
                )
            )

        if not response.is_success:
            return Err(http_error_for(response.status_code, response.text))

        try:
            return Ok(response.json())
        except ValueError as exc:
            return Err(
                ResponseShapeError(
                    message=f"Response from {_host_of(url)} is not valid JSON",
                    raw=exc,
                )
            )


def _host_of(url: str) -> str:
    """Best-effort host for messages; falls back to the raw text."""
    try:
        host = httpx.URL(url).host
    except (httpx.InvalidURL, TypeError, ValueError):
        host = ""
    return host or (url or "<empty url>")


def _describe(exc: BaseException) -> str:
    return str(exc) or type(exc).__name__


__all__ = ["HttpTransport"]
