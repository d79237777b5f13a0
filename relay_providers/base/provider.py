"""Shared chat-provider template.

Purpose
-------
``BaseChatProvider`` implements the request flow common to every provider
client so that each concrete client only supplies what differs:

* ``normalize_messages`` - provider-specific conversation shaping (pure)
* ``build_headers`` - fixed per-provider headers including auth
* ``extract_completion`` - path to the completion inside the JSON envelope
* ``api_settings`` - which settings section feeds ``from_settings``
* ``unsupported_options`` - ModelOptions names the API does not accept

Flow of ``query_chat_model``
----------------------------
normalize -> build body ``{messages, model, **options}`` -> one POST through
:class:`HttpTransport` -> unwrap completion -> ``Result``. Nothing raises
past this boundary: unexpected exceptions are classified and returned as
``Err``.

Connectivity check
------------------
``check_configuration`` validates static fields first and returns only those
problems when any are missing (a probe with missing credentials cannot yield
a meaningful error). Otherwise it sends exactly one probe conversation and
reports the resulting error message, if any, as the sole problem.
"""

from __future__ import annotations

import logging
import time
from abc import ABC, abstractmethod
from typing import Any, ClassVar, Dict, FrozenSet, Iterable, List, Optional, Sequence

from .constants import JSON_CONTENT_TYPE, PROBE_PROMPT
from .errors import (
    ConfigurationError,
    ErrorCode,
    HttpError,
    ProviderError,
    ResponseShapeError,
    classify_exception,
)
from .http import HttpTransport
from .logging import LogContext, get_logger, log_event
from .models import ChatMessage, ModelOptions, ProviderConfig
from .result import Err, Ok, Result


class BaseChatProvider(ABC):
    """Template implementation of :class:`ChatProvider`.

    Parameters:
        api_key: Provider credential (may be empty; see ``static_problems``).
        endpoint_url: Full URL the chat request is POSTed to.
        model: Model or deployment identifier.
        model_options: Shared generation parameters; options listed in
            ``unsupported_options`` are dropped here and never sent.
        transport: Optional transport override (tests, proxies).
    """

    name: ClassVar[str] = ""
    display_name: ClassVar[str] = ""
    unsupported_options: ClassVar[FrozenSet[str]] = frozenset()

    def __init__(
        self,
        api_key: str,
        endpoint_url: str,
        model: str,
        model_options: Optional[ModelOptions] = None,
        *,
        transport: Optional[HttpTransport] = None,
    ) -> None:
        options = model_options or ModelOptions()
        restricted = ModelOptions(**options.to_payload(exclude=self.unsupported_options))
        self._config = ProviderConfig(
            api_key=(api_key or "").strip(),
            endpoint_url=(endpoint_url or "").strip(),
            model=(model or "").strip(),
            model_options=restricted,
        )
        self._transport = transport or HttpTransport()
        self._logger = get_logger(self.name or "provider")

    # ---- construction -----------------------------------------------------

    @classmethod
    def from_settings(cls, settings: Any, *, transport: Optional[HttpTransport] = None):
        """Build a client from the application settings object.

        Reads exactly the key, URL and model of this provider's settings
        section plus the shared ``model_options``.
        """
        api = cls.api_settings(settings)
        return cls(
            api.key,
            api.url,
            api.model,
            settings.model_options,
            transport=transport,
        )

    @classmethod
    @abstractmethod
    def api_settings(cls, settings: Any) -> Any:
        """Return this provider's ``ApiSettings`` section of ``settings``."""

    # ---- properties -------------------------------------------------------

    @property
    def provider_name(self) -> str:
        return self.name

    @property
    def config(self) -> ProviderConfig:
        return self._config

    # ---- provider-specific hooks -----------------------------------------

    def normalize_messages(self, messages: Sequence[ChatMessage]) -> List[ChatMessage]:
        """Return the conversation to send; default is an unchanged copy."""
        return [ChatMessage(role=m.role, content=m.content) for m in messages]

    @abstractmethod
    def build_headers(self) -> Dict[str, str]:
        """Return the fixed request headers including authentication."""

    @abstractmethod
    def extract_completion(self, data: Any) -> Any:
        """Return the completion from a parsed success body.

        May raise ``KeyError``, ``IndexError`` or ``TypeError`` on a missing
        envelope; the caller converts those into :class:`ResponseShapeError`.
        """

    def build_body(self, messages: Sequence[ChatMessage]) -> Dict[str, Any]:
        """Return ``{messages, model, **model_options}``."""
        body: Dict[str, Any] = {
            "messages": [m.to_dict() for m in messages],
            "model": self._config.model,
        }
        body.update(self._config.model_options.to_payload())
        return body

    def json_headers(self) -> Dict[str, str]:
        return {"Content-Type": JSON_CONTENT_TYPE}

    # ---- operations -------------------------------------------------------

    async def query_chat_model(self, messages: Iterable[ChatMessage]) -> Result[str]:
        """Send ``messages`` and return the completion text.

        The caller's messages are never modified; any iterable is accepted
        and read once.

        Returns:
            ``Ok(text)`` or ``Err`` carrying :class:`NetworkError`,
            :class:`HttpError`, :class:`ResponseShapeError` or, for anything
            unexpected, a classified :class:`ProviderError`.
        """
        ctx = LogContext(provider=self.provider_name, model=self._config.model or None)
        try:
            messages = list(messages)
        except TypeError as exc:
            return Err(
                ProviderError(
                    code=ErrorCode.VALIDATION,
                    message="messages must be an iterable of ChatMessage",
                    provider=self.provider_name,
                    model=self._config.model or None,
                    raw=exc,
                )
            )
        log_event(self._logger, "chat.start", ctx, message_count=len(messages))
        t0 = time.perf_counter()
        try:
            result = await self._send(messages)
        except Exception as exc:  # boundary: classify anything unexpected
            result = Err(
                ProviderError(
                    code=classify_exception(exc),
                    message=str(exc) or type(exc).__name__,
                    raw=exc,
                )
            )
        latency_ms = (time.perf_counter() - t0) * 1000.0

        if isinstance(result, Err):
            err = result.error.with_context(self.provider_name, self._config.model)
            log_event(
                self._logger,
                "chat.error",
                ctx,
                level=logging.WARNING,
                error_code=err.code.value,
                error_type=type(err).__name__,
                status=err.status if isinstance(err, HttpError) else None,
                latency_ms=round(latency_ms, 1),
            )
            return result
        log_event(self._logger, "chat.end", ctx, latency_ms=round(latency_ms, 1))
        return result

    async def _send(self, messages: Sequence[ChatMessage]) -> Result[str]:
        body = self.build_body(self.normalize_messages(messages))
        response = await self._transport.request(
            self._config.endpoint_url, "POST", body, self.build_headers()
        )
        if isinstance(response, Err):
            return response
        return self._unwrap(response.value)

    def _unwrap(self, data: Any) -> Result[str]:
        try:
            text = self.extract_completion(data)
        except (KeyError, IndexError, TypeError) as exc:
            return Err(
                ResponseShapeError(
                    message=f"{self.display_name} response is missing the completion text",
                    raw=exc,
                )
            )
        if not isinstance(text, str):
            return Err(
                ResponseShapeError(
                    message=f"{self.display_name} response completion is not text"
                )
            )
        return Ok(text)

    def static_problems(self) -> List[ConfigurationError]:
        """Return missing-field problems without touching the network."""
        problems: List[ConfigurationError] = []
        if not self._config.api_key:
            problems.append(
                ConfigurationError(
                    message=f"{self.display_name} API key is not set",
                    provider=self.provider_name,
                    field_name="api_key",
                )
            )
        if not self._config.endpoint_url:
            problems.append(
                ConfigurationError(
                    message=f"{self.display_name} API url is not set",
                    provider=self.provider_name,
                    field_name="endpoint_url",
                )
            )
        return problems

    async def check_configuration(self) -> List[str]:
        """Return configuration problems; an empty list means it works.

        Missing static fields short-circuit: those problems are returned and
        no request is made. Otherwise one probe conversation is sent and its
        error message, if any, is the only problem reported.
        """
        ctx = LogContext(provider=self.provider_name, model=self._config.model or None)
        static = self.static_problems()
        if static:
            log_event(self._logger, "config.check", ctx, probed=False, problems=len(static))
            return [p.message for p in static]

        result = await self.query_chat_model([ChatMessage.user(PROBE_PROMPT)])
        problems = [result.error.message] if isinstance(result, Err) else []
        log_event(self._logger, "config.check", ctx, probed=True, problems=len(problems))
        return problems

    async def is_configured_correctly(self) -> bool:
        """Return True when :meth:`check_configuration` reports no problems."""
        return not await self.check_configuration()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._config!r})"


__all__ = ["BaseChatProvider"]
