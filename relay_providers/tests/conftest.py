"""Pytest configuration for the relay_providers test suite.

Provides an isolated environment (no provider credentials or relay settings
leak in from the developer's shell) and a recording ``httpx.MockTransport``
so provider clients can be exercised without network access.
"""

from __future__ import annotations

import json
from typing import Any, Callable, Iterator, List

import httpx
import pytest

from relay_providers.base.http import HttpTransport
from relay_providers.base.timeouts import reset_timeout_cache
from relay_providers.config import ApiSettings, Settings

_ISOLATED_ENV = (
    "ANTHROPIC_API_KEY",
    "ANTHROPIC_BASE_URL",
    "ANTHROPIC_MODEL",
    "AZURE_OPENAI_API_KEY",
    "AZURE_OPENAI_BASE_URL",
    "AZURE_OPENAI_MODEL",
    "OPENAI_API_KEY",
    "OPENAI_BASE_URL",
    "OPENAI_MODEL",
    "RELAY_API_PROVIDER",
    "RELAY_SETTINGS_FILE",
    "RELAY_HTTP_TIMEOUT_SECONDS",
)

AZURE_URL = (
    "https://unit.openai.azure.com/openai/deployments/gpt4/chat/completions"
    "?api-version=2024-02-01"
)


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Remove provider variables from the environment for each test."""
    for name in _ISOLATED_ENV:
        monkeypatch.delenv(name, raising=False)
    reset_timeout_cache()
    yield
    reset_timeout_cache()


class RecordingTransport:
    """``HttpTransport`` backed by ``httpx.MockTransport`` that keeps requests."""

    def __init__(self, handler: Callable[[httpx.Request], httpx.Response]) -> None:
        self.requests: List[httpx.Request] = []

        def _record(request: httpx.Request) -> httpx.Response:
            self.requests.append(request)
            return handler(request)

        self.transport = HttpTransport(timeout_seconds=5.0, transport=httpx.MockTransport(_record))

    @property
    def calls(self) -> int:
        return len(self.requests)

    def last_json(self) -> Any:
        return json.loads(self.requests[-1].content)


@pytest.fixture()
def recording() -> Callable[..., RecordingTransport]:
    """Return a builder: ``recording(handler)`` or ``recording(status=, body=, text=)``."""

    def _build(
        handler: Callable[[httpx.Request], httpx.Response] | None = None,
        *,
        status: int = 200,
        body: Any = None,
        text: str | None = None,
    ) -> RecordingTransport:
        if handler is None:

            def handler(request: httpx.Request) -> httpx.Response:
                if text is not None:
                    return httpx.Response(status, text=text)
                return httpx.Response(status, json=body)

        return RecordingTransport(handler)

    return _build


@pytest.fixture()
def settings() -> Settings:
    """Fully configured settings for every provider."""
    return Settings(
        api_provider="openai",
        anthropic_api_settings=ApiSettings(
            key="sk-ant-unit", url="https://api.anthropic.com/v1/messages", model="claude-unit"
        ),
        azure_oai_api_settings=ApiSettings(key="azure-unit", url=AZURE_URL, model=""),
        openai_api_settings=ApiSettings(
            key="sk-unit", url="https://api.openai.com/v1/chat/completions", model="gpt-unit"
        ),
    )
