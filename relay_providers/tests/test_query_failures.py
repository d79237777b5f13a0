"""query_chat_model failure outcomes shared by every provider."""

from __future__ import annotations

import asyncio

import httpx
import pytest

from relay_providers.anthropic import AnthropicProvider
from relay_providers.azure import AzureOpenAIProvider
from relay_providers.base.errors import ErrorCode, NetworkError
from relay_providers.base.models import ChatMessage
from relay_providers.base.result import Err, Ok
from relay_providers.openai import OpenAIProvider

URL = "https://api.unit.test/v1/chat"

PROVIDERS = [AnthropicProvider, AzureOpenAIProvider, OpenAIProvider]


def _ok_for(klass):
    if klass is AnthropicProvider:
        return {"content": [{"type": "text", "text": "done"}]}
    return {"choices": [{"message": {"content": "done"}}]}


@pytest.mark.parametrize("klass", PROVIDERS, ids=lambda k: k.name)
def test_connection_failure_is_network_error(recording, klass):
    def handler(request):
        raise httpx.ConnectError("connection refused", request=request)

    client = klass("key", URL, "model", transport=recording(handler).transport)
    result = asyncio.run(client.query_chat_model([ChatMessage.user("hi")]))
    assert isinstance(result, Err)  # nosec B101
    assert isinstance(result.error, NetworkError)  # nosec B101
    assert result.error.provider == klass.name  # nosec B101
    assert "connection refused" in result.error.message  # nosec B101


@pytest.mark.parametrize("klass", PROVIDERS, ids=lambda k: k.name)
def test_generator_conversation_is_accepted(recording, klass):
    rec = recording(body=_ok_for(klass))
    client = klass("key", URL, "model", transport=rec.transport)
    convo = (ChatMessage.user(text) for text in ("a",))
    assert asyncio.run(client.query_chat_model(convo)) == Ok("done")  # nosec B101
    assert rec.last_json()["messages"][0] == {"role": "user", "content": "a"}  # nosec B101


def test_non_iterable_conversation_is_validation_error(recording):
    rec = recording(body=_ok_for(OpenAIProvider))
    client = OpenAIProvider("key", URL, "model", transport=rec.transport)
    result = asyncio.run(client.query_chat_model(None))
    assert isinstance(result, Err)  # nosec B101
    assert result.error.code is ErrorCode.VALIDATION  # nosec B101
    assert rec.calls == 0  # nosec B101
