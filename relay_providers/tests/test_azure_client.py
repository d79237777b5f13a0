"""AzureOpenAIProvider wire contract."""

from __future__ import annotations

import asyncio

from relay_providers.azure import AzureOpenAIProvider
from relay_providers.base.models import ChatMessage, ModelOptions
from relay_providers.base.result import Ok

AZURE_URL = (
    "https://unit.openai.azure.com/openai/deployments/gpt4/chat/completions"
    "?api-version=2024-02-01"
)


def _reply(content="hello world"):
    return {"choices": [{"index": 0, "message": {"role": "assistant", "content": content}}]}


def test_api_key_header_and_deployment_url(recording):
    rec = recording(body=_reply("ok"))
    client = AzureOpenAIProvider("azure-unit", AZURE_URL, "", transport=rec.transport)
    result = asyncio.run(client.query_chat_model([ChatMessage.user("x")]))
    assert result == Ok("ok")  # nosec B101
    req = rec.requests[0]
    assert req.headers["api-key"] == "azure-unit"  # nosec B101
    assert "authorization" not in req.headers  # nosec B101
    assert req.url.params["api-version"] == "2024-02-01"  # nosec B101


def test_model_omitted_unless_configured(recording):
    rec = recording(body=_reply())
    asyncio.run(
        AzureOpenAIProvider("k", AZURE_URL, "", transport=rec.transport).query_chat_model(
            [ChatMessage.user("x")]
        )
    )
    assert "model" not in rec.last_json()  # nosec B101

    rec = recording(body=_reply())
    asyncio.run(
        AzureOpenAIProvider("k", AZURE_URL, "gpt-4o", transport=rec.transport).query_chat_model(
            [ChatMessage.user("x")]
        )
    )
    assert rec.last_json()["model"] == "gpt-4o"  # nosec B101


def test_all_options_forwarded(recording):
    rec = recording(body=_reply())
    options = ModelOptions(temperature=0.1, top_p=0.5, max_tokens=10, presence_penalty=1.0)
    client = AzureOpenAIProvider("k", AZURE_URL, "", options, transport=rec.transport)
    asyncio.run(client.query_chat_model([ChatMessage.user("a"), ChatMessage.user("b")]))
    body = rec.last_json()
    assert body["presence_penalty"] == 1.0  # nosec B101
    assert body["max_tokens"] == 10  # nosec B101
    assert [m["content"] for m in body["messages"]] == ["a", "b"]  # nosec B101


def test_from_settings_reads_azure_section(settings):
    client = AzureOpenAIProvider.from_settings(settings)
    assert client.provider_name == "azure"  # nosec B101
    assert client.config.endpoint_url == AZURE_URL  # nosec B101
    assert client.config.api_key == "azure-unit"  # nosec B101
