"""check_configuration: static short-circuit and single probe."""

from __future__ import annotations

import asyncio

import httpx

from relay_providers.anthropic import AnthropicProvider
from relay_providers.azure import AzureOpenAIProvider
from relay_providers.openai import OpenAIProvider

URL = "https://api.unit.test/v1/chat"


def _ok(request):
    return httpx.Response(200, json={"choices": [{"message": {"content": "hello world"}}]})


def test_missing_fields_short_circuit_without_network(recording):
    rec = recording(_ok)
    client = OpenAIProvider("", "  ", "gpt", transport=rec.transport)
    problems = asyncio.run(client.check_configuration())
    assert problems == ["OpenAI API key is not set", "OpenAI API url is not set"]  # nosec B101
    assert rec.calls == 0  # nosec B101


def test_static_messages_per_provider(recording):
    rec = recording(_ok)
    anthropic = AnthropicProvider("", URL, "m", transport=rec.transport)
    azure = AzureOpenAIProvider("key", "", "", transport=rec.transport)
    assert asyncio.run(anthropic.check_configuration()) == ["Anthropic API key is not set"]  # nosec B101
    assert asyncio.run(azure.check_configuration()) == ["Azure OpenAI API url is not set"]  # nosec B101
    assert rec.calls == 0  # nosec B101


def test_static_problems_are_configuration_errors():
    problems = OpenAIProvider("", "", "").static_problems()
    assert [p.field_name for p in problems] == ["api_key", "endpoint_url"]  # nosec B101
    assert all(p.code.value == "validation" for p in problems)  # nosec B101


def test_probe_success_returns_no_problems(recording):
    rec = recording(_ok)
    client = OpenAIProvider("sk", URL, "gpt", transport=rec.transport)
    assert asyncio.run(client.check_configuration()) == []  # nosec B101
    assert asyncio.run(client.is_configured_correctly()) is True  # nosec B101
    assert rec.last_json()["messages"] == [  # nosec B101
        {"role": "user", "content": "Say hello world and nothing else."}
    ]


def test_probe_failure_reports_exactly_one_problem(recording):
    rec = recording(status=401, text="invalid api key")
    client = AnthropicProvider("bad", URL, "m", transport=rec.transport)
    problems = asyncio.run(client.check_configuration())
    assert len(problems) == 1  # nosec B101
    assert "401" in problems[0]  # nosec B101
    assert "invalid api key" in problems[0]  # nosec B101
    assert rec.calls == 1  # nosec B101


def test_network_failure_reported_as_problem(recording):
    def handler(request):
        raise httpx.ConnectError("connection refused", request=request)

    client = AzureOpenAIProvider("k", URL, "", transport=recording(handler).transport)
    problems = asyncio.run(client.check_configuration())
    assert len(problems) == 1  # nosec B101
    assert "connection refused" in problems[0]  # nosec B101
    assert asyncio.run(client.is_configured_correctly()) is False  # nosec B101


def test_concurrent_checks_are_independent(recording):
    good = OpenAIProvider("sk", URL, "gpt", transport=recording(_ok).transport)
    bad = OpenAIProvider("sk", URL, "gpt", transport=recording(status=500, text="down").transport)

    async def both():
        return await asyncio.gather(good.check_configuration(), bad.check_configuration())

    ok_problems, bad_problems = asyncio.run(both())
    assert ok_problems == []  # nosec B101
    assert len(bad_problems) == 1  # nosec B101
