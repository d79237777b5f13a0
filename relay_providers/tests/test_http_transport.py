"""HTTP transport outcome classification."""

from __future__ import annotations

import asyncio

import httpx

from relay_providers.base.errors import ErrorCode, HttpError, NetworkError, ResponseShapeError
from relay_providers.base.http import HttpTransport
from relay_providers.base.result import Err, Ok
from relay_providers.base.timeouts import DEFAULT_HTTP_TIMEOUT_SECONDS

URL = "https://api.unit.test/v1/chat"


def _send(transport: HttpTransport, body=None):
    return asyncio.run(transport.request(URL, "POST", body or {"a": 1}, {"X-Test": "1"}))


def test_success_returns_parsed_json_and_sends_body(recording):
    rec = recording(body={"ok": True})
    result = _send(rec.transport, {"messages": [{"role": "user", "content": "héllo"}]})
    assert isinstance(result, Ok)  # nosec B101
    assert result.value == {"ok": True}  # nosec B101
    req = rec.requests[0]
    assert req.method == "POST"  # nosec B101
    assert str(req.url) == URL  # nosec B101
    assert req.headers["X-Test"] == "1"  # nosec B101
    assert rec.last_json() == {"messages": [{"role": "user", "content": "héllo"}]}  # nosec B101


def test_non_2xx_is_http_error_with_status_and_body(recording):
    rec = recording(status=401, text='{"error": "invalid x-api-key"}')
    result = _send(rec.transport)
    assert isinstance(result, Err)  # nosec B101
    err = result.error
    assert isinstance(err, HttpError)  # nosec B101
    assert err.status == 401  # nosec B101
    assert err.body == '{"error": "invalid x-api-key"}'  # nosec B101
    assert err.code is ErrorCode.AUTH  # nosec B101
    assert "401" in err.message  # nosec B101


def test_server_error_code(recording):
    result = _send(recording(status=529, text="overloaded").transport)
    assert result.error.code is ErrorCode.SERVER_ERROR  # nosec B101


def test_invalid_json_is_response_shape_error(recording):
    result = _send(recording(status=200, text="<html>nope</html>").transport)
    assert isinstance(result.error, ResponseShapeError)  # nosec B101


def test_connect_failure_is_network_error(recording):
    def handler(request):
        raise httpx.ConnectError("name resolution failed", request=request)

    result = _send(recording(handler).transport)
    assert isinstance(result.error, NetworkError)  # nosec B101
    assert result.error.code is ErrorCode.TRANSIENT  # nosec B101
    assert "api.unit.test" in result.error.message  # nosec B101


def test_timeout_is_network_error_with_timeout_code(recording):
    def handler(request):
        raise httpx.ReadTimeout("slow", request=request)

    result = _send(recording(handler).transport)
    assert isinstance(result.error, NetworkError)  # nosec B101
    assert result.error.code is ErrorCode.TIMEOUT  # nosec B101


def test_timeout_defaults_from_environment(monkeypatch):
    assert HttpTransport().timeout_seconds == DEFAULT_HTTP_TIMEOUT_SECONDS  # nosec B101
    from relay_providers.base.timeouts import reset_timeout_cache

    monkeypatch.setenv("RELAY_HTTP_TIMEOUT_SECONDS", "4.5")
    reset_timeout_cache()
    assert HttpTransport().timeout_seconds == 4.5  # nosec B101
    assert HttpTransport(timeout_seconds=1.0).timeout_seconds == 1.0  # nosec B101


def test_invalid_timeout_value_falls_back(monkeypatch):
    from relay_providers.base.timeouts import get_timeout_config, reset_timeout_cache

    monkeypatch.setenv("RELAY_HTTP_TIMEOUT_SECONDS", "-3")
    reset_timeout_cache()
    assert get_timeout_config().http_timeout_seconds == DEFAULT_HTTP_TIMEOUT_SECONDS  # nosec B101


def test_unencodable_body_is_validation_error_without_request(recording):
    rec = recording(body={"ok": True})
    lone_surrogate = _send(rec.transport, {"messages": [{"role": "user", "content": "\ud800"}]})
    not_json = _send(rec.transport, {"when": object()})
    for result in (lone_surrogate, not_json):
        assert isinstance(result, Err)  # nosec B101
        assert result.error.code is ErrorCode.VALIDATION  # nosec B101
        assert "api.unit.test" in result.error.message  # nosec B101
    assert rec.calls == 0  # nosec B101
