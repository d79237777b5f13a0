from __future__ import annotations

import asyncio
import types

from relay_providers.base.errors import (
    ErrorCode,
    HttpError,
    ProviderError,
    classify_exception,
    code_for_status,
    http_error_for,
)
from relay_providers.base.result import Err, Ok


def test_classify_provider_error_passthrough():
    e = ProviderError(code=ErrorCode.AUTH, message="nope", provider="x")
    assert classify_exception(e) is ErrorCode.AUTH  # nosec B101 - assert is appropriate in unit tests


def test_classify_timeouts():
    assert classify_exception(asyncio.TimeoutError()) is ErrorCode.TIMEOUT  # nosec B101
    assert classify_exception(TimeoutError("late")) is ErrorCode.TIMEOUT  # nosec B101


def test_classify_http_status_mapping():
    e1 = types.SimpleNamespace(status_code=404)
    assert classify_exception(e1) is ErrorCode.NOT_FOUND  # nosec B101
    e2 = types.SimpleNamespace(response=types.SimpleNamespace(status_code=503))
    assert classify_exception(e2) is ErrorCode.UNAVAILABLE  # nosec B101


def test_classify_heuristics():
    assert classify_exception(Exception("rate limit exceeded")) is ErrorCode.RATE_LIMIT  # nosec B101
    assert classify_exception(Exception("timed out waiting")) is ErrorCode.TIMEOUT  # nosec B101
    assert classify_exception(Exception("Unauthorized")) is ErrorCode.AUTH  # nosec B101
    assert classify_exception(Exception("random")) is ErrorCode.UNKNOWN  # nosec B101


def test_code_for_status_fallbacks():
    assert code_for_status(401) is ErrorCode.AUTH  # nosec B101
    assert code_for_status(529) is ErrorCode.SERVER_ERROR  # nosec B101
    assert code_for_status(418) is ErrorCode.UNKNOWN  # nosec B101


def test_http_error_message_truncates_body_but_keeps_it():
    body = "x" * 2000
    err = http_error_for(400, body)
    assert isinstance(err, HttpError)  # nosec B101
    assert err.code is ErrorCode.VALIDATION  # nosec B101
    assert err.body == body  # nosec B101
    assert err.message.endswith("...")  # nosec B101
    assert len(err.message) < 600  # nosec B101
    assert str(err) == err.message  # nosec B101


def test_result_helpers():
    ok = Ok(2)
    err = Err(ProviderError(code=ErrorCode.INTERNAL, message="bad"))
    assert ok.map(lambda v: v * 3) == Ok(6)  # nosec B101
    assert ok.unwrap() == 2  # nosec B101
    assert err.map(lambda v: v) is err  # nosec B101
    assert err.unwrap_or(5) == 5  # nosec B101
    assert err.is_err() and not err.is_ok()  # nosec B101
    try:
        err.unwrap()
    except ProviderError as exc:
        assert exc.message == "bad"  # nosec B101
    else:  # pragma: no cover
        raise AssertionError("unwrap on Err must raise")
