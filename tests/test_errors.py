from __future__ import annotations

import logging

import httpx

from llm_relay.providers.errors import classify_error


def _status_error(status: int, **kwargs) -> httpx.HTTPStatusError:
    request = httpx.Request("POST", "https://api.example.com/v1/messages")
    response = httpx.Response(status, request=request, **kwargs)
    return httpx.HTTPStatusError("upstream failed", request=request, response=response)


def test_nested_error_message() -> None:
    exc = _status_error(429, json={"error": {"message": "Rate limited", "type": "rate_limit_error"}})
    assert classify_error(exc, "Claude") == "Claude API error: 429 - Rate limited"


def test_string_error_field() -> None:
    exc = _status_error(500, json={"error": "overloaded"})
    assert classify_error(exc, "OpenAI") == "OpenAI API error: 500 - overloaded"


def test_body_without_error_details() -> None:
    assert classify_error(_status_error(502, text="Bad Gateway"), "OpenAI") == (
        "OpenAI API error: 502 - Unknown error"
    )
    assert classify_error(_status_error(400, json={"error": {"type": "x"}}), "OpenAI") == (
        "OpenAI API error: 400 - Unknown error"
    )


def test_empty_nested_message_uses_exception_text() -> None:
    exc = _status_error(400, json={"error": {"message": ""}})
    assert classify_error(exc, "OpenAI") == "OpenAI API error: 400 - upstream failed"


def test_transport_error_has_unknown_status() -> None:
    exc = httpx.ReadTimeout("timed out")
    assert classify_error(exc, "OpenAI") == "OpenAI API error: unknown status - Unknown error"


def test_generic_exception() -> None:
    assert classify_error(ValueError("bad json"), "Claude") == "Claude API error: bad json"


def test_unknown_failure() -> None:
    assert classify_error(Exception(), "Claude") == "Claude API error: Unknown error occurred"


def test_generic_exception_logged_once(caplog) -> None:
    with caplog.at_level(logging.ERROR, logger="llm_relay.providers.errors"):
        classify_error(ValueError("bad json"), "Claude")
    assert [r.getMessage() for r in caplog.records] == ["Claude API error: bad json"]
