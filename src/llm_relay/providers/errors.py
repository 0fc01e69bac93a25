"""Turn a failed provider call into one readable message."""
from __future__ import annotations
import logging
from typing import Any

import httpx

LOGGER = logging.getLogger("llm_relay.providers.errors")

def _response_body(response: httpx.Response) -> Any:
    try:
        return response.json()
    except ValueError:
        return response.text


def _error_detail(body: Any) -> str:
    """Pull ``error.message`` (or a bare ``error`` string) out of an error body."""
    if isinstance(body, dict) and "error" in body:
        err = body["error"]
        if isinstance(err, dict) and "message" in err:
            return str(err["message"])
        if isinstance(err, str) and err:
            return err
    return "Unknown error"


def classify_error(exc: BaseException, provider: str) -> str:
    """
    Describe a provider failure, tagged with the provider name.

    Args:
        exc: Exception caught around the provider call.
        provider: Display name, e.g. "OpenAI".

    Returns:
        A non-empty message. This function does not raise.
    """
    message = f"{provider} API error: Unknown error occurred"

    if isinstance(exc, httpx.HTTPError):
        response = exc.response if isinstance(exc, httpx.HTTPStatusError) else None
        status: int | str = "unknown status"
        detail = "Unknown error"
        if response is not None:
            status = response.status_code
            body = _response_body(response)
            LOGGER.error("%s API error status: %s", provider, status)
            LOGGER.error("%s API error data: %s", provider, body)
            detail = _error_detail(body)
        message = f"{provider} API error: {status} - {detail or str(exc) or 'Unknown error'}"
    elif isinstance(exc, Exception) and str(exc):
        message = f"{provider} API error: {exc}"

    LOGGER.error(message)
    return message
