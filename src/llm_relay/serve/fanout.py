"""Send one prompt to both providers at once and merge the outcomes."""
from __future__ import annotations
import asyncio
import logging

from llm_relay.common.schema import UnifiedResponse
from llm_relay.providers.base import ProviderAdapter

LOGGER = logging.getLogger("llm_relay.fanout")

async def fan_out(prompt: str, openai: ProviderAdapter, claude: ProviderAdapter) -> UnifiedResponse:
    """
    Dispatch both provider calls concurrently and wait for both to settle.

    Args:
        prompt: User prompt, forwarded unchanged to each provider.
        openai: Adapter whose text fills the ``openai`` field.
        claude: Adapter whose text fills the ``claude`` field.

    Returns:
        Unified response; provider failures appear under ``debug``.
    """
    openai_result, claude_result = await asyncio.gather(
        openai.fetch(prompt),
        claude.fetch(prompt),
    )
    LOGGER.info(
        "Fan-out settled: openai=%s claude=%s",
        "ok" if openai_result.error is None else "error",
        "ok" if claude_result.error is None else "error",
    )
    return UnifiedResponse.from_results(openai_result, claude_result)
