"""Anthropic messages adapter."""
from __future__ import annotations
import json
import logging
from typing import Any

from llm_relay.common.schema import ProviderResult
from llm_relay.providers.base import ProviderAdapter

def _block_text(block: Any) -> str | None:
    if isinstance(block, dict):
        text = block.get("text")
        if isinstance(text, str) and text:
            return text
    return None


def extract_claude_text(data: Any) -> ProviderResult:
    """
    Find the reply text among the response's content blocks.

    The first block typed ``text`` wins; otherwise the first block's ``text``
    is used. If neither yields text the result carries an error embedding the
    whole response body.
    """
    result = None
    content = data.get("content") if isinstance(data, dict) else None
    if isinstance(content, list) and content:
        typed = next(
            (b for b in content if isinstance(b, dict) and b.get("type") == "text"),
            None,
        )
        result = _block_text(typed) or _block_text(content[0])

    if not result:
        return ProviderResult.failed(
            "Failed to extract text from Claude response. Response structure: "
            + json.dumps(data)
        )
    return ProviderResult.ok(result)


class ClaudeAdapter(ProviderAdapter):
    logger = logging.getLogger("llm_relay.providers.claude")

    def build_request(self, prompt: str) -> tuple[str, dict[str, str], dict[str, Any]]:
        url = f"{self.config.base_url.rstrip('/')}/v1/messages"
        headers = {
            "x-api-key": self.config.api_key,
            "anthropic-version": self.config.api_version or "2023-06-01",
            "Content-Type": "application/json",
        }
        payload = {
            "model": self.config.model,
            "max_tokens": self.config.max_tokens,
            "messages": [{"role": "user", "content": prompt}],
        }
        return url, headers, payload

    def extract(self, data: Any) -> ProviderResult:
        if isinstance(data, dict):
            self.logger.debug("Claude API response data structure: %s", json.dumps(list(data)))
            self.logger.debug("Claude content array: %s", json.dumps(data.get("content")))
        return extract_claude_text(data)
