"""OpenAI chat completions adapter."""
from __future__ import annotations
import logging
from typing import Any

from llm_relay.common.schema import ProviderResult
from llm_relay.providers.base import ProviderAdapter

def extract_openai_text(data: Any) -> ProviderResult:
    """Read ``choices[0].message.content``; a missing path is a silent empty result."""
    try:
        content = data["choices"][0]["message"]["content"]
    except (KeyError, IndexError, TypeError):
        return ProviderResult.ok(None)
    return ProviderResult.ok(content if isinstance(content, str) else None)


class OpenAIAdapter(ProviderAdapter):
    logger = logging.getLogger("llm_relay.providers.openai")

    def build_request(self, prompt: str) -> tuple[str, dict[str, str], dict[str, Any]]:
        url = f"{self.config.base_url.rstrip('/')}/v1/chat/completions"
        headers = {
            "Authorization": f"Bearer {self.config.api_key}",
            "Content-Type": "application/json",
        }
        payload = {
            "model": self.config.model,
            "messages": [{"role": "user", "content": prompt}],
            "max_tokens": self.config.max_tokens,
        }
        return url, headers, payload

    def extract(self, data: Any) -> ProviderResult:
        return extract_openai_text(data)
