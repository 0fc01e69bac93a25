"""Base provider adapter."""
from __future__ import annotations
import logging
from abc import ABC, abstractmethod
from typing import Any

import httpx

from llm_relay.common.config import ProviderConfig
from llm_relay.common.schema import ProviderResult
from llm_relay.providers.errors import classify_error


class ProviderAdapter(ABC):
    """Translate one prompt into exactly one call against a provider.

    Subclasses describe the wire format:
    - ``build_request`` shapes URL, headers and JSON payload
    - ``extract`` turns the parsed response body into a ``ProviderResult``

    ``fetch`` owns the HTTP call and converts every failure into a
    ``ProviderResult`` carrying an error message, so callers never need
    exception handling around it.
    """

    logger: logging.Logger

    def __init__(
        self,
        config: ProviderConfig,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize adapter.

        Args:
            config: Provider settings (credentials, model, limits)
            transport: Optional httpx transport, used to stub the network
        """
        self.config = config
        self._transport = transport

    @property
    def name(self) -> str:
        return self.config.name

    @abstractmethod
    def build_request(self, prompt: str) -> tuple[str, dict[str, str], dict[str, Any]]:
        """Return ``(url, headers, payload)`` for the prompt."""
        raise NotImplementedError

    @abstractmethod
    def extract(self, data: Any) -> ProviderResult:
        """Map a successful response body onto a result. Must not raise."""
        raise NotImplementedError

    async def fetch(self, prompt: str) -> ProviderResult:
        url, headers, payload = self.build_request(prompt)
        self.logger.info("Calling %s API...", self.name)
        try:
            async with httpx.AsyncClient(
                timeout=self.config.timeout, transport=self._transport
            ) as client:
                r = await client.post(url, headers=headers, json=payload)
                self.logger.info("%s API response status: %s", self.name, r.status_code)
                self.logger.info("%s API response: %s", self.name, r.text)
                r.raise_for_status()
                data = r.json()
            result = self.extract(data)
        except Exception as e:
            return ProviderResult.failed(classify_error(e, self.name))

        self.logger.info(
            "%s response result: %s",
            self.name,
            "Content received" if result.text else "No content",
        )
        return result
