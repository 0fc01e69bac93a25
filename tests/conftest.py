from __future__ import annotations

import pytest

from llm_relay.common.config import ProviderConfig, RelayConfig


@pytest.fixture
def relay_config() -> RelayConfig:
    base = RelayConfig()
    return RelayConfig(
        openai=ProviderConfig(
            name="OpenAI",
            base_url=base.openai.base_url,
            model=base.openai.model,
            api_key="sk-test",
        ),
        claude=ProviderConfig(
            name="Claude",
            base_url=base.claude.base_url,
            model=base.claude.model,
            api_key="ak-test",
            api_version="2023-06-01",
        ),
    )
