"""Relay configuration.

Values are layered: built-in defaults, then an optional YAML file, then
environment variables. The resulting ``RelayConfig`` is built once at process
start and passed to each provider adapter.
"""
from __future__ import annotations
import os
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Any

import yaml

DEFAULT_CONFIG_PATH = "configs/relay.yaml"

@dataclass(frozen=True)
class ProviderConfig:
    """Connection and request settings for one upstream provider."""
    name: str
    base_url: str
    model: str
    api_key: str = ""
    max_tokens: int = 1000
    timeout: float = 120.0
    api_version: str | None = None


@dataclass(frozen=True)
class RelayConfig:
    openai: ProviderConfig = field(
        default_factory=lambda: ProviderConfig(
            name="OpenAI",
            base_url="https://api.openai.com",
            model="gpt-4-turbo",
        )
    )
    claude: ProviderConfig = field(
        default_factory=lambda: ProviderConfig(
            name="Claude",
            base_url="https://api.anthropic.com",
            model="claude-3-sonnet-20240229",
            api_version="2023-06-01",
        )
    )
    log_level: str = "INFO"

    def missing_credentials(self) -> list[str]:
        """Names of providers that have no API key configured."""
        return [p.name for p in (self.openai, self.claude) if not p.api_key]


def load_yaml(path: str) -> dict[str, Any]:
    with open(path, "r", encoding="utf-8") as f:
        return yaml.safe_load(f) or {}


def _apply(provider: ProviderConfig, values: dict[str, Any]) -> ProviderConfig:
    updates: dict[str, Any] = {}
    for key in ("base_url", "model", "api_key", "api_version"):
        if values.get(key) is not None:
            updates[key] = str(values[key])
    if values.get("max_tokens") is not None:
        updates["max_tokens"] = int(values["max_tokens"])
    if values.get("timeout") is not None:
        updates["timeout"] = float(values["timeout"])
    return replace(provider, **updates)


def load_config(path: str | None = None) -> RelayConfig:
    """
    Build the relay configuration.

    Args:
        path: YAML file to read. Defaults to ``LLM_RELAY_CONFIG`` or
            ``configs/relay.yaml``; a missing default file is ignored.

    Returns:
        Fully resolved configuration.
    """
    explicit = path or os.getenv("LLM_RELAY_CONFIG")
    cfg_path = explicit or DEFAULT_CONFIG_PATH
    data: dict[str, Any] = {}
    if explicit or Path(cfg_path).exists():
        data = load_yaml(cfg_path)

    config = RelayConfig()
    openai = _apply(config.openai, data.get("openai") or {})
    claude = _apply(config.claude, data.get("claude") or {})
    log_level = str(data.get("log_level", config.log_level))

    # Shared knobs apply to both providers.
    shared: dict[str, Any] = {
        "max_tokens": os.getenv("MAX_TOKENS"),
        "timeout": os.getenv("REQUEST_TIMEOUT"),
    }
    openai = _apply(openai, shared)
    claude = _apply(claude, shared)

    openai = _apply(openai, {
        "api_key": os.getenv("OPENAI_API_KEY"),
        "model": os.getenv("OPENAI_MODEL"),
        "base_url": os.getenv("OPENAI_BASE_URL"),
    })
    claude = _apply(claude, {
        "api_key": os.getenv("ANTHROPIC_API_KEY"),
        "model": os.getenv("CLAUDE_MODEL"),
        "base_url": os.getenv("ANTHROPIC_BASE_URL"),
        "api_version": os.getenv("ANTHROPIC_VERSION"),
    })

    return RelayConfig(
        openai=openai,
        claude=claude,
        log_level=os.getenv("LOG_LEVEL", log_level),
    )
