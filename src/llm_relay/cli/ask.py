"""Ask both providers one prompt from the terminal and print the unified JSON."""
from __future__ import annotations
import argparse
import asyncio
import json
import logging

from llm_relay.common.config import RelayConfig, load_config
from llm_relay.common.logging_setup import setup_logging
from llm_relay.common.schema import UnifiedResponse
from llm_relay.providers.claude_adapter import ClaudeAdapter
from llm_relay.providers.openai_adapter import OpenAIAdapter
from llm_relay.serve.fanout import fan_out

LOGGER = logging.getLogger("llm_relay.cli")

def ask(prompt: str, config: RelayConfig) -> UnifiedResponse:
    """
    Run one fan-out outside the web server.

    Args:
        prompt: Prompt sent to both providers.
        config: Resolved relay configuration.
    """
    for name in config.missing_credentials():
        LOGGER.warning("No API key configured for %s", name)
    return asyncio.run(
        fan_out(prompt, OpenAIAdapter(config.openai), ClaudeAdapter(config.claude))
    )

def main(argv: list[str] | None = None) -> None:
    ap = argparse.ArgumentParser(description="Compare OpenAI and Claude answers to one prompt")
    ap.add_argument("--prompt", required=True, help="Prompt text")
    ap.add_argument("--config", default=None, help="YAML config path")
    args = ap.parse_args(argv)

    config = load_config(args.config)
    setup_logging(config.log_level)
    resp = ask(args.prompt, config)
    print(json.dumps(resp.to_json(), indent=2))

if __name__ == "__main__":
    main()
