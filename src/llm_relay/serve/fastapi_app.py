"""FastAPI relay that asks OpenAI and Claude the same prompt.

Endpoints:
- GET /health
- GET /          comparison page
- POST /api/ai   { "prompt": "..." }
"""
from __future__ import annotations
import html
import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

import httpx
from fastapi import FastAPI, Request
from fastapi.responses import HTMLResponse, JSONResponse

from llm_relay.common.config import RelayConfig, load_config
from llm_relay.common.logging_setup import setup_logging
from llm_relay.common.schema import ErrorOut, UnifiedResponse
from llm_relay.common.templates import load_template, render_page
from llm_relay.providers.claude_adapter import ClaudeAdapter
from llm_relay.providers.openai_adapter import OpenAIAdapter
from llm_relay.serve.fanout import fan_out

LOGGER = logging.getLogger("llm_relay.app")

def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=ErrorOut(error=message).model_dump())


def create_app(
    config: RelayConfig | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> FastAPI:
    """
    Build the relay application.

    Args:
        config: Relay configuration; loaded from file/environment when omitted.
        transport: Optional httpx transport shared by both adapters.
    """
    config = config or load_config()
    openai = OpenAIAdapter(config.openai, transport=transport)
    claude = ClaudeAdapter(config.claude, transport=transport)

    @asynccontextmanager
    async def lifespan(_: FastAPI) -> AsyncIterator[None]:
        setup_logging(config.log_level)
        for name in config.missing_credentials():
            LOGGER.warning("No API key configured for %s; its calls will be rejected upstream", name)
        yield

    app = FastAPI(lifespan=lifespan)
    app.state.config = config

    @app.get("/health")
    def health() -> dict[str, str]:
        return {
            "status": "ok",
            "openai_model": config.openai.model,
            "claude_model": config.claude.model,
        }

    @app.get("/", response_class=HTMLResponse)
    def index() -> str:
        return render_page(
            load_template(),
            openai_model=html.escape(config.openai.model),
            claude_model=html.escape(config.claude.model),
        )

    @app.post(
        "/api/ai",
        response_model=UnifiedResponse,
        responses={400: {"model": ErrorOut}, 500: {"model": ErrorOut}},
    )
    async def compare(request: Request) -> UnifiedResponse | JSONResponse:
        try:
            body = await request.json()
            if body is None:
                raise ValueError("empty request body")
            prompt = body.get("prompt") if isinstance(body, dict) else None
            if not isinstance(prompt, str):
                return _error(400, "Invalid prompt type")

            LOGGER.info("Processing prompt: %s...", prompt[:50])
            return await fan_out(prompt, openai, claude)
        except Exception as e:
            LOGGER.error("Unexpected error: %s", e)
            return _error(500, "Internal server error")

    return app


app = create_app()
