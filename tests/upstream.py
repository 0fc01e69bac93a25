"""Fake upstream providers shared by the tests."""
from __future__ import annotations

import json
from typing import Any, Callable

import httpx


def openai_body(content: str | None = "Hello from GPT") -> dict[str, Any]:
    return {
        "choices": [
            {"message": {"role": "assistant", "content": content}, "index": 0}
        ],
        "usage": {"prompt_tokens": 10, "completion_tokens": 5, "total_tokens": 15},
    }

def claude_body(blocks: list[dict[str, Any]] | None = None) -> dict[str, Any]:
    if blocks is None:
        blocks = [{"type": "text", "text": "Hello from Claude"}]
    return {
        "id": "msg_01",
        "type": "message",
        "role": "assistant",
        "model": "claude-3-sonnet-20240229",
        "content": blocks,
        "stop_reason": "end_turn",
        "stop_sequence": None,
        "usage": {"input_tokens": 12, "output_tokens": 6},
    }

class FakeUpstream:
    """Routes requests by host and records what was sent."""

    def __init__(
        self,
        openai: Callable[[httpx.Request], httpx.Response] | None = None,
        claude: Callable[[httpx.Request], httpx.Response] | None = None,
    ) -> None:
        self.openai = openai or (lambda r: httpx.Response(200, json=openai_body()))
        self.claude = claude or (lambda r: httpx.Response(200, json=claude_body()))
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if request.url.host == "api.openai.com":
            return self.openai(request)
        if request.url.host == "api.anthropic.com":
            return self.claude(request)
        return httpx.Response(404)

    def sent(self, host: str) -> tuple[httpx.Request, dict[str, Any]]:
        request = next(r for r in self.requests if r.url.host == host)
        return request, json.loads(request.content)

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self)

