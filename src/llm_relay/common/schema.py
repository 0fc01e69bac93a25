"""Pydantic models and dataclasses for request/response types."""
from __future__ import annotations
from dataclasses import dataclass

from pydantic import BaseModel, ConfigDict, Field

@dataclass(frozen=True)
class ProviderResult:
    """Outcome of a single provider call. Both fields always exist."""
    text: str | None = None
    error: str | None = None

    @classmethod
    def ok(cls, text: str | None) -> "ProviderResult":
        return cls(text=text, error=None)

    @classmethod
    def failed(cls, error: str) -> "ProviderResult":
        return cls(text=None, error=error)


class DebugInfo(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    openai_error: str | None = Field(default=None, alias="openaiError")
    claude_error: str | None = Field(default=None, alias="claudeError")


class UnifiedResponse(BaseModel):
    """Body returned by POST /api/ai whenever both providers settle."""
    openai: str | None = None
    claude: str | None = None
    debug: DebugInfo = Field(default_factory=DebugInfo)

    @classmethod
    def from_results(cls, openai: ProviderResult, claude: ProviderResult) -> "UnifiedResponse":
        return cls(
            openai=openai.text,
            claude=claude.text,
            debug=DebugInfo(openai_error=openai.error, claude_error=claude.error),
        )

    def to_json(self) -> dict:
        return self.model_dump(by_alias=True)


class ErrorOut(BaseModel):
    error: str
