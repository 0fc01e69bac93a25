"""
LLM Relay package.

Provides:
- Provider adapters for OpenAI chat completions and Anthropic messages
- Concurrent fan-out of one prompt to both providers
- FastAPI app serving POST /api/ai plus a small comparison page
"""
