"""Launch the relay app with uvicorn."""
from __future__ import annotations
import os

import uvicorn

def main() -> None:
    host = os.getenv("RELAY_HOST", "127.0.0.1")
    port = os.getenv("RELAY_PORT", "8000")
    log_level = os.getenv("LOG_LEVEL", "info").lower()

    uvicorn.run(
        "llm_relay.serve.fastapi_app:app",
        host=host,
        port=int(port),
        log_level=log_level,
    )

if __name__ == "__main__":
    main()
