"""
Greeting server.

Answers every request with a plain-text welcome. Runs on port 3000.
"""

import logging

import uvicorn
from fastapi import FastAPI
from fastapi.responses import PlainTextResponse

from notes.config import settings

GREETING = "Hello! Welcome to server"

logger = logging.getLogger("notes.greeting")

app = FastAPI(title="Greeting server", docs_url=None, redoc_url=None, openapi_url=None)


@app.api_route(
    "/{path:path}",
    methods=["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"],
    response_class=PlainTextResponse,
)
async def greet(path: str) -> PlainTextResponse:
    """Return the greeting for any path and method."""
    return PlainTextResponse(GREETING)


def main() -> None:
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s | %(name)s | %(levelname)s | %(message)s",
    )
    logger.info("Server is up on port http://localhost:%d", settings.greeting_port)
    uvicorn.run(app, host=settings.web_host, port=settings.greeting_port)


if __name__ == "__main__":
    main()
