"""HTML viewer for notes.

Serves a single page: every request, whatever its path or method, gets the
template with the rendered notes substituted for ``{{ notes }}``. The notes
are captured once when the app is created.
"""

from __future__ import annotations

import html
import logging
import re
from pathlib import Path
from typing import Any

import anyio
import uvicorn
from fastapi import FastAPI
from fastapi.responses import HTMLResponse

from notes.config import settings
from notes.models import Note

logger = logging.getLogger("notes.web")

PLACEHOLDER_RE = re.compile(r"\{\{\s*(\w+)\s*\}\}")

ALL_METHODS = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"]


def interpolate(template: str, data: dict[str, Any]) -> str:
    """Replace every ``{{ name }}`` in ``template`` with ``data[name]``.

    Missing keys and ``None`` values become the empty string.
    """

    def _substitute(match: re.Match[str]) -> str:
        value = data.get(match.group(1))
        return "" if value is None else str(value)

    return PLACEHOLDER_RE.sub(_substitute, template)


def format_notes(notes: list[Note]) -> str:
    """Render notes as ``note`` blocks with a ``tag`` span per tag."""
    blocks = []
    for note in notes:
        tags = "".join(
            f'<span class="tag">{html.escape(tag)}</span>' for tag in note.tags
        )
        blocks.append(
            '<div class="note">\n'
            f"  <p>{html.escape(note.content)}</p>\n"
            f'  <div class="tags">{tags}</div>\n'
            "</div>"
        )
    return "\n".join(blocks)


def create_app(notes: list[Note], template_path: Path | None = None) -> FastAPI:
    """Build the viewer app for a fixed snapshot of ``notes``."""
    template_file = anyio.Path(template_path or settings.template_path)
    fragment = format_notes(notes)

    app = FastAPI(title="Notes viewer", docs_url=None, redoc_url=None, openapi_url=None)

    @app.api_route("/{path:path}", methods=ALL_METHODS, response_class=HTMLResponse)
    async def render_page(path: str) -> HTMLResponse:
        """Render the template with the notes fragment."""
        template = await template_file.read_text(encoding="utf-8")
        return HTMLResponse(interpolate(template, {"notes": fragment}), status_code=200)

    return app


def start(notes: list[Note], port: int, host: str | None = None) -> None:
    """Serve ``notes`` on ``port`` until interrupted."""
    app = create_app(notes)
    host = host or settings.web_host
    logger.info("Server is listening on http://localhost:%d", port)
    uvicorn.run(app, host=host, port=port)
