"""Server-side proxy that keeps the language model API key off the client."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from fastapi import APIRouter, Request, Response
from fastapi.responses import JSONResponse

if TYPE_CHECKING:
    from diet_ledger.containers import AppContainer

router = APIRouter(tags=["proxy"])
_logger = logging.getLogger(__name__)

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "POST, OPTIONS",
    "Access-Control-Allow-Headers": "Content-Type",
}


def _error(status_code: int, body: dict[str, str]) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=body, headers=CORS_HEADERS)


@router.api_route(
    "/api/chat",
    methods=["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS", "TRACE"],
)
async def chat_proxy(request: Request) -> Response:
    """Forward ``{"prompt": ...}`` upstream and relay the reply verbatim."""
    if request.method == "OPTIONS":
        return Response(status_code=200, headers=CORS_HEADERS)
    if request.method != "POST":
        return _error(405, {"error": "Method not allowed"})

    try:
        body: object = await request.json()
    except ValueError:
        body = None
    prompt = body.get("prompt") if isinstance(body, dict) else None
    if not prompt or not isinstance(prompt, str):
        return _error(400, {"error": "Missing prompt"})

    container: AppContainer = request.app.state.container
    if container.chat_proxy is None:
        return _error(500, {"error": "Server misconfig: OPENAI_API_KEY missing"})

    try:
        status_code, payload = await container.chat_proxy.forward(prompt)
    except Exception as exc:
        _logger.exception("Chat proxy request failed")
        return _error(500, {"error": "Server error", "detail": str(exc)})
    return JSONResponse(status_code=status_code, content=payload, headers=CORS_HEADERS)
