"""Font Routes — font inventory and origin-gated font delivery.

Invariants:
    - /listFonts is matched before the catch-all font path
    - Font key = request path without its leading slash
    - Origin missing or not whitelisted → 403, checked before the key lookup
    - Successful responses echo the request Origin in Access-Control-Allow-Origin
    - HEAD mirrors GET without a body; OPTIONS answers the CORS preflight

Design Decisions:
    - This router is registered LAST in main.py: its catch-all path would
      otherwise shadow every other GET route
"""

import logging

from fastapi import APIRouter, Depends, Header, Request, status
from fastapi.responses import JSONResponse, Response

from fontgate.api.dependencies import get_store
from fontgate.config import Settings, get_settings
from fontgate.core.domain_types import FontKey
from fontgate.core.origin_policy import build_font_headers, build_preflight_headers
from fontgate.core.repository_protocols import KeyValueStore
from fontgate.services.font_service import FontService

logger = logging.getLogger(__name__)
router = APIRouter(tags=["fonts"])


@router.api_route("/listFonts", methods=["GET", "HEAD"])
async def list_fonts(store: KeyValueStore = Depends(get_store)):
    """Mapping of font key → size in bytes."""
    return JSONResponse(await FontService(store).list_font_sizes())


@router.api_route("/{font_key:path}", methods=["GET", "HEAD"])
async def serve_font(
    font_key: str,
    request: Request,
    origin: str | None = Header(None),
    store: KeyValueStore = Depends(get_store),
    settings: Settings = Depends(get_settings),
):
    """Font binary for a whitelisted Origin."""
    allowed_origin, font = await FontService(store).load_font(origin, FontKey(font_key))
    headers = build_font_headers(allowed_origin, settings.font_cache_max_age)
    if request.method == "HEAD":
        headers["Content-Length"] = str(len(font))
        return Response(headers=headers, media_type=settings.font_media_type)
    return Response(
        content=font, media_type=settings.font_media_type, headers=headers,
    )


@router.options("/{font_key:path}")
async def font_preflight(
    font_key: str,
    origin: str | None = Header(None),
    store: KeyValueStore = Depends(get_store),
):
    """CORS preflight: same origin check as GET, key need not exist."""
    allowed_origin = await FontService(store).authorize(origin, FontKey(font_key))
    return Response(
        status_code=status.HTTP_204_NO_CONTENT,
        headers=build_preflight_headers(allowed_origin),
    )
