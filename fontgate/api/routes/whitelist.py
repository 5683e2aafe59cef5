"""Whitelist Routes — admin page plus read/replace of the origin whitelist.

Invariants:
    - Every path under /whitelist is handled here: GET /whitelist/html serves
      the admin page, any other GET reads, any POST replaces
    - Any other method on /whitelist[/...] → 405 METHOD_NOT_ALLOWED
    - GET returns the stored JSON verbatim (or "[]")
"""

import logging
from functools import lru_cache
from pathlib import Path

from fastapi import APIRouter, Depends, Request
from fastapi.responses import HTMLResponse, PlainTextResponse, Response

from fontgate.api.dependencies import get_store
from fontgate.core.errors import MethodNotAllowedError
from fontgate.core.repository_protocols import KeyValueStore
from fontgate.schemas.whitelist import WhitelistUpdate
from fontgate.services.whitelist_service import WhitelistService

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/whitelist", tags=["whitelist"])

ADMIN_PAGE_PATH = Path(__file__).resolve().parents[2] / "templates" / "whitelist.html"
UNSUPPORTED_METHODS = ["PUT", "PATCH", "DELETE", "HEAD", "OPTIONS"]


@lru_cache(maxsize=1)
def load_admin_page() -> str:
    return ADMIN_PAGE_PATH.read_text(encoding="utf-8")


@router.get("/html", response_class=HTMLResponse)
async def whitelist_admin_page():
    """Static whitelist manager page (client-side script, no templating)."""
    return HTMLResponse(load_admin_page())


@router.get("")
@router.get("/{subpath:path}")
async def get_whitelist(store: KeyValueStore = Depends(get_store)):
    """Current whitelist as a JSON array."""
    raw = await WhitelistService(store).get_raw()
    return Response(content=raw, media_type="application/json")


@router.post("")
@router.post("/{subpath:path}")
async def update_whitelist(
    body: WhitelistUpdate, store: KeyValueStore = Depends(get_store),
):
    """Replace the whitelist with body.domains."""
    await WhitelistService(store).replace(body.domains)
    return PlainTextResponse("Whitelist updated")


@router.api_route("", methods=UNSUPPORTED_METHODS)
@router.api_route("/{subpath:path}", methods=UNSUPPORTED_METHODS)
async def whitelist_method_not_allowed(request: Request):
    raise MethodNotAllowedError(request.method, request.url.path)
