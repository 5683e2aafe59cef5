"""Admin CORS — configured origins apply to admin paths, never to font preflights.

Invariants:
    - With cors_origins set, font OPTIONS still goes through the whitelist check
    - Admin paths get Starlette CORS handling for the configured origins
"""

import pytest
from httpx import ASGITransport, AsyncClient

from fontgate.api.dependencies import get_store
from fontgate.api.middleware import is_admin_path
from fontgate.config import Settings
from fontgate.core.domain_types import StoreBackend
from fontgate.main import build_app

ADMIN_ORIGIN = "https://admin.local"


@pytest.fixture
async def cors_client(seeded_store):
    """Client for an app built with admin CORS origins configured."""
    app = build_app(Settings(
        store_backend=StoreBackend.MEMORY, cors_origins=[ADMIN_ORIGIN],
    ))

    async def override_get_store():
        yield seeded_store

    app.dependency_overrides[get_store] = override_get_store
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c


async def test_font_preflight_uses_whitelist_not_admin_origins(cors_client, allowed_origin):
    res = await cors_client.options("/myfont.woff2", headers={
        "Origin": allowed_origin,
        "Access-Control-Request-Method": "GET",
    })
    assert res.status_code == 204
    assert res.headers["access-control-allow-origin"] == allowed_origin


async def test_font_preflight_denied_origin_is_403(cors_client):
    res = await cors_client.options("/myfont.woff2", headers={
        "Origin": "https://evil.net",
        "Access-Control-Request-Method": "GET",
    })
    assert res.status_code == 403


async def test_font_get_keeps_echoed_origin(cors_client, allowed_origin):
    res = await cors_client.get("/myfont.woff2", headers={"Origin": allowed_origin})
    assert res.status_code == 200
    assert res.headers["access-control-allow-origin"] == allowed_origin


async def test_admin_preflight_allowed_for_configured_origin(cors_client):
    res = await cors_client.options("/whitelist", headers={
        "Origin": ADMIN_ORIGIN,
        "Access-Control-Request-Method": "POST",
    })
    assert res.status_code == 200
    assert res.headers["access-control-allow-origin"] == ADMIN_ORIGIN


async def test_admin_preflight_rejected_for_other_origin(cors_client, allowed_origin):
    res = await cors_client.options("/whitelist", headers={
        "Origin": allowed_origin,
        "Access-Control-Request-Method": "POST",
    })
    assert res.status_code == 400


async def test_admin_get_gets_cors_header(cors_client):
    res = await cors_client.get("/listFonts", headers={"Origin": ADMIN_ORIGIN})
    assert res.status_code == 200
    assert res.headers["access-control-allow-origin"] == ADMIN_ORIGIN


@pytest.mark.parametrize("path, expected", [
    ("/whitelist", True),
    ("/whitelist/html", True),
    ("/listFonts", True),
    ("/whitelistX.woff2", False),
    ("/listFonts.woff2", False),
    ("/myfont.woff2", False),
])
def test_is_admin_path(path, expected):
    assert is_admin_path(path) is expected
