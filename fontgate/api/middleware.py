"""Admin CORS Middleware — Starlette CORS applied to the admin API paths only.

Invariants:
    - Only /whitelist[/...] and /listFonts pass through CORSMiddleware
    - Font paths bypass it entirely: their CORS headers and OPTIONS preflight
      come from the whitelist check in api/routes/fonts.py
    - Path match is exact or on a "/" boundary ("/whitelistX.woff2" is a font)
"""

from starlette.middleware.cors import CORSMiddleware
from starlette.types import ASGIApp, Receive, Scope, Send

ADMIN_PATHS = ("/whitelist", "/listFonts")


def is_admin_path(path: str) -> bool:
    return any(path == p or path.startswith(f"{p}/") for p in ADMIN_PATHS)


class AdminCORSMiddleware:
    """Dispatch admin requests through CORSMiddleware, everything else straight to the app."""

    def __init__(self, app: ASGIApp, **cors_options):
        self.app = app
        self.cors = CORSMiddleware(app, **cors_options)

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] == "http" and is_admin_path(scope["path"]):
            await self.cors(scope, receive, send)
            return
        await self.app(scope, receive, send)
