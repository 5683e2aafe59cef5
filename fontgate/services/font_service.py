"""Font Service — origin-gated font loading and font inventory.

Invariants:
    - Origin is checked BEFORE the font is looked up: a denied origin gets 403
      whether or not the key exists
    - Reserved keys (domains, whitelist) are never listed
    - list_font_sizes reports 0 for a key whose value cannot be fetched

Design Decisions:
    - Sequential fetch in list_font_sizes: a request-scoped AsyncSession does
      not allow concurrent operations
"""

import logging

from fontgate.core.domain_types import RESERVED_KEYS, FontKey
from fontgate.core.errors import FontNotFoundError, OriginNotAllowedError
from fontgate.core.repository_protocols import KeyValueStore
from fontgate.services.whitelist_service import WhitelistService

logger = logging.getLogger(__name__)


class FontService:
    """Font reads over a KeyValueStore, gated by the whitelist."""

    def __init__(self, store: KeyValueStore):
        self.store = store
        self.whitelist = WhitelistService(store)

    async def authorize(self, origin: str | None, font_key: FontKey) -> str:
        """Return the permitted origin or raise OriginNotAllowedError."""
        if not await self.whitelist.is_origin_allowed(origin):
            logger.info(
                "Origin denied", extra={"origin": origin, "font_key": font_key},
            )
            raise OriginNotAllowedError(origin)
        return origin

    async def load_font(self, origin: str | None, font_key: FontKey) -> tuple[str, bytes]:
        """Authorize the origin, then fetch the font bytes."""
        allowed_origin = await self.authorize(origin, font_key)
        font = await self.store.get_binary(font_key)
        if font is None:
            raise FontNotFoundError(font_key)
        return allowed_origin, font

    async def list_font_sizes(self) -> dict[str, int]:
        """Byte size of every non-reserved key."""
        sizes: dict[str, int] = {}
        for key in await self.store.list_keys():
            if key in RESERVED_KEYS:
                continue
            font = await self.store.get_binary(key)
            sizes[key] = len(font) if font else 0
        return sizes
