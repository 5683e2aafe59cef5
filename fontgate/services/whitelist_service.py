"""Whitelist Service — read, replace, and evaluate the `domains` record.

Invariants:
    - Reads return the stored record as-is (no re-serialization)
    - Replace is a full overwrite of the `domains` key; never partial
    - Origin checks read the record on every call (no in-process cache)
"""

import logging

from fontgate.core.domain_types import EMPTY_WHITELIST_JSON, ReservedKey
from fontgate.core.errors import InvalidWhitelistPayloadError
from fontgate.core.origin_policy import is_allowed_origin
from fontgate.core.repository_protocols import KeyValueStore
from fontgate.core.whitelist import parse_whitelist, serialize_whitelist

logger = logging.getLogger(__name__)


class WhitelistService:
    """Whitelist persistence and origin evaluation over a KeyValueStore."""

    def __init__(self, store: KeyValueStore):
        self.store = store

    async def get_raw(self) -> str:
        """Stored whitelist JSON, or "[]" when no record exists."""
        return await self.store.get(ReservedKey.DOMAINS.value) or EMPTY_WHITELIST_JSON

    async def get_domains(self) -> list[str]:
        return parse_whitelist(await self.store.get(ReservedKey.DOMAINS.value))

    async def replace(self, domains: list[str] | None) -> None:
        """Overwrite the whitelist. An empty list clears it; a missing field is rejected."""
        if domains is None:
            raise InvalidWhitelistPayloadError()
        await self.store.put(ReservedKey.DOMAINS.value, serialize_whitelist(domains))
        logger.info(f"Whitelist updated ({len(domains)} entries)")

    async def is_origin_allowed(self, origin: str | None) -> bool:
        if not origin:
            return False
        return is_allowed_origin(origin, await self.get_domains())
