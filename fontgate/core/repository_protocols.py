"""Boundary Protocols — contracts between core and shell.

Invariants:
    - Core NEVER imports from shell; dependency arrows point inward only
    - The key-value store is accessed only through KeyValueStore
    - Implementations provided by infrastructure/kv_store.py via dependency injection

Design Decisions:
    - Protocol over ABC: structural subtyping, test fakes need no inheritance
    - Async in Protocol: every implementation may do IO
"""

from typing import Protocol


class KeyValueStore(Protocol):
    """Contract for the font/whitelist key-value store."""
    async def get(self, key: str) -> str | None: ...
    async def get_binary(self, key: str) -> bytes | None: ...
    async def put(self, key: str, value: str | bytes) -> None: ...
    async def list_keys(self) -> list[str]: ...
