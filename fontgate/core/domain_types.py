"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - FontKey is the URL path without its leading slash, used verbatim as store key
    - ReservedKey members are never listed or served as fonts
    - CORS header values are constants (never built from request data, except
      the echoed origin)
"""

from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

FontKey = NewType("FontKey", str)
Domain = NewType("Domain", str)        # whitelist entry, e.g. "example.com"
Origin = NewType("Origin", str)        # raw Origin header, e.g. "https://cdn.example.com"


# ─── Enums ───────────────────────────────────────────────────────

class ReservedKey(str, Enum):
    """Store keys that hold configuration, not font binaries."""
    DOMAINS = "domains"
    WHITELIST = "whitelist"


RESERVED_KEYS: frozenset[str] = frozenset(k.value for k in ReservedKey)


class StoreBackend(str, Enum):
    """Available KeyValueStore implementations — maps to STORE_BACKEND setting."""
    DATABASE = "database"
    MEMORY = "memory"


# ─── Constants ───────────────────────────────────────────────────

EMPTY_WHITELIST_JSON = "[]"
CORS_ALLOW_METHODS = "GET, HEAD, OPTIONS"
CORS_ALLOW_HEADERS = "Content-Type"
CORS_PREFLIGHT_MAX_AGE = 86_400
