"""Origin Policy — decides whether a request Origin may load fonts.

Invariants:
    - Fail closed: missing, unparseable, or host-less origins are denied
    - Entry D matches hostname H iff H == D or H ends with "." + D
    - Substring matches that are not dot-bounded suffixes never match
    - No IO: callers load the whitelist and pass the entries in

Design Decisions:
    - urlparse over a URL library: Origin headers are scheme://host[:port],
      hostname comes back lowercased with the port stripped
"""

import logging
from urllib.parse import urlparse

from fontgate.core.domain_types import (
    CORS_ALLOW_HEADERS, CORS_ALLOW_METHODS, CORS_PREFLIGHT_MAX_AGE,
)
from fontgate.core.whitelist import normalize_domain

logger = logging.getLogger(__name__)


def extract_hostname(origin: str) -> str | None:
    """Hostname of an Origin header value, or None when it cannot be parsed."""
    try:
        return urlparse(origin).hostname or None
    except ValueError:
        return None


def hostname_matches(hostname: str, domain: str) -> bool:
    """Exact or subdomain match of a single whitelist entry."""
    domain = normalize_domain(domain)
    if not domain:
        return False
    return hostname == domain or hostname.endswith(f".{domain}")


def is_allowed_origin(origin: str | None, domains: list[str]) -> bool:
    """True if any whitelist entry matches the Origin's hostname."""
    if not origin:
        return False
    hostname = extract_hostname(origin)
    if hostname is None:
        logger.warning(f"Invalid URL: {origin!r}", extra={"origin": origin})
        return False
    return any(hostname_matches(hostname, d) for d in domains)


def build_cors_headers(origin: str) -> dict[str, str]:
    """CORS headers echoing a permitted origin."""
    return {
        "Access-Control-Allow-Origin": origin,
        "Access-Control-Allow-Methods": CORS_ALLOW_METHODS,
        "Access-Control-Allow-Headers": CORS_ALLOW_HEADERS,
        "Vary": "Origin",
    }


def build_font_headers(origin: str, cache_max_age: int) -> dict[str, str]:
    """Headers for a successful font response (content type set by caller)."""
    return {
        "Cache-Control": f"public, max-age={cache_max_age}",
        **build_cors_headers(origin),
    }


def build_preflight_headers(origin: str) -> dict[str, str]:
    """Headers for an allowed OPTIONS preflight."""
    return {
        **build_cors_headers(origin),
        "Access-Control-Max-Age": str(CORS_PREFLIGHT_MAX_AGE),
    }
