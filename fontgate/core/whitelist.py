"""Whitelist Codec — canonical (de)serialization of the `domains` record.

Invariants:
    - Canonical stored form is a JSON array of strings, order preserved
    - Absent record decodes to an empty list
    - A legacy record that is not a JSON array of strings is read as a
      comma-separated string (e.g. "example.com,foo.org")
    - All functions are PURE: no IO, no async
"""

import json

from fontgate.core.domain_types import Domain


def serialize_whitelist(domains: list[str]) -> str:
    """Encode the whitelist exactly as given (no trimming, no dedup)."""
    return json.dumps(list(domains), ensure_ascii=False)


def parse_whitelist(raw: str | None) -> list[Domain]:
    """Decode a stored whitelist record into its ordered entries."""
    if not raw:
        return []
    try:
        decoded = json.loads(raw)
    except ValueError:
        decoded = None
    if isinstance(decoded, list) and all(isinstance(d, str) for d in decoded):
        return [Domain(d) for d in decoded]
    return [Domain(d) for d in raw.split(",")]


def normalize_domain(entry: str) -> str:
    """Comparison form of a whitelist entry: trimmed, lowercase."""
    return entry.strip().lower()
