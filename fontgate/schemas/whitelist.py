"""Whitelist Schemas — request body for the whitelist replace endpoint.

Invariants:
    - domains, when present, is a list of strings (order preserved, no syntax checks)
    - A missing or null domains field is rejected by the service, not the schema,
      so it surfaces as INVALID_WHITELIST_PAYLOAD rather than VALIDATION_ERROR
"""

from pydantic import BaseModel


class WhitelistUpdate(BaseModel):
    """POST /whitelist body: {"domains": ["a.com", "b.com"]}."""
    domains: list[str] | None = None
