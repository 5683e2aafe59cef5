"""Services — store IO around the pure core decisions.

Invariants:
    - Services receive a KeyValueStore; they never open database sessions
    - Every decision (matching, parsing, headers) is delegated to core/
"""
