"""FontGate Application Package — origin-gated font delivery from a key-value store.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
