"""Infrastructure Layer — store implementations, database engine, logging.

Invariants:
    - Infrastructure never imports from services/ or api/
    - SQLAlchemy errors are mapped to StoreError before leaving this layer
"""
