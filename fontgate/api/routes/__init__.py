"""Route Modules — one file per resource/concern.

Invariants:
    - Each module defines its own APIRouter
    - Routes never contain business logic (delegate to services)
    - fonts.router owns the catch-all path and is registered last
"""
