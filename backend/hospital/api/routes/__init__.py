"""Route Modules: one file per resource.

Invariants:
    - Each module defines its own APIRouter with prefix and tags
    - Handlers do one store call through a repository (signup delegates to services/)
"""
