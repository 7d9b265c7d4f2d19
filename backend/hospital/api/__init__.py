"""API Layer: FastAPI routers, dependencies and error handlers.

Invariants:
    - Routers registered explicitly in main.py (no auto-discovery)
    - Every error response has the shape {"error": <message>}
"""
