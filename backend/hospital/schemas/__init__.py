"""Pydantic Schemas: request/response contracts for API endpoints.

Invariants:
    - Wire field names follow the stored documents (dname, pname)
"""
