"""Pydantic Schemas — request/response validation for API endpoints.

Invariants:
    - Schemas validate at the system boundary (request bodies, responses)
    - Every create/replace schema requires all fields; patch schemas none

Design Decisions:
    - Separate from the store: schemas are API contracts, stored records are dicts
"""
