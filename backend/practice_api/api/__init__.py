"""API Layer — FastAPI routes and error handlers.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - All endpoints except GET / and 204 deletes return JSON

Design Decisions:
    - Thin routes delegate to the store behind EntityRepository
"""
