"""Infrastructure Layer — storage and cross-cutting concerns.

Invariants:
    - Infrastructure may import core/, never api/ or schemas/
    - Process-wide singletons are created on startup, not at import time
"""
