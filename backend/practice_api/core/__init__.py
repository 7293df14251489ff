"""Core Layer — pure domain logic, no IO, no async, no web framework.

Invariants:
    - No module in core/ imports from api/, schemas/, or infrastructure/
    - All functions are pure and deterministic (clocks are passed in, never read)

Design Decisions:
    - Functional core separated from imperative shell: the store and routes
      wrap these functions, tests exercise them without an app
"""
