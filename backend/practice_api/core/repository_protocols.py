"""Boundary Protocols — contract between route handlers and entity storage.

Invariants:
    - Routes depend on EntityRepository, never on a concrete store class
    - Lookups of a missing id raise ResourceNotFoundError (never return None)

Design Decisions:
    - Protocol over ABC: structural subtyping, no inheritance hierarchy
    - Synchronous methods: storage is in-process memory, nothing to await
"""

from typing import Protocol


class EntityRepository(Protocol):
    """Contract for an ordered in-memory entity collection."""
    entity_type: str

    def list_all(self) -> list[dict]: ...
    def get(self, entity_id: int) -> dict: ...
    def create(self, fields: dict) -> dict: ...
    def replace(self, entity_id: int, fields: dict) -> dict: ...
    def update(self, entity_id: int, fields: dict) -> dict: ...
    def delete(self, entity_id: int) -> dict: ...
