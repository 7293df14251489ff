"""In-Memory Entity Store — ordered list of records with linear-scan lookup.

Invariants:
    - Records keep insertion order; replace/update keep a record's position
    - Callers only ever receive copies — the stored dicts never escape
    - Ids are never reused within a store's lifetime (see core/id_generation)
    - Missing ids raise ResourceNotFoundError

Design Decisions:
    - One store per service, held in a module-level registry: deliberate
      global state (single-process uvicorn, state lost on restart)
    - No locking: handlers run on one event loop and never await mid-mutation
    - get_product_store/get_user_store as FastAPI dependencies so tests can
      swap in fresh stores via app.dependency_overrides
"""

import logging
import time
from typing import Iterable

from practice_api.core.domain_types import (
    ServiceName, ENTITY_TYPE_BY_SERVICE,
)
from practice_api.core.errors import ResourceNotFoundError
from practice_api.core.id_generation import (
    IdGenerator, next_sequential_id, timestamp_id_generator,
)
from practice_api.core.merge_fields import replace_fields, merge_fields

logger = logging.getLogger(__name__)


PRODUCT_SEED: tuple[dict, ...] = (
    {"id": 1, "name": "Laptop", "price": 75000},
    {"id": 2, "name": "Smartphone", "price": 45000},
    {"id": 3, "name": "Headphones", "price": 5000},
)

USER_SEED: tuple[dict, ...] = (
    {"id": 1, "name": "Petr", "age": 16},
    {"id": 2, "name": "Ivan", "age": 18},
    {"id": 3, "name": "Darya", "age": 20},
)


class EntityStore:
    """Array-backed CRUD collection for one entity type."""

    def __init__(
        self,
        entity_type: str,
        id_generator: IdGenerator,
        seed: Iterable[dict] = (),
    ):
        self.entity_type = entity_type
        self._id_generator = id_generator
        self._records: list[dict] = []
        self._highest_id = 0
        for record in seed:
            self._records.append(dict(record))
            self._highest_id = max(self._highest_id, record["id"])

    def __len__(self) -> int:
        return len(self._records)

    def _index_of(self, entity_id: int) -> int:
        for index, record in enumerate(self._records):
            if record["id"] == entity_id:
                return index
        raise ResourceNotFoundError(self.entity_type, entity_id)

    def list_all(self) -> list[dict]:
        return [dict(record) for record in self._records]

    def get(self, entity_id: int) -> dict:
        return dict(self._records[self._index_of(entity_id)])

    def create(self, fields: dict) -> dict:
        new_id = self._id_generator(self._highest_id)
        record = {"id": new_id, **{k: v for k, v in fields.items() if k != "id"}}
        self._records.append(record)
        self._highest_id = new_id
        return dict(record)

    def replace(self, entity_id: int, fields: dict) -> dict:
        index = self._index_of(entity_id)
        self._records[index] = replace_fields(self._records[index], fields)
        return dict(self._records[index])

    def update(self, entity_id: int, fields: dict) -> dict:
        index = self._index_of(entity_id)
        self._records[index] = merge_fields(self._records[index], fields)
        return dict(self._records[index])

    def delete(self, entity_id: int) -> dict:
        return dict(self._records.pop(self._index_of(entity_id)))


def build_store(service: ServiceName, seed: bool = True) -> EntityStore:
    """Construct a fresh store with the service's id strategy and seed rows."""
    if service is ServiceName.PRODUCTS:
        return EntityStore(
            ENTITY_TYPE_BY_SERVICE[service].value,
            timestamp_id_generator(time.time),
            PRODUCT_SEED if seed else (),
        )
    return EntityStore(
        ENTITY_TYPE_BY_SERVICE[service].value,
        next_sequential_id,
        USER_SEED if seed else (),
    )


# Registry (populated on startup)
_stores: dict[ServiceName, EntityStore] = {}


def init_store(service: ServiceName, seed: bool = True) -> EntityStore:
    store = build_store(service, seed)
    _stores[service] = store
    logger.info(
        f"{store.entity_type} store ready with {len(store)} record(s)",
        extra={"service": service.value},
    )
    return store


def close_store(service: ServiceName) -> None:
    _stores.pop(service, None)


def get_store(service: ServiceName) -> EntityStore | None:
    return _stores.get(service)


def _require_store(service: ServiceName) -> EntityStore:
    store = _stores.get(service)
    if store is None:
        raise RuntimeError(f"{service.value} store not initialized")
    return store


def get_product_store() -> EntityStore:
    """FastAPI dependency for the products collection."""
    return _require_store(ServiceName.PRODUCTS)


def get_user_store() -> EntityStore:
    """FastAPI dependency for the users collection."""
    return _require_store(ServiceName.USERS)
