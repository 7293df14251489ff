"""Domain Types — enums that replace raw strings across the codebase.

Invariants:
    - All valid services encoded as an Enum — no raw string matching
    - Every service maps to exactly one entity type

Design Decisions:
    - str Enum: serializes to JSON and argparse choices without custom code
"""

from enum import Enum


class ServiceName(str, Enum):
    """The two independent CRUD services. Each runs as its own app."""
    PRODUCTS = "products"
    USERS = "users"


class EntityType(str, Enum):
    """Human-readable entity names used in messages and logs."""
    PRODUCT = "Product"
    USER = "User"


ENTITY_TYPE_BY_SERVICE: dict[ServiceName, EntityType] = {
    ServiceName.PRODUCTS: EntityType.PRODUCT,
    ServiceName.USERS: EntityType.USER,
}
