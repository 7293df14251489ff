"""Products — CRUD routes over the in-memory product list.

Invariants:
    - Bodies are validated by Pydantic before reaching the handler
      (invalid body → 400 even when the id does not exist)
    - Unknown ids → 404 via ResourceNotFoundError
    - PUT replaces name and price; PATCH touches only the fields sent
    - DELETE answers 200 with a confirmation message
"""

import logging

from fastapi import APIRouter, Depends, status

from practice_api.core.repository_protocols import EntityRepository
from practice_api.infrastructure.memory_store import get_product_store
from practice_api.schemas.product import (
    ProductCreate, ProductReplace, ProductPatch, ProductResponse,
)

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/products", tags=["products"])


@router.get("", response_model=list[ProductResponse])
async def list_products(store: EntityRepository = Depends(get_product_store)):
    return store.list_all()


@router.get("/{product_id}", response_model=ProductResponse)
async def get_product(
    product_id: int, store: EntityRepository = Depends(get_product_store),
):
    return store.get(product_id)


@router.post(
    "", response_model=ProductResponse, status_code=status.HTTP_201_CREATED,
)
async def create_product(
    body: ProductCreate, store: EntityRepository = Depends(get_product_store),
):
    product = store.create(body.model_dump())
    logger.info(
        f"Product {product['id']} created", extra={"entity_id": product["id"]},
    )
    return product


@router.put("/{product_id}", response_model=ProductResponse)
async def replace_product(
    product_id: int,
    body: ProductReplace,
    store: EntityRepository = Depends(get_product_store),
):
    product = store.replace(product_id, body.model_dump(exclude_none=True))
    logger.info(f"Product {product_id} replaced", extra={"entity_id": product_id})
    return product


@router.patch("/{product_id}", response_model=ProductResponse)
async def patch_product(
    product_id: int,
    body: ProductPatch,
    store: EntityRepository = Depends(get_product_store),
):
    changes = body.changes()
    product = store.update(product_id, changes)
    logger.info(
        f"Product {product_id} patched ({', '.join(changes) or 'no fields'})",
        extra={"entity_id": product_id},
    )
    return product


@router.delete("/{product_id}")
async def delete_product(
    product_id: int, store: EntityRepository = Depends(get_product_store),
):
    store.delete(product_id)
    logger.info(f"Product {product_id} deleted", extra={"entity_id": product_id})
    return {"message": "Product deleted"}
