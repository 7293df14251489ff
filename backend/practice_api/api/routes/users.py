"""Users — CRUD routes over the in-memory user list.

Invariants:
    - PUT requires the full payload (name and age) and keeps the id
    - DELETE answers 204 with an empty body; a repeated delete is a 404
"""

import logging

from fastapi import APIRouter, Depends, Response, status

from practice_api.core.repository_protocols import EntityRepository
from practice_api.infrastructure.memory_store import get_user_store
from practice_api.schemas.user import UserCreate, UserReplace, UserResponse

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/users", tags=["users"])


@router.get("", response_model=list[UserResponse])
async def list_users(store: EntityRepository = Depends(get_user_store)):
    return store.list_all()


@router.get("/{user_id}", response_model=UserResponse)
async def get_user(
    user_id: int, store: EntityRepository = Depends(get_user_store),
):
    return store.get(user_id)


@router.post(
    "", response_model=UserResponse, status_code=status.HTTP_201_CREATED,
)
async def create_user(
    body: UserCreate, store: EntityRepository = Depends(get_user_store),
):
    user = store.create(body.model_dump())
    logger.info(f"User {user['id']} created", extra={"entity_id": user["id"]})
    return user


@router.put("/{user_id}", response_model=UserResponse)
async def replace_user(
    user_id: int,
    body: UserReplace,
    store: EntityRepository = Depends(get_user_store),
):
    user = store.replace(user_id, body.model_dump(exclude_none=True))
    logger.info(f"User {user_id} replaced", extra={"entity_id": user_id})
    return user


@router.delete("/{user_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_user(
    user_id: int, store: EntityRepository = Depends(get_user_store),
):
    store.delete(user_id)
    logger.info(f"User {user_id} deleted", extra={"entity_id": user_id})
    return Response(status_code=status.HTTP_204_NO_CONTENT)
