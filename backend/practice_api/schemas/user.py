"""User Schemas — create/replace bodies and the public user shape.

Invariants:
    - UserCreate/UserReplace: name and age both required, age > 0
    - UserReplace may echo the id; a different id is rejected by the store
"""

from pydantic import BaseModel, field_validator

from practice_api.schemas.fields import Name, PositiveNumber, strip_name

USER_EXAMPLE = {"name": "Anna", "age": 25}


class UserCreate(BaseModel):
    """Body of POST /users."""
    name: Name
    age: PositiveNumber

    @field_validator("name")
    @classmethod
    def strip_user_name(cls, v: str) -> str:
        return strip_name(v)


class UserReplace(UserCreate):
    """Body of PUT /users/{id} — full payload."""
    id: int | None = None


class UserResponse(BaseModel):
    id: int
    name: str
    age: PositiveNumber
