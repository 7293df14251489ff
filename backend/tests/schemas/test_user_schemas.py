"""User schemas — name and age rules.

Invariants:
    - name and age both required
    - age > 0, numeric strings coerced
"""

import pytest
from pydantic import ValidationError

from practice_api.schemas.user import UserCreate, UserReplace, UserResponse


def test_create_accepts_valid_body():
    user = UserCreate(name="Anna", age=25)
    assert user.model_dump() == {"name": "Anna", "age": 25}


def test_create_coerces_age_string():
    assert UserCreate(name="Anna", age="25").age == 25


@pytest.mark.parametrize("age", [0, -1, "old", False])
def test_create_rejects_bad_age(age):
    with pytest.raises(ValidationError):
        UserCreate(name="Anna", age=age)


def test_replace_requires_name():
    with pytest.raises(ValidationError):
        UserReplace(age=30)


def test_response_shape():
    resp = UserResponse(id=1, name="Petr", age=16)
    assert resp.model_dump(mode="json") == {"id": 1, "name": "Petr", "age": 16}
