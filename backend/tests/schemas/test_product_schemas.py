"""Product schemas — field rules for create/replace/patch bodies.

Invariants:
    - name required, stripped, non-empty
    - price required on create/replace, > 0, finite, never a boolean
    - patch: any subset, explicit nulls rejected, changes() returns only sent fields
"""

import pytest
from pydantic import ValidationError

from practice_api.schemas.product import (
    ProductCreate, ProductReplace, ProductPatch, ProductResponse,
)


def test_create_accepts_valid_body():
    body = ProductCreate(name="Tablet", price=30000)
    assert body.name == "Tablet"
    assert body.price == 30000


def test_create_strips_name():
    assert ProductCreate(name="  Tablet ", price=1).name == "Tablet"


def test_create_coerces_numeric_string():
    assert ProductCreate(name="Tablet", price="12.5").price == 12.5


@pytest.mark.parametrize("price", [0, -1, "abc", True, float("inf"), float("nan")])
def test_create_rejects_bad_price(price):
    with pytest.raises(ValidationError):
        ProductCreate(name="Tablet", price=price)


def test_create_requires_both_fields():
    with pytest.raises(ValidationError) as exc_info:
        ProductCreate()
    missing = {e["loc"][0] for e in exc_info.value.errors() if e["type"] == "missing"}
    assert missing == {"name", "price"}


def test_replace_has_create_rules():
    with pytest.raises(ValidationError):
        ProductReplace(name="Only name")


def test_model_dump_keeps_whole_numbers_as_int():
    assert ProductCreate(name="Tablet", price=30000).model_dump() == {
        "name": "Tablet", "price": 30000,
    }
    assert isinstance(ProductCreate(name="T", price=2.0).model_dump()["price"], int)


def test_patch_changes_only_sent_fields():
    assert ProductPatch(price=10).changes() == {"price": 10}
    assert ProductPatch(name="X").changes() == {"name": "X"}
    assert ProductPatch().changes() == {}


def test_patch_rejects_explicit_null():
    with pytest.raises(ValidationError, match="cannot be null"):
        ProductPatch(name=None)


def test_patch_rejects_non_positive_price():
    with pytest.raises(ValidationError):
        ProductPatch(price=0)


def test_patch_rejects_blank_name():
    with pytest.raises(ValidationError):
        ProductPatch(name="  ")


def test_response_serializes_fractional_price_unchanged():
    resp = ProductResponse(id=1, name="Cable", price=199.5)
    assert resp.model_dump(mode="json")["price"] == 199.5


def test_replace_accepts_optional_id():
    assert ProductReplace(name="T", price=1).model_dump(exclude_none=True) == {
        "name": "T", "price": 1,
    }
    assert ProductReplace(id=3, name="T", price=1).id == 3


def test_patch_reports_sent_id():
    assert ProductPatch(id=7).changes() == {"id": 7}


def test_name_length_capped_at_200():
    assert ProductCreate(name="x" * 200, price=1).name == "x" * 200
    with pytest.raises(ValidationError):
        ProductCreate(name="x" * 201, price=1)


def test_large_integer_price_rounds_like_a_double():
    body = ProductCreate(name="Yacht", price=9007199254740993)
    assert body.model_dump()["price"] == 9007199254740992
