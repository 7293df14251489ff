"""Product Schemas — create/replace/patch bodies and the public product shape.

Invariants:
    - ProductCreate/ProductReplace: name and price both required
    - ProductPatch: any subset of fields; an explicit null is rejected
    - price > 0 everywhere it appears
    - PUT/PATCH bodies may echo the id; a different id is rejected by the store
"""

from pydantic import BaseModel, field_validator, model_validator

from practice_api.schemas.fields import Name, PositiveNumber, strip_name

PRODUCT_EXAMPLE = {"name": "Tablet", "price": 30000}


class ProductCreate(BaseModel):
    """Body of POST /products."""
    name: Name
    price: PositiveNumber

    @field_validator("name")
    @classmethod
    def strip_product_name(cls, v: str) -> str:
        return strip_name(v)


class ProductReplace(ProductCreate):
    """Body of PUT /products/{id} — same rules as create, full payload."""
    id: int | None = None


class ProductPatch(BaseModel):
    """Body of PATCH /products/{id}."""
    id: int | None = None
    name: Name | None = None
    price: PositiveNumber | None = None

    @field_validator("name")
    @classmethod
    def strip_product_name(cls, v: str | None) -> str | None:
        return strip_name(v) if v is not None else v

    @model_validator(mode="after")
    def reject_explicit_nulls(self):
        nulled = sorted(f for f in self.model_fields_set if getattr(self, f) is None)
        if nulled:
            raise ValueError(f"fields cannot be null: {', '.join(nulled)}")
        return self

    def changes(self) -> dict:
        """Only the fields the client actually sent."""
        return self.model_dump(exclude_unset=True)


class ProductResponse(BaseModel):
    id: int
    name: str
    price: PositiveNumber
