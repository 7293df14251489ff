"""Shared field rules — name and positive-number checks used by every entity.

Invariants:
    - Names are stripped; an all-whitespace name is rejected
    - Numbers must be finite and > 0; numeric strings ("1000") are accepted
    - Booleans are never treated as numbers
    - Whole-number floats serialize as ints (75000, not 75000.0)
"""

from typing import Annotated

from pydantic import BeforeValidator, Field, PlainSerializer


def strip_name(v: str) -> str:
    v = v.strip()
    if not v:
        raise ValueError("name cannot be empty or whitespace")
    return v


def _reject_bool(v: object) -> object:
    if isinstance(v, bool):
        raise ValueError("must be a number, not a boolean")
    return v


def _compact_number(v: float) -> int | float:
    return int(v) if v.is_integer() else v


PositiveNumber = Annotated[
    float,
    BeforeValidator(_reject_bool),
    Field(gt=0, allow_inf_nan=False),
    PlainSerializer(_compact_number, return_type=int | float),
]

Name = Annotated[str, Field(min_length=1, max_length=200)]
