"""Field Merging — replace vs. patch semantics over plain records.

Tests:
    - replace_fields keeps id and drops fields absent from the payload
    - merge_fields keeps untouched fields
    - Changing the id raises FieldValidationError
    - Inputs are never mutated
"""

import pytest

from practice_api.core.errors import FieldValidationError
from practice_api.core.merge_fields import replace_fields, merge_fields


def test_replace_keeps_id_and_takes_new_fields():
    record = {"id": 7, "name": "Old", "price": 10}
    assert replace_fields(record, {"name": "New", "price": 20}) == {
        "id": 7, "name": "New", "price": 20,
    }


def test_replace_drops_fields_not_supplied():
    record = {"id": 7, "name": "Old", "price": 10, "legacy": True}
    assert "legacy" not in replace_fields(record, {"name": "New", "price": 20})


def test_merge_only_touches_supplied_fields():
    record = {"id": 7, "name": "Old", "price": 10}
    assert merge_fields(record, {"price": 15}) == {"id": 7, "name": "Old", "price": 15}


def test_merge_with_empty_patch_is_identity():
    record = {"id": 7, "name": "Old", "price": 10}
    assert merge_fields(record, {}) == record


def test_same_id_in_payload_is_allowed():
    record = {"id": 7, "name": "Old", "price": 10}
    assert merge_fields(record, {"id": 7, "name": "New"})["id"] == 7


@pytest.mark.parametrize("op", [replace_fields, merge_fields])
def test_changing_id_raises(op):
    with pytest.raises(FieldValidationError) as exc_info:
        op({"id": 7, "name": "Old"}, {"id": 8, "name": "New"})
    assert exc_info.value.field == "id"
    assert exc_info.value.http_status == 400


def test_inputs_not_mutated():
    record = {"id": 7, "name": "Old", "price": 10}
    patch = {"price": 15}
    merge_fields(record, patch)
    replace_fields(record, {"name": "X", "price": 1})
    assert record == {"id": 7, "name": "Old", "price": 10}
    assert patch == {"price": 15}
