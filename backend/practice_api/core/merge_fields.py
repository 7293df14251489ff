"""Field Merging — pure replace/patch semantics over entity records.

Invariants:
    - The id of an entity never changes through replace or patch
    - replace_fields drops every old field not present in the new payload
    - merge_fields keeps every old field not present in the patch
    - Inputs are never mutated; a new dict is returned

Design Decisions:
    - Records are plain dicts: the store is schema-agnostic, pydantic
      models own the shape at the API boundary
"""

from practice_api.core.errors import FieldValidationError, ErrorContext


def _reject_id_change(record: dict, fields: dict) -> None:
    if "id" in fields and fields["id"] != record["id"]:
        raise FieldValidationError(
            "id is assigned by the server and cannot be changed",
            field="id",
            context=ErrorContext(entity_id=record["id"]),
        )


def replace_fields(record: dict, fields: dict) -> dict:
    """Full replacement (PUT): new fields, same id."""
    _reject_id_change(record, fields)
    return {"id": record["id"], **{k: v for k, v in fields.items() if k != "id"}}


def merge_fields(record: dict, fields: dict) -> dict:
    """Partial update (PATCH): only supplied fields change."""
    _reject_id_change(record, fields)
    return {**record, **fields, "id": record["id"]}
