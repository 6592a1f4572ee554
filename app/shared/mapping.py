"""Translate camelCase request payloads into model column updates"""

from typing import Optional

from fastapi import HTTPException
from pydantic import BaseModel


def required_columns(model) -> set[str]:
    return {column.name for column in model.__table__.columns if not column.nullable}


def to_columns(
    data: BaseModel,
    field_map: dict[str, str],
    partial: bool = True,
    model: Optional[type] = None,
) -> dict:
    """
    Map request fields to model column names.

    With ``partial`` only fields the client actually sent are returned, so an
    omitted field never overwrites an existing value; an explicit ``null``
    clears a nullable column.

    When ``model`` is given, an explicit ``null`` for one of its NOT NULL
    columns is rejected with a 422, and an unset optional field is left out so
    the column default applies.
    """
    payload = data.model_dump(exclude_unset=partial)
    not_null = required_columns(model) if model is not None else set()

    columns = {}
    for key, value in payload.items():
        if key not in field_map:
            continue
        column = field_map[key]
        if value is None and column in not_null:
            if key in data.model_fields_set:
                raise HTTPException(status_code=422, detail=f"{key} cannot be null")
            continue
        columns[column] = value
    return columns


def apply_columns(obj, columns: dict) -> None:
    for key, value in columns.items():
        setattr(obj, key, value)
