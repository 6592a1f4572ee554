"""Query filter helpers for list-valued JSON columns and free-text search"""

import json

from sqlalchemy import String, cast, or_


def json_list_contains(column, value: str):
    """Match rows whose JSON list column contains ``value`` (serialized element match)"""
    return cast(column, String).ilike(f"%{json.dumps(value)}%")


def json_list_contains_any(column, values: list[str]):
    return or_(*[json_list_contains(column, v) for v in values])


def search_filter(term: str, *columns):
    """Case-insensitive substring match across several text columns"""
    pattern = f"%{term.strip()}%"
    return or_(*[col.ilike(pattern) for col in columns])


def split_csv(value):
    """Accept either a list or a comma separated string of values"""
    if not value:
        return []
    if isinstance(value, str):
        value = [value]
    items = []
    for part in value:
        items.extend(p.strip() for p in part.split(",") if p.strip())
    return items
