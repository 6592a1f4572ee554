"""Pagination and sorting helpers shared by list endpoints"""

from sqlalchemy import asc, desc
from sqlalchemy.orm import Query


def paginate(query: Query, page: int, limit: int) -> tuple[list, int]:
    """Return one page of rows plus the unpaginated total"""
    total = query.order_by(None).count()
    items = query.offset((page - 1) * limit).limit(limit).all()
    return items, total


def apply_sort(query: Query, model, sort_by: str, sort_order: str, allowed: dict, default: str):
    """
    Order a query by a whitelisted field.

    ``allowed`` maps public (camelCase) sort keys to model attribute names so
    clients can never sort by arbitrary columns.
    """
    column_name = allowed.get(sort_by) or allowed[default]
    column = getattr(model, column_name)
    direction = asc if sort_order == "asc" else desc
    return query.order_by(direction(column), desc(model.id))


def page_meta(total: int, page: int, limit: int) -> dict:
    return {
        "total": total,
        "page": page,
        "limit": limit,
        "totalPages": (total + limit - 1) // limit if limit else 0,
    }
