"""Common helper functions for service layer.

This module provides reusable utilities for:
- UUID handling
- Query ordering and pagination
- Enum validation
- Entity retrieval with 404 handling
- Structured domain errors
- Paginated list envelopes
"""

from __future__ import annotations

import uuid
from typing import TYPE_CHECKING, TypeVar

from fastapi import HTTPException

if TYPE_CHECKING:
    from sqlalchemy.orm import Session

T = TypeVar("T")


def coerce_uuid(value):
    """Convert value to UUID, returning None if value is None.

    Raises:
        HTTPException: 400 if value is not a valid UUID
    """
    if value is None:
        return None
    if isinstance(value, uuid.UUID):
        return value
    try:
        return uuid.UUID(str(value))
    except ValueError as exc:
        raise HTTPException(status_code=400, detail="Invalid identifier") from exc


def domain_error(status_code: int, code: str, message: str, details=None) -> HTTPException:
    """Build an HTTPException carrying the structured error envelope.

    The error handlers render ``code``/``message``/``details`` verbatim.
    """
    return HTTPException(
        status_code=status_code,
        detail={"code": code, "message": message, "details": details},
    )


def apply_ordering(query, order_by: str, order_dir: str, allowed_columns: dict):
    """Apply ordering to a query with validation.

    Args:
        query: SQLAlchemy query object
        order_by: Column name to order by
        order_dir: Direction ('asc' or 'desc')
        allowed_columns: Dict mapping column names to SQLAlchemy columns

    Returns:
        Query with ordering applied

    Raises:
        HTTPException: 400 if order_by is not in allowed_columns
    """
    if order_by not in allowed_columns:
        raise HTTPException(
            status_code=400,
            detail=f"Invalid order_by. Allowed: {', '.join(sorted(allowed_columns))}",
        )
    column = allowed_columns[order_by]
    if order_dir == "desc":
        return query.order_by(column.desc())
    return query.order_by(column.asc())


def apply_pagination(query, limit: int, offset: int):
    return query.limit(limit).offset(offset)


def validate_enum(value, enum_cls, label: str):
    """Validate and convert a value to an enum member.

    Returns:
        Enum member or None if value is None

    Raises:
        HTTPException: 400 if value is not a valid enum member
    """
    if value is None:
        return None
    if isinstance(value, enum_cls):
        return value
    try:
        return enum_cls(value)
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=f"Invalid {label}") from exc


def get_or_404(db: Session, model: type[T], id, detail: str | None = None, **options) -> T:
    """Get entity by ID or raise 404.

    Args:
        db: Database session
        model: SQLAlchemy model class
        id: Entity ID (string or UUID)
        detail: Custom error message (defaults to "{ModelName} not found")
        **options: Additional options passed to db.get() (e.g. populate_existing=True)

    Raises:
        HTTPException: 404 if entity not found
    """
    entity = db.get(model, coerce_uuid(id), **options)
    if not entity:
        raise HTTPException(status_code=404, detail=detail or f"{model.__name__} not found")
    return entity


def require_text(value: str | None, label: str) -> str:
    """Strip a required text input, rejecting blank values with a 400."""
    cleaned = (value or "").strip()
    if not cleaned:
        raise domain_error(400, "validation_error", f"{label} is required")
    return cleaned


class ListResponseMixin:
    """Adds ``list_response`` to services exposing a paginated ``list``."""

    @classmethod
    def list_response(cls, db, *args, limit: int, offset: int, **kwargs) -> dict:
        items = cls.list(db, *args, limit=limit, offset=offset, **kwargs)
        return {"items": items, "count": len(items), "limit": limit, "offset": offset}
