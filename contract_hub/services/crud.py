"""Generic CRUD primitives shared by the record services."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any, Generic, TypeVar, cast

from contract_hub.services.common import ListResponseMixin, get_or_404

TModel = TypeVar("TModel")

logger = logging.getLogger(__name__)


class CRUDManager(ListResponseMixin, Generic[TModel]):
    """Reusable create/get/update/delete for services with model-only persistence."""

    model: type[TModel] | None = None
    not_found_detail: str = "Resource not found"

    @classmethod
    def _require_model(cls) -> type[TModel]:
        if cls.model is None:
            raise RuntimeError(f"{cls.__name__}.model must be set")
        return cls.model

    @classmethod
    def _payload_dict(cls, payload: Any, *, exclude_unset: bool) -> dict[str, Any]:
        if hasattr(payload, "model_dump"):
            dumped = payload.model_dump(exclude_unset=exclude_unset)
            return cast(dict[str, Any], dumped)
        if isinstance(payload, Mapping):
            return dict(payload)
        return dict(payload)

    @classmethod
    def _get_or_404(cls, db, entity_id, **options):
        return get_or_404(db, cls._require_model(), entity_id, cls.not_found_detail, **options)

    @classmethod
    def _persist(cls, db, entity):
        db.add(entity)
        db.commit()
        db.refresh(entity)
        return entity

    @classmethod
    def create(cls, db, payload):
        model = cls._require_model()
        entity = model(**cls._payload_dict(payload, exclude_unset=False))
        cls._persist(db, entity)
        logger.info("Created %s %s", model.__name__, entity.id)
        return entity

    @classmethod
    def get(cls, db, entity_id):
        return cls._get_or_404(db, entity_id)

    @classmethod
    def update(cls, db, entity_id, payload):
        entity = cls._get_or_404(db, entity_id)
        for key, value in cls._payload_dict(payload, exclude_unset=True).items():
            setattr(entity, key, value)
        db.commit()
        db.refresh(entity)
        return entity

    @classmethod
    def delete(cls, db, entity_id) -> None:
        entity = cls._get_or_404(db, entity_id)
        db.delete(entity)
        db.commit()
        logger.info("Deleted %s %s", cls._require_model().__name__, entity_id)
