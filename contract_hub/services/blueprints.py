"""Blueprint and blueprint field record services."""

from __future__ import annotations

import logging

from sqlalchemy import func
from sqlalchemy.orm import Session

from contract_hub.models.blueprints import Blueprint, BlueprintField
from contract_hub.schemas.blueprints import (
    BlueprintCreate,
    BlueprintFieldCreate,
    BlueprintFieldUpdate,
    BlueprintUpdate,
)
from contract_hub.services.common import (
    apply_ordering,
    apply_pagination,
    coerce_uuid,
    require_text,
)
from contract_hub.services.crud import CRUDManager
from contract_hub.services.field_values import default_placeholder

logger = logging.getLogger(__name__)


class Blueprints(CRUDManager[Blueprint]):
    model = Blueprint
    not_found_detail = "Blueprint not found"

    @classmethod
    def create(cls, db: Session, payload: BlueprintCreate) -> Blueprint:
        data = payload.model_dump()
        data["name"] = require_text(data.get("name"), "Blueprint name")
        blueprint = cls._persist(db, Blueprint(**data))
        logger.info("Created blueprint %s (%s)", blueprint.id, blueprint.name)
        return blueprint

    @classmethod
    def get_with_fields(cls, db: Session, blueprint_id: str) -> Blueprint:
        """Blueprint with ``fields`` loaded in order_index order."""
        blueprint = cls.get(db, blueprint_id)
        # Relationship is ordered by order_index
        _ = blueprint.fields
        return blueprint

    @staticmethod
    def list(
        db: Session,
        search: str | None,
        order_by: str,
        order_dir: str,
        limit: int,
        offset: int,
    ):
        query = db.query(Blueprint)
        if search:
            query = query.filter(Blueprint.name.ilike(f"%{search.strip()}%"))
        query = apply_ordering(
            query,
            order_by,
            order_dir,
            {
                "created_at": Blueprint.created_at,
                "updated_at": Blueprint.updated_at,
                "name": Blueprint.name,
            },
        )
        return apply_pagination(query, limit, offset).all()

    @classmethod
    def update(cls, db: Session, blueprint_id: str, payload: BlueprintUpdate) -> Blueprint:
        data = payload.model_dump(exclude_unset=True)
        if "name" in data:
            data["name"] = require_text(data["name"], "Blueprint name")
        return super().update(db, blueprint_id, data)


class BlueprintFields(CRUDManager[BlueprintField]):
    model = BlueprintField
    not_found_detail = "Blueprint field not found"

    @classmethod
    def create(
        cls, db: Session, blueprint_id: str, payload: BlueprintFieldCreate
    ) -> BlueprintField:
        blueprint = blueprints.get(db, blueprint_id)
        data = payload.model_dump()
        data["label"] = require_text(data.get("label"), "Field label")
        if not data.get("placeholder"):
            data["placeholder"] = default_placeholder(data["field_type"])
        if data.get("order_index") is None:
            data["order_index"] = cls.count_for_blueprint(db, blueprint.id)
        field = cls._persist(db, BlueprintField(blueprint_id=blueprint.id, **data))
        logger.info(
            "Added %s field %s to blueprint %s",
            field.field_type.value,
            field.id,
            blueprint.id,
        )
        return field

    @staticmethod
    def count_for_blueprint(db: Session, blueprint_id) -> int:
        return (
            db.query(func.count(BlueprintField.id))
            .filter(BlueprintField.blueprint_id == coerce_uuid(blueprint_id))
            .scalar()
            or 0
        )

    @staticmethod
    def list_for_blueprint(db: Session, blueprint_id) -> list[BlueprintField]:
        return (
            db.query(BlueprintField)
            .filter(BlueprintField.blueprint_id == coerce_uuid(blueprint_id))
            .order_by(BlueprintField.order_index.asc(), BlueprintField.created_at.asc())
            .all()
        )

    @classmethod
    def update(
        cls, db: Session, field_id: str, payload: BlueprintFieldUpdate
    ) -> BlueprintField:
        data = payload.model_dump(exclude_unset=True)
        if "label" in data:
            data["label"] = require_text(data["label"], "Field label")
        return super().update(db, field_id, data)


blueprints = Blueprints()
blueprint_fields = BlueprintFields()
