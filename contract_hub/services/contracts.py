"""Contract records, field values and status transitions.

Status changes are decided by :mod:`contract_hub.services.lifecycle`; this
module only reads and writes records around those decisions.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import UTC, datetime

from sqlalchemy import func
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from contract_hub.enums import ContractStatus
from contract_hub.metrics import observe_transition, observe_transition_rejection
from contract_hub.models.blueprints import Blueprint, BlueprintField
from contract_hub.models.contracts import Contract, ContractFieldValue
from contract_hub.schemas.contracts import ContractCreate
from contract_hub.services import lifecycle
from contract_hub.services.blueprints import blueprint_fields, blueprints
from contract_hub.services.common import (
    ListResponseMixin,
    apply_ordering,
    apply_pagination,
    coerce_uuid,
    domain_error,
    get_or_404,
    require_text,
    validate_enum,
)
from contract_hub.services.field_values import (
    FieldValueError,
    missing_required_fields,
    normalize_value,
)

logger = logging.getLogger(__name__)

CONTRACT_NOT_FOUND = "Contract not found"


@dataclass
class ContractDetails:
    """A contract together with everything a viewer needs to render it."""

    contract: Contract
    blueprint: Blueprint | None
    fields: list[BlueprintField]
    field_values: list[ContractFieldValue]
    display: dict = field(default_factory=dict)
    available_transitions: list[dict] = field(default_factory=list)

    def as_dict(self) -> dict:
        data = {
            column.key: getattr(self.contract, column.key)
            for column in Contract.__table__.columns
        }
        data.update(
            blueprint=self.blueprint,
            fields=self.fields,
            field_values=self.field_values,
            display=self.display,
            available_transitions=self.available_transitions,
        )
        return data


class Contracts(ListResponseMixin):
    @staticmethod
    def create(db: Session, payload: ContractCreate) -> Contract:
        name = require_text(payload.name, "Contract name")
        blueprint = blueprints.get(db, payload.blueprint_id)
        contract = Contract(
            blueprint_id=blueprint.id,
            name=name,
            status=ContractStatus.created,
        )
        db.add(contract)
        db.commit()
        db.refresh(contract)
        logger.info("Created contract %s from blueprint %s", contract.id, blueprint.id)
        return contract

    @staticmethod
    def get(db: Session, contract_id, *, fresh: bool = False) -> Contract:
        """Get a contract by ID.

        Args:
            fresh: re-read the row from storage even if it is already in the
                session identity map

        Raises:
            HTTPException: 404 if the contract does not exist
        """
        return get_or_404(
            db, Contract, contract_id, CONTRACT_NOT_FOUND, populate_existing=fresh
        )

    @staticmethod
    def get_details(db: Session, contract_id) -> ContractDetails:
        contract = Contracts.get(db, contract_id)
        # The blueprint may have been deleted since the contract was created.
        blueprint = db.get(Blueprint, contract.blueprint_id)
        return ContractDetails(
            contract=contract,
            blueprint=blueprint,
            fields=blueprint_fields.list_for_blueprint(db, contract.blueprint_id),
            field_values=contract_field_values.list_for_contract(db, contract.id),
            display=lifecycle.status_display(contract.status),
            available_transitions=lifecycle.available_transitions(contract.status),
        )

    @staticmethod
    def list(
        db: Session,
        status: str | None,
        blueprint_id: str | None,
        search: str | None,
        order_by: str,
        order_dir: str,
        limit: int,
        offset: int,
    ):
        query = db.query(Contract)
        if status and status != "all":
            query = query.filter(
                Contract.status == validate_enum(status, ContractStatus, "status")
            )
        if blueprint_id:
            query = query.filter(Contract.blueprint_id == coerce_uuid(blueprint_id))
        if search:
            query = query.filter(Contract.name.ilike(f"%{search.strip()}%"))
        query = apply_ordering(
            query,
            order_by,
            order_dir,
            {
                "created_at": Contract.created_at,
                "updated_at": Contract.updated_at,
                "name": Contract.name,
            },
        )
        return apply_pagination(query, limit, offset).all()

    @staticmethod
    def stats(db: Session) -> dict:
        counts = dict(
            db.query(Contract.status, func.count(Contract.id)).group_by(Contract.status).all()
        )

        def _count(*statuses: ContractStatus) -> int:
            return sum(counts.get(status, 0) for status in statuses)

        return {
            "total": sum(counts.values()),
            "active": _count(ContractStatus.created, ContractStatus.approved),
            "pending": _count(ContractStatus.sent),
            "signed": _count(ContractStatus.signed, ContractStatus.locked),
            "revoked": _count(ContractStatus.revoked),
        }

    @staticmethod
    def delete(db: Session, contract_id) -> None:
        contract = Contracts.get(db, contract_id)
        db.delete(contract)
        db.commit()
        logger.info("Deleted contract %s", contract_id)

    @staticmethod
    def transition_status(db: Session, contract_id, target) -> Contract:
        """Move a contract to ``target`` and stamp the matching milestone.

        The current status is re-read from storage right before the check.
        Leaving ``created`` for anything but ``revoked`` requires every
        required blueprint field to hold a value.

        Raises:
            HTTPException: 404 if the contract is missing, 409 if the
                lifecycle forbids the move, 400 if required fields are empty
        """
        target = validate_enum(target, ContractStatus, "status")
        contract = Contracts.get(db, contract_id, fresh=True)
        current = contract.status

        if not lifecycle.can_transition_to(current, target):
            observe_transition_rejection("invalid_transition")
            logger.warning(
                "Rejected transition of contract %s from %s to %s",
                contract.id,
                current.value,
                target.value,
            )
            raise domain_error(
                409,
                "invalid_transition",
                f"Cannot transition from {current.value} to {target.value}",
                {"from": current.value, "to": target.value},
            )

        if current == ContractStatus.created and target != ContractStatus.revoked:
            missing = missing_required_fields(
                blueprint_fields.list_for_blueprint(db, contract.blueprint_id),
                contract_field_values.values_by_field(db, contract.id),
            )
            if missing:
                observe_transition_rejection("missing_required_fields")
                raise domain_error(
                    400,
                    "missing_required_fields",
                    f"Please fill in all required fields: {', '.join(missing)}",
                    {"missing": missing},
                )

        contract.status = target
        timestamp_field = lifecycle.timestamp_field_for(target)
        if timestamp_field and getattr(contract, timestamp_field) is None:
            setattr(contract, timestamp_field, datetime.now(UTC))
        db.commit()
        db.refresh(contract)
        observe_transition(current.value, target.value)
        logger.info(
            "Contract %s moved from %s to %s", contract.id, current.value, target.value
        )
        return contract


class ContractFieldValues:
    @staticmethod
    def list_for_contract(db: Session, contract_id) -> list[ContractFieldValue]:
        return (
            db.query(ContractFieldValue)
            .filter(ContractFieldValue.contract_id == coerce_uuid(contract_id))
            .order_by(ContractFieldValue.created_at.asc())
            .all()
        )

    @staticmethod
    def values_by_field(db: Session, contract_id) -> dict:
        return {
            row.blueprint_field_id: row.value
            for row in ContractFieldValues.list_for_contract(db, contract_id)
        }

    @staticmethod
    def _editable_contract(db: Session, contract_id) -> Contract:
        contract = contracts.get(db, contract_id, fresh=True)
        if not lifecycle.is_editable(contract.status):
            raise domain_error(
                409,
                "contract_not_editable",
                f"Field values cannot be changed once a contract is "
                f"{lifecycle.get_status_label(contract.status).lower()}",
                {"status": contract.status.value},
            )
        return contract

    @staticmethod
    def _write(db: Session, contract: Contract, field_id, value: str | None) -> ContractFieldValue:
        existing = (
            db.query(ContractFieldValue)
            .filter(ContractFieldValue.contract_id == contract.id)
            .filter(ContractFieldValue.blueprint_field_id == field_id)
            .first()
        )
        if existing:
            existing.value = value
            return existing
        row = ContractFieldValue(contract_id=contract.id, blueprint_field_id=field_id, value=value)
        db.add(row)
        return row

    @staticmethod
    def upsert(db: Session, contract_id, field_id, value) -> ContractFieldValue:
        """Write one field value, updating the existing row for the pair if any."""
        contract = ContractFieldValues._editable_contract(db, contract_id)
        blueprint_field = blueprint_fields.get(db, field_id)
        if blueprint_field.blueprint_id != contract.blueprint_id:
            raise domain_error(
                400,
                "field_not_in_blueprint",
                "Field does not belong to this contract's blueprint",
                {"field_id": str(blueprint_field.id)},
            )
        try:
            stored = normalize_value(blueprint_field.field_type, value, blueprint_field.label)
        except FieldValueError as exc:
            raise domain_error(
                400, "invalid_field_value", str(exc), {"label": exc.label}
            ) from exc

        row = ContractFieldValues._write(db, contract, blueprint_field.id, stored)
        db.commit()
        db.refresh(row)
        return row

    @staticmethod
    def save_values(db: Session, contract_id, values: Mapping) -> list[ContractFieldValue]:
        """Save several field values as one all-or-nothing batch.

        Every value is validated before anything is written, and the batch is
        committed once; a storage failure rolls the whole batch back.
        """
        contract = ContractFieldValues._editable_contract(db, contract_id)
        fields_by_id = {
            f.id: f for f in blueprint_fields.list_for_blueprint(db, contract.blueprint_id)
        }

        normalized = {}
        errors = []
        for raw_field_id, value in values.items():
            field_id = coerce_uuid(raw_field_id)
            blueprint_field = fields_by_id.get(field_id)
            if blueprint_field is None:
                errors.append(
                    {"field_id": str(field_id), "message": "Field does not belong to this blueprint"}
                )
                continue
            try:
                normalized[field_id] = normalize_value(
                    blueprint_field.field_type, value, blueprint_field.label
                )
            except FieldValueError as exc:
                errors.append(
                    {"field_id": str(field_id), "label": exc.label, "message": str(exc)}
                )
        if errors:
            raise domain_error(
                400, "invalid_field_values", "Some field values are invalid", {"errors": errors}
            )

        try:
            for field_id, value in normalized.items():
                ContractFieldValues._write(db, contract, field_id, value)
            db.commit()
        except SQLAlchemyError:
            db.rollback()
            logger.exception("Saving field values for contract %s failed", contract.id)
            raise
        logger.info("Saved %d field values for contract %s", len(normalized), contract.id)
        return ContractFieldValues.list_for_contract(db, contract.id)


contracts = Contracts()
contract_field_values = ContractFieldValues()
