"""Tests for blueprint and blueprint field services."""

import pytest
from fastapi import HTTPException

from contract_hub.enums import FieldType
from contract_hub.models.blueprints import Blueprint
from contract_hub.schemas.blueprints import (
    BlueprintCreate,
    BlueprintFieldCreate,
    BlueprintFieldUpdate,
    BlueprintUpdate,
)
from contract_hub.schemas.contracts import ContractCreate
from contract_hub.services import blueprints as blueprints_service
from contract_hub.services import contracts as contracts_service
from contract_hub.services.field_values import SIGNATURE_PLACEHOLDER


def test_create_blueprint_strips_name(db_session):
    blueprint = blueprints_service.blueprints.create(
        db_session, BlueprintCreate(name="  NDA  ", description="Mutual")
    )
    assert blueprint.name == "NDA"
    assert blueprint.description == "Mutual"
    assert blueprint.created_at is not None


def test_blank_blueprint_name_is_rejected_without_writing(db_session):
    before = db_session.query(Blueprint).count()
    with pytest.raises(HTTPException) as exc_info:
        blueprints_service.blueprints.create(db_session, BlueprintCreate(name="   "))
    assert exc_info.value.status_code == 400
    assert exc_info.value.detail["code"] == "validation_error"
    assert db_session.query(Blueprint).count() == before


def test_get_missing_blueprint_returns_404(db_session):
    with pytest.raises(HTTPException) as exc_info:
        blueprints_service.blueprints.get(db_session, "00000000-0000-0000-0000-000000000000")
    assert exc_info.value.status_code == 404


def test_fields_default_to_append_order(db_session, full_blueprint):
    fields = blueprints_service.blueprint_fields.list_for_blueprint(
        db_session, full_blueprint.id
    )
    assert [f.label for f in fields] == [
        "Employee Name",
        "Start Date",
        "Accepts Terms",
        "Signature",
    ]
    assert [f.order_index for f in fields] == [0, 1, 2, 3]


def test_fields_are_listed_by_order_index(db_session, blueprint):
    blueprints_service.blueprint_fields.create(
        db_session,
        str(blueprint.id),
        BlueprintFieldCreate(field_type=FieldType.date, label="Effective Date", order_index=0),
    )
    loaded = blueprints_service.blueprints.get_with_fields(db_session, str(blueprint.id))
    assert loaded.fields[0].order_index == 0
    labels = [f.label for f in loaded.fields]
    assert set(labels) == {"Client Name", "Effective Date"}


def test_signature_field_gets_default_placeholder(db_session, blueprint):
    field = blueprints_service.blueprint_fields.create(
        db_session,
        str(blueprint.id),
        BlueprintFieldCreate(field_type=FieldType.signature, label="Signed By"),
    )
    assert field.placeholder == SIGNATURE_PLACEHOLDER


def test_update_field_and_blueprint(db_session, blueprint, client_name_field):
    updated = blueprints_service.blueprint_fields.update(
        db_session,
        str(client_name_field.id),
        BlueprintFieldUpdate(label="Customer Name", required=False),
    )
    assert updated.label == "Customer Name"
    assert updated.required is False

    renamed = blueprints_service.blueprints.update(
        db_session, str(blueprint.id), BlueprintUpdate(name="Renamed")
    )
    assert renamed.name == "Renamed"


def test_list_blueprints_search_and_order(db_session):
    for name in ("Lease", "Loan", "NDA"):
        blueprints_service.blueprints.create(db_session, BlueprintCreate(name=name))
    results = blueprints_service.blueprints.list(
        db_session,
        search="l",
        order_by="name",
        order_dir="asc",
        limit=10,
        offset=0,
    )
    assert [b.name for b in results] == ["Lease", "Loan"]


def test_list_rejects_unknown_order_column(db_session):
    with pytest.raises(HTTPException) as exc_info:
        blueprints_service.blueprints.list(
            db_session, search=None, order_by="label", order_dir="asc", limit=10, offset=0
        )
    assert exc_info.value.status_code == 400


def test_deleting_blueprint_keeps_contract_data(db_session, blueprint, client_name_field):
    contract = contracts_service.contracts.create(
        db_session, ContractCreate(blueprint_id=blueprint.id, name="Kept")
    )
    contracts_service.contract_field_values.upsert(
        db_session, contract.id, client_name_field.id, "Jane Doe"
    )

    blueprints_service.blueprints.delete(db_session, str(blueprint.id))

    assert blueprints_service.blueprint_fields.list_for_blueprint(db_session, blueprint.id) == []
    details = contracts_service.contracts.get_details(db_session, contract.id)
    assert details.blueprint is None
    assert details.fields == []
    assert [v.value for v in details.field_values] == ["Jane Doe"]
