from fastapi import APIRouter, Depends, Query, Response, status
from sqlalchemy.orm import Session

from contract_hub.db import get_db
from contract_hub.enums import ContractStatus
from contract_hub.schemas.common import ListResponse
from contract_hub.schemas.contracts import (
    ContractCreate,
    ContractDetailRead,
    ContractFieldValueRead,
    ContractRead,
    ContractStats,
    FieldValuesBulkWrite,
    FieldValueWrite,
    StatusDisplay,
    StatusTransitionRequest,
)
from contract_hub.services import contracts as contracts_service
from contract_hub.services import lifecycle

router = APIRouter()


@router.post(
    "/contracts",
    response_model=ContractRead,
    status_code=status.HTTP_201_CREATED,
    tags=["contracts"],
)
def create_contract(payload: ContractCreate, db: Session = Depends(get_db)):
    return contracts_service.contracts.create(db, payload)


@router.get(
    "/contracts",
    response_model=ListResponse[ContractRead],
    tags=["contracts"],
)
def list_contracts(
    status: str | None = Query(default=None),
    blueprint_id: str | None = None,
    search: str | None = None,
    order_by: str = Query(default="created_at"),
    order_dir: str = Query(default="desc", pattern="^(asc|desc)$"),
    limit: int = Query(default=50, ge=1, le=200),
    offset: int = Query(default=0, ge=0),
    db: Session = Depends(get_db),
):
    return contracts_service.contracts.list_response(
        db, status, blueprint_id, search, order_by, order_dir, limit=limit, offset=offset
    )


@router.get(
    "/contracts/stats",
    response_model=ContractStats,
    tags=["contracts"],
)
def contract_stats(db: Session = Depends(get_db)):
    return contracts_service.contracts.stats(db)


@router.get(
    "/contracts/{contract_id}",
    response_model=ContractDetailRead,
    tags=["contracts"],
)
def get_contract(contract_id: str, db: Session = Depends(get_db)):
    return contracts_service.contracts.get_details(db, contract_id).as_dict()


@router.delete(
    "/contracts/{contract_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    tags=["contracts"],
)
def delete_contract(contract_id: str, db: Session = Depends(get_db)):
    contracts_service.contracts.delete(db, contract_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post(
    "/contracts/{contract_id}/status",
    response_model=ContractRead,
    tags=["contracts"],
)
def transition_contract_status(
    contract_id: str, payload: StatusTransitionRequest, db: Session = Depends(get_db)
):
    return contracts_service.contracts.transition_status(db, contract_id, payload.status)


@router.get(
    "/contracts/{contract_id}/field-values",
    response_model=list[ContractFieldValueRead],
    tags=["contract-field-values"],
)
def list_field_values(contract_id: str, db: Session = Depends(get_db)):
    contracts_service.contracts.get(db, contract_id)
    return contracts_service.contract_field_values.list_for_contract(db, contract_id)


@router.put(
    "/contracts/{contract_id}/field-values",
    response_model=list[ContractFieldValueRead],
    tags=["contract-field-values"],
)
def save_field_values(
    contract_id: str, payload: FieldValuesBulkWrite, db: Session = Depends(get_db)
):
    return contracts_service.contract_field_values.save_values(db, contract_id, payload.values)


@router.put(
    "/contracts/{contract_id}/field-values/{field_id}",
    response_model=ContractFieldValueRead,
    tags=["contract-field-values"],
)
def upsert_field_value(
    contract_id: str, field_id: str, payload: FieldValueWrite, db: Session = Depends(get_db)
):
    return contracts_service.contract_field_values.upsert(
        db, contract_id, field_id, payload.value
    )


@router.get(
    "/lifecycle/statuses",
    response_model=list[StatusDisplay],
    tags=["lifecycle"],
)
def list_statuses():
    return [lifecycle.status_display(status) for status in ContractStatus]
