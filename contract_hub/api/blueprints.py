from fastapi import APIRouter, Depends, Query, Response, status
from sqlalchemy.orm import Session

from contract_hub.db import get_db
from contract_hub.schemas.blueprints import (
    BlueprintCreate,
    BlueprintFieldCreate,
    BlueprintFieldRead,
    BlueprintFieldUpdate,
    BlueprintRead,
    BlueprintUpdate,
    BlueprintWithFieldsRead,
)
from contract_hub.schemas.common import ListResponse
from contract_hub.services import blueprints as blueprints_service

router = APIRouter()


@router.post(
    "/blueprints",
    response_model=BlueprintRead,
    status_code=status.HTTP_201_CREATED,
    tags=["blueprints"],
)
def create_blueprint(payload: BlueprintCreate, db: Session = Depends(get_db)):
    return blueprints_service.blueprints.create(db, payload)


@router.get(
    "/blueprints",
    response_model=ListResponse[BlueprintRead],
    tags=["blueprints"],
)
def list_blueprints(
    search: str | None = None,
    order_by: str = Query(default="created_at"),
    order_dir: str = Query(default="desc", pattern="^(asc|desc)$"),
    limit: int = Query(default=50, ge=1, le=200),
    offset: int = Query(default=0, ge=0),
    db: Session = Depends(get_db),
):
    return blueprints_service.blueprints.list_response(
        db, search, order_by, order_dir, limit=limit, offset=offset
    )


@router.get(
    "/blueprints/{blueprint_id}",
    response_model=BlueprintWithFieldsRead,
    tags=["blueprints"],
)
def get_blueprint(blueprint_id: str, db: Session = Depends(get_db)):
    return blueprints_service.blueprints.get_with_fields(db, blueprint_id)


@router.patch(
    "/blueprints/{blueprint_id}",
    response_model=BlueprintRead,
    tags=["blueprints"],
)
def update_blueprint(
    blueprint_id: str, payload: BlueprintUpdate, db: Session = Depends(get_db)
):
    return blueprints_service.blueprints.update(db, blueprint_id, payload)


@router.delete(
    "/blueprints/{blueprint_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    tags=["blueprints"],
)
def delete_blueprint(blueprint_id: str, db: Session = Depends(get_db)):
    blueprints_service.blueprints.delete(db, blueprint_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get(
    "/blueprints/{blueprint_id}/fields",
    response_model=list[BlueprintFieldRead],
    tags=["blueprint-fields"],
)
def list_blueprint_fields(blueprint_id: str, db: Session = Depends(get_db)):
    blueprints_service.blueprints.get(db, blueprint_id)
    return blueprints_service.blueprint_fields.list_for_blueprint(db, blueprint_id)


@router.post(
    "/blueprints/{blueprint_id}/fields",
    response_model=BlueprintFieldRead,
    status_code=status.HTTP_201_CREATED,
    tags=["blueprint-fields"],
)
def create_blueprint_field(
    blueprint_id: str, payload: BlueprintFieldCreate, db: Session = Depends(get_db)
):
    return blueprints_service.blueprint_fields.create(db, blueprint_id, payload)


@router.patch(
    "/blueprint-fields/{field_id}",
    response_model=BlueprintFieldRead,
    tags=["blueprint-fields"],
)
def update_blueprint_field(
    field_id: str, payload: BlueprintFieldUpdate, db: Session = Depends(get_db)
):
    return blueprints_service.blueprint_fields.update(db, field_id, payload)


@router.delete(
    "/blueprint-fields/{field_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    tags=["blueprint-fields"],
)
def delete_blueprint_field(field_id: str, db: Session = Depends(get_db)):
    blueprints_service.blueprint_fields.delete(db, field_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
