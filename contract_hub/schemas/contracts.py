from __future__ import annotations

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from contract_hub.enums import ContractStatus
from contract_hub.schemas.blueprints import BlueprintFieldRead, BlueprintRead


class ContractCreate(BaseModel):
    blueprint_id: UUID
    name: str = Field(min_length=1, max_length=200)


class ContractRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    blueprint_id: UUID
    name: str
    status: ContractStatus
    created_at: datetime
    updated_at: datetime
    approved_at: datetime | None = None
    sent_at: datetime | None = None
    signed_at: datetime | None = None
    locked_at: datetime | None = None
    revoked_at: datetime | None = None


class StatusTransitionRequest(BaseModel):
    status: ContractStatus


class StatusDisplay(BaseModel):
    status: ContractStatus
    label: str
    color: str
    icon: str
    progress: float
    is_editable: bool
    can_revoke: bool


class StatusTransitionOption(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    from_status: ContractStatus = Field(alias="from")
    to_status: ContractStatus = Field(alias="to")
    label: str
    icon: str


class ContractFieldValueRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    contract_id: UUID
    blueprint_field_id: UUID
    value: str | None = None
    created_at: datetime
    updated_at: datetime


class FieldValueWrite(BaseModel):
    # Checkbox fields also accept JSON booleans.
    value: str | bool | None = None


class FieldValuesBulkWrite(BaseModel):
    values: dict[UUID, str | bool | None]


class ContractDetailRead(ContractRead):
    blueprint: BlueprintRead | None = None
    fields: list[BlueprintFieldRead] = []
    field_values: list[ContractFieldValueRead] = []
    display: StatusDisplay
    available_transitions: list[StatusTransitionOption] = []


class ContractStats(BaseModel):
    total: int
    active: int
    pending: int
    signed: int
    revoked: int
