from __future__ import annotations

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, field_validator

from contract_hub.enums import FieldType


class BlueprintBase(BaseModel):
    name: str = Field(min_length=1, max_length=200)
    description: str | None = None


class BlueprintCreate(BlueprintBase):
    pass


class BlueprintUpdate(BaseModel):
    name: str | None = Field(default=None, min_length=1, max_length=200)
    description: str | None = None


class BlueprintRead(BlueprintBase):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    created_at: datetime
    updated_at: datetime


class BlueprintFieldBase(BaseModel):
    field_type: FieldType
    label: str = Field(min_length=1, max_length=200)
    required: bool = False
    placeholder: str | None = Field(default=None, max_length=200)
    position_x: float = 0
    position_y: float = 0
    width: float = Field(default=200, ge=0)
    height: float = Field(default=40, ge=0)


class BlueprintFieldCreate(BlueprintFieldBase):
    # Appended after the existing fields when omitted.
    order_index: int | None = Field(default=None, ge=0)


class BlueprintFieldUpdate(BaseModel):
    field_type: FieldType | None = None
    label: str | None = Field(default=None, min_length=1, max_length=200)
    required: bool | None = None
    placeholder: str | None = Field(default=None, max_length=200)
    position_x: float | None = None
    position_y: float | None = None
    width: float | None = Field(default=None, ge=0)
    height: float | None = Field(default=None, ge=0)
    order_index: int | None = Field(default=None, ge=0)

    @field_validator(
        "field_type",
        "required",
        "position_x",
        "position_y",
        "width",
        "height",
        "order_index",
    )
    @classmethod
    def reject_null(cls, v):
        # Omit a key to leave it unchanged; these columns cannot be cleared.
        if v is None:
            raise ValueError("Value cannot be null")
        return v


class BlueprintFieldRead(BlueprintFieldBase):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    blueprint_id: UUID
    order_index: int
    created_at: datetime


class BlueprintWithFieldsRead(BlueprintRead):
    fields: list[BlueprintFieldRead] = []
