from contract_hub.enums import ContractStatus, FieldType
from contract_hub.models.blueprints import Blueprint, BlueprintField
from contract_hub.models.contracts import Contract, ContractFieldValue

__all__ = [
    "Blueprint",
    "BlueprintField",
    "FieldType",
    "Contract",
    "ContractFieldValue",
    "ContractStatus",
]
