import enum


class FieldType(enum.Enum):
    text = "text"
    date = "date"
    signature = "signature"
    checkbox = "checkbox"


class ContractStatus(enum.Enum):
    created = "created"
    approved = "approved"
    sent = "sent"
    signed = "signed"
    locked = "locked"
    revoked = "revoked"
