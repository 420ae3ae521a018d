"""Field type semantics and the required-field gate.

Values are always stored as strings. Checkbox values are the literal
strings "true"/"false"; date values are ISO ``YYYY-MM-DD`` strings. A blank
checkbox or date submission is stored as "" and clears the answer.
"""

from __future__ import annotations

import re
from collections.abc import Iterable, Mapping
from datetime import date

from contract_hub.enums import FieldType

SIGNATURE_PLACEHOLDER = "Type your full name to sign"

_CHECKBOX_TRUE = {"true"}
_CHECKBOX_FALSE = {"false"}
_ISO_DATE = re.compile(r"^[0-9]{4}-[0-9]{2}-[0-9]{2}$")


class FieldValueError(ValueError):
    """Raised when a value does not fit its field type."""

    def __init__(self, label: str, message: str):
        self.label = label
        super().__init__(f"{label}: {message}")


def coerce_field_type(value: FieldType | str) -> FieldType:
    if isinstance(value, FieldType):
        return value
    return FieldType(value)


def normalize_value(field_type: FieldType | str, value, label: str = "value") -> str | None:
    """Convert a submitted value to its stored string form.

    Raises:
        FieldValueError: if the value is not valid for the field type
    """
    field_type = coerce_field_type(field_type)
    if value is None:
        return None

    if field_type == FieldType.checkbox:
        if isinstance(value, bool):
            return "true" if value else "false"
        lowered = str(value).strip().lower()
        if not lowered:
            return ""
        if lowered in _CHECKBOX_TRUE:
            return "true"
        if lowered in _CHECKBOX_FALSE:
            return "false"
        raise FieldValueError(label, "checkbox values must be true or false")

    if not isinstance(value, str):
        raise FieldValueError(label, "expected a string value")

    if field_type == FieldType.date:
        candidate = value.strip()
        if not candidate:
            return ""
        if not _ISO_DATE.match(candidate):
            raise FieldValueError(label, "dates must use the YYYY-MM-DD format")
        try:
            return date.fromisoformat(candidate).isoformat()
        except ValueError as exc:
            raise FieldValueError(label, "not a valid calendar date") from exc

    # text and signature are free-form
    return value


def is_provided(value: str | None) -> bool:
    return value is not None and value.strip() != ""


def missing_required_fields(fields: Iterable, values_by_field_id: Mapping) -> list[str]:
    """Labels of required fields without a provided value, in display order.

    A checkbox counts as provided whenever a value is stored, "false" included.
    """
    missing = []
    for field in sorted(fields, key=lambda f: f.order_index or 0):
        if not field.required:
            continue
        if not is_provided(values_by_field_id.get(field.id)):
            missing.append(field.label)
    return missing


def default_placeholder(field_type: FieldType | str) -> str | None:
    if coerce_field_type(field_type) == FieldType.signature:
        return SIGNATURE_PLACEHOLDER
    return None
