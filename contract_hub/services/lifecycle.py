"""Contract status state machine.

Pure functions over ContractStatus. Nothing in here touches the database;
the contract service consults these rules before it writes a status change.

    created -> approved -> sent -> signed -> locked
       |                    |
       +------> revoked <---+
"""

from __future__ import annotations

from contract_hub.enums import ContractStatus

CONTRACT_LIFECYCLE: tuple[ContractStatus, ...] = (
    ContractStatus.created,
    ContractStatus.approved,
    ContractStatus.sent,
    ContractStatus.signed,
    ContractStatus.locked,
)

TERMINAL_STATUSES = frozenset({ContractStatus.locked, ContractStatus.revoked})
REVOCABLE_STATUSES = frozenset({ContractStatus.created, ContractStatus.sent})

STATUS_LABELS = {
    ContractStatus.created: "Created",
    ContractStatus.approved: "Approved",
    ContractStatus.sent: "Sent",
    ContractStatus.signed: "Signed",
    ContractStatus.locked: "Locked",
    ContractStatus.revoked: "Revoked",
}

STATUS_COLORS = {
    ContractStatus.created: "bg-slate-100 text-slate-700 border-slate-300",
    ContractStatus.approved: "bg-blue-100 text-blue-700 border-blue-300",
    ContractStatus.sent: "bg-amber-100 text-amber-700 border-amber-300",
    ContractStatus.signed: "bg-emerald-100 text-emerald-700 border-emerald-300",
    ContractStatus.locked: "bg-gray-100 text-gray-700 border-gray-400",
    ContractStatus.revoked: "bg-red-100 text-red-700 border-red-300",
}

STATUS_ICONS = {
    ContractStatus.created: "📝",
    ContractStatus.approved: "✓",
    ContractStatus.sent: "📤",
    ContractStatus.signed: "✍️",
    ContractStatus.locked: "🔒",
    ContractStatus.revoked: "❌",
}

# Milestone column stamped when a contract enters the status.
TIMESTAMP_FIELDS = {
    ContractStatus.approved: "approved_at",
    ContractStatus.sent: "sent_at",
    ContractStatus.signed: "signed_at",
    ContractStatus.locked: "locked_at",
    ContractStatus.revoked: "revoked_at",
}


def coerce_status(value: ContractStatus | str) -> ContractStatus:
    """Accept a ContractStatus or its string value; raise ValueError otherwise."""
    if isinstance(value, ContractStatus):
        return value
    return ContractStatus(value)


def get_next_valid_status(status: ContractStatus | str) -> ContractStatus | None:
    status = coerce_status(status)
    if status in TERMINAL_STATUSES:
        return None
    index = CONTRACT_LIFECYCLE.index(status)
    if index == len(CONTRACT_LIFECYCLE) - 1:
        return None
    return CONTRACT_LIFECYCLE[index + 1]


def can_transition_to(current: ContractStatus | str, target: ContractStatus | str) -> bool:
    """Return True when a contract at ``current`` may move to ``target``.

    Locked and revoked contracts never move. Revocation is only allowed from
    created or sent; every other move must be exactly one step forward.
    """
    current = coerce_status(current)
    target = coerce_status(target)
    if current in TERMINAL_STATUSES:
        return False
    if target == ContractStatus.revoked:
        return current in REVOCABLE_STATUSES
    return get_next_valid_status(current) == target


def can_revoke(status: ContractStatus | str) -> bool:
    return coerce_status(status) in REVOCABLE_STATUSES


def is_editable(status: ContractStatus | str) -> bool:
    return coerce_status(status) == ContractStatus.created


def get_status_progress(status: ContractStatus | str) -> float:
    status = coerce_status(status)
    if status == ContractStatus.revoked:
        return 0.0
    index = CONTRACT_LIFECYCLE.index(status)
    return (index + 1) / len(CONTRACT_LIFECYCLE) * 100


def get_status_label(status: ContractStatus | str) -> str:
    return STATUS_LABELS[coerce_status(status)]


def get_status_color(status: ContractStatus | str) -> str:
    return STATUS_COLORS[coerce_status(status)]


def get_status_icon(status: ContractStatus | str) -> str:
    return STATUS_ICONS[coerce_status(status)]


def timestamp_field_for(target: ContractStatus | str) -> str | None:
    return TIMESTAMP_FIELDS.get(coerce_status(target))


def status_display(status: ContractStatus | str) -> dict:
    status = coerce_status(status)
    return {
        "status": status.value,
        "label": get_status_label(status),
        "color": get_status_color(status),
        "icon": get_status_icon(status),
        "progress": get_status_progress(status),
        "is_editable": is_editable(status),
        "can_revoke": can_revoke(status),
    }


def available_transitions(status: ContractStatus | str) -> list[dict]:
    """Transitions a UI may offer: the forward step first, then revoke."""
    status = coerce_status(status)
    transitions = []
    next_status = get_next_valid_status(status)
    if next_status is not None:
        transitions.append(
            {
                "from": status.value,
                "to": next_status.value,
                "label": f"Mark as {get_status_label(next_status)}",
                "icon": get_status_icon(next_status),
            }
        )
    if can_revoke(status):
        transitions.append(
            {
                "from": status.value,
                "to": ContractStatus.revoked.value,
                "label": "Revoke",
                "icon": get_status_icon(ContractStatus.revoked),
            }
        )
    return transitions
