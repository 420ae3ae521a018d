"""Tests for the contract status state machine."""

import itertools

import pytest

from contract_hub.enums import ContractStatus
from contract_hub.services import lifecycle

S = ContractStatus
FORWARD = [S.created, S.approved, S.sent, S.signed, S.locked]


@pytest.mark.parametrize(
    ("status", "expected"),
    [
        (S.created, S.approved),
        (S.approved, S.sent),
        (S.sent, S.signed),
        (S.signed, S.locked),
        (S.locked, None),
        (S.revoked, None),
    ],
)
def test_next_valid_status(status, expected):
    assert lifecycle.get_next_valid_status(status) == expected


def test_can_transition_matches_rule_for_every_pair():
    for current, target in itertools.product(ContractStatus, repeat=2):
        forward = (
            current not in (S.locked, S.revoked)
            and current in FORWARD
            and target in FORWARD
            and FORWARD.index(target) == FORWARD.index(current) + 1
        )
        revoke = target == S.revoked and current in (S.created, S.sent)
        assert lifecycle.can_transition_to(current, target) == (forward or revoke), (
            current,
            target,
        )


def test_no_skipping_or_moving_backward():
    assert not lifecycle.can_transition_to(S.created, S.sent)
    assert not lifecycle.can_transition_to(S.approved, S.created)
    assert not lifecycle.can_transition_to(S.sent, S.sent)


def test_signed_and_approved_contracts_cannot_be_revoked():
    assert lifecycle.can_transition_to(S.sent, S.revoked)
    assert not lifecycle.can_transition_to(S.signed, S.revoked)
    assert not lifecycle.can_transition_to(S.approved, S.revoked)


def test_locked_is_final():
    assert lifecycle.get_next_valid_status(S.locked) is None
    for target in ContractStatus:
        assert not lifecycle.can_transition_to(S.locked, target)


def test_can_revoke_and_is_editable():
    assert {s for s in ContractStatus if lifecycle.can_revoke(s)} == {S.created, S.sent}
    assert {s for s in ContractStatus if lifecycle.is_editable(s)} == {S.created}


def test_status_progress():
    assert lifecycle.get_status_progress(S.revoked) == 0
    assert lifecycle.get_status_progress(S.created) == pytest.approx(20.0)
    assert lifecycle.get_status_progress(S.sent) == pytest.approx(60.0)
    assert lifecycle.get_status_progress(S.locked) == pytest.approx(100.0)


def test_accepts_string_values():
    assert lifecycle.can_transition_to("created", "approved")
    assert lifecycle.get_next_valid_status("signed") == S.locked
    with pytest.raises(ValueError):
        lifecycle.is_editable("archived")


def test_display_lookups_cover_every_status():
    for status in ContractStatus:
        display = lifecycle.status_display(status)
        assert display["label"] == status.value.capitalize()
        assert display["color"]
        assert display["icon"]
    assert lifecycle.get_status_label(S.revoked) == "Revoked"
    assert "red" in lifecycle.get_status_color(S.revoked)


def test_timestamp_field_for_each_milestone():
    assert lifecycle.timestamp_field_for(S.created) is None
    assert lifecycle.timestamp_field_for(S.approved) == "approved_at"
    assert lifecycle.timestamp_field_for(S.revoked) == "revoked_at"


def test_available_transitions():
    created = lifecycle.available_transitions(S.created)
    assert [t["to"] for t in created] == ["approved", "revoked"]
    assert [t["to"] for t in lifecycle.available_transitions(S.approved)] == ["sent"]
    assert [t["to"] for t in lifecycle.available_transitions(S.sent)] == ["signed", "revoked"]
    assert lifecycle.available_transitions(S.locked) == []
    assert lifecycle.available_transitions(S.revoked) == []
