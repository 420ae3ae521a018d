"""Navigation state for the contract UI.

Each screen is its own frozen type carrying exactly the payload it needs,
so "which screen, which record" is a single value instead of a set of
independent flags. The functions below are the only ways to move between
screens. This is the navigation model a client drives; the HTTP API does not
import it.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass
from uuid import UUID


class NavSection(enum.Enum):
    dashboard = "dashboard"
    blueprints = "blueprints"


@dataclass(frozen=True)
class Dashboard:
    pass


@dataclass(frozen=True)
class BlueprintList:
    pass


@dataclass(frozen=True)
class CreatingBlueprint:
    pass


@dataclass(frozen=True)
class EditingBlueprint:
    blueprint_id: UUID


@dataclass(frozen=True)
class CreatingContract:
    pass


@dataclass(frozen=True)
class ViewingContract:
    contract_id: UUID


ViewState = (
    Dashboard
    | BlueprintList
    | CreatingBlueprint
    | EditingBlueprint
    | CreatingContract
    | ViewingContract
)

INITIAL_VIEW: ViewState = Dashboard()


def navigate(section: NavSection | str) -> ViewState:
    """Top-level navigation; drops any selected record."""
    section = NavSection(section)
    if section == NavSection.blueprints:
        return BlueprintList()
    return Dashboard()


def create_blueprint() -> ViewState:
    return CreatingBlueprint()


def edit_blueprint(blueprint_id: UUID | str) -> ViewState:
    return EditingBlueprint(UUID(str(blueprint_id)))


def after_blueprint_saved() -> ViewState:
    return BlueprintList()


def create_contract() -> ViewState:
    return CreatingContract()


def view_contract(contract_id: UUID | str) -> ViewState:
    return ViewingContract(UUID(str(contract_id)))


def after_contract_created(contract_id: UUID | str) -> ViewState:
    return view_contract(contract_id)


def on_not_found(state: ViewState) -> ViewState:
    """Safe view to fall back to when the selected record no longer exists."""
    if isinstance(state, EditingBlueprint | CreatingBlueprint):
        return BlueprintList()
    return Dashboard()


def nav_section(state: ViewState) -> NavSection:
    """Which top-level navigation entry is highlighted for ``state``."""
    if isinstance(state, BlueprintList | CreatingBlueprint | EditingBlueprint):
        return NavSection.blueprints
    return NavSection.dashboard
