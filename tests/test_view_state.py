import uuid

from contract_hub.web import view_state as vs


def test_initial_view_is_dashboard():
    assert vs.INITIAL_VIEW == vs.Dashboard()
    assert vs.nav_section(vs.INITIAL_VIEW) == vs.NavSection.dashboard


def test_navigate_drops_selection():
    assert vs.navigate("blueprints") == vs.BlueprintList()
    assert vs.navigate(vs.NavSection.dashboard) == vs.Dashboard()


def test_blueprint_editing_flow():
    blueprint_id = uuid.uuid4()
    state = vs.edit_blueprint(str(blueprint_id))
    assert state == vs.EditingBlueprint(blueprint_id)
    assert vs.nav_section(state) == vs.NavSection.blueprints
    assert vs.after_blueprint_saved() == vs.BlueprintList()
    assert vs.nav_section(vs.create_blueprint()) == vs.NavSection.blueprints


def test_contract_flow():
    contract_id = uuid.uuid4()
    assert vs.nav_section(vs.create_contract()) == vs.NavSection.dashboard
    state = vs.after_contract_created(contract_id)
    assert state == vs.ViewingContract(contract_id)
    assert vs.nav_section(state) == vs.NavSection.dashboard


def test_not_found_falls_back_to_safe_view():
    assert vs.on_not_found(vs.ViewingContract(uuid.uuid4())) == vs.Dashboard()
    assert vs.on_not_found(vs.EditingBlueprint(uuid.uuid4())) == vs.BlueprintList()
