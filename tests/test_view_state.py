import pytest

from istatsim.core.enums import PanelType
from istatsim.core.state import SimulationInput
from istatsim.core.view_state import ViewState


def snapshot(state):
    return {name: (r.value, r.unit) for name, r in state.results.items()}


def test_defaults():
    state = ViewState()
    assert state.inputs == SimulationInput(
        blood_loss=0, time_since_injury="00:00", lung_function=100,
        transfused_blood=0, transfused_plasma=0, body_weight=70,
    )
    assert state.panel is PanelType.CG8
    assert state.results is None
    assert state.edit_mode is False
    assert state.visible_fields() == []


def test_set_input_replaces_one_field():
    state = ViewState()
    state.set_input("blood_loss", "4900")
    assert state.inputs.blood_loss == "4900"
    assert state.inputs.body_weight == 70


def test_set_input_unknown_field():
    with pytest.raises(ValueError):
        ViewState().set_input("heart_rate", 80)


def test_set_input_does_not_regenerate(generated_state):
    before = snapshot(generated_state)
    generated_state.set_input("blood_loss", 4900)
    assert snapshot(generated_state) == before


def test_generate_all_fields_regardless_of_panel():
    state = ViewState()
    state.select_panel(PanelType.CG4)
    state.generate()
    assert len(state.results) == 13


def test_switching_panel_keeps_values(generated_state):
    state = generated_state
    state.set_input("blood_loss", 2450)
    state.generate()
    before = snapshot(state)

    state.select_panel("cg4")
    assert state.panel is PanelType.CG4
    assert snapshot(state) == before
    assert [r.name for r in state.visible_fields()] == \
        ["pH", "pCO2", "pO2", "Laktat", "BE", "HCO3"]

    state.select_panel("CG8")
    assert len(state.visible_fields()) == 13
    assert snapshot(state) == before


def test_select_unknown_panel():
    with pytest.raises(ValueError):
        ViewState().select_panel("cg7")


def test_toggle_edit():
    state = ViewState()
    assert state.toggle_edit() is True
    assert state.toggle_edit() is False


def test_edit_ignored_when_locked(generated_state):
    before = snapshot(generated_state)
    assert generated_state.edit_field("pH", "6.90") is False
    assert snapshot(generated_state) == before


def test_edit_ignored_without_results():
    state = ViewState()
    state.toggle_edit()
    assert state.edit_field("pH", "6.90") is False
    assert state.results is None


def test_edit_changes_only_one_field(generated_state):
    state = generated_state
    before = snapshot(state)
    state.toggle_edit()
    assert state.edit_field("Laktat", "12.4") is True

    after = snapshot(state)
    assert after["Laktat"] == ("12.4", "mmol/L")
    del before["Laktat"], after["Laktat"]
    assert after == before


def test_edit_survives_locking(generated_state):
    state = generated_state
    state.toggle_edit()
    state.edit_field("pH", "free text")
    state.toggle_edit()
    assert state.results["pH"].value == "free text"


def test_generate_discards_edits(generated_state):
    state = generated_state
    state.toggle_edit()
    state.edit_field("pH", "6.80")
    state.generate()
    assert state.results["pH"].value == "7.40"


def test_edit_unknown_field(generated_state):
    generated_state.toggle_edit()
    with pytest.raises(ValueError):
        generated_state.edit_field("Cl", "100")


def test_export_filename():
    state = ViewState()
    assert state.export_filename("png") == "istat-cg8-screen.png"
    state.select_panel(PanelType.CG4)
    assert state.export_filename("PDF") == "istat-cg4-screen.pdf"
