import logging
from typing import List, Optional

from .deriver import derive
from .enums import PanelType
from .state import SimulationInput, ReadoutField, ReadoutSet, InputValue

logger = logging.getLogger(__name__)

INPUT_FIELDS = SimulationInput.field_names()


class ViewState:
    """
    Trainer state behind the window.

    Holds the form inputs, the selected panel, the last generated readout
    set and the edit-mode flag. The UI reads from here and never derives
    values itself.
    """
    def __init__(self, inputs: Optional[SimulationInput] = None,
                 panel: PanelType = PanelType.CG8):
        self.inputs = inputs or SimulationInput()
        self.panel = panel
        self.results: Optional[ReadoutSet] = None
        self.edit_mode = False

    @property
    def has_results(self) -> bool:
        return self.results is not None

    def set_input(self, name: str, value: InputValue):
        """Replace one input field. No validation of the value."""
        if name not in INPUT_FIELDS:
            raise ValueError(f"Unknown input field: {name}")
        setattr(self.inputs, name, value)

    def generate(self) -> ReadoutSet:
        """Recompute all readouts from the current inputs, discarding edits."""
        self.results = derive(self.inputs)
        logger.debug("Generated readouts for %s", self.inputs)
        return self.results

    def select_panel(self, panel):
        self.panel = PanelType.from_name(panel)

    def toggle_edit(self) -> bool:
        self.edit_mode = not self.edit_mode
        return self.edit_mode

    def edit_field(self, name: str, value: str) -> bool:
        """
        Overwrite one readout value in place.

        Ignored (returns False) unless edit mode is on and readouts exist.
        Unit and all other fields are left untouched.
        """
        if not self.edit_mode or self.results is None:
            logger.debug("Edit of %s ignored (edit_mode=%s)", name, self.edit_mode)
            return False
        if name not in self.results:
            raise ValueError(f"Unknown readout field: {name}")
        self.results[name].value = str(value)
        return True

    def visible_fields(self) -> List[ReadoutField]:
        """Readouts shown on the selected panel, in analyzer order."""
        if self.results is None:
            return []
        return [self.results[name] for name in self.panel.fields]

    def export_filename(self, fmt: str) -> str:
        return f"istat-{self.panel.value}-screen.{fmt.lower()}"
