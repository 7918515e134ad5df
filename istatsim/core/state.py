from dataclasses import dataclass, fields
from typing import Dict, Union

from .enums import PanelType

# Raw form value: numbers from code/tests, strings from the UI.
InputValue = Union[float, int, str]


@dataclass
class SimulatorConfig:
    """Runtime settings for the trainer window and export."""
    export_dir: str = "."
    export_scale: float = 2.0      # Rasterization scale for PNG/PDF
    capture_delay_ms: int = 100    # Let pending repaints settle before capture
    window_title: str = "i-STAT Simulator"
    default_panel: PanelType = PanelType.CG8


@dataclass
class SimulationInput:
    """
    Injury severity inputs as entered on the form.
    Values are not validated; strings are coerced at derivation time.
    """
    blood_loss: InputValue = 0              # mL
    time_since_injury: str = "00:00"        # HH:MM, informational only
    lung_function: InputValue = 100         # % of normal
    transfused_blood: InputValue = 0        # mL
    transfused_plasma: InputValue = 0       # mL, informational only
    body_weight: InputValue = 70            # kg

    @classmethod
    def field_names(cls):
        return tuple(f.name for f in fields(cls))


@dataclass
class ReadoutField:
    """One analyzer line. `value` is display text and may be hand-edited."""
    name: str
    value: str
    unit: str = ""

    def display_text(self) -> str:
        return f"{self.value} {self.unit}".rstrip()


# Field name -> ReadoutField, always all 13 analyzer fields.
ReadoutSet = Dict[str, ReadoutField]
