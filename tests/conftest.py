from pathlib import Path
import os
import sys

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

# Widgets are exercised without a display
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest

from istatsim.core.state import SimulationInput
from istatsim.core.view_state import ViewState


@pytest.fixture
def healthy_input():
    """Default form values: 70 kg, no blood loss, normal lungs."""
    return SimulationInput()


@pytest.fixture
def exsanguinated_input():
    """Blood loss equal to the whole estimated blood volume of a 70 kg adult."""
    return SimulationInput(blood_loss=4900, body_weight=70)


@pytest.fixture
def generated_state():
    """View state with readouts already generated from defaults."""
    state = ViewState()
    state.generate()
    return state
