"""
Blood-gas readout derivation.

Maps injury severity (blood loss relative to estimated blood volume, lung
function, transfusions) to a full CG8 analyzer readout using closed-form
linear relations around healthy baselines.
"""

import numpy as np

from .constants import (
    BLOOD_VOLUME_ML_PER_KG,
    TRANSFUSION_UNIT_ML,
    READOUT_FIELDS,
    BASELINE_PH,
    BASELINE_PCO2_KPA,
    BASELINE_PO2_KPA,
    BASELINE_NA,
    BASELINE_K,
    BASELINE_ICA,
    BASELINE_GLUCOSE,
    BASELINE_LACTATE,
    BASELINE_HCT,
    BASELINE_HB_G_DL,
    BASELINE_HCO3,
    BASELINE_SO2,
)
from .state import SimulationInput, ReadoutField, ReadoutSet
from .units import to_number, format_fixed


def blood_loss_fraction(blood_loss, body_weight) -> float:
    """Fraction of estimated blood volume lost, clamped to [0, 1]. NaN propagates."""
    with np.errstate(divide="ignore", invalid="ignore"):
        ebv = np.float64(to_number(body_weight)) * BLOOD_VOLUME_ML_PER_KG
        frac = np.divide(np.float64(to_number(blood_loss)), ebv)
    return float(np.clip(frac, 0.0, 1.0))


def lung_factor(lung_function) -> float:
    """Respiratory impairment: 0 for normal lungs, 1 for no function."""
    return 1.0 - to_number(lung_function) / 100.0


def derive_values(inp: SimulationInput) -> dict:
    """Unrounded analyzer values keyed by field name."""
    f = blood_loss_fraction(inp.blood_loss, inp.body_weight)
    lf = lung_factor(inp.lung_function)
    transfused = to_number(inp.transfused_blood)

    return {
        "pH": BASELINE_PH - 0.1 * f,
        "pCO2": BASELINE_PCO2_KPA + 0.5 * lf,
        "pO2": BASELINE_PO2_KPA - 4 * lf,
        "Na": BASELINE_NA,
        "K": BASELINE_K + 0.3 * f,
        "iCa": BASELINE_ICA - 0.05 * f,
        "Glukos": BASELINE_GLUCOSE,
        "Laktat": BASELINE_LACTATE + 5 * f,
        "Hct": BASELINE_HCT - 15 * f + 5 * transfused / TRANSFUSION_UNIT_ML,
        # g/dL -> g/L
        "Hb": (BASELINE_HB_G_DL - 5 * f + 2 * transfused / TRANSFUSION_UNIT_ML) * 10,
        "BE": -7 * f,
        "HCO3": BASELINE_HCO3 - 6 * f,
        "SO2": BASELINE_SO2 - 10 * lf,
    }


def derive(inp: SimulationInput) -> ReadoutSet:
    """Compute the complete 13-field readout set as display strings."""
    values = derive_values(inp)
    readouts = {}
    for name, (unit, decimals) in READOUT_FIELDS.items():
        readouts[name] = ReadoutField(
            name=name,
            value=format_fixed(values[name], decimals),
            unit=unit,
        )
    return readouts
