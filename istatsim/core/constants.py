"""
Analyzer field table and physiological constants used by the deriver.
"""

# Circulating blood volume per kg body weight (mL/kg), adult estimate.
BLOOD_VOLUME_ML_PER_KG = 70.0

# Volume of one transfused unit (mL).
TRANSFUSION_UNIT_ML = 500.0

# Field name -> (unit, decimals). decimals=None keeps the value as printed.
READOUT_FIELDS = {
    "pH": ("", 2),
    "pCO2": ("kPa", 1),
    "pO2": ("kPa", 1),
    "Na": ("mmol/L", 0),
    "K": ("mmol/L", 1),
    "iCa": ("mmol/L", 2),
    "Glukos": ("mmol/L", None),
    "Laktat": ("mmol/L", 1),
    "Hct": ("%", 0),
    "Hb": ("g/L", 0),
    "BE": ("mmol/L", 1),
    "HCO3": ("mmol/L", 1),
    "SO2": ("%", 0),
}

FIELD_NAMES = tuple(READOUT_FIELDS)

# Baseline (healthy) analyzer values
BASELINE_PH = 7.4
BASELINE_PCO2_KPA = 5.3
BASELINE_PO2_KPA = 12.0
BASELINE_NA = 138
BASELINE_K = 4.0
BASELINE_ICA = 1.15
BASELINE_GLUCOSE = 6.2
BASELINE_LACTATE = 1.0
BASELINE_HCT = 40.0
BASELINE_HB_G_DL = 13.5
BASELINE_HCO3 = 24.0
BASELINE_SO2 = 98.0
