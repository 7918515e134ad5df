from enum import Enum


class PanelType(Enum):
    """Analyzer cartridge types"""
    CG8 = "cg8"
    CG4 = "cg4"

    @property
    def fields(self):
        return PANEL_FIELDS[self]

    @property
    def label(self):
        return self.value.upper()

    @classmethod
    def from_name(cls, name):
        """Look up a panel by value ("cg4") or name ("CG4")."""
        if isinstance(name, cls):
            return name
        for p in cls:
            if p.value == str(name).lower():
                return p
        raise ValueError(f"Unknown panel type: {name}")


PANEL_FIELDS = {
    PanelType.CG8: (
        "pH", "pCO2", "pO2", "Na", "K", "iCa", "Glukos",
        "Laktat", "Hct", "Hb", "BE", "HCO3", "SO2",
    ),
    PanelType.CG4: ("pH", "pCO2", "pO2", "Laktat", "BE", "HCO3"),
}
