from PySide6.QtWidgets import (QGroupBox, QVBoxLayout, QHBoxLayout, QFormLayout,
                               QLineEdit, QTimeEdit, QPushButton, QButtonGroup)
from PySide6.QtCore import QTime, Signal

from istatsim.core.enums import PanelType
from istatsim.core.state import SimulationInput
from .styles import (
    COLORS,
    STYLE_GROUPBOX,
    STYLE_LINEEDIT,
    get_button_style,
    get_toggle_button_style,
)

# Input field -> form label
INPUT_LABELS = {
    "blood_loss": "Blodförlust (ml)",
    "time_since_injury": "Tid sedan skada",
    "lung_function": "Lungfunktion (%)",
    "transfused_blood": "Transfunderat blod (ml)",
    "transfused_plasma": "Transfunderad plasma (ml)",
    "body_weight": "Kroppsvikt (kg)",
}

TIME_FORMAT = "HH:mm"

EDIT_OFF_TEXT = "Redigera Värden"
EDIT_ON_TEXT = "Lås Redigering"


class InputFormWidget(QGroupBox):
    """Injury inputs plus the generate / panel / edit / export actions."""
    input_changed = Signal(str, object)
    generate_requested = Signal()
    panel_selected = Signal(object)
    edit_toggled = Signal(bool)
    export_requested = Signal(str)

    def __init__(self, inputs: SimulationInput = None, panel: PanelType = PanelType.CG8):
        super().__init__("Simulera Blodgas")
        self.setStyleSheet(STYLE_GROUPBOX + STYLE_LINEEDIT)
        self.editors = {}
        self.panel_buttons = {}
        self.init_ui(inputs or SimulationInput(), panel)

    def init_ui(self, inputs, panel):
        layout = QVBoxLayout(self)
        layout.setSpacing(10)
        layout.setContentsMargins(12, 18, 12, 12)

        form = QFormLayout()
        form.setSpacing(8)
        for name in SimulationInput.field_names():
            value = getattr(inputs, name)
            if name == "time_since_injury":
                editor = QTimeEdit()
                editor.setDisplayFormat(TIME_FORMAT)
                editor.setTime(QTime.fromString(str(value), TIME_FORMAT))
                editor.timeChanged.connect(
                    lambda t, n=name: self.input_changed.emit(n, t.toString(TIME_FORMAT))
                )
            else:
                editor = QLineEdit(str(value))
                editor.textChanged.connect(
                    lambda text, n=name: self.input_changed.emit(n, text)
                )
            form.addRow(INPUT_LABELS[name], editor)
            self.editors[name] = editor
        layout.addLayout(form)

        self.btn_generate = QPushButton("Generera Blodgas")
        self.btn_generate.setStyleSheet(get_button_style(variant="primary", padding="8px 20px"))
        self.btn_generate.clicked.connect(self.generate_requested)
        layout.addWidget(self.btn_generate)

        # Panel select + edit toggle
        row = QHBoxLayout()
        row.setSpacing(8)
        self.panel_group = QButtonGroup(self)
        self.panel_group.setExclusive(True)
        for p in PanelType:
            btn = QPushButton(f"Visa {p.label}")
            btn.setCheckable(True)
            btn.setChecked(p == panel)
            btn.setStyleSheet(get_toggle_button_style(COLORS['primary']))
            btn.clicked.connect(lambda checked=False, p=p: self.panel_selected.emit(p))
            self.panel_group.addButton(btn)
            self.panel_buttons[p] = btn
            row.addWidget(btn)

        self.btn_edit = QPushButton(EDIT_OFF_TEXT)
        self.btn_edit.setCheckable(True)
        self.btn_edit.setStyleSheet(get_toggle_button_style(COLORS['warning']))
        self.btn_edit.toggled.connect(self._on_edit_toggled)
        row.addWidget(self.btn_edit)
        row.addStretch()
        layout.addLayout(row)

        # Export
        exp_row = QHBoxLayout()
        exp_row.setSpacing(8)
        self.btn_export_png = QPushButton("Exportera PNG")
        self.btn_export_png.setStyleSheet(get_button_style())
        self.btn_export_png.clicked.connect(lambda: self.export_requested.emit("png"))
        exp_row.addWidget(self.btn_export_png)

        self.btn_export_pdf = QPushButton("Exportera PDF")
        self.btn_export_pdf.setStyleSheet(get_button_style())
        self.btn_export_pdf.clicked.connect(lambda: self.export_requested.emit("pdf"))
        exp_row.addWidget(self.btn_export_pdf)
        exp_row.addStretch()
        layout.addLayout(exp_row)

    def _on_edit_toggled(self, checked: bool):
        self.btn_edit.setText(EDIT_ON_TEXT if checked else EDIT_OFF_TEXT)
        self.edit_toggled.emit(checked)

    def set_exports_enabled(self, enabled: bool):
        self.btn_export_png.setEnabled(enabled)
        self.btn_export_pdf.setEnabled(enabled)
