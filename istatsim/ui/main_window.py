import logging
import sys
from PySide6.QtWidgets import (
    QApplication,
    QMainWindow,
    QWidget,
    QHBoxLayout,
    QVBoxLayout,
    QLabel,
    QScrollArea,
)
from PySide6.QtCore import Qt

from istatsim.core.state import SimulatorConfig
from istatsim.core.view_state import ViewState
from istatsim.ui.input_form import InputFormWidget
from istatsim.ui.readout_widget import ReadoutPanel
from istatsim.ui.export import schedule_export
from istatsim.ui.styles import COLORS, FONTS, get_base_widget_style


class MainWindow(QMainWindow):
    """Trainer window: input form on top, analyzer screen below."""
    def __init__(self, config: SimulatorConfig = None):
        super().__init__()
        self.config = config or SimulatorConfig()
        self.setWindowTitle(self.config.window_title)
        self.resize(640, 900)

        self.setStyleSheet(get_base_widget_style())

        self.state = ViewState(panel=self.config.default_panel)
        self.setup_ui()
        self.refresh()

    def setup_ui(self):
        scroll = QScrollArea()
        scroll.setWidgetResizable(True)
        scroll.setStyleSheet("QScrollArea { border: none; }")
        self.setCentralWidget(scroll)

        central = QWidget()
        scroll.setWidget(central)
        layout = QVBoxLayout(central)
        layout.setContentsMargins(16, 16, 16, 16)
        layout.setSpacing(16)

        self.form = InputFormWidget(self.state.inputs, self.state.panel)
        self.form.input_changed.connect(self.state.set_input)
        self.form.generate_requested.connect(self.on_generate)
        self.form.panel_selected.connect(self.on_panel_selected)
        self.form.edit_toggled.connect(self.on_edit_toggled)
        self.form.export_requested.connect(self.on_export)
        layout.addWidget(self.form)

        # Center the analyzer screen
        screen_row = QHBoxLayout()
        screen_row.addStretch()
        self.panel = ReadoutPanel()
        self.panel.value_edited.connect(self.state.edit_field)
        screen_row.addWidget(self.panel)
        screen_row.addStretch()
        layout.addLayout(screen_row)

        self.lbl_status = QLabel("")
        self.lbl_status.setAlignment(Qt.AlignCenter)
        self.lbl_status.setStyleSheet(
            f"color: {COLORS['text_dim']}; font-size: {FONTS['size_small']};"
        )
        layout.addWidget(self.lbl_status)
        layout.addStretch()

    def refresh(self):
        self.panel.update_view(self.state)
        self.form.set_exports_enabled(self.state.has_results)

    def on_generate(self):
        self.state.generate()
        self.refresh()

    def on_panel_selected(self, panel):
        self.state.select_panel(panel)
        self.refresh()

    def on_edit_toggled(self, checked: bool):
        if checked != self.state.edit_mode:
            self.state.toggle_edit()
        self.refresh()

    def on_export(self, fmt: str):
        filename = self.state.export_filename(fmt)
        schedule_export(self.panel, filename, fmt, self.config, on_done=self._export_finished)

    def _export_finished(self, path):
        if path is not None:
            self.lbl_status.setText(f"Sparad: {path}")


def main():
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(name)s %(levelname)s: %(message)s")
    app = QApplication.instance()
    if not app:
        app = QApplication(sys.argv)
    window = MainWindow()
    window.show()
    sys.exit(app.exec())

if __name__ == "__main__":
    main()
