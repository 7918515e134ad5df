from PySide6.QtWidgets import QFrame, QHBoxLayout, QVBoxLayout, QLabel, QLineEdit
from PySide6.QtCore import Qt, Signal

from istatsim.core.state import ReadoutField
from .styles import FONTS, get_lineedit_style, get_screen_row_style, get_screen_style


class ReadoutRow(QFrame):
    """
    One analyzer line: field name on the left, value and unit on the right.
    In edit mode the value becomes a free-text editor.
    """
    edited = Signal(str, str)

    def __init__(self, readout: ReadoutField, editable=False):
        super().__init__()
        self.name = readout.name
        self.editable = editable
        self.setObjectName("readoutRow")
        self.setStyleSheet(get_screen_row_style())

        layout = QHBoxLayout(self)
        layout.setContentsMargins(0, 4, 0, 4)

        self.lbl_name = QLabel(readout.name)
        layout.addWidget(self.lbl_name)
        layout.addStretch()

        if editable:
            self.editor = QLineEdit(readout.value)
            self.editor.setAlignment(Qt.AlignRight)
            self.editor.setStyleSheet(get_lineedit_style(on_screen=True))
            # textEdited fires for user input only, not setText()
            self.editor.textEdited.connect(lambda text: self.edited.emit(self.name, text))
            layout.addWidget(self.editor)
            self.lbl_value = None
        else:
            self.editor = None
            self.lbl_value = QLabel(readout.display_text())
            self.lbl_value.setAlignment(Qt.AlignRight)
            layout.addWidget(self.lbl_value)

    def text(self) -> str:
        if self.editor is not None:
            return self.editor.text()
        return self.lbl_value.text()


class ReadoutPanel(QFrame):
    """The simulated analyzer screen. Hidden until readouts exist."""
    value_edited = Signal(str, str)

    def __init__(self):
        super().__init__()
        self.setObjectName("readoutScreen")
        self.setStyleSheet(get_screen_style())
        self.setMaximumWidth(448)
        self.rows = {}

        self.layout = QVBoxLayout(self)
        self.layout.setContentsMargins(16, 16, 16, 16)
        self.layout.setSpacing(4)

        self.lbl_title = QLabel("")
        self.lbl_title.setStyleSheet(
            f"font-size: {FONTS['size_screen_title']}; font-weight: 700;"
        )
        self.layout.addWidget(self.lbl_title)

        self.rows_layout = QVBoxLayout()
        self.rows_layout.setSpacing(0)
        self.layout.addLayout(self.rows_layout)

        self.setVisible(False)

    def update_view(self, state):
        """Rebuild rows from the view state (panel, edit mode, readouts)."""
        self._clear_rows()
        if not state.has_results:
            self.setVisible(False)
            return

        self.lbl_title.setText(f"i-STAT {state.panel.label} Skärm")
        for readout in state.visible_fields():
            row = ReadoutRow(readout, editable=state.edit_mode)
            row.edited.connect(self.value_edited)
            self.rows_layout.addWidget(row)
            self.rows[readout.name] = row
        self.setVisible(True)

    def _clear_rows(self):
        while self.rows_layout.count():
            item = self.rows_layout.takeAt(0)
            w = item.widget()
            if w is not None:
                w.setParent(None)
                w.deleteLater()
        self.rows = {}
