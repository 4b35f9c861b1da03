"""
Log Row Widget
"""
from typing import Optional

from PySide6.QtCore import Signal, Qt
from PySide6.QtWidgets import (
    QWidget, QGroupBox, QGridLayout, QHBoxLayout, QVBoxLayout,
    QLabel, QLineEdit, QComboBox, QPushButton
)

from ghanfoot.config import LENGTH_UNIT_CHOICES, CIRCUMFERENCE_UNIT_CHOICES
from ghanfoot.model.state import LogEntry
from ghanfoot.model.volume import VolumeResult
from ghanfoot.utils import is_blank, to_fixed


def format_row_volume(result: VolumeResult) -> str:
    """Text of the per-log read-out, e.g. '0.06 m³'."""
    if is_blank(result.individual):
        return "0.00 m³"
    return f"{to_fixed(result.individual, 2)} m³"


class LogRowWidget(QWidget):
    """
    Inputs for one log: length + unit, circumference + unit and the volume.
    The widget does not touch the model; it only reports edits via signals.
    """
    # (row index, field name, new value)
    field_changed = Signal(int, str, str)
    remove_requested = Signal(int)

    def __init__(self, index: int, entry: LogEntry, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        self.index = index

        outer = QVBoxLayout(self)
        outer.setContentsMargins(0, 0, 0, 0)

        box = QGroupBox(self)
        outer.addWidget(box)
        grid = QGridLayout(box)
        grid.setVerticalSpacing(6)

        # --- Header: "Log #n" + remove button ---
        header = QHBoxLayout()
        self.title_label = QLabel(f"Log #{index + 1}", box)
        self.title_label.setStyleSheet("font-weight: bold;")
        header.addWidget(self.title_label)
        header.addStretch()

        # The first row can never be removed
        self.btn_remove: Optional[QPushButton] = None
        if index > 0:
            self.btn_remove = QPushButton("×", box)
            self.btn_remove.setToolTip("Remove log")
            self.btn_remove.setFixedWidth(28)
            self.btn_remove.clicked.connect(lambda: self.remove_requested.emit(self.index))
            header.addWidget(self.btn_remove)
        grid.addLayout(header, 0, 0, 1, 3)

        # --- Length ---
        grid.addWidget(QLabel("Length (લંબાઈ)", box), 1, 0)
        self.edit_length = QLineEdit(entry.length, box)
        self.edit_length.setPlaceholderText("0.00")
        self.combo_length_unit = self._make_unit_combo(LENGTH_UNIT_CHOICES, entry.length_unit, box)
        grid.addWidget(self.edit_length, 2, 0)
        grid.addWidget(self.combo_length_unit, 2, 1)

        # --- Circumference ---
        grid.addWidget(QLabel("Circumference (ઘેરાવ)", box), 3, 0)
        self.edit_circumference = QLineEdit(entry.circumference, box)
        self.edit_circumference.setPlaceholderText("0.0")
        self.combo_circumference_unit = self._make_unit_combo(
            CIRCUMFERENCE_UNIT_CHOICES, entry.circumference_unit, box
        )
        grid.addWidget(self.edit_circumference, 4, 0)
        grid.addWidget(self.combo_circumference_unit, 4, 1)

        # --- Result ---
        grid.addWidget(QLabel("Volume (ઘનમીટર)", box), 1, 2)
        self.lbl_volume = QLabel("0.00 m³", box)
        self.lbl_volume.setAlignment(Qt.AlignCenter)
        grid.addWidget(self.lbl_volume, 2, 2)

        # --- Connections ---
        self.edit_length.textChanged.connect(lambda text: self._emit("length", text))
        self.edit_circumference.textChanged.connect(lambda text: self._emit("circumference", text))
        self.combo_length_unit.currentIndexChanged.connect(
            lambda _: self._emit("length_unit", self.combo_length_unit.currentData())
        )
        self.combo_circumference_unit.currentIndexChanged.connect(
            lambda _: self._emit("circumference_unit", self.combo_circumference_unit.currentData())
        )

    @staticmethod
    def _make_unit_combo(choices, current: str, parent: QWidget) -> QComboBox:
        combo = QComboBox(parent)
        for unit in choices:
            combo.addItem(str(unit), userData=str(unit))
        idx = combo.findData(str(current))
        if idx < 0:
            # Tag not offered by the selector: list it so combo and model agree
            combo.addItem(str(current), userData=str(current))
            idx = combo.count() - 1
        combo.setCurrentIndex(idx)
        return combo

    def _emit(self, field: str, value: str) -> None:
        self.field_changed.emit(self.index, field, value)

    def set_volume(self, result: VolumeResult) -> None:
        self.lbl_volume.setText(format_row_volume(result))
