"""
Main Application Window
=======================
The primary GUI container: the list of log rows, the action buttons and the
footer with the total.

Why is this file needed?
------------------------
1. Layout: It organizes the high-level visual structure of the form.
2. Routing: It forwards edits from the row widgets into the LogBook and
   re-renders the affected read-outs afterwards.
"""
import logging
from typing import Optional

from PySide6.QtCore import Qt
from PySide6.QtWidgets import (
    QMainWindow, QWidget, QVBoxLayout, QHBoxLayout, QScrollArea,
    QPushButton, QLabel
)

from ghanfoot.config import VISIBLE_APP_NAME, WINDOW_SIZE
from ghanfoot.model.state import LogBook
from ghanfoot.view.widgets.log_row import LogRowWidget

logger = logging.getLogger(__name__)


class MainWindow(QMainWindow):
    def __init__(self, log_book: LogBook, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        self.log_book: LogBook = log_book
        self.rows: list[LogRowWidget] = []

        self.setWindowTitle(VISIBLE_APP_NAME)
        self.resize(*WINDOW_SIZE)

        # --- MAIN CONTAINER ---
        main_widget = QWidget()
        self.setCentralWidget(main_widget)
        main_layout = QVBoxLayout(main_widget)

        header = QLabel(VISIBLE_APP_NAME)
        header.setAlignment(Qt.AlignCenter)
        header.setStyleSheet("font-size: 20px; font-weight: bold;")
        main_layout.addWidget(header)

        # --- 1. ROWS (SCROLLABLE) ---
        scroll = QScrollArea()
        scroll.setWidgetResizable(True)
        rows_container = QWidget()
        self.rows_layout = QVBoxLayout(rows_container)
        self.rows_layout.addStretch()
        scroll.setWidget(rows_container)
        main_layout.addWidget(scroll, 1)

        # --- 2. ACTION BUTTONS ---
        buttons = QHBoxLayout()
        self.btn_add = QPushButton("+ Add Log")
        self.btn_add.clicked.connect(self.on_add_log)
        self.btn_reset = QPushButton("Reset All")
        self.btn_reset.clicked.connect(self.on_reset)
        buttons.addWidget(self.btn_add)
        buttons.addWidget(self.btn_reset)
        main_layout.addLayout(buttons)

        # --- 3. FOOTER ---
        self.lbl_total = QLabel()
        self.lbl_total.setAlignment(Qt.AlignCenter)
        self.lbl_total.setStyleSheet("font-size: 16px; font-weight: bold;")
        main_layout.addWidget(self.lbl_total)

        self.rebuild_rows()

    # --- HELPER METHODS ---
    def rebuild_rows(self) -> None:
        """Recreate one row widget per entry of the log book."""
        for row in self.rows:
            self.rows_layout.removeWidget(row)
            row.deleteLater()
        self.rows = []

        for index, entry in enumerate(self.log_book):
            row = LogRowWidget(index, entry)
            row.field_changed.connect(self.on_field_changed)
            row.remove_requested.connect(self.on_remove_log)
            row.set_volume(self.log_book.volume_of(index))
            # Keep the stretch as the last item
            self.rows_layout.insertWidget(self.rows_layout.count() - 1, row)
            self.rows.append(row)

        self.update_total()

    def update_total(self) -> None:
        self.lbl_total.setText(f"Total (ઘનફૂટ): {self.log_book.total()} ft³")

    # --- SLOTS ---
    def on_field_changed(self, index: int, field: str, value: str) -> None:
        """Slot called on every keystroke / unit change of a row."""
        self.log_book.update_log(index, field, value)
        self.rows[index].set_volume(self.log_book.volume_of(index))
        self.update_total()

    def on_add_log(self) -> None:
        index = self.log_book.add_log()
        logger.info(f"Log #{index + 1} added.")
        self.rebuild_rows()

    def on_remove_log(self, index: int) -> None:
        if self.log_book.remove_log(index):
            logger.info(f"Log #{index + 1} removed.")
            self.rebuild_rows()

    def on_reset(self) -> None:
        self.log_book.reset()
        self.rebuild_rows()
