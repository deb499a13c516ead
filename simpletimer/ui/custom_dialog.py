"""Custom duration sheet.

A small modal dialog with a single ``HH:MM`` field.  OK stays disabled
until the trimmed text is a valid duration, so an accepted dialog always
carries something ``TimerEngine.set_custom_duration`` will take.
"""

from __future__ import annotations

from PyQt6.QtCore import Qt
from PyQt6.QtWidgets import (
    QDialog, QVBoxLayout, QHBoxLayout,
    QLabel, QLineEdit, QPushButton, QWidget,
)

from ..timer.durations import is_valid_hhmm


class CustomDurationDialog(QDialog):
    """Modal prompt for a free-text ``HH:MM`` duration."""

    def __init__(self, parent: QWidget | None = None, *, initial: str = "") -> None:
        super().__init__(parent)
        self.setWindowTitle("Custom duration")
        self.setFixedWidth(360)
        self.setModal(True)

        self._build_ui()
        self._input.setText(initial)
        self._on_text_changed(initial)

    # ══════════════════════════════════════════════════════════════════
    #  BUILD UI
    # ══════════════════════════════════════════════════════════════════

    def _build_ui(self) -> None:
        root = QVBoxLayout(self)
        root.setContentsMargins(20, 20, 20, 20)
        root.setSpacing(14)

        prompt = QLabel("Enter the value, format HH:MM")
        prompt.setStyleSheet("font-weight: 600;")
        prompt.setAlignment(Qt.AlignmentFlag.AlignCenter)
        root.addWidget(prompt)

        self._input = QLineEdit()
        self._input.setPlaceholderText("HH:MM")
        self._input.setMaxLength(16)
        self._input.textChanged.connect(self._on_text_changed)
        root.addWidget(self._input)

        btn_row = QHBoxLayout()
        btn_row.addStretch()

        self._cancel_btn = QPushButton("Cancel")
        self._cancel_btn.setAutoDefault(False)
        self._cancel_btn.clicked.connect(self.reject)
        btn_row.addWidget(self._cancel_btn)

        self._ok_btn = QPushButton("OK")
        self._ok_btn.setObjectName("primaryButton")
        self._ok_btn.setDefault(True)
        self._ok_btn.clicked.connect(self.accept)
        btn_row.addWidget(self._ok_btn)

        root.addLayout(btn_row)

    # ══════════════════════════════════════════════════════════════════
    #  HANDLERS
    # ══════════════════════════════════════════════════════════════════

    def _on_text_changed(self, text: str) -> None:
        self._ok_btn.setEnabled(is_valid_hhmm(text))

    def accept(self) -> None:
        # Enter in the line edit bypasses the disabled OK button
        if not self.is_valid:
            return
        super().accept()

    # ══════════════════════════════════════════════════════════════════
    #  PUBLIC
    # ══════════════════════════════════════════════════════════════════

    @property
    def text(self) -> str:
        """The entered duration with surrounding whitespace removed."""
        return self._input.text().strip()

    @property
    def is_valid(self) -> bool:
        return is_valid_hhmm(self._input.text())
