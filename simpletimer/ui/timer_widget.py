"""Main timer display widget.

Layout (top → bottom):
    - Controls row: duration picker + Start (idle) or Reset (running)
    - Status line
    - Divider
    - Large ``HH:MM`` readout (minute-quantized while running)
    - 1 px progress line
"""

from __future__ import annotations

from PyQt6.QtCore import Qt
from PyQt6.QtWidgets import (
    QWidget, QVBoxLayout, QHBoxLayout,
    QLabel, QPushButton, QComboBox, QFrame,
)

from ..timer.durations import PRESETS, CUSTOM_CHOICE, hhmm_to_seconds, seconds_to_hhmm
from ..timer.engine import TimerEngine, TimerPhase
from ..timer.errors import InvalidFormat, NothingToStart
from .custom_dialog import CustomDurationDialog
from .notifier import Notifier
from .progress_line import ProgressLine


# ── status messages ──────────────────────────────────────────────────────

STATUS_WELCOME = "Select a duration and press Start."
STATUS_PRESET = "Duration selected. Press Start when ready."
STATUS_CUSTOM = "Custom duration set. Press Start when ready."
STATUS_RUNNING = "Timer running…"
STATUS_RESET = "Timer reset."
STATUS_TIMES_UP = "Time's up!"

LAST_MINUTE = 60


def status_for_remaining(remaining: int) -> str:
    """Status line while running: exact seconds only in the last minute."""
    if remaining <= LAST_MINUTE:
        return f"Timer running, last minute remaining: {remaining}"
    return STATUS_RUNNING


class TimerWidget(QWidget):
    """Controls, readout, and progress for a single ``TimerEngine``."""

    def __init__(
        self,
        engine: TimerEngine,
        notifier: Notifier,
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self._engine = engine
        self._notifier = notifier
        self._custom_selected = False
        self._build_ui()
        self._connect_signals()
        self._sync_picker()
        self._status.setText(STATUS_WELCOME)
        self._on_state_changed(engine.phase)

    # ── build ─────────────────────────────────────────────────────────────

    def _build_ui(self) -> None:
        root = QVBoxLayout(self)
        root.setContentsMargins(20, 20, 20, 20)
        root.setSpacing(16)

        # ── controls row ─────────────────────────────────────────────
        controls = QHBoxLayout()
        controls.setSpacing(12)
        controls.setAlignment(Qt.AlignmentFlag.AlignCenter)

        picker_label = QLabel("How long?", self)
        controls.addWidget(picker_label)

        self._picker = QComboBox(self)
        self._picker.addItems([*PRESETS, CUSTOM_CHOICE])
        self._picker.setFixedWidth(120)
        picker_label.setBuddy(self._picker)
        controls.addWidget(self._picker)

        self._start_btn = QPushButton("Start", self)
        self._start_btn.setObjectName("primaryButton")
        controls.addWidget(self._start_btn)

        self._reset_btn = QPushButton("Reset", self)
        controls.addWidget(self._reset_btn)

        root.addLayout(controls)

        # ── status line ──────────────────────────────────────────────
        self._status = QLabel("", self)
        self._status.setObjectName("statusLabel")
        self._status.setAlignment(Qt.AlignmentFlag.AlignCenter)
        root.addWidget(self._status)

        divider = QFrame(self)
        divider.setObjectName("divider")
        divider.setFrameShape(QFrame.Shape.HLine)
        divider.setFixedHeight(1)
        root.addWidget(divider)

        # ── readout ──────────────────────────────────────────────────
        self._time_label = QLabel("00:00", self)
        self._time_label.setObjectName("timeLabel")
        self._time_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        root.addWidget(self._time_label)

        self._progress = ProgressLine(self)
        root.addWidget(self._progress)

    # ── signals ───────────────────────────────────────────────────────────

    def _connect_signals(self) -> None:
        self._picker.textActivated.connect(self._on_picker_activated)
        self._start_btn.clicked.connect(self.start)
        self._reset_btn.clicked.connect(self.reset)

        self._engine.ticked.connect(self._on_ticked)
        self._engine.expired.connect(self._on_expired)
        self._engine.state_changed.connect(self._on_state_changed)

    # ══════════════════════════════════════════════════════════════════
    #  ACTIONS
    # ══════════════════════════════════════════════════════════════════

    def start(self) -> None:
        if self._engine.is_running:
            return
        try:
            self._engine.start()
        except NothingToStart:
            self._notify_expiry(self._engine.label)
            return
        self._status.setText(STATUS_RUNNING)

    def reset(self) -> None:
        self._engine.reset()
        self._status.setText(STATUS_RESET)

    def select_preset(self, label: str) -> None:
        self._engine.select_preset(hhmm_to_seconds(label), label)
        self._custom_selected = False
        self._sync_picker()
        self._status.setText(STATUS_PRESET)

    def confirm_custom(self, text: str) -> bool:
        """Apply a typed duration.  Returns False (and changes nothing)
        when the text is not a valid ``HH:MM``."""
        try:
            self._engine.set_custom_duration(text)
        except InvalidFormat:
            return False
        self._custom_selected = True
        self._sync_picker()
        self._status.setText(STATUS_CUSTOM)
        return True

    def cancel_custom(self) -> None:
        """Put the picker back on the last confirmed duration."""
        self._sync_picker()

    # ── slots ─────────────────────────────────────────────────────────────

    def _on_picker_activated(self, text: str) -> None:
        if text == CUSTOM_CHOICE:
            self._prompt_custom()
        elif text != self.selected_choice:
            self.select_preset(text)

    def _prompt_custom(self) -> None:
        dialog = CustomDurationDialog(self)
        if dialog.exec() and self.confirm_custom(dialog.text):
            return
        self.cancel_custom()

    def _on_ticked(self, remaining: int) -> None:
        self._status.setText(status_for_remaining(remaining))
        self.refresh_display()

    def _on_expired(self, label: str) -> None:
        self._status.setText(STATUS_TIMES_UP)
        self.refresh_display()
        self._notify_expiry(label)

    def _notify_expiry(self, label: str) -> None:
        self._notifier.play_alert()
        self._notifier.show_expiry_dialog(label)

    def _on_state_changed(self, phase: TimerPhase) -> None:
        running = phase == TimerPhase.RUNNING
        self._start_btn.setVisible(not running)
        self._reset_btn.setVisible(running)
        self._progress.apply_phase(phase)
        self.refresh_display()

    # ── display ───────────────────────────────────────────────────────────

    def refresh_display(self) -> None:
        self._time_label.setText(seconds_to_hhmm(self._engine.displayed_remaining()))
        self._progress.set_fraction(self._engine.progress)

    def _sync_picker(self) -> None:
        self._picker.setCurrentText(self.selected_choice)

    # ── read-only accessors ───────────────────────────────────────────────

    @property
    def selected_choice(self) -> str:
        """Picker entry for the confirmed duration: a preset, or Custom…
        for anything typed in (even text that matches a preset)."""
        label = self._engine.label
        if self._custom_selected or label not in PRESETS:
            return CUSTOM_CHOICE
        return label

    @property
    def status_text(self) -> str:
        return self._status.text()

    @property
    def time_text(self) -> str:
        return self._time_label.text()

    # ── theming ───────────────────────────────────────────────────────────

    def apply_palette(self, palette: dict[str, str]) -> None:
        self._progress.apply_palette(palette)
