"""Time's-up side effects: the alert sound and the acknowledgment dialog.

``TimerWidget`` only talks to the ``Notifier`` protocol, so tests (or a
headless host) can swap in anything with the same two methods.
"""

from __future__ import annotations

from typing import Protocol

from PyQt6.QtCore import Qt
from PyQt6.QtWidgets import QMessageBox, QWidget

from ..audio.sounds import SoundManager


def expiry_message(label: str) -> str:
    return f"End of the {label} timer"


class Notifier(Protocol):
    def play_alert(self) -> None: ...

    def show_expiry_dialog(self, label: str) -> None: ...


class QtNotifier:
    """Plays the ``alert`` sound and shows a modal message box."""

    def __init__(self, sounds: SoundManager, parent: QWidget | None = None) -> None:
        self._sounds = sounds
        self._parent = parent
        self._box: QMessageBox | None = None

    def play_alert(self) -> None:
        self._sounds.play("alert")

    def show_expiry_dialog(self, label: str) -> None:
        box = QMessageBox(self._parent)
        box.setIcon(QMessageBox.Icon.Information)
        box.setWindowTitle("SimpleTimer")
        box.setText(expiry_message(label))
        box.setStandardButtons(QMessageBox.StandardButton.Ok)
        box.setAttribute(Qt.WidgetAttribute.WA_DeleteOnClose)
        self._box = box
        # open() rather than exec(): the ticker keeps running underneath
        box.open()
