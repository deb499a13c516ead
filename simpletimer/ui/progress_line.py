"""Thin horizontal progress line rendered with QPainter.

Sits under the time readout:
- A full-width 1 px track in the separator colour.
- A fill proportional to the time left, accent-coloured while running.
"""

from __future__ import annotations

from PyQt6.QtCore import QRectF
from PyQt6.QtGui import QColor, QPainter
from PyQt6.QtWidgets import QSizePolicy, QWidget

from ..timer.engine import TimerPhase
from .styles import PHASE_COLORS, DEFAULT_PALETTE


class ProgressLine(QWidget):
    """Custom-painted proportional bar."""

    LINE_HEIGHT = 1

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.setFixedHeight(self.LINE_HEIGHT)
        self.setSizePolicy(QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Fixed)

        self._fraction: float = 0.0
        self._phase: TimerPhase = TimerPhase.IDLE
        self._track_color = QColor(DEFAULT_PALETTE["separator"])
        self._phase_colors: dict[TimerPhase, str] = dict(PHASE_COLORS)

    # ══════════════════════════════════════════════════════════════════
    #  PUBLIC API
    # ══════════════════════════════════════════════════════════════════

    @property
    def fraction(self) -> float:
        return self._fraction

    @property
    def fill_color(self) -> QColor:
        return QColor(self._phase_colors.get(self._phase, DEFAULT_PALETTE["separator"]))

    def set_fraction(self, fraction: float) -> None:
        """Update the fill (clamped to 0..1)."""
        self._fraction = max(0.0, min(1.0, fraction))
        self.update()

    def apply_phase(self, phase: TimerPhase) -> None:
        self._phase = phase
        self.update()

    def apply_palette(self, palette: dict[str, str]) -> None:
        self._track_color = QColor(palette.get("separator", DEFAULT_PALETTE["separator"]))
        self._phase_colors[TimerPhase.RUNNING] = palette.get(
            "accent", PHASE_COLORS[TimerPhase.RUNNING]
        )
        self.update()

    # ══════════════════════════════════════════════════════════════════
    #  PAINTING
    # ══════════════════════════════════════════════════════════════════

    def paintEvent(self, event) -> None:  # type: ignore[override]
        p = QPainter(self)
        w = float(self.width())
        h = float(self.height())
        p.fillRect(QRectF(0, 0, w, h), self._track_color)
        if self._fraction > 0:
            p.fillRect(QRectF(0, 0, w * self._fraction, h), self.fill_color)
        p.end()
