"""Main application window for SimpleTimer."""

from __future__ import annotations

import logging

from PyQt6.QtCore import Qt, QTimer
from PyQt6.QtWidgets import QMainWindow

from .audio.sounds import SoundManager
from .settings import Settings, load_settings, save_settings
from .timer.durations import DEFAULT_LABEL, is_valid_hhmm
from .timer.engine import TimerEngine
from .ui.notifier import Notifier, QtNotifier
from .ui.styles import build_stylesheet, get_palette
from .ui.timer_widget import TimerWidget

logger = logging.getLogger(__name__)

TICK_INTERVAL_MS = 1000


def startup_label(settings: Settings) -> str:
    """The duration to preload: the last confirmed one, if still valid."""
    if isinstance(settings.last_label, str) and is_valid_hhmm(settings.last_label):
        return settings.last_label.strip()
    logger.warning("Stored duration %r is not HH:MM, using %s",
                   settings.last_label, DEFAULT_LABEL)
    return DEFAULT_LABEL


class SimpleTimerApp(QMainWindow):
    """Main application window.

    Owns the engine and the once-a-second ``QTimer`` that drives
    ``TimerEngine.tick``.
    """

    def __init__(
        self,
        settings: Settings | None = None,
        *,
        notifier: Notifier | None = None,
        sound_manager: SoundManager | None = None,
    ) -> None:
        super().__init__()
        self.setWindowTitle("SimpleTimer")

        # ── settings ──────────────────────────────────────────────────
        self._settings: Settings = settings if settings is not None else load_settings()

        # ── engine ────────────────────────────────────────────────────
        self._timer_engine = TimerEngine(self, label=startup_label(self._settings))

        # ── sound + notifier ──────────────────────────────────────────
        if notifier is None:
            if sound_manager is None:
                sound_manager = SoundManager(parent=self)
            sound_manager.set_volume(self._settings.sound_volume)
            sound_manager.set_enabled(self._settings.sound_enabled)
            notifier = QtNotifier(sound_manager, self)
        self._sound_manager = sound_manager
        self._notifier = notifier

        # ── theme ─────────────────────────────────────────────────────
        self._palette = get_palette()
        self.setStyleSheet(build_stylesheet(self._palette))

        # ── central widget ────────────────────────────────────────────
        self._timer_widget = TimerWidget(self._timer_engine, self._notifier, self)
        self._timer_widget.apply_palette(self._palette)
        self.setCentralWidget(self._timer_widget)

        # ── ticker ────────────────────────────────────────────────────
        self._ticker = QTimer(self)
        self._ticker.setInterval(TICK_INTERVAL_MS)
        self._ticker.timeout.connect(self._on_tick)
        self._ticker.start()

        self._restore_geometry()

    # ══════════════════════════════════════════════════════════════════
    #  PUBLIC
    # ══════════════════════════════════════════════════════════════════

    @property
    def engine(self) -> TimerEngine:
        return self._timer_engine

    @property
    def timer_widget(self) -> TimerWidget:
        return self._timer_widget

    @property
    def settings(self) -> Settings:
        return self._settings

    # ══════════════════════════════════════════════════════════════════
    #  TICK
    # ══════════════════════════════════════════════════════════════════

    def _on_tick(self) -> None:
        self._timer_engine.tick()
        # The readout is minute-quantized from the live clock, so repaint
        # it even when tick() was a no-op.
        self._timer_widget.refresh_display()

    # ══════════════════════════════════════════════════════════════════
    #  WINDOW
    # ══════════════════════════════════════════════════════════════════

    def _restore_geometry(self) -> None:
        s = self._settings
        self.resize(s.window_width, s.window_height)
        if s.window_x is not None and s.window_y is not None:
            self.move(s.window_x, s.window_y)
        if s.always_on_top:
            self.setWindowFlag(Qt.WindowType.WindowStaysOnTopHint, True)

    def _save_state(self) -> None:
        """Persist window geometry and the confirmed duration."""
        pos = self.pos()
        size = self.size()
        self._settings.window_x = pos.x()
        self._settings.window_y = pos.y()
        self._settings.window_width = size.width()
        self._settings.window_height = size.height()
        self._settings.last_label = self._timer_engine.label
        try:
            save_settings(self._settings)
        except OSError as exc:
            logger.warning("Could not save settings: %s", exc)

    def keyPressEvent(self, event) -> None:  # type: ignore[override]
        if event.key() in (Qt.Key.Key_Return, Qt.Key.Key_Enter):
            self._timer_widget.start()
            return
        super().keyPressEvent(event)

    def closeEvent(self, event) -> None:  # type: ignore[override]
        self._ticker.stop()
        self._save_state()
        super().closeEvent(event)
