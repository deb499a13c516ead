"""Tests for the UI layer.

Covers:
- TimerWidget status line cadence, readout, buttons, and expiry path
- Picker / custom duration confirm and cancel
- CustomDurationDialog OK enablement
- ProgressLine clamping and colours
- SimpleTimerApp wiring, settings hand-off, and CLI parsing
"""

from __future__ import annotations

import json

import pytest
from PyQt6.QtCore import Qt
from PyQt6.QtWidgets import QDialog, QWidget

from simpletimer.timer.durations import CUSTOM_CHOICE, DEFAULT_LABEL
from simpletimer.timer.engine import TimerPhase
from simpletimer.ui.custom_dialog import CustomDurationDialog
from simpletimer.ui.notifier import QtNotifier, expiry_message
from simpletimer.ui.progress_line import ProgressLine
from simpletimer.ui.styles import PHASE_COLORS
from simpletimer.ui.timer_widget import (
    TimerWidget, status_for_remaining,
    STATUS_WELCOME, STATUS_PRESET, STATUS_CUSTOM,
    STATUS_RUNNING, STATUS_RESET, STATUS_TIMES_UP,
)
from simpletimer import settings as settings_mod
from simpletimer.app import startup_label
from simpletimer.audio.sounds import SoundManager
from simpletimer.settings import Settings, load_settings


@pytest.fixture
def widget(engine, notifier):
    return TimerWidget(engine, notifier)


# ═══════════════════════════════════════════════════════════════════════
#  STATUS TEXT
# ═══════════════════════════════════════════════════════════════════════


class TestStatusForRemaining:
    def test_generic_above_a_minute(self):
        assert status_for_remaining(61) == STATUS_RUNNING

    def test_exact_seconds_in_last_minute(self):
        assert status_for_remaining(60) == "Timer running, last minute remaining: 60"
        assert status_for_remaining(1) == "Timer running, last minute remaining: 1"


# ═══════════════════════════════════════════════════════════════════════
#  TIMER WIDGET
# ═══════════════════════════════════════════════════════════════════════


class TestTimerWidgetInitial:
    def test_welcome_status(self, widget):
        assert widget.status_text == STATUS_WELCOME

    def test_readout_shows_default(self, widget):
        assert widget.time_text == "01:00"

    def test_start_shown_reset_hidden(self, widget):
        assert not widget._start_btn.isHidden()
        assert widget._reset_btn.isHidden()

    def test_picker_on_default(self, widget):
        assert widget._picker.currentText() == DEFAULT_LABEL


class TestTimerWidgetSelection:
    def test_select_preset(self, widget, engine):
        widget.select_preset("00:15")
        assert engine.total_seconds == 15 * 60
        assert engine.label == "00:15"
        assert widget.status_text == STATUS_PRESET
        assert widget.time_text == "00:15"

    def test_picker_activation_selects_preset(self, widget, engine):
        widget._on_picker_activated("00:45")
        assert engine.label == "00:45"
        assert widget._picker.currentText() == "00:45"

    def test_repicking_current_preset_keeps_countdown(self, widget, engine, clock):
        widget.select_preset("00:15")
        widget.start()
        engine.tick(clock.advance(300))
        widget._on_picker_activated("00:15")
        assert engine.is_running
        assert engine.remaining_seconds == 600
        assert widget.status_text == STATUS_RUNNING

    def test_picking_another_preset_resets(self, widget, engine, clock):
        widget.select_preset("00:15")
        widget.start()
        engine.tick(clock.advance(300))
        widget._on_picker_activated("00:30")
        assert not engine.is_running
        assert engine.remaining_seconds == 30 * 60
        assert widget.status_text == STATUS_PRESET

    def test_custom_matching_preset_shows_custom_choice(self, widget, engine):
        assert widget.confirm_custom("00:15") is True
        assert engine.label == "00:15"
        assert widget.selected_choice == CUSTOM_CHOICE
        assert widget._picker.currentText() == CUSTOM_CHOICE

    def test_preset_after_matching_custom_is_selectable(self, widget, engine):
        widget.confirm_custom("00:15")
        widget._on_picker_activated("00:15")
        assert widget._picker.currentText() == "00:15"
        assert widget.status_text == STATUS_PRESET

    def test_confirm_custom(self, widget, engine):
        assert widget.confirm_custom("02:30") is True
        assert engine.total_seconds == 2 * 3600 + 30 * 60
        assert widget.status_text == STATUS_CUSTOM
        assert widget._picker.currentText() == CUSTOM_CHOICE
        assert widget.time_text == "02:30"

    def test_confirm_invalid_custom_changes_nothing(self, widget, engine):
        widget.select_preset("00:30")
        assert widget.confirm_custom("2:30") is False
        assert engine.label == "00:30"
        assert widget.status_text == STATUS_PRESET

    def test_cancel_custom_restores_picker(self, widget):
        widget.select_preset("00:30")
        widget._picker.setCurrentText(CUSTOM_CHOICE)
        widget.cancel_custom()
        assert widget._picker.currentText() == "00:30"


class TestTimerWidgetRunning:
    def test_start_updates_status_and_buttons(self, widget, engine):
        widget.start()
        assert engine.is_running
        assert widget.status_text == STATUS_RUNNING
        assert widget._start_btn.isHidden()
        assert not widget._reset_btn.isHidden()

    def test_two_cadences(self, widget, engine, clock):
        widget.confirm_custom("00:02")
        t0 = clock.now
        widget.start()

        clock.now = t0 + 30
        engine.tick()
        assert widget.status_text == STATUS_RUNNING
        assert widget.time_text == "00:02"

        clock.now = t0 + 61
        engine.tick()
        assert widget.status_text == "Timer running, last minute remaining: 59"
        assert widget.time_text == "00:01"

        clock.now = t0 + 119
        engine.tick()
        assert widget.status_text == "Timer running, last minute remaining: 1"
        assert widget.time_text == "00:01"

    def test_reset(self, widget, engine, clock):
        widget.select_preset("00:15")
        widget.start()
        engine.tick(clock.advance(100))
        widget.reset()
        assert engine.phase == TimerPhase.IDLE
        assert widget.status_text == STATUS_RESET
        assert widget.time_text == "00:15"
        assert not widget._start_btn.isHidden()

    def test_start_while_running_is_noop(self, widget, engine):
        widget.start()
        deadline = engine.deadline
        widget.start()
        assert engine.deadline == deadline


class TestTimerWidgetExpiry:
    def test_expiry_notifies(self, widget, engine, clock, notifier):
        widget.confirm_custom("00:01")
        widget.start()
        engine.tick(clock.advance(60))
        assert widget.status_text == STATUS_TIMES_UP
        assert widget.time_text == "00:00"
        assert notifier.alerts == 1
        assert notifier.dialogs == ["00:01"]
        assert not widget._start_btn.isHidden()

    def test_start_with_nothing_left_uses_expiry_path(self, widget, engine, notifier):
        widget.confirm_custom("00:00")
        widget.start()
        assert engine.phase == TimerPhase.EXPIRED
        assert notifier.alerts == 1
        assert notifier.dialogs == ["00:00"]

    def test_start_with_nothing_left_keeps_status(self, widget, notifier):
        widget.confirm_custom("00:00")
        widget.start()
        assert widget.status_text == STATUS_CUSTOM

    def test_start_after_expiry_notifies_again(self, widget, engine, clock, notifier):
        widget.confirm_custom("00:01")
        widget.start()
        engine.tick(clock.advance(60))
        widget.start()
        assert notifier.alerts == 2
        assert engine.is_running is False

    def test_expiry_message(self):
        assert expiry_message("00:30") == "End of the 00:30 timer"


@pytest.mark.usefixtures("qapp")
class TestQtNotifier:
    def test_dialog_deletes_itself_on_close(self, tmp_path):
        parent = QWidget()
        notifier = QtNotifier(SoundManager(sounds_dir=tmp_path), parent)
        notifier.show_expiry_dialog("00:30")
        box = notifier._box
        assert box.text() == "End of the 00:30 timer"
        assert box.testAttribute(Qt.WidgetAttribute.WA_DeleteOnClose)
        box.close()


# ═══════════════════════════════════════════════════════════════════════
#  CUSTOM DURATION DIALOG
# ═══════════════════════════════════════════════════════════════════════


@pytest.mark.usefixtures("qapp")
class TestCustomDurationDialog:
    def test_ok_disabled_when_empty(self):
        dlg = CustomDurationDialog()
        assert not dlg._ok_btn.isEnabled()

    @pytest.mark.parametrize("text, enabled", [
        ("12:34", True),
        (" 00:05 ", True),
        ("12:60", False),
        ("1:30", False),
        ("ab:cd", False),
    ])
    def test_ok_tracks_validity(self, text, enabled):
        dlg = CustomDurationDialog()
        dlg._input.setText(text)
        assert dlg._ok_btn.isEnabled() is enabled
        assert dlg.is_valid is enabled

    def test_text_is_trimmed(self):
        dlg = CustomDurationDialog(initial="  00:45 ")
        assert dlg.text == "00:45"

    def test_accept_refused_while_invalid(self):
        dlg = CustomDurationDialog(initial="99:99")
        dlg.accept()
        assert dlg.result() != QDialog.DialogCode.Accepted.value

    def test_accept_when_valid(self):
        dlg = CustomDurationDialog(initial="00:10")
        dlg.accept()
        assert dlg.result() == QDialog.DialogCode.Accepted.value


# ═══════════════════════════════════════════════════════════════════════
#  PROGRESS LINE
# ═══════════════════════════════════════════════════════════════════════


@pytest.mark.usefixtures("qapp")
class TestProgressLine:
    @pytest.mark.parametrize("value, expected", [(0.25, 0.25), (1.5, 1.0), (-0.2, 0.0)])
    def test_fraction_clamped(self, value, expected):
        line = ProgressLine()
        line.set_fraction(value)
        assert line.fraction == expected

    def test_running_uses_accent(self):
        line = ProgressLine()
        line.apply_phase(TimerPhase.RUNNING)
        assert line.fill_color.name().upper() == PHASE_COLORS[TimerPhase.RUNNING]

    def test_palette_overrides_accent(self):
        line = ProgressLine()
        line.apply_palette({"accent": "#FF0000", "separator": "#000000"})
        line.apply_phase(TimerPhase.RUNNING)
        assert line.fill_color.name().upper() == "#FF0000"

    def test_widget_feeds_engine_progress(self, widget, engine, clock):
        widget.confirm_custom("00:02")
        widget.start()
        engine.tick(clock.advance(30))
        assert widget._progress.fraction == pytest.approx(0.75)


# ═══════════════════════════════════════════════════════════════════════
#  APP WINDOW
# ═══════════════════════════════════════════════════════════════════════


@pytest.mark.usefixtures("qapp")
class TestSimpleTimerApp:
    def _make(self, notifier, **kwargs):
        from simpletimer.app import SimpleTimerApp
        return SimpleTimerApp(Settings(**kwargs), notifier=notifier)

    def test_engine_uses_last_label(self, notifier):
        win = self._make(notifier, last_label="00:30")
        assert win.engine.label == "00:30"
        assert win.engine.total_seconds == 30 * 60

    def test_invalid_last_label_falls_back(self, notifier):
        win = self._make(notifier, last_label="garbage")
        assert win.engine.label == DEFAULT_LABEL

    def test_non_string_last_label_falls_back(self):
        assert startup_label(Settings(last_label=90)) == DEFAULT_LABEL

    def test_mistyped_settings_file_starts_cleanly(self, notifier):
        data = {"last_label": 90, "window_width": "wide"}
        settings_mod.SETTINGS_PATH.write_text(json.dumps(data), encoding="utf-8")
        from simpletimer.app import SimpleTimerApp
        win = SimpleTimerApp(load_settings(), notifier=notifier)
        assert win.engine.label == DEFAULT_LABEL
        assert win.settings.window_width == Settings().window_width

    def test_ticker_running_every_second(self, notifier):
        win = self._make(notifier)
        assert win._ticker.isActive()
        assert win._ticker.interval() == 1000

    def test_tick_handler_refreshes(self, notifier):
        win = self._make(notifier, last_label="00:15")
        win.timer_widget.start()
        win._on_tick()
        assert win.engine.is_running
        assert win.timer_widget.time_text == "00:15"

    def test_save_state_persists_label_and_geometry(self, notifier):
        win = self._make(notifier, window_width=400, window_height=300)
        win.timer_widget.select_preset("00:45")
        win._save_state()
        saved = load_settings()
        assert saved.last_label == "00:45"
        assert saved.window_width == win.width()
        assert saved.window_height == win.height()

    def test_always_on_top(self, notifier):
        win = self._make(notifier, always_on_top=True)
        assert win.windowFlags() & Qt.WindowType.WindowStaysOnTopHint


# ═══════════════════════════════════════════════════════════════════════
#  COMMAND LINE
# ═══════════════════════════════════════════════════════════════════════


class TestCommandLine:
    def test_defaults(self):
        from simpletimer.__main__ import build_parser
        args = build_parser().parse_args([])
        assert args.duration is None
        assert args.log_level == "WARNING"

    def test_duration(self):
        from simpletimer.__main__ import build_parser
        args = build_parser().parse_args(["--duration", "00:20"])
        assert args.duration == "00:20"

    def test_invalid_duration_exits(self):
        from simpletimer.__main__ import build_parser
        with pytest.raises(SystemExit):
            build_parser().parse_args(["--duration", "0:20"])
