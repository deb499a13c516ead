"""Shared pytest fixtures for SimpleTimer tests."""

import os
import sys

import pytest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from PyQt6.QtWidgets import QApplication

from simpletimer.timer.engine import TimerEngine

from helpers import FakeClock, FakeNotifier


@pytest.fixture(scope="session")
def qapp():
    """A single QApplication instance shared across the entire test run."""
    app = QApplication.instance() or QApplication(sys.argv)
    yield app


@pytest.fixture(autouse=True)
def settings_dir(tmp_path, monkeypatch):
    """Point settings (and the sound cache under it) at a temp directory."""
    monkeypatch.setattr("simpletimer.settings.APP_SUPPORT_DIR", tmp_path)
    monkeypatch.setattr("simpletimer.settings.SETTINGS_PATH", tmp_path / "settings.json")
    monkeypatch.setattr("simpletimer.audio.sounds.SOUNDS_DIR", tmp_path / "sounds")
    yield tmp_path


@pytest.fixture
def clock():
    return FakeClock(1_000_000.0)


@pytest.fixture
def engine(qapp, clock):
    """Fresh TimerEngine on a fake clock, default 01:00 duration."""
    return TimerEngine(parent=None, clock=clock)


@pytest.fixture
def notifier():
    return FakeNotifier()
