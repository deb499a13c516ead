"""Countdown state machine for SimpleTimer.

States
------
IDLE      Waiting for Start.  ``remaining == total``.
RUNNING   Counting down towards ``deadline``.
EXPIRED   Reached zero.  Left only by reset or a new duration.

Transitions
-----------
IDLE → RUNNING                 (start, remaining > 0)
IDLE → EXPIRED                 (start, remaining == 0, NothingToStart)
RUNNING → EXPIRED              (tick at or after the deadline)
RUNNING → IDLE                 (reset)
EXPIRED → IDLE                 (reset / select_preset / set_custom_duration)
Any → IDLE                     (select_preset / set_custom_duration)

Timekeeping
-----------
While running, the absolute wall-clock ``deadline`` is the only source of
truth.  ``remaining_seconds`` is recomputed from ``deadline - now`` on
every tick, never decremented, so a suspended process catches up on the
first tick after it wakes.

The engine owns no timer.  Whoever hosts it calls ``tick()`` about once
per second (the app window uses a ``QTimer``) and re-renders from the
signals and projections below.
"""

from __future__ import annotations

import logging
import math
import time
from enum import Enum
from typing import Callable

from PyQt6.QtCore import QObject, pyqtSignal

from .durations import DEFAULT_LABEL, hhmm_to_seconds, parse_hhmm, seconds_to_hhmm
from .errors import NothingToStart

logger = logging.getLogger(__name__)


# ── enums ─────────────────────────────────────────────────────────────────


class TimerPhase(Enum):
    IDLE = "idle"
    RUNNING = "running"
    EXPIRED = "expired"


# ── engine ────────────────────────────────────────────────────────────────


class TimerEngine(QObject):
    """Single countdown driven by an absolute deadline.

    Signals
    -------
    ticked(remaining_seconds: int)
        Emitted by ``tick()`` while time is still left.
    expired(label: str)
        Emitted exactly once when a running countdown reaches zero.
        Carries the label of the confirmed duration.
    state_changed(new_phase: TimerPhase)
        Emitted on every transition, including re-entering IDLE.
    """

    ticked = pyqtSignal(int)
    expired = pyqtSignal(str)
    state_changed = pyqtSignal(object)

    def __init__(
        self,
        parent: QObject | None = None,
        *,
        label: str = DEFAULT_LABEL,
        clock: Callable[[], float] = time.time,
    ) -> None:
        super().__init__(parent)
        self._clock = clock

        self._phase: TimerPhase = TimerPhase.IDLE
        self._label: str = label
        self._total: int = hhmm_to_seconds(label)
        self._remaining: int = self._total
        self._deadline: float | None = None

    # ══════════════════════════════════════════════════════════════════
    #  PUBLIC PROPERTIES
    # ══════════════════════════════════════════════════════════════════

    @property
    def phase(self) -> TimerPhase:
        return self._phase

    @property
    def is_running(self) -> bool:
        return self._phase == TimerPhase.RUNNING

    @property
    def total_seconds(self) -> int:
        return self._total

    @property
    def remaining_seconds(self) -> int:
        """Seconds left as of the last tick (or the full duration when idle)."""
        return self._remaining

    @property
    def deadline(self) -> float | None:
        return self._deadline

    @property
    def label(self) -> str:
        """The last confirmed duration, e.g. ``"00:30"``."""
        return self._label

    @property
    def progress(self) -> float:
        """Fraction of the duration still left, 1.0 → 0.0."""
        if self._total <= 0:
            return 0.0
        return max(0.0, min(1.0, self._remaining / self._total))

    # ══════════════════════════════════════════════════════════════════
    #  DURATION SELECTION
    # ══════════════════════════════════════════════════════════════════

    def select_preset(self, duration_seconds: int, label: str | None = None) -> None:
        """Confirm a new duration and return to IDLE, cancelling any run."""
        if duration_seconds < 0:
            raise ValueError(f"duration must be >= 0, got {duration_seconds}")
        self._total = duration_seconds
        self._remaining = duration_seconds
        self._deadline = None
        self._label = label if label is not None else seconds_to_hhmm(duration_seconds)
        logger.debug("Duration set to %s (%ds)", self._label, duration_seconds)
        self._set_phase(TimerPhase.IDLE)

    def set_custom_duration(self, text: str) -> None:
        """Confirm a typed ``HH:MM`` duration.

        Raises ``InvalidFormat`` (leaving the engine untouched) unless the
        stripped text is exactly two digits, a colon and two digits with
        minutes 00–59.
        """
        hh, mm = parse_hhmm(text)
        self.select_preset(hh * 3600 + mm * 60, f"{hh:02d}:{mm:02d}")

    # ══════════════════════════════════════════════════════════════════
    #  CONTROLS
    # ══════════════════════════════════════════════════════════════════

    def start(self, now: float | None = None) -> None:
        """Begin counting down from ``remaining_seconds``.

        No-op while already running.  With nothing left on the clock the
        engine moves straight to EXPIRED and raises ``NothingToStart`` so
        the caller can run its time's-up path.
        """
        if self.is_running:
            return
        if self._remaining <= 0:
            self._deadline = None
            self._set_phase(TimerPhase.EXPIRED)
            raise NothingToStart(f"nothing left on the {self._label} timer")
        if now is None:
            now = self._clock()
        self._deadline = now + self._remaining
        logger.info("Timer %s started, %ds to go", self._label, self._remaining)
        self._set_phase(TimerPhase.RUNNING)

    def reset(self) -> None:
        """Cancel the countdown and restore the full duration."""
        self._deadline = None
        self._remaining = self._total
        self._set_phase(TimerPhase.IDLE)

    def tick(self, now: float | None = None) -> None:
        """Refresh ``remaining_seconds`` from the deadline.

        A fractional second left counts as a whole one, so zero is only
        reached at or after the deadline.
        """
        if not self.is_running or self._deadline is None:
            return
        if now is None:
            now = self._clock()
        seconds_left = self._deadline - now
        self._remaining = min(self._total, max(0, math.ceil(seconds_left)))

        if self._remaining <= 0:
            self._deadline = None
            logger.info("Timer %s expired", self._label)
            self._set_phase(TimerPhase.EXPIRED)
            self.expired.emit(self._label)
            return

        self.ticked.emit(self._remaining)

    # ══════════════════════════════════════════════════════════════════
    #  PROJECTIONS
    # ══════════════════════════════════════════════════════════════════

    def displayed_remaining(self, now: float | None = None) -> int:
        """Seconds for the big readout, quantized up to whole minutes.

        While running the value is read fresh from the deadline, not from
        the last tick: 15:00 through 14:01 left all show 15 minutes, and
        exactly 60.0s left shows one minute.  When not running the raw
        ``remaining_seconds`` is returned.
        """
        if not self.is_running or self._deadline is None:
            return self._remaining
        if now is None:
            now = self._clock()
        seconds_left = self._deadline - now
        minutes_left = max(0, math.ceil(seconds_left / 60.0))
        return minutes_left * 60

    # ══════════════════════════════════════════════════════════════════
    #  INTERNAL
    # ══════════════════════════════════════════════════════════════════

    def _set_phase(self, new_phase: TimerPhase) -> None:
        self._phase = new_phase
        self.state_changed.emit(new_phase)
