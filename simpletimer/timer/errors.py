"""Exceptions raised by the timer package."""

from __future__ import annotations


class TimerError(Exception):
    """Base class for timer errors."""


class InvalidFormat(TimerError, ValueError):
    """Custom duration text is not a strict ``HH:MM`` with minutes 00–59."""

    def __init__(self, text: str) -> None:
        super().__init__(f"invalid duration {text!r}: expected HH:MM")
        self.text = text


class NothingToStart(TimerError):
    """``start()`` was called with no time left on the clock."""
