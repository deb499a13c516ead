"""Timer package."""

from .durations import (
    PRESETS,
    CUSTOM_CHOICE,
    DEFAULT_LABEL,
    MAX_SECONDS,
    is_valid_hhmm,
    parse_hhmm,
    hhmm_to_seconds,
    seconds_to_hhmm,
)
from .engine import TimerEngine, TimerPhase
from .errors import TimerError, InvalidFormat, NothingToStart

__all__ = [
    "TimerEngine",
    "TimerPhase",
    "TimerError",
    "InvalidFormat",
    "NothingToStart",
    "PRESETS",
    "CUSTOM_CHOICE",
    "DEFAULT_LABEL",
    "MAX_SECONDS",
    "is_valid_hhmm",
    "parse_hhmm",
    "hhmm_to_seconds",
    "seconds_to_hhmm",
]
