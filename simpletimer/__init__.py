"""SimpleTimer: a minimal countdown timer."""

__version__ = "1.0.0"
