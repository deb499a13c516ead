"""UI package."""

from .timer_widget import TimerWidget
from .custom_dialog import CustomDurationDialog
from .progress_line import ProgressLine
from .notifier import Notifier, QtNotifier

__all__ = [
    "TimerWidget",
    "CustomDurationDialog",
    "ProgressLine",
    "Notifier",
    "QtNotifier",
]
