"""UI package."""

from .timer_widget import TimerWidget
from .progress_ring import ProgressRing, format_clock
from .settings_dialog import SettingsDialog

__all__ = [
    "TimerWidget",
    "ProgressRing",
    "format_clock",
    "SettingsDialog",
]
