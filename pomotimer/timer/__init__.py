"""Timer package."""

from .engine import (
    TimerEngine,
    Mode,
    Activity,
    TICK_INTERVAL_MS,
    AUTOSTART_DELAY_MS,
)
from .scheduler import QtScheduler, Scheduler, ScheduledHandle

__all__ = [
    "TimerEngine",
    "Mode",
    "Activity",
    "TICK_INTERVAL_MS",
    "AUTOSTART_DELAY_MS",
    "QtScheduler",
    "Scheduler",
    "ScheduledHandle",
]
