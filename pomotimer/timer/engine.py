"""Timer state machine for pomotimer.

Modes
-----
WORK          Focus interval.
SHORT_BREAK   Break after most work sessions.
LONG_BREAK    Break after every ``long_break_interval``-th work session.

Transitions (when the countdown reaches 0)
------------------------------------------
WORK → LONG_BREAK     sessions_completed % long_break_interval == 0
WORK → SHORT_BREAK    otherwise
any break → WORK

The session counter is incremented *before* the break is chosen, so the
long break follows the Nth work session.

Running is orthogonal to mode: ``start`` / ``pause`` / ``reset`` never
change the mode.  ``apply_settings`` always returns to a stopped WORK
interval.
"""

from __future__ import annotations

import logging
from enum import Enum, auto

from PyQt6.QtCore import QObject, pyqtSignal

from ..settings import Settings, SettingsStore
from .scheduler import QtScheduler, Scheduler, ScheduledHandle

LOGGER = logging.getLogger(__name__)


# ── enums ─────────────────────────────────────────────────────────────────


class Mode(Enum):
    WORK = "work"
    SHORT_BREAK = "shortBreak"
    LONG_BREAK = "longBreak"

    @property
    def label(self) -> str:
        return _MODE_LABELS[self]


class Activity(Enum):
    """The kinds of scheduled work the engine can have outstanding."""

    TICK = auto()
    AUTOSTART = auto()


# ── constants ─────────────────────────────────────────────────────────────

_MODE_LABELS: dict[Mode, str] = {
    Mode.WORK: "Work Time",
    Mode.SHORT_BREAK: "Short Break",
    Mode.LONG_BREAK: "Long Break",
}

TICK_INTERVAL_MS = 1000
AUTOSTART_DELAY_MS = 1000  # gap between a mode switch and its automatic start


# ── engine ────────────────────────────────────────────────────────────────


class TimerEngine(QObject):
    """Qt-based Pomodoro state machine.

    Signals
    -------
    tick(time_left: int)
        Emitted after every one-second decrement.
    mode_changed(mode: Mode, duration_seconds: int)
        Emitted when the interval switches or settings are applied.
    session_complete(mode: Mode)
        Emitted when a countdown reaches 0, carrying the mode that
        just finished.
    sessions_changed(count: int)
        Emitted after a work interval bumps the session counter.
    running_changed(is_running: bool)
        Emitted whenever the running flag flips.
    refreshed()
        Emitted after ``reset`` and ``apply_settings`` so views redraw.
    """

    tick = pyqtSignal(int)
    mode_changed = pyqtSignal(object, int)
    session_complete = pyqtSignal(object)
    sessions_changed = pyqtSignal(int)
    running_changed = pyqtSignal(bool)
    refreshed = pyqtSignal()

    def __init__(
        self,
        parent: QObject | None = None,
        *,
        store: SettingsStore | None = None,
        scheduler: Scheduler | None = None,
    ) -> None:
        super().__init__(parent)
        self._store = store
        self._scheduler: Scheduler = scheduler or QtScheduler(self)
        self._handles: dict[Activity, ScheduledHandle] = {}

        # ── configuration ─────────────────────────────────────────────
        loaded = store.load_settings() if store else None
        self._settings: Settings = (loaded or Settings()).sanitized()

        # ── interval state ────────────────────────────────────────────
        self._mode: Mode = Mode.WORK
        self._total_time: int = self._settings.work_duration * 60
        self._time_left: int = self._total_time
        self._is_running: bool = False

        count = store.load_sessions_completed() if store else None
        self._sessions_completed: int = count or 0

    # ══════════════════════════════════════════════════════════════════
    #  PUBLIC PROPERTIES
    # ══════════════════════════════════════════════════════════════════

    @property
    def mode(self) -> Mode:
        return self._mode

    @property
    def time_left(self) -> int:
        """Seconds left on the clock."""
        return self._time_left

    @property
    def total_time(self) -> int:
        """Seconds this interval started with."""
        return self._total_time

    @property
    def is_running(self) -> bool:
        return self._is_running

    @property
    def sessions_completed(self) -> int:
        return self._sessions_completed

    @property
    def settings(self) -> Settings:
        return self._settings

    @property
    def auto_start_pending(self) -> bool:
        """True while a delayed auto-start is waiting to fire."""
        return self._is_active(Activity.AUTOSTART)

    def progress_fraction(self) -> float:
        """1.0 at the start of an interval, 0.0 at completion."""
        return self._time_left / max(1, self._total_time)

    # ══════════════════════════════════════════════════════════════════
    #  CONTROLS
    # ══════════════════════════════════════════════════════════════════

    def start(self) -> None:
        """Begin or resume the countdown.  No-op while running."""
        if self._is_running:
            return
        self._cancel(Activity.AUTOSTART)
        self._set_running(True)
        self._schedule(
            Activity.TICK,
            self._scheduler.call_every(TICK_INTERVAL_MS, self._on_tick),
        )

    def pause(self) -> None:
        """Stop ticking, keep the remaining time.

        Also drops a pending auto-start, so pausing inside the delay
        window keeps the engine stopped.
        """
        self._cancel(Activity.AUTOSTART)
        if not self._is_running:
            return
        self._cancel(Activity.TICK)
        self._set_running(False)

    def reset(self) -> None:
        """Pause and restore the full duration of the current mode."""
        self.pause()
        self._time_left = self._total_time
        self.refreshed.emit()

    def apply_settings(self, settings: Settings) -> None:
        """Replace and persist settings, then restart at a stopped WORK
        interval.  The session counter is left alone."""
        self._settings = settings.sanitized()
        if self._store:
            self._store.save_settings(self._settings)

        self._cancel(Activity.AUTOSTART)
        self._cancel(Activity.TICK)
        self._set_running(False)

        self._begin_interval(Mode.WORK, self._settings.work_duration)
        self.refreshed.emit()

    # ══════════════════════════════════════════════════════════════════
    #  INTERNAL — timer mechanics
    # ══════════════════════════════════════════════════════════════════

    def _on_tick(self) -> None:
        self._time_left = max(0, self._time_left - 1)
        self.tick.emit(self._time_left)
        if self._time_left == 0:
            self._complete()

    def _complete(self) -> None:
        self._cancel(Activity.TICK)
        self._set_running(False)
        finished = self._mode
        LOGGER.debug("Interval finished: %s", finished.value)

        self.session_complete.emit(finished)

        if finished is Mode.WORK:
            self._sessions_completed += 1
            if self._store:
                self._store.save_sessions_completed(self._sessions_completed)
            self.sessions_changed.emit(self._sessions_completed)

        self._switch_mode(finished)

    def _switch_mode(self, finished: Mode) -> None:
        s = self._settings
        if finished is Mode.WORK:
            if self._sessions_completed % s.long_break_interval == 0:
                self._begin_interval(Mode.LONG_BREAK, s.long_break_duration)
            else:
                self._begin_interval(Mode.SHORT_BREAK, s.short_break_duration)
            auto_start = s.auto_start_breaks
        else:
            self._begin_interval(Mode.WORK, s.work_duration)
            auto_start = s.auto_start_pomodoros

        if auto_start:
            self._schedule(
                Activity.AUTOSTART,
                self._scheduler.call_later(AUTOSTART_DELAY_MS, self.start),
            )

    def _begin_interval(self, mode: Mode, minutes: int) -> None:
        self._mode = mode
        self._total_time = max(1, minutes * 60)
        self._time_left = self._total_time
        LOGGER.debug("Mode → %s (%ds)", mode.value, self._total_time)
        self.mode_changed.emit(mode, self._total_time)

    def _set_running(self, running: bool) -> None:
        if running == self._is_running:
            return
        self._is_running = running
        self.running_changed.emit(running)

    # ── handle bookkeeping ────────────────────────────────────────────

    def _schedule(self, activity: Activity, handle: ScheduledHandle) -> None:
        self._cancel(activity)
        self._handles[activity] = handle

    def _cancel(self, activity: Activity) -> None:
        handle = self._handles.pop(activity, None)
        if handle is not None:
            handle.cancel()

    def _is_active(self, activity: Activity) -> bool:
        handle = self._handles.get(activity)
        return handle is not None and handle.active
