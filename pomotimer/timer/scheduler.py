"""Cancelable scheduled callbacks for the timer engine.

The engine never touches ``QTimer`` directly.  It asks a scheduler for
a repeating call (the one-second tick) or a one-shot call (the delayed
auto-start) and keeps the returned :class:`ScheduledHandle`.  Cancelling
a handle is idempotent, and a one-shot handle reports itself inactive
before its callback runs.

Tests swap in a fake scheduler with a virtual clock.
"""

from __future__ import annotations

from typing import Callable, Protocol

from PyQt6.QtCore import QObject, QTimer


class ScheduledHandle(Protocol):
    @property
    def active(self) -> bool: ...

    def cancel(self) -> None: ...


class Scheduler(Protocol):
    def call_every(self, interval_ms: int, callback: Callable[[], None]) -> ScheduledHandle: ...

    def call_later(self, delay_ms: int, callback: Callable[[], None]) -> ScheduledHandle: ...


class QtTimerHandle:
    """Owns one ``QTimer``.  ``cancel()`` stops and releases it."""

    def __init__(
        self,
        parent: QObject | None,
        interval_ms: int,
        callback: Callable[[], None],
        *,
        single_shot: bool,
    ) -> None:
        self._callback = callback
        self._single_shot = single_shot
        self._timer: QTimer | None = QTimer(parent)
        self._timer.setSingleShot(single_shot)
        self._timer.setInterval(interval_ms)
        self._timer.timeout.connect(self._fire)
        self._timer.start()

    @property
    def active(self) -> bool:
        return self._timer is not None

    def cancel(self) -> None:
        if self._timer is None:
            return
        timer, self._timer = self._timer, None
        timer.stop()
        timer.timeout.disconnect(self._fire)
        timer.deleteLater()

    def _fire(self) -> None:
        if self._timer is None:
            return
        if self._single_shot:
            self.cancel()
        self._callback()


class QtScheduler:
    """Production scheduler: every handle is a ``QTimer`` on the Qt loop."""

    def __init__(self, parent: QObject | None = None) -> None:
        self._parent = parent

    def call_every(self, interval_ms: int, callback: Callable[[], None]) -> QtTimerHandle:
        return QtTimerHandle(self._parent, interval_ms, callback, single_shot=False)

    def call_later(self, delay_ms: int, callback: Callable[[], None]) -> QtTimerHandle:
        return QtTimerHandle(self._parent, delay_ms, callback, single_shot=True)
