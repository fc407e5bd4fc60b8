"""Shared test helpers for pomotimer."""

from pomotimer.timer.engine import TimerEngine, TICK_INTERVAL_MS


class SignalCollector:
    """Utility to capture pyqtSignal emissions into a list."""

    def __init__(self):
        self.items: list = []

    def slot(self, *args):
        self.items.append(args if len(args) > 1 else args[0] if args else None)

    def __call__(self, *args):
        self.slot(*args)

    def __len__(self):
        return len(self.items)

    def __getitem__(self, idx):
        return self.items[idx]

    @property
    def last(self):
        return self.items[-1] if self.items else None

    def clear(self):
        self.items.clear()


class FakeHandle:
    def __init__(self, due_ms, interval_ms, callback, repeat):
        self.due_ms = due_ms
        self.interval_ms = interval_ms
        self.callback = callback
        self.repeat = repeat
        self.cancel_calls = 0
        self._active = True

    @property
    def active(self):
        return self._active

    def cancel(self):
        self.cancel_calls += 1
        self._active = False


class FakeScheduler:
    """Virtual-clock scheduler.  Nothing fires until ``advance`` is called."""

    def __init__(self):
        self.now_ms = 0
        self.handles: list[FakeHandle] = []

    def call_every(self, interval_ms, callback):
        return self._add(interval_ms, callback, repeat=True)

    def call_later(self, delay_ms, callback):
        return self._add(delay_ms, callback, repeat=False)

    def _add(self, interval_ms, callback, repeat):
        handle = FakeHandle(self.now_ms + interval_ms, interval_ms, callback, repeat)
        self.handles.append(handle)
        return handle

    def active_handles(self, *, repeat=None):
        return [
            h for h in self.handles
            if h.active and (repeat is None or h.repeat == repeat)
        ]

    def advance(self, ms):
        """Move the clock forward, firing due callbacks in time order."""
        target = self.now_ms + ms
        while True:
            due = [h for h in self.active_handles() if h.due_ms <= target]
            if not due:
                break
            handle = min(due, key=lambda h: h.due_ms)
            self.now_ms = handle.due_ms
            if handle.repeat:
                handle.due_ms += handle.interval_ms
            else:
                handle._active = False
            handle.callback()
        self.now_ms = target

    def advance_seconds(self, seconds):
        self.advance(seconds * 1000)


def complete_interval(engine: TimerEngine, scheduler: FakeScheduler) -> None:
    """Fast-complete the current interval by jumping to its last tick."""
    if not engine.is_running:
        engine.start()
    engine._time_left = 1
    scheduler.advance(TICK_INTERVAL_MS)
