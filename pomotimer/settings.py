"""User preferences and the key-value store they persist in.

Two entries are kept in the ``kv_entries`` table:

``pomodoroSettings``
    The :class:`Settings` blob as JSON text.
``sessionsCompleted``
    The completed work-session counter as decimal text.

Usage::

    store = SettingsStore()
    settings = store.load_settings() or Settings()
    store.save_settings(replace(settings, work_duration=50))

Anything unreadable loads as ``None`` so callers fall back to defaults.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, asdict, fields, replace

from sqlalchemy.exc import SQLAlchemyError

from .database.db import get_session
from .database.models import KeyValue

LOGGER = logging.getLogger(__name__)

SETTINGS_KEY = "pomodoroSettings"
SESSIONS_KEY = "sessionsCompleted"

# python field name → persisted JSON key
_JSON_KEYS: dict[str, str] = {
    "work_duration": "workDuration",
    "short_break_duration": "shortBreakDuration",
    "long_break_duration": "longBreakDuration",
    "long_break_interval": "longBreakInterval",
    "sound_enabled": "soundEnabled",
    "auto_start_breaks": "autoStartBreaks",
    "auto_start_pomodoros": "autoStartPomodoros",
}


@dataclass(frozen=True)
class Settings:
    """All user-configurable preferences.  Replaced wholesale on save."""

    # ── timer (minutes) ───────────────────────────────────────────────
    work_duration: int = 25
    short_break_duration: int = 5
    long_break_duration: int = 15
    long_break_interval: int = 4          # work sessions per long break

    # ── behaviour ─────────────────────────────────────────────────────
    sound_enabled: bool = True
    auto_start_breaks: bool = False
    auto_start_pomodoros: bool = False

    def sanitized(self) -> Settings:
        """Copy with every duration and the interval clamped to >= 1."""
        return replace(
            self,
            work_duration=max(1, self.work_duration),
            short_break_duration=max(1, self.short_break_duration),
            long_break_duration=max(1, self.long_break_duration),
            long_break_interval=max(1, self.long_break_interval),
        )

    def to_json(self) -> str:
        data = asdict(self)
        return json.dumps({_JSON_KEYS[k]: v for k, v in data.items()})

    @classmethod
    def from_json(cls, text: str) -> Settings | None:
        """Parse a persisted blob.  Missing keys take their default;
        anything malformed returns ``None``."""
        try:
            data = json.loads(text)
        except (TypeError, ValueError):
            return None
        if not isinstance(data, dict):
            return None

        values = {}
        for f in fields(cls):
            key = _JSON_KEYS[f.name]
            if key not in data:
                continue
            value = data[key]
            if f.type == "bool":
                if not isinstance(value, bool):
                    return None
            elif isinstance(value, bool) or not isinstance(value, int):
                return None
            values[f.name] = value
        return cls(**values)


class SettingsStore:
    """Persisted key-value storage for settings and the session counter.

    Writes are fire-and-forget: a failed write is logged and dropped.
    """

    # ── reads ─────────────────────────────────────────────────────────

    def load_settings(self) -> Settings | None:
        raw = self._get(SETTINGS_KEY)
        if raw is None:
            return None
        settings = Settings.from_json(raw)
        if settings is None:
            LOGGER.warning("Ignoring malformed settings blob: %r", raw[:80])
        return settings

    def load_sessions_completed(self) -> int | None:
        raw = self._get(SESSIONS_KEY)
        if raw is None:
            return None
        try:
            count = int(raw)
        except ValueError:
            count = -1
        if count < 0:
            LOGGER.warning("Ignoring malformed session counter: %r", raw[:80])
            return None
        return count

    # ── writes ────────────────────────────────────────────────────────

    def save_settings(self, settings: Settings) -> None:
        self._put(SETTINGS_KEY, settings.to_json())

    def save_sessions_completed(self, count: int) -> None:
        self._put(SESSIONS_KEY, str(count))

    # ── internal ──────────────────────────────────────────────────────

    def _get(self, key: str) -> str | None:
        try:
            with get_session() as db:
                record = db.get(KeyValue, key)
                return record.value if record else None
        except SQLAlchemyError:
            LOGGER.warning("Could not read %s", key, exc_info=True)
            return None

    def _put(self, key: str, value: str) -> None:
        try:
            with get_session() as db:
                record = db.get(KeyValue, key)
                if record is None:
                    db.add(KeyValue(key=key, value=value))
                else:
                    record.value = value
        except SQLAlchemyError:
            LOGGER.warning("Could not write %s", key, exc_info=True)
