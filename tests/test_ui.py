"""Tests for the presentation layer: clock formatting, ring, timer widget,
settings dialog, notifier, and the main window wiring."""

from __future__ import annotations

import pytest
from PyQt6.QtCore import Qt, QEvent
from PyQt6.QtGui import QKeyEvent
from PyQt6.QtTest import QTest
from PyQt6.QtWidgets import QApplication, QPushButton

from pomotimer.app import PomodoroWindow
from pomotimer.notify import (
    Notifier, COMPLETION_MESSAGES, NOTIFICATION_TITLE, FALLBACK_MESSAGE,
)
from pomotimer.settings import Settings
from pomotimer.timer.engine import Mode
from pomotimer.ui.progress_ring import ProgressRing, format_clock
from pomotimer.ui.settings_dialog import SettingsDialog
from pomotimer.ui.styles import MODE_COLORS, build_stylesheet
from pomotimer.ui.timer_widget import TimerWidget

from helpers import complete_interval


def _space() -> QKeyEvent:
    return QKeyEvent(
        QEvent.Type.KeyPress, Qt.Key.Key_Space, Qt.KeyboardModifier.NoModifier, " ",
    )


class FakeSoundManager:
    def __init__(self):
        self.enabled = True
        self.beeps = 0

    def set_enabled(self, enabled):
        self.enabled = enabled

    def play_beep(self):
        self.beeps += 1


class FakeTray:
    def __init__(self, visible=True, supports=True):
        self._visible = visible
        self._supports = supports
        self.messages = []

    def isVisible(self):
        return self._visible

    def supportsMessages(self):
        return self._supports

    def showMessage(self, title, body):
        self.messages.append((title, body))


# ═══════════════════════════════════════════════════════════════════════
#  FORMATTING / RING
# ═══════════════════════════════════════════════════════════════════════


@pytest.mark.parametrize("seconds, text", [
    (1500, "25:00"),
    (300, "05:00"),
    (61, "01:01"),
    (9, "00:09"),
    (0, "00:00"),
    (-5, "00:00"),
    (6000, "100:00"),
])
def test_format_clock(seconds, text):
    assert format_clock(seconds) == text


class TestProgressRing:
    def test_fraction_is_clamped(self, qapp):
        ring = ProgressRing()
        ring.set_fraction(1.7)
        assert ring.fraction == 1.0
        ring.set_fraction(-0.2)
        assert ring.fraction == 0.0

    def test_time_text(self, qapp):
        ring = ProgressRing()
        ring.set_time_text("12:34")
        assert ring.time_text == "12:34"

    def test_paints_offscreen(self, qapp):
        ring = ProgressRing()
        ring.resize(200, 200)
        ring.apply_mode(Mode.LONG_BREAK)
        ring.set_fraction(0.4)
        ring.grab()


def test_stylesheet_uses_mode_colour():
    for mode, (primary, _secondary) in MODE_COLORS.items():
        assert primary in build_stylesheet(mode)


# ═══════════════════════════════════════════════════════════════════════
#  TIMER WIDGET
# ═══════════════════════════════════════════════════════════════════════


class TestTimerWidget:
    def test_initial_display(self, engine):
        w = TimerWidget(engine)
        assert w.mode_text == "Work Time"
        assert w.ring.time_text == "25:00"
        assert w.ring.fraction == pytest.approx(1.0)
        assert w.session_text == "Sessions completed: 0"

    def test_start_pause_visibility(self, engine):
        w = TimerWidget(engine)
        assert not w.start_button.isHidden()
        assert w.pause_button.isHidden()
        engine.start()
        assert w.start_button.isHidden()
        assert not w.pause_button.isHidden()
        engine.pause()
        assert not w.start_button.isHidden()

    def test_tick_updates_ring(self, engine, scheduler):
        w = TimerWidget(engine)
        engine.start()
        scheduler.advance_seconds(75)
        assert w.ring.time_text == "23:45"
        assert w.ring.fraction == pytest.approx(1425 / 1500)

    def test_completion_updates_labels(self, engine, scheduler):
        w = TimerWidget(engine)
        complete_interval(engine, scheduler)
        assert w.mode_text == "Short Break"
        assert w.ring.time_text == "05:00"
        assert w.session_text == "Sessions completed: 1"

    def test_reset_refreshes(self, engine, scheduler):
        w = TimerWidget(engine)
        engine.start()
        scheduler.advance_seconds(10)
        engine.reset()
        assert w.ring.time_text == "25:00"

    def test_buttons_drive_engine(self, engine):
        w = TimerWidget(engine)
        w.start_button.click()
        assert engine.is_running is True
        w.pause_button.click()
        assert engine.is_running is False


# ═══════════════════════════════════════════════════════════════════════
#  SETTINGS DIALOG
# ═══════════════════════════════════════════════════════════════════════


class TestSettingsDialog:
    def test_populates_from_settings(self, qapp):
        s = Settings(
            work_duration=45, short_break_duration=10, long_break_duration=20,
            long_break_interval=3, sound_enabled=False,
            auto_start_breaks=True, auto_start_pomodoros=True,
        )
        assert SettingsDialog(s).settings() == s

    def test_defaults(self, qapp):
        assert SettingsDialog(Settings()).settings() == Settings()

    def test_input_ranges_clamp(self, qapp):
        dlg = SettingsDialog(Settings())
        dlg._work_spin.setValue(0)
        dlg._short_spin.setValue(500)
        dlg._interval_spin.setValue(99)
        s = dlg.settings()
        assert s.work_duration == 1
        assert s.short_break_duration == 30
        assert s.long_break_interval == 10

    def test_stored_values_above_range_survive(self, qapp):
        s = Settings(
            work_duration=90, short_break_duration=45,
            long_break_duration=75, long_break_interval=12,
        )
        dlg = SettingsDialog(s)
        assert dlg.settings() == s
        assert dlg._work_spin.maximum() == 90

    def test_range_not_narrowed_for_small_values(self, qapp):
        dlg = SettingsDialog(Settings(work_duration=10))
        assert dlg._work_spin.maximum() == 60


# ═══════════════════════════════════════════════════════════════════════
#  NOTIFIER
# ═══════════════════════════════════════════════════════════════════════


class TestNotifier:
    @pytest.mark.parametrize("mode", list(Mode))
    def test_tray_message_per_mode(self, qapp, mode):
        tray = FakeTray()
        Notifier(tray).notify(mode)
        assert tray.messages == [(NOTIFICATION_TITLE, COMPLETION_MESSAGES[mode])]

    def test_messages(self):
        assert COMPLETION_MESSAGES[Mode.WORK] == "Work session complete! Time for a break."
        assert COMPLETION_MESSAGES[Mode.SHORT_BREAK] == "Break is over! Ready to work?"
        assert COMPLETION_MESSAGES[Mode.LONG_BREAK] == "Long break is over! Ready to work?"

    @pytest.mark.parametrize("tray", [None, FakeTray(visible=False), FakeTray(supports=False)])
    def test_falls_back_to_alert(self, qapp, monkeypatch, tray):
        alerts = []
        notifier = Notifier(tray)
        monkeypatch.setattr(notifier, "_alert", lambda: alerts.append(FALLBACK_MESSAGE))
        notifier.notify(Mode.WORK)
        assert alerts == ["Timer Complete!"]
        if tray is not None:
            assert tray.messages == []


# ═══════════════════════════════════════════════════════════════════════
#  MAIN WINDOW
# ═══════════════════════════════════════════════════════════════════════


@pytest.fixture
def window(qapp, store, scheduler, monkeypatch):
    win = PomodoroWindow(
        store=store, scheduler=scheduler, sound_manager=FakeSoundManager(),
    )
    notified = []
    monkeypatch.setattr(win._notifier, "notify", notified.append)
    win.notified = notified
    yield win
    win.close()


class TestPomodoroWindow:
    def test_title_shows_countdown(self, window, scheduler):
        assert window.windowTitle() == "25:00 - Pomodoro Timer"
        window.engine.start()
        scheduler.advance_seconds(1)
        assert window.windowTitle() == "24:59 - Pomodoro Timer"

    def test_space_toggles(self, window):
        window.keyPressEvent(_space())
        assert window.engine.is_running is True
        window.keyPressEvent(_space())
        assert window.engine.is_running is False

    def test_buttons_never_take_keyboard_focus(self, window):
        buttons = window.findChildren(QPushButton)
        assert len(buttons) == 4
        for btn in buttons:
            assert btn.focusPolicy() == Qt.FocusPolicy.NoFocus

    def test_space_after_clicking_start_pauses(self, window, scheduler):
        window.show()
        window.activateWindow()
        window.setFocus()
        QTest.qWait(20)

        QTest.mouseClick(window.timer_widget.start_button, Qt.MouseButton.LeftButton)
        assert window.engine.is_running is True
        scheduler.advance_seconds(10)

        target = QApplication.focusWidget() or window
        assert not isinstance(target, QPushButton)
        QTest.keyClick(target, Qt.Key.Key_Space)
        assert window.engine.is_running is False
        assert window.engine.time_left == 1490
        assert not window.is_settings_open()

        QTest.keyClick(QApplication.focusWidget() or window, Qt.Key.Key_Space)
        assert window.engine.is_running is True
        assert window.engine.time_left == 1490

    def test_space_ignored_while_settings_open(self, window):
        window.open_settings()
        assert window.is_settings_open()
        window.toggle_running()
        assert window.engine.is_running is False
        window._settings_dialog.reject()
        assert not window.is_settings_open()

    def test_save_settings_applies(self, window, store, scheduler):
        complete_interval(window.engine, scheduler)
        window.open_settings()
        dlg = window._settings_dialog
        dlg._work_spin.setValue(50)
        dlg._sound_cb.setChecked(False)
        dlg.accept()
        assert window.engine.mode == Mode.WORK
        assert window.engine.time_left == 50 * 60
        assert window.engine.sessions_completed == 1
        assert store.load_settings().work_duration == 50
        assert window._sound_manager.enabled is False

    def test_cancel_settings_keeps_state(self, window, scheduler):
        complete_interval(window.engine, scheduler)
        window.open_settings()
        window._settings_dialog._work_spin.setValue(50)
        window._settings_dialog.reject()
        assert window.engine.mode == Mode.SHORT_BREAK
        assert window.engine.settings.work_duration == 25

    def test_completion_beeps_and_notifies(self, window, scheduler):
        complete_interval(window.engine, scheduler)
        assert window._sound_manager.beeps == 1
        assert window.notified == [Mode.WORK]

    def test_no_beep_when_sound_disabled(self, window, scheduler):
        window.engine.apply_settings(Settings(sound_enabled=False))
        complete_interval(window.engine, scheduler)
        assert window._sound_manager.beeps == 0
        assert window.notified == [Mode.WORK]

    def test_mode_change_restyles(self, window, scheduler):
        complete_interval(window.engine, scheduler)
        assert MODE_COLORS[Mode.SHORT_BREAK][0] in window.styleSheet()
