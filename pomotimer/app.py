"""Main application window for pomotimer."""

from __future__ import annotations

import logging

from PyQt6.QtCore import Qt
from PyQt6.QtGui import QAction, QColor, QIcon, QKeySequence, QPainter, QPixmap
from PyQt6.QtWidgets import (
    QMainWindow, QWidget, QVBoxLayout, QHBoxLayout, QPushButton,
    QSystemTrayIcon,
)

from .timer.engine import TimerEngine, Mode
from .timer.scheduler import Scheduler
from .settings import SettingsStore
from .audio.sounds import SoundManager
from .notify import Notifier, NOTIFICATION_TITLE
from .ui.timer_widget import TimerWidget
from .ui.settings_dialog import SettingsDialog
from .ui.progress_ring import format_clock
from .ui.styles import MODE_COLORS, build_stylesheet

LOGGER = logging.getLogger(__name__)


# ── tray-icon image generation ────────────────────────────────────────────


def _make_mode_icon(mode: Mode) -> QIcon:
    """32×32 filled circle in the mode's primary colour."""
    size = 64  # draw at 2× for high-DPI
    pixmap = QPixmap(size, size)
    pixmap.fill(QColor(0, 0, 0, 0))
    p = QPainter(pixmap)
    p.setRenderHint(QPainter.RenderHint.Antialiasing)
    colour = QColor(MODE_COLORS[mode][0])
    p.setBrush(colour)
    p.setPen(colour.darker(120))
    p.drawEllipse(4, 4, size - 8, size - 8)
    p.end()
    pixmap.setDevicePixelRatio(2.0)
    return QIcon(pixmap)


class PomodoroWindow(QMainWindow):
    """Main application window: the presentation side of the engine."""

    def __init__(
        self,
        *,
        store: SettingsStore | None = None,
        scheduler: Scheduler | None = None,
        sound_manager: SoundManager | None = None,
    ) -> None:
        super().__init__()
        self.setMinimumSize(400, 520)
        self.setFocusPolicy(Qt.FocusPolicy.StrongFocus)

        # ── engine ────────────────────────────────────────────────────
        self._engine = TimerEngine(self, store=store, scheduler=scheduler)

        # ── sound + notifications ─────────────────────────────────────
        self._sound_manager = sound_manager or SoundManager(parent=self)
        self._sound_manager.set_enabled(self._engine.settings.sound_enabled)

        self._tray_icon: QSystemTrayIcon | None = None
        if QSystemTrayIcon.isSystemTrayAvailable():
            self._tray_icon = QSystemTrayIcon(self)
            self._tray_icon.setIcon(_make_mode_icon(self._engine.mode))
            self._tray_icon.setToolTip(NOTIFICATION_TITLE)
            self._tray_icon.show()
        self._notifier = Notifier(self._tray_icon, self)

        # ── central widget ────────────────────────────────────────────
        central = QWidget()
        self.setCentralWidget(central)
        root = QVBoxLayout(central)
        root.setContentsMargins(16, 12, 16, 12)

        top_bar = QHBoxLayout()
        top_bar.addStretch()
        self._settings_btn = QPushButton("Settings", central)
        self._settings_btn.setObjectName("secondaryButton")
        self._settings_btn.setFocusPolicy(Qt.FocusPolicy.NoFocus)
        self._settings_btn.clicked.connect(self.open_settings)
        top_bar.addWidget(self._settings_btn)
        root.addLayout(top_bar)

        self._timer_widget = TimerWidget(self._engine, central)
        root.addWidget(self._timer_widget)

        self._settings_dialog: SettingsDialog | None = None

        self._setup_shortcuts()
        self._connect_engine()
        self._apply_mode(self._engine.mode)
        self._update_title()

    # ── accessors ─────────────────────────────────────────────────────

    @property
    def engine(self) -> TimerEngine:
        return self._engine

    @property
    def timer_widget(self) -> TimerWidget:
        return self._timer_widget

    def is_settings_open(self) -> bool:
        return self._settings_dialog is not None

    # ══════════════════════════════════════════════════════════════════
    #  WIRING
    # ══════════════════════════════════════════════════════════════════

    def _setup_shortcuts(self) -> None:
        settings_action = QAction("Settings…", self)
        settings_action.setShortcut(QKeySequence("Ctrl+,"))
        settings_action.triggered.connect(self.open_settings)
        self.addAction(settings_action)

    def _connect_engine(self) -> None:
        self._engine.tick.connect(self._update_title)
        self._engine.refreshed.connect(self._update_title)
        self._engine.mode_changed.connect(self._on_mode_changed)
        self._engine.session_complete.connect(self._on_session_complete)

    # ══════════════════════════════════════════════════════════════════
    #  TIMER SIGNALS
    # ══════════════════════════════════════════════════════════════════

    def _on_mode_changed(self, mode: Mode, _duration: int) -> None:
        self._apply_mode(mode)
        self._update_title()

    def _on_session_complete(self, finished: Mode) -> None:
        LOGGER.info("%s finished", finished.label)
        if self._engine.settings.sound_enabled:
            self._sound_manager.play_beep()
        self._notifier.notify(finished)

    def _apply_mode(self, mode: Mode) -> None:
        self.setStyleSheet(build_stylesheet(mode))
        if self._tray_icon is not None:
            self._tray_icon.setIcon(_make_mode_icon(mode))

    def _update_title(self, *_args) -> None:
        self.setWindowTitle(
            f"{format_clock(self._engine.time_left)} - {NOTIFICATION_TITLE}"
        )

    # ══════════════════════════════════════════════════════════════════
    #  SETTINGS
    # ══════════════════════════════════════════════════════════════════

    def open_settings(self) -> None:
        """Show the settings form; Save applies it to the engine."""
        if self._settings_dialog is not None:
            return
        dialog = SettingsDialog(self._engine.settings, self)
        dialog.finished.connect(self._on_settings_closed)
        self._settings_dialog = dialog
        dialog.open()

    def _on_settings_closed(self, result: int) -> None:
        dialog, self._settings_dialog = self._settings_dialog, None
        if dialog is None:
            return
        if result == SettingsDialog.DialogCode.Accepted.value:
            new_settings = dialog.settings()
            self._engine.apply_settings(new_settings)
            self._sound_manager.set_enabled(new_settings.sound_enabled)
        dialog.deleteLater()

    # ══════════════════════════════════════════════════════════════════
    #  KEYBOARD
    # ══════════════════════════════════════════════════════════════════

    def toggle_running(self) -> None:
        """Space bar: start when stopped, pause when running."""
        if self.is_settings_open():
            return
        if self._engine.is_running:
            self._engine.pause()
        else:
            self._engine.start()

    def keyPressEvent(self, event) -> None:  # type: ignore[override]
        if event.key() == Qt.Key.Key_Space and not event.modifiers():
            self.toggle_running()
            event.accept()
            return
        super().keyPressEvent(event)

    # ══════════════════════════════════════════════════════════════════
    #  WINDOW EVENTS
    # ══════════════════════════════════════════════════════════════════

    def closeEvent(self, event) -> None:  # type: ignore[override]
        self._engine.pause()
        if self._tray_icon is not None:
            self._tray_icon.hide()
        event.accept()
