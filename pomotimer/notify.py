"""Desktop notification when an interval ends.

Uses the system tray balloon when the platform supports it and falls
back to a plain alert box otherwise.
"""

from __future__ import annotations

import logging

from PyQt6.QtWidgets import QMessageBox, QSystemTrayIcon, QWidget

from .timer.engine import Mode

LOGGER = logging.getLogger(__name__)

NOTIFICATION_TITLE = "Pomodoro Timer"
FALLBACK_MESSAGE = "Timer Complete!"

COMPLETION_MESSAGES: dict[Mode, str] = {
    Mode.WORK: "Work session complete! Time for a break.",
    Mode.SHORT_BREAK: "Break is over! Ready to work?",
    Mode.LONG_BREAK: "Long break is over! Ready to work?",
}


class Notifier:
    """Shows the completion message for a finished mode."""

    def __init__(
        self,
        tray_icon: QSystemTrayIcon | None,
        parent: QWidget | None = None,
    ) -> None:
        self._tray_icon = tray_icon
        self._parent = parent

    @property
    def supports_messages(self) -> bool:
        return (
            self._tray_icon is not None
            and self._tray_icon.isVisible()
            and self._tray_icon.supportsMessages()
        )

    def notify(self, finished: Mode) -> None:
        if self.supports_messages:
            self._tray_icon.showMessage(
                NOTIFICATION_TITLE, COMPLETION_MESSAGES[finished],
            )
            return
        LOGGER.debug("Tray messages unavailable, using alert box")
        self._alert()

    def _alert(self) -> None:
        box = QMessageBox(self._parent)
        box.setWindowTitle(NOTIFICATION_TITLE)
        box.setText(FALLBACK_MESSAGE)
        box.setIcon(QMessageBox.Icon.Information)
        # must not block the event loop
        box.open()
