"""Allow running pomotimer as a module: python -m pomotimer."""

import logging
import os
import sys

from PyQt6.QtWidgets import QApplication

from .database.db import init_db
from .settings import SettingsStore
from .app import PomodoroWindow

LOGGER = logging.getLogger("pomotimer")


def main() -> None:
    logging.basicConfig(
        level=os.environ.get("POMOTIMER_LOG_LEVEL", "INFO").upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    init_db()
    LOGGER.info("Pomodoro Timer ready")

    app = QApplication(sys.argv)
    app.setApplicationName("Pomodoro Timer")
    app.setOrganizationName("pomotimer")

    window = PomodoroWindow(store=SettingsStore())
    window.show()

    sys.exit(app.exec())


if __name__ == "__main__":
    main()
