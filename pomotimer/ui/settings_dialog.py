"""Settings dialog for pomotimer.

A modal form over the timer settings.  Nothing is saved here: on Save
the dialog builds a new :class:`Settings` and the window hands it to
the engine, which persists it.
"""

from __future__ import annotations

from PyQt6.QtWidgets import (
    QDialog, QVBoxLayout, QHBoxLayout, QFormLayout,
    QLabel, QSpinBox, QCheckBox, QPushButton, QWidget,
)

from ..settings import Settings


class SettingsDialog(QDialog):
    """Modal dialog for the timer preferences."""

    def __init__(self, settings: Settings, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.setWindowTitle("Settings")
        self.setMinimumWidth(360)
        self.setModal(True)

        self._build_ui()
        self._populate(settings)

    # ══════════════════════════════════════════════════════════════════
    #  BUILD UI
    # ══════════════════════════════════════════════════════════════════

    def _build_ui(self) -> None:
        root = QVBoxLayout(self)
        root.setContentsMargins(24, 20, 24, 20)
        root.setSpacing(16)

        title = QLabel("Timer Settings")
        title.setStyleSheet("font-size: 15px; font-weight: 700;")
        root.addWidget(title)

        form = QFormLayout()
        form.setHorizontalSpacing(20)
        form.setVerticalSpacing(10)

        self._work_spin = self._minutes_spin(1, 60)
        form.addRow("Work duration:", self._work_spin)

        self._short_spin = self._minutes_spin(1, 30)
        form.addRow("Short break:", self._short_spin)

        self._long_spin = self._minutes_spin(1, 60)
        form.addRow("Long break:", self._long_spin)

        self._interval_spin = QSpinBox()
        self._interval_spin.setRange(1, 10)
        form.addRow("Long break every:", self._interval_spin)

        self._sound_cb = QCheckBox("Sound")
        form.addRow("", self._sound_cb)

        self._auto_breaks_cb = QCheckBox("Auto-start breaks")
        form.addRow("", self._auto_breaks_cb)

        self._auto_work_cb = QCheckBox("Auto-start pomodoros")
        form.addRow("", self._auto_work_cb)

        root.addLayout(form)

        btn_row = QHBoxLayout()
        btn_row.addStretch()
        cancel_btn = QPushButton("Cancel")
        cancel_btn.setObjectName("secondaryButton")
        cancel_btn.clicked.connect(self.reject)
        save_btn = QPushButton("Save")
        save_btn.setObjectName("primaryButton")
        save_btn.setDefault(True)
        save_btn.clicked.connect(self.accept)
        btn_row.addWidget(cancel_btn)
        btn_row.addWidget(save_btn)
        root.addLayout(btn_row)

    @staticmethod
    def _minutes_spin(low: int, high: int) -> QSpinBox:
        spin = QSpinBox()
        spin.setRange(low, high)
        spin.setSuffix(" min")
        return spin

    # ══════════════════════════════════════════════════════════════════
    #  POPULATE / COLLECT
    # ══════════════════════════════════════════════════════════════════

    def _populate(self, s: Settings) -> None:
        self._set_spin(self._work_spin, s.work_duration)
        self._set_spin(self._short_spin, s.short_break_duration)
        self._set_spin(self._long_spin, s.long_break_duration)
        self._set_spin(self._interval_spin, s.long_break_interval)
        self._sound_cb.setChecked(s.sound_enabled)
        self._auto_breaks_cb.setChecked(s.auto_start_breaks)
        self._auto_work_cb.setChecked(s.auto_start_pomodoros)

    @staticmethod
    def _set_spin(spin: QSpinBox, value: int) -> None:
        """Show a stored value as-is, even if it lies above the form's range."""
        if value > spin.maximum():
            spin.setMaximum(value)
        spin.setValue(value)

    def settings(self) -> Settings:
        """The form's current values as a new Settings object."""
        return Settings(
            work_duration=self._work_spin.value(),
            short_break_duration=self._short_spin.value(),
            long_break_duration=self._long_spin.value(),
            long_break_interval=self._interval_spin.value(),
            sound_enabled=self._sound_cb.isChecked(),
            auto_start_breaks=self._auto_breaks_cb.isChecked(),
            auto_start_pomodoros=self._auto_work_cb.isChecked(),
        )
