"""Main timer display widget.

Layout (top → bottom):
    - Mode label ("Work Time", "Short Break", "Long Break")
    - ProgressRing with MM:SS
    - Start / Pause (one visible at a time) and Reset
    - Completed-session counter
"""

from __future__ import annotations

from PyQt6.QtCore import Qt
from PyQt6.QtWidgets import (
    QWidget, QVBoxLayout, QHBoxLayout, QLabel, QPushButton, QSizePolicy,
)

from ..timer.engine import TimerEngine, Mode
from .progress_ring import ProgressRing, format_clock


class TimerWidget(QWidget):
    """Binds a :class:`TimerEngine` to its on-screen controls."""

    def __init__(self, engine: TimerEngine, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._engine = engine
        self._build_ui()
        self._connect_signals()

        self._on_mode_changed(engine.mode, engine.total_time)
        self._on_sessions_changed(engine.sessions_completed)
        self._on_running_changed(engine.is_running)

    # ── build ─────────────────────────────────────────────────────────────

    def _build_ui(self) -> None:
        layout = QVBoxLayout(self)
        layout.setContentsMargins(24, 24, 24, 24)
        layout.setSpacing(16)
        layout.setAlignment(Qt.AlignmentFlag.AlignCenter)

        self._mode_label = QLabel(self)
        self._mode_label.setObjectName("modeLabel")
        self._mode_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        layout.addWidget(self._mode_label)

        ring_row = QHBoxLayout()
        ring_row.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self._ring = ProgressRing(self)
        self._ring.setSizePolicy(QSizePolicy.Policy.Fixed, QSizePolicy.Policy.Fixed)
        self._ring.setFixedSize(320, 320)
        ring_row.addWidget(self._ring)
        layout.addLayout(ring_row)

        btn_row = QHBoxLayout()
        btn_row.setSpacing(12)
        btn_row.setAlignment(Qt.AlignmentFlag.AlignCenter)

        self._start_btn = QPushButton("Start", self)
        self._start_btn.setObjectName("primaryButton")
        self._pause_btn = QPushButton("Pause", self)
        self._pause_btn.setObjectName("primaryButton")
        self._reset_btn = QPushButton("Reset", self)
        self._reset_btn.setObjectName("secondaryButton")

        for btn in (self._start_btn, self._pause_btn, self._reset_btn):
            # Space belongs to the window-level start/pause toggle
            btn.setFocusPolicy(Qt.FocusPolicy.NoFocus)

        btn_row.addWidget(self._start_btn)
        btn_row.addWidget(self._pause_btn)
        btn_row.addWidget(self._reset_btn)
        layout.addLayout(btn_row)

        self._session_label = QLabel(self)
        self._session_label.setObjectName("sessionLabel")
        self._session_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        layout.addWidget(self._session_label)

    def _connect_signals(self) -> None:
        self._start_btn.clicked.connect(self._engine.start)
        self._pause_btn.clicked.connect(self._engine.pause)
        self._reset_btn.clicked.connect(self._engine.reset)

        self._engine.tick.connect(self._refresh_display)
        self._engine.refreshed.connect(self._refresh_display)
        self._engine.mode_changed.connect(self._on_mode_changed)
        self._engine.sessions_changed.connect(self._on_sessions_changed)
        self._engine.running_changed.connect(self._on_running_changed)

    # ── engine slots ──────────────────────────────────────────────────────

    def _refresh_display(self, *_args) -> None:
        self._ring.set_time_text(format_clock(self._engine.time_left))
        self._ring.set_fraction(self._engine.progress_fraction())

    def _on_mode_changed(self, mode: Mode, _duration: int) -> None:
        self._mode_label.setText(mode.label)
        self._ring.apply_mode(mode)
        self._refresh_display()

    def _on_sessions_changed(self, count: int) -> None:
        self._session_label.setText(f"Sessions completed: {count}")

    def _on_running_changed(self, running: bool) -> None:
        self._start_btn.setVisible(not running)
        self._pause_btn.setVisible(running)

    # ── accessors (used by the window and tests) ──────────────────────────

    @property
    def ring(self) -> ProgressRing:
        return self._ring

    @property
    def mode_text(self) -> str:
        return self._mode_label.text()

    @property
    def session_text(self) -> str:
        return self._session_label.text()

    @property
    def start_button(self) -> QPushButton:
        return self._start_btn

    @property
    def pause_button(self) -> QPushButton:
        return self._pause_btn
