"""Circular progress ring widget rendered with QPainter.

- The arc depletes clockwise from 12 o'clock as the interval runs.
- Colour-coded by mode.
- Shows MM:SS in bold at the centre.
"""

from __future__ import annotations

from PyQt6.QtCore import Qt, QRectF
from PyQt6.QtGui import QPainter, QPen, QColor, QConicalGradient, QFont
from PyQt6.QtWidgets import QWidget

from ..timer.engine import Mode
from .styles import MODE_COLORS, TEXT_COLOR


def format_clock(seconds: int) -> str:
    """Render seconds as zero-padded ``MM:SS``."""
    m, s = divmod(max(0, seconds), 60)
    return f"{m:02d}:{s:02d}"


class ProgressRing(QWidget):
    """Custom-painted circular timer ring."""

    RING_THICKNESS = 12

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._fraction: float = 1.0
        self._time_text: str = "00:00"
        self._primary_color = QColor(MODE_COLORS[Mode.WORK][0])
        self._secondary_color = QColor(MODE_COLORS[Mode.WORK][1])
        self._text_color = QColor(TEXT_COLOR)
        self.setMinimumSize(240, 240)

    # ── public API ────────────────────────────────────────────────────

    @property
    def fraction(self) -> float:
        return self._fraction

    @property
    def time_text(self) -> str:
        return self._time_text

    def set_fraction(self, fraction: float) -> None:
        """Portion of the ring still drawn, 1.0 (full) to 0.0 (empty)."""
        self._fraction = max(0.0, min(1.0, fraction))
        self.update()

    def set_time_text(self, text: str) -> None:
        self._time_text = text
        self.update()

    def apply_mode(self, mode: Mode) -> None:
        primary, secondary = MODE_COLORS[mode]
        self._primary_color = QColor(primary)
        self._secondary_color = QColor(secondary)
        self.update()

    # ══════════════════════════════════════════════════════════════════
    #  PAINTING
    # ══════════════════════════════════════════════════════════════════

    def paintEvent(self, event) -> None:  # type: ignore[override]
        painter = QPainter(self)
        painter.setRenderHint(QPainter.RenderHint.Antialiasing)

        w = self.width()
        h = self.height()
        cx, cy = w / 2, h / 2
        diameter = max(100, min(w, h) - 2 * self.RING_THICKNESS)
        radius = diameter / 2
        ring_rect = QRectF(cx - radius, cy - radius, diameter, diameter)

        # ── background track ─────────────────────────────────────────
        track_color = QColor(self._primary_color)
        track_color.setAlpha(40)
        track_pen = QPen(track_color, self.RING_THICKNESS, Qt.PenStyle.SolidLine)
        painter.setPen(track_pen)
        painter.drawEllipse(ring_rect)

        # ── remaining arc ────────────────────────────────────────────
        if self._fraction > 0.001:
            gradient = QConicalGradient(cx, cy, 90)
            gradient.setColorAt(0.0, self._primary_color)
            gradient.setColorAt(0.5, self._secondary_color)
            gradient.setColorAt(1.0, self._primary_color)

            arc_pen = QPen(gradient, self.RING_THICKNESS, Qt.PenStyle.SolidLine)
            arc_pen.setCapStyle(Qt.PenCapStyle.RoundCap)
            painter.setPen(arc_pen)

            # Qt arcs: start at 12 o'clock (90*16), go clockwise (negative)
            painter.drawArc(ring_rect, 90 * 16, -int(self._fraction * 360 * 16))

        # ── centre text ──────────────────────────────────────────────
        time_font = QFont()
        time_font.setPixelSize(56)
        time_font.setWeight(QFont.Weight.Bold)
        painter.setFont(time_font)
        painter.setPen(self._text_color)
        painter.drawText(ring_rect, Qt.AlignmentFlag.AlignCenter, self._time_text)

        painter.end()
