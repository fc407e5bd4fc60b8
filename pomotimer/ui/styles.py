"""Colours and the Qt stylesheet, keyed by timer mode."""

from __future__ import annotations

from ..timer.engine import Mode


# ── ring gradient per mode (primary, secondary) ──────────────────────────

MODE_COLORS: dict[Mode, tuple[str, str]] = {
    Mode.WORK:        ("#E74C3C", "#FF7F6E"),   # tomato red
    Mode.SHORT_BREAK: ("#27AE60", "#6FD49A"),   # fresh green
    Mode.LONG_BREAK:  ("#2980B9", "#74B3E0"),   # calm blue
}

# ── window background per mode ───────────────────────────────────────────

MODE_BACKGROUNDS: dict[Mode, str] = {
    Mode.WORK:        "#2B1D1F",
    Mode.SHORT_BREAK: "#1B2A22",
    Mode.LONG_BREAK:  "#1B2330",
}

TEXT_COLOR = "#F5F5F5"
MUTED_COLOR = "#A0A0B0"


def build_stylesheet(mode: Mode) -> str:
    """Application stylesheet for the given mode's colour theme."""
    bg = MODE_BACKGROUNDS[mode]
    primary, secondary = MODE_COLORS[mode]
    return f"""
        QMainWindow, QDialog {{
            background-color: {bg};
            color: {TEXT_COLOR};
        }}
        QLabel {{
            color: {TEXT_COLOR};
        }}
        QLabel#modeLabel {{
            font-size: 22px;
            font-weight: 700;
            letter-spacing: 2px;
        }}
        QLabel#sessionLabel {{
            color: {MUTED_COLOR};
            font-size: 13px;
        }}
        QPushButton {{
            min-width: 96px;
            padding: 8px 18px;
            border-radius: 8px;
            font-weight: 600;
        }}
        QPushButton#primaryButton {{
            background-color: {primary};
            color: white;
            border: none;
        }}
        QPushButton#primaryButton:hover {{
            background-color: {secondary};
        }}
        QPushButton#secondaryButton {{
            background-color: transparent;
            color: {TEXT_COLOR};
            border: 1px solid {MUTED_COLOR};
        }}
    """
