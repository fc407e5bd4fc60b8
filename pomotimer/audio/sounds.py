"""Completion beep, synthesized with numpy and played with QSoundEffect.

The tone is an 800 Hz sine lasting half a second whose gain falls
exponentially from 0.3 to 0.01.  It is rendered once to a WAV file in
the cache directory and reused on later launches.
"""

from __future__ import annotations

import io
import logging
import wave
from pathlib import Path

import numpy as np

from PyQt6.QtCore import QObject, QUrl
from PyQt6.QtMultimedia import QSoundEffect

from ..database.db import APP_DATA_DIR

LOGGER = logging.getLogger(__name__)

# ── paths ────────────────────────────────────────────────────────────────

SOUNDS_DIR = APP_DATA_DIR / "sounds"
BEEP_FILENAME = "beep.wav"

SAMPLE_RATE = 44100

BEEP_FREQUENCY = 800.0
BEEP_DURATION = 0.5
BEEP_START_GAIN = 0.3
BEEP_END_GAIN = 0.01


# ═══════════════════════════════════════════════════════════════════════════
#  WAV SYNTHESIS
# ═══════════════════════════════════════════════════════════════════════════


def _sine(freq: float, duration_s: float) -> np.ndarray:
    """Pure sine wave at *freq* Hz for *duration_s* seconds."""
    t = np.linspace(0, duration_s, int(SAMPLE_RATE * duration_s), endpoint=False)
    return np.sin(2 * np.pi * freq * t)


def _exponential_ramp(length: int, start: float, end: float) -> np.ndarray:
    """Gain curve falling geometrically from *start* to *end*."""
    return np.geomspace(start, end, length)


def _to_wav_bytes(samples: np.ndarray) -> bytes:
    """Convert a float64 numpy array (-1..1) to 16-bit PCM WAV bytes."""
    samples = np.clip(samples, -1.0, 1.0)
    int_samples = (samples * 32767).astype(np.int16)

    buf = io.BytesIO()
    with wave.open(buf, "wb") as wf:
        wf.setnchannels(1)
        wf.setsampwidth(2)
        wf.setframerate(SAMPLE_RATE)
        wf.writeframes(int_samples.tobytes())
    return buf.getvalue()


def generate_beep() -> bytes:
    tone = _sine(BEEP_FREQUENCY, BEEP_DURATION)
    gain = _exponential_ramp(len(tone), BEEP_START_GAIN, BEEP_END_GAIN)
    return _to_wav_bytes(tone * gain)


# ═══════════════════════════════════════════════════════════════════════════
#  SOUND MANAGER
# ═══════════════════════════════════════════════════════════════════════════


class SoundManager(QObject):
    """Caches the beep on disk and plays it on demand.

    Playback degrades silently: if the WAV cannot be written or the
    audio backend cannot load it, ``play_beep`` does nothing.
    """

    def __init__(
        self,
        parent: QObject | None = None,
        *,
        sounds_dir: Path | None = None,
    ) -> None:
        super().__init__(parent)
        self._enabled = True
        self._sounds_dir = sounds_dir or SOUNDS_DIR
        self._effect: QSoundEffect | None = None

        path = self._ensure_wav_file()
        if path is not None:
            self._effect = QSoundEffect(self)
            self._effect.setSource(QUrl.fromLocalFile(str(path)))

    # ── public API ────────────────────────────────────────────────────

    def set_enabled(self, enabled: bool) -> None:
        self._enabled = enabled

    @property
    def enabled(self) -> bool:
        return self._enabled

    @property
    def beep_path(self) -> Path:
        return self._sounds_dir / BEEP_FILENAME

    def play_beep(self) -> None:
        """Play the completion tone.  No-op if disabled or unavailable."""
        if not self._enabled or self._effect is None:
            return
        if self._effect.status() == QSoundEffect.Status.Error:
            LOGGER.debug("Audio unavailable, skipping beep")
            return
        self._effect.play()

    # ── internal ──────────────────────────────────────────────────────

    def _ensure_wav_file(self) -> Path | None:
        path = self.beep_path
        try:
            self._sounds_dir.mkdir(parents=True, exist_ok=True)
            if not path.exists():
                path.write_bytes(generate_beep())
        except OSError:
            LOGGER.warning("Could not cache beep at %s", path, exc_info=True)
            return None
        return path
