"""Audio package."""

from .sounds import SoundManager, generate_beep

__all__ = ["SoundManager", "generate_beep"]
