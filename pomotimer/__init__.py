"""pomotimer: a Pomodoro work/break countdown timer."""

__version__ = "0.1.0"
