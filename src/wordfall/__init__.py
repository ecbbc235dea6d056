"""WordFall — a typing rhythm game built around a timer-driven judgment engine."""

__version__ = "0.1.0"
