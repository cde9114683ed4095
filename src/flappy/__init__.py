"""Flappy: a single-player Flappy Bird clone built on pygame."""

__version__ = "1.0.0"
