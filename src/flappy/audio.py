"""
audio.py: Sound effect output for tap and death events.

The engine only knows the `AudioOutput` protocol: `play(key)` starts the
sound from the beginning, cutting off a previous playback of the same key.

    sounds = Sounds()
    sounds.load_optional("tap", TAP_SOUND_PATH)
    sounds.play("tap")

All operations fail gracefully if the mixer can't initialize or a file is
missing; errors are printed once and calls become no-ops.
"""

import os
from typing import Dict, Optional, Protocol, Set

import pygame

from .constants import MUTE


class AudioOutput(Protocol):
    def play(self, key: str) -> None:
        ...


class NullAudio:
    """Audio output that does nothing (headless runs, --mute)."""

    def play(self, key: str) -> None:
        return None


class Sounds:
    """pygame.mixer backed registry of short sound effects, keyed by name."""

    def __init__(self, mute: bool = MUTE):
        self.mute = mute
        self._inited = False
        self._failed_init = False
        self._sounds: Dict[str, pygame.mixer.Sound] = {}
        self._missing_warned: Set[str] = set()

    def ensure_init(self) -> bool:
        """Initialize pygame.mixer if needed. Safe to call many times."""
        if self._inited:
            return True
        if self._failed_init:
            return False
        try:
            if pygame.mixer.get_init() is None:
                pygame.mixer.init()
            self._inited = pygame.mixer.get_init() is not None
            return self._inited
        except pygame.error as e:
            print(f"[Sounds] Mixer init failed: {e}")
            self._failed_init = True
            return False

    def load(self, key: str, path: str) -> Optional[pygame.mixer.Sound]:
        """Load a sound file and register it under `key`. None on failure."""
        if not self.ensure_init():
            return None
        try:
            snd = pygame.mixer.Sound(path)
        except (pygame.error, FileNotFoundError) as e:
            print(f"[Sounds] Failed to load '{key}' from {path}: {e}")
            return None
        self._sounds[key] = snd
        return snd

    def load_optional(self, key: str, path: str) -> Optional[pygame.mixer.Sound]:
        """Load sound if the file exists; otherwise print a note and return None."""
        if not os.path.exists(path):
            print(f"[Sounds] Skipping missing file for '{key}': {path}")
            return None
        return self.load(key, path)

    def is_loaded(self, key: str) -> bool:
        return key in self._sounds

    def play(self, key: str) -> None:
        """Play `key` from time zero. Rapid repeats restart, never overlap."""
        if self.mute or not self._inited:
            return
        snd = self._sounds.get(key)
        if snd is None:
            if key not in self._missing_warned:
                print(f"[Sounds] Warning: sound '{key}' not loaded")
                self._missing_warned.add(key)
            return
        snd.stop()
        snd.play()
