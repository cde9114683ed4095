"""
assets.py: Image loading for the pipe texture and the replaceable bird sprite.

Loading never raises into the game loop: failures are printed and the
caller keeps whatever it was drawing before.
"""

import io
import threading
from typing import Optional

import httpx
import pygame

from .constants import URL_FETCH_TIMEOUT


def load_image(path: str) -> Optional[pygame.Surface]:
    """Load an image file. Returns None if it can't be read."""
    try:
        return pygame.image.load(path)
    except (pygame.error, FileNotFoundError) as e:
        print(f"[Assets] Failed to load image {path}: {e}")
        return None


def fetch_image(url: str, timeout: float = URL_FETCH_TIMEOUT) -> pygame.Surface:
    """Download and decode an image. Raises on HTTP or decode errors."""
    response = httpx.get(url, timeout=timeout, follow_redirects=True)
    response.raise_for_status()
    return pygame.image.load(io.BytesIO(response.content))


class BirdImageLoader:
    """
    Loads a replacement bird image in the background.

    The main loop calls `poll()` once per frame; it returns the new surface
    exactly once, after loading finished. Until then the renderer keeps the
    previous image or the placeholder.
    """

    def __init__(self, timeout: float = URL_FETCH_TIMEOUT):
        self.timeout = timeout
        self._lock = threading.Lock()
        self._ready: Optional[pygame.Surface] = None
        self._threads = []

    def load_file(self, path: str) -> Optional[threading.Thread]:
        if not path or not path.strip():
            return None
        return self._start(self._load_file, path.strip())

    def load_url(self, url: str) -> Optional[threading.Thread]:
        if not url or not url.strip():
            return None
        return self._start(self._load_url, url.strip())

    def poll(self) -> Optional[pygame.Surface]:
        """Hand over a finished image, if any."""
        with self._lock:
            surface, self._ready = self._ready, None
        return surface

    def wait(self, timeout: Optional[float] = None):
        """Block until every started load has finished."""
        for thread in list(self._threads):
            thread.join(timeout)
        self._threads = [t for t in self._threads if t.is_alive()]

    def _start(self, target, source: str) -> threading.Thread:
        thread = threading.Thread(target=target, args=(source,), daemon=True)
        self._threads = [t for t in self._threads if t.is_alive()]
        self._threads.append(thread)
        thread.start()
        return thread

    def _deliver(self, surface: pygame.Surface):
        with self._lock:
            self._ready = surface

    def _load_file(self, path: str):
        surface = load_image(path)
        if surface is not None:
            self._deliver(surface)

    def _load_url(self, url: str):
        try:
            surface = fetch_image(url, self.timeout)
        except (httpx.HTTPError, httpx.InvalidURL, pygame.error) as e:
            print(f"[Assets] Failed to fetch bird image {url}: {e}")
            return
        self._deliver(surface)
