"""A thread-safe byte cache whose entries expire after a fixed interval."""

from __future__ import annotations

import threading
import time
from collections.abc import Callable


class Cache:
    """Stores values by key; a background thread drops entries older than ``interval`` seconds."""

    def __init__(self, interval: float, *, clock: Callable[[], float] = time.monotonic) -> None:
        if interval <= 0:
            raise ValueError("cache interval must be positive")
        self.interval = interval
        self._clock = clock
        self._items: dict[str, tuple[float, bytes]] = {}
        self._lock = threading.Lock()
        self._stopped = threading.Event()
        self._reaper = threading.Thread(target=self._reap_loop, daemon=True)
        self._reaper.start()

    def add(self, key: str, val: bytes) -> None:
        with self._lock:
            self._items[key] = (self._clock(), bytes(val))

    def get(self, key: str) -> bytes | None:
        """Return the value stored under ``key``, or None if there is none."""
        with self._lock:
            entry = self._items.get(key)
        return None if entry is None else entry[1]

    def reap(self) -> int:
        """Remove expired entries and return how many went."""
        now = self._clock()
        with self._lock:
            expired = [k for k, (created, _) in self._items.items() if now - created > self.interval]
            for key in expired:
                del self._items[key]
        if expired:
            print(f"Reaped {len(expired)} expired cache entries")
        return len(expired)

    def close(self) -> None:
        """Stop the background reaper."""
        self._stopped.set()
        if self._reaper is not threading.current_thread():
            self._reaper.join()

    def _reap_loop(self) -> None:
        while not self._stopped.wait(self.interval):
            self.reap()