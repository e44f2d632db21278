"""A small in-memory byte cache whose entries expire after a fixed interval."""

from __future__ import annotations

import threading
import time
from dataclasses import dataclass
from datetime import timedelta


@dataclass(frozen=True)
class _Entry:
    created_at: float
    val: bytes


class Cache:
    """Thread-safe mapping of keys to bytes, reaped periodically in the background.

    Every ``interval`` seconds a background thread removes entries that are
    older than ``interval``.
    """

    def __init__(self, interval: float | timedelta) -> None:
        if isinstance(interval, timedelta):
            interval = interval.total_seconds()
        if interval <= 0:
            raise ValueError("cache interval must be positive")
        self._interval = float(interval)
        self._entries: dict[str, _Entry] = {}
        self._lock = threading.RLock()
        self._stop = threading.Event()
        self._reaper = threading.Thread(
            target=self._reap_loop, name="cache-reaper", daemon=True
        )
        self._reaper.start()

    def add(self, key: str, val: bytes) -> None:
        """Store ``val`` under ``key``, replacing any earlier value."""
        with self._lock:
            self._entries[key] = _Entry(time.monotonic(), bytes(val))

    def get(self, key: str) -> bytes | None:
        """Return the value stored under ``key``, or None if there is none."""
        with self._lock:
            entry = self._entries.get(key)
        return None if entry is None else entry.val

    def remove(self, key: str) -> bytes | None:
        """Remove ``key`` and return its value, or None if it was absent."""
        with self._lock:
            entry = self._entries.pop(key, None)
        return None if entry is None else entry.val

    def close(self) -> None:
        """Stop the background reaper. Stored entries are kept."""
        self._stop.set()
        if self._reaper.is_alive() and threading.current_thread() is not self._reaper:
            self._reaper.join()

    def __enter__(self) -> Cache:
        return self

    def __exit__(self, *args: object) -> None:
        self.close()

    def _reap_loop(self) -> None:
        while not self._stop.wait(self._interval):
            self._reap()

    def _reap(self) -> None:
        now = time.monotonic()
        with self._lock:
            expired = [
                key
                for key, entry in self._entries.items()
                if now - entry.created_at > self._interval
            ]
            for key in expired:
                del self._entries[key]