"""Cross-thread plumbing between the control surface and the engine.

ConfigChannel
    One-way FIFO of complete replacement values.  ``send`` never blocks;
    the consumer drains with ``latest`` once per cycle and keeps only the
    newest value it sees.
RunStateCell
    Shared run/stop flag behind a lock.  Level state, not an event
    stream: writers set it directly and the engine re-reads it every
    cycle.
"""
from __future__ import annotations

import queue
import threading
from typing import Generic, Optional, TypeVar

T = TypeVar("T")


class ConfigChannel(Generic[T]):
    """Unbounded single-producer / single-consumer value channel."""

    def __init__(self, name: str = "") -> None:
        self.name    = name
        self._queue: queue.SimpleQueue[T] = queue.SimpleQueue()
        self._closed = threading.Event()

    # ------------------------------------------------------------------
    # Producer side
    # ------------------------------------------------------------------

    def send(self, value: T) -> None:
        """Queue ``value``.  A send after ``close`` is dropped silently."""
        if self._closed.is_set():
            return
        self._queue.put(value)

    def close(self) -> None:
        """Mark the producer as gone; values already queued still arrive."""
        self._closed.set()

    @property
    def closed(self) -> bool:
        return self._closed.is_set()

    # ------------------------------------------------------------------
    # Consumer side
    # ------------------------------------------------------------------

    def latest(self) -> Optional[T]:
        """Drain everything pending and return the newest value, or None."""
        value: Optional[T] = None
        while True:
            try:
                value = self._queue.get_nowait()
            except queue.Empty:
                return value

    def __repr__(self) -> str:
        state = "closed" if self.closed else "open"
        return f"ConfigChannel({self.name!r}, {state})"


class RunStateCell:
    """Boolean run flag shared by the control surface and the engine."""

    def __init__(self, running: bool = False) -> None:
        self._lock    = threading.Lock()
        self._running = running

    def get(self) -> bool:
        with self._lock:
            return self._running

    def try_get(self, timeout: float) -> Optional[bool]:
        """Read the flag, or return None if the lock is not free in time."""
        if not self._lock.acquire(timeout=timeout):
            return None
        try:
            return self._running
        finally:
            self._lock.release()

    def set(self, running: bool) -> None:
        with self._lock:
            self._running = running

    def toggle(self) -> bool:
        """Invert the value held right now and return the new value."""
        with self._lock:
            self._running = not self._running
            return self._running

    def __repr__(self) -> str:
        return f"RunStateCell(running={self._running!r})"
