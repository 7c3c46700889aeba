"""
Ordered, non-reentrant snapshot delivery.

Owners commit a change and enqueue its snapshot while holding their own
lock, then call drain() with the lock released. Only the outermost drain()
delivers; a callback that mutates the owner again just enqueues, so every
subscriber sees snapshots in commit order.
"""

import logging
import threading
from collections import deque
from typing import Any, Callable, Deque, List, Tuple


logger = logging.getLogger(__name__)

Callback = Callable[[Any], None]


class SnapshotPublisher:
    """Delivers queued snapshots to subscribers in FIFO order.

    Attributes:
        name: Label used in log messages
    """

    def __init__(self, lock: threading.Lock, name: str = "publisher"):
        """
        Args:
            lock: The owner's lock; enqueue() and add_subscriber() must be
                called while holding it, drain() without it
            name: Label used in log messages
        """
        self.name = name
        self._lock = lock
        self._subscribers: List[Callback] = []
        # Each entry carries the subscribers registered at enqueue time
        self._pending: Deque[Tuple[Any, Tuple[Callback, ...]]] = deque()
        self._draining = False

    def enqueue(self, snapshot: Any) -> None:
        # Caller holds the owner's lock
        self._pending.append((snapshot, tuple(self._subscribers)))

    def add_subscriber(self, callback: Callback, current: Any) -> None:
        # Caller holds the owner's lock; only the new subscriber gets `current`
        self._subscribers.append(callback)
        self._pending.append((current, (callback,)))

    def remove_subscriber(self, callback: Callback) -> None:
        with self._lock:
            try:
                self._subscribers.remove(callback)
            except ValueError:
                pass

    def drain(self) -> None:
        """Deliver pending snapshots unless an outer drain is already running."""
        with self._lock:
            if self._draining:
                return
            self._draining = True
        while True:
            with self._lock:
                if not self._pending:
                    self._draining = False
                    return
                snapshot, targets = self._pending.popleft()
                active = [callback for callback in targets if callback in self._subscribers]
            for callback in active:
                self._deliver(callback, snapshot)

    def _deliver(self, callback: Callback, snapshot: Any) -> None:
        try:
            callback(snapshot)
        except Exception:
            logger.exception(f"[{self.name}] Subscriber {callback!r} failed")
