"""Event dataclasses and publishers feeding the runtime queue."""

from __future__ import annotations

import threading
from dataclasses import dataclass
from datetime import datetime, timezone
from queue import Queue


@dataclass(frozen=True)
class SessionCommandEvent:
    """User action forwarded from the presentation layer."""
    action: str
    received_at: datetime


@dataclass(frozen=True)
class ClockTickEvent:
    """Signal from the tick source that one clock second is due."""
    due_at: datetime


class QueueCommandPublisher:
    """Command publisher that pushes UI actions onto the runtime queue.

    Called from the websocket thread; `Queue.put` never blocks here because
    the queue is unbounded.
    """

    def __init__(self, queue: Queue):
        self._queue = queue

    def publish(self, action: str) -> None:
        self._queue.put(
            SessionCommandEvent(action=action, received_at=datetime.now(timezone.utc))
        )


class QueueTickPublisher:
    """Tick publisher that keeps at most one pending tick on the runtime queue.

    A tick that comes due while the previous one is still queued is dropped,
    so a stalled runtime loop never replays a burst of seconds.
    """

    def __init__(self, queue: Queue):
        self._queue = queue
        self._pending = threading.Event()

    @property
    def pending(self) -> bool:
        return self._pending.is_set()

    def publish(self) -> bool:
        if self._pending.is_set():
            return False
        self._pending.set()
        self._queue.put(ClockTickEvent(due_at=datetime.now(timezone.utc)))
        return True

    def acknowledge(self) -> None:
        self._pending.clear()
