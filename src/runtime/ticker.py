"""Background tick source that signals the runtime about once a second."""

from __future__ import annotations

import logging
import threading
from typing import Callable, Optional

DEFAULT_TICK_INTERVAL_SECONDS = 1.0


class TickSource:
    """Calls `on_tick` on a fixed cadence from a daemon thread.

    The callback only signals that a tick is due; the runtime loop advances
    the clock. Late or missed wakeups are not made up.
    """

    def __init__(
        self,
        on_tick: Callable[[], object],
        *,
        interval_seconds: float = DEFAULT_TICK_INTERVAL_SECONDS,
        logger: Optional[logging.Logger] = None,
    ):
        if interval_seconds <= 0:
            raise ValueError("interval_seconds must be greater than zero")

        self._on_tick = on_tick
        self._interval_seconds = float(interval_seconds)
        self._logger = logger or logging.getLogger("ticker")
        self._thread: Optional[threading.Thread] = None
        self._stop_event = threading.Event()

    @property
    def interval_seconds(self) -> float:
        return self._interval_seconds

    @property
    def is_running(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    def start(self) -> None:
        if self.is_running:
            self._logger.warning("Tick source is already running")
            return

        self._stop_event.clear()
        self._thread = threading.Thread(
            target=self._run,
            daemon=True,
            name="tick-source",
        )
        self._thread.start()
        self._logger.debug("Tick source started (interval=%.2fs)", self._interval_seconds)

    def stop(self, timeout_seconds: float = 5.0) -> None:
        if self._thread is None:
            return

        self._stop_event.set()
        self._thread.join(timeout=timeout_seconds)
        if self._thread.is_alive():
            self._logger.error(
                "Tick source thread did not stop within %.1fs",
                timeout_seconds,
            )
            return

        self._thread = None
        self._logger.debug("Tick source stopped")

    def _run(self) -> None:
        while not self._stop_event.wait(self._interval_seconds):
            self._tick_once()

    def _tick_once(self) -> None:
        try:
            self._on_tick()
        except Exception as error:
            self._logger.error("Tick callback failed: %s", error, exc_info=True)
