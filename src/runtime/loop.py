"""Runtime orchestration loop for clock ticks and UI commands."""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass
from queue import Empty, Queue
from typing import Any, Callable, Optional, Protocol

from app_config_schema import AppConfig
from contracts.ui_protocol import EVENT_ERROR, STATE_ERROR
from pomodoro import SessionClock
from pomodoro.constants import ACTION_SYNC, REASON_STARTUP

from .commands import SessionCommandDispatcher
from .events import ClockTickEvent, QueueTickPublisher, SessionCommandEvent
from .messages import status_message, ui_state
from .ticker import TickSource
from .ticks import TickDependencies, TickProcessor
from .ui import RuntimeUIPublisher, UIServerLike

EVENT_POLL_TIMEOUT_SECONDS = 0.25


class ManagedUIServer(UIServerLike, Protocol):
    def stop(self, timeout_seconds: float = 5.0) -> None:
        ...


@dataclass(frozen=True)
class RuntimeHooks:
    """Injectable lifecycle hooks used by runtime startup and shutdown flow."""
    setup_signal_handlers: Callable[[Callable[[], None]], None]


@dataclass(frozen=True)
class RuntimeBootstrap:
    """Dependency bundle required to construct the runtime engine."""
    logger: logging.Logger
    app_config: AppConfig
    clock: SessionClock
    event_queue: Queue[Any]
    ui_server: Optional[ManagedUIServer]
    hooks: RuntimeHooks


class RuntimeEngine:
    """Main runtime loop that owns the clock's tick source and command flow.

    Ticks and user commands both arrive through the event queue and are
    applied and published on the loop thread, one at a time.
    """
    def __init__(self, bootstrap: RuntimeBootstrap):
        self._bootstrap = bootstrap
        self._logger = bootstrap.logger
        self._clock = bootstrap.clock
        self._stop_requested = threading.Event()

        self._ui = RuntimeUIPublisher(bootstrap.ui_server)
        self._dispatcher = SessionCommandDispatcher(
            logger=self._logger,
            clock=self._clock,
            ui=self._ui,
        )
        self._tick_processor = TickProcessor(
            TickDependencies(
                logger=self._logger,
                ui=self._ui,
            )
        )
        self._tick_publisher = QueueTickPublisher(bootstrap.event_queue)
        self._tick_source = TickSource(
            self._tick_publisher.publish,
            interval_seconds=bootstrap.app_config.clock.tick_interval_seconds,
            logger=logging.getLogger("ticker"),
        )

    @property
    def clock(self) -> SessionClock:
        return self._clock

    def request_stop(self) -> None:
        self._stop_requested.set()

    def run(self) -> int:
        self._publish_startup_sync()

        try:
            self._bootstrap.hooks.setup_signal_handlers(self.request_stop)
            self._tick_source.start()
            self._logger.info(
                "Session clock ready (tick interval %.2fs)",
                self._tick_source.interval_seconds,
            )

            while not self._stop_requested.is_set():
                event = self._poll_event()
                if event is None:
                    continue
                self._handle_event(event)

            self._logger.info("Stop requested, leaving runtime loop.")
            return 0

        except KeyboardInterrupt:
            self._logger.info("Shutdown requested by keyboard interrupt.")
            return 0
        except Exception as error:
            self._logger.error("Unexpected error: %s", error, exc_info=True)
            self._ui.publish(
                EVENT_ERROR,
                state=STATE_ERROR,
                message=f"Runtime failed: {error}",
            )
            return 1
        finally:
            self._shutdown()

    def _publish_startup_sync(self) -> None:
        snapshot = self._clock.snapshot()
        self._ui.publish_session_update(
            snapshot,
            action=ACTION_SYNC,
            accepted=True,
            reason=REASON_STARTUP,
        )
        self._ui.publish_state(ui_state(snapshot), message=status_message(snapshot))

    def _poll_event(self) -> Optional[Any]:
        try:
            return self._bootstrap.event_queue.get(timeout=EVENT_POLL_TIMEOUT_SECONDS)
        except Empty:
            return None

    def _handle_event(self, event: Any) -> None:
        if isinstance(event, ClockTickEvent):
            self._tick_publisher.acknowledge()
            self._handle_tick()
            return

        if isinstance(event, SessionCommandEvent):
            self._logger.info(
                "UI command received at %s: %s",
                event.received_at.isoformat(),
                event.action,
            )
            self._dispatcher.handle_command(event.action)
            return

        self._logger.warning("Ignoring unknown event type: %s", type(event).__name__)

    def _handle_tick(self) -> None:
        tick = self._clock.tick()
        if tick is None:
            return

        try:
            self._tick_processor.handle_session_tick(tick)
        except Exception as error:
            self._logger.error("Tick publish failed: %s", error, exc_info=True)

    def _shutdown(self) -> None:
        self._logger.info("Stopping tick source...")
        self._tick_source.stop(timeout_seconds=5.0)

        ui_server = self._bootstrap.ui_server
        if ui_server is not None:
            self._logger.info("Stopping UI server...")
            try:
                ui_server.stop(timeout_seconds=5.0)
            except Exception as error:
                self._logger.error("Error stopping UI server: %s", error, exc_info=True)
