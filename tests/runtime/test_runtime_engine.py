import logging
import threading
import time
import unittest
from queue import Queue
from typing import Any

from app_config_schema import AppConfig, ClockSettings, LoggingSettings, UIServerSettings
from pomodoro import FOCUS_SECONDS, SessionClock
from runtime import QueueCommandPublisher, RuntimeBootstrap, RuntimeEngine, RuntimeHooks


class _UIServerStub:
    def __init__(self):
        self.events: list[tuple[str, dict[str, object]]] = []
        self.states: list[tuple[str, str | None, dict[str, object]]] = []
        self.stopped = False
        self._lock = threading.Lock()

    def publish(self, event_type: str, **payload):
        with self._lock:
            self.events.append((event_type, payload))

    def publish_state(self, state: str, *, message=None, **payload):
        with self._lock:
            self.states.append((state, message, payload))

    def stop(self, timeout_seconds: float = 5.0) -> None:
        self.stopped = True


def _app_config(tick_interval_seconds: float = 60.0) -> AppConfig:
    return AppConfig(
        logging=LoggingSettings(),
        clock=ClockSettings(tick_interval_seconds=tick_interval_seconds),
        ui_server=UIServerSettings(enabled=False),
        source_file="config.toml",
    )


def _wait_for(predicate, timeout: float = 5.0) -> bool:
    deadline = time.monotonic() + timeout
    while time.monotonic() < deadline:
        if predicate():
            return True
        time.sleep(0.01)
    return predicate()


class RuntimeEngineTests(unittest.TestCase):
    def setUp(self) -> None:
        self.engine = self._build_engine()

    def _build_engine(self, tick_interval_seconds: float = 60.0) -> RuntimeEngine:
        self.ui_server = _UIServerStub()
        self.event_queue: Queue[Any] = Queue()
        self.clock = SessionClock()
        self.stop_callbacks: list = []
        return RuntimeEngine(
            RuntimeBootstrap(
                logger=logging.getLogger("test.runtime"),
                app_config=_app_config(tick_interval_seconds),
                clock=self.clock,
                event_queue=self.event_queue,
                ui_server=self.ui_server,
                hooks=RuntimeHooks(setup_signal_handlers=self.stop_callbacks.append),
            )
        )

    def _drain_queue(self) -> None:
        while not self.event_queue.empty():
            self.engine._handle_event(self.event_queue.get_nowait())

    def _session_payloads(self) -> list[dict[str, object]]:
        with self.ui_server._lock:
            return [payload for kind, payload in self.ui_server.events if kind == "session"]

    def _assert_last_session_matches_clock(self) -> None:
        snapshot = self.clock.snapshot()
        last = self._session_payloads()[-1]
        self.assertEqual(snapshot.running, last["running"])
        self.assertEqual(snapshot.phase, last["phase"])
        self.assertEqual(snapshot.remaining_seconds, last["remaining_seconds"])
        self.assertEqual(snapshot.completed_sessions, last["completed_sessions"])

    def _run_in_thread(self) -> tuple[threading.Thread, list[int]]:
        exit_codes: list[int] = []
        thread = threading.Thread(target=lambda: exit_codes.append(self.engine.run()))
        thread.start()
        return thread, exit_codes

    def test_engine_applies_queued_commands_and_stops_cleanly(self) -> None:
        thread, exit_codes = self._run_in_thread()
        try:
            QueueCommandPublisher(self.event_queue).publish("toggle_run")
            self.assertTrue(_wait_for(lambda: self.clock.snapshot().running))
        finally:
            self.engine.request_stop()
            thread.join(timeout=5.0)

        self.assertFalse(thread.is_alive())
        self.assertEqual([0], exit_codes)
        self.assertTrue(self.ui_server.stopped)
        self.assertIs(self.clock, self.engine.clock)

        first_kind, first_payload = self.ui_server.events[0]
        self.assertEqual("session", first_kind)
        self.assertEqual("sync", first_payload["action"])
        self.assertEqual("startup", first_payload["reason"])

    def test_signal_hook_receives_stop_callback(self) -> None:
        thread, exit_codes = self._run_in_thread()
        try:
            self.assertTrue(_wait_for(lambda: bool(self.stop_callbacks)))
            self.stop_callbacks[0]()
        finally:
            thread.join(timeout=5.0)

        self.assertEqual([0], exit_codes)

    def test_unknown_queue_events_are_ignored(self) -> None:
        thread, exit_codes = self._run_in_thread()
        try:
            with self.assertLogs("test.runtime", level="WARNING") as logs:
                self.event_queue.put(object())
                self.assertTrue(
                    _wait_for(lambda: any("unknown event" in line for line in logs.output))
                )
        finally:
            self.engine.request_stop()
            thread.join(timeout=5.0)

        self.assertEqual([0], exit_codes)
        self.assertFalse(self.clock.snapshot().running)

    def test_tick_due_before_pause_is_published_before_pause(self) -> None:
        self.clock.toggle_run()
        self.engine._tick_publisher.publish()
        QueueCommandPublisher(self.event_queue).publish("toggle_run")

        self._drain_queue()

        payloads = self._session_payloads()
        self.assertEqual(["tick", "toggle_run"], [p["action"] for p in payloads])
        self.assertEqual(FOCUS_SECONDS - 1, payloads[-1]["remaining_seconds"])
        self.assertFalse(payloads[-1]["running"])
        self.assertEqual("paused", self.ui_server.states[-1][0])
        self._assert_last_session_matches_clock()

    def test_tick_due_after_pause_publishes_nothing(self) -> None:
        self.clock.toggle_run()
        QueueCommandPublisher(self.event_queue).publish("toggle_run")
        self.engine._tick_publisher.publish()

        self._drain_queue()

        payloads = self._session_payloads()
        self.assertEqual(["toggle_run"], [p["action"] for p in payloads])
        self.assertEqual(FOCUS_SECONDS, self.clock.snapshot().remaining_seconds)
        self._assert_last_session_matches_clock()

    def test_handled_tick_releases_pending_slot(self) -> None:
        self.clock.toggle_run()
        self.engine._tick_publisher.publish()
        self._drain_queue()

        self.assertTrue(self.engine._tick_publisher.publish())
        self._drain_queue()

        self.assertEqual(FOCUS_SECONDS - 2, self.clock.snapshot().remaining_seconds)

    def test_concurrent_ticks_and_commands_leave_last_update_current(self) -> None:
        self.engine = self._build_engine(tick_interval_seconds=0.001)
        thread, exit_codes = self._run_in_thread()
        try:
            publisher = QueueCommandPublisher(self.event_queue)
            for _ in range(50):
                publisher.publish("toggle_run")
                threading.Event().wait(timeout=0.002)
            publisher.publish("skip")
            self.assertTrue(
                _wait_for(
                    lambda: any(p["action"] == "skip" for p in self._session_payloads())
                )
            )
        finally:
            self.engine.request_stop()
            thread.join(timeout=5.0)

        self.assertEqual([0], exit_codes)
        self.assertFalse(self.clock.snapshot().running)
        self._assert_last_session_matches_clock()


if __name__ == "__main__":
    unittest.main()
