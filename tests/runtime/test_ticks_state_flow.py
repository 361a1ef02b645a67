import logging
import unittest

from pomodoro import SessionSnapshot, SessionTick
from runtime.ticks import TickDependencies, TickProcessor
from runtime.ui import RuntimeUIPublisher


class _UIServerStub:
    def __init__(self):
        self.events: list[tuple[str, dict[str, object]]] = []
        self.states: list[tuple[str, str | None, dict[str, object]]] = []
        self.trace: list[tuple[str, str]] = []

    def publish(self, event_type: str, **payload):
        self.events.append((event_type, payload))
        self.trace.append(("event", event_type))

    def publish_state(self, state: str, *, message=None, **payload):
        self.states.append((state, message, payload))
        self.trace.append(("state", state))


def _processor(ui_server: _UIServerStub) -> TickProcessor:
    return TickProcessor(
        TickDependencies(
            logger=logging.getLogger("test"),
            ui=RuntimeUIPublisher(ui_server),
        )
    )


class TickStateFlowTests(unittest.TestCase):
    def test_plain_tick_publishes_session_update_only(self) -> None:
        ui = _UIServerStub()
        tick = SessionTick(
            snapshot=SessionSnapshot(
                phase="focus",
                remaining_seconds=1499,
                running=True,
                completed_sessions=0,
            )
        )

        _processor(ui).handle_session_tick(tick)

        self.assertEqual([], ui.states)
        self.assertEqual(1, len(ui.events))
        kind, payload = ui.events[0]
        self.assertEqual("session", kind)
        self.assertEqual("tick", payload["action"])
        self.assertEqual("24:59", payload["display"])
        self.assertEqual(1499, payload["remaining_seconds"])
        self.assertTrue(payload["running"])

    def test_focus_completion_publishes_transition_then_state(self) -> None:
        ui = _UIServerStub()
        tick = SessionTick(
            snapshot=SessionSnapshot(
                phase="break",
                remaining_seconds=300,
                running=True,
                completed_sessions=3,
            ),
            completed_phase="focus",
        )

        _processor(ui).handle_session_tick(tick)

        kind, payload = ui.events[0]
        self.assertEqual("session", kind)
        self.assertEqual("phase_completed", payload["action"])
        self.assertEqual("focus_completed", payload["reason"])
        self.assertEqual("Break", payload["label"])
        self.assertEqual(3, payload["completed_sessions"])
        self.assertEqual(1, len(ui.states))
        state, message, _ = ui.states[0]
        self.assertEqual("running", state)
        self.assertIn("3 so far", message or "")
        self.assertLess(
            ui.trace.index(("event", "session")),
            ui.trace.index(("state", "running")),
        )

    def test_break_completion_uses_break_reason(self) -> None:
        ui = _UIServerStub()
        tick = SessionTick(
            snapshot=SessionSnapshot(
                phase="focus",
                remaining_seconds=1500,
                running=True,
                completed_sessions=1,
            ),
            completed_phase="break",
        )

        _processor(ui).handle_session_tick(tick)

        _, payload = ui.events[0]
        self.assertEqual("break_completed", payload["reason"])
        self.assertEqual("25:00", payload["display"])


if __name__ == "__main__":
    unittest.main()
