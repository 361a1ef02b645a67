from __future__ import annotations

from typing import Any, Optional, Protocol

from contracts.ui_protocol import EVENT_SESSION
from pomodoro import SessionSnapshot, format_clock


class UIServerLike(Protocol):
    def publish(self, event_type: str, **payload: Any) -> None:
        ...

    def publish_state(
        self,
        state: str,
        *,
        message: Optional[str] = None,
        **payload: Any,
    ) -> None:
        ...


def session_payload(snapshot: SessionSnapshot) -> dict[str, Any]:
    """Project a clock snapshot into the fields the web UI renders."""
    return {
        "phase": snapshot.phase,
        "label": snapshot.label,
        "remaining_seconds": snapshot.remaining_seconds,
        "duration_seconds": snapshot.duration_seconds,
        "display": format_clock(snapshot.remaining_seconds),
        "running": snapshot.running,
        "completed_sessions": snapshot.completed_sessions,
    }


class RuntimeUIPublisher:
    def __init__(self, ui_server: Optional[UIServerLike]):
        self._ui_server = ui_server

    def publish(self, event_type: str, **payload: Any) -> None:
        if self._ui_server:
            self._ui_server.publish(event_type, **payload)

    def publish_state(
        self,
        state: str,
        *,
        message: Optional[str] = None,
        **payload: Any,
    ) -> None:
        if self._ui_server:
            self._ui_server.publish_state(state, message=message, **payload)

    def publish_session_update(
        self,
        snapshot: SessionSnapshot,
        *,
        action: str,
        accepted: Optional[bool] = None,
        reason: str = "",
    ) -> None:
        payload: dict[str, Any] = {"action": action, **session_payload(snapshot)}
        if accepted is not None:
            payload["accepted"] = accepted
        if reason:
            payload["reason"] = reason
        self.publish(EVENT_SESSION, **payload)
