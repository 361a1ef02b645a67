"""Dispatcher that applies user actions to the session clock."""

from __future__ import annotations

import logging

from pomodoro import SessionActionResult, SessionClock

from .messages import status_message, ui_state
from .ui import RuntimeUIPublisher


class SessionCommandDispatcher:
    """Routes Start/Pause, Reset, and Skip actions to the clock."""
    def __init__(
        self,
        *,
        logger: logging.Logger,
        clock: SessionClock,
        ui: RuntimeUIPublisher,
    ):
        self._logger = logger
        self._clock = clock
        self._ui = ui

    def handle_command(self, action: str) -> SessionActionResult:
        result = self._clock.apply(action)
        if not result.accepted:
            self._logger.warning(
                "Rejected session command: action=%s reason=%s",
                action,
                result.reason,
            )

        self._ui.publish_session_update(
            result.snapshot,
            action=result.action,
            accepted=result.accepted,
            reason=result.reason,
        )
        if result.accepted:
            self._ui.publish_state(
                ui_state(result.snapshot),
                message=status_message(result.snapshot),
            )
        return result
