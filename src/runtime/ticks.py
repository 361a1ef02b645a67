"""Tick handler that publishes countdown and phase transition updates."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from pomodoro import SessionTick
from pomodoro.constants import (
    ACTION_PHASE_COMPLETED,
    ACTION_TICK,
    PHASE_FOCUS,
    REASON_BREAK_COMPLETED,
    REASON_FOCUS_COMPLETED,
    REASON_TICK,
)

from .messages import phase_completed_message, ui_state
from .ui import RuntimeUIPublisher


@dataclass(frozen=True)
class TickDependencies:
    """Dependencies required for processing session clock ticks."""
    logger: logging.Logger
    ui: RuntimeUIPublisher


class TickProcessor:
    """Publishes tick side effects to the UI."""
    def __init__(self, dependencies: TickDependencies):
        self._dependencies = dependencies

    def handle_session_tick(self, tick: SessionTick) -> None:
        deps = self._dependencies
        if tick.completed_phase is not None:
            reason = (
                REASON_FOCUS_COMPLETED
                if tick.completed_phase == PHASE_FOCUS
                else REASON_BREAK_COMPLETED
            )
            deps.ui.publish_session_update(
                tick.snapshot,
                action=ACTION_PHASE_COMPLETED,
                accepted=True,
                reason=reason,
            )
            deps.ui.publish_state(
                ui_state(tick.snapshot),
                message=phase_completed_message(tick.completed_phase, tick.snapshot),
            )
            deps.logger.debug("Published phase transition: %s", reason)
            return

        deps.ui.publish_session_update(
            tick.snapshot,
            action=ACTION_TICK,
            accepted=True,
            reason=REASON_TICK,
        )
