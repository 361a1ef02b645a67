"""Thread-safe in-memory focus/break session clock."""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass
from typing import Literal, Optional

from .constants import (
    ACTION_RESET,
    ACTION_SKIP,
    ACTION_TOGGLE_RUN,
    BREAK_SECONDS,
    FOCUS_SECONDS,
    PHASE_BREAK,
    PHASE_FOCUS,
    REASON_PAUSED,
    REASON_RESET,
    REASON_SKIPPED,
    REASON_STARTED,
    REASON_UNSUPPORTED_ACTION,
)
from .display import phase_label

SessionPhase = Literal["focus", "break"]

_PHASE_DURATIONS: dict[str, int] = {
    PHASE_FOCUS: FOCUS_SECONDS,
    PHASE_BREAK: BREAK_SECONDS,
}


def phase_duration(phase: SessionPhase) -> int:
    """Return the full countdown length in seconds for a phase."""
    try:
        return _PHASE_DURATIONS[phase]
    except KeyError:
        raise ValueError(f"Unknown session phase: {phase!r}") from None


def next_phase(phase: SessionPhase) -> SessionPhase:
    if phase == PHASE_FOCUS:
        return PHASE_BREAK
    return PHASE_FOCUS


@dataclass(frozen=True)
class SessionSnapshot:
    """Immutable clock snapshot exposed to runtime and UI publishers."""
    phase: SessionPhase
    remaining_seconds: int
    running: bool
    completed_sessions: int

    @property
    def duration_seconds(self) -> int:
        return phase_duration(self.phase)

    @property
    def label(self) -> str:
        return phase_label(self.phase)


@dataclass(frozen=True)
class SessionActionResult:
    """Result envelope returned after applying a user action to the clock."""
    action: str
    accepted: bool
    reason: str
    snapshot: SessionSnapshot


@dataclass(frozen=True)
class SessionTick:
    """Tick payload produced while the clock is running.

    `completed_phase` is set when this tick ended a phase and switched to
    the other one.
    """
    snapshot: SessionSnapshot
    completed_phase: Optional[SessionPhase] = None

    @property
    def transitioned(self) -> bool:
        return self.completed_phase is not None


class SessionClock:
    """Focus/break countdown state machine advanced one second per tick."""

    def __init__(self, *, logger: Optional[logging.Logger] = None):
        self._logger = logger or logging.getLogger("pomodoro")
        self._lock = threading.Lock()

        self._phase: SessionPhase = PHASE_FOCUS
        self._remaining_seconds: int = FOCUS_SECONDS
        self._running: bool = False
        self._completed_sessions: int = 0

    def snapshot(self) -> SessionSnapshot:
        with self._lock:
            return self._snapshot_locked()

    def tick(self) -> Optional[SessionTick]:
        """Advance the countdown by one second.

        Returns None while paused. A phase boundary is only crossed on the
        tick that finds the countdown already at zero.
        """
        with self._lock:
            if not self._running:
                return None

            if self._remaining_seconds > 0:
                self._remaining_seconds -= 1
                return SessionTick(snapshot=self._snapshot_locked())

            completed_phase = self._phase
            if completed_phase == PHASE_FOCUS:
                self._completed_sessions += 1
            self._enter_phase_locked(next_phase(completed_phase))
            self._logger.info(
                "Session phase completed: phase=%s next=%s completed_sessions=%d",
                completed_phase,
                self._phase,
                self._completed_sessions,
            )
            return SessionTick(
                snapshot=self._snapshot_locked(),
                completed_phase=completed_phase,
            )

    def toggle_run(self) -> SessionActionResult:
        with self._lock:
            self._running = not self._running
            reason = REASON_STARTED if self._running else REASON_PAUSED
            self._logger.info(
                "Session clock %s: phase=%s remaining=%ss",
                reason,
                self._phase,
                self._remaining_seconds,
            )
            return self._result_locked(ACTION_TOGGLE_RUN, True, reason)

    def reset(self) -> SessionActionResult:
        with self._lock:
            self._running = False
            self._enter_phase_locked(PHASE_FOCUS)
            self._logger.info(
                "Session clock reset: completed_sessions=%d",
                self._completed_sessions,
            )
            return self._result_locked(ACTION_RESET, True, REASON_RESET)

    def skip(self) -> SessionActionResult:
        with self._lock:
            skipped_phase = self._phase
            self._running = False
            self._enter_phase_locked(next_phase(skipped_phase))
            self._logger.info(
                "Session phase skipped: phase=%s next=%s",
                skipped_phase,
                self._phase,
            )
            return self._result_locked(ACTION_SKIP, True, REASON_SKIPPED)

    def apply(self, action: str) -> SessionActionResult:
        """Apply a user action by name."""
        if action == ACTION_TOGGLE_RUN:
            return self.toggle_run()
        if action == ACTION_RESET:
            return self.reset()
        if action == ACTION_SKIP:
            return self.skip()

        with self._lock:
            return self._result_locked(action, False, REASON_UNSUPPORTED_ACTION)

    def _enter_phase_locked(self, phase: SessionPhase) -> None:
        self._phase = phase
        self._remaining_seconds = phase_duration(phase)

    def _result_locked(
        self,
        action: str,
        accepted: bool,
        reason: str,
    ) -> SessionActionResult:
        return SessionActionResult(
            action=action,
            accepted=accepted,
            reason=reason,
            snapshot=self._snapshot_locked(),
        )

    def _snapshot_locked(self) -> SessionSnapshot:
        return SessionSnapshot(
            phase=self._phase,
            remaining_seconds=self._remaining_seconds,
            running=self._running,
            completed_sessions=self._completed_sessions,
        )
