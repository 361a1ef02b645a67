"""Status text builders for session clock updates."""

from __future__ import annotations

from contracts.ui_protocol import STATE_PAUSED, STATE_RUNNING
from pomodoro import SessionSnapshot, format_clock
from pomodoro.constants import PHASE_BREAK, PHASE_FOCUS


def ui_state(snapshot: SessionSnapshot) -> str:
    """Map a snapshot to the UI run state."""
    return STATE_RUNNING if snapshot.running else STATE_PAUSED


def status_message(snapshot: SessionSnapshot) -> str:
    """Build status text for the current clock snapshot."""
    verb = "running" if snapshot.running else "paused"
    return f"{snapshot.label} {verb} ({format_clock(snapshot.remaining_seconds)} remaining)"


def phase_completed_message(completed_phase: str, snapshot: SessionSnapshot) -> str:
    """Build status text announcing the phase that just ended."""
    if completed_phase == PHASE_FOCUS:
        return (
            f"Focus session complete ({snapshot.completed_sessions} so far). "
            "Break started."
        )
    if completed_phase == PHASE_BREAK:
        return "Break over. Focus started."
    return status_message(snapshot)
