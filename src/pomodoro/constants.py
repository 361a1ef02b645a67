"""Phase, action, and reason constants used by the session clock."""

from __future__ import annotations

FOCUS_SECONDS = 25 * 60
BREAK_SECONDS = 5 * 60

PHASE_FOCUS = "focus"
PHASE_BREAK = "break"

PHASE_LABELS: dict[str, str] = {
    PHASE_FOCUS: "Focus",
    PHASE_BREAK: "Break",
}

ACTION_TOGGLE_RUN = "toggle_run"
ACTION_RESET = "reset"
ACTION_SKIP = "skip"

USER_ACTIONS: frozenset[str] = frozenset({ACTION_TOGGLE_RUN, ACTION_RESET, ACTION_SKIP})

ACTION_SYNC = "sync"
ACTION_TICK = "tick"
ACTION_PHASE_COMPLETED = "phase_completed"

REASON_STARTED = "started"
REASON_PAUSED = "paused"
REASON_RESET = "reset"
REASON_SKIPPED = "skipped"
REASON_UNSUPPORTED_ACTION = "unsupported_action"

REASON_TICK = "tick"
REASON_FOCUS_COMPLETED = "focus_completed"
REASON_BREAK_COMPLETED = "break_completed"
REASON_STARTUP = "startup"
