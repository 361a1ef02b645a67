from .constants import BREAK_SECONDS, FOCUS_SECONDS
from .display import format_clock, phase_label
from .service import (
    SessionActionResult,
    SessionClock,
    SessionPhase,
    SessionSnapshot,
    SessionTick,
    next_phase,
    phase_duration,
)

__all__ = [
    "BREAK_SECONDS",
    "FOCUS_SECONDS",
    "SessionActionResult",
    "SessionClock",
    "SessionPhase",
    "SessionSnapshot",
    "SessionTick",
    "format_clock",
    "next_phase",
    "phase_duration",
    "phase_label",
]
