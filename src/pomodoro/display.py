"""Text helpers for rendering session clock state."""

from __future__ import annotations

from .constants import PHASE_LABELS


def format_clock(seconds: int) -> str:
    """Format a countdown in seconds as zero-padded `MM:SS`."""
    minutes, remainder = divmod(max(0, int(seconds)), 60)
    return f"{minutes:02d}:{remainder:02d}"


def phase_label(phase: str) -> str:
    """Return the display label ("Focus" or "Break") for a phase."""
    label = PHASE_LABELS.get(phase)
    if label is None:
        raise ValueError(f"Unknown session phase: {phase!r}")
    return label
