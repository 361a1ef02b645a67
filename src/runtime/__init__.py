"""Runtime engine exports."""

from .events import (
    ClockTickEvent,
    QueueCommandPublisher,
    QueueTickPublisher,
    SessionCommandEvent,
)
from .loop import RuntimeBootstrap, RuntimeEngine, RuntimeHooks

__all__ = [
    "ClockTickEvent",
    "QueueCommandPublisher",
    "QueueTickPublisher",
    "RuntimeBootstrap",
    "RuntimeEngine",
    "RuntimeHooks",
    "SessionCommandEvent",
]
