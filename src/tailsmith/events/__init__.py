"""Generation lifecycle events, the event bus and stock listeners."""

from tailsmith.events.bus import EventBus, Listener
from tailsmith.events.log import GenerationStats, logging_listener, stats_listener
from tailsmith.events.types import (
    ClassGenerated,
    ClassRejected,
    GenerationCompleted,
    GenerationEvent,
    GenerationStarted,
)

__all__ = [
    "EventBus",
    "Listener",
    "GenerationEvent",
    "GenerationStarted",
    "ClassGenerated",
    "ClassRejected",
    "GenerationCompleted",
    "logging_listener",
    "GenerationStats",
    "stats_listener",
]
