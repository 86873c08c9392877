"""Event listeners that log or tally generation events."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any

from tailsmith.events.bus import Listener
from tailsmith.events.types import (
    ClassGenerated,
    ClassRejected,
    GenerationCompleted,
    GenerationStarted,
)


def logging_listener(logger: logging.Logger | None = None) -> Listener:
    """Create a listener that logs lifecycle events."""
    log = logger or logging.getLogger("tailsmith")

    def listener(event: Any) -> None:
        if isinstance(event, GenerationStarted):
            log.info("Generation started: classes=%d", event.class_count)
        elif isinstance(event, ClassGenerated):
            log.debug(
                "Class generated: class=%s selector=%s media=%s specificity=%d",
                event.class_name,
                event.selector,
                event.media_query or "-",
                event.specificity,
            )
        elif isinstance(event, ClassRejected):
            log.warning(
                "Class rejected: class=%s kind=%s reason=%s",
                event.class_name,
                event.kind,
                event.reason,
            )
        elif isinstance(event, GenerationCompleted):
            log.info(
                "Generation completed: classes=%d rules=%d failures=%d elapsed=%.3fs",
                event.class_count,
                event.rule_count,
                event.failure_count,
                event.elapsed,
            )

    return listener


@dataclass
class GenerationStats:
    """Running totals across generation calls."""

    generated: int = 0
    rejected: int = 0
    runs: int = 0
    rejections_by_kind: dict[str, int] = field(default_factory=dict)


def stats_listener(stats: GenerationStats) -> Listener:
    """Create a listener that accumulates counts on *stats*."""

    def listener(event: Any) -> None:
        if isinstance(event, ClassGenerated):
            stats.generated += 1
        elif isinstance(event, ClassRejected):
            stats.rejected += 1
            stats.rejections_by_kind[event.kind] = (
                stats.rejections_by_kind.get(event.kind, 0) + 1
            )
        elif isinstance(event, GenerationCompleted):
            stats.runs += 1

    return listener
