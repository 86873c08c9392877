"""Event types emitted during a generation call."""

from dataclasses import dataclass


class GenerationEvent:
    """Base class for everything a generator emits."""


@dataclass(frozen=True)
class GenerationStarted(GenerationEvent):
    class_count: int


@dataclass(frozen=True)
class ClassGenerated(GenerationEvent):
    class_name: str
    selector: str
    media_query: str | None
    specificity: int


@dataclass(frozen=True)
class ClassRejected(GenerationEvent):
    class_name: str
    kind: str
    reason: str


@dataclass(frozen=True)
class GenerationCompleted(GenerationEvent):
    class_count: int
    rule_count: int
    failure_count: int
    elapsed: float
