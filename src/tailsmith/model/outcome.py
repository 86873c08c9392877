"""Outcome model: per-class result of a generation call."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from tailsmith.errors import ErrorKind, GenerationError


class Status(Enum):
    """Possible outcomes for one class string."""

    SUCCESS = "success"
    FAIL = "fail"


@dataclass
class ClassOutcome:
    """Result for one input class: the selectors produced, or the error."""

    status: Status
    selectors: list[str] = field(default_factory=list)
    error: GenerationError | None = None

    @classmethod
    def success(cls, selectors: list[str]) -> ClassOutcome:
        return cls(status=Status.SUCCESS, selectors=list(selectors))

    @classmethod
    def failure(cls, error: GenerationError) -> ClassOutcome:
        return cls(status=Status.FAIL, error=error)

    @property
    def succeeded(self) -> bool:
        return self.status is Status.SUCCESS

    @property
    def failed(self) -> bool:
        return self.status is Status.FAIL

    @property
    def error_kind(self) -> ErrorKind | None:
        return self.error.kind if self.error else None

    @property
    def reason(self) -> str:
        """Human-readable failure reason, empty on success."""
        return str(self.error) if self.error else ""
