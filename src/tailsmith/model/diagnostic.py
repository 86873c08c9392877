"""Diagnostic model: findings about the variant list of one class."""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum


class Severity(Enum):
    """How a finding affects generation. Only ERROR rejects the class."""

    ERROR = "ERROR"
    WARNING = "WARNING"
    INFO = "INFO"


@dataclass(frozen=True)
class Diagnostic:
    """A single finding about one class string.

    Attributes:
        rule: Name of the check that produced it (``check_media_conflict``),
            or the error kind for resolution failures.
        severity: ERROR marks the class invalid; the others are advisory.
        message: Human-readable description.
        class_name: The raw class string, once known.
        variants: Names of the variants involved, in canonical order.
        fix: Suggested rewrite of the class, if any.
    """

    rule: str
    severity: Severity
    message: str
    class_name: str | None = None
    variants: tuple[str, ...] = ()
    fix: str | None = None

    @property
    def is_error(self) -> bool:
        return self.severity is Severity.ERROR

    @property
    def is_warning(self) -> bool:
        return self.severity is Severity.WARNING

    def with_class(self, class_name: str) -> Diagnostic:
        """Return a copy attributed to *class_name*."""
        return replace(self, class_name=class_name)

    def summary(self) -> str:
        """``str(self)`` plus the suggested fix on a second line."""
        if not self.fix:
            return str(self)
        return f"{self}\n  fix: {self.fix}"

    def __str__(self) -> str:
        if self.class_name:
            where = f" [class={self.class_name}]"
        elif self.variants:
            where = f" [variants={':'.join(self.variants)}]"
        else:
            where = ""
        return f"{self.severity.value}{where}: {self.message}"
