"""Rule model: one candidate CSS rule produced for one class string."""

from __future__ import annotations

from dataclasses import dataclass, field

from tailsmith.model.css import CssProperty
from tailsmith.model.diagnostic import Diagnostic


@dataclass(frozen=True)
class Rule:
    """A selector, optional at-rule, and its declarations.

    Invalid rules are still produced so their diagnostics can be reported;
    they are never merged into a stylesheet.
    """

    selector: str
    properties: list[CssProperty]
    media_query: str | None = None
    specificity: int = 0
    valid: bool = True
    errors: list[Diagnostic] = field(default_factory=list)

    @property
    def key(self) -> tuple[str, str | None]:
        """Stylesheet key: ``(selector, media_query)``."""
        return (self.selector, self.media_query)

    @property
    def error_messages(self) -> list[str]:
        return [d.message for d in self.errors]
