"""CSS declaration model."""

from __future__ import annotations

from dataclasses import dataclass, replace


@dataclass(frozen=True)
class CssProperty:
    """A single ``name: value`` declaration, optionally ``!important``."""

    name: str
    value: str
    important: bool = False

    def __post_init__(self) -> None:
        if not self.name:
            raise ValueError("CssProperty name must be a non-empty string")

    def as_important(self) -> CssProperty:
        """Return a copy flagged ``!important``."""
        if self.important:
            return self
        return replace(self, important=True)

    def to_css(self, *, minify: bool = False) -> str:
        """Render the declaration without the trailing semicolon."""
        suffix = " !important" if self.important else ""
        if minify:
            return f"{self.name}:{self.value}{suffix}"
        return f"{self.name}: {self.value}{suffix}"


def declarations(*pairs: tuple[str, str]) -> list[CssProperty]:
    """Build a property list from ``(name, value)`` pairs."""
    return [CssProperty(name=name, value=value) for name, value in pairs]
