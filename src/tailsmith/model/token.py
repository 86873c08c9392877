"""Utility token and parsed-class models."""

from __future__ import annotations

from dataclasses import dataclass, field, replace

from tailsmith.model.css import CssProperty
from tailsmith.model.variant import VariantTag

IMPORTANT_MARKER = "!"


@dataclass(frozen=True)
class UtilityToken:
    """The non-variant remainder of a class string.

    ``text`` never contains the ``!`` important marker; ``prefix`` is the
    registry prefix the token matched (empty until resolution).
    """

    text: str
    important: bool = False
    prefix: str = ""

    @classmethod
    def from_text(cls, raw: str) -> UtilityToken:
        """Strip a leading (``!p-4``) or trailing (``p-4!``) important marker."""
        if raw.startswith(IMPORTANT_MARKER) and len(raw) > 1:
            return cls(text=raw[1:], important=True)
        if raw.endswith(IMPORTANT_MARKER) and len(raw) > 1:
            return cls(text=raw[:-1], important=True)
        return cls(text=raw)

    @property
    def suffix(self) -> str:
        """The part of ``text`` after the matched registry prefix."""
        return self.text[len(self.prefix):]

    @property
    def has_arbitrary_syntax(self) -> bool:
        return "[" in self.text or "(" in self.text

    def with_prefix(self, prefix: str) -> UtilityToken:
        return replace(self, prefix=prefix)

    def __str__(self) -> str:
        return f"{IMPORTANT_MARKER}{self.text}" if self.important else self.text


@dataclass(frozen=True)
class ParsedClass:
    """A class string after splitting and resolution. Never retained."""

    raw: str
    variants: list[VariantTag]
    token: UtilityToken
    properties: list[CssProperty] = field(default_factory=list)

    @property
    def variant_names(self) -> list[str]:
        return [tag.name for tag in self.variants]
