"""Parse utility value suffixes into :class:`UtilityValue` objects.

The suffix grammar lives in ``value.lark`` next to this module and is parsed
with an LALR parser. Results are cached because the same suffixes recur
across classes (``4``, ``blue-500``, ``full``).
"""

from __future__ import annotations

import re
from dataclasses import dataclass, replace
from enum import Enum
from functools import lru_cache
from pathlib import Path

from lark import Lark, Token, Transformer
from lark.exceptions import LarkError

from tailsmith.errors import ValueSyntaxError

GRAMMAR_PATH = Path(__file__).parent / "value.lark"

_HINT_RE = re.compile(r"^([a-z][a-z-]*|--[A-Za-z0-9_-]+):(?!//)(.+)$", re.DOTALL)
_REF_RE = re.compile(r"^(?:([a-z][a-z-]*):)?(--[A-Za-z0-9_-]+)(?:,(.+))?$", re.DOTALL)
_INTEGER_RE = re.compile(r"^\d+$")


class ValueKind(Enum):
    """Shape of a parsed value suffix."""

    KEYWORD = "keyword"
    ARBITRARY = "arbitrary"
    CUSTOM_PROPERTY = "custom_property"


@dataclass(frozen=True)
class UtilityValue:
    """A parsed suffix.

    Attributes:
        kind: Which syntax the suffix used.
        text: Keyword text, decoded arbitrary text, or ``var(--name)``.
        hint: Optional data-type hint (``[length:2rem]``, ``(color:--x)``).
        modifier: The value after ``/``, if any.
    """

    kind: ValueKind
    text: str
    hint: str | None = None
    modifier: UtilityValue | None = None

    @property
    def is_keyword(self) -> bool:
        return self.kind is ValueKind.KEYWORD

    @property
    def fraction(self) -> tuple[int, int] | None:
        """``(numerator, denominator)`` for suffixes like ``1/2``."""
        if not self.is_keyword or self.modifier is None or not self.modifier.is_keyword:
            return None
        if _INTEGER_RE.match(self.text) and _INTEGER_RE.match(self.modifier.text):
            denominator = int(self.modifier.text)
            if denominator == 0:
                return None
            return (int(self.text), denominator)
        return None


def decode_underscores(text: str) -> str:
    """Underscores become spaces; an escaped ``\\_`` stays an underscore."""
    return "_".join(part.replace("_", " ") for part in text.split("\\_"))


class ValueTransformer(Transformer):  # type: ignore[type-arg]
    """Transform a value parse tree into a :class:`UtilityValue`."""

    def keyword(self, items: list[Token]) -> UtilityValue:
        return UtilityValue(ValueKind.KEYWORD, str(items[0]))

    def arbitrary(self, items: list[Token]) -> UtilityValue:
        raw = str(items[0])
        match = _HINT_RE.match(raw)
        if match:
            return UtilityValue(
                ValueKind.ARBITRARY, decode_underscores(match.group(2)), hint=match.group(1)
            )
        return UtilityValue(ValueKind.ARBITRARY, decode_underscores(raw))

    def custom_property(self, items: list[Token]) -> UtilityValue:
        match = _REF_RE.match(str(items[0]))
        if match is None:  # pragma: no cover - the grammar already enforces this shape
            raise ValueSyntaxError(f"Invalid custom property reference: {items[0]}")
        hint, name, fallback = match.groups()
        text = f"var({name},{decode_underscores(fallback)})" if fallback else f"var({name})"
        return UtilityValue(ValueKind.CUSTOM_PROPERTY, text, hint=hint)

    def modifier(self, items: list[object]) -> UtilityValue:
        item = items[0]
        if isinstance(item, UtilityValue):
            return item
        return UtilityValue(ValueKind.KEYWORD, str(item))

    def start(self, items: list[UtilityValue]) -> UtilityValue:
        value = items[0]
        if len(items) > 1:
            return replace(value, modifier=items[1])
        return value


@lru_cache(maxsize=1)
def _parser() -> Lark:
    return Lark(GRAMMAR_PATH.read_text(), parser="lalr", start="start")


@lru_cache(maxsize=4096)
def parse_value(source: str) -> UtilityValue:
    """Parse a suffix such as ``blue-500/50`` or ``[length:2rem]``.

    Raises :class:`ValueSyntaxError` for unterminated or malformed syntax.
    """
    if not source:
        raise ValueSyntaxError("Empty value")
    try:
        tree = _parser().parse(source)
    except LarkError as e:
        line = getattr(e, "line", None)
        column = getattr(e, "column", None)
        raise ValueSyntaxError(str(e), line=line, column=column) from e
    return ValueTransformer().transform(tree)
