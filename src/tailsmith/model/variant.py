"""Variant model: kinds, multiplicity, placement and the VariantTag dataclass."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Multiplicity(Enum):
    """Whether a variant kind may appear more than once in one class."""

    UNIQUE = "unique"
    REPEATABLE = "repeatable"


class Placement(Enum):
    """Where a variant's selector fragment goes relative to the base selector."""

    ANCESTOR = "ancestor"  # prepended: ".dark .x", ".group:hover .x"
    SUFFIX = "suffix"  # appended: ".x:hover", ".x::before"
    NONE = "none"  # at-rule only


class VariantKind(Enum):
    """Variant families, declared in splitter priority order.

    The declaration order is the canonical nesting order: tags are sorted by
    it before a selector is assembled.
    """

    DARK_MODE = "dark_mode"
    GROUP = "group"
    PEER = "peer"
    STATE = "state"
    PSEUDO_ELEMENT = "pseudo_element"
    CONTAINER = "container"
    LAYER = "layer"
    RESPONSIVE = "responsive"
    CUSTOM = "custom"

    @property
    def priority(self) -> int:
        """Position in the canonical order (0 = outermost)."""
        return _PRIORITY[self]

    @property
    def weight(self) -> int:
        """Specificity contributed by one tag of this kind."""
        return _WEIGHTS[self]

    @property
    def multiplicity(self) -> Multiplicity:
        if self in (VariantKind.RESPONSIVE, VariantKind.DARK_MODE):
            return Multiplicity.UNIQUE
        return Multiplicity.REPEATABLE


_PRIORITY: dict[VariantKind, int] = {kind: i for i, kind in enumerate(VariantKind)}

_WEIGHTS: dict[VariantKind, int] = {
    VariantKind.RESPONSIVE: 100,
    VariantKind.STATE: 80,
    VariantKind.DARK_MODE: 60,
    VariantKind.GROUP: 50,
    VariantKind.PEER: 50,
    VariantKind.PSEUDO_ELEMENT: 40,
    VariantKind.CONTAINER: 30,
    VariantKind.LAYER: 20,
    VariantKind.CUSTOM: 10,
}


@dataclass(frozen=True)
class VariantTag:
    """One recognised variant prefix and its fixed definition.

    Attributes:
        kind: The variant family.
        name: The prefix as written in a class, without the colon (``hover``).
        selector: Selector fragment (``:hover``, ``.dark``); empty when the
            tag only contributes an at-rule.
        placement: Where ``selector`` goes relative to the base selector.
        media_query: Full at-rule prelude (``@media (min-width: 640px)``), if any.
        weight: Specificity contributed by this tag.
    """

    kind: VariantKind
    name: str
    selector: str = ""
    placement: Placement = Placement.NONE
    media_query: str | None = None
    weight: int = 0

    def __post_init__(self) -> None:
        if not self.name:
            raise ValueError("VariantTag name must be a non-empty string")
        if self.weight <= 0:
            object.__setattr__(self, "weight", self.kind.weight)

    @property
    def multiplicity(self) -> Multiplicity:
        return self.kind.multiplicity

    @property
    def prefix(self) -> str:
        """The literal text this tag strips from the head of a class."""
        return f"{self.name}:"

    def __str__(self) -> str:
        return f"{self.kind.name}({self.name})"
