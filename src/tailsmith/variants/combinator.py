"""Combine a class's variant tags and declarations into a single Rule."""

from __future__ import annotations

from tailsmith.model.css import CssProperty
from tailsmith.model.rule import Rule
from tailsmith.model.variant import Placement, VariantTag
from tailsmith.variants.rules import RuleFunc, validate

BASE_WEIGHT = 10


def css_escape(ident: str) -> str:
    """Escape *ident* for use in a class selector, following ``CSS.escape``.

    ``sm:flex`` -> ``sm\\:flex``, ``w-1/2`` -> ``w-1\\/2``,
    ``2xl:p-4`` -> ``\\32 xl\\:p-4``.
    """
    out: list[str] = []
    for i, char in enumerate(ident):
        code = ord(char)
        if code == 0:
            out.append("\ufffd")
        elif (
            0x01 <= code <= 0x1F
            or code == 0x7F
            or (i == 0 and char.isdigit() and char.isascii())
            or (i == 1 and char.isdigit() and char.isascii() and ident[0] == "-")
        ):
            out.append(f"\\{code:x} ")
        elif i == 0 and char == "-" and len(ident) == 1:
            out.append("\\-")
        elif code >= 0x80 or char in "-_" or (char.isascii() and char.isalnum()):
            out.append(char)
        else:
            out.append(f"\\{char}")
    return "".join(out)


def build_selector(raw: str, tags: list[VariantTag]) -> str:
    """Ancestor fragments, then ``.`` + escaped class, then suffix fragments."""
    ancestors = [t.selector for t in tags if t.placement is Placement.ANCESTOR and t.selector]
    suffixes = [t.selector for t in tags if t.placement is Placement.SUFFIX and t.selector]
    base = "." + css_escape(raw) + "".join(suffixes)
    return " ".join([*ancestors, base])


def media_query_of(tags: list[VariantTag]) -> str | None:
    """The first distinct at-rule among *tags*, or ``None``."""
    for tag in tags:
        if tag.media_query is not None:
            return tag.media_query
    return None


def specificity_of(tags: list[VariantTag], base_weight: int = BASE_WEIGHT) -> int:
    return base_weight + sum(tag.weight for tag in tags)


def combine(
    raw: str,
    tags: list[VariantTag],
    properties: list[CssProperty],
    *,
    base_weight: int = BASE_WEIGHT,
    extra_rules: list[RuleFunc] | None = None,
) -> Rule:
    """Build the candidate rule for one class.

    *tags* must already be in canonical order. The rule is always returned;
    when a validation rule reports an error it is marked invalid and carries
    the diagnostics.
    """
    diagnostics = [
        d.with_class(raw) for d in validate(tags, extra_rules=extra_rules)
    ]
    return Rule(
        selector=build_selector(raw, tags),
        properties=list(properties),
        media_query=media_query_of(tags),
        specificity=specificity_of(tags, base_weight),
        valid=not any(d.is_error for d in diagnostics),
        errors=diagnostics,
    )
