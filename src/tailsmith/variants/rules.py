"""Validation rules for variant combinations.

Each rule is a function taking the canonical tag list of one class and
returning a list of Diagnostic objects describing any issues found.
"""

from __future__ import annotations

from typing import Callable

from tailsmith.model.diagnostic import Diagnostic, Severity
from tailsmith.model.variant import Multiplicity, VariantKind, VariantTag

RuleFunc = Callable[[list[VariantTag]], list[Diagnostic]]


# ---------------------------------------------------------------------------
# Structural rules (ERROR severity)
# ---------------------------------------------------------------------------


def check_unique_multiplicity(tags: list[VariantTag]) -> list[Diagnostic]:
    """At most one tag of each UNIQUE kind (responsive, dark mode)."""
    by_kind: dict[VariantKind, list[str]] = {}
    for tag in tags:
        if tag.multiplicity is Multiplicity.UNIQUE:
            by_kind.setdefault(tag.kind, []).append(tag.name)

    diagnostics: list[Diagnostic] = []
    for kind, names in by_kind.items():
        if len(names) > 1:
            diagnostics.append(
                Diagnostic(
                    rule="check_unique_multiplicity",
                    severity=Severity.ERROR,
                    message=(
                        f"Multiple {kind.name} variants in one class: "
                        f"{', '.join(names)}. Only one is allowed."
                    ),
                    variants=tuple(names),
                    fix=f"Keep a single {kind.name} variant.",
                )
            )
    return diagnostics


def check_media_conflict(tags: list[VariantTag]) -> list[Diagnostic]:
    """All at-rule variants of one class must agree on a single at-rule."""
    queries: list[str] = []
    names: list[str] = []
    for tag in tags:
        if tag.media_query is not None:
            names.append(tag.name)
            if tag.media_query not in queries:
                queries.append(tag.media_query)
    if len(queries) <= 1:
        return []
    return [
        Diagnostic(
            rule="check_media_conflict",
            severity=Severity.ERROR,
            message=(
                f"Conflicting at-rules from variants {', '.join(names)}: "
                + "; ".join(queries)
            ),
            variants=tuple(names),
            fix="Use at most one media, container or device variant per class.",
        )
    ]


# ---------------------------------------------------------------------------
# Style rules (WARNING severity)
# ---------------------------------------------------------------------------


def check_repeated_variant(tags: list[VariantTag]) -> list[Diagnostic]:
    """Repeating a variant verbatim (``hover:hover:``) has no effect."""
    seen: set[str] = set()
    diagnostics: list[Diagnostic] = []
    for tag in tags:
        if tag.multiplicity is Multiplicity.REPEATABLE and tag.name in seen:
            diagnostics.append(
                Diagnostic(
                    rule="check_repeated_variant",
                    severity=Severity.WARNING,
                    message=f"Variant '{tag.name}' is repeated.",
                    variants=(tag.name,),
                    fix=f"Remove the duplicate '{tag.prefix}' prefix.",
                )
            )
        seen.add(tag.name)
    return diagnostics


ALL_RULES: list[RuleFunc] = [
    check_unique_multiplicity,
    check_media_conflict,
    check_repeated_variant,
]


def validate(
    tags: list[VariantTag], extra_rules: list[RuleFunc] | None = None
) -> list[Diagnostic]:
    """Run all rules against *tags* and return every diagnostic."""
    rules: list[RuleFunc] = list(ALL_RULES)
    if extra_rules:
        rules.extend(extra_rules)
    diagnostics: list[Diagnostic] = []
    for rule in rules:
        diagnostics.extend(rule(tags))
    return diagnostics
