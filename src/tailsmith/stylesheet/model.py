"""Stylesheet: rules merged by ``(selector, media query)``."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Mapping

from tailsmith.model.css import CssProperty
from tailsmith.model.rule import Rule
from tailsmith.stylesheet.breakpoints import BreakpointRegistry
from tailsmith.stylesheet.serializer import render as render_stylesheet

RuleKey = tuple[str, "str | None"]


@dataclass
class _Entry:
    selector: str
    media_query: str | None
    specificity: int
    properties: dict[str, CssProperty] = field(default_factory=dict)

    def to_rule(self) -> Rule:
        return Rule(
            selector=self.selector,
            properties=list(self.properties.values()),
            media_query=self.media_query,
            specificity=self.specificity,
        )


class Stylesheet:
    """Rules accumulated during one generation call.

    Inserting a rule whose key already exists overwrites same-named
    properties in place and appends new ones; the merged specificity is the
    maximum of the two.
    """

    def __init__(
        self,
        breakpoints: BreakpointRegistry | None = None,
        root_properties: Mapping[str, str] | None = None,
    ) -> None:
        self.breakpoints = breakpoints if breakpoints is not None else BreakpointRegistry()
        self.root_properties: dict[str, str] = dict(root_properties or {})
        self._entries: dict[RuleKey, _Entry] = {}

    def insert(self, rule: Rule) -> None:
        if not rule.valid:
            raise ValueError(f"Cannot insert invalid rule for '{rule.selector}'")
        entry = self._entries.get(rule.key)
        if entry is None:
            entry = _Entry(rule.selector, rule.media_query, rule.specificity)
            self._entries[rule.key] = entry
        else:
            entry.specificity = max(entry.specificity, rule.specificity)
        for prop in rule.properties:
            entry.properties[prop.name] = prop

    def get(self, selector: str, media_query: str | None = None) -> Rule | None:
        entry = self._entries.get((selector, media_query))
        return entry.to_rule() if entry else None

    def rules(self) -> list[Rule]:
        """Rules in insertion order."""
        return [entry.to_rule() for entry in self._entries.values()]

    def groups(self) -> list[tuple[str | None, list[Rule]]]:
        """Rules grouped by at-rule, in output order.

        Groups follow :meth:`BreakpointRegistry.order_key`; inside a group
        rules are sorted by ``(specificity, selector)``.
        """
        grouped: dict[str | None, list[Rule]] = {}
        for entry in self._entries.values():
            grouped.setdefault(entry.media_query, []).append(entry.to_rule())
        ordered = sorted(grouped, key=self.breakpoints.order_key)
        return [
            (media_query, sorted(grouped[media_query], key=lambda r: (r.specificity, r.selector)))
            for media_query in ordered
        ]

    def render(self, minify: bool = False) -> str:
        return render_stylesheet(self, minify=minify)

    @property
    def is_empty(self) -> bool:
        return not self._entries and not self.root_properties

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: object) -> bool:
        return key in self._entries
