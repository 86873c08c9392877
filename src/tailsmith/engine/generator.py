"""Generation session: split, resolve, combine and aggregate class strings."""

from __future__ import annotations

import time
from dataclasses import dataclass, field
from typing import Iterable

from tailsmith.config import GeneratorConfig
from tailsmith.errors import (
    GenerationError,
    InvalidVariantCombinationError,
    MalformedArbitraryValueError,
    UnknownUtilityError,
    ValueSyntaxError,
)
from tailsmith.events import types as events
from tailsmith.events.bus import EventBus
from tailsmith.model.css import CssProperty
from tailsmith.model.outcome import ClassOutcome
from tailsmith.model.rule import Rule
from tailsmith.model.token import ParsedClass, UtilityToken
from tailsmith.registry.defaults import build_default_registry
from tailsmith.registry.trie import ResolverRegistry
from tailsmith.stylesheet.model import Stylesheet
from tailsmith.variants.combinator import combine
from tailsmith.variants.definitions import VariantCatalog
from tailsmith.variants.splitter import split_variants


@dataclass
class GenerationResult:
    """CSS text plus the per-class outcome of one generation call."""

    css: str
    outcomes: dict[str, ClassOutcome] = field(default_factory=dict)
    stylesheet: Stylesheet | None = None

    @property
    def failures(self) -> dict[str, ClassOutcome]:
        return {raw: o for raw, o in self.outcomes.items() if o.failed}

    @property
    def succeeded(self) -> list[str]:
        return [raw for raw, o in self.outcomes.items() if o.succeeded]

    @property
    def ok(self) -> bool:
        return not self.failures


def split_class_list(text: str) -> list[str]:
    """Split whitespace-separated class names, as found in a ``class`` attribute."""
    return text.split()


class Generator:
    """Turns utility class strings into CSS.

    The registry and variant catalog are built once and only read after
    that, so one generator can serve concurrent :meth:`generate` calls; each
    call owns its own :class:`Stylesheet`.
    """

    def __init__(
        self,
        config: GeneratorConfig | None = None,
        registry: ResolverRegistry | None = None,
        *,
        event_bus: EventBus | None = None,
        catalog: VariantCatalog | None = None,
    ) -> None:
        self.config = config or GeneratorConfig()
        if registry is None:
            registry = build_default_registry(self.config.theme)
        self.registry = registry
        if not self.registry.frozen:
            self.registry.freeze()
        self.catalog = catalog if catalog is not None else VariantCatalog.from_config(self.config)
        self.event_bus = event_bus or EventBus()

    # ---- pipeline stages ----

    def resolve(self, token: UtilityToken, raw: str = "") -> tuple[UtilityToken, list[CssProperty]]:
        """Find the resolver for *token* and run it.

        Returns the token annotated with its matched prefix, and the
        declarations. A miss under the longest prefix is final.
        """
        raw = raw or str(token)
        entry = self.registry.resolve(token.text)
        if entry is None:
            raise UnknownUtilityError(f"No utility matches '{token.text}'", class_name=raw)
        token = token.with_prefix(entry.prefix)
        try:
            properties = entry.resolver.parse(token)
        except ValueSyntaxError as e:
            if token.has_arbitrary_syntax:
                raise MalformedArbitraryValueError(
                    f"Malformed value '{token.suffix}' in '{token.text}': {e}",
                    class_name=raw,
                    cause=e,
                ) from e
            raise UnknownUtilityError(
                f"'{token.suffix}' is not a valid value for '{entry.prefix}'",
                class_name=raw,
                cause=e,
            ) from e
        if properties is None:
            if token.has_arbitrary_syntax:
                raise MalformedArbitraryValueError(
                    f"Value '{token.suffix}' cannot be used with '{entry.prefix}'",
                    class_name=raw,
                )
            raise UnknownUtilityError(
                f"'{token.suffix}' is not a known value for '{entry.prefix}'",
                class_name=raw,
            )
        if token.important:
            properties = [prop.as_important() for prop in properties]
        return token, properties

    def parse_class(self, raw: str) -> ParsedClass:
        """Split *raw* into variants and resolve its base token."""
        tags, base = split_variants(raw, self.catalog)
        token, properties = self.resolve(UtilityToken.from_text(base), raw)
        return ParsedClass(raw=raw, variants=tags, token=token, properties=properties)

    def build_rule(self, raw: str) -> Rule:
        """Return the candidate rule for *raw*, which may be marked invalid."""
        parsed = self.parse_class(raw)
        return combine(raw, parsed.variants, parsed.properties)

    def _valid_rule(self, raw: str) -> Rule:
        rule = self.build_rule(raw)
        if not rule.valid:
            errors = [d for d in rule.errors if d.is_error]
            raise InvalidVariantCombinationError(
                "; ".join(d.message for d in errors),
                class_name=raw,
                diagnostics=errors,
            )
        return rule

    # ---- session ----

    def generate(self, classes: Iterable[str], *, minify: bool | None = None) -> GenerationResult:
        """Generate CSS for *classes*.

        Failures are recorded per class and never abort the batch. Duplicate
        inputs are processed once.
        """
        started = time.monotonic()
        unique = list(dict.fromkeys(classes))
        self.event_bus.emit(events.GenerationStarted(class_count=len(unique)))

        stylesheet = Stylesheet(self.catalog.breakpoints, self.config.custom_properties)
        outcomes: dict[str, ClassOutcome] = {}
        for raw in unique:
            try:
                rule = self._valid_rule(raw)
            except GenerationError as e:
                outcomes[raw] = ClassOutcome.failure(e)
                self.event_bus.emit(
                    events.ClassRejected(class_name=raw, kind=e.kind.value, reason=e.message)
                )
                continue
            stylesheet.insert(rule)
            outcomes[raw] = ClassOutcome.success([rule.selector])
            self.event_bus.emit(
                events.ClassGenerated(
                    class_name=raw,
                    selector=rule.selector,
                    media_query=rule.media_query,
                    specificity=rule.specificity,
                )
            )

        css = stylesheet.render(minify=self.config.minify if minify is None else minify)
        failures = sum(1 for o in outcomes.values() if o.failed)
        self.event_bus.emit(
            events.GenerationCompleted(
                class_count=len(unique),
                rule_count=len(stylesheet),
                failure_count=failures,
                elapsed=time.monotonic() - started,
            )
        )
        return GenerationResult(css=css, outcomes=outcomes, stylesheet=stylesheet)

    def generate_css(self, classes: Iterable[str], *, minify: bool | None = None) -> str:
        """Convenience wrapper returning only the CSS text."""
        return self.generate(classes, minify=minify).css
