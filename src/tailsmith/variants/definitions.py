"""Built-in variant tables and the :class:`VariantCatalog` built from config."""

from __future__ import annotations

from typing import Iterable, Iterator

from tailsmith.config import CustomVariantSpec, DarkModeStrategy, GeneratorConfig
from tailsmith.errors import ConfigError
from tailsmith.model.variant import Placement, VariantKind, VariantTag
from tailsmith.resolvers.theme import DEFAULT_CONTAINERS
from tailsmith.stylesheet.breakpoints import BreakpointRegistry

DARK_MEDIA_QUERY = "@media (prefers-color-scheme: dark)"

# name -> selector fragment
STATE_SELECTORS: dict[str, str] = {
    "hover": ":hover",
    "focus": ":focus",
    "focus-within": ":focus-within",
    "focus-visible": ":focus-visible",
    "active": ":active",
    "visited": ":visited",
    "target": ":target",
    "first": ":first-child",
    "last": ":last-child",
    "only": ":only-child",
    "odd": ":nth-child(odd)",
    "even": ":nth-child(even)",
    "first-of-type": ":first-of-type",
    "last-of-type": ":last-of-type",
    "only-of-type": ":only-of-type",
    "empty": ":empty",
    "disabled": ":disabled",
    "enabled": ":enabled",
    "checked": ":checked",
    "indeterminate": ":indeterminate",
    "default": ":default",
    "required": ":required",
    "valid": ":valid",
    "invalid": ":invalid",
    "in-range": ":in-range",
    "out-of-range": ":out-of-range",
    "placeholder-shown": ":placeholder-shown",
    "autofill": ":autofill",
    "read-only": ":read-only",
    "read-write": ":read-write",
}

# States that make sense on a ``group`` ancestor or a ``peer`` sibling.
INTERACTIVE_STATES: tuple[str, ...] = (
    "hover", "focus", "focus-within", "focus-visible", "active", "visited",
    "target", "first", "last", "only", "odd", "even", "disabled", "enabled",
    "checked", "indeterminate", "required", "valid", "invalid",
    "placeholder-shown",
)

PSEUDO_ELEMENT_SELECTORS: dict[str, str] = {
    "before": "::before",
    "after": "::after",
    "placeholder": "::placeholder",
    "file": "::file-selector-button",
    "marker": "::marker",
    "selection": "::selection",
    "first-line": "::first-line",
    "first-letter": "::first-letter",
    "backdrop": "::backdrop",
}

LAYER_QUERIES: dict[str, str] = {
    "print": "@media print",
    "motion-safe": "@media (prefers-reduced-motion: no-preference)",
    "motion-reduce": "@media (prefers-reduced-motion: reduce)",
    "contrast-more": "@media (prefers-contrast: more)",
    "contrast-less": "@media (prefers-contrast: less)",
    "portrait": "@media (orientation: portrait)",
    "landscape": "@media (orientation: landscape)",
    "pointer-fine": "@media (pointer: fine)",
    "pointer-coarse": "@media (pointer: coarse)",
}

CONTAINER_SIZES: tuple[str, ...] = (
    "xs", "sm", "md", "lg", "xl", "2xl", "3xl", "4xl", "5xl", "6xl", "7xl",
)


def dark_mode_tag(strategy: DarkModeStrategy, selector: str = ".dark") -> VariantTag:
    if strategy is DarkModeStrategy.MEDIA:
        return VariantTag(VariantKind.DARK_MODE, "dark", media_query=DARK_MEDIA_QUERY)
    return VariantTag(VariantKind.DARK_MODE, "dark", selector, Placement.ANCESTOR)


def group_tags() -> list[VariantTag]:
    return [
        VariantTag(VariantKind.GROUP, f"group-{state}", f".group{STATE_SELECTORS[state]}",
                   Placement.ANCESTOR)
        for state in INTERACTIVE_STATES
    ]


def peer_tags() -> list[VariantTag]:
    return [
        VariantTag(VariantKind.PEER, f"peer-{state}", f".peer{STATE_SELECTORS[state]} ~",
                   Placement.ANCESTOR)
        for state in INTERACTIVE_STATES
    ]


def state_tags() -> list[VariantTag]:
    return [
        VariantTag(VariantKind.STATE, name, selector, Placement.SUFFIX)
        for name, selector in STATE_SELECTORS.items()
    ]


def pseudo_element_tags() -> list[VariantTag]:
    return [
        VariantTag(VariantKind.PSEUDO_ELEMENT, name, selector, Placement.SUFFIX)
        for name, selector in PSEUDO_ELEMENT_SELECTORS.items()
    ]


def container_tags() -> list[VariantTag]:
    return [
        VariantTag(VariantKind.CONTAINER, f"@{size}",
                   media_query=f"@container (min-width: {DEFAULT_CONTAINERS[size]})")
        for size in CONTAINER_SIZES
    ]


def layer_tags() -> list[VariantTag]:
    return [
        VariantTag(VariantKind.LAYER, name, media_query=query)
        for name, query in LAYER_QUERIES.items()
    ]


def responsive_tags(breakpoints: BreakpointRegistry) -> list[VariantTag]:
    return [
        VariantTag(VariantKind.RESPONSIVE, name, media_query=breakpoints.at_rule(name))
        for name in breakpoints.names()
    ]


def custom_tags(specs: Iterable[CustomVariantSpec]) -> list[VariantTag]:
    return [
        VariantTag(
            VariantKind.CUSTOM,
            spec.name,
            spec.selector,
            spec.placement if spec.selector else Placement.NONE,
            spec.media_query,
        )
        for spec in specs
    ]


class VariantCatalog:
    """Every variant the splitter recognises, indexed by name.

    When two kinds define the same name, the kind that comes first in
    :class:`VariantKind` order owns it. Breakpoints and custom variants may
    not reuse a built-in name.
    """

    def __init__(
        self, tags: Iterable[VariantTag], breakpoints: BreakpointRegistry | None = None
    ) -> None:
        ordered = sorted(tags, key=lambda tag: tag.kind.priority)
        self._by_name: dict[str, VariantTag] = {}
        for tag in ordered:
            self._by_name.setdefault(tag.name, tag)
        self.breakpoints = breakpoints if breakpoints is not None else BreakpointRegistry()

    @classmethod
    def from_config(cls, config: GeneratorConfig | None = None) -> VariantCatalog:
        config = config or GeneratorConfig()
        breakpoints = config.breakpoint_registry()
        fixed = [
            dark_mode_tag(config.dark_mode, config.dark_selector),
            *group_tags(),
            *peer_tags(),
            *state_tags(),
            *pseudo_element_tags(),
            *container_tags(),
            *layer_tags(),
        ]
        fixed_names = {tag.name for tag in fixed}
        for name in breakpoints.names():
            if name in fixed_names:
                raise ConfigError(f"Breakpoint '{name}' clashes with a built-in variant")
        builtin = [*fixed, *responsive_tags(breakpoints)]
        builtin_names = {tag.name for tag in builtin}
        seen: set[str] = set()
        for spec in config.custom_variants:
            if spec.name in builtin_names:
                raise ConfigError(
                    f"Custom variant '{spec.name}' clashes with a built-in variant"
                )
            if spec.name in seen:
                raise ConfigError(f"Custom variant '{spec.name}' is defined twice")
            seen.add(spec.name)
        return cls([*builtin, *custom_tags(config.custom_variants)], breakpoints)

    def lookup(self, name: str) -> VariantTag | None:
        return self._by_name.get(name)

    def names(self, kind: VariantKind | None = None) -> list[str]:
        return [tag.name for tag in self if kind is None or tag.kind is kind]

    def __iter__(self) -> Iterator[VariantTag]:
        return iter(self._by_name.values())

    def __len__(self) -> int:
        return len(self._by_name)

    def __contains__(self, name: object) -> bool:
        return name in self._by_name
