"""Built-in utility registrations.

Each ``_register_*`` function wires one category of utilities into a
registry using the generic resolvers and the theme tables. Prefixes are
chosen so that no bare utility name is a prefix of an unrelated utility
(``border-t`` would shadow ``border-teal-500``), since a miss under the
longest prefix is final.
"""

from __future__ import annotations

from typing import Callable

from tailsmith.registry.trie import ResolverRegistry
from tailsmith.resolvers.base import (
    ArbitraryPropertyResolver,
    ColorResolver,
    Declarations,
    FirstMatchResolver,
    FontSizeResolver,
    ScaleResolver,
    StaticResolver,
)
from tailsmith.resolvers.color import is_length
from tailsmith.resolvers.theme import Theme

_TRANSITION_TIMING = ("transition-timing-function", "cubic-bezier(0.4, 0, 0.2, 1)")
_TRANSITION_DURATION = ("transition-duration", "150ms")

_PADDING_SIDES: dict[str, tuple[str, ...]] = {
    "p": ("padding",),
    "px": ("padding-left", "padding-right"),
    "py": ("padding-top", "padding-bottom"),
    "pt": ("padding-top",),
    "pr": ("padding-right",),
    "pb": ("padding-bottom",),
    "pl": ("padding-left",),
    "ps": ("padding-inline-start",),
    "pe": ("padding-inline-end",),
}

_MARGIN_SIDES: dict[str, tuple[str, ...]] = {
    "m": ("margin",),
    "mx": ("margin-left", "margin-right"),
    "my": ("margin-top", "margin-bottom"),
    "mt": ("margin-top",),
    "mr": ("margin-right",),
    "mb": ("margin-bottom",),
    "ml": ("margin-left",),
    "ms": ("margin-inline-start",),
    "me": ("margin-inline-end",),
}

_INSET_SIDES: dict[str, tuple[str, ...]] = {
    "inset": ("inset",),
    "inset-x": ("left", "right"),
    "inset-y": ("top", "bottom"),
    "top": ("top",),
    "right": ("right",),
    "bottom": ("bottom",),
    "left": ("left",),
}

_BORDER_SIDES: dict[str, tuple[str, ...]] = {
    "t": ("top",),
    "r": ("right",),
    "b": ("bottom",),
    "l": ("left",),
    "x": ("left", "right"),
    "y": ("top", "bottom"),
}

_RADIUS_CORNERS: dict[str, tuple[str, ...]] = {
    "t": ("top-left", "top-right"),
    "r": ("top-right", "bottom-right"),
    "b": ("bottom-right", "bottom-left"),
    "l": ("top-left", "bottom-left"),
    "tl": ("top-left",),
    "tr": ("top-right",),
    "br": ("bottom-right",),
    "bl": ("bottom-left",),
}

_BORDER_WIDTHS = {"0": "0px", "2": "2px", "4": "4px", "8": "8px"}


def _keywords(*values: str) -> dict[str, str]:
    return {value: value for value in values}


def _bare(registry: ResolverRegistry, table: dict[str, Declarations]) -> None:
    """Register utilities that take no value (``flex``, ``italic``)."""
    for name, decls in table.items():
        registry.register(name, StaticResolver({"": decls}))


# ---------------------------------------------------------------------------
# Layout
# ---------------------------------------------------------------------------


def _register_layout(registry: ResolverRegistry, theme: Theme) -> None:
    _bare(registry, {
        name: [("display", name)]
        for name in (
            "block", "inline-block", "inline", "flex", "inline-flex", "grid",
            "inline-grid", "table", "contents", "flow-root", "list-item",
        )
    })
    _bare(registry, {"hidden": [("display", "none")]})
    _bare(registry, {
        name: [("position", name)]
        for name in ("static", "fixed", "absolute", "relative", "sticky")
    })
    _bare(registry, {
        "visible": [("visibility", "visible")],
        "invisible": [("visibility", "hidden")],
        "collapse": [("visibility", "collapse")],
    })

    overflow = _keywords("auto", "hidden", "clip", "visible", "scroll")
    registry.register("overflow-", ScaleResolver("overflow", overflow, hints=()))
    registry.register("overflow-x-", ScaleResolver("overflow-x", overflow, hints=()))
    registry.register("overflow-y-", ScaleResolver("overflow-y", overflow, hints=()))

    registry.register("z-", ScaleResolver("z-index", theme.z_index, hints=("number",)))
    registry.register(
        "-z-", ScaleResolver("z-index", theme.z_index, hints=("number",), negative=True)
    )

    inset_scale = {**theme.spacing, "auto": "auto", "full": "100%"}
    for name, properties in _INSET_SIDES.items():
        registry.register(
            f"{name}-", ScaleResolver(properties, inset_scale, fractions=True)
        )
        registry.register(
            f"-{name}-",
            ScaleResolver(properties, inset_scale, fractions=True, negative=True),
        )


# ---------------------------------------------------------------------------
# Spacing and sizing
# ---------------------------------------------------------------------------


def _register_spacing(registry: ResolverRegistry, theme: Theme) -> None:
    for name, properties in _PADDING_SIDES.items():
        registry.register(f"{name}-", ScaleResolver(properties, theme.spacing))

    margin_scale = {**theme.spacing, "auto": "auto"}
    for name, properties in _MARGIN_SIDES.items():
        registry.register(f"{name}-", ScaleResolver(properties, margin_scale))
        registry.register(
            f"-{name}-", ScaleResolver(properties, theme.spacing, negative=True)
        )

    registry.register("gap-", ScaleResolver("gap", theme.spacing))
    registry.register("gap-x-", ScaleResolver("column-gap", theme.spacing))
    registry.register("gap-y-", ScaleResolver("row-gap", theme.spacing))


def _register_sizing(registry: ResolverRegistry, theme: Theme) -> None:
    intrinsic = {
        "auto": "auto",
        "full": "100%",
        "min": "min-content",
        "max": "max-content",
        "fit": "fit-content",
    }
    width = {**theme.spacing, **intrinsic, "screen": "100vw", "svw": "100svw", "dvw": "100dvw"}
    height = {**theme.spacing, **intrinsic, "screen": "100vh", "svh": "100svh", "dvh": "100dvh"}
    registry.register("w-", ScaleResolver("width", width, fractions=True))
    registry.register("h-", ScaleResolver("height", height, fractions=True))
    registry.register("size-", ScaleResolver(("width", "height"), width, fractions=True))
    registry.register("min-w-", ScaleResolver("min-width", width))
    registry.register("min-h-", ScaleResolver("min-height", height))
    registry.register(
        "max-w-",
        ScaleResolver("max-width", {**theme.containers, **intrinsic, "none": "none"}),
    )
    registry.register("max-h-", ScaleResolver("max-height", {**height, "none": "none"}))


# ---------------------------------------------------------------------------
# Flexbox, grid and alignment
# ---------------------------------------------------------------------------


def _register_flex_grid(registry: ResolverRegistry, theme: Theme) -> None:
    registry.register("flex-", StaticResolver({
        "row": [("flex-direction", "row")],
        "row-reverse": [("flex-direction", "row-reverse")],
        "col": [("flex-direction", "column")],
        "col-reverse": [("flex-direction", "column-reverse")],
        "wrap": [("flex-wrap", "wrap")],
        "wrap-reverse": [("flex-wrap", "wrap-reverse")],
        "nowrap": [("flex-wrap", "nowrap")],
        "1": [("flex", "1 1 0%")],
        "auto": [("flex", "1 1 auto")],
        "initial": [("flex", "0 1 auto")],
        "none": [("flex", "none")],
    }))
    _bare(registry, {"grow": [("flex-grow", "1")], "shrink": [("flex-shrink", "1")]})
    registry.register("grow-", ScaleResolver("flex-grow", {"0": "0"}, hints=("number",)))
    registry.register("shrink-", ScaleResolver("flex-shrink", {"0": "0"}, hints=("number",)))
    registry.register(
        "basis-",
        ScaleResolver("flex-basis", {**theme.spacing, "auto": "auto", "full": "100%"},
                      fractions=True),
    )
    registry.register("order-", ScaleResolver("order", {
        **{str(n): str(n) for n in range(1, 13)},
        "first": "-9999",
        "last": "9999",
        "none": "0",
    }, hints=("number",)))

    tracks = {str(n): f"repeat({n}, minmax(0, 1fr))" for n in range(1, 13)}
    tracks["none"] = "none"
    tracks["subgrid"] = "subgrid"
    registry.register("grid-cols-", ScaleResolver("grid-template-columns", tracks, hints=()))
    registry.register("grid-rows-", ScaleResolver("grid-template-rows", tracks, hints=()))
    spans = {str(n): f"span {n} / span {n}" for n in range(1, 13)}
    spans["full"] = "1 / -1"
    registry.register("col-span-", ScaleResolver("grid-column", spans, hints=()))
    registry.register("row-span-", ScaleResolver("grid-row", spans, hints=()))
    registry.register("grid-flow-", ScaleResolver("grid-auto-flow", {
        "row": "row",
        "col": "column",
        "dense": "dense",
        "row-dense": "row dense",
        "col-dense": "column dense",
    }, hints=()))


def _register_alignment(registry: ResolverRegistry, theme: Theme) -> None:
    distribution = {
        "normal": "normal",
        "start": "flex-start",
        "end": "flex-end",
        "center": "center",
        "between": "space-between",
        "around": "space-around",
        "evenly": "space-evenly",
        "stretch": "stretch",
    }
    registry.register("justify-", ScaleResolver("justify-content", distribution, hints=()))
    registry.register("content-", ScaleResolver("align-content", distribution, hints=()))
    registry.register("items-", ScaleResolver("align-items", {
        "start": "flex-start",
        "end": "flex-end",
        "center": "center",
        "baseline": "baseline",
        "stretch": "stretch",
    }, hints=()))
    registry.register("self-", ScaleResolver("align-self", {
        "auto": "auto",
        "start": "flex-start",
        "end": "flex-end",
        "center": "center",
        "stretch": "stretch",
        "baseline": "baseline",
    }, hints=()))
    placement = _keywords("start", "end", "center", "stretch")
    registry.register("justify-items-", ScaleResolver("justify-items", placement, hints=()))
    registry.register(
        "justify-self-",
        ScaleResolver("justify-self", {**placement, "auto": "auto"}, hints=()),
    )


# ---------------------------------------------------------------------------
# Typography
# ---------------------------------------------------------------------------


def _register_typography(registry: ResolverRegistry, theme: Theme) -> None:
    registry.register("text-", FirstMatchResolver(
        FontSizeResolver(theme.font_sizes, theme.leading),
        StaticResolver({
            **{
                name: [("text-align", name)]
                for name in ("left", "center", "right", "justify", "start", "end")
            },
            "ellipsis": [("text-overflow", "ellipsis")],
            "clip": [("text-overflow", "clip")],
            "wrap": [("text-wrap", "wrap")],
            "nowrap": [("text-wrap", "nowrap")],
            "balance": [("text-wrap", "balance")],
            "pretty": [("text-wrap", "pretty")],
        }),
        ScaleResolver("font-size", {}, accepts=is_length, hints=("length",)),
        ColorResolver("color", theme.colors),
    ))
    registry.register("font-", FirstMatchResolver(
        StaticResolver({
            name: [("font-weight", weight)] for name, weight in theme.font_weights.items()
        }),
        StaticResolver({
            name: [("font-family", family)] for name, family in theme.font_families.items()
        }),
        ScaleResolver("font-weight", {}, accepts=str.isdigit, hints=("number",)),
        ScaleResolver("font-family", {}, accepts=lambda text: False, hints=("family-name",)),
    ))
    registry.register("leading-", ScaleResolver(
        "line-height", theme.leading, hints=("length", "number", "percentage")
    ))
    registry.register("tracking-", ScaleResolver("letter-spacing", theme.tracking))
    registry.register("whitespace-", ScaleResolver("white-space", _keywords(
        "normal", "nowrap", "pre", "pre-line", "pre-wrap", "break-spaces",
    ), hints=()))
    _bare(registry, {
        "italic": [("font-style", "italic")],
        "not-italic": [("font-style", "normal")],
        "uppercase": [("text-transform", "uppercase")],
        "lowercase": [("text-transform", "lowercase")],
        "capitalize": [("text-transform", "capitalize")],
        "normal-case": [("text-transform", "none")],
        "underline": [("text-decoration-line", "underline")],
        "overline": [("text-decoration-line", "overline")],
        "line-through": [("text-decoration-line", "line-through")],
        "no-underline": [("text-decoration-line", "none")],
        "truncate": [
            ("overflow", "hidden"),
            ("text-overflow", "ellipsis"),
            ("white-space", "nowrap"),
        ],
    })


# ---------------------------------------------------------------------------
# Colours, borders and effects
# ---------------------------------------------------------------------------


def _register_backgrounds(registry: ResolverRegistry, theme: Theme) -> None:
    registry.register("bg-", ColorResolver("background-color", theme.colors))


def _register_borders(registry: ResolverRegistry, theme: Theme) -> None:
    _bare(registry, {"border": [("border-width", "1px")]})
    side_defaults: dict[str, Declarations] = {
        side: [(f"border-{edge}-width", "1px") for edge in edges]
        for side, edges in _BORDER_SIDES.items()
    }
    styles: dict[str, Declarations] = {
        style: [("border-style", style)]
        for style in ("solid", "dashed", "dotted", "double", "hidden", "none")
    }
    registry.register("border-", FirstMatchResolver(
        StaticResolver({**side_defaults, **styles}),
        ScaleResolver("border-width", _BORDER_WIDTHS, accepts=is_length,
                      hints=("length", "line-width")),
        ColorResolver("border-color", theme.colors),
    ))
    for side, edges in _BORDER_SIDES.items():
        registry.register(f"border-{side}-", FirstMatchResolver(
            ScaleResolver([f"border-{edge}-width" for edge in edges], _BORDER_WIDTHS,
                          accepts=is_length, hints=("length", "line-width")),
            ColorResolver([f"border-{edge}-color" for edge in edges], theme.colors),
        ))

    radius = {name: value for name, value in theme.radius.items() if name}
    default_radius = theme.radius.get("", "0.25rem")
    _bare(registry, {"rounded": [("border-radius", default_radius)]})
    corner_defaults: dict[str, Declarations] = {
        side: [(f"border-{corner}-radius", default_radius) for corner in corners]
        for side, corners in _RADIUS_CORNERS.items()
    }
    registry.register("rounded-", FirstMatchResolver(
        StaticResolver(corner_defaults),
        ScaleResolver("border-radius", radius, accepts=is_length),
    ))
    for side, corners in _RADIUS_CORNERS.items():
        registry.register(
            f"rounded-{side}-",
            ScaleResolver([f"border-{corner}-radius" for corner in corners], radius,
                          accepts=is_length),
        )


def _register_effects(registry: ResolverRegistry, theme: Theme) -> None:
    registry.register("opacity-", ScaleResolver(
        "opacity", theme.opacity, hints=("number", "percentage")
    ))
    shadows = {name: value for name, value in theme.shadows.items() if name}
    _bare(registry, {"shadow": [("box-shadow", theme.shadows.get("", "none"))]})
    registry.register("shadow-", ScaleResolver("box-shadow", shadows, hints=("shadow",)))


# ---------------------------------------------------------------------------
# Interactivity and transitions
# ---------------------------------------------------------------------------


def _register_interactivity(registry: ResolverRegistry, theme: Theme) -> None:
    registry.register("cursor-", ScaleResolver("cursor", _keywords(
        "auto", "default", "pointer", "wait", "text", "move", "help", "not-allowed",
        "none", "progress", "crosshair", "grab", "grabbing", "zoom-in", "zoom-out",
    ), hints=()))
    registry.register("pointer-events-", ScaleResolver(
        "pointer-events", _keywords("none", "auto"), hints=()
    ))
    registry.register("select-", ScaleResolver(
        "user-select", _keywords("none", "text", "all", "auto"), hints=()
    ))


def _register_transitions(registry: ResolverRegistry, theme: Theme) -> None:
    colors = (
        "color, background-color, border-color, text-decoration-color, fill, stroke"
    )

    def timed(properties: str) -> Declarations:
        return [("transition-property", properties), _TRANSITION_TIMING, _TRANSITION_DURATION]

    _bare(registry, {
        "transition": timed(
            f"{colors}, opacity, box-shadow, transform, filter, backdrop-filter"
        ),
    })
    registry.register("transition-", StaticResolver({
        "none": [("transition-property", "none")],
        "all": timed("all"),
        "colors": timed(colors),
        "opacity": timed("opacity"),
        "shadow": timed("box-shadow"),
        "transform": timed("transform"),
    }))
    registry.register("duration-", ScaleResolver(
        "transition-duration", theme.durations, hints=("time",)
    ))
    registry.register("delay-", ScaleResolver(
        "transition-delay", theme.durations, hints=("time",)
    ))
    registry.register("ease-", ScaleResolver(
        "transition-timing-function", theme.easings, hints=()
    ))


def _register_arbitrary(registry: ResolverRegistry, theme: Theme) -> None:
    registry.register("[", ArbitraryPropertyResolver())


_CATEGORIES: list[Callable[[ResolverRegistry, Theme], None]] = [
    _register_layout,
    _register_spacing,
    _register_sizing,
    _register_flex_grid,
    _register_alignment,
    _register_typography,
    _register_backgrounds,
    _register_borders,
    _register_effects,
    _register_interactivity,
    _register_transitions,
    _register_arbitrary,
]


def register_defaults(registry: ResolverRegistry, theme: Theme | None = None) -> None:
    """Register every built-in utility into *registry* without freezing it."""
    theme = theme or Theme()
    for register_category in _CATEGORIES:
        register_category(registry, theme)


def build_default_registry(theme: Theme | None = None) -> ResolverRegistry:
    """Return a frozen registry holding every built-in utility."""
    registry = ResolverRegistry()
    register_defaults(registry, theme)
    return registry.freeze()
