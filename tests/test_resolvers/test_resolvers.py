"""Tests for the generic resolver algorithms and colour helpers."""

import pytest

from tailsmith.errors import ValueSyntaxError
from tailsmith.model.css import CssProperty
from tailsmith.model.token import UtilityToken
from tailsmith.resolvers import (
    ArbitraryPropertyResolver,
    ColorResolver,
    FirstMatchResolver,
    FontSizeResolver,
    Resolver,
    ScaleResolver,
    StaticResolver,
)
from tailsmith.resolvers.color import (
    hex_to_rgb,
    is_length,
    looks_like_color,
    opacity_of,
    with_alpha,
)
from tailsmith.resolvers.theme import Theme, format_number
from tailsmith.resolvers.values import parse_value


def _token(text: str, prefix: str) -> UtilityToken:
    return UtilityToken(text, prefix=prefix)


# ---------------------------------------------------------------------------
# StaticResolver
# ---------------------------------------------------------------------------


class TestStaticResolver:
    def test_hit(self):
        resolver = StaticResolver({"center": [("text-align", "center")]})
        assert resolver.parse(_token("text-center", "text-")) == [
            CssProperty("text-align", "center")
        ]

    def test_miss(self):
        resolver = StaticResolver({"center": [("text-align", "center")]})
        assert resolver.parse(_token("text-middle", "text-")) is None

    def test_bare_utility(self):
        resolver = StaticResolver({"": [("display", "flex")]})
        assert resolver.parse(_token("flex", "flex")) == [CssProperty("display", "flex")]

    def test_satisfies_protocol(self):
        assert isinstance(StaticResolver({}), Resolver)


# ---------------------------------------------------------------------------
# ScaleResolver
# ---------------------------------------------------------------------------


class TestScaleResolver:
    def test_scale_lookup_multiple_properties(self):
        resolver = ScaleResolver(("padding-left", "padding-right"), {"4": "1rem"})
        assert resolver.parse(_token("px-4", "px-")) == [
            CssProperty("padding-left", "1rem"),
            CssProperty("padding-right", "1rem"),
        ]

    def test_scale_miss(self):
        resolver = ScaleResolver("padding", {"4": "1rem"})
        assert resolver.parse(_token("p-5", "p-")) is None

    def test_arbitrary_value(self):
        resolver = ScaleResolver("padding", {})
        assert resolver.parse(_token("p-[13px]", "p-")) == [CssProperty("padding", "13px")]

    def test_hint_must_be_accepted(self):
        resolver = ScaleResolver("padding", {})
        assert resolver.parse(_token("p-[color:red]", "p-")) is None
        assert resolver.parse(_token("p-[length:2px]", "p-")) == [
            CssProperty("padding", "2px")
        ]

    def test_accepts_predicate(self):
        resolver = ScaleResolver("font-size", {}, accepts=is_length)
        assert resolver.parse(_token("text-[14px]", "text-")) is not None
        assert resolver.parse(_token("text-[#0af]", "text-")) is None

    def test_custom_property(self):
        resolver = ScaleResolver("gap", {})
        assert resolver.parse(_token("gap-(--gutter)", "gap-")) == [
            CssProperty("gap", "var(--gutter)")
        ]

    def test_fractions(self):
        resolver = ScaleResolver("width", {}, fractions=True)
        assert resolver.parse(_token("w-1/2", "w-")) == [CssProperty("width", "50%")]
        assert resolver.parse(_token("w-1/3", "w-")) == [CssProperty("width", "33.333333%")]

    def test_fractions_disabled(self):
        resolver = ScaleResolver("padding", {"1": "0.25rem"})
        assert resolver.parse(_token("p-1/2", "p-")) is None

    def test_negative(self):
        resolver = ScaleResolver("margin", {"4": "1rem", "0": "0px"}, negative=True)
        assert resolver.parse(_token("-m-4", "-m-")) == [CssProperty("margin", "-1rem")]
        assert resolver.parse(_token("-m-0", "-m-")) == [CssProperty("margin", "0px")]
        assert resolver.parse(_token("-m-[3px]", "-m-")) == [CssProperty("margin", "-3px")]
        assert resolver.parse(_token("-m-(--gap)", "-m-")) == [
            CssProperty("margin", "calc(var(--gap) * -1)")
        ]

    def test_default_for_empty_suffix(self):
        resolver = ScaleResolver("border-radius", {}, default="0.25rem")
        assert resolver.parse(_token("rounded", "rounded")) == [
            CssProperty("border-radius", "0.25rem")
        ]

    def test_empty_suffix_without_default(self):
        assert ScaleResolver("padding", {"4": "1rem"}).parse(_token("p-", "p-")) is None

    def test_malformed_raises(self):
        with pytest.raises(ValueSyntaxError):
            ScaleResolver("padding", {}).parse(_token("p-[13px", "p-"))


# ---------------------------------------------------------------------------
# ColorResolver
# ---------------------------------------------------------------------------


class TestColorResolver:
    @pytest.fixture
    def resolver(self):
        return ColorResolver("background-color", {"blue-500": "#3b82f6", "current": "currentColor"})

    def test_palette(self, resolver):
        assert resolver.parse(_token("bg-blue-500", "bg-")) == [
            CssProperty("background-color", "#3b82f6")
        ]

    def test_opacity_on_hex(self, resolver):
        assert resolver.parse(_token("bg-blue-500/50", "bg-")) == [
            CssProperty("background-color", "rgb(59 130 246 / 0.5)")
        ]

    def test_opacity_on_keyword_colour(self, resolver):
        assert resolver.parse(_token("bg-current/25", "bg-")) == [
            CssProperty(
                "background-color", "color-mix(in oklab, currentColor 25%, transparent)"
            )
        ]

    def test_arbitrary_hex(self, resolver):
        assert resolver.parse(_token("bg-[#0af]/25", "bg-")) == [
            CssProperty("background-color", "rgb(0 170 255 / 0.25)")
        ]

    def test_arbitrary_opacity_modifier(self, resolver):
        assert resolver.parse(_token("bg-blue-500/[0.37]", "bg-")) == [
            CssProperty("background-color", "rgb(59 130 246 / 0.37)")
        ]

    def test_custom_property(self, resolver):
        assert resolver.parse(_token("bg-(--brand)/50", "bg-")) == [
            CssProperty(
                "background-color", "color-mix(in oklab, var(--brand) 50%, transparent)"
            )
        ]

    def test_rejects_non_colours(self, resolver):
        assert resolver.parse(_token("bg-[2px]", "bg-")) is None
        assert resolver.parse(_token("bg-[length:2px]", "bg-")) is None
        assert resolver.parse(_token("bg-purple-500", "bg-")) is None

    def test_rejects_out_of_range_opacity(self, resolver):
        assert resolver.parse(_token("bg-blue-500/150", "bg-")) is None


# ---------------------------------------------------------------------------
# FirstMatchResolver and ArbitraryPropertyResolver
# ---------------------------------------------------------------------------


class TestFirstMatchResolver:
    def test_tries_in_order(self):
        resolver = FirstMatchResolver(
            StaticResolver({"lg": [("font-size", "1.125rem")]}),
            ColorResolver("color", {"red-500": "#ef4444"}),
        )
        assert resolver.parse(_token("text-lg", "text-")) == [
            CssProperty("font-size", "1.125rem")
        ]
        assert resolver.parse(_token("text-red-500", "text-")) == [
            CssProperty("color", "#ef4444")
        ]
        assert resolver.parse(_token("text-nope", "text-")) is None

    def test_requires_resolvers(self):
        with pytest.raises(ValueError):
            FirstMatchResolver()


class TestFontSizeResolver:
    @pytest.fixture
    def resolver(self):
        theme = Theme()
        return FontSizeResolver(theme.font_sizes, theme.leading)

    def test_paired_line_height(self, resolver):
        assert resolver.parse(_token("text-sm", "text-")) == [
            CssProperty("font-size", "0.875rem"),
            CssProperty("line-height", "1.25rem"),
        ]

    @pytest.mark.parametrize(
        "text,line_height",
        [
            ("text-sm/6", "1.5rem"),
            ("text-sm/tight", "1.25"),
            ("text-sm/1.7", "1.7"),
            ("text-sm/[1.7]", "1.7"),
            ("text-sm/[length:22px]", "22px"),
        ],
    )
    def test_line_height_modifier(self, resolver, text, line_height):
        assert resolver.parse(_token(text, "text-")) == [
            CssProperty("font-size", "0.875rem"),
            CssProperty("line-height", line_height),
        ]

    @pytest.mark.parametrize(
        "text", ["text-red-500", "text-sm/wide", "text-sm/[color:red]", "text-[2rem]", "text-"]
    )
    def test_declines(self, resolver, text):
        assert resolver.parse(_token(text, "text-")) is None


class TestArbitraryPropertyResolver:
    def test_property(self):
        resolver = ArbitraryPropertyResolver()
        assert resolver.parse(_token("[mask-type:luminance]", "[")) == [
            CssProperty("mask-type", "luminance")
        ]

    def test_underscores(self):
        resolver = ArbitraryPropertyResolver()
        assert resolver.parse(_token("[grid-template-columns:1fr_2fr]", "[")) == [
            CssProperty("grid-template-columns", "1fr 2fr")
        ]

    def test_without_property_name(self):
        assert ArbitraryPropertyResolver().parse(_token("[luminance]", "[")) is None

    def test_custom_property_declaration(self):
        assert ArbitraryPropertyResolver().parse(_token("[--my-var:1px]", "[")) == [
            CssProperty("--my-var", "1px")
        ]


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


class TestColorHelpers:
    def test_hex_to_rgb(self):
        assert hex_to_rgb("#fff") == (255, 255, 255)
        assert hex_to_rgb("#3b82f6") == (59, 130, 246)
        assert hex_to_rgb("#3b82f680") == (59, 130, 246)

    def test_hex_to_rgb_rejects(self):
        with pytest.raises(ValueError):
            hex_to_rgb("blue")

    def test_with_alpha(self):
        assert with_alpha("#000", 0.05) == "rgb(0 0 0 / 0.05)"
        assert with_alpha("red", 1) == "color-mix(in oklab, red 100%, transparent)"

    def test_opacity_of(self):
        assert opacity_of(parse_value("a/50").modifier) == 0.5
        assert opacity_of(parse_value("a/[37%]").modifier) == pytest.approx(0.37)
        assert opacity_of(parse_value("a/x").modifier) is None

    def test_looks_like_color(self):
        assert looks_like_color("#0af")
        assert looks_like_color("rgb(0 0 0)")
        assert looks_like_color("OKLCH(0.5 0.1 200)")
        assert not looks_like_color("2px")

    def test_is_length(self):
        assert is_length("2.5rem")
        assert is_length("0")
        assert is_length("-4px")
        assert is_length("calc(100%-1rem)")
        assert not is_length("red")


class TestTheme:
    def test_spacing_scale(self):
        spacing = Theme().spacing
        assert spacing["4"] == "1rem"
        assert spacing["0.5"] == "0.125rem"
        assert spacing["px"] == "1px"

    def test_extend(self):
        theme = Theme().extend(colors={"brand": "#0af"})
        assert theme.colors["brand"] == "#0af"
        assert theme.colors["blue-500"] == "#3b82f6"

    def test_format_number(self):
        assert format_number(0.5) == "0.5"
        assert format_number(1.0) == "1"
        assert format_number(100 / 3) == "33.333333"
