"""Resolver protocol and the generic resolver algorithms.

A resolver turns the suffix of a :class:`UtilityToken` into CSS declarations.
Resolvers are pure: the same token always yields the same result, and
``None`` means "not mine". The built-in utilities are these few algorithms
instantiated with different tables (see ``tailsmith.registry.defaults``).
"""

from __future__ import annotations

import re
from typing import Callable, Iterable, Mapping, Protocol, Sequence, runtime_checkable

from tailsmith.model.css import CssProperty
from tailsmith.model.token import UtilityToken
from tailsmith.resolvers.color import looks_like_color, opacity_of, with_alpha
from tailsmith.resolvers.theme import format_number
from tailsmith.resolvers.values import UtilityValue, ValueKind, parse_value


@runtime_checkable
class Resolver(Protocol):
    """Interface that every utility resolver must satisfy."""

    def parse(self, token: UtilityToken) -> list[CssProperty] | None:
        ...


Declarations = Sequence[tuple[str, str]]

_NUMBER_RE = re.compile(r"^\d+(?:\.\d+)?$")


class StaticResolver:
    """Exact suffix lookup: ``center`` -> ``text-align: center``.

    The empty suffix is a valid key, used for bare utilities such as
    ``flex`` or ``italic``.
    """

    def __init__(self, table: Mapping[str, Declarations]) -> None:
        self._table: dict[str, tuple[CssProperty, ...]] = {
            suffix: tuple(CssProperty(name, value) for name, value in decls)
            for suffix, decls in table.items()
        }

    def parse(self, token: UtilityToken) -> list[CssProperty] | None:
        decls = self._table.get(token.suffix)
        return list(decls) if decls is not None else None

    def keys(self) -> list[str]:
        return list(self._table)


class ScaleResolver:
    """Look a suffix up in a scale and apply it to one or more properties.

    Beyond the scale it accepts arbitrary values (``[2.5rem]``), custom
    properties (``(--gutter)``) and, when enabled, fractions (``1/2``).
    ``negative`` resolvers are registered under a ``-`` prefix and flip the
    sign of the result.
    """

    def __init__(
        self,
        properties: str | Iterable[str],
        scale: Mapping[str, str],
        *,
        negative: bool = False,
        fractions: bool = False,
        default: str | None = None,
        hints: Iterable[str] = ("length",),
        accepts: Callable[[str], bool] | None = None,
    ) -> None:
        self.properties = (properties,) if isinstance(properties, str) else tuple(properties)
        self.scale = dict(scale)
        self.negative = negative
        self.fractions = fractions
        self.default = default
        self.hints = frozenset(hints)
        self.accepts = accepts

    def parse(self, token: UtilityToken) -> list[CssProperty] | None:
        suffix = token.suffix
        if not suffix:
            if self.default is None:
                return None
            return self._declare(self.default)
        value = self._lookup(parse_value(suffix))
        if value is None:
            return None
        return self._declare(value)

    def _lookup(self, value: UtilityValue) -> str | None:
        if value.kind is ValueKind.KEYWORD:
            if value.modifier is not None:
                return self._fraction(value)
            return self.scale.get(value.text)
        if value.modifier is not None:
            return None
        if value.hint is not None:
            return value.text if value.hint in self.hints else None
        if value.kind is ValueKind.ARBITRARY and self.accepts and not self.accepts(value.text):
            return None
        return value.text

    def _fraction(self, value: UtilityValue) -> str | None:
        fraction = value.fraction
        if not self.fractions or fraction is None:
            return None
        numerator, denominator = fraction
        return f"{format_number(numerator / denominator * 100)}%"

    def _declare(self, value: str) -> list[CssProperty]:
        if self.negative:
            value = _negate(value)
        return [CssProperty(name, value) for name in self.properties]


def _negate(value: str) -> str:
    if value in ("0", "0px", "auto"):
        return value
    if value[0].isdigit() or value[0] == ".":
        return f"-{value}"
    return f"calc({value} * -1)"


class ColorResolver:
    """Palette colours with an optional ``/opacity`` modifier.

    ``bg-blue-500``, ``bg-[#0af]``, ``bg-(--brand)``, ``bg-blue-500/50``.
    """

    def __init__(self, properties: str | Iterable[str], palette: Mapping[str, str]) -> None:
        self.properties = (properties,) if isinstance(properties, str) else tuple(properties)
        self.palette = dict(palette)

    def parse(self, token: UtilityToken) -> list[CssProperty] | None:
        suffix = token.suffix
        if not suffix:
            return None
        value = parse_value(suffix)
        color = self._color(value)
        if color is None:
            return None
        if value.modifier is not None:
            alpha = opacity_of(value.modifier)
            if alpha is None:
                return None
            color = with_alpha(color, alpha)
        return [CssProperty(name, color) for name in self.properties]

    def _color(self, value: UtilityValue) -> str | None:
        if value.kind is ValueKind.KEYWORD:
            return self.palette.get(value.text)
        if value.hint is not None:
            return value.text if value.hint == "color" else None
        if value.kind is ValueKind.CUSTOM_PROPERTY:
            return value.text
        return value.text if looks_like_color(value.text) else None


class FontSizeResolver:
    """Named font sizes with their paired line height.

    ``text-sm`` uses the scale's line height; ``text-sm/6``,
    ``text-sm/tight`` and ``text-sm/[1.7]`` override it.
    """

    def __init__(self, sizes: Mapping[str, tuple[str, str]], leading: Mapping[str, str]) -> None:
        self.sizes = dict(sizes)
        self.leading = dict(leading)

    def parse(self, token: UtilityToken) -> list[CssProperty] | None:
        suffix = token.suffix
        if not suffix:
            return None
        value = parse_value(suffix)
        if not value.is_keyword or value.text not in self.sizes:
            return None
        size, line_height = self.sizes[value.text]
        if value.modifier is not None:
            line_height = self._line_height(value.modifier)
            if line_height is None:
                return None
        return [CssProperty("font-size", size), CssProperty("line-height", line_height)]

    def _line_height(self, modifier: UtilityValue) -> str | None:
        if modifier.kind is ValueKind.KEYWORD:
            if modifier.text in self.leading:
                return self.leading[modifier.text]
            return modifier.text if _NUMBER_RE.match(modifier.text) else None
        if modifier.hint is not None and modifier.hint not in ("length", "number"):
            return None
        return modifier.text


class FirstMatchResolver:
    """Several resolvers sharing one prefix, tried in order.

    ``text-`` covers font sizes, alignment and colours. This only chooses
    among resolvers of the same prefix; it never retries a shorter one.
    """

    def __init__(self, *resolvers: Resolver) -> None:
        if not resolvers:
            raise ValueError("FirstMatchResolver needs at least one resolver")
        self.resolvers = resolvers

    def parse(self, token: UtilityToken) -> list[CssProperty] | None:
        for resolver in self.resolvers:
            result = resolver.parse(token)
            if result is not None:
                return result
        return None


class ArbitraryPropertyResolver:
    """``[mask-type:luminance]`` -> ``mask-type: luminance``."""

    def parse(self, token: UtilityToken) -> list[CssProperty] | None:
        value = parse_value(token.text)
        if value.kind is not ValueKind.ARBITRARY or value.hint is None:
            return None
        if value.modifier is not None:
            return None
        return [CssProperty(value.hint, value.text)]
