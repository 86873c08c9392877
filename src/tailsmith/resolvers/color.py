"""Colour and length helpers shared by the resolvers."""

from __future__ import annotations

import re

from tailsmith.resolvers.theme import format_number
from tailsmith.resolvers.values import UtilityValue, ValueKind

_HEX_RE = re.compile(r"^#([0-9a-fA-F]{3,4}|[0-9a-fA-F]{6}|[0-9a-fA-F]{8})$")

_LENGTH_RE = re.compile(
    r"^-?(\d+\.?\d*|\.\d+)"
    r"(px|rem|em|ex|ch|lh|%|vh|vw|vmin|vmax|svh|lvh|dvh|svw|lvw|dvw|cqw|cqh|pt|pc|cm|mm|in)$"
)

_COLOR_FUNCTIONS = (
    "rgb(", "rgba(", "hsl(", "hsla(", "hwb(", "lab(", "lch(",
    "oklab(", "oklch(", "color(", "color-mix(", "light-dark(",
)

_LENGTH_FUNCTIONS = ("calc(", "min(", "max(", "clamp(", "var(")

NAMED_COLORS = frozenset({
    "black", "white", "red", "green", "blue", "yellow", "orange", "purple",
    "pink", "gray", "grey", "silver", "maroon", "navy", "teal", "olive",
    "lime", "aqua", "fuchsia", "transparent", "currentcolor", "currentColor",
})


def is_hex_color(text: str) -> bool:
    return bool(_HEX_RE.match(text))


def looks_like_color(text: str) -> bool:
    """True for hex colours, colour functions and common named colours."""
    lowered = text.lower()
    return (
        is_hex_color(text)
        or lowered.startswith(_COLOR_FUNCTIONS)
        or text in NAMED_COLORS
    )


def is_length(text: str) -> bool:
    """True for ``0``, dimensioned numbers and math functions."""
    return text == "0" or bool(_LENGTH_RE.match(text)) or text.startswith(_LENGTH_FUNCTIONS)


def hex_to_rgb(text: str) -> tuple[int, int, int]:
    """Parse ``#rgb``, ``#rgba``, ``#rrggbb`` or ``#rrggbbaa``; alpha is dropped."""
    if not is_hex_color(text):
        raise ValueError(f"Not a hex colour: {text!r}")
    digits = text[1:]
    if len(digits) in (3, 4):
        digits = "".join(c * 2 for c in digits[:3])
    return (int(digits[0:2], 16), int(digits[2:4], 16), int(digits[4:6], 16))


def opacity_of(modifier: UtilityValue) -> float | None:
    """Turn a ``/50`` or ``/[0.37]`` modifier into an alpha in ``[0, 1]``."""
    text = modifier.text
    try:
        if modifier.kind is ValueKind.KEYWORD:
            if not text.isdigit():
                return None
            alpha = int(text) / 100
        elif modifier.kind is ValueKind.ARBITRARY:
            alpha = float(text[:-1]) / 100 if text.endswith("%") else float(text)
        else:
            return None
    except ValueError:
        return None
    if not 0 <= alpha <= 1:
        return None
    return alpha


def with_alpha(color: str, alpha: float) -> str:
    """Apply *alpha* to *color*.

    Hex colours become ``rgb(r g b / a)``; anything else is mixed with
    ``transparent``.
    """
    if is_hex_color(color):
        r, g, b = hex_to_rgb(color)
        return f"rgb({r} {g} {b} / {format_number(alpha)})"
    return f"color-mix(in oklab, {color} {format_number(alpha * 100)}%, transparent)"
