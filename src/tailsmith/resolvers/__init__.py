"""Utility resolvers: value parsing, theme tables and resolver algorithms."""

from tailsmith.resolvers.base import (
    ArbitraryPropertyResolver,
    ColorResolver,
    FirstMatchResolver,
    FontSizeResolver,
    Resolver,
    ScaleResolver,
    StaticResolver,
)
from tailsmith.resolvers.theme import Theme
from tailsmith.resolvers.values import UtilityValue, ValueKind, parse_value

__all__ = [
    "Resolver",
    "StaticResolver",
    "ScaleResolver",
    "ColorResolver",
    "FirstMatchResolver",
    "FontSizeResolver",
    "ArbitraryPropertyResolver",
    "Theme",
    "UtilityValue",
    "ValueKind",
    "parse_value",
]
