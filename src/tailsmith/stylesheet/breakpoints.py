"""Responsive breakpoints and media-query ordering."""

from __future__ import annotations

import re
from typing import Iterator, Mapping

from tailsmith.errors import ConfigError

DEFAULT_BREAKPOINTS: dict[str, str] = {
    "sm": "640px",
    "md": "768px",
    "lg": "1024px",
    "xl": "1280px",
    "2xl": "1536px",
}

ROOT_FONT_SIZE_PX = 16.0

_WIDTH_RE = re.compile(r"^(\d+\.?\d*|\.\d+)(px|rem|em)$")
_MIN_WIDTH_RE = re.compile(r"min-width:\s*(\d+\.?\d*|\.\d+)(px|rem|em)")


def _to_px(number: str, unit: str) -> float:
    value = float(number)
    return value if unit == "px" else value * ROOT_FONT_SIZE_PX


class BreakpointRegistry:
    """Ordered, immutable ``name -> (min-width: ...)`` mapping.

    Breakpoints are kept sorted by width so that iteration, and the output
    order of their media groups, runs from the narrowest to the widest.
    """

    def __init__(self, breakpoints: Mapping[str, str] | None = None) -> None:
        source = DEFAULT_BREAKPOINTS if breakpoints is None else breakpoints
        entries: list[tuple[float, str, str]] = []
        for name, width in source.items():
            if not name or ":" in name:
                raise ConfigError(f"Invalid breakpoint name: {name!r}")
            match = _WIDTH_RE.match(str(width).strip())
            if match is None:
                raise ConfigError(
                    f"Breakpoint '{name}' has invalid width {width!r} "
                    "(expected px, rem or em)"
                )
            entries.append((_to_px(*match.groups()), name, str(width).strip()))
        entries.sort()
        self._entries: tuple[tuple[float, str, str], ...] = tuple(entries)
        self._queries: dict[str, str] = {
            name: f"(min-width: {width})" for _, name, width in entries
        }

    def names(self) -> list[str]:
        return [name for _, name, _ in self._entries]

    def query(self, name: str) -> str:
        """``sm`` -> ``(min-width: 640px)``."""
        return self._queries[name]

    def at_rule(self, name: str) -> str:
        """``sm`` -> ``@media (min-width: 640px)``."""
        return f"@media {self._queries[name]}"

    @staticmethod
    def width_of(query: str) -> float | None:
        """Pixel width of the first ``min-width`` in *query*, if any."""
        match = _MIN_WIDTH_RE.search(query)
        if match is None:
            return None
        return _to_px(*match.groups())

    def order_key(self, media_query: str | None) -> tuple[int, float, str]:
        """Sort key for media groups.

        No at-rule first, then width-based ``@media`` groups ascending, then
        every other at-rule by its text.
        """
        if media_query is None:
            return (0, 0.0, "")
        if media_query.startswith("@media"):
            width = self.width_of(media_query)
            if width is not None:
                return (1, width, media_query)
        return (2, 0.0, media_query)

    def items(self) -> list[tuple[str, str]]:
        return [(name, self._queries[name]) for name in self.names()]

    def __iter__(self) -> Iterator[str]:
        return iter(self.names())

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, name: object) -> bool:
        return name in self._queries

    def __repr__(self) -> str:
        pairs = ", ".join(f"{name}={width}" for _, name, width in self._entries)
        return f"BreakpointRegistry({pairs})"
