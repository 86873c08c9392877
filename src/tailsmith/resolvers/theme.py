"""Default theme tables: spacing, colours, type scale and friends.

These are plain data handed to the resolvers. A different :class:`Theme` can
be passed to :func:`tailsmith.registry.build_default_registry` without
touching any resolver code.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace

_SHADE_STEPS = ("50", "100", "200", "300", "400", "500", "600", "700", "800", "900", "950")


def _shades(family: str, hexes: str) -> dict[str, str]:
    values = hexes.split()
    assert len(values) == len(_SHADE_STEPS), family
    return {f"{family}-{step}": value for step, value in zip(_SHADE_STEPS, values)}


def format_number(value: float) -> str:
    """Render a float without trailing zeros (``0.5``, ``1``, ``33.333333``)."""
    text = f"{value:.6f}".rstrip("0").rstrip(".")
    return "0" if text in ("", "-0") else text


def _spacing() -> dict[str, str]:
    steps = [0.5, 1, 1.5, 2, 2.5, 3, 3.5, 4, 5, 6, 7, 8, 9, 10, 11, 12, 14, 16,
             20, 24, 28, 32, 36, 40, 44, 48, 52, 56, 60, 64, 72, 80, 96]
    scale = {"0": "0px", "px": "1px"}
    for step in steps:
        scale[format_number(step)] = f"{format_number(step * 0.25)}rem"
    return scale


DEFAULT_COLORS: dict[str, str] = {
    "inherit": "inherit",
    "current": "currentColor",
    "transparent": "transparent",
    "black": "#000000",
    "white": "#ffffff",
    **_shades("slate", "#f8fafc #f1f5f9 #e2e8f0 #cbd5e1 #94a3b8 #64748b #475569 #334155 #1e293b #0f172a #020617"),
    **_shades("gray", "#f9fafb #f3f4f6 #e5e7eb #d1d5db #9ca3af #6b7280 #4b5563 #374151 #1f2937 #111827 #030712"),
    **_shades("zinc", "#fafafa #f4f4f5 #e4e4e7 #d4d4d8 #a1a1aa #71717a #52525b #3f3f46 #27272a #18181b #09090b"),
    **_shades("red", "#fef2f2 #fee2e2 #fecaca #fca5a5 #f87171 #ef4444 #dc2626 #b91c1c #991b1b #7f1d1d #450a0a"),
    **_shades("orange", "#fff7ed #ffedd5 #fed7aa #fdba74 #fb923c #f97316 #ea580c #c2410c #9a3412 #7c2d12 #431407"),
    **_shades("amber", "#fffbeb #fef3c7 #fde68a #fcd34d #fbbf24 #f59e0b #d97706 #b45309 #92400e #78350f #451a03"),
    **_shades("yellow", "#fefce8 #fef9c3 #fef08a #fde047 #facc15 #eab308 #ca8a04 #a16207 #854d0e #713f12 #422006"),
    **_shades("green", "#f0fdf4 #dcfce7 #bbf7d0 #86efac #4ade80 #22c55e #16a34a #15803d #166534 #14532d #052e16"),
    **_shades("emerald", "#ecfdf5 #d1fae5 #a7f3d0 #6ee7b7 #34d399 #10b981 #059669 #047857 #065f46 #064e3b #022c22"),
    **_shades("teal", "#f0fdfa #ccfbf1 #99f6e4 #5eead4 #2dd4bf #14b8a6 #0d9488 #0f766e #115e59 #134e4a #042f2e"),
    **_shades("sky", "#f0f9ff #e0f2fe #bae6fd #7dd3fc #38bdf8 #0ea5e9 #0284c7 #0369a1 #075985 #0c4a6e #082f49"),
    **_shades("blue", "#eff6ff #dbeafe #bfdbfe #93c5fd #60a5fa #3b82f6 #2563eb #1d4ed8 #1e40af #1e3a8a #172554"),
    **_shades("indigo", "#eef2ff #e0e7ff #c7d2fe #a5b4fc #818cf8 #6366f1 #4f46e5 #4338ca #3730a3 #312e81 #1e1b4b"),
    **_shades("violet", "#f5f3ff #ede9fe #ddd6fe #c4b5fd #a78bfa #8b5cf6 #7c3aed #6d28d9 #5b21b6 #4c1d95 #2e1065"),
    **_shades("purple", "#faf5ff #f3e8ff #e9d5ff #d8b4fe #c084fc #a855f7 #9333ea #7e22ce #6b21a8 #581c87 #3b0764"),
    **_shades("pink", "#fdf2f8 #fce7f3 #fbcfe8 #f9a8d4 #f472b6 #ec4899 #db2777 #be185d #9d174d #831843 #500724"),
}

# Font size -> (font-size, line-height)
DEFAULT_FONT_SIZES: dict[str, tuple[str, str]] = {
    "xs": ("0.75rem", "1rem"),
    "sm": ("0.875rem", "1.25rem"),
    "base": ("1rem", "1.5rem"),
    "lg": ("1.125rem", "1.75rem"),
    "xl": ("1.25rem", "1.75rem"),
    "2xl": ("1.5rem", "2rem"),
    "3xl": ("1.875rem", "2.25rem"),
    "4xl": ("2.25rem", "2.5rem"),
    "5xl": ("3rem", "1"),
    "6xl": ("3.75rem", "1"),
    "7xl": ("4.5rem", "1"),
    "8xl": ("6rem", "1"),
    "9xl": ("8rem", "1"),
}

DEFAULT_FONT_WEIGHTS: dict[str, str] = {
    "thin": "100",
    "extralight": "200",
    "light": "300",
    "normal": "400",
    "medium": "500",
    "semibold": "600",
    "bold": "700",
    "extrabold": "800",
    "black": "900",
}

DEFAULT_FONT_FAMILIES: dict[str, str] = {
    "sans": 'ui-sans-serif, system-ui, sans-serif',
    "serif": 'ui-serif, Georgia, Cambria, "Times New Roman", Times, serif',
    "mono": 'ui-monospace, SFMono-Regular, Menlo, Monaco, Consolas, monospace',
}

DEFAULT_LEADING: dict[str, str] = {
    "none": "1",
    "tight": "1.25",
    "snug": "1.375",
    "normal": "1.5",
    "relaxed": "1.625",
    "loose": "2",
    **{str(n): f"{format_number(n * 0.25)}rem" for n in range(3, 11)},
}

DEFAULT_TRACKING: dict[str, str] = {
    "tighter": "-0.05em",
    "tight": "-0.025em",
    "normal": "0em",
    "wide": "0.025em",
    "wider": "0.05em",
    "widest": "0.1em",
}

DEFAULT_RADIUS: dict[str, str] = {
    "": "0.25rem",
    "none": "0px",
    "sm": "0.125rem",
    "md": "0.375rem",
    "lg": "0.5rem",
    "xl": "0.75rem",
    "2xl": "1rem",
    "3xl": "1.5rem",
    "full": "9999px",
}

DEFAULT_SHADOWS: dict[str, str] = {
    "": "0 1px 3px 0 rgb(0 0 0 / 0.1), 0 1px 2px -1px rgb(0 0 0 / 0.1)",
    "sm": "0 1px 2px 0 rgb(0 0 0 / 0.05)",
    "md": "0 4px 6px -1px rgb(0 0 0 / 0.1), 0 2px 4px -2px rgb(0 0 0 / 0.1)",
    "lg": "0 10px 15px -3px rgb(0 0 0 / 0.1), 0 4px 6px -4px rgb(0 0 0 / 0.1)",
    "xl": "0 20px 25px -5px rgb(0 0 0 / 0.1), 0 8px 10px -6px rgb(0 0 0 / 0.1)",
    "2xl": "0 25px 50px -12px rgb(0 0 0 / 0.25)",
    "inner": "inset 0 2px 4px 0 rgb(0 0 0 / 0.05)",
    "none": "0 0 #0000",
}

DEFAULT_OPACITY: dict[str, str] = {
    str(n): format_number(n / 100)
    for n in (0, 5, 10, 15, 20, 25, 30, 35, 40, 45, 50, 55, 60, 65, 70, 75, 80, 85, 90, 95, 100)
}

DEFAULT_Z_INDEX: dict[str, str] = {
    **{str(n): str(n) for n in (0, 10, 20, 30, 40, 50)},
    "auto": "auto",
}

DEFAULT_CONTAINERS: dict[str, str] = {
    "3xs": "16rem",
    "2xs": "18rem",
    "xs": "20rem",
    "sm": "24rem",
    "md": "28rem",
    "lg": "32rem",
    "xl": "36rem",
    "2xl": "42rem",
    "3xl": "48rem",
    "4xl": "56rem",
    "5xl": "64rem",
    "6xl": "72rem",
    "7xl": "80rem",
    "prose": "65ch",
}

DEFAULT_DURATIONS: dict[str, str] = {
    str(n): f"{n}ms" for n in (0, 75, 100, 150, 200, 300, 500, 700, 1000)
}

DEFAULT_EASINGS: dict[str, str] = {
    "linear": "linear",
    "in": "cubic-bezier(0.4, 0, 1, 1)",
    "out": "cubic-bezier(0, 0, 0.2, 1)",
    "in-out": "cubic-bezier(0.4, 0, 0.2, 1)",
}


@dataclass(frozen=True)
class Theme:
    """Scale tables consumed by the built-in resolvers."""

    spacing: dict[str, str] = field(default_factory=_spacing)
    colors: dict[str, str] = field(default_factory=lambda: dict(DEFAULT_COLORS))
    font_sizes: dict[str, tuple[str, str]] = field(
        default_factory=lambda: dict(DEFAULT_FONT_SIZES)
    )
    font_weights: dict[str, str] = field(default_factory=lambda: dict(DEFAULT_FONT_WEIGHTS))
    font_families: dict[str, str] = field(
        default_factory=lambda: dict(DEFAULT_FONT_FAMILIES)
    )
    leading: dict[str, str] = field(default_factory=lambda: dict(DEFAULT_LEADING))
    tracking: dict[str, str] = field(default_factory=lambda: dict(DEFAULT_TRACKING))
    radius: dict[str, str] = field(default_factory=lambda: dict(DEFAULT_RADIUS))
    shadows: dict[str, str] = field(default_factory=lambda: dict(DEFAULT_SHADOWS))
    opacity: dict[str, str] = field(default_factory=lambda: dict(DEFAULT_OPACITY))
    z_index: dict[str, str] = field(default_factory=lambda: dict(DEFAULT_Z_INDEX))
    containers: dict[str, str] = field(default_factory=lambda: dict(DEFAULT_CONTAINERS))
    durations: dict[str, str] = field(default_factory=lambda: dict(DEFAULT_DURATIONS))
    easings: dict[str, str] = field(default_factory=lambda: dict(DEFAULT_EASINGS))

    def extend(self, *, colors: dict[str, str] | None = None,
               spacing: dict[str, str] | None = None) -> Theme:
        """Return a copy with extra colour and spacing entries merged in."""
        return replace(
            self,
            spacing={**self.spacing, **(spacing or {})},
            colors={**self.colors, **(colors or {})},
        )
