"""Generator configuration: breakpoints, dark mode, custom variants and theme."""

from __future__ import annotations

import json
import re
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any

from tailsmith.errors import ConfigError
from tailsmith.model.variant import Placement
from tailsmith.resolvers.theme import Theme
from tailsmith.stylesheet.breakpoints import DEFAULT_BREAKPOINTS, BreakpointRegistry

_VARIANT_NAME_RE = re.compile(r"^[A-Za-z0-9@][A-Za-z0-9_-]*$")
_CUSTOM_PROPERTY_RE = re.compile(r"^--[A-Za-z0-9_-]+$")


class DarkModeStrategy(Enum):
    """How the ``dark:`` variant is expressed in CSS."""

    CLASS = "class"  # ancestor selector, ``.dark .x``
    MEDIA = "media"  # ``@media (prefers-color-scheme: dark)``


def validate_variant_name(name: str) -> None:
    """Raise :class:`ConfigError` unless *name* can be used as a variant prefix."""
    if not name:
        raise ConfigError("Variant name must not be empty")
    if name[0] in "-_" or name[-1] in "-_":
        raise ConfigError(
            f"Variant name '{name}' must not start or end with '-' or '_'"
        )
    if not _VARIANT_NAME_RE.match(name):
        raise ConfigError(
            f"Variant name '{name}' may only contain letters, digits, '-' and '_'"
        )


@dataclass(frozen=True)
class CustomVariantSpec:
    """A user-defined variant: a selector fragment and/or an at-rule."""

    name: str
    selector: str = ""
    media_query: str | None = None
    placement: Placement = Placement.SUFFIX

    def __post_init__(self) -> None:
        validate_variant_name(self.name)
        if not self.selector and not self.media_query:
            raise ConfigError(
                f"Custom variant '{self.name}' needs a selector or a media query"
            )
        if self.media_query is not None and not self.media_query.startswith("@"):
            raise ConfigError(
                f"Custom variant '{self.name}' media query must be a full at-rule "
                f"prelude such as '@media (hover: hover)', got {self.media_query!r}"
            )

    @classmethod
    def from_dict(cls, name: str, data: dict[str, Any] | str) -> CustomVariantSpec:
        """Build from ``{"selector": ..., "media": ..., "placement": ...}``.

        A plain string is shorthand for a suffix selector, or for an at-rule
        when it starts with ``@``.
        """
        if isinstance(data, str):
            if data.startswith("@"):
                return cls(name=name, media_query=data)
            return cls(name=name, selector=data)
        if not isinstance(data, dict):
            raise ConfigError(f"Custom variant '{name}' must be a string or an object")
        placement = data.get("placement", Placement.SUFFIX.value)
        try:
            placement_value = Placement(placement)
        except ValueError:
            raise ConfigError(
                f"Custom variant '{name}' has invalid placement {placement!r}"
            ) from None
        return cls(
            name=name,
            selector=str(data.get("selector", "")),
            media_query=data.get("media"),
            placement=placement_value,
        )


@dataclass(frozen=True)
class GeneratorConfig:
    """Settings shared by every generation session built from it."""

    breakpoints: dict[str, str] = field(default_factory=lambda: dict(DEFAULT_BREAKPOINTS))
    dark_mode: DarkModeStrategy = DarkModeStrategy.CLASS
    dark_selector: str = ".dark"
    custom_variants: tuple[CustomVariantSpec, ...] = ()
    custom_properties: dict[str, str] = field(default_factory=dict)
    theme: Theme = field(default_factory=Theme)
    minify: bool = False

    def __post_init__(self) -> None:
        BreakpointRegistry(self.breakpoints)  # raises ConfigError on bad widths
        for name in self.custom_properties:
            if not _CUSTOM_PROPERTY_RE.match(name):
                raise ConfigError(
                    f"Custom property '{name}' must look like '--name'"
                )
        if self.dark_mode is DarkModeStrategy.CLASS and not self.dark_selector:
            raise ConfigError("dark_selector must not be empty with the class strategy")

    def breakpoint_registry(self) -> BreakpointRegistry:
        return BreakpointRegistry(self.breakpoints)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> GeneratorConfig:
        """Build a config from parsed JSON.

        Recognised keys: ``breakpoints``, ``darkMode``, ``darkSelector``,
        ``variants``, ``customProperties``, ``theme`` (``colors`` and
        ``spacing`` extend the defaults) and ``minify``.
        """
        if not isinstance(data, dict):
            raise ConfigError("Configuration must be a JSON object")
        known = {
            "breakpoints", "darkMode", "darkSelector", "variants",
            "customProperties", "theme", "minify",
        }
        unknown = sorted(set(data) - known)
        if unknown:
            raise ConfigError(f"Unknown configuration keys: {', '.join(unknown)}")

        try:
            dark_mode = DarkModeStrategy(data.get("darkMode", "class"))
        except ValueError:
            raise ConfigError(
                f"darkMode must be 'class' or 'media', got {data.get('darkMode')!r}"
            ) from None

        variants = data.get("variants", {})
        if not isinstance(variants, dict):
            raise ConfigError("'variants' must be an object of name -> definition")

        theme_data = data.get("theme", {})
        if not isinstance(theme_data, dict):
            raise ConfigError("'theme' must be an object")
        theme = Theme().extend(
            colors=_string_map(theme_data.get("colors", {}), "theme.colors"),
            spacing=_string_map(theme_data.get("spacing", {}), "theme.spacing"),
        )

        return cls(
            breakpoints=_string_map(
                data.get("breakpoints", DEFAULT_BREAKPOINTS), "breakpoints"
            ),
            dark_mode=dark_mode,
            dark_selector=str(data.get("darkSelector", ".dark")),
            custom_variants=tuple(
                CustomVariantSpec.from_dict(name, spec) for name, spec in variants.items()
            ),
            custom_properties=_string_map(
                data.get("customProperties", {}), "customProperties"
            ),
            theme=theme,
            minify=bool(data.get("minify", False)),
        )


def _string_map(value: Any, key: str) -> dict[str, str]:
    if not isinstance(value, dict):
        raise ConfigError(f"'{key}' must be an object")
    return {str(k): str(v) for k, v in value.items()}


def load_config(path: str | Path) -> GeneratorConfig:
    """Read a JSON configuration file."""
    path = Path(path)
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except OSError as e:
        raise ConfigError(f"Cannot read config file {path}: {e}") from e
    except json.JSONDecodeError as e:
        raise ConfigError(
            f"Invalid JSON in {path} at line {e.lineno}, column {e.colno}: {e.msg}"
        ) from e
    return GeneratorConfig.from_dict(data)
