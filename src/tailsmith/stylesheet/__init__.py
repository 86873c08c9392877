"""Rule aggregation, breakpoint ordering and CSS serialisation."""

from tailsmith.stylesheet.breakpoints import DEFAULT_BREAKPOINTS, BreakpointRegistry
from tailsmith.stylesheet.model import Stylesheet
from tailsmith.stylesheet.serializer import render, render_rule

__all__ = [
    "BreakpointRegistry",
    "DEFAULT_BREAKPOINTS",
    "Stylesheet",
    "render",
    "render_rule",
]
