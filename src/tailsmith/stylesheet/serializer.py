"""Serialise a Stylesheet to CSS text."""

from __future__ import annotations

from typing import TYPE_CHECKING

from tailsmith.model.css import CssProperty
from tailsmith.model.rule import Rule

if TYPE_CHECKING:
    from tailsmith.stylesheet.model import Stylesheet

INDENT = "  "


def _block(selector: str, declarations: list[str], depth: int) -> str:
    pad = INDENT * depth
    body = "".join(f"{pad}{INDENT}{decl};\n" for decl in declarations)
    return f"{pad}{selector} {{\n{body}{pad}}}"


def _declarations(properties: list[CssProperty], minify: bool) -> list[str]:
    return [prop.to_css(minify=minify) for prop in properties]


def render_rule(rule: Rule, *, minify: bool = False, depth: int = 0) -> str:
    """Render one rule without its at-rule wrapper."""
    decls = _declarations(rule.properties, minify)
    if minify:
        return f"{rule.selector}{{{';'.join(decls)}}}"
    return _block(rule.selector, decls, depth)


def render(stylesheet: Stylesheet, *, minify: bool = False) -> str:
    """Render *stylesheet* to CSS.

    ``:root`` custom properties come first, then plain rules, then at-rule
    groups in breakpoint order. The pretty form separates top-level blocks
    with a blank line and ends with a newline; the minified form is a single
    line. An empty stylesheet renders as an empty string.
    """
    blocks: list[str] = []

    if stylesheet.root_properties:
        root = [
            CssProperty(name, value) for name, value in stylesheet.root_properties.items()
        ]
        blocks.append(render_rule(Rule(":root", root), minify=minify))

    for media_query, rules in stylesheet.groups():
        if media_query is None:
            blocks.extend(render_rule(rule, minify=minify) for rule in rules)
            continue
        if minify:
            inner = "".join(render_rule(rule, minify=True) for rule in rules)
            blocks.append(f"{media_query}{{{inner}}}")
        else:
            inner = "\n".join(render_rule(rule, depth=1) for rule in rules)
            blocks.append(f"{media_query} {{\n{inner}\n}}")

    if not blocks:
        return ""
    if minify:
        return "".join(blocks)
    return "\n\n".join(blocks) + "\n"
