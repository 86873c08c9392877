"""Variant catalog, splitter, combination rules and rule builder."""

from tailsmith.variants.combinator import build_selector, combine, css_escape
from tailsmith.variants.definitions import VariantCatalog
from tailsmith.variants.rules import ALL_RULES, validate
from tailsmith.variants.splitter import canonical_order, split_variants

__all__ = [
    "VariantCatalog",
    "split_variants",
    "canonical_order",
    "combine",
    "build_selector",
    "css_escape",
    "ALL_RULES",
    "validate",
]
