"""Tailsmith model layer -- public type re-exports."""

from tailsmith.model.css import CssProperty, declarations
from tailsmith.model.diagnostic import Diagnostic, Severity
from tailsmith.model.outcome import ClassOutcome, Status
from tailsmith.model.rule import Rule
from tailsmith.model.token import ParsedClass, UtilityToken
from tailsmith.model.variant import Multiplicity, Placement, VariantKind, VariantTag

__all__ = [
    # css
    "CssProperty",
    "declarations",
    # diagnostic
    "Severity",
    "Diagnostic",
    # variant
    "VariantKind",
    "Multiplicity",
    "Placement",
    "VariantTag",
    # token
    "UtilityToken",
    "ParsedClass",
    # rule
    "Rule",
    # outcome
    "Status",
    "ClassOutcome",
]
