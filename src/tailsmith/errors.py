"""Error hierarchy for class generation and setup."""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from tailsmith.model.diagnostic import Diagnostic


class ErrorKind(Enum):
    """Per-class failure categories reported in a generation result."""

    UNKNOWN_UTILITY = "UnknownUtility"
    INVALID_VARIANT_COMBINATION = "InvalidVariantCombination"
    MALFORMED_ARBITRARY_VALUE = "MalformedArbitraryValue"


class GenerationError(Exception):
    """Base error for a single class that could not be turned into a rule."""

    kind: ErrorKind

    def __init__(
        self, message: str, *, class_name: str = "", cause: Exception | None = None
    ) -> None:
        super().__init__(message)
        self.message = message
        self.class_name = class_name
        self.cause = cause

    def __str__(self) -> str:
        return f"{self.kind.value}: {self.message}"


class UnknownUtilityError(GenerationError):
    """No resolver matched the base token, or the selected resolver declined it."""

    kind = ErrorKind.UNKNOWN_UTILITY


class MalformedArbitraryValueError(GenerationError):
    """Bracket or paren syntax was unterminated or unusable by the resolver."""

    kind = ErrorKind.MALFORMED_ARBITRARY_VALUE


class InvalidVariantCombinationError(GenerationError):
    """The variant list breaks a multiplicity or media-query rule."""

    kind = ErrorKind.INVALID_VARIANT_COMBINATION

    def __init__(
        self,
        message: str,
        *,
        class_name: str = "",
        diagnostics: list[Diagnostic] | None = None,
    ) -> None:
        super().__init__(message, class_name=class_name)
        self.diagnostics = diagnostics or []


# ---------------------------------------------------------------------------
# Setup errors (outside the per-class error model)
# ---------------------------------------------------------------------------


class ValueSyntaxError(Exception):
    """Raised when a utility value suffix cannot be parsed."""

    def __init__(
        self, message: str, line: int | None = None, column: int | None = None
    ):
        self.line = line
        self.column = column
        super().__init__(message)


class ConfigError(Exception):
    """Raised when a generator configuration is invalid."""


class RegistryFrozenError(RuntimeError):
    """Raised when registering into a registry that has been frozen."""
