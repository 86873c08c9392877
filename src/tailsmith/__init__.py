"""Tailsmith - utility-class to CSS generator."""

__version__ = "0.1.0"

from tailsmith.config import GeneratorConfig, load_config  # noqa: E402
from tailsmith.engine.generator import GenerationResult, Generator  # noqa: E402
from tailsmith.errors import (  # noqa: E402
    ConfigError,
    ErrorKind,
    GenerationError,
    InvalidVariantCombinationError,
    MalformedArbitraryValueError,
    RegistryFrozenError,
    UnknownUtilityError,
    ValueSyntaxError,
)
from tailsmith.registry import ResolverRegistry, build_default_registry  # noqa: E402

__all__ = [
    "__version__",
    "Generator",
    "GenerationResult",
    "GeneratorConfig",
    "load_config",
    "ResolverRegistry",
    "build_default_registry",
    "ErrorKind",
    "GenerationError",
    "UnknownUtilityError",
    "InvalidVariantCombinationError",
    "MalformedArbitraryValueError",
    "ValueSyntaxError",
    "ConfigError",
    "RegistryFrozenError",
]
