"""Resolver registry: prefix trie and built-in registrations."""

from tailsmith.registry.defaults import build_default_registry, register_defaults
from tailsmith.registry.trie import RegisteredResolver, ResolverRegistry

__all__ = [
    "ResolverRegistry",
    "RegisteredResolver",
    "build_default_registry",
    "register_defaults",
]
