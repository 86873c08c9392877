"""Prefix trie mapping utility-name prefixes to resolvers.

Nodes live in a flat list and refer to each other by index. Lookup walks at
most ``len(token)`` nodes, so its cost does not depend on how many prefixes
are registered.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator

from tailsmith.errors import RegistryFrozenError
from tailsmith.resolvers.base import Resolver


@dataclass(frozen=True)
class RegisteredResolver:
    """A resolver together with the prefix it was registered under.

    ``index`` is the registration sequence number of the current entry.
    """

    prefix: str
    resolver: Resolver
    index: int


@dataclass
class _Node:
    children: dict[str, int] = field(default_factory=dict)
    entry: RegisteredResolver | None = None


class ResolverRegistry:
    """Longest-prefix lookup from utility tokens to resolvers.

    Registering the same prefix twice replaces the earlier resolver. After
    :meth:`freeze` the registry is read-only and may be shared between
    threads.
    """

    def __init__(self) -> None:
        self._nodes: list[_Node] = [_Node()]
        self._count = 0
        self._sequence = 0
        self._frozen = False

    @property
    def frozen(self) -> bool:
        return self._frozen

    def freeze(self) -> ResolverRegistry:
        """Finish building. Returns ``self`` for chaining."""
        self._frozen = True
        return self

    def register(self, prefix: str, resolver: Resolver) -> None:
        if self._frozen:
            raise RegistryFrozenError(
                f"Cannot register prefix '{prefix}': registry is frozen"
            )
        if not prefix:
            raise ValueError("Resolver prefix must be a non-empty string")

        index = 0
        for char in prefix:
            child = self._nodes[index].children.get(char)
            if child is None:
                self._nodes.append(_Node())
                child = len(self._nodes) - 1
                self._nodes[index].children[char] = child
            index = child

        node = self._nodes[index]
        if node.entry is None:
            self._count += 1
        node.entry = RegisteredResolver(prefix, resolver, self._sequence)
        self._sequence += 1

    def resolve(self, token: str) -> RegisteredResolver | None:
        """Return the entry under the longest registered prefix of *token*."""
        best: RegisteredResolver | None = None
        index = 0
        for char in token:
            child = self._nodes[index].children.get(char)
            if child is None:
                break
            index = child
            entry = self._nodes[index].entry
            if entry is not None:
                best = entry
        return best

    def get(self, prefix: str) -> Resolver | None:
        """Return the resolver registered under exactly *prefix*."""
        index = 0
        for char in prefix:
            child = self._nodes[index].children.get(char)
            if child is None:
                return None
            index = child
        entry = self._nodes[index].entry
        return entry.resolver if entry else None

    def prefixes(self) -> list[str]:
        """All registered prefixes in lexicographic order."""
        return sorted(entry.prefix for entry in self._entries())

    def _entries(self) -> Iterator[RegisteredResolver]:
        for node in self._nodes:
            if node.entry is not None:
                yield node.entry

    def __len__(self) -> int:
        return self._count

    def __contains__(self, prefix: object) -> bool:
        return isinstance(prefix, str) and self.get(prefix) is not None
