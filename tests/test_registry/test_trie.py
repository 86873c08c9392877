"""Tests for the resolver registry trie and the default registrations."""

import pytest

from tailsmith.errors import RegistryFrozenError
from tailsmith.model.css import CssProperty
from tailsmith.model.token import UtilityToken
from tailsmith.registry import ResolverRegistry, build_default_registry


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


class _Fixed:
    """Resolver stub that always returns the same declaration."""

    def __init__(self, label: str) -> None:
        self.label = label

    def parse(self, token: UtilityToken) -> list[CssProperty] | None:
        return [CssProperty("x-label", self.label)]


@pytest.fixture
def registry() -> ResolverRegistry:
    reg = ResolverRegistry()
    reg.register("p-", _Fixed("p"))
    reg.register("px-", _Fixed("px"))
    reg.register("border", _Fixed("border"))
    reg.register("border-t-", _Fixed("border-t"))
    return reg


# ---------------------------------------------------------------------------
# Lookup
# ---------------------------------------------------------------------------


class TestResolve:
    def test_longest_prefix_wins(self, registry):
        assert registry.resolve("px-4").prefix == "px-"
        assert registry.resolve("p-4").prefix == "p-"

    def test_shorter_prefix_used_when_longer_does_not_match(self, registry):
        entry = registry.resolve("border-teal-500")
        assert entry.prefix == "border"

    def test_no_match_returns_none(self, registry):
        assert registry.resolve("q-4") is None
        assert registry.resolve("") is None

    def test_token_shorter_than_prefix(self, registry):
        # "border-t" only walks part of "border-t-"; the last entry seen wins
        assert registry.resolve("border-t").prefix == "border"

    def test_exact_prefix_matches(self, registry):
        assert registry.resolve("border").prefix == "border"

    def test_entry_carries_resolver(self, registry):
        entry = registry.resolve("px-2")
        assert entry.resolver.label == "px"


# ---------------------------------------------------------------------------
# Registration
# ---------------------------------------------------------------------------


class TestRegister:
    def test_last_registered_wins(self):
        reg = ResolverRegistry()
        reg.register("p-", _Fixed("first"))
        reg.register("p-", _Fixed("second"))
        assert reg.resolve("p-4").resolver.label == "second"
        assert len(reg) == 1

    def test_replacement_gets_new_index(self):
        reg = ResolverRegistry()
        reg.register("p-", _Fixed("first"))
        reg.register("m-", _Fixed("m"))
        reg.register("p-", _Fixed("second"))
        assert reg.resolve("p-1").index == 2

    def test_empty_prefix_rejected(self):
        with pytest.raises(ValueError):
            ResolverRegistry().register("", _Fixed("x"))

    def test_freeze_blocks_registration(self, registry):
        registry.freeze()
        assert registry.frozen
        with pytest.raises(RegistryFrozenError):
            registry.register("m-", _Fixed("m"))

    def test_frozen_registry_still_resolves(self, registry):
        registry.freeze()
        assert registry.resolve("p-4").prefix == "p-"

    def test_freeze_returns_self(self):
        reg = ResolverRegistry()
        assert reg.freeze() is reg


class TestInspection:
    def test_prefixes_sorted(self, registry):
        assert registry.prefixes() == ["border", "border-t-", "p-", "px-"]

    def test_len_and_contains(self, registry):
        assert len(registry) == 4
        assert "px-" in registry
        assert "px" not in registry
        assert 42 not in registry

    def test_get_exact(self, registry):
        assert registry.get("p-").label == "p"
        assert registry.get("p") is None
        assert registry.get("zz") is None


# ---------------------------------------------------------------------------
# Default registry
# ---------------------------------------------------------------------------


class TestDefaultRegistry:
    def test_is_frozen(self):
        assert build_default_registry().frozen

    @pytest.mark.parametrize(
        "token,prefix",
        [
            ("p-4", "p-"),
            ("px-4", "px-"),
            ("-mx-2", "-mx-"),
            ("bg-blue-500", "bg-"),
            ("text-lg", "text-"),
            ("border-teal-500", "border-"),
            ("border-t-2", "border-t-"),
            ("border-blue-500", "border-"),
            ("rounded-tl-lg", "rounded-tl-"),
            ("rounded", "rounded"),
            ("flex", "flex"),
            ("flex-col", "flex-"),
            ("inline-flex", "inline-flex"),
            ("max-w-md", "max-w-"),
            ("[mask-type:alpha]", "["),
            ("duration-300", "duration-"),
        ],
    )
    def test_prefix_selection(self, token, prefix):
        assert build_default_registry().resolve(token).prefix == prefix

    def test_unknown_token(self):
        assert build_default_registry().resolve("qqq") is None
