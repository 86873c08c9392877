"""Tests for GeneratorConfig and JSON config loading."""

import json

import pytest

from tailsmith.config import (
    CustomVariantSpec,
    DarkModeStrategy,
    GeneratorConfig,
    load_config,
    validate_variant_name,
)
from tailsmith.errors import ConfigError
from tailsmith.model.variant import Placement


class TestVariantNames:
    @pytest.mark.parametrize("name", ["hocus", "aria-busy", "supports_grid", "@tall", "x2"])
    def test_valid(self, name):
        validate_variant_name(name)

    @pytest.mark.parametrize("name", ["", "-x", "x-", "_x", "a:b", "a b", "a.b"])
    def test_invalid(self, name):
        with pytest.raises(ConfigError):
            validate_variant_name(name)


class TestCustomVariantSpec:
    def test_needs_selector_or_query(self):
        with pytest.raises(ConfigError, match="needs a selector"):
            CustomVariantSpec("empty")

    def test_query_must_be_at_rule(self):
        with pytest.raises(ConfigError, match="full at-rule"):
            CustomVariantSpec("tall", media_query="(min-height: 800px)")

    def test_from_string_selector(self):
        spec = CustomVariantSpec.from_dict("hocus", ":hover")
        assert spec.selector == ":hover"
        assert spec.media_query is None
        assert spec.placement is Placement.SUFFIX

    def test_from_string_at_rule(self):
        spec = CustomVariantSpec.from_dict("supports-grid", "@supports (display: grid)")
        assert spec.selector == ""
        assert spec.media_query == "@supports (display: grid)"

    def test_from_object(self):
        spec = CustomVariantSpec.from_dict(
            "rtl", {"selector": "[dir=rtl]", "placement": "ancestor"}
        )
        assert spec.placement is Placement.ANCESTOR

    def test_bad_placement(self):
        with pytest.raises(ConfigError, match="placement"):
            CustomVariantSpec.from_dict("rtl", {"selector": "[dir=rtl]", "placement": "inside"})

    def test_bad_shape(self):
        with pytest.raises(ConfigError):
            CustomVariantSpec.from_dict("rtl", 42)


class TestGeneratorConfig:
    def test_defaults(self):
        config = GeneratorConfig()
        assert config.dark_mode is DarkModeStrategy.CLASS
        assert config.dark_selector == ".dark"
        assert config.breakpoint_registry().names() == ["sm", "md", "lg", "xl", "2xl"]
        assert not config.minify

    def test_bad_breakpoint_width(self):
        with pytest.raises(ConfigError):
            GeneratorConfig(breakpoints={"sm": "small"})

    def test_bad_custom_property_name(self):
        with pytest.raises(ConfigError, match="--name"):
            GeneratorConfig(custom_properties={"brand": "#0af"})

    def test_empty_dark_selector(self):
        with pytest.raises(ConfigError):
            GeneratorConfig(dark_selector="")
        GeneratorConfig(dark_mode=DarkModeStrategy.MEDIA, dark_selector="")


class TestFromDict:
    def test_full(self):
        config = GeneratorConfig.from_dict({
            "breakpoints": {"tablet": "60rem"},
            "darkMode": "media",
            "variants": {"hocus": ":hover", "print-only": "@media print"},
            "customProperties": {"--brand": "#0af"},
            "theme": {"colors": {"brand": "#0af"}, "spacing": {"gutter": "1.25rem"}},
            "minify": True,
        })
        assert config.breakpoints == {"tablet": "60rem"}
        assert config.dark_mode is DarkModeStrategy.MEDIA
        assert [v.name for v in config.custom_variants] == ["hocus", "print-only"]
        assert config.custom_properties == {"--brand": "#0af"}
        assert config.theme.colors["brand"] == "#0af"
        assert config.theme.colors["red-500"] == "#ef4444"
        assert config.theme.spacing["gutter"] == "1.25rem"
        assert config.minify

    def test_empty_object_gives_defaults(self):
        assert GeneratorConfig.from_dict({}) == GeneratorConfig()

    def test_unknown_keys(self):
        with pytest.raises(ConfigError, match="colours"):
            GeneratorConfig.from_dict({"colours": {}})

    def test_bad_dark_mode(self):
        with pytest.raises(ConfigError, match="darkMode"):
            GeneratorConfig.from_dict({"darkMode": "auto"})

    @pytest.mark.parametrize(
        "data",
        [
            [],
            {"variants": ["hocus"]},
            {"theme": "dark"},
            {"theme": {"colors": ["red"]}},
            {"breakpoints": "sm"},
        ],
    )
    def test_bad_shapes(self, data):
        with pytest.raises(ConfigError):
            GeneratorConfig.from_dict(data)


class TestLoadConfig:
    def test_load(self, tmp_path):
        path = tmp_path / "tailsmith.json"
        path.write_text(json.dumps({"darkSelector": "[data-theme=dark]"}))
        assert load_config(path).dark_selector == "[data-theme=dark]"

    def test_missing_file(self, tmp_path):
        with pytest.raises(ConfigError, match="Cannot read"):
            load_config(tmp_path / "nope.json")

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "bad.json"
        path.write_text('{"minify": tru}')
        with pytest.raises(ConfigError, match="line 1"):
            load_config(path)
