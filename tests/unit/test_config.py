"""Unit tests for configuration loading."""

import pytest
from pydantic import ValidationError

from netinspect.config import (
    DEFAULT_COLORMAP,
    FALLBACK_COLOR_HEX,
    InspectorConfig,
    default_config_path,
    load_config,
)
from netinspect.core.errors import ConfigError


class TestInspectorConfig:
    def test_defaults(self):
        config = InspectorConfig()
        assert config.colormap == DEFAULT_COLORMAP
        assert config.strict_references is False
        assert config.fallback_color == FALLBACK_COLOR_HEX

    def test_unknown_colormap(self):
        with pytest.raises(ValidationError):
            InspectorConfig(colormap="viridis")

    def test_fallback_color_normalized(self):
        assert InspectorConfig(fallback_color="#ABCDEF").fallback_color == "#abcdef"
        with pytest.raises(ValidationError):
            InspectorConfig(fallback_color="grey")

    def test_unknown_keys_rejected(self):
        with pytest.raises(ValidationError):
            InspectorConfig(theme="dark")


class TestLoadConfig:
    def test_missing_file_gives_defaults(self, tmp_path):
        assert load_config(tmp_path / "absent.yaml") == InspectorConfig()

    def test_yaml_values(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("colormap: pastel\nstrict_references: true\n")
        config = load_config(path)
        assert config.colormap == "pastel"
        assert config.strict_references is True

    def test_empty_file(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("")
        assert load_config(path) == InspectorConfig()

    def test_invalid_yaml(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("colormap: [unclosed\n")
        with pytest.raises(ConfigError, match="Invalid YAML"):
            load_config(path)

    def test_not_a_mapping(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("- pastel\n")
        with pytest.raises(ConfigError, match="mapping"):
            load_config(path)

    def test_invalid_value_names_field(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("colormap: viridis\n")
        with pytest.raises(ConfigError, match="colormap"):
            load_config(path)

    def test_default_path(self, tmp_path):
        assert default_config_path(tmp_path) == tmp_path / ".netinspect" / "config.yaml"
