"""Tests for config loading and validation."""

from pathlib import Path

import pytest

from cli.config import find_config, get_paths, load_config, load_config_model
from cli.config_models import AnalysisConfig, LoggingConfig, WellnessConfig


class TestConfigModels:
    def test_defaults(self):
        config = WellnessConfig()
        assert config.analysis.recent_window == 10
        assert config.analysis.recent_display == 6
        assert config.logging.level == "INFO"

    def test_paths_expanded(self):
        config = WellnessConfig()
        assert "~" not in str(config.paths.entries_file)

    def test_level_normalized(self):
        assert LoggingConfig(level="debug").level == "DEBUG"

    def test_invalid_level(self):
        with pytest.raises(ValueError):
            LoggingConfig(level="LOUD")

    @pytest.mark.parametrize("window", [0, 11])
    def test_window_bounds(self, window):
        with pytest.raises(ValueError):
            AnalysisConfig(recent_window=window)

    def test_yaml_dict_is_plain(self):
        data = WellnessConfig().to_yaml_dict()
        assert isinstance(data["paths"]["entries_file"], str)


class TestLoadConfig:
    def test_no_file_uses_defaults(self, isolated_home):
        assert find_config() is None
        assert load_config_model().analysis.recent_window == 10

    def test_cwd_config(self, isolated_home, tmp_path):
        (tmp_path / "config.yaml").write_text(
            "paths:\n  entries_file: /tmp/x/entries.json\nanalysis:\n  recent_display: 3\n"
        )
        config = load_config_model()
        assert config.paths.entries_file == Path("/tmp/x/entries.json")
        assert config.analysis.recent_display == 3

    def test_home_config(self, isolated_home):
        path = isolated_home / ".wellness" / "config.yaml"
        path.parent.mkdir()
        path.write_text("logging:\n  level: warning\n")
        assert load_config()["logging"]["level"] == "WARNING"

    def test_invalid_yaml(self, isolated_home, tmp_path):
        (tmp_path / "config.yaml").write_text("paths: [unclosed\n")
        with pytest.raises(ValueError, match="Invalid YAML"):
            load_config_model()

    def test_validation_failure(self, isolated_home, tmp_path):
        (tmp_path / "config.yaml").write_text("logging:\n  level: LOUD\n")
        with pytest.raises(ValueError, match="validation failed"):
            load_config_model()

    def test_non_mapping(self, isolated_home, tmp_path):
        (tmp_path / "config.yaml").write_text("- a\n- b\n")
        with pytest.raises(ValueError):
            load_config_model()

    def test_get_paths(self, isolated_home):
        paths = get_paths(load_config())
        assert paths["entries_file"] == isolated_home / "wellness" / "entries.json"
        assert paths["log_file"].name == "wellness.log"
