"""
Tests for run configuration loading.
"""

import logging

import pytest

from robot_movement.config import RunConfig
from robot_movement.exceptions import ConfigurationError


class TestRunConfig:
    """Tests for RunConfig defaults and validation."""

    def test_defaults(self):
        config = RunConfig()
        assert config.encoding == "utf-8"
        assert config.log_level == "WARNING"
        assert config.logging_level == logging.WARNING

    def test_log_level_is_normalized(self):
        assert RunConfig(log_level="debug").logging_level == logging.DEBUG

    @pytest.mark.parametrize("encoding", ["klingon", None])
    def test_invalid_encoding(self, encoding):
        with pytest.raises(ConfigurationError) as exc_info:
            RunConfig(encoding=encoding)
        assert exc_info.value.setting == "encoding"

    def test_encoding_alias_accepted(self):
        assert RunConfig(encoding="latin_1").encoding == "latin_1"

    def test_invalid_log_level(self):
        with pytest.raises(ConfigurationError) as exc_info:
            RunConfig(log_level="verbose")
        assert exc_info.value.setting == "log_level"


class TestLoaders:
    """Tests for dict and YAML loaders."""

    def test_from_dict_partial_override(self):
        config = RunConfig.from_dict({"log_level": "INFO"})
        assert config.log_level == "INFO"
        assert config.encoding == "utf-8"

    def test_from_dict_ignores_unknown_keys(self):
        config = RunConfig.from_dict({"max_magnitude": 500, "encoding": "latin-1"})
        assert config.encoding == "latin-1"
        assert not hasattr(config, "max_magnitude")

    def test_from_yaml(self, tmp_path):
        path = tmp_path / "robot.yaml"
        path.write_text("encoding: latin-1\nlog_level: debug\n")
        config = RunConfig.from_yaml(path)
        assert config.encoding == "latin-1"
        assert config.log_level == "DEBUG"

    def test_from_empty_yaml(self, tmp_path):
        path = tmp_path / "robot.yaml"
        path.write_text("")
        assert RunConfig.from_yaml(path) == RunConfig()

    def test_yaml_must_be_mapping(self, tmp_path):
        path = tmp_path / "robot.yaml"
        path.write_text("- encoding\n- log_level\n")
        with pytest.raises(ConfigurationError):
            RunConfig.from_yaml(path)

    def test_missing_yaml(self, tmp_path):
        with pytest.raises(ConfigurationError):
            RunConfig.from_yaml(tmp_path / "missing.yaml")

    def test_yaml_with_unknown_encoding(self, tmp_path):
        path = tmp_path / "robot.yaml"
        path.write_text("encoding: klingon\n")
        with pytest.raises(ConfigurationError) as exc_info:
            RunConfig.from_yaml(path)
        assert exc_info.value.setting == "encoding"
