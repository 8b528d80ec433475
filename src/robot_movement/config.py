"""
Run configuration for robot movement processing.

Only the surrounding file handling is configurable. The magnitude ceiling
and the ``Q`` sentinel are fixed parts of the command language.
"""

from __future__ import annotations

import codecs
import logging
from dataclasses import dataclass
from dataclasses import fields as dataclass_fields
from pathlib import Path
from typing import Any

from robot_movement.exceptions.core import ConfigurationError

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class RunConfig:
    """Settings for reading command files and writing log files.

    Can be created from dict or YAML with partial overrides.
    Only specified values override defaults.

    Examples:
        # All defaults
        config = RunConfig()

        # Partial override from dict
        config = RunConfig.from_dict({"log_level": "DEBUG"})

        # From YAML file
        config = RunConfig.from_yaml("robot.yaml")
    """

    encoding: str = "utf-8"
    log_level: str = "WARNING"

    def __post_init__(self):
        try:
            codecs.lookup(self.encoding)
        except (LookupError, TypeError) as e:
            raise ConfigurationError("encoding", str(e)) from e

        self.log_level = str(self.log_level).upper()
        if self.log_level not in LOG_LEVELS:
            raise ConfigurationError(
                "log_level",
                f"expected one of {', '.join(LOG_LEVELS)}, got {self.log_level}",
            )

    @property
    def logging_level(self) -> int:
        return logging.getLevelName(self.log_level)

    @classmethod
    def from_dict(cls, config: dict[str, Any]) -> RunConfig:
        """Create from dict, only overriding specified values.

        Args:
            config: Dictionary with partial overrides. Keys that are not
                   dataclass fields are ignored.

        Returns:
            RunConfig instance with specified overrides
        """
        valid_fields = {f.name for f in dataclass_fields(cls)}
        filtered = {k: v for k, v in config.items() if k in valid_fields}
        return cls(**filtered)

    @classmethod
    def from_yaml(cls, yaml_path: str | Path) -> RunConfig:
        """Create from YAML file with partial overrides.

        Args:
            yaml_path: Path to YAML file containing settings

        Returns:
            RunConfig instance with YAML overrides

        Raises:
            ConfigurationError: If the file cannot be read or is not a mapping

        Example YAML:
            encoding: "latin-1"
            log_level: debug
        """
        import yaml

        path = Path(yaml_path)
        try:
            with path.open() as f:
                config = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError) as e:
            raise ConfigurationError(str(path), str(e)) from e

        if not isinstance(config, dict):
            raise ConfigurationError(str(path), "top level must be a mapping")
        return cls.from_dict(config)
