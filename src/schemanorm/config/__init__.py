from __future__ import annotations

import os
import sys
from dataclasses import dataclass
from os import PathLike
from pathlib import Path

from schemanorm.config._error import ConfigError
from schemanorm.config._output import OutputConfig

if sys.version_info < (3, 11):
    import tomli
else:
    import tomllib as tomli

__all__ = [
    "CONFIG_FILE_NAME",
    "ConfigError",
    "OutputConfig",
    "SchemanormConfig",
]

CONFIG_FILE_NAME = "schemanorm.toml"


@dataclass
class SchemanormConfig:
    max_depth: int | None
    output: OutputConfig
    _config_path: str | None

    __slots__ = ("max_depth", "output", "_config_path")

    def __init__(self, *, max_depth: int | None = None, output: OutputConfig | None = None) -> None:
        self.max_depth = max_depth
        self.output = output or OutputConfig()
        self._config_path = None

    @property
    def config_path(self) -> str | None:
        """Filesystem path to the loaded configuration file, if any.

        Returns None if using default configuration.
        """
        return self._config_path

    @classmethod
    def discover(cls) -> SchemanormConfig:
        """Discover the configuration file.

        Search for 'schemanorm.toml' in the current directory and then in each parent directory,
        stopping when a directory containing a '.git' folder is encountered or the filesystem root is reached.
        If a config file is found, load it; otherwise, return a default configuration.
        """
        current_dir = os.getcwd()
        config_file = None

        while True:
            candidate = os.path.join(current_dir, CONFIG_FILE_NAME)
            if os.path.isfile(candidate):
                config_file = candidate
                break

            # Stop searching if we've reached a git repository root
            git_dir = os.path.join(current_dir, ".git")
            if os.path.isdir(git_dir):
                break

            # Stop if we've reached the filesystem root
            parent = os.path.dirname(current_dir)
            if parent == current_dir:
                break
            current_dir = parent

        if config_file:
            return cls.from_path(config_file)
        return cls()

    def update(self, *, max_depth: int | None = None) -> None:
        """Set top-level configuration options."""
        if max_depth is not None:
            self.max_depth = max_depth

    @classmethod
    def from_path(cls, path: PathLike | str) -> SchemanormConfig:
        """Load configuration from a file path."""
        with open(path, encoding="utf-8") as fd:
            config = cls.from_str(fd.read())
            config._config_path = str(Path(path).resolve())
            return config

    @classmethod
    def from_str(cls, data: str) -> SchemanormConfig:
        """Parse configuration from a string."""
        parsed = tomli.loads(data)
        return cls.from_dict(parsed)

    @classmethod
    def from_dict(cls, data: dict) -> SchemanormConfig:
        """Create a config instance from a dictionary."""
        from jsonschema.exceptions import ValidationError

        from schemanorm.config._validator import CONFIG_VALIDATOR

        try:
            CONFIG_VALIDATOR.validate(data)
        except ValidationError as exc:
            raise ConfigError.from_validation_error(exc) from None
        return cls(
            max_depth=data.get("max-depth"),
            output=OutputConfig.from_dict(data.get("output", {})),
        )
