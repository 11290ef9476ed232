"""Configuration management for bresenham_zip.

Settings live in ``bresenham_zip.toml``. The first file found wins, searched in:

1. An explicit path, if one is given
2. The current directory
3. ``~/.config/bresenham_zip/``

Values from the file are merged over the defaults, section by section.
"""

import copy
import logging
from pathlib import Path
from typing import Any, Dict, Optional, Union

import toml

from .constants import (
    VALID_LOG_LEVELS,
    ConfigSections,
    ErrorMessages,
    OutputFormat,
    get_valid_output_formats,
)
from .error_handling import ConfigurationError

logger = logging.getLogger(__name__)

CONFIG_FILENAME = "bresenham_zip.toml"

_MISSING = object()

DEFAULT_CONFIG: Dict[str, Dict[str, Any]] = {
    ConfigSections.LOGGING: {
        "level": "WARNING",
        "file": "",
    },
    ConfigSections.OUTPUT: {
        "format": OutputFormat.TEXT.value,
    },
}


class Config:
    """Configuration manager for bresenham_zip."""

    def __init__(self, config_path: Union[str, Path, None] = None) -> None:
        """Load configuration.

        Args:
            config_path: Explicit configuration file. When given it must exist.

        Raises:
            ConfigurationError: If the file cannot be read or holds invalid values
        """
        self._config = copy.deepcopy(DEFAULT_CONFIG)
        self.source: Optional[Path] = None

        path = self._resolve_path(config_path)
        if path is not None:
            self._merge(self._load(path))
            self.source = path
            logger.debug(f"Configuration loaded from {path}")
        else:
            logger.debug("Using default configuration (no config file found)")

        self.validate()

    @staticmethod
    def _resolve_path(config_path: Union[str, Path, None]) -> Optional[Path]:
        if config_path is not None:
            path = Path(config_path)
            if not path.is_file():
                raise ConfigurationError(
                    ErrorMessages.CONFIG_LOAD_FAILED.format(
                        path=path, error="file not found"
                    )
                )
            return path

        search_locations = [
            Path.cwd(),
            Path.home() / ".config" / "bresenham_zip",
        ]
        for location in search_locations:
            candidate = location / CONFIG_FILENAME
            if candidate.is_file():
                return candidate
        return None

    @staticmethod
    def _load(path: Path) -> Dict[str, Any]:
        try:
            with open(path, "r", encoding="utf-8") as f:
                return toml.load(f)
        except (OSError, toml.TomlDecodeError) as e:
            raise ConfigurationError(
                ErrorMessages.CONFIG_LOAD_FAILED.format(path=path, error=e),
                details={"path": str(path)},
            ) from e

    def _merge(self, loaded: Dict[str, Any]) -> None:
        for section, values in loaded.items():
            if section not in self._config:
                self._config[section] = values
            elif isinstance(values, dict):
                self._config[section].update(values)
            else:
                raise ConfigurationError(
                    ErrorMessages.NOT_A_TABLE.format(section=section, value=values),
                    details={"section": section},
                )

    def get(self, section: str, key: str, default: Any = _MISSING) -> Any:
        """Get a configuration value."""
        try:
            return self._config[section][key]
        except KeyError:
            if default is not _MISSING:
                return default
            raise ConfigurationError(f"Configuration key '{section}.{key}' not found")

    def get_section(self, section: str) -> Dict[str, Any]:
        """Get an entire configuration section."""
        try:
            return self._config[section]
        except KeyError:
            raise ConfigurationError(f"Configuration section '{section}' not found")

    @property
    def log_level(self) -> str:
        return str(self.get(ConfigSections.LOGGING, "level")).upper()

    @property
    def log_file(self) -> Optional[str]:
        return self.get(ConfigSections.LOGGING, "file") or None

    @property
    def output_format(self) -> OutputFormat:
        return OutputFormat(self.get(ConfigSections.OUTPUT, "format"))

    @property
    def config(self) -> Dict[str, Any]:
        """Get the full configuration dictionary."""
        return self._config

    def validate(self) -> None:
        """Validate configuration values.

        Raises:
            ConfigurationError: On an unknown log level or output format
        """
        level = self.get(ConfigSections.LOGGING, "level")
        if str(level).upper() not in VALID_LOG_LEVELS:
            raise ConfigurationError(
                ErrorMessages.INVALID_CONFIG_VALUE.format(key="logging.level", value=level)
            )

        output_format = self.get(ConfigSections.OUTPUT, "format")
        if output_format not in get_valid_output_formats():
            raise ConfigurationError(
                ErrorMessages.INVALID_CONFIG_VALUE.format(
                    key="output.format", value=output_format
                )
            )
