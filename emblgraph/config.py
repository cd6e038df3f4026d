import logging
import os
import yaml
from typing import Dict, Any, Optional

from emblgraph.errors import ConfigurationError

# Default configuration values
DEFAULT_CONFIG: Dict[str, Any] = {
    "log_level": "INFO",
    "progress": False,
}

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class Config:
    """
    Manages configuration settings for the command-line tool.

    Loads settings from a YAML file and applies explicit overrides on top.
    """
    def __init__(self):
        self._settings: Dict[str, Any] = DEFAULT_CONFIG.copy()

    def load(self, config_file: Optional[str] = None, overrides: Optional[Dict[str, Any]] = None) -> 'Config':
        """
        Loads configuration from a file and overrides.

        Args:
            config_file: Optional path to a YAML configuration file.
            overrides: Values taking precedence over the file; None entries are ignored.
        """
        # 1. Load from config file if specified
        if config_file:
            if not os.path.exists(config_file):
                raise ConfigurationError(f"Config file not found: {config_file}")
            try:
                with open(config_file, 'r') as f:
                    file_config = yaml.safe_load(f)
            except yaml.YAMLError as e:
                raise ConfigurationError(f"Error parsing config file {config_file}: {e}")
            except OSError as e:
                raise ConfigurationError(f"Error reading config file {config_file}: {e}")
            if file_config:  # Empty file loads as None
                if not isinstance(file_config, dict):
                    raise ConfigurationError(f"Config file {config_file} must contain a mapping")
                self._settings.update(file_config)

        # 2. Override with explicitly provided values
        if overrides:
            self._settings.update({key: value for key, value in overrides.items() if value is not None})

        self._validate()
        return self

    def _validate(self):
        level = str(self._settings.get("log_level", "")).upper()
        if level not in LOG_LEVELS:
            raise ConfigurationError(f"Invalid log_level: {self._settings.get('log_level')}")
        self._settings["log_level"] = level

    @property
    def log_level(self) -> int:
        return getattr(logging, self._settings["log_level"])

    def get(self, key: str, default: Any = None) -> Any:
        """Retrieves a configuration value."""
        return self._settings.get(key, default)

    def get_all(self) -> Dict[str, Any]:
        """Retrieves all configuration settings."""
        return self._settings.copy()
