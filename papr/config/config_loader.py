"""Configuration loader for papr settings."""

import json
import logging
from pathlib import Path
from typing import Optional

from pydantic import ValidationError

from .papr_config import AppConfig

logger = logging.getLogger(__name__)


class ConfigError(ValueError):
    """Raised when a config file exists but cannot be read or validated."""

    pass


class ConfigLoader:
    """Load, validate and save papr configuration."""

    DEFAULT_CONFIG_PATHS = [
        Path("~/.papr/config.json"),
        Path("config/papr.json"),
    ]

    def __init__(self, config_path: Optional[Path] = None):
        """
        Initialize configuration loader.

        Args:
            config_path: Optional custom config file path
        """
        self.config_path = config_path
        self._config: Optional[AppConfig] = None

    def load_app_config(self) -> AppConfig:
        """
        Load configuration from the first existing config file.

        Returns:
            AppConfig instance (defaults when no file is found)

        Raises:
            ConfigError: If a config file is invalid
        """
        if self._config is not None:
            return self._config

        config_paths = [self.config_path] if self.config_path else self.DEFAULT_CONFIG_PATHS

        for config_path in config_paths:
            if config_path and config_path.expanduser().exists():
                try:
                    with open(config_path.expanduser(), "r", encoding="utf-8") as f:
                        config_data = json.load(f)
                    self._config = AppConfig(**config_data)
                    logger.debug("Loaded config from %s", config_path)
                    return self._config
                except (json.JSONDecodeError, ValidationError, TypeError) as e:
                    raise ConfigError(f"Invalid config in {config_path}: {e}")

        # Return default config if no file found
        self._config = AppConfig()
        return self._config

    def save_app_config(self, config: Optional[AppConfig] = None) -> Path:
        """
        Write configuration as JSON.

        Args:
            config: Config to write (default: the loaded or default config)

        Returns:
            Path the config was written to
        """
        config = config or self.load_app_config()
        config_path = (self.config_path or self.DEFAULT_CONFIG_PATHS[0]).expanduser()

        config_path.parent.mkdir(parents=True, exist_ok=True)
        with open(config_path, "w", encoding="utf-8") as f:
            json.dump(config.model_dump(), f, indent=2)

        self._config = config
        return config_path

    def reload(self) -> AppConfig:
        """Reload configuration from file."""
        self._config = None
        return self.load_app_config()
