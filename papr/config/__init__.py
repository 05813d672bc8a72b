"""Configuration management"""

from .config_loader import ConfigError, ConfigLoader
from .papr_config import AppConfig, ParserConfig, RendererConfig

__all__ = ["ConfigLoader", "ConfigError", "AppConfig", "ParserConfig", "RendererConfig"]
