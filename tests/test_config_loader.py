"""Tests for ConfigLoader and config models."""

import json

import pytest
from pydantic import ValidationError

from papr.config.config_loader import ConfigError, ConfigLoader
from papr.config.papr_config import AppConfig, ParserConfig


class TestConfigModels:
    """Test config validation."""

    def test_defaults(self):
        config = AppConfig()

        assert config.parser.workers == 1
        assert config.parser.strict is True
        assert config.renderer.color is True
        assert config.renderer.email.domain_separator == "@"
        assert config.renderer.frontmatter.headers == ["From", "Date", "Subject"]

    def test_invalid_workers(self):
        with pytest.raises(ValidationError):
            ParserConfig(workers=0)

    def test_empty_schema_version(self):
        with pytest.raises(ValidationError):
            AppConfig(schema_version="")


class TestConfigLoader:
    """Test loading and saving config files."""

    def test_load_default_when_missing(self, tmp_path):
        """Test defaults are returned when the file does not exist."""
        loader = ConfigLoader(tmp_path / "missing.json")

        assert loader.load_app_config() == AppConfig()

    def test_load_from_file(self, tmp_path):
        config_path = tmp_path / "papr.json"
        config_path.write_text(
            json.dumps({"parser": {"workers": 4}, "renderer": {"color": False}}),
            encoding="utf-8",
        )

        config = ConfigLoader(config_path).load_app_config()

        assert config.parser.workers == 4
        assert config.renderer.color is False
        assert config.renderer.styles.user == "green"

    def test_load_invalid_json(self, tmp_path):
        config_path = tmp_path / "papr.json"
        config_path.write_text("{not json", encoding="utf-8")

        with pytest.raises(ConfigError):
            ConfigLoader(config_path).load_app_config()

    def test_load_invalid_values(self, tmp_path):
        config_path = tmp_path / "papr.json"
        config_path.write_text(json.dumps({"parser": {"workers": -1}}), encoding="utf-8")

        with pytest.raises(ConfigError):
            ConfigLoader(config_path).load_app_config()

    def test_load_is_cached(self, tmp_path):
        loader = ConfigLoader(tmp_path / "missing.json")

        assert loader.load_app_config() is loader.load_app_config()

    def test_save_and_reload(self, tmp_path):
        """Test a saved config loads back identically."""
        config_path = tmp_path / "nested" / "papr.json"
        loader = ConfigLoader(config_path)

        config = AppConfig()
        config.renderer.email.domain_separator = " at "
        written = loader.save_app_config(config)

        assert written == config_path
        assert config_path.exists()
        assert loader.reload().renderer.email.domain_separator == " at "
