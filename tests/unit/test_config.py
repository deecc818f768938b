"""Tests for configuration loading."""

import logging
import os
from pathlib import Path
from unittest.mock import patch

import pytest

from suitegen.core.models import Runner
from suitegen.utils.config import AppConfig, ConfigLoader
from suitegen.utils.exceptions import ConfigurationError


class TestAppConfig:
    """Tests for AppConfig dataclass."""

    def test_app_config_with_defaults(self) -> None:
        """Test AppConfig with default values."""
        config = AppConfig(output_dir=Path("./output"))

        assert config.output_dir == Path("./output")
        assert config.runner is Runner.EXPORT
        assert config.interactive_illegal_methods == ("setViewport",)
        assert config.log_level == "WARNING"

    def test_log_level_value(self) -> None:
        """log_level_value maps the level name to its number."""
        config = AppConfig(output_dir=Path("."), log_level="DEBUG")
        assert config.log_level_value == logging.DEBUG


class TestConfigLoader:
    """Tests for ConfigLoader."""

    def test_load_with_default_values(self) -> None:
        """Test loading config with default values when env vars not set."""
        with patch("suitegen.utils.config.load_dotenv"):  # Skip .env file
            with patch.dict(os.environ, {}, clear=True):
                config = ConfigLoader.load()

        assert config.output_dir == Path("./output")
        assert config.runner is Runner.EXPORT
        assert config.interactive_illegal_methods == ("setViewport",)
        assert config.log_level == "WARNING"

    def test_load_with_custom_values(self) -> None:
        """Test loading config with all variables set."""
        env = {
            "SUITEGEN_OUTPUT": "/tmp/generated",
            "SUITEGEN_RUNNER": "Embedded",
            "SUITEGEN_INTERACTIVE_ILLEGAL_METHODS": "setViewport, emulate ,",
            "SUITEGEN_LOG_LEVEL": "debug",
        }
        with patch("suitegen.utils.config.load_dotenv"):
            with patch.dict(os.environ, env, clear=True):
                config = ConfigLoader.load()

        assert config.output_dir == Path("/tmp/generated")
        assert config.runner is Runner.EMBEDDED
        assert config.interactive_illegal_methods == ("setViewport", "emulate")
        assert config.log_level == "DEBUG"

    def test_empty_denylist_disables_it(self) -> None:
        """An empty denylist variable yields an empty tuple."""
        env = {"SUITEGEN_INTERACTIVE_ILLEGAL_METHODS": ""}
        with patch("suitegen.utils.config.load_dotenv"):
            with patch.dict(os.environ, env, clear=True):
                config = ConfigLoader.load()

        assert config.interactive_illegal_methods == ()

    def test_invalid_runner_raises(self) -> None:
        """Unknown runner names raise ConfigurationError."""
        with patch("suitegen.utils.config.load_dotenv"):
            with patch.dict(os.environ, {"SUITEGEN_RUNNER": "selenium"}, clear=True):
                with pytest.raises(ConfigurationError, match="SUITEGEN_RUNNER"):
                    ConfigLoader.load()

    def test_invalid_log_level_raises(self) -> None:
        """Unknown log levels raise ConfigurationError."""
        with patch("suitegen.utils.config.load_dotenv"):
            with patch.dict(os.environ, {"SUITEGEN_LOG_LEVEL": "LOUD"}, clear=True):
                with pytest.raises(ConfigurationError, match="SUITEGEN_LOG_LEVEL"):
                    ConfigLoader.load()
