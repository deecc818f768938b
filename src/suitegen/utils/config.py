"""Configuration management for suitegen."""

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path

from dotenv import load_dotenv

from suitegen.core.instrumentation import DEFAULT_INTERACTIVE_ILLEGAL_METHODS
from suitegen.core.models import Runner
from suitegen.utils.exceptions import ConfigurationError

_VALID_LOG_LEVELS = frozenset({"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"})


@dataclass
class AppConfig:
    """Application configuration."""

    output_dir: Path
    runner: Runner = Runner.EXPORT
    interactive_illegal_methods: tuple[str, ...] = field(
        default=DEFAULT_INTERACTIVE_ILLEGAL_METHODS
    )
    log_level: str = "WARNING"

    @property
    def log_level_value(self) -> int:
        """Numeric logging level for logging.basicConfig."""
        return logging.getLevelName(self.log_level)


class ConfigLoader:
    """Loads configuration from environment variables."""

    @staticmethod
    def load() -> AppConfig:
        """Load configuration from environment.

        Raises:
            ConfigurationError: If a variable holds an invalid value.
        """
        load_dotenv()  # Load .env file if present

        return AppConfig(
            output_dir=Path(os.environ.get("SUITEGEN_OUTPUT", "./output")),
            runner=ConfigLoader._get_runner_env("SUITEGEN_RUNNER", Runner.EXPORT),
            interactive_illegal_methods=ConfigLoader._get_list_env(
                "SUITEGEN_INTERACTIVE_ILLEGAL_METHODS",
                DEFAULT_INTERACTIVE_ILLEGAL_METHODS,
            ),
            log_level=ConfigLoader._get_log_level_env("SUITEGEN_LOG_LEVEL", "WARNING"),
        )

    @staticmethod
    def _get_list_env(name: str, default: tuple[str, ...]) -> tuple[str, ...]:
        """Get a comma-separated environment variable as a tuple.

        An empty value yields an empty tuple, which disables the list.

        Args:
            name: The environment variable name.
            default: The default value if not set.

        Returns:
            Tuple of stripped, non-empty items.
        """
        value = os.environ.get(name)
        if value is None:
            return default
        return tuple(item.strip() for item in value.split(",") if item.strip())

    @staticmethod
    def _get_runner_env(name: str, default: Runner) -> Runner:
        """Get a runner identity from the environment.

        Raises:
            ConfigurationError: If the value is not a known runner.
        """
        value = os.environ.get(name)
        if value is None:
            return default
        try:
            return Runner(value.strip().lower())
        except ValueError as e:
            valid = ", ".join(r.value for r in Runner)
            raise ConfigurationError(
                f"Invalid value for {name}: '{value}' (expected one of: {valid})"
            ) from e

    @staticmethod
    def _get_log_level_env(name: str, default: str) -> str:
        """Get a logging level name from the environment.

        Raises:
            ConfigurationError: If the value is not a standard level name.
        """
        value = os.environ.get(name)
        if value is None:
            return default
        level = value.strip().upper()
        if level not in _VALID_LOG_LEVELS:
            raise ConfigurationError(
                f"Invalid value for {name}: '{value}' is not a logging level"
            )
        return level
