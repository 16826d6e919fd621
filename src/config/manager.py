"""Configuration manager.

Configuration is read with dynaconf from an optional JSON, YAML or TOML
file, then overridden by ``COMPUTE_CORE_*`` environment variables (``__``
separates nested keys, e.g. ``COMPUTE_CORE_TIMEOUTS__NODE_RUNNING=300``),
and finally validated by the pydantic :class:`AppConfig` schema.
"""

import os
from typing import Any, Optional

from dynaconf import Dynaconf
from pydantic import ValidationError as PydanticValidationError

from config.schemas.app_schema import AppConfig
from config.schemas.logging_schema import LoggingConfig
from config.schemas.timeouts_schema import TimeoutsConfig
from domain.base.exceptions import ConfigurationError

ENV_PREFIX = "COMPUTE_CORE"
CONFIG_PATH_ENV = f"{ENV_PREFIX}_CONFIG_PATH"


def _lower_keys(value: Any) -> Any:
    if isinstance(value, dict):
        return {str(key).lower(): _lower_keys(item) for key, item in value.items()}
    return value


class ConfigurationManager:
    """Load and expose the compute core configuration."""

    def __init__(self, config_path: Optional[str] = None, env_prefix: str = ENV_PREFIX) -> None:
        """
        Initialize the manager; nothing is read until first access.

        Args:
            config_path: Configuration file; defaults to ``$COMPUTE_CORE_CONFIG_PATH``
            env_prefix: Prefix of the environment variables overriding the file
        """
        self._config_path = config_path or os.environ.get(CONFIG_PATH_ENV)
        self._env_prefix = env_prefix
        self._config: Optional[AppConfig] = None

    @property
    def config_path(self) -> Optional[str]:
        return self._config_path

    def load(self) -> AppConfig:
        """
        Read, merge and validate the configuration.

        Returns:
            The validated configuration

        Raises:
            ConfigurationError: If the file is missing or unreadable, or validation fails
        """
        settings_files = []
        if self._config_path:
            if not os.path.isfile(self._config_path):
                raise ConfigurationError(
                    f"Configuration file not found: {self._config_path}",
                    details={"config_path": self._config_path},
                )
            settings_files.append(self._config_path)

        try:
            settings = Dynaconf(
                settings_files=settings_files,
                envvar_prefix=self._env_prefix,
                environments=False,
                load_dotenv=False,
                merge_enabled=True,
            )
            raw = _lower_keys(settings.as_dict())
        except Exception as e:
            raise ConfigurationError(
                f"Failed to read configuration: {e}",
                details={"config_path": self._config_path},
            ) from e

        data = {key: value for key, value in raw.items() if key in AppConfig.model_fields}
        try:
            self._config = AppConfig.model_validate(data)
        except PydanticValidationError as e:
            raise ConfigurationError(
                f"Invalid configuration: {e.error_count()} validation error(s)",
                details={"config_path": self._config_path, "errors": e.errors()},
            ) from e
        return self._config

    def reload(self) -> AppConfig:
        """Discard the cached configuration and read it again."""
        self._config = None
        return self.load()

    @property
    def app_config(self) -> AppConfig:
        if self._config is None:
            self.load()
        return self._config

    def get_timeouts(self) -> TimeoutsConfig:
        """Get the convergence timeouts."""
        return self.app_config.timeouts

    def get_logging_config(self) -> LoggingConfig:
        """Get the logging configuration."""
        return self.app_config.logging

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get a value by dotted key, e.g. ``"timeouts.node_running"``.

        Args:
            key: Dotted path into the configuration
            default: Value returned when the path does not exist

        Returns:
            The configuration value or ``default``
        """
        value: Any = self.app_config
        for part in key.split("."):
            if not hasattr(value, part):
                return default
            value = getattr(value, part)
        return value
