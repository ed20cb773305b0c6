"""Settings loading from YAML files and environment variables."""

from __future__ import annotations

import os
from collections.abc import Mapping
from pathlib import Path

import yaml

from .exceptions import ConfigError, ConfigLoadError, EnvLoadError, handle_config_error
from .models import NotifierSettings

DEFAULT_ENV_PREFIX = "REACTIVE_NOTIFIER_"

# Settings may sit at the top level of a file or under this section
SETTINGS_SECTION = "notifier"


class YamlLoader:
    """Loader for YAML configuration files."""

    def load(self, path: Path) -> dict[str, object]:
        """Load configuration from a YAML file.

        Args:
            path: Path to the YAML configuration file

        Returns:
            Parsed configuration as a dictionary

        Raises:
            ConfigLoadError: If the file cannot be loaded or parsed
        """
        try:
            with open(path, 'r', encoding='utf-8') as f:
                content = yaml.safe_load(f)  # pyright: ignore[reportAny] # yaml.safe_load returns Any
        except (OSError, yaml.YAMLError) as e:
            raise ConfigLoadError(f"Failed to load {path}: {e}", file_path=str(path)) from e

        # Empty files parse to None
        if content is None:
            return {}
        if not isinstance(content, dict):
            raise ConfigLoadError(
                f"Expected a mapping at the top of {path}, got {type(content).__name__}",  # pyright: ignore[reportAny]
                file_path=str(path),
            )
        return content  # pyright: ignore[reportUnknownVariableType] # content is dict after isinstance check


class EnvLoader:
    """Environment variable loader for flat settings fields."""

    def __init__(
        self,
        prefix: str = DEFAULT_ENV_PREFIX,
        environ: Mapping[str, str] | None = None,
    ) -> None:
        """Initialize EnvLoader.

        Args:
            prefix: Prefix for environment variables to load
            environ: Variables to read (defaults to os.environ)
        """
        self.prefix: str = prefix
        self.environ: Mapping[str, str] = environ if environ is not None else os.environ

    def load(self) -> dict[str, object]:
        """Load settings overrides from environment variables.

        ``REACTIVE_NOTIFIER_HANDLER_ERRORS=propagate`` becomes
        ``{"handler_errors": "propagate"}``. Values are left as strings;
        the settings model coerces them.

        Returns:
            Dictionary of overrides keyed by field name

        Raises:
            EnvLoadError: If a prefixed variable has no field name
        """
        config: dict[str, object] = {}

        for env_var, raw_value in self.environ.items():
            if not env_var.startswith(self.prefix):
                continue

            field_name = env_var[len(self.prefix):].lower()
            if not field_name:
                raise EnvLoadError(
                    f"Environment variable {env_var} does not name a setting",
                    env_var,
                )
            config[field_name] = raw_value

        return config


def load_settings(
    path: Path | None = None,
    *,
    env_prefix: str = DEFAULT_ENV_PREFIX,
    environ: Mapping[str, str] | None = None,
) -> NotifierSettings:
    """Load settings from an optional YAML file with environment overrides.

    Environment variables take precedence over file values.

    Args:
        path: YAML file to read, or None to use defaults and environment only
        env_prefix: Prefix of environment variables to apply
        environ: Variables to read (defaults to os.environ)

    Returns:
        Validated settings

    Raises:
        ConfigError: If loading or validation fails
    """
    try:
        file_values: dict[str, object] = {}
        if path is not None:
            file_values = YamlLoader().load(path)
            section = file_values.get(SETTINGS_SECTION, file_values)
            if not isinstance(section, dict):
                raise ConfigLoadError(
                    f"Section '{SETTINGS_SECTION}' in {path} must be a mapping",
                    file_path=str(path),
                )
            file_values = section  # pyright: ignore[reportUnknownVariableType]

        env_values = EnvLoader(prefix=env_prefix, environ=environ).load()
        return NotifierSettings.model_validate({**file_values, **env_values})
    except ConfigError:
        raise
    except Exception as e:
        raise handle_config_error(e, "settings load") from e
