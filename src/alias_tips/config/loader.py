"""
Configuration loading system for Alias Tips.

This module handles loading, merging, and validating configuration from
a YAML file, a dotenv file, environment variables and the variables used
by the zsh plugin.
"""

import os
from pathlib import Path
from typing import Any, Dict, Optional, Union
import yaml
from pydantic import ValidationError
from dotenv import load_dotenv

from .models import AliasTipsConfig
from ..utils.error_handling import ConfigurationError
from ..utils.logging import get_logger


logger = get_logger(__name__)

ENV_PREFIX = "ALIAS_TIPS_"
CONFIG_FILENAMES = ("config.yaml", "config.yml")

# Variables understood by the zsh plugin. Flags are on only for "1".
LEGACY_ENV_VARS = {
    "ZSH_PLUGINS_ALIAS_TIPS_TEXT": ("tips", "text", str),
    "ZSH_PLUGINS_ALIAS_TIPS_EXPAND": ("tips", "expand", lambda v: v == "1"),
    "ZSH_PLUGINS_ALIAS_TIPS_EXCLUDES": ("tips", "excludes", str),
    "ZSH_PLUGINS_ALIAS_TIPS_FORCE": ("tips", "force", lambda v: v == "1"),
}


def default_config_dir() -> Path:
    """Return the user configuration directory for Alias Tips."""
    base = os.getenv("XDG_CONFIG_HOME") or "~/.config"
    return Path(base).expanduser() / "alias-tips"


class ConfigLoader:
    """
    Configuration loader that supports multiple sources and validation.

    Loading priority (highest to lowest):
    1. zsh plugin variables (ZSH_PLUGINS_ALIAS_TIPS_*)
    2. Environment variables (ALIAS_TIPS_<SECTION>_<FIELD>), including
       those set by a .env file in the config directory
    3. CLI-specified config file
    4. User config file in the config directory
    5. Built-in defaults (from Pydantic models)
    """

    def __init__(self, config_dir: Optional[Union[str, Path]] = None):
        self._config_dir = Path(config_dir) if config_dir else None

    @property
    def config_dir(self) -> Path:
        return self._config_dir or default_config_dir()

    def load_config(self, config_path: Optional[Union[str, Path]] = None) -> AliasTipsConfig:
        """
        Load configuration from all sources and validate it.

        Args:
            config_path: Optional path to a specific config file

        Returns:
            Validated AliasTipsConfig instance

        Raises:
            ConfigurationError: If configuration loading or validation fails
        """
        self._load_env_file()

        config_data: Dict[str, Any] = {}

        user_config_path = self._find_user_config()
        if user_config_path:
            logger.debug(f"Loading user config from {user_config_path}")
            config_data = self._deep_merge(config_data, self._load_yaml_file(user_config_path))

        if config_path:
            cli_config_path = Path(config_path).expanduser()
            if not cli_config_path.exists():
                raise ConfigurationError(f"Specified config file not found: {config_path}")
            config_data = self._deep_merge(config_data, self._load_yaml_file(cli_config_path))

        config_data = self._apply_env_overrides(config_data)
        config_data = self._apply_legacy_env(config_data)

        try:
            config = AliasTipsConfig(**config_data)
        except ValidationError as e:
            raise ConfigurationError(
                f"Configuration validation failed: {self._format_validation_error(e)}",
                details={"error_type": "validation"}
            ) from e

        return config

    def _load_env_file(self) -> None:
        env_file = self.config_dir / ".env"
        if env_file.exists():
            load_dotenv(env_file, override=False)

    def _find_user_config(self) -> Optional[Path]:
        for filename in CONFIG_FILENAMES:
            path = self.config_dir / filename
            if path.exists():
                return path
        return None

    def _load_yaml_file(self, file_path: Path) -> Dict[str, Any]:
        """
        Load and parse a YAML configuration file.

        Raises:
            ConfigurationError: If file cannot be loaded or parsed
        """
        try:
            with open(file_path, 'r', encoding='utf-8') as f:
                data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigurationError(f"Invalid YAML in {file_path}: {e}") from e
        except OSError as e:
            raise ConfigurationError(f"Cannot read configuration file {file_path}: {e}") from e

        if data is None:
            return {}

        if not isinstance(data, dict):
            raise ConfigurationError(f"Configuration file {file_path} must contain a YAML object (dictionary)")

        return data

    def _deep_merge(self, base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
        result = base.copy()

        for key, value in override.items():
            if key in result and isinstance(result[key], dict) and isinstance(value, dict):
                result[key] = self._deep_merge(result[key], value)
            else:
                result[key] = value

        return result

    def _apply_env_overrides(self, config_data: Dict[str, Any]) -> Dict[str, Any]:
        """
        Apply ALIAS_TIPS_<SECTION>_<FIELD> environment overrides.

        Example: ALIAS_TIPS_GIT_TIMEOUT_SECONDS=2 overrides git.timeout_seconds.
        Values are passed through as strings; pydantic coerces them.
        """
        result = config_data.copy()
        sections = set(AliasTipsConfig.model_fields)

        for env_key, env_value in os.environ.items():
            if not env_key.startswith(ENV_PREFIX):
                continue

            section, _, field = env_key[len(ENV_PREFIX):].lower().partition('_')
            if section not in sections or not field:
                continue

            self._set_nested_value(result, section, field, env_value)

        return result

    def _apply_legacy_env(self, config_data: Dict[str, Any]) -> Dict[str, Any]:
        result = config_data.copy()

        for env_key, (section, field, convert) in LEGACY_ENV_VARS.items():
            env_value = os.environ.get(env_key)
            if env_value is None:
                continue
            self._set_nested_value(result, section, field, convert(env_value))

        return result

    def _set_nested_value(self, data: Dict[str, Any], section: str, field: str, value: Any) -> None:
        current = data.get(section)
        if current is None:
            current = data[section] = {}
        elif not isinstance(current, dict):
            return
        else:
            current = data[section] = dict(current)
        current[field] = value

    def _format_validation_error(self, error: ValidationError) -> str:
        messages = []
        for err in error.errors():
            location = " -> ".join(str(loc) for loc in err['loc'])
            messages.append(f"  {location}: {err['msg']} (got: {err.get('input', 'N/A')})")

        return "Validation errors:\n" + "\n".join(messages)


# Global configuration loader instance
_config_loader = ConfigLoader()


def load_config(config_path: Optional[Union[str, Path]] = None) -> AliasTipsConfig:
    """
    Load configuration from all sources.

    Raises:
        ConfigurationError: If configuration loading fails
    """
    return _config_loader.load_config(config_path)
