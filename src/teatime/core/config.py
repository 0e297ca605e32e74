"""
Layered configuration.

Loads configuration from multiple sources with this precedence (highest wins):
    1. Environment variables (TEATIME_SECTION__KEY)
    2. Config file (YAML or JSON), normally ~/.teatime/config.yaml
    3. Built-in defaults

The journal root itself is fixed at ~/.teatime and is not a config key.

Usage:
    config = Config(config_file="~/.teatime/config.yaml")

    config.get("logging.level")             # dot-notation access
    config.get_bool("display.render_markdown")
"""

import json
import os
from typing import Any

import yaml

from teatime.core.exceptions import ConfigurationError

_DEFAULT_ENV_PREFIX = "TEATIME_"
_TRUE_STRINGS = {"1", "true", "yes", "on"}
_FALSE_STRINGS = {"0", "false", "no", "off", ""}


class Config:
    """
    Central configuration manager.

    Loads and merges configuration from defaults, a config file, and
    environment variables. Env vars use double-underscore to denote nesting:
    TEATIME_LOGGING__LEVEL=DEBUG -> config["logging"]["level"] = "DEBUG"
    """

    def __init__(
        self,
        config_file: str | None = None,
        env_prefix: str = _DEFAULT_ENV_PREFIX,
        defaults: dict[str, Any] | None = None,
    ):
        """
        Args:
            config_file: Path to YAML or JSON configuration file. Missing is fine.
            env_prefix: Prefix for environment variable overrides.
            defaults: Additional default values to merge.
        """
        self.config_file = os.path.expanduser(config_file) if config_file else None
        self.env_prefix = env_prefix or ""
        self._extra_defaults = defaults or {}
        self.config_data: dict[str, Any] = {}

        self._load_config()

    def _load_config(self) -> None:
        """Load configuration from all sources."""
        self.config_data = self._get_default_config()

        if self._extra_defaults:
            self._update_dict(self.config_data, self._extra_defaults)

        if self.config_file and os.path.exists(self.config_file):
            file_config = self._load_file(self.config_file)
            self._update_dict(self.config_data, file_config)

        # Env vars override everything
        self._load_from_env()

    @staticmethod
    def _get_default_config() -> dict[str, Any]:
        return {
            "logging": {
                "level": "WARNING",
                "file": "",
            },
            "editor": {
                "command": "",
            },
            "display": {
                "render_markdown": True,
                "show_reminders": True,
            },
        }

    @staticmethod
    def _load_file(path: str) -> dict[str, Any]:
        """Load a YAML or JSON config file."""
        ext = os.path.splitext(path)[1].lower()
        try:
            with open(path) as f:
                if ext in (".yaml", ".yml"):
                    data = yaml.safe_load(f) or {}
                elif ext == ".json":
                    data = json.load(f)
                else:
                    return {}
        except (OSError, yaml.YAMLError, json.JSONDecodeError) as e:
            raise ConfigurationError(f"Could not load config file {path}: {e}") from e
        if not isinstance(data, dict):
            raise ConfigurationError(f"Config file {path} must contain a mapping at the top level")
        return data

    def _update_dict(self, target: dict, source: dict) -> None:
        """Recursively merge source into target."""
        for key, value in source.items():
            if key in target and isinstance(target[key], dict) and isinstance(value, dict):
                self._update_dict(target[key], value)
            else:
                target[key] = value

    def _load_from_env(self) -> None:
        """Override config values from environment variables."""
        if not self.env_prefix:
            return
        for env_key, env_value in os.environ.items():
            if not env_key.startswith(self.env_prefix):
                continue
            config_key = env_key[len(self.env_prefix) :].lower()
            key_parts = config_key.split("__")

            current = self.config_data
            for part in key_parts[:-1]:
                if not isinstance(current.get(part), dict):
                    current[part] = {}
                current = current[part]
            current[key_parts[-1]] = env_value

    def get(self, key_path: str, default: Any = None) -> Any:
        """
        Get a config value by dot-notation path.

        Args:
            key_path: e.g. "logging.level", "display.render_markdown"
            default: Returned when key is not found.
        """
        parts = key_path.split(".")
        current = self.config_data
        for part in parts:
            if not isinstance(current, dict) or part not in current:
                return default
            current = current[part]
        return current

    def get_bool(self, key_path: str, default: bool = False) -> bool:
        """Get a boolean, accepting the string forms env vars arrive as."""
        value = self.get(key_path, default)
        if isinstance(value, bool):
            return value
        if isinstance(value, str):
            lowered = value.strip().lower()
            if lowered in _TRUE_STRINGS:
                return True
            if lowered in _FALSE_STRINGS:
                return False
            raise ConfigurationError(f"Expected a boolean for {key_path}, got {value!r}")
        return bool(value)

    def set(self, key_path: str, value: Any) -> None:
        """Set a config value by dot-notation path, creating intermediate dicts."""
        parts = key_path.split(".")
        current = self.config_data
        for part in parts[:-1]:
            if part not in current:
                current[part] = {}
            current = current[part]
        current[parts[-1]] = value
