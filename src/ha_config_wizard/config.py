"""
Configuration management for the discovery config wizard.

Every setting has a default, so the wizard runs without a config file. A YAML
file only needs the keys it changes, and any scalar key can be overridden from
the environment as ``HA_WIZARD_<SECTION>_<KEY>``.
"""

import copy
import logging
import os
from pathlib import Path
from typing import Any, Optional

from dotenv import dotenv_values
import yaml

from .models import DEFAULT_VALUE_TEMPLATE, SENSOR_VALUE_TEMPLATES

logger = logging.getLogger(__name__)

ENV_PREFIX = "HA_WIZARD_"

DEFAULTS: dict[str, Any] = {
    "discovery": {"prefix": "homeassistant"},
    "output": {"indent": 2, "ensure_ascii": False},
    "wizard": {
        "default_value_template": DEFAULT_VALUE_TEMPLATE,
        "value_templates": dict(SENSOR_VALUE_TEMPLATES),
    },
}

# Lazy one-time .env loading flag
_ENV_LOADED = False


class ConfigError(ValueError):
    """Configuration file could not be parsed into settings."""


def _load_env_once() -> None:
    global _ENV_LOADED
    if _ENV_LOADED:
        return
    # Precedence: real environment > project .env > workspace .env.
    # Values are only written to os.environ when the key is not already set.
    project_root = Path(__file__).parent.parent.parent
    workspace_env = project_root.parent / ".env"
    project_env = project_root / ".env"

    workspace_vals = dotenv_values(workspace_env) if workspace_env.exists() else {}
    project_vals = dotenv_values(project_env) if project_env.exists() else {}

    merged = {}
    merged.update({k: v for k, v in workspace_vals.items() if v is not None})
    merged.update({k: v for k, v in project_vals.items() if v is not None})

    for k, v in merged.items():
        if k and k not in os.environ:
            os.environ[k] = str(v)
    _ENV_LOADED = True


_TRUE_STRINGS = ("true", "1", "yes", "on")
_FALSE_STRINGS = ("false", "0", "no", "off", "")


def _as_bool(key: str, value: Any) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in _TRUE_STRINGS:
            return True
        if lowered in _FALSE_STRINGS:
            return False
    raise ConfigError(f"{key} must be true or false, got {value!r}")


def _merge(base: dict, override: dict) -> dict:
    """Recursively merge ``override`` into a copy of ``base``."""
    result = copy.deepcopy(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(result.get(key), dict):
            result[key] = _merge(result[key], value)
        else:
            result[key] = value
    return result


class Config:
    """Configuration manager with defaults and environment overrides."""

    config_path: Optional[str] = None

    def __init__(self, config_data: Optional[dict] = None):
        """Initialize configuration from a (possibly partial) dictionary."""
        _load_env_once()
        self._data = _merge(DEFAULTS, config_data or {})
        self.config_path = None

    @classmethod
    def from_file(cls, config_path: str) -> "Config":
        """Load configuration from a YAML file, layered over the defaults."""
        path = Path(config_path)
        if not path.exists():
            raise FileNotFoundError(f"Configuration file not found: {config_path}")

        try:
            with open(path, encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigError(f"Invalid YAML in {config_path}: {e}") from e

        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ConfigError(
                f"Configuration file {config_path} must contain a mapping, "
                f"got {type(data).__name__}"
            )

        instance = cls(data)
        instance.config_path = str(path)
        logger.debug("Loaded configuration from %s", path)
        return instance

    @classmethod
    def from_defaults(cls) -> "Config":
        """Create configuration with default values."""
        instance = cls()
        instance.config_path = "defaults"
        return instance

    def get(self, key: str, default: Any = None) -> Any:
        """Get configuration value using dot notation."""
        value: Any = self._data
        for k in key.split("."):
            if isinstance(value, dict) and k in value:
                value = value[k]
            else:
                return default

        # Environment variable override (scalars only)
        env_key = f"{ENV_PREFIX}{key.upper().replace('.', '_')}"
        env_value = os.getenv(env_key)
        if env_value is not None and not isinstance(value, dict):
            if isinstance(value, bool):
                return env_value.lower() in _TRUE_STRINGS
            if isinstance(value, int):
                try:
                    return int(env_value)
                except ValueError:
                    logger.warning(
                        "Ignoring non-integer %s=%r", env_key, env_value
                    )
                    return value
            return env_value

        # Handle ${VARIABLE} expansion in string values
        if isinstance(value, str) and value.startswith("${") and value.endswith("}"):
            expanded_value = os.getenv(value[2:-1])
            if expanded_value is not None:
                return expanded_value

        return value

    @property
    def discovery_prefix(self) -> str:
        """Root of the discovery topics."""
        return str(self.get("discovery.prefix", "homeassistant")).rstrip("/")

    @property
    def output_indent(self) -> int:
        value = self.get("output.indent", 2)
        if isinstance(value, bool):
            raise ConfigError(f"output.indent must be an integer, got {value!r}")
        try:
            indent = int(value)
        except (TypeError, ValueError) as e:
            raise ConfigError(
                f"output.indent must be an integer, got {value!r}"
            ) from e
        if indent < 0:
            raise ConfigError(f"output.indent must not be negative, got {indent}")
        return indent

    @property
    def output_ensure_ascii(self) -> bool:
        return _as_bool("output.ensure_ascii", self.get("output.ensure_ascii", False))

    @property
    def default_value_template(self) -> str:
        return self.get("wizard.default_value_template", DEFAULT_VALUE_TEMPLATE)

    @property
    def value_templates(self) -> dict[str, str]:
        """Sensor class -> value template overrides."""
        templates = self.get("wizard.value_templates", {})
        if not isinstance(templates, dict):
            raise ConfigError("wizard.value_templates must be a mapping")
        return {str(k): str(v) for k, v in templates.items()}

    def validate(self) -> None:
        """Read every typed setting once; raises ConfigError on a bad value."""
        for name in (
            "discovery_prefix",
            "output_indent",
            "output_ensure_ascii",
            "default_value_template",
            "value_templates",
        ):
            getattr(self, name)
