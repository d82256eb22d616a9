"""Configuration loading for explorerd.

This module handles loading daemon configuration from YAML files
and environment variables.

Contract:
- Inputs: Config file paths, environment variables
- Outputs: ExplorerSettings objects
- Side Effects: create_default_config writes the default file
"""

import logging
import os
from pathlib import Path
from typing import Any

import yaml

from .paths import get_config_dir
from .settings import ExplorerSettings

logger = logging.getLogger(__name__)

ENV_PREFIX = "EXPLORERD_"

DEFAULT_CONFIG = """# explorerd configuration
# Environment variables (EXPLORERD_*) take precedence over this file.

# Server settings
host: "127.0.0.1"
port: 8430
log_level: "info"
workers: 1

# Origins allowed to call the API from a browser
# cors_origins:
#   - "http://localhost:5173"

# Directory holding file-explorer.html (default: page bundled with explorerd)
# static_dir: "./view"

# Directories exposed by GET /files
# ignore lists bare names hidden at every depth
roots:
  - label: "@root"
    path: "."
    ignore:
      - node_modules

# Listing variants
listing:
  include_ids: true
  group_by_label: false
  sort_entries: true
  max_concurrency: 16
"""


def get_config_path() -> Path:
    """Get path to config file.

    Returns:
        Path to explorer.yaml in config directory

    Example:
        >>> config_path = get_config_path()
        >>> assert config_path.name == "explorer.yaml"
    """
    return get_config_dir() / "explorer.yaml"


def create_default_config(config_path: Path | None = None) -> Path:
    """Create default config file if it doesn't exist.

    Args:
        config_path: Where to write (default: explorer.yaml in config dir)

    Returns:
        Path to the config file
    """
    if config_path is None:
        config_path = get_config_path()

    if config_path.exists():
        logger.debug(f"Config file already exists: {config_path}")
        return config_path

    config_path.parent.mkdir(parents=True, exist_ok=True)
    config_path.write_text(DEFAULT_CONFIG, encoding="utf-8")
    logger.info(f"Created default config: {config_path}")
    return config_path


def _drop_env_overridden(yaml_settings: dict[str, Any]) -> dict[str, Any]:
    """Remove YAML values that an environment variable overrides.

    Settings passed as init arguments beat environment variables in
    pydantic-settings, so YAML values must be dropped wherever a matching
    EXPLORERD_* variable exists. One level of nesting is checked
    (EXPLORERD_LISTING__SORT_ENTRIES overrides listing.sort_entries).
    """
    environ = {key.upper() for key in os.environ}
    filtered: dict[str, Any] = {}

    for key, value in yaml_settings.items():
        env_key = f"{ENV_PREFIX}{key.upper()}"
        if env_key in environ:
            continue

        if isinstance(value, dict):
            value = {
                sub_key: sub_value
                for sub_key, sub_value in value.items()
                if f"{env_key}__{str(sub_key).upper()}" not in environ
            }

        filtered[key] = value

    return filtered


def load_config(config_path: Path | None = None) -> ExplorerSettings:
    """Load daemon configuration from YAML and environment.

    Precedence: defaults < YAML < environment variables. A missing or
    unreadable file falls back to defaults; values that fail validation
    raise.

    Args:
        config_path: Optional config file path (default: explorer.yaml in config dir)

    Returns:
        Validated settings

    Raises:
        pydantic.ValidationError: If a configured value is invalid
    """
    if config_path is None:
        config_path = get_config_path()

    yaml_settings: dict[str, Any] = {}
    if config_path.exists():
        try:
            with open(config_path, encoding="utf-8") as f:
                loaded = yaml.safe_load(f) or {}
            if isinstance(loaded, dict):
                yaml_settings = loaded
                logger.debug(f"Loaded config from {config_path}")
            else:
                logger.warning(f"Ignoring config at {config_path}: expected a mapping, got {type(loaded).__name__}")
        except (OSError, yaml.YAMLError) as e:
            logger.warning(f"Failed to load config from {config_path}: {e}")
            logger.info("Using default settings and environment variables")
    else:
        logger.debug(f"No config file at {config_path}, using defaults")

    settings = ExplorerSettings(**_drop_env_overridden(yaml_settings))

    logger.info(
        f"Configuration loaded: host={settings.host}, port={settings.port}, "
        f"log_level={settings.log_level}, roots={len(settings.roots)}"
    )

    return settings
