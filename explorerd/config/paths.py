"""Path resolution for explorerd configuration.

Locations are derived from the EXPLORERD_HOME environment variable.

Contract:
- Inputs: Environment variables (EXPLORERD_HOME, EXPLORERD_CONFIG_DIR)
- Outputs: Resolved Path objects
- Side Effects: None (directories are created by whoever writes to them)
"""

import os
from pathlib import Path


def get_home_dir() -> Path:
    """Get EXPLORERD_HOME from environment.

    Returns:
        Path to root directory (default: .explorerd)
    """
    root = os.environ.get("EXPLORERD_HOME", ".explorerd")
    return Path(root).resolve()


def get_config_dir() -> Path:
    """Get configuration directory.

    Returns:
        Path to config directory ($EXPLORERD_HOME/config)

    Environment Variables:
        EXPLORERD_CONFIG_DIR: Override config directory location
    """
    config_dir: Path = get_home_dir() / "config"

    env_override: str | None = os.environ.get("EXPLORERD_CONFIG_DIR")
    if env_override is not None:
        config_dir = Path(env_override).resolve()

    return config_dir
