"""Configuration module for explorerd.

Provides daemon configuration loading from YAML and environment variables.

Public Interface:
    - ExplorerSettings: Settings model
    - RootConfig: One configured root directory
    - ListingConfig: Listing variant switches
    - load_config: Load configuration
    - create_default_config: Create default config file
    - get_config_path: Get config file path
"""

from .loader import create_default_config
from .loader import get_config_path
from .loader import load_config
from .settings import ExplorerSettings
from .settings import ListingConfig
from .settings import RootConfig

__all__ = [
    "ExplorerSettings",
    "ListingConfig",
    "RootConfig",
    "load_config",
    "create_default_config",
    "get_config_path",
]
