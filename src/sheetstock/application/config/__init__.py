"""Configuration schema and loading for sheetstock.

Public API:
    - SheetstockConfiguration: Root configuration model
    - StoreConfig: Inventory file location
    - CuttingConfig: Commit defaults
    - load_config: Load configuration from a JSON file
    - load_config_from_dict: Load configuration from a dictionary
    - ConfigError: Exception for configuration errors
"""

from .loader import ConfigError, load_config, load_config_from_dict
from .schema import (
    SUPPORTED_VERSIONS,
    CuttingConfig,
    SheetstockConfiguration,
    StoreConfig,
)

__all__ = [
    "ConfigError",
    "CuttingConfig",
    "SUPPORTED_VERSIONS",
    "SheetstockConfiguration",
    "StoreConfig",
    "load_config",
    "load_config_from_dict",
]
