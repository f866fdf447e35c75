"""Configuration loading for redshift_utils."""

from redshift_utils.config.config import (
    DEFAULT_CONFIG_FILE,
    RedshiftUtilsConfig,
    get_config,
    load_config,
    load_yaml,
    reset_config,
    set_config,
)

__all__ = [
    "DEFAULT_CONFIG_FILE",
    "RedshiftUtilsConfig",
    "get_config",
    "load_config",
    "load_yaml",
    "reset_config",
    "set_config",
]
