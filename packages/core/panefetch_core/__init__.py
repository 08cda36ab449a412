"""Core app services for config loading and logging."""

from .config import (
    DEFAULT_CONFIG_TOML,
    AppConfig,
    GuiConfig,
    config_path,
    load_config,
    parse_config,
    save_default_config,
)
from .logging_setup import configure_logging, get_logger

__all__ = [
    "DEFAULT_CONFIG_TOML",
    "AppConfig",
    "GuiConfig",
    "config_path",
    "configure_logging",
    "get_logger",
    "load_config",
    "parse_config",
    "save_default_config",
]
