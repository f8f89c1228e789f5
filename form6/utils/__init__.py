"""Utility modules."""

from .config import (
    AppConfig,
    Environment,
    Settings,
    get_absolute_path,
    get_config,
    get_project_root,
    get_settings,
    reset_config,
)
from .logger import get_logger, log_operation, setup_logging

__all__ = [
    # Config
    "get_config",
    "get_settings",
    "reset_config",
    "AppConfig",
    "Environment",
    "Settings",
    "get_absolute_path",
    "get_project_root",
    # Logging
    "setup_logging",
    "get_logger",
    "log_operation",
]
