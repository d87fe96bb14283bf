"""Core infrastructure layer - no business logic dependencies.

This module provides foundation-level services:
- Configuration management (TOML)
- Logging and user-facing output (Loguru)
- Console management (Rich)
"""

from .config import (
    Config,
    DemoConfig,
    LoggingConfig,
    SelectionConfig,
    create_default_config,
    get_config_dir,
    get_config_path,
    get_data_dir,
    get_log_file_path,
    load_config,
    parse_config,
    save_default_config,
)
from .console import get_console, numeric_table, print_error, print_success
from .output import clear_ui_mode, log, set_ui_mode, setup_loguru

__all__ = [
    # Config
    "Config",
    "DemoConfig",
    "LoggingConfig",
    "SelectionConfig",
    "create_default_config",
    "get_config_dir",
    "get_config_path",
    "get_data_dir",
    "get_log_file_path",
    "load_config",
    "parse_config",
    "save_default_config",
    # Console
    "get_console",
    "numeric_table",
    "print_error",
    "print_success",
    # Output
    "setup_loguru",
    "log",
    "set_ui_mode",
    "clear_ui_mode",
]
