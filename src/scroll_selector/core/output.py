"""
Unified output system using Loguru.
Every user-facing message goes to the log file; it is echoed to stdout
unless a full-screen UI owns the terminal.
"""

import threading
from pathlib import Path

from loguru import logger

_ui_mode_active = False
_ui_mode_lock = threading.Lock()


def setup_loguru(log_file: Path, level: str = "INFO") -> None:
    """
    Configure loguru for file-only logging.

    Args:
        log_file: Path to log file
        level: Minimum level for file logging (TRACE, DEBUG, INFO, WARNING, ERROR)
    """
    log_file.parent.mkdir(parents=True, exist_ok=True)

    # Remove default stderr handler
    logger.remove()

    logger.add(
        log_file,
        rotation="10 MB",
        retention=5,
        level=level.upper(),
        format="{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{line} | {message}",
        enqueue=False,
    )

    logger.info(f"Loguru initialized: {log_file} (level={level})")


def set_ui_mode() -> None:
    """Suppress stdout echo while the blessed UI is running."""
    global _ui_mode_active
    with _ui_mode_lock:
        _ui_mode_active = True
    logger.debug("UI mode enabled - log() will not print to stdout")


def clear_ui_mode() -> None:
    """Restore stdout echo."""
    global _ui_mode_active
    with _ui_mode_lock:
        _ui_mode_active = False
    logger.debug("UI mode disabled - log() will print to stdout")


def is_ui_mode() -> bool:
    with _ui_mode_lock:
        return _ui_mode_active


def log(message: str, level: str = "info") -> None:
    """
    Unified logging: writes to the log file AND prints outside UI mode.

    Args:
        message: User-facing message
        level: Log level (debug, info, warning, error)
    """
    log_func = getattr(logger, level)
    log_func(message)

    if not is_ui_mode():
        print(message)
