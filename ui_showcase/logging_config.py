"""
Logging configuration for the showcase application.

The terminal belongs to the TUI, so loguru's default stderr sink is replaced
by a rotating file sink. The level comes from the ``[logging]`` config
section and can be overridden with the UI_SHOWCASE_LOG_LEVEL environment
variable.
"""

import os
from pathlib import Path
from typing import Optional

from loguru import logger

from .config import get_cli_log_file_path, get_cli_setting

LOG_LEVEL_ENV = "UI_SHOWCASE_LOG_LEVEL"
DEFAULT_LOG_LEVEL = "INFO"


def resolve_log_level() -> str:
    level = os.environ.get(LOG_LEVEL_ENV) or get_cli_setting("logging", "log_level", DEFAULT_LOG_LEVEL)
    return str(level).upper()


def configure_logging(log_file: Optional[Path] = None, level: Optional[str] = None) -> Path:
    """
    Configure loguru for the application.

    This should be called once at startup, before the app runs.

    Returns:
        Path of the log file in use
    """
    log_path = log_file or get_cli_log_file_path()
    log_level = level or resolve_log_level()

    logger.remove()  # Remove default handler
    logger.add(
        sink=log_path,
        level=log_level,
        rotation="10 MB",
        retention="7 days",
    )

    logger.info(f"Logging configured: level={log_level}, file={log_path}")
    return log_path
