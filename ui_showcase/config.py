# ui_showcase/config.py
# Description: Configuration management for the ui_showcase application.
#
# Imports
import copy
import sys
if sys.version_info < (3, 11):
    import tomli as tomllib
else:
    import tomllib
from pathlib import Path
from typing import Any, Dict, Optional
#
# Third-Party Imports
from loguru import logger
#
#######################################################################################################################
#
# Functions:

# --- Path to the configuration file ---
DEFAULT_CONFIG_PATH = Path.home() / ".config" / "ui_showcase" / "config.toml"

CONFIG_TOML_CONTENT = """
# Configuration for ui_showcase
# Any setting left out falls back to the built-in default.

[general]
# Name of a Textual theme, e.g. "textual-dark", "textual-light", "nord", "gruvbox"
theme = "textual-dark"

[logging]
# One of TRACE, DEBUG, INFO, SUCCESS, WARNING, ERROR, CRITICAL
log_level = "INFO"
# Written next to this config file
log_filename = "ui_showcase.log"
"""

DEFAULT_CONFIG_FROM_TOML: Dict[str, Any] = tomllib.loads(CONFIG_TOML_CONTENT)

_CONFIG_CACHE: Optional[Dict[str, Any]] = None


def deep_merge_dicts(base: Dict, update: Dict) -> Dict:
    """Recursively merge ``update`` into a copy of ``base``."""
    merged = copy.deepcopy(base)
    for key, value in update.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = deep_merge_dicts(merged[key], value)
        else:
            merged[key] = value
    return merged


def load_cli_config_and_ensure_existence(force_reload: bool = False) -> Dict[str, Any]:
    """
    Loads settings from ~/.config/ui_showcase/config.toml.
    If the file doesn't exist, it's created with the default content.
    Settings found in the file are merged over the programmatic defaults.
    """
    global _CONFIG_CACHE
    if _CONFIG_CACHE is not None and not force_reload:
        return _CONFIG_CACHE

    loaded_config = copy.deepcopy(DEFAULT_CONFIG_FROM_TOML)
    config_path = DEFAULT_CONFIG_PATH

    if not config_path.exists():
        logger.info(f"Config file not found at {config_path}. Creating it with default values.")
        try:
            config_path.parent.mkdir(parents=True, exist_ok=True)
            config_path.write_text(CONFIG_TOML_CONTENT, encoding="utf-8")
            logger.info(f"Created default config file at {config_path}")
        except OSError as e:
            logger.error(f"Could not create default config file {config_path}: {e}. Using internal defaults.")
    else:
        logger.info(f"Loading config from: {config_path}")
        try:
            with open(config_path, "rb") as f:
                user_config_from_file = tomllib.load(f)
            loaded_config = deep_merge_dicts(loaded_config, user_config_from_file)
            logger.info(f"Loaded and merged config from {config_path}")
        except tomllib.TOMLDecodeError as e:
            logger.error(f"Error decoding TOML config file {config_path}: {e}. Using internal defaults.")
        except OSError as e:
            logger.error(f"Could not read config file {config_path}: {e}. Using internal defaults.")

    _CONFIG_CACHE = loaded_config
    return loaded_config


def get_cli_setting(section: str, key: str, default: Any = None) -> Any:
    """Helper to get a specific setting from the loaded configuration."""
    config = load_cli_config_and_ensure_existence()
    section_data = config.get(section)
    if isinstance(section_data, dict):
        return section_data.get(key, default)
    return default


def get_cli_log_file_path() -> Path:
    """Log file path: the configured file name inside the config directory."""
    default_log_filename = DEFAULT_CONFIG_FROM_TOML["logging"]["log_filename"]
    log_filename = get_cli_setting("logging", "log_filename", default_log_filename)
    return DEFAULT_CONFIG_PATH.parent / log_filename


def reset_config_cache() -> None:
    """Forget the cached configuration so the next access re-reads the file."""
    global _CONFIG_CACHE
    _CONFIG_CACHE = None

#
# End of config.py
#######################################################################################################################
