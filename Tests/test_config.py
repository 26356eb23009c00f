"""
Tests for configuration loading and logging setup.
"""

import sys

import pytest
from loguru import logger

from ui_showcase import config
from ui_showcase.logging_config import LOG_LEVEL_ENV, configure_logging, resolve_log_level


pytestmark = pytest.mark.unit


def test_missing_config_is_created_with_defaults(isolated_config):
    loaded = config.load_cli_config_and_ensure_existence()
    assert isolated_config.exists()
    assert loaded == config.DEFAULT_CONFIG_FROM_TOML
    assert loaded["general"]["theme"] == "textual-dark"


def test_user_settings_merge_over_defaults(isolated_config):
    isolated_config.parent.mkdir(parents=True, exist_ok=True)
    isolated_config.write_text('[logging]\nlog_level = "DEBUG"\n', encoding="utf-8")

    assert config.get_cli_setting("logging", "log_level") == "DEBUG"
    assert config.get_cli_setting("logging", "log_filename") == "ui_showcase.log"
    assert config.get_cli_setting("general", "theme") == "textual-dark"


def test_invalid_toml_falls_back_to_defaults(isolated_config):
    isolated_config.parent.mkdir(parents=True, exist_ok=True)
    isolated_config.write_text("[general\ntheme = ", encoding="utf-8")

    loaded = config.load_cli_config_and_ensure_existence()
    assert loaded == config.DEFAULT_CONFIG_FROM_TOML


def test_config_is_cached_until_forced(isolated_config):
    first = config.load_cli_config_and_ensure_existence()
    isolated_config.write_text('[general]\ntheme = "nord"\n', encoding="utf-8")

    assert config.load_cli_config_and_ensure_existence() is first
    assert config.load_cli_config_and_ensure_existence(force_reload=True)["general"]["theme"] == "nord"


def test_missing_section_returns_default():
    assert config.get_cli_setting("nope", "key", "fallback") == "fallback"


def test_deep_merge_does_not_mutate_base():
    base = {"a": {"b": 1, "c": 2}, "d": 3}
    merged = config.deep_merge_dicts(base, {"a": {"b": 10}, "e": 5})
    assert merged == {"a": {"b": 10, "c": 2}, "d": 3, "e": 5}
    assert base == {"a": {"b": 1, "c": 2}, "d": 3}


def test_log_file_lives_next_to_config(isolated_config):
    assert config.get_cli_log_file_path() == isolated_config.parent / "ui_showcase.log"


def test_log_level_env_override(monkeypatch):
    monkeypatch.setenv(LOG_LEVEL_ENV, "debug")
    assert resolve_log_level() == "DEBUG"
    monkeypatch.delenv(LOG_LEVEL_ENV)
    assert resolve_log_level() == "INFO"


@pytest.fixture
def restore_logger():
    yield
    logger.remove()
    logger.add(sys.stderr)


def test_configure_logging_writes_to_file(tmp_path, restore_logger):
    log_path = configure_logging(log_file=tmp_path / "logs" / "app.log", level="DEBUG")
    logger.debug("hello from the test")
    logger.complete()
    assert log_path.exists()
    assert "hello from the test" in log_path.read_text(encoding="utf-8")
