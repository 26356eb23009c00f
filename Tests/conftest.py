"""
Root conftest.py for shared test fixtures and configuration.
"""

import sys
from pathlib import Path

import pytest

# Add project root to Python path for consistent imports
PROJECT_ROOT = Path(__file__).parent.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from ui_showcase import config


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Point the config file at a temp dir so tests never touch ~/.config."""
    config_path = tmp_path / "ui_showcase" / "config.toml"
    monkeypatch.setattr(config, "DEFAULT_CONFIG_PATH", config_path)
    config.reset_config_cache()
    yield config_path
    config.reset_config_cache()


def pytest_configure(config):
    """Register custom test markers."""
    config.addinivalue_line("markers", "unit: Unit tests that don't require a running app")
    config.addinivalue_line("markers", "asyncio: Async tests using asyncio")
