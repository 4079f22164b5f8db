"""Shared fixtures for devcore tests."""

import pytest

from devcore import config
from devcore.config import Settings

FORGE_URL = "https://forge.example.com"
FORGE_KEY = "forge-test-key"
ADMIN_KEY = "admin-test-key"


@pytest.fixture
def forge_settings(monkeypatch):
    """Install settings with a fully configured notification service."""
    current = Settings(
        forge_api_url=FORGE_URL,
        forge_api_key=FORGE_KEY,
        admin_api_key=ADMIN_KEY,
        _env_file=None,
    )
    monkeypatch.setattr(config, "settings", current)
    return current
