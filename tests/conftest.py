"""Pytest configuration and shared fixtures."""

import os
import sys
from pathlib import Path

import pytest

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))


@pytest.fixture(autouse=True)
def reset_settings(monkeypatch):
    """Isolate tests from DIVIDEND_TRACKER_* environment and cached settings."""
    from src.settings import get_settings

    for name in list(os.environ):
        if name.startswith("DIVIDEND_TRACKER_"):
            monkeypatch.delenv(name)

    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
