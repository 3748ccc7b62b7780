"""Pytest configuration and shared fixtures."""

import os

import pytest

# Load environment variables from .env file at test startup
from dotenv import load_dotenv
load_dotenv()

from eventcal.config import ENV_PREFIX, reset_settings

pytest_plugins = [
    "tests.fixtures.core.events",
    "tests.fixtures.core.calendars",
]


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch):
    """Run each test against default settings, ignoring EVENTCAL_* variables."""
    for key in list(os.environ):
        if key.startswith(ENV_PREFIX):
            monkeypatch.delenv(key)
    reset_settings()
    yield
    reset_settings()
