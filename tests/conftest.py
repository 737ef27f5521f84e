"""Root pytest configuration.

Test Structure:
    tests/
    ├── fintrack/              # Ledger, recurring rules, categories, stats
    │   ├── unit/              # Fast, isolated tests (mocked repositories)
    │   └── integration/       # SQLite-backed persistence, CLI and API tests
    ├── fintrack_identity/     # Users, passwords, tokens
    │   └── unit/
    └── shared/                # Shared fixtures and utilities

Integration tests run against a throwaway SQLite file per test, so they
need no external services and run by default. Select them with
``-m integration`` or skip them with ``-m "not integration"``.
"""

import os
from pathlib import Path

import pytest
from dotenv import load_dotenv

# The API module builds its app at import time and needs a signing key
os.environ.setdefault("JWT_SECRET_KEY", "test-jwt-secret-for-testing-only")

from fintrack_config import clear_settings_cache  # noqa: E402

PROJECT_ROOT = Path(__file__).resolve().parents[1]

# Load .env.dev for tests (same as local development)
CONFIG_DIR = PROJECT_ROOT / "config"
if (CONFIG_DIR / ".env.dev").exists():
    load_dotenv(CONFIG_DIR / ".env.dev")


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers",
        "integration: Tests that touch a real (SQLite) database",
    )


@pytest.fixture(scope="session", autouse=True)
def configure_app_settings():
    """Make sure every test session starts from freshly loaded settings."""
    clear_settings_cache()
    yield
    clear_settings_cache()
