"""Pytest configuration and fixtures."""

import os
from pathlib import Path

import pytest

from screenplayer.config import reset_settings

# Import CLI fixtures to make them available globally
from tests.cli_fixtures import cli_invoke, clean_runner  # noqa: F401

FIXTURES_DIR = Path(__file__).parent / "fixtures"


def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line(
        "markers",
        "integration: mark test as integration test",
    )
    config.addinivalue_line(
        "markers",
        "unit: mark test as unit test",
    )


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch):
    """Give every test fresh settings built from a quiet environment."""
    for var in [k for k in os.environ if k.startswith("SCREENPLAYER_")]:
        monkeypatch.delenv(var, raising=False)
    monkeypatch.setenv("SCREENPLAYER_LOG_LEVEL", "ERROR")
    reset_settings()
    yield
    reset_settings()


@pytest.fixture
def fixture_path() -> Path:
    """Path to the end-to-end screenplay document."""
    return FIXTURES_DIR / "data.scp"


@pytest.fixture
def screenplay_text(fixture_path: Path) -> str:
    """Contents of the end-to-end screenplay document."""
    return fixture_path.read_text(encoding="utf-8")
