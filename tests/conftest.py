"""Pytest configuration and shared fixtures for all tests."""

from pathlib import Path

import pytest

TEST_DATA_DIR = Path(__file__).parent / "test-data" / "simplestream"


@pytest.fixture(autouse=True)
def disable_sentry_for_tests(monkeypatch):
    """Disable Sentry telemetry for all tests.

    Tests that need Sentry set SENTRY_DSN and TELEMETRY themselves.
    """
    monkeypatch.setenv("TELEMETRY", "false")
    monkeypatch.delenv("SENTRY_DSN", raising=False)


@pytest.fixture(autouse=True)
def clear_simplestream_env(monkeypatch):
    """Make every test start from the default configuration."""
    for name in (
        "SIMPLESTREAM_HOST",
        "SIMPLESTREAM_PATH",
        "SIMPLESTREAM_ARCH",
        "SIMPLESTREAM_IMAGE_TAG",
        "SIMPLESTREAM_INFO_TAG",
        "SIMPLESTREAM_TIMEOUT",
    ):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def download_document() -> str:
    """Text of a trimmed Ubuntu release stream."""
    return (TEST_DATA_DIR / "download.json").read_text()
