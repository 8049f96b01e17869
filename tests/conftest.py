"""Shared test fixtures for the stackconf test suite."""

from collections.abc import Callable, Generator
from pathlib import Path

import pytest
import structlog


@pytest.fixture
def test_config_dir(tmp_path: Path) -> Path:
    """Create a temporary config directory for testing."""
    config_dir = tmp_path / "config"
    config_dir.mkdir()
    return config_dir


@pytest.fixture
def write_documents(test_config_dir: Path) -> Callable[[dict[str, str]], None]:
    """Factory fixture to create configuration documents in the test config directory.

    Usage:
        def test_something(write_documents):
            write_documents({
                "common.toml": "aws_region = 'us-west-2'",
                "dev.toml": "environment = 'development'",
            })
    """

    def _write_documents(files: dict[str, str]) -> None:
        for filename, content in files.items():
            (test_config_dir / filename).write_text(content, encoding="utf-8")

    return _write_documents


@pytest.fixture(autouse=True)
def isolated_environment(monkeypatch: pytest.MonkeyPatch) -> Generator[None, None, None]:
    """Drop STACKCONF_* variables and reset logging around each test."""
    for name in (
        "STACKCONF_STAGE",
        "STACKCONF_CONFIG_DIR",
        "STACKCONF_LOGGING__LEVEL",
        "STACKCONF_LOGGING__FORMAT",
        "STACKCONF_LOGGING__REDACT_PII",
    ):
        monkeypatch.delenv(name, raising=False)
    structlog.reset_defaults()
    yield
    structlog.reset_defaults()
