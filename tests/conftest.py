"""
Pytest configuration and shared fixtures for webcfg tests.

This module provides reusable fixtures and test utilities used across
the test suite.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import pytest
import yaml

from webcfg.config.settings import (
    COMMON_FILE_ENV,
    ENVIRONMENT_FILE_ENV,
    RESOURCE_PATH_ENV,
    LoaderSettings,
)


class RecordingLogger:
    """Logger that keeps every message for later assertions."""

    def __init__(self) -> None:
        self.records: list[tuple[str, str, str]] = []

    def step(self, step: int, total: int, message: str) -> None:
        self.records.append(("step", f"{step}/{total}", message))

    def verbose(self, prefix: str, message: str) -> None:
        self.records.append(("verbose", prefix, message))

    def debug(self, prefix: str, message: str) -> None:
        self.records.append(("debug", prefix, message))

    def messages(self, level: str | None = None) -> list[str]:
        return [m for lvl, _, m in self.records if level is None or lvl == level]


@pytest.fixture(autouse=True)
def clean_environ(monkeypatch: pytest.MonkeyPatch) -> None:
    """Remove loader environment variables so tests start from defaults."""
    for name in (COMMON_FILE_ENV, ENVIRONMENT_FILE_ENV, RESOURCE_PATH_ENV):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def fixtures_dir() -> Path:
    """Provide path to test fixtures directory."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture
def resources_dir(fixtures_dir: Path) -> Path:
    """Provide the directory holding the YAML test resources."""
    return fixtures_dir / "resources"


@pytest.fixture
def recording_logger() -> RecordingLogger:
    return RecordingLogger()


@pytest.fixture
def make_settings(resources_dir: Path):
    """
    Factory fixture for settings rooted at the test resources.

    Usage:
        settings = make_settings(common_file="test-common")
    """

    def _make(**overrides: Any) -> LoaderSettings:
        overrides.setdefault("resource_path", (resources_dir,))
        return LoaderSettings(**overrides)

    return _make


@pytest.fixture
def create_yaml_file(tmp_path: Path):
    """
    Factory fixture for creating temporary YAML files.

    Usage:
        yaml_path = create_yaml_file("test.yaml", {"key": "value"})
    """

    def _create(filename: str, data: Any) -> Path:
        path = tmp_path / filename
        path.parent.mkdir(parents=True, exist_ok=True)
        with path.open("w", encoding="utf-8") as f:
            yaml.dump(data, f)
        return path

    return _create
