"""Shared pytest fixtures for qmlkit tests."""

from pathlib import Path

import pytest


@pytest.fixture
def fixtures_dir() -> Path:
    """Return path to fixtures directory."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture
def qml_fixtures_dir(fixtures_dir: Path) -> Path:
    """Return path to QML fixtures directory."""
    return fixtures_dir / "qml"


@pytest.fixture
def main_qml(qml_fixtures_dir: Path) -> Path:
    """Return path to main.qml fixture."""
    return qml_fixtures_dir / "main.qml"


@pytest.fixture(autouse=True)
def clean_qmlkit_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep QMLKIT_* variables from the developer's shell out of tests."""
    monkeypatch.delenv("QMLKIT_SEARCH_PATH", raising=False)
    monkeypatch.delenv("QMLKIT_LOG_LEVEL", raising=False)
