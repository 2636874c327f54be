"""
pytest configuration and shared fixtures for tscli tests.

Fixtures
--------
clean_environment : None
    Autouse. Removes package manager and TSCI_* variables that would make
    results depend on how the test run was launched.

project_cwd : Path
    A temporary directory that is also the current working directory.

settings : CliSettings
    Settings pinned to a known running version.

static_version_source : type
    Factory for version sources returning a fixed lookup.
"""

import os
from pathlib import Path

import pytest

from tscli.config import CliSettings
from tscli.version_check import VersionLookup


class StaticVersionSource:
    """Version source that returns the same lookup every time."""

    def __init__(self, lookup: VersionLookup) -> None:
        self.lookup = lookup
        self.calls = 0

    def fetch_latest_version(self) -> VersionLookup:
        self.calls += 1
        return self.lookup


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """Strip environment variables that change detection or settings."""
    monkeypatch.delenv("npm_config_user_agent", raising=False)
    for key in list(os.environ):
        if key.startswith("TSCI_"):
            monkeypatch.delenv(key)


@pytest.fixture
def project_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """
    Run the test from inside a fresh temporary directory.

    Returns
    -------
    Path
        The temporary directory, now the current working directory.
    """
    workdir = tmp_path / "workspace"
    workdir.mkdir()
    monkeypatch.chdir(workdir)
    return workdir


@pytest.fixture
def settings() -> CliSettings:
    """Settings with a fixed running version."""
    return CliSettings(current_version="1.0.0")


@pytest.fixture
def static_version_source() -> type[StaticVersionSource]:
    """Factory for fake version sources."""
    return StaticVersionSource


# =============================================================================
# pytest Configuration
# =============================================================================

def pytest_configure(config: pytest.Config) -> None:
    """Register custom markers used in the test suite."""
    config.addinivalue_line(
        "markers", "integration: marks tests requiring external resources"
    )
