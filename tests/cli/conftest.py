"""Shared fixtures for CLI tests."""

from __future__ import annotations

from pathlib import Path

import pytest
from click.testing import CliRunner

from hms.paths import HACKMUD_PATH_ENV


@pytest.fixture
def runner() -> CliRunner:
    """Create a Click CliRunner for invoking commands."""
    return CliRunner()


@pytest.fixture
def in_sources(greet_sources: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run from the script source directory with no hackmud env override."""
    monkeypatch.chdir(greet_sources)
    monkeypatch.delenv(HACKMUD_PATH_ENV, raising=False)
    return greet_sources
