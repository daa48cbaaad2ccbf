"""Shared fixtures for folder activity tests."""

from __future__ import annotations

from pathlib import Path

import pytest

from folder_activity.config import AnalyzerSettings
from folder_activity.resolver import PathResolver


@pytest.fixture
def home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point ``~`` at an empty temporary home directory."""
    home_dir = tmp_path / "home"
    home_dir.mkdir()
    monkeypatch.setenv("HOME", str(home_dir))
    return home_dir


@pytest.fixture
def bases(home: Path) -> list[Path]:
    """Two resolution bases inside the fake home; only the first exists up front."""
    developer = home / "Developer"
    developer.mkdir()
    return [developer, home / "Projects"]


@pytest.fixture
def resolver(bases: list[Path]) -> PathResolver:
    return PathResolver([str(base) for base in bases])


@pytest.fixture
def settings(bases: list[Path]) -> AnalyzerSettings:
    return AnalyzerSettings(search_bases=tuple(str(base) for base in bases))
