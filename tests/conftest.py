"""Shared fixtures for the genmodule test suite."""

from __future__ import annotations

from datetime import date
from pathlib import Path

import pytest

from genmodule.core.config import RenderContext

FIXED_DATE = date(2017, 3, 5)


@pytest.fixture
def context() -> RenderContext:
    return RenderContext.create("Home", "Broccoli", "Bojan Stefanovic", when=FIXED_DATE)


@pytest.fixture
def home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """A fake home directory with an empty Desktop."""
    home_dir = tmp_path / "home"
    (home_dir / "Desktop").mkdir(parents=True)
    monkeypatch.setenv("HOME", str(home_dir))
    monkeypatch.setenv("USERPROFILE", str(home_dir))
    return home_dir
