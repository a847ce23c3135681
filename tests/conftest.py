"""Shared pytest fixtures for the reactkit test suite.

Provides reusable fixtures for:
- Temporary project directories
- A fake dependency installer that records calls instead of running npm
- Copies of the packaged templates that individual tests can modify
"""

from __future__ import annotations

import shutil
from pathlib import Path
from typing import Sequence

import pytest

from reactkit.config import DEFAULT_TEMPLATE_DIR, Config


# ---------------------------------------------------------------------------
# Paths & Directories
# ---------------------------------------------------------------------------

@pytest.fixture
def tmp_project_dir(tmp_path: Path) -> Path:
    """An existing React project root with an empty ``src/`` directory."""
    project_dir = tmp_path / "test-project"
    (project_dir / "src").mkdir(parents=True)
    yield project_dir


@pytest.fixture
def template_copy(tmp_path: Path) -> Path:
    """A writable copy of the packaged templates directory."""
    target = tmp_path / "templates"
    shutil.copytree(DEFAULT_TEMPLATE_DIR, target)
    return target


@pytest.fixture
def config() -> Config:
    return Config()


# ---------------------------------------------------------------------------
# Fake installer
# ---------------------------------------------------------------------------

class FakeInstaller:
    """Records ``install`` calls and returns a fixed exit status."""

    def __init__(self, returncode: int = 0) -> None:
        self.returncode = returncode
        self.calls: list[tuple[Path, list[str]]] = []

    def install(self, directory: Path, packages: Sequence[str]) -> int:
        self.calls.append((directory, list(packages)))
        return self.returncode


@pytest.fixture
def fake_installer() -> FakeInstaller:
    """An installer that always succeeds."""
    return FakeInstaller()


@pytest.fixture
def failing_installer() -> FakeInstaller:
    """An installer that exits with status 1."""
    return FakeInstaller(returncode=1)
