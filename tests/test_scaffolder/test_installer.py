"""Tests for the npm installer (reactkit.scaffolder.installer)."""

from __future__ import annotations

from pathlib import Path
from unittest.mock import patch

import pytest

from reactkit.scaffolder.installer import NpmInstaller

pytestmark = pytest.mark.unit


class TestBuildCommand:
    def test_default_command(self):
        command = NpmInstaller().build_command(["react", "react-dom"])
        assert command == "npm init && npm install react react-dom"

    def test_assume_yes(self):
        command = NpmInstaller(assume_yes=True).build_command(["react"])
        assert command == "npm init --yes && npm install react"

    def test_custom_executable(self):
        command = NpmInstaller("pnpm").build_command(["react"])
        assert command == "pnpm init && pnpm install react"

    def test_arguments_are_quoted(self):
        command = NpmInstaller().build_command(["react; rm -rf /"])
        assert command == "npm init && npm install 'react; rm -rf /'"


class TestInstall:
    def test_runs_single_command_in_project_dir(self, tmp_path: Path):
        with patch(
            "reactkit.scaffolder.installer.run_command", return_value=0
        ) as mock_run:
            returncode = NpmInstaller().install(tmp_path, ["react", "react-dom"])

        assert returncode == 0
        mock_run.assert_called_once_with(
            "npm init && npm install react react-dom", cwd=tmp_path
        )

    def test_returns_non_zero_status(self, tmp_path: Path):
        with patch("reactkit.scaffolder.installer.run_command", return_value=127):
            assert NpmInstaller().install(tmp_path, ["react"]) == 127
