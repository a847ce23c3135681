"""Unit tests for Config and related Pydantic models (reactkit.config).

Tests cover:
- ProjectLayout defaults
- Config defaults (templates dir, npm, dependencies, scripts)
- Field validation
- loading full and partial JSON files
"""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from pydantic import ValidationError

from reactkit.config import DEFAULT_SCRIPTS, DEFAULT_TEMPLATE_DIR, Config, ProjectLayout


class TestProjectLayout:
    @pytest.mark.unit
    def test_defaults(self):
        layout = ProjectLayout()
        assert layout.source_dir == "src"
        assert layout.public_dir == "public"
        assert layout.components_dir == "src/components"
        assert layout.manifest_name == "package.json"


class TestConfigDefaults:
    @pytest.mark.unit
    def test_templates_dir_points_at_packaged_templates(self):
        config = Config()
        assert config.templates_dir == DEFAULT_TEMPLATE_DIR
        assert (config.templates_dir / "project" / "package.json.j2").is_file()
        assert (config.templates_dir / "component" / "Component.js.j2").is_file()

    @pytest.mark.unit
    def test_package_manager_and_dependencies(self):
        config = Config()
        assert config.package_manager == "npm"
        assert config.dependencies == ["react", "react-dom"]

    @pytest.mark.unit
    def test_scripts(self):
        assert Config().scripts == {
            "start": "react-scripts start",
            "build": "react-scripts build",
            "test": "react-scripts test",
        }

    @pytest.mark.unit
    def test_scripts_are_a_copy(self):
        config = Config()
        config.scripts["eject"] = "react-scripts eject"
        assert "eject" not in DEFAULT_SCRIPTS
        assert "eject" not in Config().scripts


class TestConfigValidation:
    @pytest.mark.unit
    def test_empty_package_manager_rejected(self):
        with pytest.raises(ValidationError):
            Config(package_manager="")

    @pytest.mark.unit
    def test_blank_dependencies_rejected(self):
        with pytest.raises(ValidationError):
            Config(dependencies=["  ", ""])

    @pytest.mark.unit
    def test_dependencies_are_stripped(self):
        config = Config(dependencies=[" react ", "", "react-dom"])
        assert config.dependencies == ["react", "react-dom"]


class TestConfigSerialisation:
    @pytest.mark.unit
    def test_load_full_file(self, tmp_path: Path):
        path = tmp_path / "reactkit.json"
        path.write_text(
            json.dumps({"package_manager": "pnpm", "dependencies": ["react"]}),
            encoding="utf-8",
        )

        loaded = Config.load(path)
        assert loaded.package_manager == "pnpm"
        assert loaded.dependencies == ["react"]
        assert loaded.scripts == DEFAULT_SCRIPTS

    @pytest.mark.unit
    def test_load_partial_file_uses_defaults(self, tmp_path: Path):
        path = tmp_path / "reactkit.json"
        path.write_text(json.dumps({"layout": {"components_dir": "src/ui"}}), encoding="utf-8")

        loaded = Config.load(path)
        assert loaded.layout.components_dir == "src/ui"
        assert loaded.layout.source_dir == "src"
        assert loaded.package_manager == "npm"

    @pytest.mark.unit
    def test_load_invalid_json_raises(self, tmp_path: Path):
        path = tmp_path / "reactkit.json"
        path.write_text("{not json", encoding="utf-8")
        with pytest.raises(ValidationError):
            Config.load(path)
