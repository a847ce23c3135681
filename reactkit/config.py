"""reactkit configuration.

Centralised, typed configuration for the scaffolder.  Settings use Pydantic
v2 models so they are validated at construction time and can be loaded from
a JSON file given on the command line.
"""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, Field, field_validator

DEFAULT_TEMPLATE_DIR = Path(__file__).parent / "scaffolder" / "templates"

DEFAULT_SCRIPTS: dict[str, str] = {
    "start": "react-scripts start",
    "build": "react-scripts build",
    "test": "react-scripts test",
}


class ProjectLayout(BaseModel):
    """Relative directory names used inside a generated project."""

    source_dir: str = Field(default="src")
    public_dir: str = Field(default="public")
    components_dir: str = Field(default="src/components")
    manifest_name: str = Field(default="package.json")


class Config(BaseModel):
    """Global reactkit configuration.

    Instances are created once by the CLI entry point (from defaults or a
    JSON file) and passed to the scaffolder classes.
    """

    templates_dir: Path = Field(default=DEFAULT_TEMPLATE_DIR)
    package_manager: str = Field(default="npm", min_length=1)
    dependencies: list[str] = Field(default_factory=lambda: ["react", "react-dom"])
    scripts: dict[str, str] = Field(default_factory=lambda: dict(DEFAULT_SCRIPTS))
    layout: ProjectLayout = Field(default_factory=ProjectLayout)

    @field_validator("dependencies")
    @classmethod
    def _dependencies_not_blank(cls, value: list[str]) -> list[str]:
        cleaned = [dep.strip() for dep in value if dep.strip()]
        if not cleaned:
            raise ValueError("at least one runtime dependency is required")
        return cleaned

    # ------------------------------------------------------------------
    # Loading
    # ------------------------------------------------------------------

    @classmethod
    def load(cls, path: Path) -> "Config":
        """Load a configuration from a JSON file.

        Missing keys fall back to their defaults.
        """
        raw = Path(path).read_text(encoding="utf-8")
        return cls.model_validate_json(raw)
