"""Component generation flow.

Writes a component definition, a stylesheet and a barrel ``index.js`` into
``src/components/<name>/`` of an existing project.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from ..config import Config
from ..utils import ensure_dir
from .errors import ComponentExistsError, DirectoryCreationError, InvalidNameError
from .templates import TemplateRenderer


@dataclass
class ComponentResult:
    """Outcome of a successful ``component`` run."""

    name: str
    directory: Path
    files: list[Path] = field(default_factory=list)


class ComponentGenerator:
    """Generates component boilerplate inside *project_root*."""

    def __init__(
        self,
        config: Config | None = None,
        *,
        project_root: str | Path | None = None,
        renderer: TemplateRenderer | None = None,
    ) -> None:
        self.config = config or Config()
        self.project_root = Path(project_root) if project_root is not None else Path.cwd()
        self.renderer = renderer or TemplateRenderer(self.config.templates_dir)

    @property
    def components_dir(self) -> Path:
        return self.project_root / self.config.layout.components_dir

    def component_path(self, component_name: str) -> Path:
        return self.components_dir / component_name

    def generate(self, component_name: str) -> ComponentResult:
        """Create ``<name>.js``, ``<name>.css`` and ``index.js`` for a component.

        Raises:
            InvalidNameError: The name is empty after trimming.
            ComponentExistsError: The component directory already exists.
                Nothing is written in that case.
            DirectoryCreationError: The directory could not be created.
            TemplateNotFoundError, RenderError: A file could not be rendered
                or written.  Files written before the failure are kept.
        """
        name = component_name.strip()
        if not name:
            raise InvalidNameError("Component name must not be empty")

        directory = self.component_path(name)
        if directory.exists():
            raise ComponentExistsError(name, directory)

        try:
            ensure_dir(directory)
        except OSError as exc:
            raise DirectoryCreationError(
                f"Could not create directory {directory}: {exc}", directory
            ) from exc

        context = {"componentName": name}
        targets = [
            ("component/Component.js.j2", f"{name}.js"),
            ("component/Component.css.j2", f"{name}.css"),
            ("component/index.js.j2", "index.js"),
        ]
        files = [
            self.renderer.render_to_file(template_name, directory / filename, context)
            for template_name, filename in targets
        ]
        return ComponentResult(name=name, directory=directory, files=files)
