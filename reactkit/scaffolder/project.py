"""Project initialisation flow.

Creates the directory skeleton for a new React application, renders the
top-level templates into it, runs the package manager and finally patches the
generated ``package.json`` with the standard run scripts.

The steps run strictly in sequence.  A failing step raises and the remaining
steps are skipped; whatever was already created stays on disk.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from ..config import Config
from ..utils import ensure_dir, print_info
from .errors import DependencyInstallError, DirectoryCreationError, InvalidNameError
from .installer import DependencyInstaller, NpmInstaller
from .manifest import ManifestPatcher
from .templates import TemplateRenderer


@dataclass
class ProjectResult:
    """Outcome of a successful ``init`` run."""

    name: str
    root: Path
    directories: list[Path] = field(default_factory=list)
    files: list[Path] = field(default_factory=list)
    manifest: dict[str, Any] = field(default_factory=dict)


class ProjectInitializer:
    """Scaffolds a new project directory under *base_dir*.

    Collaborators are injectable; by default the packaged templates, ``npm``
    and the configured script set are used.
    """

    def __init__(
        self,
        config: Config | None = None,
        *,
        base_dir: str | Path | None = None,
        renderer: TemplateRenderer | None = None,
        installer: DependencyInstaller | None = None,
        patcher: ManifestPatcher | None = None,
    ) -> None:
        self.config = config or Config()
        self.base_dir = Path(base_dir) if base_dir is not None else Path.cwd()
        self.renderer = renderer or TemplateRenderer(self.config.templates_dir)
        self.installer = installer or NpmInstaller(self.config.package_manager)
        self.patcher = patcher or ManifestPatcher(self.config.scripts)

    # -- Public API --------------------------------------------------------

    def init(self, project_name: str) -> ProjectResult:
        """Run the full initialisation pipeline for *project_name*.

        Returns:
            A :class:`ProjectResult` describing what was created.

        Raises:
            InvalidNameError: The name is empty after trimming.
            DirectoryCreationError: The skeleton could not be created.
            TemplateNotFoundError, RenderError: A template could not be
                rendered or written.
            DependencyInstallError: The package manager exited non-zero.
            ManifestPatchError: ``package.json`` could not be patched.
        """
        name = project_name.strip()
        if not name:
            raise InvalidNameError("Project name must not be empty")

        root = self.base_dir / name
        directories = self._create_directories(root)

        print_info("Generating files ...")
        files = self._render_files(root, {"projectName": name})

        print_info("Installing dependencies ...")
        self._install_dependencies(root)

        print_info("Adding scripts ...")
        manifest = self.patcher.patch(root / self.config.layout.manifest_name)

        return ProjectResult(
            name=name,
            root=root,
            directories=directories,
            files=files,
            manifest=manifest,
        )

    # -- Steps -------------------------------------------------------------

    def _create_directories(self, root: Path) -> list[Path]:
        layout = self.config.layout
        directories = [root, root / layout.source_dir, root / layout.public_dir]
        for directory in directories:
            try:
                ensure_dir(directory)
            except OSError as exc:
                raise DirectoryCreationError(
                    f"Could not create directory {directory}: {exc}", directory
                ) from exc
        return directories

    def _template_targets(self) -> list[tuple[str, str]]:
        layout = self.config.layout
        return [
            ("project/index.html.j2", f"{layout.public_dir}/index.html"),
            ("project/index.js.j2", f"{layout.source_dir}/index.js"),
            ("project/package.json.j2", layout.manifest_name),
        ]

    def _render_files(self, root: Path, context: dict[str, str]) -> list[Path]:
        written: list[Path] = []
        for template_name, relative in self._template_targets():
            path = self.renderer.render_to_file(template_name, root / relative, context)
            written.append(path)
        return written

    def _install_dependencies(self, root: Path) -> None:
        packages = list(self.config.dependencies)
        try:
            returncode = self.installer.install(root, packages)
        except OSError as exc:
            raise DependencyInstallError(
                f"Could not start {self.config.package_manager}: {exc}"
            ) from exc
        if returncode != 0:
            raise DependencyInstallError(
                f"Installing {', '.join(packages)} failed (exit {returncode})",
                returncode=returncode,
            )
