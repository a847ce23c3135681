"""reactkit scaffolder -- generates React projects and components.

Quick usage::

    from reactkit.scaffolder import ComponentGenerator, ProjectInitializer

    result = ProjectInitializer(base_dir="/tmp").init("my-app")
    ComponentGenerator(project_root=result.root).generate("Button")
"""

from reactkit.scaffolder.component import ComponentGenerator, ComponentResult
from reactkit.scaffolder.errors import (
    ComponentExistsError,
    DependencyInstallError,
    DirectoryCreationError,
    InvalidNameError,
    ManifestPatchError,
    ReactKitError,
    RenderError,
    TemplateNotFoundError,
)
from reactkit.scaffolder.installer import DependencyInstaller, NpmInstaller
from reactkit.scaffolder.manifest import ManifestPatcher
from reactkit.scaffolder.project import ProjectInitializer, ProjectResult
from reactkit.scaffolder.templates import JinjaRenderer, Renderer, Template, TemplateRenderer

__all__ = [
    "ComponentExistsError",
    "ComponentGenerator",
    "ComponentResult",
    "DependencyInstallError",
    "DependencyInstaller",
    "DirectoryCreationError",
    "InvalidNameError",
    "JinjaRenderer",
    "ManifestPatchError",
    "ManifestPatcher",
    "NpmInstaller",
    "ProjectInitializer",
    "ProjectResult",
    "ReactKitError",
    "RenderError",
    "Renderer",
    "Template",
    "TemplateNotFoundError",
    "TemplateRenderer",
]
