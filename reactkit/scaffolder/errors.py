"""Exception hierarchy for the scaffolding pipeline.

Every failure raised by the scaffolder derives from :class:`ReactKitError` so
the CLI can catch them at a single boundary, print the message to stderr and
pick the exit status.
"""

from __future__ import annotations

from pathlib import Path


class ReactKitError(Exception):
    """Base class for all scaffolding errors."""


class InvalidNameError(ReactKitError):
    """Raised when a project or component name is empty or whitespace."""


class DirectoryCreationError(ReactKitError):
    """Raised when a required directory cannot be created."""

    def __init__(self, message: str, path: str | Path = ""):
        self.path = Path(path) if path else None
        super().__init__(message)


class TemplateNotFoundError(ReactKitError):
    """Raised when a named template does not exist in the template directory."""

    def __init__(self, template_name: str, template_dir: str | Path = ""):
        self.template_name = template_name
        self.template_dir = Path(template_dir) if template_dir else None
        location = f" in {self.template_dir}" if self.template_dir else ""
        super().__init__(f"Template not found: {template_name}{location}")


class RenderError(ReactKitError):
    """Raised when a template is malformed or cannot be written."""


class ComponentExistsError(ReactKitError):
    """Raised when the component directory already exists.

    This is a soft stop: the CLI reports it and exits successfully.
    """

    def __init__(self, component_name: str, path: str | Path):
        self.component_name = component_name
        self.path = Path(path)
        super().__init__(f"Component {component_name} already exists!")


class DependencyInstallError(ReactKitError):
    """Raised when the package manager exits with a non-zero status."""

    def __init__(self, message: str, returncode: int = 1, command: str = ""):
        self.returncode = returncode
        self.command = command
        super().__init__(message)


class ManifestPatchError(ReactKitError):
    """Raised when ``package.json`` cannot be read, parsed or rewritten."""

    def __init__(self, message: str, path: str | Path = ""):
        self.path = Path(path) if path else None
        super().__init__(message)
