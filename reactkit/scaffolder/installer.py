"""Package-manager invocation for new projects.

The scaffolder only depends on the :class:`DependencyInstaller` protocol, so
tests can pass a fake that records calls instead of spawning ``npm``.
"""

from __future__ import annotations

import shlex
from pathlib import Path
from typing import Protocol, Sequence

from ..utils import run_command


class DependencyInstaller(Protocol):
    """Bootstraps a manifest in *directory* and installs *packages*."""

    def install(self, directory: Path, packages: Sequence[str]) -> int:
        """Return the exit status of the package manager."""
        ...


class NpmInstaller:
    """Runs ``npm init`` then ``npm install <packages>`` as one shell call.

    The process inherits the terminal, so ``npm init`` can ask its own
    questions and install progress is shown live.  There is no timeout.
    """

    def __init__(self, executable: str = "npm", assume_yes: bool = False) -> None:
        self.executable = executable
        self.assume_yes = assume_yes

    def build_command(self, packages: Sequence[str]) -> str:
        npm = shlex.quote(self.executable)
        init = f"{npm} init --yes" if self.assume_yes else f"{npm} init"
        install = " ".join([npm, "install", *(shlex.quote(p) for p in packages)])
        return f"{init} && {install}"

    def install(self, directory: Path, packages: Sequence[str]) -> int:
        return run_command(self.build_command(packages), cwd=directory)
