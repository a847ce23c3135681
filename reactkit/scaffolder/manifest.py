"""Read-modify-write of a generated project's ``package.json``.

The manifest is parsed into a plain ``dict`` (key order preserved), only the
``scripts`` key is replaced, and the document is serialised back with
two-space indentation.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Mapping

from ..config import DEFAULT_SCRIPTS
from ..utils import load_json, save_json
from .errors import ManifestPatchError


class ManifestPatcher:
    """Overwrites the ``scripts`` mapping of a JSON manifest."""

    def __init__(self, scripts: Mapping[str, str] | None = None) -> None:
        self.scripts = dict(scripts if scripts is not None else DEFAULT_SCRIPTS)

    def patch(
        self,
        manifest_path: str | Path,
        scripts: Mapping[str, str] | None = None,
    ) -> dict[str, Any]:
        """Replace ``scripts`` in *manifest_path* and write the file back.

        Args:
            manifest_path: Path to the ``package.json`` to rewrite.
            scripts: Optional replacement for the configured script set.

        Returns:
            The patched manifest mapping.

        Raises:
            ManifestPatchError: If the file cannot be read, is not a JSON
                object, or cannot be written.
        """
        path = Path(manifest_path)
        try:
            manifest = load_json(path)
        except FileNotFoundError as exc:
            raise ManifestPatchError(f"Manifest not found: {path}", path) from exc
        except json.JSONDecodeError as exc:
            raise ManifestPatchError(f"Manifest is not valid JSON: {path}: {exc}", path) from exc
        except OSError as exc:
            raise ManifestPatchError(f"Could not read manifest {path}: {exc}", path) from exc

        if not isinstance(manifest, dict):
            raise ManifestPatchError(
                f"Manifest root must be a JSON object, got {type(manifest).__name__}: {path}",
                path,
            )

        manifest["scripts"] = dict(scripts if scripts is not None else self.scripts)

        try:
            save_json(manifest, path)
        except OSError as exc:
            raise ManifestPatchError(f"Could not write manifest {path}: {exc}", path) from exc

        return manifest
