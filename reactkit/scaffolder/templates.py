"""Jinja2 template rendering for project scaffolding.

Provides the TemplateRenderer class which loads templates from the
``reactkit/scaffolder/templates/`` directory by logical name and renders them
with a small context of named variables.

Substitution is non-strict: a ``{{ placeholder }}`` whose variable is not in
the context is written back verbatim instead of raising or rendering as an
empty string.  Existing template files rely on this.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Iterable, Mapping, Protocol

from jinja2 import (
    Environment,
    FileSystemLoader,
    TemplateError,
    TemplateNotFound,
    TemplateSyntaxError,
    meta,
)

from ..config import DEFAULT_TEMPLATE_DIR
from ..utils import write_text
from .errors import RenderError, TemplateNotFoundError


# ---------------------------------------------------------------------------
# Template model
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Template:
    """A template file loaded from the template directory."""

    name: str
    path: Path
    source: str
    variables: frozenset[str]


# ---------------------------------------------------------------------------
# Substitution engines
# ---------------------------------------------------------------------------

_PLACEHOLDER_RE = re.compile(r"\{\{(.*?)\}\}", re.DOTALL)
_ROOT_NAME_RE = re.compile(r"[A-Za-z_]\w*")


def protect_unknown_placeholders(template_string: str, names: Iterable[str]) -> str:
    """Wrap every placeholder whose root variable is not in *names* in a raw
    block so it survives rendering as the exact source text.
    """
    known = set(names)

    def _protect(match: re.Match[str]) -> str:
        expression = match.group(1).lstrip().lstrip("-+").lstrip()
        root = _ROOT_NAME_RE.match(expression)
        if root is not None and root.group(0) in known:
            return match.group(0)
        return "{% raw %}" + match.group(0) + "{% endraw %}"

    return _PLACEHOLDER_RE.sub(_protect, template_string)


class Renderer(Protocol):
    """Anything that can substitute variables into template text."""

    def render_string(self, template_string: str, context: Mapping[str, Any]) -> str:
        ...


def build_environment(template_dir: str | Path) -> Environment:
    """Create the Jinja2 environment used for loading and rendering.

    Output is JSON, JavaScript, CSS and HTML source, so values are inserted
    unescaped.
    """
    return Environment(
        loader=FileSystemLoader(str(template_dir)),
        autoescape=False,
        keep_trailing_newline=True,
    )


class JinjaRenderer:
    """Default :class:`Renderer` backed by a Jinja2 environment."""

    def __init__(self, env: Environment | None = None) -> None:
        self.env = env or Environment(autoescape=False, keep_trailing_newline=True)

    def render_string(self, template_string: str, context: Mapping[str, Any]) -> str:
        """Render an inline template string with the provided context.

        Placeholders naming a variable missing from *context* are left
        untouched, byte for byte.

        Raises:
            RenderError: If the text is not a valid template or evaluation
                fails.
        """
        try:
            template = self.env.from_string(
                protect_unknown_placeholders(template_string, context)
            )
            return template.render(**context)
        except TemplateSyntaxError as exc:
            raise RenderError(f"Malformed template (line {exc.lineno}): {exc.message}") from exc
        except TemplateError as exc:
            raise RenderError(f"Template evaluation failed: {exc}") from exc


# ---------------------------------------------------------------------------
# TemplateRenderer
# ---------------------------------------------------------------------------


class TemplateRenderer:
    """Loads named templates and renders them with a context dictionary.

    The substitution step is delegated to *engine* so it can be swapped or
    stubbed without touching the scaffolding flows.
    """

    def __init__(
        self,
        template_dir: str | Path | None = None,
        engine: Renderer | None = None,
    ) -> None:
        if template_dir is None:
            template_dir = DEFAULT_TEMPLATE_DIR
        self.template_dir = Path(template_dir)
        self.env = build_environment(self.template_dir)
        self.engine: Renderer = engine or JinjaRenderer(self.env)

    # -- Loading -----------------------------------------------------------

    def load(self, template_name: str) -> Template:
        """Load a template by its path relative to the template directory.

        Raises:
            TemplateNotFoundError: If no such template exists.
            RenderError: If the template text cannot be parsed.
        """
        try:
            source, filename, _ = self.env.loader.get_source(self.env, template_name)
        except TemplateNotFound as exc:
            raise TemplateNotFoundError(template_name, self.template_dir) from exc

        try:
            variables = meta.find_undeclared_variables(self.env.parse(source))
        except TemplateSyntaxError as exc:
            raise RenderError(
                f"{template_name}: malformed template (line {exc.lineno}): {exc.message}"
            ) from exc

        return Template(
            name=template_name,
            path=Path(filename),
            source=source,
            variables=frozenset(variables),
        )

    # -- Rendering ---------------------------------------------------------

    def render(self, template_name: str, context: Mapping[str, Any]) -> str:
        """Render a single template with the provided context.

        Args:
            template_name: Path relative to the template directory (e.g.
                ``"project/index.html.j2"``).
            context: Variables substituted into the template.

        Returns:
            The rendered template content as a string.
        """
        template = self.load(template_name)
        try:
            return self.engine.render_string(template.source, context)
        except RenderError as exc:
            raise RenderError(f"{template_name}: {exc}") from exc

    def render_to_file(
        self,
        template_name: str,
        output_path: str | Path,
        context: Mapping[str, Any],
    ) -> Path:
        """Render a template and write the result to *output_path*.

        Parent directories are created automatically.
        """
        content = self.render(template_name, context)
        try:
            return write_text(output_path, content)
        except OSError as exc:
            raise RenderError(f"Could not write {output_path}: {exc}") from exc

    # -- Utility -----------------------------------------------------------

    def list_templates(self, prefix: str = "") -> list[str]:
        """Return a sorted list of all ``.j2`` template names under *prefix*."""
        search_dir = self.template_dir / prefix if prefix else self.template_dir
        if not search_dir.is_dir():
            return []
        return sorted(
            p.relative_to(self.template_dir).as_posix()
            for p in search_dir.rglob("*.j2")
        )
