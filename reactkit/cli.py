"""Command line interface for reactkit.

Usage::

    reactkit init my-app
    reactkit component Button
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Callable, Sequence

from pydantic import ValidationError
from rich.prompt import Prompt

from . import __version__
from .config import Config
from .scaffolder.component import ComponentGenerator
from .scaffolder.errors import ComponentExistsError, ReactKitError
from .scaffolder.installer import NpmInstaller
from .scaffolder.project import ProjectInitializer
from .utils import print_error, print_success, print_warning


def confirm_project_name(
    default: str,
    ask: Callable[..., str] | None = None,
) -> str:
    """Ask the user to confirm or override the project name."""
    ask = ask or Prompt.ask
    return ask("Project Name", default=default)


def _load_config(path: Path | None) -> Config:
    if path is None:
        return Config()
    return Config.load(path)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="reactkit",
        description="A CLI for React development",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  reactkit init my-app\n"
            "  reactkit init my-app --yes --directory ./projects\n"
            "  reactkit component Button\n"
        ),
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    subparsers = parser.add_subparsers(dest="command", required=True)

    init_parser = subparsers.add_parser("init", help="create a new React project")
    init_parser.add_argument("project_name", metavar="projectName", help="Name of the new project")
    init_parser.add_argument(
        "--yes", "-y",
        action="store_true",
        help="Skip the name prompt and run 'npm init' non-interactively",
    )
    init_parser.add_argument(
        "--directory", "-d",
        type=Path,
        default=None,
        help="Parent directory for the project (default: current directory)",
    )
    init_parser.add_argument("--config", type=Path, default=None, help="JSON configuration file")
    init_parser.set_defaults(handler=_handle_init)

    component_parser = subparsers.add_parser("component", help="generate a new React component")
    component_parser.add_argument(
        "component_name", metavar="componentName", help="Name of the component"
    )
    component_parser.add_argument(
        "--directory", "-d",
        type=Path,
        default=None,
        help="Project root (default: current directory)",
    )
    component_parser.add_argument("--config", type=Path, default=None, help="JSON configuration file")
    component_parser.set_defaults(handler=_handle_component)

    return parser


def _handle_init(args: argparse.Namespace, config: Config) -> int:
    name = args.project_name if args.yes else confirm_project_name(args.project_name)
    initializer = ProjectInitializer(
        config,
        base_dir=args.directory,
        installer=NpmInstaller(config.package_manager, assume_yes=args.yes),
    )
    try:
        initializer.init(name)
    except ReactKitError as exc:
        # Directories and files created before the failure are left in place.
        print_error(str(exc))
        return 1
    print_success("Done!")
    return 0


def _handle_component(args: argparse.Namespace, config: Config) -> int:
    generator = ComponentGenerator(config, project_root=args.directory)
    try:
        result = generator.generate(args.component_name)
    except ComponentExistsError as exc:
        print_warning(str(exc))
        return 0
    except ReactKitError as exc:
        print_error(str(exc))
        return 1
    print_success(f"Component {result.name} generated!")
    return 0


def main(argv: Sequence[str] | None = None) -> None:
    """CLI entry point for ``reactkit`` and ``python -m reactkit.cli``."""
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        config = _load_config(args.config)
    except (OSError, ValidationError) as exc:
        print_error(f"Invalid configuration {args.config}: {exc}")
        sys.exit(1)

    code = args.handler(args, config)
    if code:
        sys.exit(code)


if __name__ == "__main__":
    main()
