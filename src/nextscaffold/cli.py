"""Command line interface for ``next-scaffold``."""

from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import Sequence

from rich.console import Console

from . import __version__
from .config import (
    DEFAULT_PACKAGE_MANAGER,
    DEFAULT_PROJECT_NAME,
    DEFAULT_TEMPLATE_DIR,
    CreateOptions,
    TemplateVariables,
)
from .errors import ConfigurationError, ScaffoldError
from .orchestrator import create_project
from .package_manager import PackageManager, detect_package_manager, parse_package_manager
from .prompts import Prompter

LOGGER = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="next-scaffold",
        description="Generate a Next.js project with a feature-based architecture",
    )
    parser.add_argument("project_name", nargs="?", help="Name of the project to create")
    parser.add_argument(
        "-p",
        "--package-manager",
        metavar="MANAGER",
        help="Package manager to use (npm, pnpm, yarn, bun)",
    )
    parser.add_argument(
        "-y",
        "--yes",
        action="store_true",
        help="Skip all prompts and use defaults",
    )
    parser.add_argument(
        "-d",
        "--directory",
        type=Path,
        default=None,
        help="Parent directory of the new project (defaults to the current directory)",
    )
    parser.add_argument(
        "--template-dir",
        type=Path,
        default=DEFAULT_TEMPLATE_DIR,
        help="Copy this template directory instead of the built-in project structure",
    )
    parser.add_argument(
        "--skip-install",
        action="store_true",
        help="Do not install dependencies after creating the project",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


def _resolve_variables(
    args: argparse.Namespace, prompter: Prompter
) -> TemplateVariables:
    """Fill in missing values from prompts (or defaults with ``--yes``).

    Command line values are validated before any prompt is shown so that a
    bad ``--package-manager`` fails without touching the filesystem.
    """

    manager: PackageManager | None = None
    if args.package_manager is not None:
        manager = parse_package_manager(args.package_manager)
    name: str | None = args.project_name

    if args.yes:
        return TemplateVariables.create(
            name or DEFAULT_PROJECT_NAME, manager or DEFAULT_PACKAGE_MANAGER
        )

    if name is not None:
        # Fail before prompting for the other values.
        TemplateVariables.create(name, manager or DEFAULT_PACKAGE_MANAGER)
    if manager is None:
        manager = prompter.select_package_manager(default=detect_package_manager())
    if name is None:
        name = prompter.ask_project_name()
    return TemplateVariables.create(name, manager)


def _handle_create(
    args: argparse.Namespace, console: Console, prompter: Prompter
) -> int:
    variables = _resolve_variables(args, prompter)
    options = CreateOptions(
        variables=variables,
        directory=args.directory or Path.cwd(),
        skip_prompts=args.yes,
        auto_install=not args.yes and not args.skip_install,
        template_dir=args.template_dir,
    )
    create_project(options, console=console, prompter=prompter)
    return 0


def main(
    argv: Sequence[str] | None = None,
    *,
    console: Console | None = None,
    prompter: Prompter | None = None,
) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    _configure_logging(args.verbose)

    console = console or Console()
    prompter = prompter or Prompter(console)
    console.print("\n[cyan bold]Next.js Scaffold Generator[/cyan bold]\n")

    try:
        return _handle_create(args, console, prompter)
    except ConfigurationError as exc:
        parser.error(str(exc))
    except (OSError, ScaffoldError) as exc:
        LOGGER.debug("project creation failed", exc_info=True)
        console.print("\n[red]Error creating project:[/red]")
        console.print(str(exc), style="red", markup=False)
        console.print_exception()
        return 1


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
