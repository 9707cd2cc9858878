"""Sequence the steps of one ``next-scaffold`` invocation."""

from __future__ import annotations

import logging
import shutil
from dataclasses import dataclass
from pathlib import Path
from typing import Callable

from rich.console import Console
from rich.markup import escape

from .config import CreateOptions
from .errors import InstallError
from .installer import install_dependencies
from .materializer import MaterializeStrategy, ProjectMaterializer
from .package_manager import PackageManager, get_install_command, get_run_command
from .prompts import Prompter
from .substitution import substitute

__all__ = ["CreateResult", "create_project"]

LOGGER = logging.getLogger(__name__)

Installer = Callable[[Path, PackageManager], str]


@dataclass(slots=True)
class CreateResult:
    """Outcome of :func:`create_project`.

    ``installed`` is ``None`` when installation was not attempted.
    """

    project_path: Path
    created: bool
    strategy: MaterializeStrategy | None = None
    installed: bool | None = None


def _display_path(path: Path) -> str:
    try:
        return str(path.relative_to(Path.cwd().resolve()))
    except ValueError:
        return str(path)


def _remove_existing(project_path: Path) -> None:
    if project_path.is_dir() and not project_path.is_symlink():
        shutil.rmtree(project_path)
    else:
        project_path.unlink()


def create_project(
    options: CreateOptions,
    *,
    console: Console,
    prompter: Prompter | None = None,
    materializer: ProjectMaterializer | None = None,
    installer: Installer = install_dependencies,
) -> CreateResult:
    """Create the project described by ``options``.

    Filesystem errors propagate to the caller untouched; a partially written
    tree is left on disk. A failed dependency install only prints a warning.
    """

    variables = options.variables
    manager = variables.package_manager
    project_path = options.project_path

    if project_path.exists() or project_path.is_symlink():
        if not options.skip_prompts:
            prompter = prompter or Prompter(console)
            if not prompter.confirm_overwrite(variables.project_name):
                console.print("\n[yellow]Cancelled.[/yellow]\n")
                LOGGER.info("overwrite of %s declined", project_path)
                return CreateResult(project_path=project_path, created=False)

        with console.status("Removing existing directory..."):
            _remove_existing(project_path)
        console.print("[green]✔[/green] Directory removed")

    materializer = materializer or ProjectMaterializer()
    with console.status("Creating project structure..."):
        strategy = materializer.materialize(
            project_path, variables, template_dir=options.template_dir
        )
    console.print("[green]✔[/green] Project structure created")

    with console.status("Generating files..."):
        substitute(project_path, variables)
    console.print("[green]✔[/green] Files generated")
    console.print("\n[green]Project created successfully![/green]\n")

    result = CreateResult(project_path=project_path, created=True, strategy=strategy)

    if options.auto_install:
        with console.status(f"Installing dependencies with {manager.value}..."):
            try:
                installer(project_path, manager)
            except InstallError as exc:
                LOGGER.warning("%s", exc)
                result.installed = False
            else:
                result.installed = True
        if result.installed:
            console.print("[green]✔[/green] Dependencies installed")
        else:
            console.print(
                "[yellow]![/yellow] Dependencies installation failed (you can install manually)"
            )
            console.print(f"  Run: {get_install_command(manager)}")

    console.print("[green]Ready to start coding![/green]\n")
    console.print("Next steps:")
    console.print(f"  cd {escape(_display_path(project_path))}", soft_wrap=True)
    if not options.auto_install:
        console.print(f"  {get_install_command(manager)}")
    console.print(f"  {get_run_command(manager, 'dev')}\n")

    return result
