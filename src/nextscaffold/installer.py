"""Dependency installation through the selected package manager."""

from __future__ import annotations

import logging
import shlex
import subprocess
from pathlib import Path

from .errors import InstallError
from .package_manager import PackageManager, get_install_command

__all__ = ["install_dependencies"]

LOGGER = logging.getLogger(__name__)


def install_dependencies(project_path: str | Path, package_manager: PackageManager) -> str:
    """Run the install command inside ``project_path`` exactly once.

    Returns the command that was run. Raises :class:`InstallError` when the
    binary is missing or exits with a non-zero status.
    """

    command = get_install_command(package_manager)
    LOGGER.info("running '%s' in %s", command, project_path)
    try:
        subprocess.run(
            shlex.split(command),
            cwd=project_path,
            capture_output=True,
            check=True,
            text=True,
        )
    except subprocess.CalledProcessError as exc:
        raise InstallError(
            command, f"exit status {exc.returncode}", stderr=exc.stderr or ""
        ) from exc
    except OSError as exc:
        raise InstallError(command, str(exc)) from exc
    return command
